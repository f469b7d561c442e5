#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/ast/walk.py
"""Depth-first enter/exit traversal of the node tree.

Each node is visited twice: once on entry, before its children, and once on
exit, after them. The walker function returns a :class:`WalkStatus` that
controls what happens next:

- ``CONTINUE``: descend into the children as usual
- ``SKIP_CHILDREN``: do not visit the children; the node is still exited
- ``STOP``: abandon the walk

Errors are raised as exceptions by the walker function and stop the walk
just like ``STOP``.

Examples
--------
Count headings:

    >>> count = 0
    >>> def counter(node, entering):
    ...     global count
    ...     if entering and node.kind is NodeKind.HEADING:
    ...         count += 1
    ...     return WalkStatus.CONTINUE
    >>> walk(document, counter)

"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from slidetex.ast.nodes import Node


class WalkStatus(Enum):
    """Result of visiting a node."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


Walker = Callable[[Node, bool], WalkStatus]


def walk(node: Node, walker: Walker) -> WalkStatus:
    """Walk ``node`` and its descendants in document order.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    walker : callable
        ``walker(node, entering) -> WalkStatus``

    Returns
    -------
    WalkStatus
        ``STOP`` if the walk was abandoned, ``CONTINUE`` otherwise

    """
    status = walker(node, True)
    if status is WalkStatus.STOP:
        return WalkStatus.STOP

    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.children:
            if walk(child, walker) is WalkStatus.STOP:
                return WalkStatus.STOP

    if walker(node, False) is WalkStatus.STOP:
        return WalkStatus.STOP
    return WalkStatus.CONTINUE


__all__ = ["WalkStatus", "Walker", "walk"]
