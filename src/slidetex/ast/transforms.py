#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/ast/transforms.py
"""Tree passes run between parsing and rendering.

``fixup_links`` is the only pass that modifies the tree. ``collect_dangerous_links``
is read-only and lets a caller vet a document before rendering it.

"""

from __future__ import annotations

import logging

from slidetex.ast.nodes import AutoLink, Image, Link, Node, NodeKind
from slidetex.ast.walk import WalkStatus, walk
from slidetex.utils.security import is_dangerous_url

logger = logging.getLogger(__name__)

LINK_TARGET = "_blank"
LINK_REL = "noopener"


def fixup_links(document: Node) -> Node:
    """Mark every link to open in a new window without an opener reference.

    Parameters
    ----------
    document : Node
        Root of the tree, modified in place

    Returns
    -------
    Node
        The same root node, for chaining

    """

    def _fixup(node: Node, entering: bool) -> WalkStatus:
        if entering and node.kind is NodeKind.LINK:
            node.attributes["target"] = LINK_TARGET
            node.attributes["rel"] = LINK_REL
        return WalkStatus.CONTINUE

    walk(document, _fixup)
    return document


def link_destination(node: Node) -> str | None:
    """Return the URL a link-like node points to, or None for other nodes."""
    if isinstance(node, Link):
        return node.destination
    if isinstance(node, AutoLink):
        return node.url
    if isinstance(node, Image):
        return node.destination
    return None


def collect_dangerous_links(document: Node) -> list[str]:
    """List the URLs in a tree that :func:`is_dangerous_url` flags.

    Parameters
    ----------
    document : Node
        Root of the tree

    Returns
    -------
    list of str
        Dangerous URLs in document order (duplicates kept)

    """
    found: list[str] = []

    def _collect(node: Node, entering: bool) -> WalkStatus:
        if entering:
            url = link_destination(node)
            if url is not None and is_dangerous_url(url):
                found.append(url)
        return WalkStatus.CONTINUE

    walk(document, _collect)
    if found:
        logger.debug(f"Found {len(found)} dangerous link(s)")
    return found


__all__ = ["collect_dangerous_links", "fixup_links", "link_destination"]
