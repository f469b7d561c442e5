#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/options/base.py
"""Base classes for parser, renderer and template options.

This module defines the foundation classes for the frozen option dataclasses
used throughout the slidetex pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from slidetex.constants import DEFAULT_FIXUP_LINKS
from slidetex.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert AST documents into output markup.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert source text into the AST representation.

    Parameters
    ----------
    fixup_links : bool, default True
        Run the link fixup pass on the parsed tree, marking every link with
        ``target="_blank"`` and ``rel="noopener"``

    """

    fixup_links: bool = field(
        default=DEFAULT_FIXUP_LINKS,
        metadata={
            "help": "Mark links with target=_blank and rel=noopener after parsing",
            "cli_name": "no-fixup-links",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base parser options."""
        pass


def check_options_type(options: CloneFrozenMixin | None, expected_type: type, component: str) -> None:
    """Reject an options object of the wrong class.

    Parameters
    ----------
    options : options dataclass or None
        Object passed by the caller; None means defaults and is always accepted
    expected_type : type
        Options class the component accepts
    component : str
        Component name for the error message

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not None and not an ``expected_type``

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(component, expected_type, type(options))
