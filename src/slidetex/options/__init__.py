#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for slidetex.

This module provides dataclass-based configuration options for the Markdown
parser, the LaTeX renderer and the Beamer template glue. Using frozen
dataclasses provides type safety, default values, and a clean API for
configuring rendering behavior.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from slidetex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from slidetex.options.beamer import BeamerTemplateOptions
from slidetex.options.latex import LatexRendererOptions
from slidetex.options.markdown import MarkdownParserOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Keyword arguments with the field names and new values to update

    Returns
    -------
    Any
        A new options instance with the updated values

    Examples
    --------
    >>> original = LatexRendererOptions(dpi=96)
    >>> updated = create_updated_options(original, image_unit="cm")
    >>> # original remains unchanged, updated has new values

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "BeamerTemplateOptions",
    "CloneFrozenMixin",
    "LatexRendererOptions",
    "MarkdownParserOptions",
    "create_updated_options",
]
