#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines options for rendering the AST as LaTeX/Beamer body markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from slidetex.constants import (
    DEFAULT_CODE_ENVIRONMENT,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_DPI,
    DEFAULT_FIGURE_PLACEMENT,
    DEFAULT_IMAGE_UNIT,
    DEFAULT_LINK_COMMAND,
    DEFAULT_LINK_SAFETY,
    CodeEnvironment,
    ImageUnit,
    LinkSafetyMode,
)
from slidetex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-LaTeX rendering.

    Parameters
    ----------
    dpi : int, default 72
        Resolution used to convert image pixel sizes to physical units.
    image_unit : {"in", "cm"}, default "in"
        Physical unit of ``\includegraphics`` width and height.
    code_environment : {"minted", "lstlisting"}, default "minted"
        Environment used for fenced code blocks.
    default_code_language : str, default "text"
        Language used for fenced code blocks without an info string.
    link_command : str, default "colhref"
        Name of the two-argument hyperlink macro (``\colhref{url}{text}``).
        The Beamer template defines ``\colhref``; use ``"href"`` for plain hyperref.
    link_safety : {"ignore", "warn", "strip", "error"}, default "ignore"
        What to do with links whose URL is classified dangerous:
        - "ignore": emit the link unchanged
        - "warn": log a warning and emit the link
        - "strip": log a warning and emit only the link text
        - "error": abort the render with a :class:`~slidetex.exceptions.SecurityError` cause
    image_base_dir : str or None, default None
        Directory that relative image paths are resolved against.
        None means the current working directory.
    figure_placement : str, default "h"
        Float placement specifier of the figure environment.

    """

    dpi: int = field(
        default=DEFAULT_DPI,
        metadata={"help": "Resolution for pixel to physical unit conversion", "type": int, "importance": "core"},
    )
    image_unit: ImageUnit = field(
        default=DEFAULT_IMAGE_UNIT,
        metadata={"help": "Physical unit of image sizes", "choices": ["in", "cm"], "importance": "core"},
    )
    code_environment: CodeEnvironment = field(
        default=DEFAULT_CODE_ENVIRONMENT,
        metadata={
            "help": "Environment for fenced code blocks",
            "choices": ["minted", "lstlisting"],
            "importance": "core",
        },
    )
    default_code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE,
        metadata={"help": "Language of fenced code blocks without an info string", "importance": "advanced"},
    )
    link_command: str = field(
        default=DEFAULT_LINK_COMMAND,
        metadata={"help": "Two-argument hyperlink macro name (without backslash)", "importance": "advanced"},
    )
    link_safety: LinkSafetyMode = field(
        default=DEFAULT_LINK_SAFETY,
        metadata={
            "help": "Handling of dangerous link URLs: ignore (emit as-is), "
            "warn (log and emit), strip (log and emit the text only), error (refuse to render)",
            "choices": ["ignore", "warn", "strip", "error"],
            "importance": "security",
        },
    )
    image_base_dir: Optional[str] = field(
        default=None,
        metadata={"help": "Directory relative image paths are resolved against", "importance": "advanced"},
    )
    figure_placement: str = field(
        default=DEFAULT_FIGURE_PLACEMENT,
        metadata={"help": "Float placement specifier for figures", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate LaTeX renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")

        if self.image_unit not in ("in", "cm"):
            raise ValueError(f"image_unit must be 'in' or 'cm', got {self.image_unit!r}")

        if self.code_environment not in ("minted", "lstlisting"):
            raise ValueError(f"code_environment must be 'minted' or 'lstlisting', got {self.code_environment!r}")

        if self.link_safety not in ("ignore", "warn", "strip", "error"):
            raise ValueError(f"link_safety must be 'ignore', 'warn', 'strip' or 'error', got {self.link_safety!r}")

        if not self.link_command or not self.link_command.isalpha():
            raise ValueError(f"link_command must be a LaTeX macro name, got {self.link_command!r}")
