#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/slidetex/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from slidetex.constants import DEFAULT_PARSE_IMAGE_ATTRIBUTES
from slidetex.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_image_attributes : bool, default True
        Read an attribute block written directly after an image,
        e.g. ``![alt](fig.png){width=300 data-foo=x}``.
        When False the block stays in the text.
    fixup_links : bool, default True
        Inherited from :class:`BaseParserOptions`.

    """

    parse_image_attributes: bool = field(
        default=DEFAULT_PARSE_IMAGE_ATTRIBUTES,
        metadata={
            "help": "Parse {key=value} attribute blocks after images",
            "cli_name": "no-parse-image-attributes",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
