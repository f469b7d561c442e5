#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that all parsers must inherit from.
The BaseParser provides a consistent interface for converting source text
into the slidetex AST.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from slidetex.ast import Document
from slidetex.exceptions import ParsingError
from slidetex.options.base import BaseParserOptions, check_options_type

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all parsers.

    Parameters
    ----------
    options : BaseParserOptions or None
        Options for the concrete parser; must be an instance of
        ``options_class`` or None
    options_class : type
        Options class the concrete parser accepts
    name : str
        Parser name used in error messages

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: source text
    - Path: file path to read
    - IO[bytes] or IO[str]: file-like object
    - bytes: UTF-8 encoded source

    """

    def __init__(self, options: BaseParserOptions | None, options_class: type, name: str):
        """Check the options class and store the options, defaulting them."""
        check_options_type(options, options_class, name)
        self.options = options if options is not None else options_class()

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load source text from the supported input types.

        A ``str`` is always treated as source text, never as a path.

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded

        """
        try:
            if isinstance(input_data, str):
                return input_data
            if isinstance(input_data, Path):
                return input_data.read_text(encoding="utf-8")
            if isinstance(input_data, bytes):
                return input_data.decode("utf-8")
            content = input_data.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(f"Failed to read input: {e}", parsing_stage="input", original_error=e) from e

        if isinstance(content, bytes):
            try:
                return content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(f"Failed to decode input: {e}", parsing_stage="input", original_error=e) from e
        return content

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            The input to parse

        Returns
        -------
        Document
            AST Document node representing the parsed content

        Raises
        ------
        ParsingError
            If parsing fails
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
