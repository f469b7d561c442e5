#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/renderers/base.py
"""Base class for AST renderers.

A renderer turns a slidetex AST into text. Subclasses implement
:meth:`BaseRenderer.render_to_string`; writing that text to a path or stream
is shared here.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from slidetex.ast import Document
from slidetex.options.base import BaseRendererOptions, check_options_type
from slidetex.utils.io_utils import write_content

OutputType = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None
        Options for the concrete renderer; must be an instance of
        ``options_class`` or None
    options_class : type
        Options class the concrete renderer accepts
    name : str
        Renderer name used in error messages

    Raises
    ------
    InvalidOptionsError
        If ``options`` has the wrong class

    """

    def __init__(self, options: BaseRendererOptions | None, options_class: type, name: str):
        """Check the options class and store the options, defaulting them."""
        check_options_type(options, options_class, name)
        self.options = options if options is not None else options_class()

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render a document to text."""

    def render(self, doc: Document, output: OutputType) -> None:
        """Render a document and write it to a file or stream.

        Nothing is written if rendering fails.

        Parameters
        ----------
        doc : Document
            AST document to render
        output : str, Path, IO[bytes] or IO[str]
            Destination; binary streams and paths receive UTF-8

        Raises
        ------
        OutputWriteError
            If the destination path cannot be written

        """
        write_content(self.render_to_string(doc), output)


__all__ = ["BaseRenderer", "OutputType"]
