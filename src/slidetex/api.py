#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/api.py
"""Public entry points for slidetex.

The two functions here are thin wrappers over the parser and renderer
classes. Use the classes directly when the same options are reused for many
documents.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from slidetex.ast import Document
from slidetex.options.latex import LatexRendererOptions
from slidetex.options.markdown import MarkdownParserOptions
from slidetex.parsers.markdown import MarkdownToAstConverter
from slidetex.renderers.latex import LatexFragment, LatexRenderer

logger = logging.getLogger(__name__)

SourceType = Union[str, Path, IO[bytes], bytes]


def to_ast(source: SourceType, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse Markdown into a slidetex AST.

    Parameters
    ----------
    source : str, Path, IO[bytes] or bytes
        Markdown text, or a path/stream/bytes holding UTF-8 Markdown. A plain
        ``str`` is always treated as Markdown text, never as a path.
    options : MarkdownParserOptions or None, default None
        Parser configuration

    Returns
    -------
    Document
        Root of the parsed tree

    Raises
    ------
    ParsingError
        If the source cannot be read or decoded
    DependencyError
        If mistune is not installed

    Examples
    --------
        >>> doc = to_ast("# Title")
        >>> doc.children[0].level
        1

    """
    return MarkdownToAstConverter(options).parse(source)


def to_latex(
    source: Union[SourceType, Document],
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[LatexRendererOptions] = None,
) -> LatexFragment:
    r"""Render Markdown (or an already parsed tree) to a LaTeX body fragment.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes or Document
        Markdown input, or a Document returned by :func:`to_ast`
    parser_options : MarkdownParserOptions or None, default None
        Parser configuration; ignored when ``source`` is a Document
    renderer_options : LatexRendererOptions or None, default None
        Renderer configuration

    Returns
    -------
    LatexFragment
        Rendered LaTeX plus a flag telling whether a code listing was emitted

    Raises
    ------
    MarkdownWalkError
        If rendering fails, e.g. an image cannot be read

    Examples
    --------
        >>> str(to_latex("Some *text*"))
        'Some \\emph{text}\n\n'

    """
    if isinstance(source, Document):
        document = source
    else:
        document = to_ast(source, parser_options)

    fragment = LatexRenderer(renderer_options).render_fragment(document)
    logger.debug(f"Rendered {len(document.children)} block node(s), has_code={fragment.has_code}")
    return fragment


__all__ = ["to_ast", "to_latex"]
