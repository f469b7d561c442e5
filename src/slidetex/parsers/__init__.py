#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the slidetex AST.

- base: abstract parser interface and option type checking
- markdown: mistune-based Markdown parser

"""

from slidetex.parsers.base import BaseParser
from slidetex.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
