"""slidetex - Markdown to LaTeX/Beamer slide rendering.

slidetex parses Markdown slide bodies into a small AST and renders that tree
into LaTeX suitable for Beamer frames. Rendering dispatches on the node kind
through a table of render functions, so callers can replace the output of
any node category without subclassing.

Key Features
------------
- CommonMark parsing via mistune into a dedicated slide AST
- Context-sensitive LaTeX escaping of text, with character references
  resolved and backslash escapes honored
- Code listings through minted or listings
- Images sized from their pixel dimensions (read with Pillow) and a DPI
- Optional link safety policy for ``javascript:`` and similar URLs
- A Jinja2-based Beamer document shell that assembles complete decks

Quick Start
-----------
    >>> from slidetex import to_latex
    >>> str(to_latex("# Hello\\nWorld"))
    '\\n\\\\section{Hello}\\nWorld\\n\\n'

Building a full deck:

    >>> from slidetex import BeamerTemplate, Deck, Slide
    >>> deck = Deck(title="Talk", authors=["Ana"], slides=[Slide("Intro", "- one\\n- two")])
    >>> tex = BeamerTemplate().render_to_string(deck)

See Also
--------
slidetex.ast : AST node definitions and traversal
slidetex.renderers.latex : render function table and defaults

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "slidetex requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from slidetex.api import to_ast, to_latex
from slidetex.exceptions import (
    DependencyError,
    MarkdownWalkError,
    ParsingError,
    RenderingError,
    SecurityError,
    SlidetexError,
)
from slidetex.options import (
    BeamerTemplateOptions,
    LatexRendererOptions,
    MarkdownParserOptions,
)
from slidetex.renderers.latex import LatexFragment, LatexRenderer
from slidetex.templates import BeamerTemplate, Deck, Slide
from slidetex.utils.escape import escape_latex
from slidetex.utils.security import is_dangerous_url
from slidetex.utils.text_scanner import decode_text

__all__ = [
    "__version__",
    "to_ast",
    "to_latex",
    # Rendering
    "LatexRenderer",
    "LatexFragment",
    "BeamerTemplate",
    "Deck",
    "Slide",
    # Options
    "BeamerTemplateOptions",
    "LatexRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "SlidetexError",
    "DependencyError",
    "MarkdownWalkError",
    "ParsingError",
    "RenderingError",
    "SecurityError",
    # Helpers
    "decode_text",
    "escape_latex",
    "is_dangerous_url",
]
