#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/templates.py
r"""Beamer document shell.

This module mail-merges rendered slide bodies into a complete Beamer
document using a Jinja2 template held in memory.

The template uses LaTeX-friendly delimiters so that braces never clash with
Jinja syntax:

- ``<< expression >>`` for variables
- ``<% statement %>`` for blocks
- ``<# comment #>`` for comments

Two filters are available in templates:

- ``style``: full LaTeX escaping (:func:`slidetex.utils.escape.escape_latex`)
- ``utf8``: accented letters only (:func:`slidetex.utils.escape.utf8_to_latex`)

The template defines ``\colhref``, the link macro emitted by
:class:`~slidetex.renderers.latex.LatexRenderer`, and loads the listing
package only when at least one slide contains code. Frames whose body holds
a verbatim environment are marked ``[fragile]``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from jinja2 import Environment

from slidetex.constants import DEPS_JINJA
from slidetex.exceptions import RenderingError
from slidetex.options.base import check_options_type
from slidetex.options.beamer import BeamerTemplateOptions
from slidetex.options.latex import LatexRendererOptions
from slidetex.options.markdown import MarkdownParserOptions
from slidetex.parsers.markdown import MarkdownToAstConverter
from slidetex.renderers.base import OutputType
from slidetex.renderers.latex import LatexFragment, LatexRenderer
from slidetex.utils.decorators import requires_dependencies
from slidetex.utils.escape import escape_latex, utf8_to_latex
from slidetex.utils.io_utils import write_content

logger = logging.getLogger(__name__)

DEFAULT_BEAMER_TEMPLATE = r"""\documentclass[<% if options.aspect_ratio %>aspectratio=<< options.aspect_ratio >>,<% endif %>11pt]{beamer}
\usetheme{<< options.theme >>}
<% if options.color_theme %>
\usecolortheme{<< options.color_theme >>}
<% endif %>
<% for package in options.packages %>
\usepackage{<< package >>}
<% endfor %>
<% if has_code %>
\usepackage{<< options.code_package >>}
<% endif %>

\newcommand{\colhref}[2]{\href{#1}{\textcolor{<< options.link_color >>}{#2}}}

\title{<< deck.title | style >>}
<% if deck.subtitle %>
\subtitle{<< deck.subtitle | style >>}
<% endif %>
\author{<< deck.authors | map("utf8") | join(" \\and ") >>}
\date{<% if deck.date %><< deck.date | style >><% else %>\today<% endif %>}

\begin{document}

\begin{frame}
\titlepage
\end{frame}
<% for slide in slides %>

\begin{frame}<% if slide.fragile %>[fragile]<% endif %>{<< slide.title | style >>}
<< slide.latex >>
\end{frame}
<% endfor %>

\end{document}
"""


@dataclass
class Slide:
    """One slide: a title and a Markdown body.

    Parameters
    ----------
    title : str
        Frame title, plain text
    body : str, default ""
        Markdown source of the slide content

    """

    title: str
    body: str = ""


@dataclass
class Deck:
    """A parsed presentation.

    Outline parsing (finding titles, authors and slide boundaries in a source
    file) is done by the caller; this class only carries the result.

    Parameters
    ----------
    title : str
        Presentation title
    slides : list of Slide, default empty
        Slides in order
    subtitle : str or None, default None
        Optional subtitle
    authors : list of str, default empty
        Author names
    date : str or None, default None
        Date line; None uses ``\today``

    """

    title: str
    slides: list[Slide] = field(default_factory=list)
    subtitle: Optional[str] = None
    authors: list[str] = field(default_factory=list)
    date: Optional[str] = None


class BeamerTemplate:
    """Render a :class:`Deck` as a complete Beamer document.

    Parameters
    ----------
    options : BeamerTemplateOptions or None, default None
        Theme and package settings
    renderer_options : LatexRendererOptions or None, default None
        Options for rendering slide bodies
    parser_options : MarkdownParserOptions or None, default None
        Options for parsing slide bodies
    template_string : str or None, default None
        Replacement for :data:`DEFAULT_BEAMER_TEMPLATE`, using the same
        delimiters and context

    Examples
    --------
        >>> deck = Deck(title="Go & LaTeX", authors=["Sébastien"], slides=[Slide("Intro", "Hello *world*")])
        >>> tex = BeamerTemplate().render_to_string(deck)

    """

    def __init__(
        self,
        options: BeamerTemplateOptions | None = None,
        renderer_options: LatexRendererOptions | None = None,
        parser_options: MarkdownParserOptions | None = None,
        template_string: str | None = None,
    ):
        """Initialize the template with options."""
        check_options_type(options, BeamerTemplateOptions, "beamer")
        self.options: BeamerTemplateOptions = options or BeamerTemplateOptions()
        self.renderer = LatexRenderer(renderer_options)
        self.parser = MarkdownToAstConverter(parser_options)
        self.template_string = template_string or DEFAULT_BEAMER_TEMPLATE

    def render_slide(self, slide: Slide) -> LatexFragment:
        """Render the body of one slide.

        Raises
        ------
        MarkdownWalkError
            If the body cannot be rendered

        """
        document = self.parser.parse(slide.body)
        return self.renderer.render_fragment(document)

    def _setup_jinja_env(self) -> Environment:
        """Create the Jinja2 environment with LaTeX delimiters and filters."""
        from jinja2 import Environment, StrictUndefined

        # autoescape stays off: the output is LaTeX, escaping is done by the style filter
        env = Environment(  # nosec B701
            block_start_string="<%",
            block_end_string="%>",
            variable_start_string="<<",
            variable_end_string=">>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
            undefined=StrictUndefined,
        )
        env.filters["style"] = escape_latex
        env.filters["utf8"] = utf8_to_latex
        return env

    def _build_context(self, deck: Deck) -> dict[str, Any]:
        slides = []
        has_code = False
        for slide in deck.slides:
            fragment = self.render_slide(slide)
            has_code = has_code or fragment.has_code
            slides.append({"title": slide.title, "latex": fragment.latex, "fragile": fragment.fragile})

        return {
            "deck": deck,
            "slides": slides,
            "has_code": has_code,
            "options": self.options,
        }

    @requires_dependencies("jinja", DEPS_JINJA)
    def render_to_string(self, deck: Deck) -> str:
        """Render the deck to LaTeX source.

        Parameters
        ----------
        deck : Deck
            Presentation to render

        Returns
        -------
        str
            Complete ``.tex`` document

        Raises
        ------
        MarkdownWalkError
            If a slide body cannot be rendered
        RenderingError
            If the template itself fails

        """
        from jinja2 import TemplateError

        context = self._build_context(deck)
        env = self._setup_jinja_env()
        try:
            template = env.from_string(self.template_string)
            rendered = template.render(**context)
        except TemplateError as e:
            raise RenderingError(f"Beamer template failed: {e}", rendering_stage="template", original_error=e) from e

        logger.debug(f"Rendered deck with {len(deck.slides)} slide(s), has_code={context['has_code']}")
        return rendered

    def render(self, deck: Deck, output: OutputType) -> None:
        """Render the deck and write it to a file or stream.

        Parameters
        ----------
        deck : Deck
            Presentation to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        """
        write_content(self.render_to_string(deck), output)


__all__ = ["BeamerTemplate", "DEFAULT_BEAMER_TEMPLATE", "Deck", "Slide"]
