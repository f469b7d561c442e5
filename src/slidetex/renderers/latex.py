#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/renderers/latex.py
r"""LaTeX/Beamer rendering from AST.

This module provides the LatexRenderer class which converts an AST document
into the body markup of a Beamer slide. The output is a fragment: the
document shell (preamble, ``\begin{document}``, frames) is produced by
:mod:`slidetex.templates`.

Rendering is a single depth-first walk (:func:`slidetex.ast.walk`). Each node
kind is handled by a render function looked up in a table keyed by
:class:`~slidetex.ast.NodeKind`; kinds without an entry produce no output and
their children are still visited. Every render function receives the output
sink explicitly and returns a :class:`~slidetex.ast.WalkStatus`.

If any render function raises, the walk is abandoned and a
:class:`~slidetex.exceptions.MarkdownWalkError` is raised; partial output is
discarded.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import StringIO
from typing import IO, Callable

from slidetex.ast import (
    AutoLink,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    FencedCodeBlock,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    Node,
    NodeKind,
    RawHTML,
    String,
    Text,
    WalkStatus,
    walk,
)
from slidetex.constants import IMAGE_ATTRIBUTE_NAMES, IMAGE_DATA_ATTRIBUTE_PREFIX
from slidetex.exceptions import DependencyError, MarkdownWalkError, SecurityError
from slidetex.options.latex import LatexRendererOptions
from slidetex.renderers.base import BaseRenderer
from slidetex.utils.decorators import debug_timer
from slidetex.utils.escape import LATEX_SPECIAL_CHARS, escape_latex, escape_latex_url
from slidetex.utils.images import ImageGeometryResolver
from slidetex.utils.security import is_dangerous_url, validate_image_path
from slidetex.utils.text_scanner import render_text

logger = logging.getLogger(__name__)

RenderFunc = Callable[[IO[str], Node, bool], WalkStatus]

HEADING_COMMANDS = {
    1: "\n\\section{",
    2: "\n\\subsection{",
    3: "\n\\subsubsection{",
    4: "\n\\paragraph{",
    5: "\n\\subparagraph{",
    6: "\n\\textbf{",
}

THEMATIC_BREAK = "\n\\vspace{1em}\n\\hrule\n\\vspace{1em}\n"

_OPTION_VALUE_SPECIALS = frozenset(",=]")
_OPTION_VALUE_ESCAPES = {ch: LATEX_SPECIAL_CHARS[ch] for ch in "\\%#"}


@dataclass(frozen=True)
class LatexFragment:
    """Result of rendering one Markdown span.

    Parameters
    ----------
    latex : str
        Rendered LaTeX markup
    has_code : bool, default False
        The span contains a fenced code block, so the document needs the
        listing package loaded
    fragile : bool, default False
        The span contains a verbatim-like environment (any code block or raw
        HTML block), so a Beamer frame holding it must be marked ``[fragile]``

    """

    latex: str
    has_code: bool = False
    fragile: bool = False

    def __str__(self) -> str:
        """Return the LaTeX markup."""
        return self.latex


class LatexRenderer(BaseRenderer):
    r"""Render AST nodes to LaTeX/Beamer body markup.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from slidetex.ast import Document, Heading, Paragraph, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, children=[Text("Hello")]),
        ...     Paragraph(children=[Text("World_test")]),
        ... ])
        >>> print(LatexRenderer().render_to_string(doc))
        <BLANKLINE>
        \section{Hello}
        World\_test
        <BLANKLINE>

    Replacing the handling of one node kind:

        >>> def plain_rule(out, node, entering):
        ...     if entering:
        ...         out.write("\n\\hrule\n")
        ...     return WalkStatus.CONTINUE
        >>> renderer = LatexRenderer()
        >>> renderer.register(NodeKind.THEMATIC_BREAK, plain_rule)

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        super().__init__(options, LatexRendererOptions, "latex")
        self.options: LatexRendererOptions
        self._images = ImageGeometryResolver(
            dpi=self.options.dpi,
            unit=self.options.image_unit,
            base_dir=self.options.image_base_dir,
        )
        self._funcs: dict[NodeKind, RenderFunc] = {}
        self._has_code = False
        self._fragile = False
        self._link_stack: list[bool] = []
        self._register_defaults()

    def register(self, kind: NodeKind, func: RenderFunc) -> None:
        """Register the render function for a node kind, replacing any previous one.

        Parameters
        ----------
        kind : NodeKind
            Node category
        func : callable
            ``func(out, node, entering) -> WalkStatus``

        """
        self._funcs[kind] = func

    def _register_defaults(self) -> None:
        # blocks
        self.register(NodeKind.DOCUMENT, self._render_document)
        self.register(NodeKind.HEADING, self._render_heading)
        self.register(NodeKind.BLOCK_QUOTE, self._render_block_quote)
        self.register(NodeKind.CODE_BLOCK, self._render_code_block)
        self.register(NodeKind.FENCED_CODE_BLOCK, self._render_fenced_code_block)
        self.register(NodeKind.HTML_BLOCK, self._render_html_block)
        self.register(NodeKind.LIST, self._render_list)
        self.register(NodeKind.LIST_ITEM, self._render_list_item)
        self.register(NodeKind.PARAGRAPH, self._render_paragraph)
        self.register(NodeKind.TEXT_BLOCK, self._render_text_block)
        self.register(NodeKind.THEMATIC_BREAK, self._render_thematic_break)
        # inlines
        self.register(NodeKind.AUTO_LINK, self._render_auto_link)
        self.register(NodeKind.CODE_SPAN, self._render_code_span)
        self.register(NodeKind.EMPHASIS, self._render_emphasis)
        self.register(NodeKind.IMAGE, self._render_image)
        self.register(NodeKind.LINK, self._render_link)
        self.register(NodeKind.RAW_HTML, self._render_raw_html)
        self.register(NodeKind.TEXT, self._render_text)
        self.register(NodeKind.STRING, self._render_string)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_fragment(self, document: Node) -> LatexFragment:
        """Render a tree to LaTeX.

        Parameters
        ----------
        document : Node
            Root of the tree, normally a :class:`Document`

        Returns
        -------
        LatexFragment
            The markup and whether it contains code listings

        Raises
        ------
        MarkdownWalkError
            If any node fails to render (e.g. an image that cannot be read)
        DependencyError
            If Pillow is needed to size an image but is not installed

        """
        out = StringIO()
        self._has_code = False
        self._fragile = False
        self._link_stack = []

        def _visit(node: Node, entering: bool) -> WalkStatus:
            func = self._funcs.get(node.kind)
            if func is None:
                return WalkStatus.CONTINUE
            return func(out, node, entering)

        with debug_timer(logger, "Rendering (latex)"):
            try:
                walk(document, _visit)
            except DependencyError:
                raise
            except Exception as e:
                raise MarkdownWalkError(e) from e

        return LatexFragment(latex=out.getvalue(), has_code=self._has_code, fragile=self._fragile)

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a LaTeX string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            LaTeX text

        """
        return self.render_fragment(document).latex

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _emit_hyperlink(self, url: str) -> bool:
        """Apply the link safety policy to ``url``.

        Returns
        -------
        bool
            True if the hyperlink should be written, False if only its text should

        Raises
        ------
        SecurityError
            If the URL is dangerous and the policy is "error"

        """
        mode = self.options.link_safety
        if mode == "ignore" or not is_dangerous_url(url):
            return True

        if mode == "error":
            raise SecurityError(f"Refusing to render dangerous link: {url}")

        if mode == "strip":
            logger.warning(f"Dropping dangerous link, keeping its text: {url}")
            return False

        logger.warning(f"Document contains a dangerous link: {url}")
        return True

    def _open_link(self, out: IO[str], url: str) -> bool:
        keep = self._emit_hyperlink(url)
        self._link_stack.append(keep)
        if keep:
            out.write(f"\\{self.options.link_command}{{{escape_latex_url(url)}}}{{")
        return keep

    @staticmethod
    def _write_lines(out: IO[str], lines: list[str]) -> None:
        for line in lines:
            out.write(line)
        if lines and not lines[-1].endswith("\n"):
            out.write("\n")

    @staticmethod
    def _format_option_value(value: str) -> str:
        escaped = "".join(_OPTION_VALUE_ESCAPES.get(c, c) for c in value)
        if any(c in _OPTION_VALUE_SPECIALS for c in value):
            return f"{{{escaped}}}"
        return escaped

    def _image_options(self, node: Image) -> str:
        r"""Build the optional argument of ``\includegraphics``.

        Without attributes the size comes from the geometry resolver. With
        attributes only ``width``, ``height`` and ``data-*`` are forwarded; an
        explicit pixel size is converted and prepended unless the attributes
        already give a width or height.

        """
        if not node.attributes:
            return self._images.resolve(node.destination, node.width, node.height).to_latex_options()

        options = [
            f"{name}={self._format_option_value(value)}"
            for name, value in node.attributes.items()
            if name in IMAGE_ATTRIBUTE_NAMES or name.startswith(IMAGE_DATA_ATTRIBUTE_PREFIX)
        ]
        has_dimension = any(name in IMAGE_ATTRIBUTE_NAMES for name in node.attributes)
        if (node.width or node.height) and not has_dimension:
            geometry = self._images.resolve(node.destination, node.width, node.height)
            options.insert(0, geometry.to_latex_options())
        return ",".join(options)

    # ------------------------------------------------------------------
    # Block render functions
    # ------------------------------------------------------------------

    def _render_document(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        return WalkStatus.CONTINUE

    def _render_heading(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, Heading)
        if entering:
            out.write(HEADING_COMMANDS[node.level])
        else:
            out.write("}\n")
        return WalkStatus.CONTINUE

    def _render_block_quote(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        if entering:
            out.write("\n\\begin{quotation}\n")
        else:
            out.write("\n\\end{quotation}\n")
        return WalkStatus.CONTINUE

    def _render_code_block(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, CodeBlock)
        if entering:
            self._fragile = True
            out.write("\n\\begin{verbatim}\n")
            self._write_lines(out, node.lines)
        else:
            out.write("\\end{verbatim}\n")
        return WalkStatus.CONTINUE

    def _render_fenced_code_block(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, FencedCodeBlock)
        environment = self.options.code_environment
        if not entering:
            out.write(f"\\end{{{environment}}}\n")
            return WalkStatus.CONTINUE

        self._has_code = True
        self._fragile = True
        if environment == "minted":
            language = node.language or self.options.default_code_language
            out.write(f"\n\\begin{{minted}}{{{language}}}\n")
        elif node.language:
            out.write(f"\n\\begin{{lstlisting}}[language={node.language}]\n")
        else:
            out.write("\n\\begin{lstlisting}\n")
        self._write_lines(out, node.lines)
        return WalkStatus.CONTINUE

    def _render_html_block(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, HTMLBlock)
        if entering:
            self._fragile = True
            out.write("\n\\begin{verbatim}\n")
            for line in node.lines:
                out.write(line)
            return WalkStatus.CONTINUE

        tail = node.lines[-1:]
        if node.closure is not None:
            out.write(node.closure)
            tail = [node.closure]
        if not tail or not tail[-1].endswith("\n"):
            out.write("\n")
        out.write("\\end{verbatim}\n")
        return WalkStatus.CONTINUE

    def _render_list(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, List)
        environment = "enumerate" if node.ordered else "itemize"
        if entering:
            out.write(f"\n\\begin{{{environment}}}\n")
        else:
            out.write(f"\\end{{{environment}}}\n")
        return WalkStatus.CONTINUE

    def _render_list_item(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        if entering:
            out.write("\\item ")
        return WalkStatus.CONTINUE

    def _render_paragraph(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        if not entering:
            out.write("\n\n")
        return WalkStatus.CONTINUE

    def _render_text_block(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        if not entering and node.first_child is not None:
            out.write("\n")
        return WalkStatus.CONTINUE

    def _render_thematic_break(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        if entering:
            out.write(THEMATIC_BREAK)
        return WalkStatus.CONTINUE

    # ------------------------------------------------------------------
    # Inline render functions
    # ------------------------------------------------------------------

    def _render_auto_link(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, AutoLink)
        if not entering:
            if self._link_stack.pop():
                out.write("}")
            return WalkStatus.CONTINUE

        url = node.url
        if node.link_type == "email" and not url.lower().startswith("mailto:"):
            url = f"mailto:{url}"
        self._open_link(out, url)
        out.write(escape_latex(node.label))
        return WalkStatus.SKIP_CHILDREN

    def _render_code_span(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, CodeSpan)
        if not entering:
            out.write("}")
            return WalkStatus.CONTINUE

        out.write("\\texttt{")
        last = node.last_child
        for child in node.children:
            value = child.value if isinstance(child, (Text, String)) else ""
            if value.endswith("\n"):
                out.write(value[:-1])
                if child is not last:
                    out.write(" ")
            else:
                out.write(value)
        return WalkStatus.SKIP_CHILDREN

    def _render_emphasis(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, Emphasis)
        if entering:
            out.write("\\textbf{" if node.level == 2 else "\\emph{")
        else:
            out.write("}")
        return WalkStatus.CONTINUE

    def _render_link(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, Link)
        if entering:
            if self._open_link(out, node.destination):
                out.write("\\texttt{")
        elif self._link_stack.pop():
            out.write("}}")
        return WalkStatus.CONTINUE

    def _render_image(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, Image)
        if not entering:
            return WalkStatus.CONTINUE

        destination = validate_image_path(node.destination)
        options = self._image_options(node)
        placement = self.options.figure_placement
        out.write(f"\\begin{{figure}}[{placement}]\n" if placement else "\\begin{figure}\n")
        out.write("\\begin{center}\n")
        out.write(f"\\includegraphics[{options}]{{{destination}}}\n")
        out.write("\\end{center}\n")
        if node.title:
            out.write(f"\\caption{{{render_text(node.title)}}}\n")
        out.write("\\end{figure}\n")
        return WalkStatus.SKIP_CHILDREN

    def _render_raw_html(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, RawHTML)
        if entering:
            for segment in node.segments:
                out.write(segment)
        return WalkStatus.SKIP_CHILDREN

    def _render_text(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, Text)
        if not entering:
            return WalkStatus.CONTINUE

        out.write(node.value if node.raw else render_text(node.value))
        if node.hard_line_break:
            out.write("\\\\\n")
        elif node.soft_line_break:
            out.write("\n")
        return WalkStatus.CONTINUE

    def _render_string(self, out: IO[str], node: Node, entering: bool) -> WalkStatus:
        assert isinstance(node, String)
        if not entering:
            return WalkStatus.CONTINUE

        if node.code or node.raw:
            out.write(node.value)
        else:
            out.write(render_text(node.value))
        return WalkStatus.CONTINUE


__all__ = ["HEADING_COMMANDS", "LatexFragment", "LatexRenderer", "RenderFunc"]
