#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_latex_renderer.py
"""Unit tests for LaTeX rendering from AST.

Tests cover:
- Headings, paragraphs and text escaping
- Lists, block quotes and thematic breaks
- Code spans, indented and fenced code blocks
- Links, autolinks and the link safety policy
- Images, sizing and captions
- HTML blocks and inline HTML
- Render function registration
- Error handling and file output

"""

import logging
from io import BytesIO, StringIO
from pathlib import Path

import pytest

from slidetex.ast import (
    AutoLink,
    BlockQuote,
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
    ListItem,
    NodeKind,
    Paragraph,
    RawHTML,
    String,
    Text,
    TextBlock,
    ThematicBreak,
    WalkStatus,
)
from slidetex.exceptions import (
    ImageOpenError,
    InvalidOptionsError,
    MarkdownWalkError,
    OutputWriteError,
    SecurityError,
)
from slidetex.options import LatexRendererOptions, MarkdownParserOptions
from slidetex.renderers.latex import LatexFragment, LatexRenderer


def render(*blocks, **options) -> LatexFragment:
    """Render a document built from ``blocks`` with the given options.

    Parameters
    ----------
    *blocks : Node
        Block-level children of the document
    **options
        Keyword arguments for LatexRendererOptions

    Returns
    -------
    LatexFragment
        Rendered fragment

    """
    renderer = LatexRenderer(LatexRendererOptions(**options))
    return renderer.render_fragment(Document(children=list(blocks)))


def paragraph(*inlines) -> Paragraph:
    return Paragraph(children=list(inlines))


@pytest.mark.unit
class TestLatexBasicRendering:
    """Tests for basic LaTeX rendering functionality."""

    def test_empty_document(self) -> None:
        """An empty document renders to nothing."""
        fragment = render()
        assert fragment.latex == ""
        assert fragment.has_code is False

    def test_heading_and_paragraph(self) -> None:
        """A heading followed by a paragraph, escaped and in order."""
        fragment = render(
            Heading(level=1, children=[Text("Hello")]),
            paragraph(Text("World_test")),
        )
        assert fragment.latex == "\n\\section{Hello}\nWorld\\_test\n\n"

    @pytest.mark.parametrize(
        "level,command",
        [
            (1, "\\section{"),
            (2, "\\subsection{"),
            (3, "\\subsubsection{"),
            (4, "\\paragraph{"),
            (5, "\\subparagraph{"),
            (6, "\\textbf{"),
        ],
    )
    def test_heading_levels(self, level: int, command: str) -> None:
        """Each heading level maps to its sectioning command."""
        fragment = render(Heading(level=level, children=[Text("T")]))
        assert fragment.latex == f"\n{command}T}}\n"

    def test_str_returns_latex(self) -> None:
        """A fragment converts to its markup."""
        fragment = render(paragraph(Text("x")))
        assert str(fragment) == "x\n\n"

    def test_render_to_string(self) -> None:
        """render_to_string returns only the markup."""
        doc = Document(children=[paragraph(Text("50%"))])
        assert LatexRenderer().render_to_string(doc) == "50\\%\n\n"

    def test_emphasis(self) -> None:
        """Emphasis levels map to emph and textbf."""
        fragment = render(
            paragraph(
                Emphasis(level=1, children=[Text("soft")]),
                Text(" "),
                Emphasis(level=2, children=[Text("loud")]),
            )
        )
        assert fragment.latex == "\\emph{soft} \\textbf{loud}\n\n"

    def test_character_reference(self) -> None:
        """Character references are decoded then escaped."""
        fragment = render(paragraph(Text("Fish &amp; Chips")))
        assert fragment.latex == "Fish \\& Chips\n\n"

    def test_raw_text(self) -> None:
        """Raw text is copied verbatim."""
        fragment = render(paragraph(Text("$x_1$", raw=True)))
        assert fragment.latex == "$x_1$\n\n"

    def test_soft_and_hard_breaks(self) -> None:
        """Soft breaks give a newline, hard breaks a LaTeX line break."""
        fragment = render(
            paragraph(
                Text("one", soft_line_break=True),
                Text("two", hard_line_break=True),
                Text("three"),
            )
        )
        assert fragment.latex == "one\ntwo\\\\\nthree\n\n"

    def test_string_nodes(self) -> None:
        """Strings are escaped unless marked raw or code."""
        fragment = render(
            paragraph(
                String("a_b"),
                String("c_d", code=True),
                String("\\e", raw=True),
            )
        )
        assert fragment.latex == "a\\_bc_d\\e\n\n"


@pytest.mark.unit
class TestLatexBlocks:
    """Tests for block-level nodes."""

    def test_tight_list(self) -> None:
        """Items of a tight list hold text blocks."""
        fragment = render(
            List(
                children=[
                    ListItem(children=[TextBlock(children=[Text("one")])]),
                    ListItem(children=[TextBlock(children=[Text("two")])]),
                ]
            )
        )
        assert fragment.latex == "\n\\begin{itemize}\n\\item one\n\\item two\n\\end{itemize}\n"

    def test_ordered_list(self) -> None:
        """Ordered lists use enumerate."""
        fragment = render(List(ordered=True, children=[ListItem(children=[TextBlock(children=[Text("x")])])]))
        assert fragment.latex == "\n\\begin{enumerate}\n\\item x\n\\end{enumerate}\n"

    def test_empty_text_block(self) -> None:
        """An empty text block writes nothing."""
        fragment = render(List(children=[ListItem(children=[TextBlock()])]))
        assert fragment.latex == "\n\\begin{itemize}\n\\item \\end{itemize}\n"

    def test_block_quote(self) -> None:
        """Block quotes use the quotation environment."""
        fragment = render(BlockQuote(children=[paragraph(Text("quoted"))]))
        assert fragment.latex == "\n\\begin{quotation}\nquoted\n\n\n\\end{quotation}\n"

    def test_thematic_break(self) -> None:
        """Thematic breaks draw a rule with spacing."""
        fragment = render(ThematicBreak())
        assert fragment.latex == "\n\\vspace{1em}\n\\hrule\n\\vspace{1em}\n"

    def test_html_block(self) -> None:
        """HTML blocks are shown verbatim."""
        fragment = render(HTMLBlock(lines=["<div>\n", "text\n"], closure="</div>"))
        assert fragment.latex == "\n\\begin{verbatim}\n<div>\ntext\n</div>\n\\end{verbatim}\n"

    def test_html_block_without_closure(self) -> None:
        """A trailing newline is supplied when the block lacks one."""
        fragment = render(HTMLBlock(lines=["<hr>"]))
        assert fragment.latex == "\n\\begin{verbatim}\n<hr>\n\\end{verbatim}\n"
        assert fragment.fragile is True


@pytest.mark.unit
class TestLatexCode:
    """Tests for code spans and code blocks."""

    def test_code_span_not_escaped(self) -> None:
        """Code span content is copied without escaping."""
        fragment = render(paragraph(CodeSpan(children=[Text("a_b", raw=True)])))
        assert fragment.latex == "\\texttt{a_b}\n\n"

    def test_code_span_segments(self) -> None:
        """A newline ending an inner segment becomes a space."""
        fragment = render(
            paragraph(CodeSpan(children=[Text("foo\n", raw=True), Text("bar\n", raw=True)]))
        )
        assert fragment.latex == "\\texttt{foo bar}\n\n"

    def test_code_span_does_not_set_has_code(self) -> None:
        """Inline code needs no listing package."""
        assert render(paragraph(CodeSpan(children=[Text("x", raw=True)]))).has_code is False

    def test_code_span_is_not_fragile(self) -> None:
        """Inline code needs no fragile frame."""
        assert render(paragraph(CodeSpan(children=[Text("x", raw=True)]))).fragile is False

    def test_indented_code_block(self) -> None:
        """Indented code uses verbatim."""
        fragment = render(CodeBlock(lines=["x = 1\n", "y = {2}\n"]))
        assert fragment.latex == "\n\\begin{verbatim}\nx = 1\ny = {2}\n\\end{verbatim}\n"
        assert fragment.has_code is False
        assert fragment.fragile is True

    def test_fenced_code_minted(self) -> None:
        """Fenced code uses minted with its language."""
        fragment = render(FencedCodeBlock(lines=["print('hi')\n"], language="python"))
        assert fragment.latex == "\n\\begin{minted}{python}\nprint('hi')\n\\end{minted}\n"
        assert fragment.has_code is True
        assert fragment.fragile is True

    def test_fenced_code_default_language(self) -> None:
        """Without a language the default lexer is used."""
        fragment = render(FencedCodeBlock(lines=["plain\n"]))
        assert fragment.latex.startswith("\n\\begin{minted}{text}\n")

    def test_fenced_code_custom_default_language(self) -> None:
        """The default lexer is configurable."""
        fragment = render(FencedCodeBlock(lines=["ls\n"]), default_code_language="bash")
        assert fragment.latex.startswith("\n\\begin{minted}{bash}\n")

    def test_fenced_code_lstlisting(self) -> None:
        """The listings environment takes the language as an option."""
        fragment = render(FencedCodeBlock(lines=["x\n"], language="C"), code_environment="lstlisting")
        assert fragment.latex == "\n\\begin{lstlisting}[language=C]\nx\n\\end{lstlisting}\n"

    def test_fenced_code_lstlisting_without_language(self) -> None:
        """No language option is written when none is known."""
        fragment = render(FencedCodeBlock(lines=["x"]), code_environment="lstlisting")
        assert fragment.latex == "\n\\begin{lstlisting}\nx\n\\end{lstlisting}\n"

    def test_has_code_reset_between_renders(self) -> None:
        """The code flag belongs to one render call."""
        renderer = LatexRenderer()
        assert renderer.render_fragment(Document(children=[FencedCodeBlock(lines=["x\n"])])).has_code
        assert not renderer.render_fragment(Document(children=[paragraph(Text("x"))])).has_code


@pytest.mark.unit
class TestLatexLinks:
    """Tests for links, autolinks and link safety."""

    def test_link(self) -> None:
        """Links use the link macro and typewriter text."""
        fragment = render(paragraph(Link(destination="https://example.com/a#b", children=[Text("docs")])))
        assert fragment.latex == "\\colhref{https://example.com/a\\#b}{\\texttt{docs}}\n\n"

    def test_link_command_option(self) -> None:
        """The macro name is configurable."""
        fragment = render(
            paragraph(Link(destination="https://example.com", children=[Text("x")])),
            link_command="href",
        )
        assert fragment.latex == "\\href{https://example.com}{\\texttt{x}}\n\n"

    def test_autolink(self) -> None:
        """Autolinks show their escaped URL as the label."""
        fragment = render(paragraph(AutoLink(url="https://example.com/a_b")))
        assert fragment.latex == "\\colhref{https://example.com/a_b}{https://example.com/a\\_b}\n\n"

    def test_email_autolink(self) -> None:
        """Email autolinks get a mailto scheme."""
        fragment = render(paragraph(AutoLink(url="ana@example.com", link_type="email")))
        assert fragment.latex == "\\colhref{mailto:ana@example.com}{ana@example.com}\n\n"

    def test_dangerous_link_ignored_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """The default policy renders dangerous links silently."""
        with caplog.at_level(logging.WARNING, logger="slidetex.renderers.latex"):
            fragment = render(paragraph(Link(destination="javascript:alert(1)", children=[Text("x")])))
        assert fragment.latex.startswith("\\colhref{javascript:alert(1)}")
        assert caplog.text == ""

    def test_dangerous_link_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        """The warn policy logs and keeps the link."""
        with caplog.at_level(logging.WARNING, logger="slidetex.renderers.latex"):
            fragment = render(
                paragraph(Link(destination="javascript:alert(1)", children=[Text("x")])),
                link_safety="warn",
            )
        assert "\\colhref{javascript:alert(1)}" in fragment.latex
        assert "dangerous link" in caplog.text

    def test_dangerous_link_strip(self, caplog: pytest.LogCaptureFixture) -> None:
        """The strip policy keeps only the link text."""
        with caplog.at_level(logging.WARNING, logger="slidetex.renderers.latex"):
            fragment = render(
                paragraph(
                    Text("see "),
                    Link(destination="vbscript:x", children=[Text("here")]),
                    Text(" and "),
                    AutoLink(url="file:///etc/passwd"),
                ),
                link_safety="strip",
            )
        assert fragment.latex == "see here and file:///etc/passwd\n\n"
        assert "Dropping dangerous link" in caplog.text

    def test_strip_keeps_safe_links(self) -> None:
        """Safe links are unaffected by the strip policy."""
        fragment = render(
            paragraph(Link(destination="https://example.com", children=[Text("ok")])),
            link_safety="strip",
        )
        assert fragment.latex == "\\colhref{https://example.com}{\\texttt{ok}}\n\n"

    def test_dangerous_link_error(self) -> None:
        """The error policy aborts the render."""
        with pytest.raises(MarkdownWalkError) as exc_info:
            render(
                paragraph(Link(destination="javascript:alert(1)", children=[Text("x")])),
                link_safety="error",
            )
        assert isinstance(exc_info.value.__cause__, SecurityError)
        assert isinstance(exc_info.value.original_error, SecurityError)


@pytest.mark.unit
class TestLatexImages:
    """Tests for image rendering."""

    def test_intrinsic_size(self, slide_png: Path) -> None:
        """A 720x480 image at 72 DPI is 10in by 6in."""
        fragment = render(paragraph(Image(destination=str(slide_png))))
        assert fragment.latex == (
            "\\begin{figure}[h]\n"
            "\\begin{center}\n"
            f"\\includegraphics[width=10in,height=6in]{{{slide_png}}}\n"
            "\\end{center}\n"
            "\\end{figure}\n"
            "\n\n"
        )

    def test_explicit_width(self, slide_png: Path) -> None:
        """An explicit width keeps the aspect ratio."""
        fragment = render(paragraph(Image(destination=str(slide_png), width=360)))
        assert "\\includegraphics[width=5in,height=3in]" in fragment.latex

    def test_dpi_and_unit(self, slide_png: Path) -> None:
        """DPI and unit options are applied."""
        fragment = render(paragraph(Image(destination=str(slide_png))), dpi=144, image_unit="cm")
        assert "\\includegraphics[width=12cm,height=8cm]" in fragment.latex

    def test_base_dir(self, slide_png: Path) -> None:
        """Relative destinations are looked up in image_base_dir but emitted as written."""
        fragment = render(paragraph(Image(destination="slide.png")), image_base_dir=str(slide_png.parent))
        assert "\\includegraphics[width=10in,height=6in]{slide.png}" in fragment.latex

    def test_caption(self, slide_png: Path) -> None:
        """A title becomes the caption."""
        fragment = render(paragraph(Image(destination=str(slide_png), title="Sales &amp; costs")))
        assert "\\caption{Sales \\& costs}\n\\end{figure}\n" in fragment.latex

    def test_alt_text_not_rendered(self, slide_png: Path) -> None:
        """Alternative text is not part of the output."""
        fragment = render(paragraph(Image(destination=str(slide_png), children=[Text("ALT")])))
        assert "ALT" not in fragment.latex

    def test_figure_placement(self, slide_png: Path) -> None:
        """Placement is configurable and may be empty."""
        assert "\\begin{figure}[tb]\n" in render(
            paragraph(Image(destination=str(slide_png))), figure_placement="tb"
        ).latex
        assert "\\begin{figure}\n" in render(paragraph(Image(destination=str(slide_png))), figure_placement="").latex

    def test_attributes_forwarded(self, temp_dir: Path) -> None:
        """Width, height and data attributes are forwarded without reading the file."""
        image = Image(
            destination=str(temp_dir / "absent.png"),
            attributes={"width": "5cm", "data-label": "a,b", "class": "wide"},
        )
        fragment = render(paragraph(image))
        assert f"\\includegraphics[width=5cm,data-label={{a,b}}]{{{temp_dir / 'absent.png'}}}" in fragment.latex

    def test_pixel_size_with_attributes(self, slide_png: Path) -> None:
        """A pixel size is converted and prepended to data attributes."""
        image = Image(destination=str(slide_png), width=360, attributes={"data-x": "1"})
        fragment = render(paragraph(image))
        assert "\\includegraphics[width=5in,height=3in,data-x=1]" in fragment.latex

    def test_option_values_escaped(self, temp_dir: Path) -> None:
        """Percent, hash and backslash in forwarded values cannot end the option list."""
        image = Image(
            destination=str(temp_dir / "absent.png"),
            attributes={"width": "50%", "data-note": "a#b\\c"},
        )
        fragment = render(paragraph(image))
        assert "\\includegraphics[width=50\\%,data-note=a\\#b\\textbackslash{}c]" in fragment.latex

    @pytest.mark.parametrize("destination", ["x}\\input{/etc/passwd", "fig%.png", "a#b.png", "a{b}.png"])
    def test_unsafe_image_path_refused(self, destination: str) -> None:
        """Image paths with TeX special characters abort the render."""
        image = Image(destination=destination, attributes={"data-x": "1"})
        with pytest.raises(MarkdownWalkError) as exc_info:
            LatexRenderer().render_fragment(Document(children=[paragraph(image)]))
        assert isinstance(exc_info.value.original_error, SecurityError)

    def test_missing_image(self, temp_dir: Path) -> None:
        """A missing image aborts the whole render."""
        doc = Document(children=[paragraph(Text("before")), paragraph(Image(destination=str(temp_dir / "gone.png")))])
        with pytest.raises(MarkdownWalkError) as exc_info:
            LatexRenderer().render_fragment(doc)
        assert isinstance(exc_info.value.original_error, ImageOpenError)
        assert str(exc_info.value).startswith("could not render document: ")
        assert exc_info.value.rendering_stage == "walk"


@pytest.mark.unit
class TestLatexInlineHtml:
    """Tests for inline HTML."""

    def test_raw_html_copied(self) -> None:
        """Inline HTML segments are written as they are."""
        fragment = render(paragraph(Text("a"), RawHTML(segments=["<br/>"]), Text("b")))
        assert fragment.latex == "a<br/>b\n\n"


@pytest.mark.unit
class TestLatexRegistration:
    """Tests for render function registration."""

    def test_replace_function(self) -> None:
        """A registered function replaces the default for its kind."""

        def plain_rule(out, node, entering):
            if entering:
                out.write("[rule]")
            return WalkStatus.CONTINUE

        renderer = LatexRenderer()
        renderer.register(NodeKind.THEMATIC_BREAK, plain_rule)
        assert renderer.render_to_string(Document(children=[ThematicBreak()])) == "[rule]"

    def test_skip_children(self) -> None:
        """A function can hide the subtree of its node."""

        def hide(out, node, entering):
            if entering:
                out.write("...")
            return WalkStatus.SKIP_CHILDREN

        renderer = LatexRenderer()
        renderer.register(NodeKind.EMPHASIS, hide)
        doc = Document(children=[paragraph(Text("a "), Emphasis(children=[Text("secret")]))])
        assert renderer.render_to_string(doc) == "a ...\n\n"

    def test_stop(self) -> None:
        """STOP ends the walk and keeps what was written."""

        def stop(out, node, entering):
            return WalkStatus.STOP

        renderer = LatexRenderer()
        renderer.register(NodeKind.THEMATIC_BREAK, stop)
        doc = Document(children=[paragraph(Text("kept")), ThematicBreak(), paragraph(Text("dropped"))])
        assert renderer.render_to_string(doc) == "kept\n\n"

    def test_failing_function(self) -> None:
        """Any error raised by a render function becomes a MarkdownWalkError."""

        def broken(out, node, entering):
            raise KeyError("missing")

        renderer = LatexRenderer()
        renderer.register(NodeKind.TEXT, broken)
        with pytest.raises(MarkdownWalkError) as exc_info:
            renderer.render_fragment(Document(children=[paragraph(Text("x"))]))
        assert isinstance(exc_info.value.__cause__, KeyError)


@pytest.mark.unit
class TestLatexRendererOutput:
    """Tests for options validation and file output."""

    def test_wrong_options_type(self) -> None:
        """Parser options are rejected."""
        with pytest.raises(InvalidOptionsError):
            LatexRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_render_to_text_stream(self) -> None:
        """Output can go to a text stream."""
        buffer = StringIO()
        LatexRenderer().render(Document(children=[paragraph(Text("x"))]), buffer)
        assert buffer.getvalue() == "x\n\n"

    def test_render_to_binary_stream(self) -> None:
        """Binary streams receive UTF-8."""
        buffer = BytesIO()
        LatexRenderer().render(Document(children=[paragraph(Text("x"))]), buffer)
        assert buffer.getvalue() == b"x\n\n"

    def test_render_to_file(self, temp_dir: Path) -> None:
        """Output can go to a path."""
        target = temp_dir / "body.tex"
        LatexRenderer().render(Document(children=[Heading(level=2, children=[Text("T")])]), target)
        assert target.read_text(encoding="utf-8") == "\n\\subsection{T}\n"

    def test_render_to_missing_directory(self, temp_dir: Path) -> None:
        """Unwritable paths raise OutputWriteError."""
        with pytest.raises(OutputWriteError):
            LatexRenderer().render(Document(), temp_dir / "no" / "such" / "dir.tex")

    def test_failed_render_writes_nothing(self, temp_dir: Path) -> None:
        """A render that fails leaves the destination untouched."""
        target = temp_dir / "body.tex"
        doc = Document(children=[paragraph(Text("x")), paragraph(Image(destination=str(temp_dir / "gone.png")))])
        with pytest.raises(MarkdownWalkError):
            LatexRenderer().render(doc, target)
        assert not target.exists()

    def test_default_options(self) -> None:
        """Without options the renderer uses the defaults."""
        assert LatexRenderer().options == LatexRendererOptions()
