#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_beamer_template.py
"""Unit tests for the Jinja2 Beamer document shell."""

from io import StringIO
from pathlib import Path

import pytest

from slidetex.exceptions import InvalidOptionsError, MarkdownWalkError, RenderingError
from slidetex.options import BeamerTemplateOptions, LatexRendererOptions
from slidetex.templates import DEFAULT_BEAMER_TEMPLATE, BeamerTemplate, Deck, Slide


@pytest.fixture
def deck() -> Deck:
    """Provide a two-slide deck, one slide with code."""
    return Deck(
        title="Go & LaTeX",
        authors=["Sébastien", "Ana"],
        slides=[
            Slide("Intro", "Hello *world*"),
            Slide("Code_sample", "```python\nx = 1\n```\n"),
        ],
    )


@pytest.mark.unit
class TestBeamerTemplateRendering:
    """Tests for whole-document rendering."""

    def test_preamble(self, deck: Deck) -> None:
        """The preamble loads the theme and default packages."""
        tex = BeamerTemplate().render_to_string(deck)
        assert tex.startswith("\\documentclass[11pt]{beamer}\n\\usetheme{Madrid}\n")
        assert "\\usepackage{graphicx}\n\\usepackage{hyperref}\n\\usepackage{xcolor}\n" in tex
        assert "\\newcommand{\\colhref}[2]{\\href{#1}{\\textcolor{blue}{#2}}}" in tex
        assert "\\usecolortheme" not in tex

    def test_title_block(self, deck: Deck) -> None:
        """Title is escaped, authors have accents converted and are joined."""
        tex = BeamerTemplate().render_to_string(deck)
        assert "\\title{Go \\& LaTeX}\n" in tex
        assert "\\author{S\\'ebastien \\and Ana}\n" in tex
        assert "\\date{\\today}\n" in tex
        assert "\\subtitle" not in tex
        assert "\\begin{frame}\n\\titlepage\n\\end{frame}\n" in tex

    def test_slides(self, deck: Deck) -> None:
        """Each slide becomes a frame holding its rendered body."""
        tex = BeamerTemplate().render_to_string(deck)
        assert "\\begin{frame}{Intro}\nHello \\emph{world}\n\n\n\\end{frame}\n" in tex
        assert "\\begin{frame}[fragile]{Code\\_sample}\n" in tex
        assert "\\begin{minted}{python}\nx = 1\n\\end{minted}\n" in tex
        assert tex.rstrip().endswith("\\end{document}")

    def test_code_package_loaded_only_with_code(self, deck: Deck) -> None:
        """The listing package is loaded when a slide has code."""
        assert "\\usepackage{minted}" in BeamerTemplate().render_to_string(deck)

        plain = Deck(title="Plain", slides=[Slide("One", "no code here")])
        tex = BeamerTemplate().render_to_string(plain)
        assert "\\usepackage{minted}" not in tex
        assert "[fragile]" not in tex

    @pytest.mark.parametrize("body", ["    x = 1\n", "<div>\nhi\n</div>\n"])
    def test_verbatim_frames_are_fragile(self, body: str) -> None:
        """Indented code and HTML blocks need a fragile frame but no listing package."""
        tex = BeamerTemplate().render_to_string(Deck(title="T", slides=[Slide("S", body)]))
        assert "\\begin{frame}[fragile]{S}\n" in tex
        assert "\\begin{verbatim}\n" in tex
        assert "\\usepackage{minted}" not in tex

    def test_listings_package(self, deck: Deck) -> None:
        """The listings package pairs with the lstlisting environment."""
        template = BeamerTemplate(
            BeamerTemplateOptions(code_package="listings"),
            renderer_options=LatexRendererOptions(code_environment="lstlisting"),
        )
        tex = template.render_to_string(deck)
        assert "\\usepackage{listings}" in tex
        assert "\\begin{lstlisting}[language=python]" in tex

    def test_options(self) -> None:
        """Theme options reach the preamble."""
        options = BeamerTemplateOptions(
            theme="Warsaw",
            color_theme="beaver",
            aspect_ratio="169",
            link_color="red",
            extra_packages=["booktabs"],
        )
        tex = BeamerTemplate(options).render_to_string(Deck(title="T"))
        assert tex.startswith("\\documentclass[aspectratio=169,11pt]{beamer}\n\\usetheme{Warsaw}\n")
        assert "\\usecolortheme{beaver}\n" in tex
        assert "\\usepackage{booktabs}\n" in tex
        assert "\\textcolor{red}" in tex

    def test_subtitle_and_date(self) -> None:
        """Optional subtitle and explicit date are written."""
        tex = BeamerTemplate().render_to_string(Deck(title="T", subtitle="50% done", date="March 2025"))
        assert "\\subtitle{50\\% done}\n" in tex
        assert "\\date{March 2025}\n" in tex

    def test_render_slide(self) -> None:
        """A single slide body can be rendered on its own."""
        fragment = BeamerTemplate().render_slide(Slide("S", "`code`"))
        assert fragment.latex == "\\texttt{code}\n\n"
        assert fragment.has_code is False

    def test_slide_error_propagates(self, temp_dir: Path) -> None:
        """A slide that cannot be rendered aborts the deck."""
        broken = Deck(title="T", slides=[Slide("S", f"![x]({(temp_dir / 'gone.png').as_posix()})")])
        with pytest.raises(MarkdownWalkError):
            BeamerTemplate().render_to_string(broken)


@pytest.mark.unit
class TestBeamerTemplateCustomization:
    """Tests for custom templates and errors."""

    def test_custom_template(self, deck: Deck) -> None:
        """A custom template sees the same context and filters."""
        template = BeamerTemplate(template_string="<< deck.title | style >>|<< slides | length >>|<< has_code >>")
        assert template.render_to_string(deck) == "Go \\& LaTeX|2|True"

    def test_comments_and_utf8_filter(self) -> None:
        """Template comments are dropped and the utf8 filter leaves markup alone."""
        template = BeamerTemplate(template_string="<# note #><< deck.title | utf8 >>")
        assert template.render_to_string(Deck(title="\\textbf{Élan}")) == "\\textbf{\\'Elan}"

    def test_undefined_variable(self, deck: Deck) -> None:
        """Unknown variables are errors, not blanks."""
        template = BeamerTemplate(template_string="<< nothing_here >>")
        with pytest.raises(RenderingError) as exc_info:
            template.render_to_string(deck)
        assert exc_info.value.rendering_stage == "template"

    def test_syntax_error(self, deck: Deck) -> None:
        """Malformed templates raise RenderingError."""
        with pytest.raises(RenderingError):
            BeamerTemplate(template_string="<% if %>").render_to_string(deck)

    def test_default_template_exposed(self) -> None:
        """The default template is importable for customization."""
        assert DEFAULT_BEAMER_TEMPLATE.startswith("\\documentclass")

    def test_wrong_options_type(self) -> None:
        """Renderer options are not template options."""
        with pytest.raises(InvalidOptionsError):
            BeamerTemplate(LatexRendererOptions())  # type: ignore[arg-type]

    def test_render_to_stream_and_file(self, deck: Deck, temp_dir: Path) -> None:
        """Decks can be written to streams and paths."""
        buffer = StringIO()
        BeamerTemplate().render(deck, buffer)
        target = temp_dir / "deck.tex"
        BeamerTemplate().render(deck, target)
        assert buffer.getvalue() == target.read_text(encoding="utf-8")
        assert buffer.getvalue().startswith("\\documentclass")
