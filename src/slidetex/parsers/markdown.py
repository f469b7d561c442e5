#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/parsers/markdown.py
"""Markdown to AST converter.

This module builds the slidetex AST from Markdown using the mistune parser.
mistune is run without a renderer and its token stream is converted node by
node.

Differences from the token stream worth knowing about:

- mistune resolves backslash escapes itself; literal backslashes are doubled
  again so that :class:`~slidetex.ast.nodes.Text` values keep source form and
  the renderer's text scanner sees the same input it would see in the source.
- Character references are left alone and resolved by the renderer.
- Autolinks (``<https://...>`` and ``<user@example.com>``) come out of mistune
  as plain links whose label equals the URL; they are turned into
  :class:`~slidetex.ast.nodes.AutoLink` nodes.
- Soft and hard line breaks are recorded on the preceding Text node.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Optional, Union
from urllib.parse import unquote

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
    Node,
    Paragraph,
    RawHTML,
    Text,
    TextBlock,
    ThematicBreak,
    fixup_links,
)
from slidetex.constants import DEPS_MARKDOWN
from slidetex.options.markdown import MarkdownParserOptions
from slidetex.parsers.base import BaseParser
from slidetex.utils.decorators import requires_dependencies
from slidetex.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

# {width=300 height=200 data-foo="bar baz"} directly after an image
_ATTRIBUTE_BLOCK = re.compile(r"\{([^{}\n]*)\}")
_ATTRIBUTE = re.compile(r"""\s*([A-Za-z_][\w.:-]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"']+))\s*""")
_PIXEL_DIMENSIONS = ("width", "height")


def parse_attribute_block(content: str) -> dict[str, str] | None:
    """Parse the inside of a ``{key=value ...}`` attribute block.

    Parameters
    ----------
    content : str
        Text between the braces

    Returns
    -------
    dict[str, str] or None
        Attributes in source order, or None if ``content`` is not a list of
        ``key=value`` pairs

    Examples
    --------
        >>> parse_attribute_block('width=300 data-caption="a b"')
        {'width': '300', 'data-caption': 'a b'}
        >>> parse_attribute_block("not attributes") is None
        True

    """
    attributes: dict[str, str] = {}
    pos = 0
    while pos < len(content):
        m = _ATTRIBUTE.match(content, pos)
        if m is None:
            if content[pos:].strip():
                return None
            break
        name = m.group(1)
        value = next(g for g in (m.group(2), m.group(3), m.group(4)) if g is not None)
        attributes[name] = value
        pos = m.end()
    return attributes or None


def _code_lines(raw: str) -> list[str]:
    """Split code block text into lines that all end with a newline.

    mistune leaves the final newline off an indented block at end of input
    in some releases and not in others.
    """
    lines = raw.splitlines(keepends=True)
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n"
    return lines


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Keeping image attribute blocks as text:

        >>> options = MarkdownParserOptions(parse_image_attributes=False)
        >>> doc = MarkdownToAstConverter(options).parse("![x](fig.png){width=300}")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        super().__init__(options, MarkdownParserOptions, "markdown")
        self.options: MarkdownParserOptions

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown input to parse. A ``str`` is Markdown source, not a path.

        Returns
        -------
        Document
            AST document node

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        markdown = mistune.create_markdown(plugins=[], renderer=None)
        tokens, state = markdown.parse(markdown_content)

        if isinstance(tokens, list):
            children = self._process_tokens(tokens)
        else:
            children = []

        document = Document(children=children)
        if self.options.fixup_links:
            fixup_links(document)

        logger.debug(f"Parsed Markdown into {len(children)} block node(s)")
        return document

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without a counterpart
            (blank lines)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type == "paragraph":
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_text":
            # block_text is used for tight list items
            return TextBlock(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(lines=token.get("raw", "").splitlines(keepends=True))

        if token_type != "blank_line":
            logger.debug(f"Skipping unsupported block token: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []

        return Heading(level=level, children=content)

    def _process_code_block(self, token: dict[str, Any]) -> Node:
        """Process code block token.

        Indented blocks become :class:`CodeBlock`; fenced blocks become
        :class:`FencedCodeBlock` with the first word of the info string as
        language.

        """
        lines = _code_lines(token.get("raw", ""))

        if token.get("style") != "fenced":
            return CodeBlock(lines=lines)

        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        language = None
        if info_string:
            parts = info_string.split(maxsplit=1)
            if parts:
                language = sanitize_language_identifier(parts[0]) or None

        return FencedCodeBlock(lines=lines, language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items: list[Node] = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]

        return List(ordered=ordered, children=items, start=start)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []
        pending = list(tokens)

        i = 0
        while i < len(pending):
            token = pending[i]
            token_type = token.get("type", "")

            if token_type == "softbreak":
                self._mark_line_break(nodes, hard=False)
            elif token_type == "linebreak":
                self._mark_line_break(nodes, hard=True)
            elif token_type == "image":
                image = self._handle_image_token(token)
                if self.options.parse_image_attributes and i + 1 < len(pending):
                    rest = self._apply_image_attributes(image, pending[i + 1])
                    if rest is not None:
                        pending[i + 1] = {"type": "text", "raw": rest}
                nodes.append(image)
            else:
                node = self._process_inline_token(token)
                if node is not None:
                    nodes.append(node)
            i += 1

        return [node for node in nodes if not (isinstance(node, Text) and self._is_empty_text(node))]

    @staticmethod
    def _is_empty_text(node: Text) -> bool:
        return not node.value and not node.soft_line_break and not node.hard_line_break

    @staticmethod
    def _mark_line_break(nodes: list[Node], hard: bool) -> None:
        """Record a line break on the preceding Text node, adding one if needed."""
        if not nodes or not isinstance(nodes[-1], Text):
            nodes.append(Text(""))
        last = nodes[-1]
        assert isinstance(last, Text)
        if hard:
            last.hard_line_break = True
        else:
            last.soft_line_break = True

    @staticmethod
    def _apply_image_attributes(image: Image, next_token: dict[str, Any]) -> Optional[str]:
        """Move a ``{...}`` block at the start of ``next_token`` onto ``image``.

        Integer ``width`` and ``height`` values set the pixel size; anything
        else is kept as an attribute.

        Returns
        -------
        str or None
            The remaining text of ``next_token``, or None if it does not start
            with an attribute block

        """
        if next_token.get("type") != "text":
            return None

        raw = next_token.get("raw", "")
        m = _ATTRIBUTE_BLOCK.match(raw)
        if m is None:
            return None

        attributes = parse_attribute_block(m.group(1))
        if attributes is None:
            return None

        for name, value in attributes.items():
            if name in _PIXEL_DIMENSIONS and value.isdigit():
                setattr(image, name, int(value))
            else:
                image.attributes[name] = value

        return raw[m.end() :]

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        # restore the backslashes mistune consumed as escapes
        content = token.get("raw", "").replace("\\", "\\\\")
        return Text(content)

    def _handle_strong_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle strong token."""
        return Emphasis(level=2, children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(level=1, children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> CodeSpan:
        """Handle codespan token."""
        return CodeSpan(children=[Text(token.get("raw", ""), raw=True)])

    def _handle_link_token(self, token: dict[str, Any]) -> Node:
        """Handle link token, recognizing autolinks."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        url = attrs.get("url", "")
        title = attrs.get("title", None)
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        autolink = self._as_autolink(url, title, children)
        if autolink is not None:
            return autolink

        return Link(destination=url, title=title, children=self._process_inline_tokens(children))

    @staticmethod
    def _as_autolink(url: str, title: Optional[str], children: list[dict[str, Any]]) -> Optional[AutoLink]:
        """Return an AutoLink if the link token has the shape mistune gives autolinks."""
        if title is not None or len(children) != 1 or children[0].get("type") != "text":
            return None

        label = children[0].get("raw", "")
        target = unquote(url)
        if target == label:
            return AutoLink(url=label, link_type="url")
        if target == f"mailto:{label}":
            return AutoLink(url=label, link_type="email")
        return None

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # mistune percent-encodes destinations; images are file paths
        url = unquote(attrs.get("url", ""))
        title = attrs.get("title", None)
        children = token.get("children", [])
        alt = self._process_inline_tokens(children) if isinstance(children, list) else []
        return Image(destination=url, title=title, children=alt)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> RawHTML:
        """Handle inline_html token."""
        return RawHTML(segments=[token.get("raw", "")])

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug(f"Skipping unsupported inline token: {token_type}")
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from slidetex.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)


__all__ = ["MarkdownToAstConverter", "markdown_to_ast", "parse_attribute_block"]
