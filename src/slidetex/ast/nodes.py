#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/ast/nodes.py
"""AST node classes for Markdown slide content.

This module defines the node tree that the LaTeX renderer consumes. The tree
is produced once per document by a parser (see
:mod:`slidetex.parsers.markdown`) and read by the renderer; apart from the
link fixup pass in :mod:`slidetex.ast.transforms` nothing modifies it.

Every node class carries a class-level :class:`NodeKind` tag. Renderers
dispatch on that tag through a registration table rather than on the Python
class, so new node categories are supported by registering a function.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, TextBlock, BlockQuote
    - CodeBlock, FencedCodeBlock, HTMLBlock
    - List, ListItem, ThematicBreak

Inline nodes:
    - Text, String, Emphasis, CodeSpan
    - Link, AutoLink, Image, RawHTML

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Literal, Optional

AutoLinkType = Literal["url", "email"]


class NodeKind(Enum):
    """Category tag of an AST node."""

    DOCUMENT = "document"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    FENCED_CODE_BLOCK = "fenced_code_block"
    HTML_BLOCK = "html_block"
    LIST = "list"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"
    TEXT_BLOCK = "text_block"
    THEMATIC_BREAK = "thematic_break"
    AUTO_LINK = "auto_link"
    CODE_SPAN = "code_span"
    EMPHASIS = "emphasis"
    LINK = "link"
    IMAGE = "image"
    RAW_HTML = "raw_html"
    TEXT = "text"
    STRING = "string"


class Node:
    """Base class for all AST nodes.

    Subclasses are dataclasses that declare their own ``children`` and
    ``attributes`` fields; this class only fixes the common interface.

    Attributes
    ----------
    kind : NodeKind
        Category tag used for render dispatch
    children : list of Node
        Ordered child nodes (empty for leaves)
    attributes : dict[str, str]
        Markup attributes attached to the node (e.g. ``{width=5cm}``)

    """

    kind: ClassVar[NodeKind]
    children: list[Node]
    attributes: dict[str, str]

    @property
    def first_child(self) -> Optional[Node]:
        """Return the first child, or None for leaves."""
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[Node]:
        """Return the last child, or None for leaves."""
        return self.children[-1] if self.children else None


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """Heading node (levels 1-6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node holding inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class TextBlock(Node):
    """Inline content without paragraph spacing (items of tight lists)."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT_BLOCK

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class BlockQuote(Node):
    """Block quote node containing block-level children."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Indented code block.

    Parameters
    ----------
    lines : list of str
        Source lines, each with its line terminator

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    lines: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class FencedCodeBlock(Node):
    """Fenced code block with an optional language tag.

    Parameters
    ----------
    lines : list of str
        Source lines, each with its line terminator
    language : str or None, default = None
        First word of the fence info string

    """

    kind: ClassVar[NodeKind] = NodeKind.FENCED_CODE_BLOCK

    lines: list[str] = field(default_factory=list)
    language: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, kept as opaque text.

    Parameters
    ----------
    lines : list of str
        Block lines
    closure : str or None, default = None
        Closing line of the block (e.g. ``</div>``), when the parser keeps it apart

    """

    kind: ClassVar[NodeKind] = NodeKind.HTML_BLOCK

    lines: list[str] = field(default_factory=list)
    closure: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists
    children : list of ListItem, default = empty list
        List items
    start : int, default = 1
        First number of an ordered list

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST

    ordered: bool = False
    children: list[Node] = field(default_factory=list)
    start: int = 1
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class ListItem(Node):
    """List item containing block-level children."""

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule)."""

    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Span of text.

    Parameters
    ----------
    value : str
        Text as written in the source
    raw : bool, default = False
        Copy verbatim, without escape resolution or LaTeX escaping
    soft_line_break : bool, default = False
        The text is followed by a soft line break
    hard_line_break : bool, default = False
        The text is followed by a hard line break

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str
    raw: bool = False
    soft_line_break: bool = False
    hard_line_break: bool = False
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class String(Node):
    """Synthesized string, not backed by source text.

    Parameters
    ----------
    value : str
        String content
    raw : bool, default = False
        Copy verbatim instead of scanning and escaping
    code : bool, default = False
        The string is code and is always copied verbatim

    """

    kind: ClassVar[NodeKind] = NodeKind.STRING

    value: str
    raw: bool = False
    code: bool = False
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class Emphasis(Node):
    """Emphasis span.

    Parameters
    ----------
    level : int, default = 1
        1 for emphasis, 2 for strong emphasis
    children : list of Node, default = empty list
        Emphasized inline content

    """

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    level: int = 1
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class CodeSpan(Node):
    """Inline code. Children are raw Text segments."""

    kind: ClassVar[NodeKind] = NodeKind.CODE_SPAN

    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    destination : str
        Link target URL
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Inline nodes for link text

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    destination: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class AutoLink(Node):
    """URL or email address written directly in the text.

    Parameters
    ----------
    url : str
        The URL or email address as written; also used as the link label
    link_type : {"url", "email"}, default = "url"
        Email autolinks get a ``mailto:`` scheme when rendered

    """

    kind: ClassVar[NodeKind] = NodeKind.AUTO_LINK

    url: str
    link_type: AutoLinkType = "url"
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Return the link text, which is the literal URL."""
        return self.url


@dataclass
class Image(Node):
    """Image element.

    Parameters
    ----------
    destination : str
        Image path
    title : str or None, default = None
        Optional title, rendered as the figure caption
    width : int or None, default = None
        Explicit width in pixels
    height : int or None, default = None
        Explicit height in pixels
    children : list of Node, default = empty list
        Alternative text
    attributes : dict[str, str], default = empty dict
        Attributes forwarded to ``\\includegraphics`` (``width``, ``height``, ``data-*``)

    """

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    destination: str
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class RawHTML(Node):
    """Inline raw HTML.

    Parameters
    ----------
    segments : list of str
        Raw source segments, copied as-is

    """

    kind: ClassVar[NodeKind] = NodeKind.RAW_HTML

    segments: list[str] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


__all__ = [
    "AutoLink",
    "AutoLinkType",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "HTMLBlock",
    "Heading",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeKind",
    "Paragraph",
    "RawHTML",
    "String",
    "Text",
    "TextBlock",
    "ThematicBreak",
]
