#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/ast/__init__.py
"""Abstract Syntax Tree (AST) module for slide content.

The module consists of:

- nodes: node classes tagged with a :class:`NodeKind`
- walk: depth-first enter/exit traversal with :class:`WalkStatus` control
- transforms: the link fixup pass and link safety checks

Examples
--------
    >>> from slidetex.ast import Document, Heading, Paragraph, Text
    >>> from slidetex.renderers.latex import LatexRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text("Hello")]),
    ...     Paragraph(children=[Text("World")]),
    ... ])
    >>> LatexRenderer().render_to_string(doc)
    '\\n\\\\section{Hello}\\nWorld\\n\\n'

"""

from __future__ import annotations

from slidetex.ast.nodes import (
    AutoLink,
    AutoLinkType,
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
    NodeKind,
    Paragraph,
    RawHTML,
    String,
    Text,
    TextBlock,
    ThematicBreak,
)
from slidetex.ast.transforms import collect_dangerous_links, fixup_links
from slidetex.ast.walk import WalkStatus, Walker, walk

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
    "WalkStatus",
    "Walker",
    "collect_dangerous_links",
    "fixup_links",
    "walk",
]
