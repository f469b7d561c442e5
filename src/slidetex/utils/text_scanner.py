#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/text_scanner.py
"""Inline text scanning for Markdown text spans.

The scanner resolves backslash escapes and HTML character references
(``&amp;``, ``&#65;``, ``&#x41;``) in a span of Markdown text. It splits the
span into segments:

- *literal* segments are runs of source text. They still need LaTeX escaping.
- *decoded* segments hold characters produced by a character reference.
  They are final display characters and are never combined with their
  neighbours into multi-character sequences.

Examples
--------
    >>> decode_text("Fish &amp; Chips")
    'Fish & Chips'
    >>> render_text("Fish &amp; Chips")
    'Fish \\\\& Chips'

"""

from __future__ import annotations

import re
import string
from html.entities import html5
from typing import Iterator, NamedTuple

from slidetex.utils.escape import escape_latex, escape_latex_char

_HEX_REFERENCE = re.compile(r"&#[xX]([0-9a-fA-F]+);")
_DECIMAL_REFERENCE = re.compile(r"&#([0-9]{1,7});")
_NAMED_REFERENCE = re.compile(r"&([A-Za-z0-9]+);")

_ASCII_PUNCTUATION = frozenset(string.punctuation)

_REPLACEMENT_CHARACTER = "�"


class TextSegment(NamedTuple):
    """A run of scanned text.

    Parameters
    ----------
    text : str
        Segment text
    decoded : bool
        True when the text was produced by a character reference

    """

    text: str
    decoded: bool = False


def _valid_code_point(value: int) -> str:
    if value == 0 or value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return _REPLACEMENT_CHARACTER
    return chr(value)


def _match_reference(source: str, pos: int) -> tuple[str, int] | None:
    """Try to read a character reference starting at ``source[pos] == "&"``.

    Returns
    -------
    tuple[str, int] or None
        The decoded characters and the index just past the ``;``

    """
    m = _HEX_REFERENCE.match(source, pos)
    if m:
        return _valid_code_point(int(m.group(1), 16)), m.end()

    m = _DECIMAL_REFERENCE.match(source, pos)
    if m:
        return _valid_code_point(int(m.group(1))), m.end()

    m = _NAMED_REFERENCE.match(source, pos)
    if m:
        characters = html5.get(m.group(1) + ";")
        if characters is not None:
            return characters, m.end()

    return None


def scan_text(source: str) -> Iterator[TextSegment]:
    r"""Split a text span into literal and decoded segments.

    Backslash escapes are resolved when the backslash is followed by ASCII
    punctuation; any other backslash is kept. An ``&`` that does not start a
    valid reference is literal text.

    Parameters
    ----------
    source : str
        Text span as written in the Markdown source

    Yields
    ------
    TextSegment
        Segments in source order. Empty segments are not produced.

    """
    pending = 0
    escaped = False
    i = 0
    limit = len(source)

    while i < limit:
        c = source[i]

        if escaped and c in _ASCII_PUNCTUATION:
            # drop the backslash, keep the punctuation in the next run
            if i - 1 > pending:
                yield TextSegment(source[pending : i - 1])
            pending = i
            escaped = False
            i += 1
            continue

        if c == "&":
            reference = _match_reference(source, i)
            if reference is not None:
                characters, end = reference
                if i > pending:
                    yield TextSegment(source[pending:i])
                yield TextSegment(characters, decoded=True)
                pending = i = end
                escaped = False
                continue

        escaped = c == "\\"
        i += 1

    if pending < limit:
        yield TextSegment(source[pending:])


def decode_text(source: str) -> str:
    """Resolve escapes and character references, without LaTeX escaping.

    Parameters
    ----------
    source : str
        Text span as written in the Markdown source

    Returns
    -------
    str
        Display text

    """
    return "".join(segment.text for segment in scan_text(source))


def render_text(source: str) -> str:
    """Scan a text span and escape it for LaTeX.

    Literal runs go through :func:`~slidetex.utils.escape.escape_latex`.
    Decoded characters are substituted one by one, so ``&lt;-`` renders as a
    less-than sign followed by a dash rather than as an arrow. Only decoded
    characters below U+0100 are substituted; others are written as they are.

    Parameters
    ----------
    source : str
        Text span as written in the Markdown source

    Returns
    -------
    str
        LaTeX text

    """
    parts = []
    for segment in scan_text(source):
        if segment.decoded:
            parts.append("".join(escape_latex_char(ch) if ord(ch) < 256 else ch for ch in segment.text))
        else:
            parts.append(escape_latex(segment.text))
    return "".join(parts)


__all__ = ["TextSegment", "decode_text", "render_text", "scan_text"]
