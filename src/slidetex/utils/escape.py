#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/escape.py
r"""LaTeX text escaping utilities.

This module holds the process-wide substitution tables used to turn plain
text into LaTeX-safe text, and the functions that apply them.

All tables are applied in a single left-to-right pass by one compiled regular
expression. At each position the first table entry that matches wins, so the
multi-character sequences (``-->``, ``<=``...) are listed ahead of their
single-character prefixes and the replacement text itself is never scanned
again. ``->`` therefore becomes ``$\rightarrow$`` and not ``-$>$``.

"""

from __future__ import annotations

import re
from typing import Mapping
from urllib.parse import quote

# Arrow and comparison sequences, longest first
LATEX_SEQUENCES: Mapping[str, str] = {
    "-->": r"$\Rightarrow$ ",
    "<--": r"$\Leftarrow$ ",
    "->": r"$\rightarrow$ ",
    "<-": r"$\leftarrow$ ",
    "=>": r"$\Rightarrow$ ",
    ">=": r"$\geq$",
    "<=": r"$\leq$",
}

# Characters with a special meaning for TeX
LATEX_SPECIAL_CHARS: Mapping[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    ">": r"$>$",
    "<": r"$<$",
}

# UTF-8 letters and symbols with a LaTeX command equivalent
LATEX_UTF8: Mapping[str, str] = {
    "⇒": r"$\Rightarrow$ ",
    "—": "---",
    "±": r"$\pm$",
    "é": r"\'e",
    "è": r"\`e",
    "à": r"\`a",
    "ù": r"\`u",
    "â": r"\^a",
    "ê": r"\^e",
    "î": r"\^i",
    "ô": r"\^o",
    "û": r"\^u",
    "ŷ": r"\^y",
    "ä": r"\"a",
    "ë": r"\"e",
    "ï": r"\"i",
    "ö": r"\"o",
    "ü": r"\"u",
    "ÿ": r"\"y",
    "ç": r"\c{c}",
    "æ": "\\ae ",
    "œ": "\\oe ",
    "É": r"\'E",
    "È": r"\`E",
    "À": r"\`A",
    "Ù": r"\`U",
    "Â": r"\^A",
    "Ê": r"\^E",
    "Î": r"\^I",
    "Ô": r"\^O",
    "Û": r"\^U",
    "Ä": r"\"A",
    "Ë": r"\"E",
    "Ï": r"\"I",
    "Ö": r"\"O",
    "Ü": r"\"U",
    "Ç": r"\c{C}",
    "Æ": "\\AE ",
    "Œ": "\\OE ",
    "ß": "\\ss ",
}

_LATEX_TABLE: dict[str, str] = {**LATEX_SEQUENCES, **LATEX_SPECIAL_CHARS, **LATEX_UTF8}

# Single characters only: used for characters decoded from entity references,
# which must not take part in sequence matching.
LATEX_CHAR_SUBSTITUTIONS: Mapping[str, str] = {k: v for k, v in _LATEX_TABLE.items() if len(k) == 1}

_LATEX_PATTERN = re.compile("|".join(re.escape(key) for key in _LATEX_TABLE))
_UTF8_PATTERN = re.compile("|".join(re.escape(key) for key in LATEX_UTF8))

# Characters left untouched when percent-encoding a URL. "%" is kept so that
# already-encoded URLs are not encoded twice.
_URL_SAFE_CHARS = "!#$%&'()*+,-./:;=?@[]_~"


def escape_latex(text: str) -> str:
    r"""Escape text for use in LaTeX body text.

    Parameters
    ----------
    text : str
        Plain text

    Returns
    -------
    str
        LaTeX-safe text

    Examples
    --------
        >>> escape_latex("World_test")
        'World\\_test'
        >>> escape_latex("a -> b")
        'a $\\rightarrow$  b'

    """
    if not text:
        return text
    return _LATEX_PATTERN.sub(lambda m: _LATEX_TABLE[m.group(0)], text)


def escape_latex_char(char: str) -> str:
    """Escape a single character, without sequence matching.

    Parameters
    ----------
    char : str
        A single character

    Returns
    -------
    str
        The LaTeX substitution for ``char``, or ``char`` itself

    """
    return LATEX_CHAR_SUBSTITUTIONS.get(char, char)


def utf8_to_latex(text: str) -> str:
    """Replace accented letters and typographic symbols with LaTeX commands.

    Unlike :func:`escape_latex`, TeX special characters are left alone, so
    this is safe to apply to text that already contains LaTeX markup
    (slide captions, author names coming from a template).

    Parameters
    ----------
    text : str
        Text that may contain UTF-8 accented letters

    Returns
    -------
    str
        Text with accents converted

    """
    if not text:
        return text
    return _UTF8_PATTERN.sub(lambda m: LATEX_UTF8[m.group(0)], text)


def escape_latex_url(url: str) -> str:
    r"""Prepare a URL for the first argument of ``\href``.

    Characters outside the URL alphabet are percent-encoded, then ``%`` and
    ``#`` are escaped so the URL survives being passed through a macro.

    Parameters
    ----------
    url : str
        Link destination

    Returns
    -------
    str
        URL safe for a LaTeX macro argument

    """
    quoted = quote(url, safe=_URL_SAFE_CHARS)
    return quoted.replace("%", r"\%").replace("#", r"\#")


__all__ = [
    "LATEX_CHAR_SUBSTITUTIONS",
    "LATEX_SEQUENCES",
    "LATEX_SPECIAL_CHARS",
    "LATEX_UTF8",
    "escape_latex",
    "escape_latex_char",
    "escape_latex_url",
    "utf8_to_latex",
]
