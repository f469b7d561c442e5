#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/security.py
"""Security helpers for link targets and code fence languages.

The renderer never needs network or file access for links, but a slide deck
may be turned into a PDF that is shared widely. Links using script schemes,
local file access or inline data (other than a small set of raster image
types) are flagged so the caller can drop or report them.

Code fence languages end up inside a LaTeX environment argument, so they are
restricted to a safe alphabet. Image paths are copied into
``\\includegraphics`` and must not contain characters TeX acts on.

"""

from __future__ import annotations

import logging
import re

from slidetex.constants import (
    DANGEROUS_URL_PREFIXES,
    MAX_LANGUAGE_IDENTIFIER_LENGTH,
    SAFE_DATA_IMAGE_SUBTYPES,
    SAFE_LANGUAGE_IDENTIFIER_PATTERN,
    UNSAFE_IMAGE_PATH_CHARACTERS,
)
from slidetex.exceptions import SecurityError

logger = logging.getLogger(__name__)

_DATA_IMAGE_PREFIX = "data:image/"


def is_dangerous_url(url: str) -> bool:
    """Check if a URL seems potentially dangerous.

    Rules, checked in order:

    1. ``data:image/`` followed by ``png;``, ``gif;``, ``jpeg;`` or ``webp;`` is safe.
    2. Any other ``data:image/`` URL is dangerous.
    3. ``javascript:``, ``vbscript:``, ``file:`` and ``data:`` URLs are dangerous.
    4. Everything else is safe.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if the URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_dangerous_url("https://example.com")
    False
    >>> is_dangerous_url("javascript:alert(1)")
    True
    >>> is_dangerous_url("data:image/png;base64,iVBORw0KGgo=")
    False
    >>> is_dangerous_url("data:text/html,<b>hi</b>")
    True

    """
    if url.startswith(_DATA_IMAGE_PREFIX):
        subtype = url[len(_DATA_IMAGE_PREFIX) :]
        return not subtype.startswith(SAFE_DATA_IMAGE_SUBTYPES)
    return url.startswith(DANGEROUS_URL_PREFIXES)


def sanitize_language_identifier(language: str) -> str:
    r"""Sanitize a code fence language identifier.

    The identifier becomes the argument of ``\begin{minted}{...}`` or the
    ``language=`` key of ``lstlisting``, so braces, brackets, commas and
    whitespace are not allowed.

    Parameters
    ----------
    language : str
        Raw language identifier string to sanitize

    Returns
    -------
    str
        Sanitized language identifier, or empty string if invalid

    Examples
    --------
    >>> sanitize_language_identifier("python")
    'python'
    >>> sanitize_language_identifier("c++")
    'c++'
    >>> sanitize_language_identifier("go}\\input{/etc/passwd")
    ''

    """
    if not language:
        return ""

    language = language.strip()

    if len(language) > MAX_LANGUAGE_IDENTIFIER_LENGTH:
        logger.warning(
            f"Language identifier exceeds maximum length ({MAX_LANGUAGE_IDENTIFIER_LENGTH}): {language[:50]}..."
        )
        return ""

    if not re.match(SAFE_LANGUAGE_IDENTIFIER_PATTERN, language):
        logger.warning(
            f"Blocked potentially dangerous language identifier containing invalid characters: {language[:50]}"
        )
        return ""

    return language


def validate_image_path(path: str) -> str:
    r"""Check that an image path can be written into ``\includegraphics{...}``.

    Backslashes, braces, ``%``, ``#`` and line breaks would end the argument
    early or inject commands, and there is no escaping that graphicx undoes
    when it opens the file, so such paths are refused.

    Parameters
    ----------
    path : str
        Image destination as written in the Markdown source

    Returns
    -------
    str
        ``path`` unchanged

    Raises
    ------
    SecurityError
        If the path contains a character TeX would interpret

    Examples
    --------
    >>> validate_image_path("figures/chart 1.png")
    'figures/chart 1.png'

    """
    bad = sorted({ch for ch in path if ch in UNSAFE_IMAGE_PATH_CHARACTERS})
    if bad:
        logger.warning(f"Refusing image path with TeX special characters {bad!r}: {path[:50]}")
        raise SecurityError(f"Image path contains characters that are not allowed in LaTeX: {path!r}")
    return path


__all__ = ["is_dangerous_url", "sanitize_language_identifier", "validate_image_path"]
