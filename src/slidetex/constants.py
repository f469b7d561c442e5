#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/constants.py
"""Constants and default values for slidetex.

This module centralizes the default configuration values used by the
Markdown parser, the LaTeX renderer and the Beamer template glue.

"""

from __future__ import annotations

from typing import Literal

# Type aliases for option choices
ImageUnit = Literal["in", "cm"]
CodeEnvironment = Literal["minted", "lstlisting"]
LinkSafetyMode = Literal["ignore", "warn", "strip", "error"]

# Image geometry
DEFAULT_DPI = 72
DEFAULT_IMAGE_UNIT: ImageUnit = "in"
CENTIMETERS_PER_INCH = 2.54
DEFAULT_FIGURE_PLACEMENT = "h"

# Code listings
DEFAULT_CODE_ENVIRONMENT: CodeEnvironment = "minted"
DEFAULT_CODE_LANGUAGE = "text"

# Links
DEFAULT_LINK_COMMAND = "colhref"
DEFAULT_LINK_SAFETY: LinkSafetyMode = "ignore"

# Markdown parsing
DEFAULT_PARSE_IMAGE_ATTRIBUTES = True
DEFAULT_FIXUP_LINKS = True

# Beamer shell
DEFAULT_BEAMER_THEME = "Madrid"
DEFAULT_BEAMER_LINK_COLOR = "blue"
DEFAULT_BEAMER_PACKAGES = ["graphicx", "hyperref", "xcolor"]
DEFAULT_BEAMER_CODE_PACKAGE = "minted"

# Attribute names that may be forwarded verbatim to \includegraphics
IMAGE_ATTRIBUTE_NAMES = frozenset({"height", "width"})
IMAGE_DATA_ATTRIBUTE_PREFIX = "data-"

# Link safety classification
SAFE_DATA_IMAGE_SUBTYPES = ("png;", "gif;", "jpeg;", "webp;")
DANGEROUS_URL_PREFIXES = ("javascript:", "vbscript:", "file:", "data:")

# Optional dependency requirements: (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_IMAGES = [("Pillow", "PIL", ">=9.0.0")]
DEPS_JINJA = [("jinja2", "jinja2", ">=3.1.0")]

# Code fence language identifiers (minted lexer / listings language names)
SAFE_LANGUAGE_IDENTIFIER_PATTERN = r"^[a-zA-Z0-9_+#.\-]+$"
MAX_LANGUAGE_IDENTIFIER_LENGTH = 50

# Characters that cannot appear in an \includegraphics path argument
UNSAFE_IMAGE_PATH_CHARACTERS = frozenset("\\{}%#\n\r")
