#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility modules for slidetex.

- escape: LaTeX substitution tables and escaping functions
- text_scanner: backslash-escape and character-reference scanning
- images: image size reading and pixel to physical unit conversion
- security: link safety classification
- decorators, packages: optional dependency checks
- io_utils: output destination handling

"""
