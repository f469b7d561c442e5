#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from slidetex.exceptions import OutputWriteError


def write_content(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a file path or a file-like object.

    Parameters
    ----------
    text : str
        Rendered text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Binary streams receive UTF-8 encoded bytes.

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("\\section{Intro}", buffer)
        >>> buffer.getvalue()
        '\\section{Intro}'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    # Detect binary or text mode: concrete types first, then io base classes, then mode
    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    elif hasattr(output, "mode"):
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode
    else:
        is_binary_mode = False

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["write_content"]
