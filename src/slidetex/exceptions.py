#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the slidetex library.

This module defines specialized exception classes for the error conditions
that can occur while parsing Markdown and rendering it as LaTeX/Beamer.

Exception Hierarchy
-------------------
- SlidetexError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - ImageError (image geometry resolution)
      - ImageOpenError (missing or unreadable image)
      - ImageDecodeError (bytes are not a recognized raster format)

  - ParsingError (Markdown parsing failures)

  - RenderingError (output generation failures)
    - MarkdownWalkError (a render procedure failed during the tree walk)
    - OutputWriteError (file write failures)

  - SecurityError (dangerous links rejected by policy)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class SlidetexError(Exception):
    """Base exception class for all slidetex-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(SlidetexError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a component receives the wrong options class.

    Parameters
    ----------
    component : str
        Name of the parser, renderer or template ("markdown", "latex", "beamer")
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object that was passed instead

    """

    def __init__(self, component: str, expected_type: type, received_type: type):
        """Initialize the invalid options error."""
        super().__init__(
            f"{component} takes {expected_type.__name__}, not {received_type.__name__}",
            parameter_name="options",
            parameter_value=received_type,
        )
        self.component = component
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(SlidetexError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ImageError(FileError):
    """Base exception for failures while inferring image dimensions."""


class ImageOpenError(ImageError):
    """Exception raised when an image file cannot be opened.

    Parameters
    ----------
    file_path : str
        Path to the image that could not be opened
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the image open error."""
        if message is None:
            message = f"error opening file [{file_path}]"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ImageDecodeError(ImageError):
    """Exception raised when an image file is not a decodable raster image.

    Parameters
    ----------
    file_path : str
        Path to the image that could not be decoded
    original_error : Exception, optional
        The underlying codec error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the image decode error."""
        if message is None:
            message = f"error decoding image file [{file_path}]"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(SlidetexError):
    """Exception raised when Markdown input cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(SlidetexError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MarkdownWalkError(RenderingError):
    """Exception raised when a render procedure fails during the tree walk.

    The whole document conversion is abandoned: no partial output is returned.

    Parameters
    ----------
    original_error : Exception
        The error raised by the failing render procedure

    """

    def __init__(self, original_error: Exception, message: str | None = None):
        """Initialize the walk error around its cause."""
        if message is None:
            message = f"could not render document: {original_error}"
        super().__init__(message, rendering_stage="walk", original_error=original_error)


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class SecurityError(SlidetexError):
    """Exception raised when input violates a security policy."""


class DependencyError(SlidetexError):
    """Exception raised when a library needed by a component is unavailable.

    Each slidetex component relies on one third-party library (mistune for
    parsing, Pillow for image sizes, jinja2 for the Beamer shell), so the
    error names a single requirement.

    Parameters
    ----------
    component : str
        Name of the component that needs the library ("markdown", "images", "jinja")
    requirement : str
        Requirement string, e.g. ``"mistune>=3.0.0"``
    installed_version : str or None, default None
        Version found on the system, or None if the library cannot be imported
    original_import_error : ImportError or None, default None
        The failed import, if any

    """

    def __init__(
        self,
        component: str,
        requirement: str,
        installed_version: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with an install hint."""
        if installed_version is None:
            message = f"slidetex {component} support needs {requirement}, which is not installed."
            hint = f'pip install "{requirement}"'
        else:
            message = f"slidetex {component} support needs {requirement}, but {installed_version} is installed."
            hint = f'pip install --upgrade "{requirement}"'
        super().__init__(f"{message}\nInstall with: {hint}", original_error=original_import_error)
        self.component = component
        self.requirement = requirement
        self.installed_version = installed_version
        self.original_import_error = original_import_error
