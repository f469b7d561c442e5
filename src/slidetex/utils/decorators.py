#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/decorators.py
"""Decorators and context managers shared by the parser, renderer and template.

slidetex imports its third-party libraries lazily, inside the methods that
need them, so ``import slidetex`` works even when only part of the stack is
installed. :func:`requires_dependencies` turns a missing or outdated library
into a :class:`~slidetex.exceptions.DependencyError` that says what to
install.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Sequence, Tuple

from slidetex.exceptions import DependencyError
from slidetex.utils.packages import check_version_requirement

# (install_name, import_name, version_spec), e.g. ("Pillow", "PIL", ">=9.0.0")
Requirement = Tuple[str, str, str]


def ensure_dependency(component: str, requirement: Requirement) -> None:
    """Import a library and check its version.

    Parameters
    ----------
    component : str
        Component that needs the library, used in the error message
    requirement : tuple of str
        ``(install_name, import_name, version_spec)``; an empty spec accepts
        any version

    Raises
    ------
    DependencyError
        If the import fails or the installed distribution is too old

    """
    install_name, import_name, version_spec = requirement
    wanted = f"{install_name}{version_spec}"
    try:
        importlib.import_module(import_name)
    except ImportError as e:
        raise DependencyError(component, wanted, original_import_error=e) from e

    if not version_spec:
        return
    meets, installed = check_version_requirement(install_name, version_spec)
    # no distribution metadata (vendored or frozen installs): trust the import
    if installed is not None and not meets:
        raise DependencyError(component, wanted, installed_version=installed)


def requires_dependencies(component: str, requirements: Sequence[Requirement]) -> Callable:
    """Check a component's libraries each time the decorated function runs.

    Parameters
    ----------
    component : str
        Component name ("markdown", "images", "jinja")
    requirements : sequence of tuple
        Requirements as accepted by :func:`ensure_dependency`, checked in order

    Examples
    --------
        >>> @requires_dependencies("images", [("Pillow", "PIL", ">=9.0.0")])
        ... def read_size(path):
        ...     from PIL import Image
        ...     with Image.open(path) as img:
        ...         return img.size

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for requirement in requirements:
                ensure_dependency(component, requirement)
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long a block took, in milliseconds, when DEBUG is enabled.

    The time is logged even if the block raises.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug(f"{operation} took {(time.perf_counter() - start) * 1000:.1f} ms")


__all__ = ["Requirement", "debug_timer", "ensure_dependency", "requires_dependencies"]
