"""Pytest configuration and shared fixtures for the slidetex test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - parser, renderer and template together")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


@pytest.fixture
def make_png(temp_dir: Path) -> Callable[..., Path]:
    """Provide a factory writing solid-color PNG files into ``temp_dir``.

    Returns
    -------
    Callable
        ``make_png(width, height, name="image.png") -> Path``

    """
    from PIL import Image

    def _make(width: int, height: int, name: str = "image.png") -> Path:
        path = temp_dir / name
        Image.new("RGB", (width, height), color=(30, 120, 200)).save(path, format="PNG")
        return path

    return _make


@pytest.fixture
def slide_png(make_png: Callable[..., Path]) -> Path:
    """Provide a 720x480 PNG, 10in by 6in at 72 DPI.

    Returns
    -------
    Path
        Path to the image

    """
    return make_png(720, 480, "slide.png")


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample slide content for testing.

    Returns
    -------
    str
        Markdown exercising most block and inline constructs.

    """
    return """# Overview

This is a **sample slide** with _italic text_ and some `inline code`.

- First point
- Second point

> A quotation

```python
print("Hello, World!")
```

See <https://example.com> and [the docs](https://example.com/docs).
"""
