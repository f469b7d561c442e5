#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/options/beamer.py
"""Configuration options for the Beamer document shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from slidetex.constants import (
    DEFAULT_BEAMER_CODE_PACKAGE,
    DEFAULT_BEAMER_LINK_COLOR,
    DEFAULT_BEAMER_PACKAGES,
    DEFAULT_BEAMER_THEME,
)
from slidetex.options.base import CloneFrozenMixin

_ASPECT_RATIOS = ("43", "169", "1610", "149", "54", "32")


@dataclass(frozen=True)
class BeamerTemplateOptions(CloneFrozenMixin):
    r"""Configuration options for :class:`slidetex.templates.BeamerTemplate`.

    Parameters
    ----------
    theme : str, default "Madrid"
        Argument of ``\usetheme``.
    color_theme : str or None, default None
        Argument of ``\usecolortheme``; omitted when None.
    aspect_ratio : str or None, default None
        Beamer ``aspectratio`` class option (e.g. "169"); omitted when None.
    link_color : str, default "blue"
        xcolor name used by ``\colhref``.
    extra_packages : list[str], default empty
        Packages loaded after the default ones.
    code_package : str, default "minted"
        Package loaded when a slide contains a code listing. Use "listings"
        together with ``LatexRendererOptions(code_environment="lstlisting")``.

    """

    theme: str = field(
        default=DEFAULT_BEAMER_THEME,
        metadata={"help": "Beamer theme name", "importance": "core"},
    )
    color_theme: Optional[str] = field(
        default=None,
        metadata={"help": "Beamer color theme name", "importance": "advanced"},
    )
    aspect_ratio: Optional[str] = field(
        default=None,
        metadata={"help": "Beamer aspectratio class option", "choices": list(_ASPECT_RATIOS), "importance": "core"},
    )
    link_color: str = field(
        default=DEFAULT_BEAMER_LINK_COLOR,
        metadata={"help": "Color of hyperlinks", "importance": "advanced"},
    )
    extra_packages: list[str] = field(
        default_factory=list,
        metadata={"help": "Additional LaTeX packages to load", "importance": "advanced"},
    )
    code_package: str = field(
        default=DEFAULT_BEAMER_CODE_PACKAGE,
        metadata={
            "help": "Package loaded when slides contain code",
            "choices": ["minted", "listings"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate Beamer template options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        object.__setattr__(self, "extra_packages", list(self.extra_packages))

        if not self.theme:
            raise ValueError("theme must not be empty")

        if self.aspect_ratio is not None and self.aspect_ratio not in _ASPECT_RATIOS:
            raise ValueError(f"aspect_ratio must be one of {', '.join(_ASPECT_RATIOS)}, got {self.aspect_ratio!r}")

    @property
    def packages(self) -> list[str]:
        """Return the default packages followed by the extra ones, without duplicates."""
        result = list(DEFAULT_BEAMER_PACKAGES)
        for package in self.extra_packages:
            if package not in result:
                result.append(package)
        return result
