#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/slidetex/utils/images.py
"""Image geometry utilities for the LaTeX renderer.

This module reads the intrinsic pixel size of raster images and turns pixel
sizes into physical page units for ``\\includegraphics``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from slidetex.constants import CENTIMETERS_PER_INCH, DEFAULT_DPI, DEFAULT_IMAGE_UNIT, DEPS_IMAGES, ImageUnit
from slidetex.exceptions import ImageDecodeError, ImageOpenError
from slidetex.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


def pixels_to_units(pixels: float, dpi: int, unit: ImageUnit = DEFAULT_IMAGE_UNIT) -> float:
    """Convert a pixel count to inches or centimeters.

    Parameters
    ----------
    pixels : float
        Size in pixels
    dpi : int
        Resolution in dots per inch
    unit : {"in", "cm"}, default "in"
        Target unit

    Returns
    -------
    float
        Size in ``unit``

    Raises
    ------
    ValueError
        If ``dpi`` is not positive or ``unit`` is unknown

    Examples
    --------
        >>> pixels_to_units(720, 72)
        10.0
        >>> pixels_to_units(72, 72, "cm")
        2.54

    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive, got {dpi}")

    inches = pixels / dpi
    if unit == "in":
        return inches
    if unit == "cm":
        return inches * CENTIMETERS_PER_INCH
    raise ValueError(f"Unsupported image unit: {unit}")


@requires_dependencies("images", DEPS_IMAGES)
def read_image_size(path: Union[str, Path]) -> tuple[int, int]:
    """Read the intrinsic size of a raster image.

    Any format registered with Pillow is accepted (PNG, JPEG, GIF, BMP, TIFF,
    WebP, ...). The file is closed before returning, on success and on failure.

    Parameters
    ----------
    path : str or Path
        Image file path

    Returns
    -------
    tuple[int, int]
        (width, height) in pixels

    Raises
    ------
    ImageOpenError
        If the file does not exist or cannot be read
    ImageDecodeError
        If the file is not a recognized raster image

    """
    from PIL import Image, UnidentifiedImageError

    try:
        f = open(path, "rb")
    except OSError as e:
        raise ImageOpenError(str(path), original_error=e) from e

    with f:
        try:
            with Image.open(f) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(str(path), original_error=e) from e

    logger.debug(f"Read image size {width}x{height} from {path}")
    return width, height


@dataclass(frozen=True)
class ImageGeometry:
    """Resolved image size in physical units.

    Parameters
    ----------
    width : float
        Width in ``unit``
    height : float
        Height in ``unit``
    unit : {"in", "cm"}
        Physical unit

    """

    width: float
    height: float
    unit: ImageUnit = DEFAULT_IMAGE_UNIT

    def to_latex_options(self) -> str:
        """Format as ``\\includegraphics`` options.

        Lengths of one unit or more are truncated to whole units. Shorter
        non-zero lengths are truncated to hundredths, but never below 0.01, so
        a small image is not collapsed to nothing.

        Returns
        -------
        str
            e.g. ``width=10in,height=6in`` or ``width=0.69in,height=0.69in``

        """
        return f"width={_format_length(self.width)}{self.unit},height={_format_length(self.height)}{self.unit}"


def _format_length(value: float) -> str:
    if value >= 1:
        return str(int(value))
    if value <= 0:
        return "0"
    hundredths = max(int(value * 100), 1)
    return f"0.{hundredths:02d}"


class ImageGeometryResolver:
    """Compute the physical size of an image element.

    When neither dimension is given, the intrinsic pixel size of the file is
    used. When only one is given, the other is scaled to keep the aspect ratio
    of the source image. When both are given the file is not opened.

    Parameters
    ----------
    dpi : int, default 72
        Resolution used to convert pixels to physical units
    unit : {"in", "cm"}, default "in"
        Physical unit of the result
    base_dir : str, Path or None, default None
        Directory that relative image paths are resolved against.
        None means the current working directory.

    """

    def __init__(
        self,
        dpi: int = DEFAULT_DPI,
        unit: ImageUnit = DEFAULT_IMAGE_UNIT,
        base_dir: Optional[Union[str, Path]] = None,
    ):
        """Initialize the resolver."""
        if dpi <= 0:
            raise ValueError(f"dpi must be positive, got {dpi}")
        self.dpi = dpi
        self.unit = unit
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def locate(self, destination: str) -> Path:
        """Return the filesystem path for an image destination.

        Parameters
        ----------
        destination : str
            Image destination as written in the document

        Returns
        -------
        Path
            Absolute destinations unchanged, relative ones joined to ``base_dir``

        """
        path = Path(destination)
        if self.base_dir is not None and not path.is_absolute():
            return self.base_dir / path
        return path

    def resolve_pixels(
        self, destination: str, width: Optional[int] = None, height: Optional[int] = None
    ) -> tuple[int, int]:
        """Fill in missing pixel dimensions.

        Parameters
        ----------
        destination : str
            Image destination
        width : int or None
            Explicit width in pixels
        height : int or None
            Explicit height in pixels

        Returns
        -------
        tuple[int, int]
            (width, height) in pixels

        Raises
        ------
        ImageOpenError, ImageDecodeError
            If the image has to be read and cannot be

        """
        if width and height:
            return width, height

        intrinsic_width, intrinsic_height = read_image_size(self.locate(destination))

        if not width and not height:
            return intrinsic_width, intrinsic_height

        if width:
            # rescale, keeping ratio
            ratio = float(width) / float(intrinsic_width) if intrinsic_width else 0.0
            return width, int(float(intrinsic_height) * ratio)

        assert height is not None
        ratio = float(height) / float(intrinsic_height) if intrinsic_height else 0.0
        return int(float(intrinsic_width) * ratio), height

    def resolve(self, destination: str, width: Optional[int] = None, height: Optional[int] = None) -> ImageGeometry:
        """Resolve an image element to a physical size.

        Parameters
        ----------
        destination : str
            Image destination
        width : int or None
            Explicit width in pixels
        height : int or None
            Explicit height in pixels

        Returns
        -------
        ImageGeometry
            Width and height in physical units

        """
        width_px, height_px = self.resolve_pixels(destination, width, height)
        geometry = ImageGeometry(
            width=pixels_to_units(width_px, self.dpi, self.unit),
            height=pixels_to_units(height_px, self.dpi, self.unit),
            unit=self.unit,
        )
        logger.debug(f"Resolved {destination} to {width_px}x{height_px}px at {self.dpi} DPI")
        return geometry


__all__ = ["ImageGeometry", "ImageGeometryResolver", "pixels_to_units", "read_image_size"]
