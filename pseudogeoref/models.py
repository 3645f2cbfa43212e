# -*- coding: utf-8 -*-
"""
Models - Value types for pseudo-georeferencing.

Immutable dataclasses describing the fixed world extent, the pixel size of
an image, the synthetic footprint computed for it, the six-parameter
geotransform written to the world file, and the per-image record used for
summary reports.

Dependencies
------------
rasterio

Author
------
geoint.org contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union, TYPE_CHECKING

# Pseudogeoref internal
from pseudogeoref.exceptions import ValidationError

if TYPE_CHECKING:
    from rasterio.transform import Affine


def _difference(a: float, b: float) -> float:
    """Absolute difference between two values."""
    return abs(a - b)


@dataclass(frozen=True)
class WorldExtent:
    """Fixed reference rectangle in a coordinate reference system.

    Corner order is not assumed; ``(180, 90, -180, -90)`` describes the
    same rectangle as ``(-180, -90, 180, 90)``.

    Parameters
    ----------
    min_x : float
        First x corner.
    min_y : float
        First y corner.
    max_x : float
        Second x corner.
    max_y : float
        Second y corner.
    crs : str
        CRS identifier understood by pyproj (e.g. ``'EPSG:4326'``).

    Raises
    ------
    ValidationError
        If a corner is not finite or the rectangle has zero width or
        height.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    crs: str = "EPSG:4326"

    def __post_init__(self) -> None:
        corners = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(float(c)) for c in corners):
            raise ValidationError(f"World extent corners must be finite, got {corners}")
        if self.width == 0.0 or self.height == 0.0:
            raise ValidationError(f"World extent {corners} has zero width or height")

    @property
    def width(self) -> float:
        return _difference(self.min_x, self.max_x)

    @property
    def height(self) -> float:
        return _difference(self.min_y, self.max_y)

    @property
    def center(self) -> Tuple[float, float]:
        """True midpoint regardless of corner order."""
        return (
            min(self.min_x, self.max_x) + (self.width / 2.0),
            min(self.min_y, self.max_y) + (self.height / 2.0),
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class RasterSize:
    """Pixel dimensions of one image.

    Parameters
    ----------
    width : int
        Number of columns, strictly positive.
    height : int
        Number of rows, strictly positive.

    Raises
    ------
    ValidationError
        If either dimension is not a positive integer.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"Raster {label} must be an integer, got {value!r}"
                )
            if value <= 0:
                raise ValidationError(
                    f"Raster {label} must be positive, got {value}"
                )

    @property
    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class BoundingBox:
    """Synthetic footprint of one image in world coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return _difference(self.min_x, self.max_x)

    @property
    def height(self) -> float:
        return _difference(self.min_y, self.max_y)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_dict(self) -> Dict[str, float]:
        return {
            "minx": self.min_x,
            "miny": self.min_y,
            "maxx": self.max_x,
            "maxy": self.max_y,
        }


@dataclass(frozen=True)
class Geotransform:
    """Six affine coefficients mapping pixel (col, row) to world (x, y).

    Slots follow world file order::

        x = origin_x + col * pixel_width + row * rotation_x
        y = origin_y + col * rotation_y + row * pixel_height

    Parameters
    ----------
    pixel_width : float
        Pixel size in the x-direction in map units per pixel.
    rotation_y : float
        Rotation about the y-axis.
    rotation_x : float
        Rotation about the x-axis.
    pixel_height : float
        Pixel size in the y-direction, negative for north-up images.
    origin_x : float
        X coordinate of the upper-left pixel.
    origin_y : float
        Y coordinate of the upper-left pixel.
    """

    pixel_width: float
    rotation_y: float
    rotation_x: float
    pixel_height: float
    origin_x: float
    origin_y: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> 'Geotransform':
        """Build a geotransform from six values in world file order.

        Raises
        ------
        ValidationError
            If there are not exactly six finite numbers.
        """
        values = [float(v) for v in values]
        if len(values) != 6:
            raise ValidationError(
                f"A geotransform has exactly 6 values, got {len(values)}"
            )
        if not all(math.isfinite(v) for v in values):
            raise ValidationError(f"Geotransform values must be finite, got {values}")
        return cls(*values)

    def values(self) -> Tuple[float, float, float, float, float, float]:
        """Return the six values in world file order."""
        return (
            self.pixel_width,
            self.rotation_y,
            self.rotation_x,
            self.pixel_height,
            self.origin_x,
            self.origin_y,
        )

    def to_gdal(self) -> Tuple[float, float, float, float, float, float]:
        """Return the six values in GDAL ``GetGeoTransform`` order."""
        return (
            self.origin_x,
            self.pixel_width,
            self.rotation_x,
            self.origin_y,
            self.rotation_y,
            self.pixel_height,
        )

    def to_affine(self) -> 'Affine':
        """Return the equivalent ``rasterio.transform.Affine``."""
        from rasterio.transform import Affine

        return Affine(
            self.pixel_width, self.rotation_x, self.origin_x,
            self.rotation_y, self.pixel_height, self.origin_y,
        )


@dataclass(frozen=True)
class GeoReference:
    """Result of pseudo-georeferencing one image.

    Parameters
    ----------
    size : RasterSize
        Pixel dimensions of the image.
    bbox : BoundingBox
        Synthetic footprint in world coordinates.
    geotransform : Geotransform
        Coefficients written to the world file.
    name : str, optional
        File stem of the source image.
    filename : str, optional
        Full path of the source image as text.
    """

    size: RasterSize
    bbox: BoundingBox
    geotransform: Geotransform
    name: Optional[str] = None
    filename: Optional[str] = None

    def with_source(
        self,
        path: Union[str, Path],
        filename: Optional[str] = None,
    ) -> 'GeoReference':
        """Return a copy with ``name`` and ``filename`` taken from *path*."""
        path = Path(path)
        return replace(
            self,
            name=path.stem,
            filename=filename if filename is not None else str(path),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summary report record for this image."""
        return {
            "bbox": self.bbox.to_dict(),
            "size": self.size.to_dict(),
            "name": self.name,
            "filename": self.filename,
        }
