# -*- coding: utf-8 -*-
"""
Synthetic Geolocation - Pixel to world transforms for pseudo-georeferenced images.

Provides ``SyntheticGeolocation``, which applies the geotransform computed
for an image to pixel coordinates so the synthetic placement can be checked
or reported without a GIS. Forward and inverse mappings are vectorized with
numpy and use ``rasterio.transform.Affine`` for the matrix algebra.

Coordinate flow:

    pixel (row, col)  --affine-->  world CRS (x, y)  --pyproj-->  WGS84 (lat, lon)

When the world CRS is already geographic (EPSG:4326) the pyproj step is
skipped.

Dependencies
------------
numpy
rasterio
pyproj

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
from typing import Tuple, Union

# Third-party
import numpy as np
import pyproj
from rasterio.transform import Affine

# Pseudogeoref internal
from pseudogeoref.exceptions import ValidationError
from pseudogeoref.models import BoundingBox, Geotransform, GeoReference, RasterSize

ArrayLike = Union[float, np.ndarray]


class SyntheticGeolocation:
    """Geolocation for an image placed by a synthetic geotransform.

    The transform maps pixel ``(col, row)`` to world ``(x, y)`` as::

        x = origin_x + col * pixel_width + row * rotation_x
        y = origin_y + col * rotation_y + row * pixel_height

    Parameters
    ----------
    geotransform : Geotransform
        Six world file coefficients.
    size : RasterSize
        Pixel dimensions of the image.
    crs : str
        CRS of the world coordinates, i.e. the ``crs`` of the
        ``WorldExtent`` the reference was computed for.

    Attributes
    ----------
    shape : Tuple[int, int]
        Image shape ``(rows, cols)``.
    crs : str
        CRS of the world coordinates.

    Examples
    --------
    >>> from pseudogeoref.geolocation.reference import build_reference
    >>> from pseudogeoref.config import WORLD_EXTENTS
    >>> from pseudogeoref.vocabulary import ExtentPreset
    >>> extent = WORLD_EXTENTS[ExtentPreset.WGS84]
    >>> ref = build_reference(RasterSize(400, 200), extent)
    >>> geo = SyntheticGeolocation.from_reference(ref, extent.crs)
    >>> x, y = geo.image_to_world(0, 0)
    """

    def __init__(
        self,
        geotransform: Geotransform,
        size: RasterSize,
        crs: str,
    ) -> None:
        if not isinstance(geotransform, Geotransform):
            raise ValidationError(
                f"geotransform must be a Geotransform, got "
                f"{type(geotransform).__name__}"
            )
        self._transform: Affine = geotransform.to_affine()
        if self._transform.is_degenerate:
            raise ValidationError(f"Geotransform {geotransform.values()} is not invertible")
        self._inverse: Affine = ~self._transform

        self.geotransform = geotransform
        self.shape: Tuple[int, int] = (size.height, size.width)
        self.crs = crs

        crs_obj = pyproj.CRS(crs)
        self._is_geographic = crs_obj.is_geographic
        self._to_wgs84 = None
        if not self._is_geographic:
            self._to_wgs84 = pyproj.Transformer.from_crs(
                crs_obj, pyproj.CRS('EPSG:4326'), always_xy=True
            )

    @classmethod
    def from_reference(
        cls,
        reference: GeoReference,
        crs: str,
    ) -> 'SyntheticGeolocation':
        """Create from a ``GeoReference`` produced by the calculator."""
        return cls(reference.geotransform, reference.size, crs)

    @property
    def transform(self) -> Affine:
        return self._transform

    def image_to_world(
        self,
        rows: ArrayLike,
        cols: ArrayLike,
    ) -> Tuple[ArrayLike, ArrayLike]:
        """Map pixel coordinates to world coordinates.

        Parameters
        ----------
        rows, cols : float or np.ndarray
            Pixel row and column coordinates. Arrays must broadcast.

        Returns
        -------
        Tuple
            ``(xs, ys)`` in the world CRS; scalars in, scalars out.
        """
        scalar = np.isscalar(rows) and np.isscalar(cols)
        rows = np.asarray(rows, dtype=np.float64)
        cols = np.asarray(cols, dtype=np.float64)

        t = self._transform
        xs = t.c + cols * t.a + rows * t.b
        ys = t.f + cols * t.d + rows * t.e

        if scalar:
            return float(xs), float(ys)
        return xs, ys

    def world_to_image(
        self,
        xs: ArrayLike,
        ys: ArrayLike,
    ) -> Tuple[ArrayLike, ArrayLike]:
        """Map world coordinates back to (fractional) pixel coordinates.

        Returns
        -------
        Tuple
            ``(rows, cols)``; scalars in, scalars out.
        """
        scalar = np.isscalar(xs) and np.isscalar(ys)
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)

        inv = self._inverse
        cols = inv.c + xs * inv.a + ys * inv.b
        rows = inv.f + xs * inv.d + ys * inv.e

        if scalar:
            return float(rows), float(cols)
        return rows, cols

    def image_to_latlon(
        self,
        rows: ArrayLike,
        cols: ArrayLike,
    ) -> Tuple[ArrayLike, ArrayLike]:
        """Map pixel coordinates to WGS84 ``(lats, lons)``."""
        xs, ys = self.image_to_world(rows, cols)
        if self._is_geographic:
            return ys, xs
        lons, lats = self._to_wgs84.transform(xs, ys)
        return lats, lons

    def footprint(self) -> np.ndarray:
        """World coordinates of the four image corners.

        Returns
        -------
        np.ndarray
            Shape ``(4, 2)`` array of ``(x, y)`` in the order upper-left,
            upper-right, lower-right, lower-left.
        """
        n_rows, n_cols = self.shape
        rows = np.array([0, 0, n_rows, n_rows], dtype=np.float64)
        cols = np.array([0, n_cols, n_cols, 0], dtype=np.float64)
        xs, ys = self.image_to_world(rows, cols)
        return np.column_stack([xs, ys])

    def bounds(self) -> BoundingBox:
        """Axis-aligned bounding box of the footprint."""
        corners = self.footprint()
        return BoundingBox(
            min_x=float(corners[:, 0].min()),
            min_y=float(corners[:, 1].min()),
            max_x=float(corners[:, 0].max()),
            max_y=float(corners[:, 1].max()),
        )
