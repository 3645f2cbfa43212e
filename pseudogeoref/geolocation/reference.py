# -*- coding: utf-8 -*-
"""
Reference Calculator - Fit an image into a fixed world extent.

Derives the synthetic bounding box of an image from its pixel dimensions
and the active world extent, and the six-parameter geotransform that maps
its pixels onto that box. The box is always centered on the midpoint of the
world extent.

Two fit modes are available. ``FitMode.LEGACY`` reproduces the historical
arithmetic exactly, so world files written by earlier releases are matched
bit-for-bit::

    extent_img = extent_world
    if ratio_world > ratio_img:
        extent_img.x /= ratio_img
    else:
        extent_img.y /= ratio_img

This does not in general keep the image aspect ratio. ``FitMode.PRESERVE_ASPECT``
letterboxes instead, shrinking whichever axis would overflow so that
``bbox.width / bbox.height == width / height``.

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
from typing import Tuple

# Pseudogeoref internal
from pseudogeoref.exceptions import ValidationError
from pseudogeoref.models import (
    BoundingBox,
    Geotransform,
    GeoReference,
    RasterSize,
    WorldExtent,
)
from pseudogeoref.vocabulary import FitMode


def _validate(size: RasterSize, extent: WorldExtent) -> None:
    if not isinstance(size, RasterSize):
        raise ValidationError(
            f"size must be a RasterSize, got {type(size).__name__}"
        )
    if not isinstance(extent, WorldExtent):
        raise ValidationError(
            f"extent must be a WorldExtent, got {type(extent).__name__}"
        )
    # object.__setattr__ can bypass RasterSize.__post_init__
    if size.width <= 0 or size.height <= 0:
        raise ValidationError(
            f"Raster dimensions must be positive, got {size.width}x{size.height}"
        )


def compute_geotransform(bbox: BoundingBox, size: RasterSize) -> Geotransform:
    """Geotransform mapping the pixels of *size* onto *bbox*.

    Parameters
    ----------
    bbox : BoundingBox
        Footprint of the image in world coordinates.
    size : RasterSize
        Pixel dimensions of the image.

    Returns
    -------
    Geotransform
        North-up transform with zero rotation, origin at the upper-left
        corner ``(bbox.min_x, bbox.max_y)``.
    """
    if size.width <= 0 or size.height <= 0:
        raise ValidationError(
            f"Raster dimensions must be positive, got {size.width}x{size.height}"
        )
    return Geotransform(
        pixel_width=bbox.width / float(size.width),
        rotation_y=0.0,
        rotation_x=0.0,
        pixel_height=-(bbox.height / float(size.height)),
        origin_x=bbox.min_x,
        origin_y=bbox.max_y,
    )


def compute_reference(
    size: RasterSize,
    extent: WorldExtent,
    fit_mode: FitMode = FitMode.LEGACY,
) -> Tuple[BoundingBox, Geotransform]:
    """Compute the synthetic footprint and geotransform of an image.

    Parameters
    ----------
    size : RasterSize
        Pixel dimensions of the image.
    extent : WorldExtent
        World rectangle the image is placed into.
    fit_mode : FitMode, default=FitMode.LEGACY
        Aspect fitting arithmetic.

    Returns
    -------
    Tuple[BoundingBox, Geotransform]

    Raises
    ------
    ValidationError
        If *size* or *extent* are not valid value objects.

    Examples
    --------
    >>> from pseudogeoref.config import WORLD_EXTENTS
    >>> from pseudogeoref.vocabulary import ExtentPreset
    >>> bbox, gt = compute_reference(
    ...     RasterSize(2048, 1024), WORLD_EXTENTS[ExtentPreset.WGS84])
    >>> gt.values()
    (0.17578125, 0.0, 0.0, -0.087890625, -180.0, 45.0)
    """
    _validate(size, extent)

    extent_world = (extent.width, extent.height)
    ratio_world = extent_world[0] / extent_world[1]
    ratio_img = float(size.width) / float(size.height)

    extent_img = list(extent_world)
    if fit_mode is FitMode.LEGACY:
        if ratio_world > ratio_img:
            extent_img[0] = extent_img[0] / ratio_img
        else:
            extent_img[1] = extent_img[1] / ratio_img
    elif fit_mode is FitMode.PRESERVE_ASPECT:
        if ratio_world > ratio_img:
            extent_img[0] = extent_world[1] * ratio_img
        else:
            extent_img[1] = extent_world[0] / ratio_img
    else:
        raise ValidationError(f"Unknown fit mode {fit_mode!r}")

    center_x, center_y = extent.center

    bbox = BoundingBox(
        min_x=center_x - (extent_img[0] / 2.0),
        min_y=center_y - (extent_img[1] / 2.0),
        max_x=center_x + (extent_img[0] / 2.0),
        max_y=center_y + (extent_img[1] / 2.0),
    )
    return bbox, compute_geotransform(bbox, size)


def build_reference(
    size: RasterSize,
    extent: WorldExtent,
    fit_mode: FitMode = FitMode.LEGACY,
) -> GeoReference:
    """Same as :func:`compute_reference`, bundled into a ``GeoReference``."""
    bbox, geotransform = compute_reference(size, extent, fit_mode)
    return GeoReference(size=size, bbox=bbox, geotransform=geotransform)
