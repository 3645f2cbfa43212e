# -*- coding: utf-8 -*-
"""
Sidecar Writer - World files and projection files next to an image.

A world file is six lines of plain text holding the geotransform in fixed
order (see http://en.wikipedia.org/wiki/World_file)::

    pixel size in the x-direction in map units/pixel
    rotation about y-axis
    rotation about x-axis
    pixel size in the y-direction, almost always negative
    x-coordinate of the upper left pixel
    y-coordinate of the upper left pixel

A projection file holds the well-known-text of the coordinate reference
system. Both are created or overwritten; nothing is written atomically, so
an I/O failure can leave a truncated sidecar behind.

Dependencies
------------
numpy

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
import logging
from pathlib import Path
from typing import Union

# Third-party
import numpy as np

# Pseudogeoref internal
from pseudogeoref.config import PROJECTION_FILE_EXTENSION, WORLD_FILE_EXTENSION
from pseudogeoref.exceptions import DecodeError, GeorefIOError, ValidationError
from pseudogeoref.models import Geotransform
from pseudogeoref.vocabulary import WorldFileStyle

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def format_world_value(value: float) -> str:
    """Format one geotransform value as a positional decimal.

    Uses the shortest digit string that reads back to the same double and
    never switches to exponent notation, e.g. ``0.17578125``, ``-180``,
    ``0``.
    """
    return np.format_float_positional(float(value), unique=True, trim='-')


def esri_world_file_extension(image_suffix: str) -> str:
    """ESRI world file extension for an image suffix.

    First and last letter of the image extension followed by ``w``:
    ``.jpg`` -> ``jgw``, ``.tiff`` -> ``tfw``, ``.png`` -> ``pgw``.
    """
    ext = image_suffix.lstrip('.').lower()
    if not ext:
        return WORLD_FILE_EXTENSION
    if len(ext) < 2:
        return f"{ext}w"
    return f"{ext[0]}{ext[-1]}w"


def sidecar_path(image_path: PathLike, extension: str) -> Path:
    """Path of a sidecar next to *image_path* with its suffix replaced."""
    return Path(image_path).with_suffix('.' + extension.lstrip('.'))


def world_file_path(
    image_path: PathLike,
    style: WorldFileStyle = WorldFileStyle.GENERIC,
) -> Path:
    """World file path for an image under the given naming style."""
    image_path = Path(image_path)
    if style is WorldFileStyle.ESRI:
        return sidecar_path(image_path, esri_world_file_extension(image_path.suffix))
    return sidecar_path(image_path, WORLD_FILE_EXTENSION)


def projection_file_path(image_path: PathLike) -> Path:
    """Projection file path for an image."""
    return sidecar_path(image_path, PROJECTION_FILE_EXTENSION)


def write_world_file(path: PathLike, geotransform: Geotransform) -> None:
    """Write *geotransform* as a six-line world file.

    Parameters
    ----------
    path : str or Path
        World file to create or overwrite.
    geotransform : Geotransform
        Coefficients to write.

    Raises
    ------
    GeorefIOError
        If the file cannot be created or written.
    """
    text = ''.join(f"{format_world_value(v)}\n" for v in geotransform.values())
    try:
        with open(path, 'w', encoding='ascii', newline='\n') as f:
            f.write(text)
    except OSError as e:
        raise GeorefIOError(f"Cannot write world file: {e}", path=path) from e
    logger.debug("Wrote world file %s", path)


def write_projection_file(path: PathLike, crs_text: str) -> None:
    """Write a CRS description verbatim to a projection file.

    Raises
    ------
    GeorefIOError
        If the file cannot be created or written.
    """
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(crs_text)
    except OSError as e:
        raise GeorefIOError(f"Cannot write projection file: {e}", path=path) from e
    logger.debug("Wrote projection file %s", path)


def read_world_file(path: PathLike) -> Geotransform:
    """Parse a world file back into a ``Geotransform``.

    Blank lines and surrounding whitespace are ignored.

    Raises
    ------
    GeorefIOError
        If the file cannot be read.
    DecodeError
        If it does not hold exactly six numbers.
    """
    try:
        with open(path, 'r', encoding='ascii') as f:
            lines = [line.strip() for line in f if line.strip()]
    except OSError as e:
        raise GeorefIOError(f"Cannot read world file: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"World file is not ASCII text: {e}", path=path) from e

    if len(lines) != 6:
        raise DecodeError(
            f"World file must have 6 values, found {len(lines)}", path=path
        )
    try:
        return Geotransform.from_values(float(line) for line in lines)
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"Malformed world file: {e}", path=path) from e
