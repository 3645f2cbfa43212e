# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for pseudogeoref.

Single source of truth for the controlled vocabularies used across the
package: error kinds, world extent presets, aspect fit modes, batch failure
policies, and world file naming styles. Configuration files and command-line
flags are parsed into these values so everything downstream is typo-free.

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

from enum import Enum


class ErrorKind(Enum):
    """Category of a per-image failure."""

    IO = "io"
    DECODE = "decode"
    ENCODING = "encoding"
    VALIDATION = "validation"


class ExtentPreset(Enum):
    """Fixed world extents an image can be placed into.

    ``WGS84`` covers the globe in geographic degrees (EPSG:4326).
    ``WEB_MERCATOR`` covers the projected Web-Mercator plane in meters
    (EPSG:3857).
    """

    WGS84 = "wgs84"
    WEB_MERCATOR = "web-mercator"


class FitMode(Enum):
    """How the image aspect ratio is fitted into the world extent.

    ``LEGACY`` reproduces the historical arithmetic bit-for-bit, which
    scales one axis by the image ratio. ``PRESERVE_ASPECT`` letterboxes
    the image so the bounding box has the image's own aspect ratio.
    """

    LEGACY = "legacy"
    PRESERVE_ASPECT = "preserve-aspect"


class FailurePolicy(Enum):
    """What a batch run does when one image fails."""

    FAIL_FAST = "fail-fast"
    CONTINUE = "continue"


class WorldFileStyle(Enum):
    """Naming convention for world file sidecars.

    ``GENERIC`` always uses ``.wld``. ``ESRI`` derives the extension from
    the image suffix (``.jpg`` -> ``.jgw``, ``.tif`` -> ``.tfw``).
    """

    GENERIC = "generic"
    ESRI = "esri"
