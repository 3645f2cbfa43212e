# -*- coding: utf-8 -*-
"""
CRS Text - Well-known-text for the projection sidecar file.

Generates the ESRI-flavoured WKT1 description of a CRS with pyproj, which
is the dialect GIS desktop tools expect to find in a ``.prj`` file.

Dependencies
------------
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
from functools import lru_cache

# Third-party
import pyproj
from pyproj.enums import WktVersion
from pyproj.exceptions import CRSError

# Pseudogeoref internal
from pseudogeoref.exceptions import ValidationError


@lru_cache(maxsize=None)
def crs_to_esri_wkt(crs: str) -> str:
    """Return the ESRI WKT1 text for a CRS identifier.

    Parameters
    ----------
    crs : str
        Anything ``pyproj.CRS`` accepts, e.g. ``'EPSG:4326'``.

    Returns
    -------
    str
        Single-line WKT string, e.g. ``GEOGCS["GCS_WGS_1984",...]``.

    Raises
    ------
    ValidationError
        If pyproj does not recognise *crs* or cannot express it as ESRI WKT.
    """
    try:
        crs_obj = pyproj.CRS(crs)
    except CRSError as e:
        raise ValidationError(f"Unknown coordinate reference system {crs!r}: {e}") from e

    wkt = crs_obj.to_wkt(WktVersion.WKT1_ESRI)
    if not wkt:
        raise ValidationError(f"{crs!r} has no ESRI WKT representation")
    return wkt


def is_geographic(crs: str) -> bool:
    """True when *crs* has angular (longitude/latitude) axes."""
    return pyproj.CRS(crs).is_geographic
