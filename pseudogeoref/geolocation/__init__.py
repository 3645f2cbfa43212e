# -*- coding: utf-8 -*-
"""
Geolocation Module - Synthetic placement of images in a world extent.

Computes the bounding box and geotransform of an image from its pixel
size, produces CRS well-known-text, and maps pixel coordinates to world
coordinates for a computed placement.

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

from pseudogeoref.geolocation.affine import SyntheticGeolocation
from pseudogeoref.geolocation.crs import crs_to_esri_wkt, is_geographic
from pseudogeoref.geolocation.reference import (
    build_reference,
    compute_geotransform,
    compute_reference,
)

__all__ = [
    'SyntheticGeolocation',
    'build_reference',
    'compute_geotransform',
    'compute_reference',
    'crs_to_esri_wkt',
    'is_geographic',
]
