# -*- coding: utf-8 -*-
"""
Pseudogeoref - Synthetic georeferencing for plain raster images.

Places JPEG, PNG, GIF and TIFF images at a plausible position inside a
fixed world extent, using nothing but their pixel dimensions, and writes
world files and projection files so GIS tools can display them.

Dependencies
------------
numpy
Pillow
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

__version__ = "0.1.0"

from pseudogeoref.exceptions import (
    PseudoGeorefError,
    GeorefIOError,
    DecodeError,
    EncodingError,
    ValidationError,
)
from pseudogeoref.vocabulary import (
    ErrorKind,
    ExtentPreset,
    FitMode,
    FailurePolicy,
    WorldFileStyle,
)
from pseudogeoref.models import (
    WorldExtent,
    RasterSize,
    BoundingBox,
    Geotransform,
    GeoReference,
)
from pseudogeoref.config import GeorefConfig, WORLD_EXTENTS, load_config
from pseudogeoref.geolocation.reference import compute_reference
from pseudogeoref.IO.dimensions import read_dimensions
from pseudogeoref.IO.sidecar import write_projection_file, write_world_file
from pseudogeoref.batch import (
    BatchResult,
    FileFailure,
    georeference_directory,
    georeference_paths,
    pseudo_georeference,
)

__all__ = [
    'PseudoGeorefError',
    'GeorefIOError',
    'DecodeError',
    'EncodingError',
    'ValidationError',
    'ErrorKind',
    'ExtentPreset',
    'FitMode',
    'FailurePolicy',
    'WorldFileStyle',
    'WorldExtent',
    'RasterSize',
    'BoundingBox',
    'Geotransform',
    'GeoReference',
    'GeorefConfig',
    'WORLD_EXTENTS',
    'load_config',
    'compute_reference',
    'read_dimensions',
    'write_world_file',
    'write_projection_file',
    'BatchResult',
    'FileFailure',
    'georeference_directory',
    'georeference_paths',
    'pseudo_georeference',
]
