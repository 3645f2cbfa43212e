# -*- coding: utf-8 -*-
"""
IO Module - Reading image dimensions and writing georeferencing sidecars.

Dependencies
------------
Pillow
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

from pseudogeoref.IO.catalog import discover_images, is_supported_extension
from pseudogeoref.IO.dimensions import (
    DimensionProbe,
    DimensionReader,
    JpegHeaderProbe,
    PillowDecodeProbe,
    read_dimensions,
)
from pseudogeoref.IO.report import load_report, write_report
from pseudogeoref.IO.sidecar import (
    esri_world_file_extension,
    format_world_value,
    projection_file_path,
    read_world_file,
    sidecar_path,
    world_file_path,
    write_projection_file,
    write_world_file,
)

__all__ = [
    # Discovery
    'discover_images',
    'is_supported_extension',
    # Dimension probes
    'DimensionProbe',
    'DimensionReader',
    'JpegHeaderProbe',
    'PillowDecodeProbe',
    'read_dimensions',
    # Sidecars
    'esri_world_file_extension',
    'format_world_value',
    'projection_file_path',
    'read_world_file',
    'sidecar_path',
    'world_file_path',
    'write_projection_file',
    'write_world_file',
    # Reports
    'load_report',
    'write_report',
]
