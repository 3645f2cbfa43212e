# -*- coding: utf-8 -*-
"""
Summary Report - JSON list of the bounding boxes and sizes of a batch.

Each record has the shape::

    {"bbox": {"minx": ..., "miny": ..., "maxx": ..., "maxy": ...},
     "size": {"width": ..., "height": ...},
     "name": "<file stem>",
     "filename": "<image path>"}

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
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

# Pseudogeoref internal
from pseudogeoref.exceptions import DecodeError, GeorefIOError
from pseudogeoref.models import GeoReference

logger = logging.getLogger(__name__)


def write_report(
    path: Union[str, Path],
    references: Iterable[GeoReference],
) -> None:
    """Write the summary records of *references* as a JSON array.

    Raises
    ------
    GeorefIOError
        If the report file cannot be written.
    """
    records = [ref.to_dict() for ref in references]
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2)
            f.write('\n')
    except OSError as e:
        raise GeorefIOError(f"Could not write to json file: {e}", path=path) from e
    logger.info("Wrote summary of %d image(s) to %s", len(records), path)


def load_report(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read the records of a summary report.

    Raises
    ------
    GeorefIOError
        If the file cannot be read.
    DecodeError
        If it is not a JSON array.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise GeorefIOError(f"Cannot read report: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}", path=path) from e
    if not isinstance(data, list):
        raise DecodeError("Report must hold a JSON array", path=path)
    return data
