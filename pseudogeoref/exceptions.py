# -*- coding: utf-8 -*-
"""
Pseudogeoref Exception Hierarchy - Tagged errors for per-image failures.

Every failure that can abort the processing of a single image is raised as
a subclass of ``PseudoGeorefError``. Each subclass carries an ``ErrorKind``
tag so batch drivers can report failures by kind without string matching,
and also subclasses the matching built-in exception so callers that only
know about ``OSError`` or ``ValueError`` keep working.

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
from pathlib import Path
from typing import Optional, Union

# Pseudogeoref internal
from pseudogeoref.vocabulary import ErrorKind


class PseudoGeorefError(Exception):
    """Base exception for all pseudogeoref errors.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    path : str or Path, optional
        File the failure relates to, if any.
    """

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"

    def describe(self) -> str:
        """Diagnostic line ``path: kind: message``, without the path if unset."""
        if self.path is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.path}: {self.kind.value}: {self.message}"


class GeorefIOError(PseudoGeorefError, OSError):
    """File could not be opened, created, or written.

    Raised for missing or unreadable images and for sidecar files that
    cannot be written (permission denied, disk full, invalid path).
    """

    kind = ErrorKind.IO


class DecodeError(PseudoGeorefError, ValueError):
    """No decoder could extract pixel dimensions from a file.

    Also raised when a world file cannot be parsed back into a
    geotransform.
    """

    kind = ErrorKind.DECODE


class EncodingError(PseudoGeorefError, ValueError):
    """A path or file name cannot be represented as UTF-8 text."""

    kind = ErrorKind.ENCODING


class ValidationError(PseudoGeorefError, ValueError):
    """Invalid input values, parameters, or configuration.

    Raised for zero or negative raster dimensions, degenerate world
    extents, malformed geotransforms, and unknown configuration values.
    """

    kind = ErrorKind.VALIDATION
