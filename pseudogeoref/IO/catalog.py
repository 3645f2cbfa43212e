# -*- coding: utf-8 -*-
"""
Catalog Module - Image discovery on disk.

Lists the image files of a directory that pseudo-georeferencing should
process, filtered by a fixed set of extensions.

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
from typing import Iterable, List, Optional, Union

# Pseudogeoref internal
from pseudogeoref.config import SUPPORTED_EXTENSIONS
from pseudogeoref.exceptions import GeorefIOError


def is_supported_extension(
    path: Union[str, Path],
    extensions: Optional[Iterable[str]] = None,
) -> bool:
    """True if the suffix of *path* is one of *extensions* (case-insensitive).

    Parameters
    ----------
    path : str or Path
        File path or name.
    extensions : Iterable[str], optional
        Extensions with or without a leading dot. Defaults to
        ``SUPPORTED_EXTENSIONS``.
    """
    if extensions is None:
        extensions = SUPPORTED_EXTENSIONS
    suffix = Path(path).suffix.lower().lstrip('.')
    if not suffix:
        return False
    return suffix in {e.lower().lstrip('.') for e in extensions}


def discover_images(
    directory: Union[str, Path],
    extensions: Optional[Iterable[str]] = None,
) -> List[Path]:
    """List supported image files directly inside *directory*.

    Subdirectories are not searched and sidecar files are ignored because
    their extensions are not image extensions.

    Parameters
    ----------
    directory : str or Path
        Directory to scan.
    extensions : Iterable[str], optional
        Extensions to accept. Defaults to ``SUPPORTED_EXTENSIONS``.

    Returns
    -------
    List[Path]
        Matching regular files sorted by name.

    Raises
    ------
    NotADirectoryError
        If *directory* is not a directory.
    GeorefIOError
        If *directory* cannot be listed.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Path {directory} is not a directory")

    if extensions is not None:
        extensions = frozenset(extensions)
    try:
        return sorted(
            entry for entry in directory.iterdir()
            if entry.is_file() and is_supported_extension(entry, extensions)
        )
    except OSError as e:
        raise GeorefIOError(f"Cannot list directory: {e}", path=directory) from e
