# -*- coding: utf-8 -*-
"""
Batch Driver - Pseudo-georeference every image in a set of directories.

For each supported image the driver reads its pixel dimensions, computes
the synthetic reference for the configured world extent, and writes the
world and projection sidecars next to it. Images are independent of each
other, so they can optionally be processed on a thread pool.

Failure handling is explicit. ``FailurePolicy.FAIL_FAST`` re-raises the
first error and stops the run. ``FailurePolicy.CONTINUE`` records each
failure in the returned ``BatchResult`` and carries on.

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
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

# Third-party
from joblib import Parallel, delayed

# Pseudogeoref internal
from pseudogeoref.config import GeorefConfig
from pseudogeoref.exceptions import EncodingError, PseudoGeorefError
from pseudogeoref.geolocation.reference import build_reference
from pseudogeoref.IO.catalog import discover_images
from pseudogeoref.IO.dimensions import DimensionReader
from pseudogeoref.IO.sidecar import (
    projection_file_path,
    world_file_path,
    write_projection_file,
    write_world_file,
)
from pseudogeoref.models import GeoReference
from pseudogeoref.vocabulary import ErrorKind, FailurePolicy

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FileFailure:
    """An image that could not be pseudo-georeferenced."""

    path: Path
    error: PseudoGeorefError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    def describe(self) -> str:
        return f"{self.path}: {self.kind.value}: {self.error.message}"


@dataclass
class BatchResult:
    """Outcome of a batch run, in input order."""

    references: List[GeoReference] = field(default_factory=list)
    failures: List[FileFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def extend(self, other: 'BatchResult') -> None:
        self.references.extend(other.references)
        self.failures.extend(other.failures)


def path_to_text(path: Union[PathLike, bytes]) -> str:
    """Path as UTF-8 representable text.

    Raises
    ------
    EncodingError
        If the path holds bytes that are not valid UTF-8.
    """
    if isinstance(path, bytes):
        try:
            return path.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(f"Path is not valid UTF-8: {e}", path=path) from e

    text = os.fspath(path)
    try:
        text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"Path cannot be encoded as UTF-8: {e}", path=repr(text)
        ) from e
    return text


def pseudo_georeference(
    image_path: PathLike,
    config: Optional[GeorefConfig] = None,
    reader: Optional[DimensionReader] = None,
) -> GeoReference:
    """Pseudo-georeference a single image and write its sidecars.

    Parameters
    ----------
    image_path : str or Path
        Image file.
    config : GeorefConfig, optional
        Run settings. Defaults to ``GeorefConfig()``.
    reader : DimensionReader, optional
        Dimension probe chain. Defaults to ``DimensionReader()``.

    Returns
    -------
    GeoReference
        Size, bounding box, geotransform, name, and filename.

    Raises
    ------
    GeorefIOError
        If the image or a sidecar cannot be read or written.
    DecodeError
        If the image dimensions cannot be determined. No sidecar is
        written in this case.
    EncodingError
        If the path is not representable as UTF-8.
    """
    config = GeorefConfig() if config is None else config
    reader = DimensionReader() if reader is None else reader
    image_path = Path(image_path)

    logger.info("pseudo-georeferencing %s", image_path)

    size = reader.read(image_path)
    reference = build_reference(size, config.extent, config.fit_mode)
    reference = reference.with_source(image_path, path_to_text(image_path))

    write_world_file(
        world_file_path(image_path, config.world_file_style),
        reference.geotransform,
    )
    write_projection_file(projection_file_path(image_path), config.crs_wkt)
    return reference


def _collect(
    paths: Sequence[Path],
    results: Iterable,
    policy: FailurePolicy,
) -> BatchResult:
    batch = BatchResult()
    for path, outcome in zip(paths, results):
        if isinstance(outcome, GeoReference):
            batch.references.append(outcome)
            continue
        if policy is FailurePolicy.FAIL_FAST:
            raise outcome
        failure = FileFailure(path=path, error=outcome)
        logger.debug("Skipping %s", failure.describe())
        batch.failures.append(failure)
    return batch


def georeference_paths(
    paths: Iterable[PathLike],
    config: Optional[GeorefConfig] = None,
    policy: Optional[FailurePolicy] = None,
    workers: Optional[int] = None,
    reader: Optional[DimensionReader] = None,
) -> BatchResult:
    """Pseudo-georeference already-filtered image paths.

    Parameters
    ----------
    paths : Iterable[str or Path]
        Image files in processing order.
    config : GeorefConfig, optional
        Run settings. Defaults to ``GeorefConfig()``.
    policy : FailurePolicy, optional
        Overrides ``config.policy``.
    workers : int, optional
        Overrides ``config.workers``. Values above 1 use a thread pool;
        results are still reported in input order.
    reader : DimensionReader, optional
        Dimension probe chain shared by all images.

    Returns
    -------
    BatchResult

    Raises
    ------
    PseudoGeorefError
        The first per-image error, under ``FailurePolicy.FAIL_FAST``.
    """
    config = GeorefConfig() if config is None else config
    policy = config.policy if policy is None else policy
    workers = config.workers if workers is None else workers
    reader = DimensionReader() if reader is None else reader
    paths = [Path(p) for p in paths]

    def run(path: Path):
        try:
            return pseudo_georeference(path, config, reader)
        except PseudoGeorefError as e:
            return e

    if workers <= 1 or len(paths) <= 1:
        if policy is FailurePolicy.FAIL_FAST:
            # Stop at the first failure without touching later images
            return BatchResult(
                references=[pseudo_georeference(p, config, reader) for p in paths]
            )
        return _collect(paths, (run(p) for p in paths), policy)

    # Results arrive in input order; leaving the generator early drops
    # the images not yet dispatched
    outcomes = Parallel(n_jobs=workers, prefer="threads", return_as="generator")(
        delayed(run)(p) for p in paths
    )
    try:
        return _collect(paths, outcomes, policy)
    finally:
        outcomes.close()


def georeference_directory(
    directories: Union[PathLike, Iterable[PathLike]],
    config: Optional[GeorefConfig] = None,
    policy: Optional[FailurePolicy] = None,
    workers: Optional[int] = None,
    reader: Optional[DimensionReader] = None,
) -> BatchResult:
    """Pseudo-georeference the supported images of one or more directories.

    Parameters
    ----------
    directories : str, Path, or Iterable of them
        Directories to scan (not recursively).
    config, policy, workers, reader
        As for :func:`georeference_paths`.

    Returns
    -------
    BatchResult
        Results of all directories, in directory then file-name order.

    Raises
    ------
    NotADirectoryError
        If an argument is not a directory.
    PseudoGeorefError
        The first per-image error, under ``FailurePolicy.FAIL_FAST``.
    """
    config = GeorefConfig() if config is None else config
    if isinstance(directories, (str, Path)):
        directories = [directories]

    result = BatchResult()
    for directory in directories:
        images = discover_images(directory, config.extensions)
        logger.info("Found %d image(s) in %s", len(images), directory)
        result.extend(
            georeference_paths(images, config, policy, workers, reader)
        )
    return result
