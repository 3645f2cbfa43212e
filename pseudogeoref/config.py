# -*- coding: utf-8 -*-
"""
Configuration - Run-time settings selected once at startup.

Holds the active world extent preset, the aspect fit mode, sidecar naming
and batch failure policy. Settings load from an optional JSON file with
environment variable overrides, and the command line can override both.

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
import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Type, TypeVar, Union

# Pseudogeoref internal
from pseudogeoref.exceptions import GeorefIOError, ValidationError
from pseudogeoref.geolocation.crs import crs_to_esri_wkt
from pseudogeoref.models import WorldExtent
from pseudogeoref.vocabulary import (
    ExtentPreset,
    FailurePolicy,
    FitMode,
    WorldFileStyle,
)

_E = TypeVar('_E', bound=Enum)

WORLD_EXTENTS: Dict[ExtentPreset, WorldExtent] = {
    ExtentPreset.WGS84: WorldExtent(-180.0, -90.0, 180.0, 90.0, crs='EPSG:4326'),
    ExtentPreset.WEB_MERCATOR: WorldExtent(
        -20026376.39, -20048966.10, 20026376.39, 20048966.10, crs='EPSG:3857',
    ),
}

SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset(
    {'jpg', 'jpeg', 'png', 'gif', 'tiff', 'tif'}
)

WORLD_FILE_EXTENSION = 'wld'
PROJECTION_FILE_EXTENSION = 'prj'

ENV_EXTENT = 'PSEUDOGEOREF_EXTENT'
ENV_FIT = 'PSEUDOGEOREF_FIT'


def parse_enum(enum_cls: Type[_E], value: Union[str, _E]) -> _E:
    """Convert a config or command-line string into *enum_cls*.

    Accepts the member value (``'web-mercator'``), the member name
    (``'WEB_MERCATOR'``), or an existing member. Underscores and dashes
    are interchangeable and matching is case-insensitive.

    Raises
    ------
    ValidationError
        If *value* names no member.
    """
    if isinstance(value, enum_cls):
        return value
    key = str(value).strip().lower().replace('_', '-')
    for member in enum_cls:
        if key in (member.value, member.name.lower().replace('_', '-')):
            return member
    choices = ', '.join(m.value for m in enum_cls)
    raise ValidationError(
        f"Unknown {enum_cls.__name__} {value!r}. Choose one of: {choices}"
    )


@dataclass(frozen=True)
class GeorefConfig:
    """Settings for a pseudo-georeferencing run.

    Parameters
    ----------
    extent_preset : ExtentPreset
        World extent images are placed into.
    fit_mode : FitMode
        Aspect fitting arithmetic.
    world_file_style : WorldFileStyle
        World file naming convention.
    include_bmp : bool
        Also pick up ``.bmp`` files in directory scans.
    policy : FailurePolicy
        Batch behaviour when an image fails.
    workers : int
        Number of worker threads; 1 processes files sequentially.
    """

    extent_preset: ExtentPreset = ExtentPreset.WEB_MERCATOR
    fit_mode: FitMode = FitMode.LEGACY
    world_file_style: WorldFileStyle = WorldFileStyle.GENERIC
    include_bmp: bool = False
    policy: FailurePolicy = FailurePolicy.FAIL_FAST
    workers: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) \
                or self.workers < 1:
            raise ValidationError(
                f"workers must be a positive integer, got {self.workers!r}"
            )

    @property
    def extent(self) -> WorldExtent:
        return WORLD_EXTENTS[self.extent_preset]

    @property
    def extensions(self) -> FrozenSet[str]:
        """Lower-case image extensions (without dot) picked up by scans."""
        if self.include_bmp:
            return SUPPORTED_EXTENSIONS | {'bmp'}
        return SUPPORTED_EXTENSIONS

    @property
    def crs_wkt(self) -> str:
        """Projection file content for the active extent."""
        return crs_to_esri_wkt(self.extent.crs)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> 'GeorefConfig':
        """Build a config from plain (JSON-like) values.

        Raises
        ------
        ValidationError
            On unknown keys or values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {unknown}")

        kwargs: Dict[str, Any] = {}
        if 'extent_preset' in data:
            kwargs['extent_preset'] = parse_enum(ExtentPreset, data['extent_preset'])
        if 'fit_mode' in data:
            kwargs['fit_mode'] = parse_enum(FitMode, data['fit_mode'])
        if 'world_file_style' in data:
            kwargs['world_file_style'] = parse_enum(
                WorldFileStyle, data['world_file_style']
            )
        if 'policy' in data:
            kwargs['policy'] = parse_enum(FailurePolicy, data['policy'])
        if 'include_bmp' in data:
            if not isinstance(data['include_bmp'], bool):
                raise ValidationError(
                    f"include_bmp must be true or false, got {data['include_bmp']!r}"
                )
            kwargs['include_bmp'] = data['include_bmp']
        if 'workers' in data:
            kwargs['workers'] = data['workers']
        return cls(**kwargs)


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> GeorefConfig:
    """Load settings from a JSON file, then apply environment overrides.

    Parameters
    ----------
    config_file : str or Path, optional
        JSON object with ``GeorefConfig`` field names as keys. If None,
        defaults are used.
    environ : Dict[str, str], optional
        Environment to read ``PSEUDOGEOREF_EXTENT`` and
        ``PSEUDOGEOREF_FIT`` from. Defaults to ``os.environ``.

    Returns
    -------
    GeorefConfig

    Raises
    ------
    GeorefIOError
        If *config_file* cannot be read.
    ValidationError
        If the file is not a JSON object or holds unknown values.
    """
    environ = os.environ if environ is None else environ

    data: Dict[str, Any] = {}
    if config_file is not None:
        config_path = Path(config_file)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise GeorefIOError(f"Cannot read config file: {e}", path=config_path) from e
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON: {e}", path=config_path) from e
        if not isinstance(data, dict):
            raise ValidationError("Config file must hold a JSON object", path=config_path)

    config = GeorefConfig.from_mapping(data)

    if environ.get(ENV_EXTENT):
        config = replace(
            config, extent_preset=parse_enum(ExtentPreset, environ[ENV_EXTENT])
        )
    if environ.get(ENV_FIT):
        config = replace(config, fit_mode=parse_enum(FitMode, environ[ENV_FIT]))
    return config
