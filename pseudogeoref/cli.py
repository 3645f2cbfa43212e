# -*- coding: utf-8 -*-
"""
Command Line - ``pseudogeoref [options] DIRECTORY ...``

Writes a world file (``.wld``) and a projection file (``.prj``) next to
every JPEG, PNG, GIF and TIFF image in the given directories, placing each
image in the center of a fixed world extent so GIS tools can display it.
The placement is synthetic: it only depends on the pixel size of the image.

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
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

# Pseudogeoref internal
from pseudogeoref.batch import BatchResult, georeference_directory
from pseudogeoref.config import load_config, parse_enum
from pseudogeoref.exceptions import PseudoGeorefError
from pseudogeoref.IO.report import write_report
from pseudogeoref.vocabulary import (
    ExtentPreset,
    FailurePolicy,
    FitMode,
    WorldFileStyle,
)

logger = logging.getLogger(__name__)

_EPILOG = """\
For each image IMAGE.EXT two sidecar files are written:

  IMAGE.wld  world file with the six affine coefficients
  IMAGE.prj  well-known-text of the coordinate reference system

Existing sidecar files are overwritten. The placement is not a real
georeference; it only lets GIS software display the image at a plausible
world position.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns
    -------
    argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="pseudogeoref",
        description="Pseudo-georeference the images in one or more directories.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directories",
        nargs="+",
        type=Path,
        metavar="DIRECTORY",
        help="Directory containing images.",
    )
    parser.add_argument(
        "-j", "--json",
        type=Path,
        default=None,
        metavar="JSON",
        help="Write a JSON file with bounding boxes and sizes of the images.",
    )
    parser.add_argument(
        "--extent",
        choices=[p.value for p in ExtentPreset],
        default=None,
        help="World extent to place images into (default: web-mercator).",
    )
    parser.add_argument(
        "--fit",
        choices=[m.value for m in FitMode],
        default=None,
        help="Aspect fitting arithmetic (default: legacy).",
    )
    parser.add_argument(
        "--world-file-style",
        choices=[s.value for s in WorldFileStyle],
        default=None,
        help="World file naming: .wld (generic) or .jgw/.pgw/.tfw (esri).",
    )
    parser.add_argument(
        "--include-bmp",
        action="store_true",
        help="Also process .bmp images.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report failing images and continue instead of stopping.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of images processed in parallel (default: 1).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    Parameters
    ----------
    argv : List[str], optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 if any image or directory
        failed.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        overrides = {}
        if args.extent is not None:
            overrides['extent_preset'] = parse_enum(ExtentPreset, args.extent)
        if args.fit is not None:
            overrides['fit_mode'] = parse_enum(FitMode, args.fit)
        if args.world_file_style is not None:
            overrides['world_file_style'] = parse_enum(
                WorldFileStyle, args.world_file_style
            )
        if args.include_bmp:
            overrides['include_bmp'] = True
        if args.keep_going:
            overrides['policy'] = FailurePolicy.CONTINUE
        if args.workers is not None:
            overrides['workers'] = args.workers
        config = replace(config, **overrides)
    except PseudoGeorefError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for directory in args.directories:
        if not directory.is_dir():
            print(f"error: Path {directory} is not a directory", file=sys.stderr)
            return 1

    logger.info("Running pseudogeoref on %d director(y/ies)", len(args.directories))

    try:
        result: BatchResult = georeference_directory(args.directories, config)
    except PseudoGeorefError as e:
        print(f"error: {e.describe()}", file=sys.stderr)
        return 1

    for failure in result.failures:
        print(f"error: {failure.describe()}", file=sys.stderr)

    if args.json is not None:
        try:
            write_report(args.json, result.references)
        except PseudoGeorefError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    logger.info(
        "Pseudo-georeferenced %d image(s), %d failed",
        len(result.references), len(result.failures),
    )
    return 0 if result.ok else 1
