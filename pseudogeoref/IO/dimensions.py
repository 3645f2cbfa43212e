# -*- coding: utf-8 -*-
"""
Dimension Reader - Discover the pixel size of an image file.

Reading dimensions is a two-tier strategy. Cheap format-specific probes
parse only the encoded header (``JpegHeaderProbe`` walks JPEG markers up to
the frame header). If no fast probe recognises the file, a format-agnostic
fallback fully decodes it with Pillow and takes the size of the loaded
image. Full decoding of large rasters is far slower than a header read, so
the fast path only exists for latency; its failures are logged at DEBUG
level and never surfaced. Only the fallback's failures reach the caller.

Dependencies
------------
Pillow

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
import struct
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Sequence, Union

# Third-party
from PIL import Image, UnidentifiedImageError

# Pseudogeoref internal
from pseudogeoref.exceptions import (
    DecodeError,
    GeorefIOError,
    ValidationError,
)
from pseudogeoref.models import RasterSize

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Start-of-frame markers carrying the image size. C4 (DHT), C8 (JPG) and
# CC (DAC) share the range but are not frame headers.
_SOF_MARKERS = frozenset(
    {0xC0, 0xC1, 0xC2, 0xC3, 0xC5, 0xC6, 0xC7,
     0xC9, 0xCA, 0xCB, 0xCD, 0xCE, 0xCF}
)
# Markers without a length field
_STANDALONE_MARKERS = frozenset({0x01} | set(range(0xD0, 0xD8)))
_SOI = b'\xff\xd8'
_EOI = 0xD9
_SOS = 0xDA

# Large rasters are measured, never rejected as decompression bombs
Image.MAX_IMAGE_PIXELS = None

# Errors Pillow raises for content it cannot identify or decode.
_PIL_DECODE_ERRORS = (
    UnidentifiedImageError,
    OSError,
    ValueError,
    SyntaxError,
    EOFError,
    struct.error,
)


class DimensionProbe(Protocol):
    """Anything that can determine the pixel size of an image file.

    Implementations raise ``GeorefIOError`` when the file cannot be read
    and ``DecodeError`` when they do not understand its content.
    """

    name: str

    def probe(self, path: PathLike) -> RasterSize:
        ...


def _read_exact(stream: BinaryIO, n: int) -> bytes:
    data = stream.read(n)
    if len(data) != n:
        raise DecodeError("Unexpected end of JPEG data")
    return data


class JpegHeaderProbe:
    """Read the declared size from a JPEG frame header.

    Walks the marker segments after SOI, skipping each by its length,
    until the first SOFn segment, and returns its width and height. No
    entropy-coded data is touched.

    Examples
    --------
    >>> JpegHeaderProbe().probe('photo.jpg')
    RasterSize(width=4000, height=3000)
    """

    name = 'jpeg-header'

    def probe(self, path: PathLike) -> RasterSize:
        try:
            stream = open(path, 'rb')
        except OSError as e:
            raise GeorefIOError(f"Cannot open image: {e}", path=path) from e

        with stream:
            if stream.read(2) != _SOI:
                raise DecodeError("Not a JPEG file", path=path)

            while True:
                if _read_exact(stream, 1) != b'\xff':
                    raise DecodeError("Corrupt JPEG marker sequence", path=path)
                marker = _read_exact(stream, 1)[0]
                # Any number of 0xFF fill bytes may precede a marker
                while marker == 0xFF:
                    marker = _read_exact(stream, 1)[0]

                if marker in _STANDALONE_MARKERS:
                    continue
                if marker in (_EOI, _SOS):
                    raise DecodeError(
                        "No frame header before image data", path=path
                    )

                (length,) = struct.unpack('>H', _read_exact(stream, 2))
                if length < 2:
                    raise DecodeError(
                        f"Invalid segment length {length}", path=path
                    )

                if marker in _SOF_MARKERS:
                    _precision, height, width = struct.unpack(
                        '>BHH', _read_exact(stream, 5)
                    )
                    try:
                        return RasterSize(width, height)
                    except ValidationError as e:
                        # Height 0 defers to a DNL segment after the scan
                        raise DecodeError(str(e), path=path) from e

                stream.seek(length - 2, 1)


class PillowDecodeProbe:
    """Fully decode an image with Pillow and report its size.

    Works for every format Pillow can read (JPEG, PNG, GIF, BMP, TIFF and
    more), at the cost of loading all pixel data.
    """

    name = 'pillow-decode'

    def probe(self, path: PathLike) -> RasterSize:
        try:
            stream = open(path, 'rb')
        except OSError as e:
            raise GeorefIOError(f"Cannot open image: {e}", path=path) from e

        with stream:
            try:
                with Image.open(stream) as img:
                    img.load()
                    width, height = img.size
            except _PIL_DECODE_ERRORS as e:
                raise DecodeError(f"Cannot decode image: {e}", path=path) from e

        try:
            return RasterSize(width, height)
        except ValidationError as e:
            raise DecodeError(str(e), path=path) from e


class DimensionReader:
    """Try fast probes in order, then fall back to a full decode.

    Parameters
    ----------
    fast_probes : Sequence[DimensionProbe], optional
        Header-only probes tried first. Their failures are swallowed.
        Defaults to ``(JpegHeaderProbe(),)``.
    fallback : DimensionProbe, optional
        Format-agnostic probe whose failures propagate. Defaults to
        ``PillowDecodeProbe()``.
    """

    def __init__(
        self,
        fast_probes: Optional[Sequence[DimensionProbe]] = None,
        fallback: Optional[DimensionProbe] = None,
    ) -> None:
        self.fast_probes = tuple(
            (JpegHeaderProbe(),) if fast_probes is None else fast_probes
        )
        self.fallback = PillowDecodeProbe() if fallback is None else fallback

    def read(self, path: PathLike) -> RasterSize:
        """Return the pixel dimensions of the image at *path*.

        Raises
        ------
        GeorefIOError
            If the file is missing or unreadable.
        DecodeError
            If no decoder recognises the content.
        """
        for fast in self.fast_probes:
            try:
                size = fast.probe(path)
            except Exception as e:  # fast path misses are never fatal
                logger.debug("%s probe missed %s: %s", fast.name, path, e)
                continue
            logger.debug(
                "%s probe read %s: %dx%d",
                fast.name, path, size.width, size.height,
            )
            return size

        size = self.fallback.probe(path)
        logger.debug(
            "%s probe read %s: %dx%d",
            self.fallback.name, path, size.width, size.height,
        )
        return size


_DEFAULT_READER = DimensionReader()


def read_dimensions(path: PathLike) -> RasterSize:
    """Pixel dimensions of an image using the default probe chain.

    Parameters
    ----------
    path : str or Path
        Image file.

    Returns
    -------
    RasterSize

    Raises
    ------
    GeorefIOError
        If the file is missing or unreadable.
    DecodeError
        If no decoder recognises the content.
    """
    return _DEFAULT_READER.read(path)
