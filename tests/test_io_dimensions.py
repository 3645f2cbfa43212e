# -*- coding: utf-8 -*-
"""
Dimension Reader Tests - Fast JPEG header path and Pillow fallback.

Uses synthetic images written with Pillow and hand-built JPEG marker
sequences.

Dependencies
------------
pytest
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

import logging
import struct

import numpy as np
import pytest
from PIL import Image

from pseudogeoref.exceptions import DecodeError, GeorefIOError
from pseudogeoref.IO.dimensions import (
    DimensionReader,
    JpegHeaderProbe,
    PillowDecodeProbe,
    read_dimensions,
)
from pseudogeoref.models import RasterSize


def _write_image(path, width, height, fmt=None, **save_kwargs):
    data = np.random.randint(0, 256, (height, width, 3), dtype=np.uint8)
    Image.fromarray(data).save(str(path), format=fmt, **save_kwargs)
    return path


def _sof_segment(width, height, marker=0xC0):
    # length 11: precision, height, width, one component
    body = struct.pack('>BHHB', 8, height, width, 1) + b'\x01\x11\x00'
    return bytes([0xFF, marker]) + struct.pack('>H', len(body) + 2) + body


class SpyProbe:
    """Records calls and delegates or fails on demand."""

    def __init__(self, name='spy', result=None, error=None):
        self.name = name
        self.result = result
        self.error = error
        self.calls = []

    def probe(self, path):
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.result


# ---------------------------------------------------------------------------
# JPEG header probe
# ---------------------------------------------------------------------------

class TestJpegHeaderProbe:
    """Marker walking without pixel decoding."""

    def test_baseline_jpeg(self, tmp_path):
        """Dimensions of a Pillow-written baseline JPEG."""
        path = _write_image(tmp_path / "a.jpg", 64, 48)
        assert JpegHeaderProbe().probe(path) == RasterSize(64, 48)

    def test_progressive_jpeg(self, tmp_path):
        """SOF2 frame headers are recognised."""
        path = _write_image(tmp_path / "p.jpg", 33, 17, progressive=True)
        assert JpegHeaderProbe().probe(path) == RasterSize(33, 17)

    def test_jpeg_with_wrong_extension(self, tmp_path):
        """Content decides, not the extension."""
        path = _write_image(tmp_path / "photo.png", 20, 10, fmt='JPEG')
        assert JpegHeaderProbe().probe(path) == RasterSize(20, 10)

    def test_fill_bytes_and_app_segment(self, tmp_path):
        """0xFF fill bytes and APPn segments before the frame are skipped."""
        data = (
            b'\xff\xd8'
            + b'\xff\xff\xff\xe0' + struct.pack('>H', 6) + b'JFIF'
            + b'\xff\xd0'  # standalone marker
            + _sof_segment(width=300, height=200, marker=0xC1)
        )
        path = tmp_path / "crafted.jpg"
        path.write_bytes(data)
        assert JpegHeaderProbe().probe(path) == RasterSize(300, 200)

    def test_png_is_not_jpeg(self, tmp_path):
        path = _write_image(tmp_path / "a.png", 8, 8)
        with pytest.raises(DecodeError, match="Not a JPEG"):
            JpegHeaderProbe().probe(path)

    def test_truncated_header(self, tmp_path):
        path = tmp_path / "short.jpg"
        path.write_bytes(b'\xff\xd8\xff\xe0\x00\x10JF')
        with pytest.raises(DecodeError):
            JpegHeaderProbe().probe(path)

    def test_scan_before_frame(self, tmp_path):
        path = tmp_path / "sos.jpg"
        path.write_bytes(b'\xff\xd8\xff\xda\x00\x02')
        with pytest.raises(DecodeError, match="No frame header"):
            JpegHeaderProbe().probe(path)

    def test_zero_height_frame(self, tmp_path):
        """A DNL-deferred height of 0 is not reported as a size."""
        path = tmp_path / "dnl.jpg"
        path.write_bytes(b'\xff\xd8' + _sof_segment(width=64, height=0))
        with pytest.raises(DecodeError, match="height"):
            JpegHeaderProbe().probe(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(GeorefIOError):
            JpegHeaderProbe().probe(tmp_path / "missing.jpg")


# ---------------------------------------------------------------------------
# Pillow fallback
# ---------------------------------------------------------------------------

class TestPillowDecodeProbe:
    """Full decoding for every supported format."""

    @pytest.mark.parametrize("name,fmt", [
        ("a.jpg", "JPEG"),
        ("a.png", "PNG"),
        ("a.gif", "GIF"),
        ("a.bmp", "BMP"),
        ("a.tif", "TIFF"),
    ])
    def test_formats(self, tmp_path, name, fmt):
        path = _write_image(tmp_path / name, 37, 21, fmt=fmt)
        assert PillowDecodeProbe().probe(path) == RasterSize(37, 21)

    def test_garbage_raises_decode_error(self, tmp_path):
        path = tmp_path / "bad.jpg"
        path.write_bytes(b"this is not an image at all")
        with pytest.raises(DecodeError, match="Cannot decode"):
            PillowDecodeProbe().probe(path)

    def test_missing_file_raises_io_error(self, tmp_path):
        with pytest.raises(GeorefIOError, match="Cannot open"):
            PillowDecodeProbe().probe(tmp_path / "missing.png")

    def test_directory_raises_io_error(self, tmp_path):
        with pytest.raises(GeorefIOError):
            PillowDecodeProbe().probe(tmp_path)

    def test_above_pillow_pixel_limit(self, tmp_path):
        """Valid rasters larger than Pillow's default bomb limit are measured."""
        path = tmp_path / "big.png"
        Image.new("1", (20000, 10000)).save(str(path))
        assert 20000 * 10000 > 178956970
        assert PillowDecodeProbe().probe(path) == RasterSize(20000, 10000)
        assert read_dimensions(path) == RasterSize(20000, 10000)


# ---------------------------------------------------------------------------
# Probe chain
# ---------------------------------------------------------------------------

class TestDimensionReader:
    """Fast path first, fallback second."""

    def test_jpeg_never_reaches_fallback(self, tmp_path):
        """A JPEG header is enough; the fallback is not called."""
        path = _write_image(tmp_path / "a.jpg", 64, 48)
        fallback = SpyProbe(error=AssertionError("fallback used"))
        reader = DimensionReader(fallback=fallback)
        assert reader.read(path) == RasterSize(64, 48)
        assert fallback.calls == []

    def test_truncated_jpeg_body_uses_header(self, tmp_path):
        """Only the header is needed, pixel data may be cut off."""
        path = _write_image(tmp_path / "a.jpg", 64, 48)
        data = path.read_bytes()
        sos = data.index(b'\xff\xda')
        path.write_bytes(data[:sos + 20])
        fallback = SpyProbe(error=AssertionError("fallback used"))
        reader = DimensionReader(fallback=fallback)
        assert reader.read(path) == RasterSize(64, 48)

    def test_png_falls_back(self, tmp_path):
        path = _write_image(tmp_path / "a.png", 10, 20)
        fallback = SpyProbe(result=RasterSize(10, 20))
        reader = DimensionReader(fallback=fallback)
        assert reader.read(path) == RasterSize(10, 20)
        assert fallback.calls == [path]

    def test_fast_failure_swallowed(self, tmp_path, caplog):
        """Any fast probe exception is logged at DEBUG and ignored."""
        path = tmp_path / "x.jpg"
        path.write_bytes(b"")
        fast = SpyProbe(name='broken', error=RuntimeError("boom"))
        fallback = SpyProbe(result=RasterSize(5, 5))
        reader = DimensionReader(fast_probes=[fast], fallback=fallback)
        with caplog.at_level(logging.DEBUG, logger='pseudogeoref.IO.dimensions'):
            assert reader.read(path) == RasterSize(5, 5)
        assert "broken probe missed" in caplog.text

    def test_fast_probes_in_order(self, tmp_path):
        path = tmp_path / "x.dat"
        first = SpyProbe(name='first', error=DecodeError("no"))
        second = SpyProbe(name='second', result=RasterSize(7, 3))
        fallback = SpyProbe(error=AssertionError("fallback used"))
        reader = DimensionReader(fast_probes=[first, second], fallback=fallback)
        assert reader.read(path) == RasterSize(7, 3)
        assert first.calls == [path]
        assert second.calls == [path]

    def test_fallback_error_propagates(self, tmp_path):
        """Corrupt content surfaces as DecodeError."""
        path = tmp_path / "bad.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n garbage")
        with pytest.raises(DecodeError):
            DimensionReader().read(path)

    def test_missing_file_is_io_error(self, tmp_path):
        """Missing files are reported as I/O errors, not decode errors."""
        with pytest.raises(GeorefIOError) as excinfo:
            read_dimensions(tmp_path / "missing.jpg")
        assert not isinstance(excinfo.value, DecodeError)

    def test_no_fast_probes(self, tmp_path):
        """An empty fast path goes straight to the fallback."""
        path = _write_image(tmp_path / "a.jpg", 12, 6)
        reader = DimensionReader(fast_probes=[])
        assert reader.read(path) == RasterSize(12, 6)

    @pytest.mark.parametrize("name,fmt", [
        ("a.jpeg", "JPEG"),
        ("a.png", "PNG"),
        ("a.gif", "GIF"),
        ("a.tiff", "TIFF"),
    ])
    def test_read_dimensions_default_chain(self, tmp_path, name, fmt):
        path = _write_image(tmp_path / name, 50, 25, fmt=fmt)
        assert read_dimensions(path) == RasterSize(50, 25)
