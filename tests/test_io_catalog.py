# -*- coding: utf-8 -*-
"""
Catalog and Report Tests - Directory discovery and JSON summary reports.

Dependencies
------------
pytest

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

import json
import os
from pathlib import Path

import pytest

from pseudogeoref.exceptions import DecodeError, GeorefIOError
from pseudogeoref.geolocation.reference import build_reference
from pseudogeoref.config import WORLD_EXTENTS
from pseudogeoref.IO.catalog import discover_images, is_supported_extension
from pseudogeoref.IO.report import load_report, write_report
from pseudogeoref.models import RasterSize
from pseudogeoref.vocabulary import ExtentPreset


class TestIsSupportedExtension:
    """Case-insensitive extension matching."""

    @pytest.mark.parametrize("name", [
        "a.jpg", "a.JPG", "a.jpeg", "a.Png", "a.gif", "a.tif", "a.TIFF",
    ])
    def test_supported(self, name):
        assert is_supported_extension(name)

    @pytest.mark.parametrize("name", [
        "a.bmp", "a.wld", "a.prj", "a.txt", "jpg", "a", ".jpg.bak",
    ])
    def test_unsupported(self, name):
        assert not is_supported_extension(name)

    def test_custom_extensions(self):
        assert is_supported_extension("a.BMP", {"bmp"})
        assert is_supported_extension("a.bmp", {".bmp"})
        assert not is_supported_extension("a.jpg", {"bmp"})


class TestDiscoverImages:
    """Non-recursive directory scan."""

    def test_filters_and_sorts(self, tmp_path):
        for name in ["c.png", "a.JPG", "b.tif", "notes.txt", "a.wld", "x.bmp"]:
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "deep.jpg").write_bytes(b"")
        (tmp_path / "folder.jpg").mkdir()

        found = discover_images(tmp_path)
        assert [p.name for p in found] == ["a.JPG", "b.tif", "c.png"]

    def test_custom_extensions(self, tmp_path):
        (tmp_path / "x.bmp").write_bytes(b"")
        (tmp_path / "y.png").write_bytes(b"")
        found = discover_images(tmp_path, {"bmp", "png"})
        assert [p.name for p in found] == ["x.bmp", "y.png"]

    def test_empty_directory(self, tmp_path):
        assert discover_images(tmp_path) == []

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file.jpg"
        path.write_bytes(b"")
        with pytest.raises(NotADirectoryError, match="is not a directory"):
            discover_images(path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            discover_images(tmp_path / "missing")

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permissions are not enforced for root",
    )
    def test_unlistable_directory(self, tmp_path):
        """A directory that cannot be listed surfaces an I/O error."""
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o300)
        try:
            with pytest.raises(GeorefIOError, match="Cannot list directory") as excinfo:
                discover_images(locked)
            assert excinfo.value.path == locked
        finally:
            locked.chmod(0o700)

    def test_listing_error_wrapped(self, tmp_path, monkeypatch):
        """OS errors while listing are reported with the directory path."""
        def refuse(self):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "iterdir", refuse)
        with pytest.raises(GeorefIOError) as excinfo:
            discover_images(tmp_path)
        assert excinfo.value.path == tmp_path
        assert isinstance(excinfo.value.__cause__, PermissionError)


class TestReport:
    """JSON summary records."""

    @pytest.fixture
    def references(self):
        extent = WORLD_EXTENTS[ExtentPreset.WGS84]
        return [
            build_reference(RasterSize(2048, 1024), extent).with_source("imgs/a.jpg"),
            build_reference(RasterSize(100, 100), extent).with_source("imgs/b.png"),
        ]

    def test_write_and_load(self, tmp_path, references):
        path = tmp_path / "summary.json"
        write_report(path, references)
        records = load_report(path)
        assert len(records) == 2
        assert records[0]["name"] == "a"
        assert records[0]["size"] == {"width": 2048, "height": 1024}
        assert records[0]["bbox"] == {
            "minx": -180.0, "miny": -45.0, "maxx": 180.0, "maxy": 45.0,
        }
        assert records[1]["name"] == "b"
        assert records[1]["filename"].endswith("b.png")

    def test_plain_json_array(self, tmp_path, references):
        path = tmp_path / "summary.json"
        write_report(path, references)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert set(data[0]) == {"bbox", "size", "name", "filename"}

    def test_empty(self, tmp_path):
        path = tmp_path / "summary.json"
        write_report(path, [])
        assert load_report(path) == []

    def test_unwritable(self, tmp_path, references):
        with pytest.raises(GeorefIOError, match="Could not write to json file"):
            write_report(tmp_path / "missing" / "summary.json", references)

    def test_load_not_array(self, tmp_path):
        path = tmp_path / "summary.json"
        path.write_text('{"a": 1}')
        with pytest.raises(DecodeError, match="JSON array"):
            load_report(path)

    def test_load_invalid(self, tmp_path):
        path = tmp_path / "summary.json"
        path.write_text('[')
        with pytest.raises(DecodeError, match="Invalid JSON"):
            load_report(path)
