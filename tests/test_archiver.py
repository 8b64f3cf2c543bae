"""Tests for ZIP archive creation."""

import os
import stat
import time
import zipfile
from pathlib import Path

import pytest

from extension_exporter import ExportIOError
from extension_exporter.constants import ErrorCode
from extension_exporter.core import LocalFileStore, ZipArchiver
from extension_exporter.core.archiver import zip_timestamp


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "bucket"
    (root / "admin" / "sql").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "foo.xml").write_text("<extension />")
    (root / "admin" / "sql" / "install.sql").write_text("CREATE TABLE foo;")
    return root


def test_entry_names_are_relative(tmp_path: Path, tree: Path):
    archive_path = tmp_path / "bucket-1.0.zip"

    names = ZipArchiver(LocalFileStore()).create(tree, archive_path)

    assert names == ["admin/sql/install.sql", "foo.xml"]
    with zipfile.ZipFile(archive_path) as archive:
        assert archive.namelist() == names
        assert archive.read("foo.xml") == b"<extension />"
        for name in archive.namelist():
            assert not name.startswith("/")
            assert ":" not in name


def test_entry_timestamps_follow_file_mtime(tmp_path: Path, tree: Path):
    mtime = time.mktime((2020, 5, 17, 12, 30, 0, 0, 0, -1))
    os.utime(tree / "foo.xml", (mtime, mtime))
    archive_path = tmp_path / "out.zip"

    ZipArchiver(LocalFileStore()).create(tree, archive_path)

    with zipfile.ZipFile(archive_path) as archive:
        assert archive.getinfo("foo.xml").date_time == (2020, 5, 17, 12, 30, 0)


def test_timestamps_before_zip_epoch_are_clamped():
    assert zip_timestamp(0) == (1980, 1, 1, 0, 0, 0)


def test_entries_carry_file_mode(tmp_path: Path, tree: Path):
    archive_path = tmp_path / "out.zip"

    ZipArchiver(LocalFileStore(), file_mode=0o644).create(tree, archive_path)

    with zipfile.ZipFile(archive_path) as archive:
        mode = archive.getinfo("foo.xml").external_attr >> 16
        assert stat.S_IMODE(mode) == 0o644
        assert stat.S_ISREG(mode)


def test_working_directory_is_unchanged(tmp_path: Path, tree: Path):
    before = os.getcwd()

    ZipArchiver(LocalFileStore()).create(tree, tmp_path / "out.zip")

    assert os.getcwd() == before


def test_write_failure_raises_export_io_error(tmp_path: Path, tree: Path):
    archive_path = tmp_path / "missing-dir" / "out.zip"

    with pytest.raises(ExportIOError) as exc_info:
        ZipArchiver(LocalFileStore()).create(tree, archive_path)

    assert isinstance(exc_info.value, OSError)
    assert str(archive_path) in str(exc_info.value)
    assert not archive_path.exists()
    assert exc_info.value.error_code == ErrorCode.ARCHIVE_FAILED
