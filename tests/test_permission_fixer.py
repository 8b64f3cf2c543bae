"""Tests for permission normalization."""

import stat
from pathlib import Path

from extension_exporter.core import LocalFileStore, PermissionFixer


def mode_of(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def test_fix_tree(tmp_path: Path):
    root = tmp_path / "bucket"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.sh").write_text("b")
    (root / "sub" / "b.sh").chmod(0o700)
    (root / "sub").chmod(0o700)
    root.chmod(0o700)

    PermissionFixer(LocalFileStore(), 0o755, 0o644).fix_tree(root)

    assert mode_of(root) == 0o755
    assert mode_of(root / "sub") == 0o755
    assert mode_of(root / "a.txt") == 0o644
    assert mode_of(root / "sub" / "b.sh") == 0o644


def test_fix_tree_of_missing_root_is_noop(tmp_path: Path):
    PermissionFixer(LocalFileStore(), 0o755, 0o644).fix_tree(tmp_path / "missing")


def test_fix_file(tmp_path: Path):
    archive = tmp_path / "out.zip"
    archive.write_bytes(b"")
    archive.chmod(0o600)

    PermissionFixer(LocalFileStore(), 0o755, 0o664).fix_file(archive)

    assert mode_of(archive) == 0o664
