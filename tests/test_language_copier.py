"""Tests for language file staging."""

import errno
import os
from pathlib import Path

import pytest

from extension_exporter import ExportIOError
from extension_exporter.core import LanguageCopier, LanguageLocation, LocalFileStore, resolve_language_target


def test_resolve_uses_declared_entry():
    entries = [
        "language/en-GB/en-GB.plg_system_cache.ini",
        "language/en-GB/en-GB.plg_system_cache.sys.ini",
    ]

    target = resolve_language_target("en-GB", "en-GB.plg_system_cache.sys.ini", entries)

    assert target == "language/en-GB/en-GB.plg_system_cache.sys.ini"


def test_resolve_defaults_to_locale_directory():
    target = resolve_language_target("de-DE", "de-DE.plg_system_cache.ini", ["en-GB/en-GB.plg_system_cache.ini"])

    assert target == "de-DE/de-DE.plg_system_cache.ini"


def test_resolve_first_match_wins():
    entries = ["first/en-GB.com_foo.ini", "second/en-GB.com_foo.ini"]

    assert resolve_language_target("en-GB", "en-GB.com_foo.ini", entries) == "first/en-GB.com_foo.ini"


def test_resolve_matches_basename_only():
    entries = ["en-GB/en-GB.com_foo.ini.dist"]

    assert resolve_language_target("en-GB", "en-GB.com_foo.ini", entries) == "en-GB/en-GB.com_foo.ini"


@pytest.fixture
def language_root(tmp_path: Path) -> Path:
    root = tmp_path / "language"
    for locale in ("en-GB", "de-DE"):
        (root / locale).mkdir(parents=True)
        (root / locale / f"{locale}.com_foo.ini").write_text("FOO=1")
    (root / "en-GB" / "en-GB.com_foo.sys.ini").write_text("FOO_SYS=1")
    (root / "en-GB" / "en-GB.com_bar.ini").write_text("BAR=1")
    (root / "overrides" / "fr-FR").mkdir(parents=True)
    (root / "overrides" / "fr-FR" / "fr-FR.com_foo.ini").write_text("FOO=1")
    return root


def test_copy_location(tmp_path: Path, language_root: Path):
    target = tmp_path / "staging" / "language"
    location = LanguageLocation(
        name="site",
        source=language_root,
        target=target,
        entries=["custom/en-GB.com_foo.sys.ini"],
    )

    copied = LanguageCopier(LocalFileStore(), 0o755).copy_location(location, "com_foo")

    assert copied == 4
    assert (target / "en-GB" / "en-GB.com_foo.ini").exists()
    assert (target / "custom" / "en-GB.com_foo.sys.ini").exists()
    assert not (target / "en-GB" / "en-GB.com_foo.sys.ini").exists()
    assert (target / "de-DE" / "de-DE.com_foo.ini").exists()
    # Nested directories are locales too
    assert (target / "fr-FR" / "fr-FR.com_foo.ini").exists()
    assert not (target / "en-GB" / "en-GB.com_bar.ini").exists()


def test_inactive_location_is_skipped(tmp_path: Path, language_root: Path):
    target = tmp_path / "staging"
    location = LanguageLocation(name="admin", source=language_root, target=target, entries=None)

    assert LanguageCopier(LocalFileStore(), 0o755).copy_location(location, "com_foo") == 0
    assert not target.exists()


def test_missing_language_root_is_noop(tmp_path: Path):
    location = LanguageLocation(name="site", source=tmp_path / "missing", target=tmp_path / "staging", entries=[])

    assert LanguageCopier(LocalFileStore(), 0o755).copy_location(location, "com_foo") == 0


def test_symlinked_locale_directory_is_copied(tmp_path: Path):
    checkout = tmp_path / "checkout" / "nl-NL"
    checkout.mkdir(parents=True)
    (checkout / "nl-NL.com_foo.ini").write_text("FOO=1")

    root = tmp_path / "language"
    root.mkdir()
    (root / "nl-NL").symlink_to(checkout, target_is_directory=True)

    target = tmp_path / "staging" / "language"
    location = LanguageLocation(name="site", source=root, target=target, entries=[])

    assert LanguageCopier(LocalFileStore(), 0o755).copy_location(location, "com_foo") == 1
    assert (target / "nl-NL" / "nl-NL.com_foo.ini").read_text() == "FOO=1"


def test_unreadable_locale_directory_raises(tmp_path: Path, language_root: Path, monkeypatch):
    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == "de-DE":
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    location = LanguageLocation(name="site", source=language_root, target=tmp_path / "staging", entries=[])

    with pytest.raises(ExportIOError) as exc_info:
        LanguageCopier(LocalFileStore(), 0o755).copy_location(location, "com_foo")

    assert str(language_root / "de-DE") in str(exc_info.value)
