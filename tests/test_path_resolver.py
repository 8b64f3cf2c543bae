"""Tests for path resolution."""

from pathlib import Path

import pytest

from extension_exporter import ExportConfig, ExtensionDescriptor
from extension_exporter.constants import CLIENT_SITE, CLIENT_ADMINISTRATOR
from extension_exporter.core import PathResolver, join_relative


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    return PathResolver(ExportConfig(
        export_directory=tmp_path / "export",
        site_root=tmp_path / "site",
        admin_root=tmp_path / "admin",
    ))


def test_admin_root_defaults_below_site_root(tmp_path: Path):
    config = ExportConfig(export_directory=tmp_path / "export", site_root=tmp_path / "site")

    assert config.admin_root == tmp_path / "site" / "administrator"


@pytest.mark.parametrize("name, extension_type, client_id, group, expected", [
    ("com_foo", "component", CLIENT_ADMINISTRATOR, None, "admin/components/com_foo/foo.xml"),
    ("com_foo", "component", CLIENT_SITE, None, "site/components/com_foo/foo.xml"),
    ("mod_hello", "module", CLIENT_SITE, None, "site/modules/mod_hello/mod_hello.xml"),
    ("mod_stats", "module", CLIENT_ADMINISTRATOR, None, "admin/modules/mod_stats/mod_stats.xml"),
    ("cache", "plugin", CLIENT_ADMINISTRATOR, "system", "site/plugins/system/cache/cache.xml"),
    ("protostar", "template", CLIENT_SITE, None, "site/templates/protostar/templateDetails.xml"),
    ("isis", "template", CLIENT_ADMINISTRATOR, None, "admin/templates/isis/templateDetails.xml"),
])
def test_manifest_path(resolver, tmp_path, name, extension_type, client_id, group, expected):
    descriptor = ExtensionDescriptor.create(name, extension_type, client_id, group)

    assert resolver.get_manifest_path(descriptor) == tmp_path / expected


@pytest.mark.parametrize("name, extension_type, client_id, group, expected", [
    ("mod_hello", "module", CLIENT_SITE, None, "site/modules/mod_hello"),
    ("mod_stats", "module", CLIENT_ADMINISTRATOR, None, "admin/modules/mod_stats"),
    ("cache", "plugin", CLIENT_ADMINISTRATOR, "system", "site/plugins/system/cache"),
    ("protostar", "template", CLIENT_SITE, None, "site/templates/protostar"),
])
def test_source_path(resolver, tmp_path, name, extension_type, client_id, group, expected):
    descriptor = ExtensionDescriptor.create(name, extension_type, client_id, group)

    assert resolver.get_source_path(descriptor) == tmp_path / expected


def test_component_source_halves(resolver, tmp_path):
    descriptor = ExtensionDescriptor.create("com_foo", "component")

    assert resolver.get_source_path(descriptor, CLIENT_ADMINISTRATOR) == tmp_path / "admin/components/com_foo"
    assert resolver.get_source_path(descriptor, CLIENT_SITE) == tmp_path / "site/components/com_foo"


def test_staging_and_archive_paths(resolver, tmp_path):
    descriptor = ExtensionDescriptor.create("cache", "plugin", plugin_group="system").with_version("3.0.1")

    assert resolver.get_staging_root(descriptor) == tmp_path / "export/plg_system_cache"
    assert resolver.get_archive_path(descriptor) == tmp_path / "export/plg_system_cache-3.0.1.zip"
    assert resolver.get_staging_path(descriptor, "language") == tmp_path / "export/plg_system_cache/language"


def test_media_and_language_roots(resolver, tmp_path):
    assert resolver.get_media_source_path("com_foo") == tmp_path / "site/media/com_foo"
    assert resolver.get_language_root(CLIENT_SITE) == tmp_path / "site/language"
    assert resolver.get_language_root(CLIENT_ADMINISTRATOR) == tmp_path / "admin/language"


def test_join_relative_ignores_empty_parts(tmp_path):
    assert join_relative(tmp_path, "", "admin", "") == tmp_path / "admin"


def test_join_relative_cannot_escape_root(tmp_path):
    assert join_relative(tmp_path, "/etc") == tmp_path / "etc"
    assert join_relative(tmp_path, "\\admin\\language") == tmp_path / "admin/language"
