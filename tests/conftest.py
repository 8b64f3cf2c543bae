"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from extension_exporter import Exporter


COMPONENT_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<extension type="component" method="upgrade">
    <name>com_foo</name>
    <version>1.2.0</version>
    <files folder="site">
        <filename>foo.php</filename>
        <folder>views</folder>
    </files>
    <languages folder="site/language">
        <language tag="en-GB">en-GB/en-GB.com_foo.ini</language>
    </languages>
    <media destination="com_foo" folder="media">
        <folder>js</folder>
    </media>
    <administration>
        <files folder="admin">
            <filename>admin.foo.php</filename>
            <folder>sql</folder>
        </files>
        <languages folder="admin/language">
            <language tag="en-GB">en-GB/en-GB.com_foo.sys.ini</language>
        </languages>
    </administration>
</extension>
"""

PLUGIN_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<extension type="plugin" group="system">
    <name>plg_system_cache</name>
    <version>3.0.1</version>
    <files>
        <filename plugin="cache">cache.php</filename>
    </files>
    <languages>
        <language tag="en-GB">language/en-GB/en-GB.plg_system_cache.sys.ini</language>
    </languages>
</extension>
"""

MODULE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<extension type="module" client="site">
    <name>mod_hello</name>
    <version>1.0.0</version>
    <files>
        <filename module="mod_hello">mod_hello.php</filename>
        <folder>tmpl</folder>
    </files>
</extension>
"""

ADMIN_MODULE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<extension type="module" client="administrator">
    <name>mod_stats</name>
    <version>2.1.0</version>
</extension>
"""

TEMPLATE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<extension type="template" client="site">
    <name>protostar</name>
    <version>1.0</version>
    <files>
        <filename>index.php</filename>
    </files>
    <media destination="templates/protostar" folder="media" />
</extension>
"""


@dataclass
class Host:
    """A fake site installation below tmp_path"""
    site_root: Path
    admin_root: Path
    export_dir: Path

    def add_file(self, relative: str, content: str = "", admin: bool = False) -> Path:
        root = self.admin_root if admin else self.site_root
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def exporter(self, **options) -> Exporter:
        return Exporter(
            export_directory=self.export_dir,
            site_root=self.site_root,
            admin_root=self.admin_root,
            **options
        )


@pytest.fixture
def host(tmp_path: Path) -> Host:
    site_root = tmp_path / "site"
    site_root.mkdir()
    return Host(
        site_root=site_root,
        admin_root=site_root / "administrator",
        export_dir=tmp_path / "export",
    )


@pytest.fixture
def component(host: Host) -> Host:
    host.add_file("components/com_foo/foo.xml", COMPONENT_MANIFEST, admin=True)
    host.add_file("components/com_foo/admin.foo.php", "<?php // admin", admin=True)
    host.add_file("components/com_foo/sql/install.sql", "CREATE TABLE foo;", admin=True)
    host.add_file("components/com_foo/foo.php", "<?php // site")
    host.add_file("components/com_foo/views/default.php", "<?php // view")
    host.add_file("media/com_foo/js/foo.js", "console.log('foo');")
    host.add_file("language/en-GB/en-GB.com_foo.ini", "FOO=\"Foo\"")
    host.add_file("language/de-DE/de-DE.com_foo.ini", "FOO=\"Foo\"")
    host.add_file("language/en-GB/en-GB.com_other.ini", "OTHER=\"Other\"")
    host.add_file("language/en-GB/en-GB.com_foo.ini", "FOO=\"Foo\"", admin=True)
    host.add_file("language/en-GB/en-GB.com_foo.sys.ini", "FOO_SYS=\"Foo\"", admin=True)
    return host


@pytest.fixture
def plugin(host: Host) -> Host:
    host.add_file("plugins/system/cache/cache.xml", PLUGIN_MANIFEST)
    host.add_file("plugins/system/cache/cache.php", "<?php // cache")
    host.add_file("language/en-GB/en-GB.plg_system_cache.ini", "CACHE=\"Cache\"", admin=True)
    host.add_file("language/en-GB/en-GB.plg_system_cache.sys.ini", "CACHE_SYS=\"Cache\"", admin=True)
    return host


@pytest.fixture
def module(host: Host) -> Host:
    host.add_file("modules/mod_hello/mod_hello.xml", MODULE_MANIFEST)
    host.add_file("modules/mod_hello/mod_hello.php", "<?php // hello")
    host.add_file("modules/mod_hello/tmpl/default.php", "<?php // tmpl")
    host.add_file("modules/mod_stats/mod_stats.xml", ADMIN_MODULE_MANIFEST, admin=True)
    host.add_file("modules/mod_stats/mod_stats.php", "<?php // stats", admin=True)
    return host


@pytest.fixture
def template(host: Host) -> Host:
    host.add_file("templates/protostar/templateDetails.xml", TEMPLATE_MANIFEST)
    host.add_file("templates/protostar/index.php", "<?php // index")
    host.add_file("media/templates/protostar/css/template.css", "body {}")
    return host
