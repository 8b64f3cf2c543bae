"""Path resolution module for extension-exporter"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

from ..constants import (
    ExtensionType,
    CLIENT_SITE,
    COMPONENTS_DIR,
    MODULES_DIR,
    PLUGINS_DIR,
    TEMPLATES_DIR,
    MEDIA_DIR,
    LANGUAGE_DIR,
    ARCHIVE_EXTENSION,
)
from ..models import ExtensionDescriptor, ExportConfig


@dataclass(frozen=True)
class PathRule:
    """On-disk layout of one extension type

    Templates are formatted with name, base_name and group. When
    client_scoped is False the site root is used regardless of client.
    """
    source: str
    manifest: str
    client_scoped: bool = True


PATH_RULES: Dict[ExtensionType, PathRule] = {
    ExtensionType.COMPONENT: PathRule(
        source=COMPONENTS_DIR + "/{name}",
        manifest=COMPONENTS_DIR + "/{name}/{base_name}.xml",
    ),
    ExtensionType.MODULE: PathRule(
        source=MODULES_DIR + "/{name}",
        manifest=MODULES_DIR + "/{name}/mod_{base_name}.xml",
    ),
    ExtensionType.PLUGIN: PathRule(
        source=PLUGINS_DIR + "/{group}/{name}",
        manifest=PLUGINS_DIR + "/{group}/{name}/{name}.xml",
        client_scoped=False,
    ),
    ExtensionType.TEMPLATE: PathRule(
        source=TEMPLATES_DIR + "/{name}",
        manifest=TEMPLATES_DIR + "/{name}/templateDetails.xml",
    ),
}


def join_relative(root: Union[str, Path], *parts: str) -> Path:
    """Join manifest-supplied relative paths below root

    Leading separators are dropped so a declared folder can never
    escape to the filesystem root.
    """
    path = Path(root)
    for part in parts:
        if part:
            path = path / str(part).replace("\\", "/").lstrip("/")
    return path


class PathResolver:
    """Resolves host and staging paths for an extension export"""

    def __init__(self, config: ExportConfig):
        """Initialize path resolver

        Args:
            config: Export configuration holding the host roots
        """
        self.config = config
        self.site_root = Path(config.site_root)
        self.admin_root = Path(config.admin_root)
        self.export_directory = Path(config.export_directory)

    @staticmethod
    def get_rule(extension_type: ExtensionType) -> PathRule:
        """Get path rule for an extension type"""
        return PATH_RULES[extension_type]

    def get_client_root(self, client_id: int) -> Path:
        """Get site root for client 0, administrator root otherwise"""
        return self.site_root if client_id == CLIENT_SITE else self.admin_root

    def _rule_root(self, descriptor: ExtensionDescriptor, client_id: int = None) -> Path:
        rule = self.get_rule(descriptor.type)
        if not rule.client_scoped:
            return self.site_root
        if client_id is None:
            client_id = descriptor.client_id
        return self.get_client_root(client_id)

    @staticmethod
    def _format(template: str, descriptor: ExtensionDescriptor) -> str:
        return template.format(
            name=descriptor.name,
            base_name=descriptor.base_name,
            group=descriptor.plugin_group or "",
        )

    def get_manifest_path(self, descriptor: ExtensionDescriptor) -> Path:
        """Get expected path of the extension's manifest file

        Args:
            descriptor: Extension descriptor

        Returns:
            Absolute manifest path
        """
        rule = self.get_rule(descriptor.type)
        return self._rule_root(descriptor) / self._format(rule.manifest, descriptor)

    def get_source_path(self, descriptor: ExtensionDescriptor, client_id: int = None) -> Path:
        """Get source directory of the extension's own files

        Args:
            descriptor: Extension descriptor
            client_id: Override client (components are staged from both sides)

        Returns:
            Absolute source directory
        """
        rule = self.get_rule(descriptor.type)
        return self._rule_root(descriptor, client_id) / self._format(rule.source, descriptor)

    def get_staging_root(self, descriptor: ExtensionDescriptor) -> Path:
        """Get staging tree root for the extension's bucket"""
        return self.export_directory / descriptor.file_bucket

    def get_staging_path(self, descriptor: ExtensionDescriptor, *folders: str) -> Path:
        """Get a path below the staging root"""
        return join_relative(self.get_staging_root(descriptor), *folders)

    def get_archive_path(self, descriptor: ExtensionDescriptor) -> Path:
        """Get path of the archive for a versioned descriptor"""
        return self.export_directory / f"{descriptor.package_name}{ARCHIVE_EXTENSION}"

    def get_media_source_path(self, destination: str) -> Path:
        """Get media directory for a manifest media destination"""
        return join_relative(self.site_root / MEDIA_DIR, destination)

    def get_language_root(self, client_id: int) -> Path:
        """Get language root of a client"""
        return self.get_client_root(client_id) / LANGUAGE_DIR
