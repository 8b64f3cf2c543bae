# extension_exporter/services/export_service.py
"""Export service implementation"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union
from xml.etree import ElementTree as ET

from ..api.exceptions import NotFoundError
from ..constants import ExtensionType, CLIENT_SITE, CLIENT_ADMINISTRATOR
from ..core import (
    FileStore,
    LocalFileStore,
    PathResolver,
    ManifestReader,
    DirectoryCopier,
    LanguageCopier,
    LanguageLocation,
    ZipArchiver,
    PermissionFixer,
)
from ..models import ExtensionDescriptor, ExportConfig, ExportResult, OperationStatus


@dataclass
class ManifestTargets:
    """Target folders declared by a manifest, relative to the staging root"""
    files_folder: str = ""
    media_destination: str = ""
    media_folder: str = ""
    language_folder: str = ""
    admin_files_folder: str = ""
    admin_language_folder: str = ""

    @classmethod
    def from_manifest(cls, manifest: ManifestReader, extension_name: str) -> 'ManifestTargets':
        """Read target folders, applying defaults"""
        targets = cls(
            files_folder=manifest.get_attribute(None, 'files', 'folder', ''),
            media_destination=manifest.get_attribute(None, 'media', 'destination', extension_name),
            media_folder=manifest.get_attribute(None, 'media', 'folder', ''),
            language_folder=manifest.get_attribute(None, 'languages', 'folder', ''),
        )

        administration = manifest.administration
        if administration is not None:
            targets.admin_files_folder = manifest.get_attribute(administration, 'files', 'folder', '')
            targets.admin_language_folder = manifest.get_attribute(administration, 'languages', 'folder', '')

        return targets


def _placement_table(manifest: ManifestReader, section: Optional[ET.Element]) -> Optional[List[str]]:
    """Placement entries of a languages section, None if it is absent or blank"""
    if section is None:
        return None

    if len(section) == 0 and not section.attrib and not (section.text or "").strip():
        return None

    return manifest.get_language_entries(section)


class ExportService:
    """Export pipeline: stage, archive and normalize one extension"""

    def __init__(self, config: ExportConfig, file_store: Optional[FileStore] = None):
        """
        Initialize export service

        Args:
            config: Export configuration
            file_store: Filesystem access (local disk by default)
        """
        self.config = config
        self.file_store = file_store or LocalFileStore()
        self.path_resolver = PathResolver(config)
        self.directory_copier = DirectoryCopier(self.file_store, config.dir_mode)
        self.language_copier = LanguageCopier(self.file_store, config.dir_mode)
        self.archiver = ZipArchiver(self.file_store, config.file_mode)
        self.permission_fixer = PermissionFixer(self.file_store, config.dir_mode, config.file_mode)
        self.logger = logging.getLogger(self.__class__.__name__)

        # State of the current export
        self.descriptor: Optional[ExtensionDescriptor] = None
        self.manifest: Optional[ManifestReader] = None
        self.targets: Optional[ManifestTargets] = None
        self.result: Optional[ExportResult] = None

        self._stagers: Dict[ExtensionType, Callable[[], None]] = {
            ExtensionType.COMPONENT: self._stage_component,
            ExtensionType.MODULE: self._stage_single_tree,
            ExtensionType.PLUGIN: self._stage_single_tree,
            ExtensionType.TEMPLATE: self._stage_single_tree,
        }

    def export(self,
               name: str,
               extension_type: Union[str, ExtensionType],
               client_id: int = CLIENT_SITE,
               plugin_group: Optional[str] = None) -> str:
        """
        Export an extension

        Args:
            name: Extension name (e.g. com_content, mod_login, cache)
            extension_type: component, module, plugin or template
            client_id: 0 for site, 1 for administrator
            plugin_group: Plugin group, required for plugins

        Returns:
            Package name <bucket>-<version>

        Raises:
            ConfigurationError: Unsupported type or incomplete descriptor
            NotFoundError: Manifest missing at its expected path
            ExportIOError: Any filesystem failure
        """
        self.result = None
        descriptor = ExtensionDescriptor.create(name, extension_type, client_id, plugin_group)

        self.result = ExportResult(
            status=OperationStatus.IN_PROGRESS,
            extension_name=descriptor.name,
            extension_type=descriptor.type.value,
        )

        self.manifest = self.load_manifest(descriptor)
        self.descriptor = descriptor.with_version(self.manifest.version)
        self.targets = ManifestTargets.from_manifest(self.manifest, self.descriptor.name)

        staging_root = self.path_resolver.get_staging_root(self.descriptor)
        archive_path = self.path_resolver.get_archive_path(self.descriptor)

        self.logger.info(
            f"Exporting {self.descriptor.type.value} {self.descriptor.name} "
            f"as {self.descriptor.package_name}"
        )

        if self.file_store.exists(staging_root):
            self._remove_staging(staging_root)

        self.file_store.make_dirs(staging_root, self.config.dir_mode)

        self._stagers[self.descriptor.type]()

        if self._declares_languages():
            self.copy_languages()

        if self.manifest.has_section('media'):
            self.copy_media()

        entries = self.archiver.create(staging_root, archive_path)

        self.permission_fixer.fix_tree(staging_root)
        self.permission_fixer.fix_file(archive_path)

        self.result.package_name = self.descriptor.package_name
        self.result.archive_path = archive_path
        self.result.archive_size = self.file_store.size(archive_path)
        self.result.staging_path = staging_root
        self.result.file_count = len(entries)
        self.result.message = f"Package created: {archive_path}"
        self.result.complete(OperationStatus.SUCCESS)

        return self.descriptor.package_name

    def load_manifest(self, descriptor: ExtensionDescriptor) -> ManifestReader:
        """Locate and parse the manifest of an extension

        Raises:
            NotFoundError: If the manifest is not at its expected path
        """
        manifest_path = self.path_resolver.get_manifest_path(descriptor)

        if not self.file_store.is_file(manifest_path):
            raise NotFoundError(descriptor.type.value, descriptor.name, str(manifest_path))

        self.logger.debug(f"Reading manifest {manifest_path}")
        return ManifestReader.from_string(self.file_store.read_bytes(manifest_path), str(manifest_path))

    def remove_artifacts(self,
                         name: str,
                         extension_type: Union[str, ExtensionType],
                         client_id: int = CLIENT_SITE,
                         plugin_group: Optional[str] = None) -> Optional[Path]:
        """
        Remove the staging tree of an extension

        Returns:
            The removed directory, None if there was none
        """
        descriptor = ExtensionDescriptor.create(name, extension_type, client_id, plugin_group)
        staging_root = self.path_resolver.get_staging_root(descriptor)

        if not self.file_store.exists(staging_root):
            return None

        self._remove_staging(staging_root)
        return staging_root

    def _remove_staging(self, staging_root: Path) -> None:
        self.logger.info(f"Removing previous staging tree {staging_root}")
        self.file_store.delete_tree(staging_root)

    def _stage_single_tree(self) -> None:
        """Stage module, plugin and template files into the bucket root"""
        self.directory_copier.copy(
            self.path_resolver.get_source_path(self.descriptor),
            self.path_resolver.get_staging_root(self.descriptor)
        )

    def _stage_component(self) -> None:
        """Stage both halves of a component and lift its manifest to the bucket root"""
        admin_target = self.path_resolver.get_staging_path(self.descriptor, self.targets.admin_files_folder)
        site_target = self.path_resolver.get_staging_path(self.descriptor, self.targets.files_folder)

        self.directory_copier.copy(
            self.path_resolver.get_source_path(self.descriptor, CLIENT_ADMINISTRATOR),
            admin_target
        )
        self.directory_copier.copy(
            self.path_resolver.get_source_path(self.descriptor, CLIENT_SITE),
            site_target
        )

        manifest_name = f"{self.descriptor.base_name}.xml"
        source_path = admin_target / manifest_name

        if not self.file_store.is_file(source_path):
            message = f"{source_path} not found, using {site_target / manifest_name}"
            self.logger.warning(message)
            self.result.add_warning(message)
            source_path = site_target / manifest_name

        target_path = self.path_resolver.get_staging_root(self.descriptor) / manifest_name

        if source_path != target_path:
            self.file_store.move(source_path, target_path)

    def _declares_languages(self) -> bool:
        if self.manifest.has_section('languages'):
            return True
        administration = self.manifest.administration
        return administration is not None and self.manifest.has_section('languages', administration)

    def get_language_locations(self) -> List[LanguageLocation]:
        """Language roots consulted for the current export, in copy order"""
        administration = self.manifest.administration
        site_languages = self.manifest.get_section('languages')
        admin_languages = (
            self.manifest.get_section('languages', administration)
            if administration is not None else None
        )

        language_target = self.path_resolver.get_staging_path(self.descriptor, self.targets.language_folder)
        admin_language_target = self.path_resolver.get_staging_path(
            self.descriptor, self.targets.admin_language_folder
        )

        # Plugin language files live below the administrator language root
        plugin_entries = None
        if self.descriptor.type == ExtensionType.PLUGIN:
            plugin_entries = _placement_table(self.manifest, site_languages)

        return [
            LanguageLocation(
                name='site',
                source=self.path_resolver.get_language_root(CLIENT_SITE),
                target=language_target,
                entries=_placement_table(self.manifest, site_languages),
            ),
            LanguageLocation(
                name='admin',
                source=self.path_resolver.get_language_root(CLIENT_ADMINISTRATOR),
                target=admin_language_target,
                entries=_placement_table(self.manifest, admin_languages),
            ),
            LanguageLocation(
                name='plugins',
                source=self.path_resolver.get_language_root(CLIENT_ADMINISTRATOR),
                target=language_target,
                entries=plugin_entries,
            ),
        ]

    def copy_languages(self) -> int:
        """Copy language files of every active location"""
        copied = 0
        for location in self.get_language_locations():
            copied += self.language_copier.copy_location(location, self.descriptor.file_bucket)
        return copied

    def copy_media(self) -> bool:
        """Copy the media directory"""
        return self.directory_copier.copy(
            self.path_resolver.get_media_source_path(self.targets.media_destination),
            self.path_resolver.get_staging_path(self.descriptor, self.targets.media_folder)
        )

    def describe_paths(self,
                       name: str,
                       extension_type: Union[str, ExtensionType],
                       client_id: int = CLIENT_SITE,
                       plugin_group: Optional[str] = None) -> Dict[str, Path]:
        """
        Resolve every path an export would use, without modifying anything

        The manifest is read when present so the archive name carries
        the real version.
        """
        descriptor = ExtensionDescriptor.create(name, extension_type, client_id, plugin_group)
        manifest_path = self.path_resolver.get_manifest_path(descriptor)

        if self.file_store.is_file(manifest_path):
            manifest = ManifestReader.from_string(self.file_store.read_bytes(manifest_path), str(manifest_path))
            descriptor = descriptor.with_version(manifest.version)
        else:
            descriptor = descriptor.with_version("<version>")

        paths = {'manifest': manifest_path}

        if descriptor.type == ExtensionType.COMPONENT:
            paths['admin source'] = self.path_resolver.get_source_path(descriptor, CLIENT_ADMINISTRATOR)
            paths['site source'] = self.path_resolver.get_source_path(descriptor, CLIENT_SITE)
        else:
            paths['source'] = self.path_resolver.get_source_path(descriptor)

        paths['site languages'] = self.path_resolver.get_language_root(CLIENT_SITE)
        paths['admin languages'] = self.path_resolver.get_language_root(CLIENT_ADMINISTRATOR)
        paths['staging'] = self.path_resolver.get_staging_root(descriptor)
        paths['archive'] = self.path_resolver.get_archive_path(descriptor)

        return paths
