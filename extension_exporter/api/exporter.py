"""Exporter API for packaging extensions"""

from pathlib import Path
from typing import Dict, Optional, Union

from ..constants import (
    ExtensionType,
    CLIENT_SITE,
    DEFAULT_DIR_MODE,
    DEFAULT_FILE_MODE,
)
from ..core import FileStore
from ..models import ExportConfig, ExportResult, OperationStatus
from ..services import ExportService
from .exceptions import ExporterError


class Exporter:
    """Exporter class for packaging installed extensions"""

    def __init__(self,
                 export_directory: Union[str, Path],
                 dir_mode: int = DEFAULT_DIR_MODE,
                 file_mode: int = DEFAULT_FILE_MODE,
                 site_root: Union[str, Path] = None,
                 admin_root: Union[str, Path] = None,
                 file_store: Optional[FileStore] = None):
        """
        Initialize exporter

        Args:
            export_directory: Working directory for staging trees and archives
            dir_mode: Permissions for exported directories
            file_mode: Permissions for exported files
            site_root: Host site root
            admin_root: Host administrator root (defaults to <site_root>/administrator)
            file_store: Filesystem access (local disk by default)
        """
        self.config = ExportConfig(
            export_directory=export_directory,
            site_root=site_root,
            admin_root=admin_root,
            dir_mode=dir_mode,
            file_mode=file_mode
        )
        self.service = ExportService(self.config, file_store)

    @classmethod
    def from_config(cls, config: ExportConfig, file_store: Optional[FileStore] = None) -> 'Exporter':
        """Create from an ExportConfig"""
        return cls(
            export_directory=config.export_directory,
            dir_mode=config.dir_mode,
            file_mode=config.file_mode,
            site_root=config.site_root,
            admin_root=config.admin_root,
            file_store=file_store
        )

    def export(self,
               extension: str,
               extension_type: Union[str, ExtensionType],
               client_id: int = CLIENT_SITE,
               plugin_group: Optional[str] = None) -> str:
        """
        Export an extension

        Args:
            extension: Extension name
            extension_type: component, module, plugin or template
            client_id: 0 for site, 1 for administrator
            plugin_group: Plugin group (plugins only)

        Returns:
            The package name

        Raises:
            ConfigurationError: If the type is not supported
            NotFoundError: If the manifest is missing
            ExportIOError: If a filesystem operation fails
        """
        return self.service.export(extension, extension_type, client_id, plugin_group)

    def export_with_result(self,
                           extension: str,
                           extension_type: Union[str, ExtensionType],
                           client_id: int = CLIENT_SITE,
                           plugin_group: Optional[str] = None) -> ExportResult:
        """
        Export an extension, reporting failures in the result

        Returns:
            ExportResult: Export result object
        """
        try:
            self.export(extension, extension_type, client_id, plugin_group)
            return self.service.result

        except ExporterError as e:
            result = self.service.result
            if result is None:
                result = ExportResult(
                    status=OperationStatus.IN_PROGRESS,
                    extension_name=extension,
                    extension_type=str(getattr(extension_type, 'value', extension_type)),
                )
            result.message = str(e)
            result.add_error(e.error_code, str(e))
            result.complete(OperationStatus.FAILED)
            return result

    def remove_artifacts(self,
                         extension: str,
                         extension_type: Union[str, ExtensionType],
                         client_id: int = CLIENT_SITE,
                         plugin_group: Optional[str] = None) -> Optional[Path]:
        """Remove the staging tree of an extension"""
        return self.service.remove_artifacts(extension, extension_type, client_id, plugin_group)

    def describe_paths(self,
                       extension: str,
                       extension_type: Union[str, ExtensionType],
                       client_id: int = CLIENT_SITE,
                       plugin_group: Optional[str] = None) -> Dict[str, Path]:
        """Resolve the paths an export would use"""
        return self.service.describe_paths(extension, extension_type, client_id, plugin_group)


def export(extension: str,
           extension_type: Union[str, ExtensionType],
           export_directory: Union[str, Path],
           site_root: Union[str, Path],
           client_id: int = CLIENT_SITE,
           plugin_group: Optional[str] = None,
           **options) -> str:
    """
    Export an extension (convenience function)

    Args:
        extension: Extension name
        extension_type: Extension type
        export_directory: Working directory
        site_root: Host site root
        client_id: 0 for site, 1 for administrator
        plugin_group: Plugin group (plugins only)
        **options: admin_root, dir_mode, file_mode

    Returns:
        The package name
    """
    exporter = Exporter(export_directory=export_directory, site_root=site_root, **options)
    return exporter.export(extension, extension_type, client_id, plugin_group)
