# extension_exporter/models/extension.py
"""Extension descriptor models"""

from dataclasses import dataclass, replace
from typing import Dict, Any, Optional, Union

from ..api.exceptions import ConfigurationError, UnsupportedTypeError
from ..constants import (
    ExtensionType,
    ErrorCode,
    CLIENT_SITE,
    CLIENT_ADMINISTRATOR,
    TYPE_PREFIX_LENGTH,
    PACKAGE_NAME_PATTERN,
)


def parse_extension_type(value: Union[str, ExtensionType]) -> ExtensionType:
    """Convert a type name into an ExtensionType

    Raises:
        UnsupportedTypeError: If the value names no supported archetype
    """
    if isinstance(value, ExtensionType):
        return value

    try:
        return ExtensionType(str(value).lower())
    except ValueError:
        raise UnsupportedTypeError(str(value))


@dataclass(frozen=True)
class ExtensionDescriptor:
    """Identity of the extension being exported"""
    name: str
    type: ExtensionType
    client_id: int = CLIENT_SITE
    plugin_group: Optional[str] = None
    version: str = ""

    def __post_init__(self):
        """Validate descriptor"""
        if not self.name:
            raise ConfigurationError("Extension name is required")

        if self.client_id not in (CLIENT_SITE, CLIENT_ADMINISTRATOR):
            raise ConfigurationError(
                f"Invalid client id {self.client_id!r} (expected 0 for site or 1 for administrator)"
            )

        if self.type == ExtensionType.PLUGIN and not self.plugin_group:
            raise ConfigurationError(
                f"Plugin {self.name} requires a plugin group",
                ErrorCode.MISSING_PLUGIN_GROUP
            )

    @classmethod
    def create(cls,
               name: str,
               extension_type: Union[str, ExtensionType],
               client_id: int = CLIENT_SITE,
               plugin_group: Optional[str] = None) -> 'ExtensionDescriptor':
        """Create a descriptor, validating the type first"""
        return cls(
            name=name,
            type=parse_extension_type(extension_type),
            client_id=int(client_id),
            plugin_group=plugin_group or None
        )

    @property
    def base_name(self) -> str:
        """Name without its type prefix (com_foo -> foo)"""
        return self.name[TYPE_PREFIX_LENGTH:]

    @property
    def file_bucket(self) -> str:
        """Staging directory name and archive base name"""
        if self.type == ExtensionType.PLUGIN:
            return f"plg_{self.plugin_group}_{self.name}"
        if self.type == ExtensionType.TEMPLATE:
            return f"tpl_{self.name}"
        return self.name

    @property
    def package_name(self) -> str:
        """Archive base name including version"""
        return PACKAGE_NAME_PATTERN.format(bucket=self.file_bucket, version=self.version)

    def with_version(self, version: str) -> 'ExtensionDescriptor':
        """Return a copy carrying the manifest version"""
        return replace(self, version=version)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'name': self.name,
            'type': self.type.value,
            'client_id': self.client_id,
            'file_bucket': self.file_bucket,
        }
        if self.plugin_group:
            data['plugin_group'] = self.plugin_group
        if self.version:
            data['version'] = self.version
        return data
