"""Global constants for extension-exporter"""

from enum import Enum

APP_NAME = "extension-exporter"

# Project identification
PROJECT_CONFIG_FILE = ".extension-exporter.yaml"

# Default configuration values
DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644
DEFAULT_ADMIN_DIR = "administrator"

# Client identifiers
CLIENT_SITE = 0
CLIENT_ADMINISTRATOR = 1
CLIENT_NAMES = {
    "site": CLIENT_SITE,
    "admin": CLIENT_ADMINISTRATOR,
    "administrator": CLIENT_ADMINISTRATOR,
}

# Host directory layout
COMPONENTS_DIR = "components"
MODULES_DIR = "modules"
PLUGINS_DIR = "plugins"
TEMPLATES_DIR = "templates"
MEDIA_DIR = "media"
LANGUAGE_DIR = "language"

# Extension name prefix length ("com_", "mod_")
TYPE_PREFIX_LENGTH = 4

# Language files belonging to an extension
LANGUAGE_FILE_SUFFIXES = ("ini", "sys.ini")
LANGUAGE_FILE_PATTERN = "{locale}.{bucket}.{suffix}"

# Archive naming
PACKAGE_NAME_PATTERN = "{bucket}-{version}"
ARCHIVE_EXTENSION = ".zip"

# Earliest timestamp a ZIP entry can carry
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)

# Logging
LOG_FORMAT = "%(message)s"


class ExtensionType(Enum):
    """Supported extension archetypes"""
    COMPONENT = "component"
    MODULE = "module"
    PLUGIN = "plugin"
    TEMPLATE = "template"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "EE001"
    UNSUPPORTED_TYPE = "EE002"
    MISSING_PLUGIN_GROUP = "EE003"
    MANIFEST_NOT_FOUND = "EE004"
    MANIFEST_INVALID = "EE005"
    FILESYSTEM_ERROR = "EE006"
    ARCHIVE_FAILED = "EE007"


# Environment variables
ENV_CONFIG_PATH = "EXTENSION_EXPORTER_CONFIG"
ENV_EXPORT_DIR = "EXTENSION_EXPORTER_EXPORT_DIR"
ENV_SITE_ROOT = "EXTENSION_EXPORTER_SITE_ROOT"
ENV_ADMIN_ROOT = "EXTENSION_EXPORTER_ADMIN_ROOT"
ENV_LOG_LEVEL = "EXTENSION_EXPORTER_LOG_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_PACKAGE = "📦"

# Messages templates
MSG_STAGING_REMOVED = f"{EMOJI_SUCCESS} Removed staging tree: {{path}}"
