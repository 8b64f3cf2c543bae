"""Exception definitions for extension-exporter API"""

from ..constants import ErrorCode


class ExporterError(Exception):
    """Base exception for extension-exporter"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigurationError(ExporterError):
    """Configuration error (unsupported type, missing settings)"""

    def __init__(self, message: str, error_code: str = ErrorCode.CONFIG_FORMAT_ERROR):
        super().__init__(message, error_code)


class UnsupportedTypeError(ConfigurationError):
    """Extension type is not one of the supported archetypes"""

    def __init__(self, extension_type: str):
        message = f"Extensions of type '{extension_type}' are not supported."
        super().__init__(message, ErrorCode.UNSUPPORTED_TYPE)
        self.extension_type = extension_type


class NotFoundError(ExporterError):
    """Required manifest file not found"""

    def __init__(self, extension_type: str, name: str, expected_path: str):
        message = f"No manifest found for {extension_type} {name} (expected {expected_path})"
        super().__init__(message, ErrorCode.MANIFEST_NOT_FOUND)
        self.extension_type = extension_type
        self.name = name
        self.expected_path = expected_path


class ManifestError(ExporterError):
    """Manifest could not be parsed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_INVALID)


class ExportIOError(ExporterError, OSError):
    """Filesystem operation failed during export"""

    def __init__(self, message: str, path: str = None, error_code: str = ErrorCode.FILESYSTEM_ERROR):
        if path:
            message = f"{message}: {path}"
        super().__init__(message, error_code)
        self.path = path
