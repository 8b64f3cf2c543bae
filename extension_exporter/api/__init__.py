"""Public API for extension-exporter"""

from .exceptions import (
    ExporterError,
    ConfigurationError,
    UnsupportedTypeError,
    NotFoundError,
    ManifestError,
    ExportIOError,
)
from .exporter import Exporter, export

__all__ = [
    # Main classes
    "Exporter",

    # Core API functions
    "export",

    # Exceptions
    "ExporterError",
    "ConfigurationError",
    "UnsupportedTypeError",
    "NotFoundError",
    "ManifestError",
    "ExportIOError",
]
