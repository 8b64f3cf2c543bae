"""Extension Exporter - Package installed CMS extensions for distribution.

Collects an extension's program, language and media files from a site
installation into a staging tree and builds a permission-normalized
ZIP archive from it.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .api.exporter import Exporter, export

# Data models
from .models import ExtensionDescriptor, ExportConfig, ExportResult
from .constants import ExtensionType

# Exceptions
from .api.exceptions import (
    ExporterError,
    ConfigurationError,
    UnsupportedTypeError,
    NotFoundError,
    ManifestError,
    ExportIOError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "Exporter",

    # Core API functions
    "export",

    # Data models
    "ExtensionDescriptor",
    "ExportConfig",
    "ExportResult",
    "ExtensionType",

    # Exceptions
    "ExporterError",
    "ConfigurationError",
    "UnsupportedTypeError",
    "NotFoundError",
    "ManifestError",
    "ExportIOError",
]
