# extension_exporter/services/__init__.py
"""Business logic services for extension-exporter"""

from .export_service import ExportService, ManifestTargets
from .config_service import ConfigService

__all__ = [
    "ExportService",
    "ManifestTargets",
    "ConfigService",
]
