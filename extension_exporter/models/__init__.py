# extension_exporter/models/__init__.py
"""Data models for extension-exporter"""

from .extension import ExtensionDescriptor, parse_extension_type
from .config import ExportConfig, parse_mode
from .result import Result, ExportResult, ErrorDetail, OperationStatus

__all__ = [
    # Extension models
    "ExtensionDescriptor",
    "parse_extension_type",

    # Config models
    "ExportConfig",
    "parse_mode",

    # Result models
    "Result",
    "ExportResult",
    "ErrorDetail",
    "OperationStatus",
]
