"""Utility functions for extension-exporter"""

from .file_utils import format_size, format_mode

__all__ = [
    "format_size",
    "format_mode",
]
