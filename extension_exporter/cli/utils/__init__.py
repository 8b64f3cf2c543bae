"""CLI utility functions"""

from .output import (
    console,
    format_export_result,
    format_paths_table,
    print_error,
    print_warning,
)

__all__ = [
    'console',
    'format_export_result',
    'format_paths_table',
    'print_error',
    'print_warning',
]
