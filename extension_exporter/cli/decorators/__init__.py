# extension_exporter/cli/decorators/__init__.py
"""CLI decorators"""

from .options import extension_options, host_options, with_exporter

__all__ = [
    'extension_options',
    'host_options',
    'with_exporter',
]
