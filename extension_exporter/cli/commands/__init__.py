"""CLI commands"""

from . import export
from . import paths
from . import clean

__all__ = [
    "export",
    "paths",
    "clean",
]
