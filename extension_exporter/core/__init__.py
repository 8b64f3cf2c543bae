"""Core functionality for extension-exporter"""

from .file_store import FileStore, LocalFileStore
from .path_resolver import PathResolver, PathRule, PATH_RULES, join_relative
from .manifest_reader import ManifestReader
from .directory_copier import DirectoryCopier
from .language_copier import LanguageCopier, LanguageLocation, resolve_language_target
from .archiver import ZipArchiver
from .permission_fixer import PermissionFixer

__all__ = [
    "FileStore",
    "LocalFileStore",
    "PathResolver",
    "PathRule",
    "PATH_RULES",
    "join_relative",
    "ManifestReader",
    "DirectoryCopier",
    "LanguageCopier",
    "LanguageLocation",
    "resolve_language_target",
    "ZipArchiver",
    "PermissionFixer",
]
