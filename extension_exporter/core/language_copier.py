# extension_exporter/core/language_copier.py
"""Language file staging"""

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .file_store import FileStore
from .path_resolver import join_relative
from ..constants import LANGUAGE_FILE_SUFFIXES, LANGUAGE_FILE_PATTERN


@dataclass
class LanguageLocation:
    """One language root and where its files are staged

    ``entries`` is the placement table of the matching manifest section;
    None means the manifest declares no such section and the location
    is skipped.
    """
    name: str
    source: Path
    target: Path
    entries: Optional[List[str]] = field(default=None)

    @property
    def is_active(self) -> bool:
        return self.entries is not None


def resolve_language_target(locale: str, filename: str, entries: List[str]) -> str:
    """
    Find where a language file goes below the location's target root

    Args:
        locale: Locale code, e.g. en-GB
        filename: Language file name
        entries: Declared placement table

    Returns:
        Relative target path: the first declared entry with a matching
        basename, else <locale>/<filename>
    """
    for entry in entries:
        if posixpath.basename(entry.replace("\\", "/")) == filename:
            return entry

    return f"{locale}/{filename}"


class LanguageCopier:
    """Copies an extension's .ini files out of the host language roots"""

    def __init__(self, file_store: FileStore, dir_mode: int):
        self.file_store = file_store
        self.dir_mode = dir_mode
        self.logger = logging.getLogger(self.__class__.__name__)

    def copy_location(self, location: LanguageLocation, bucket: str) -> int:
        """
        Copy language files of every locale below a location's source root

        Args:
            location: Language location
            bucket: Extension file bucket (part of the file names)

        Returns:
            Number of files copied
        """
        if not location.is_active:
            return 0

        if not self.file_store.is_dir(location.source):
            self.logger.debug(f"No language root at {location.source}")
            return 0

        copied = 0
        for folder in self.file_store.list_dirs(location.source, recursive=True):
            copied += self.copy_locale(folder.name, folder, location.target, bucket, location.entries)

        self.logger.info(f"Copied {copied} {location.name} language file(s)")
        return copied

    def copy_locale(self,
                    locale: str,
                    source_dir: Path,
                    target_root: Path,
                    bucket: str,
                    entries: List[str]) -> int:
        """Copy the .ini and .sys.ini file of one locale directory"""
        copied = 0

        for suffix in LANGUAGE_FILE_SUFFIXES:
            filename = LANGUAGE_FILE_PATTERN.format(locale=locale, bucket=bucket, suffix=suffix)
            source = Path(source_dir) / filename

            if not self.file_store.is_file(source):
                continue

            target = join_relative(target_root, resolve_language_target(locale, filename, entries))

            self.file_store.make_dirs(target.parent, self.dir_mode)
            self.file_store.copy_file(source, target)
            self.logger.debug(f"Language file {source} -> {target}")
            copied += 1

        return copied
