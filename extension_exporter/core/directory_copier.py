"""Recursive directory staging"""

import logging
from pathlib import Path
from typing import Union

from .file_store import FileStore


class DirectoryCopier:
    """Copies source trees into the staging tree"""

    def __init__(self, file_store: FileStore, dir_mode: int):
        self.file_store = file_store
        self.dir_mode = dir_mode
        self.logger = logging.getLogger(self.__class__.__name__)

    def copy(self, source: Union[str, Path], target: Union[str, Path]) -> bool:
        """
        Copy a directory tree, merging into target

        A missing source is not an error: extensions may have no media
        or no administrator half.

        Args:
            source: Source directory
            target: Target directory

        Returns:
            True if anything was copied
        """
        if not self.file_store.is_dir(source):
            self.logger.debug(f"Skipping missing source {source}")
            return False

        self.logger.info(f"Staging {source} -> {target}")
        self.file_store.copy_tree(source, target, self.dir_mode)
        return True
