"""Permission normalization for exported artifacts"""

import logging
from pathlib import Path
from typing import Union

from .file_store import FileStore


class PermissionFixer:
    """Applies fixed modes so the result does not depend on the source umask"""

    def __init__(self, file_store: FileStore, dir_mode: int, file_mode: int):
        self.file_store = file_store
        self.dir_mode = dir_mode
        self.file_mode = file_mode
        self.logger = logging.getLogger(self.__class__.__name__)

    def fix_tree(self, root: Union[str, Path]) -> None:
        """chmod every file to file_mode and every directory (root included) to dir_mode"""
        root = Path(root)
        if not self.file_store.is_dir(root):
            return

        for file_path in self.file_store.list_files(root, recursive=True):
            self.file_store.chmod(file_path, self.file_mode)

        for directory in self.file_store.list_dirs(root, recursive=True):
            self.file_store.chmod(directory, self.dir_mode)

        self.file_store.chmod(root, self.dir_mode)
        self.logger.debug(f"Normalized permissions below {root}")

    def fix_file(self, path: Union[str, Path]) -> None:
        """chmod a single file to file_mode"""
        self.file_store.chmod(path, self.file_mode)
