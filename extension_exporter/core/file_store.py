# extension_exporter/core/file_store.py
"""Filesystem capability used by the export pipeline"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import List, Union

from ..api.exceptions import ExportIOError

PathLike = Union[str, Path]


class FileStore(ABC):
    """Abstract base class for the filesystem the exporter works against"""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check if a file or directory exists"""
        pass

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        """Check if path is a regular file"""
        pass

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Check if path is a directory"""
        pass

    @abstractmethod
    def make_dirs(self, path: PathLike, mode: int) -> None:
        """
        Create a directory and any missing parents

        Args:
            path: Directory to create
            mode: Permission bits for directories that get created
        """
        pass

    @abstractmethod
    def copy_file(self, source: PathLike, target: PathLike) -> None:
        """Copy a single file, keeping its modification time"""
        pass

    @abstractmethod
    def copy_tree(self, source: PathLike, target: PathLike, dir_mode: int) -> None:
        """
        Copy a directory tree into target, merging with existing content

        Args:
            source: Source directory
            target: Target directory (may already exist)
            dir_mode: Permission bits for directories that get created
        """
        pass

    @abstractmethod
    def move(self, source: PathLike, target: PathLike) -> None:
        """Move a file"""
        pass

    @abstractmethod
    def delete_tree(self, path: PathLike) -> None:
        """Delete a directory tree"""
        pass

    @abstractmethod
    def list_files(self, path: PathLike, recursive: bool = True) -> List[Path]:
        """List regular files below path, sorted"""
        pass

    @abstractmethod
    def list_dirs(self, path: PathLike, recursive: bool = True) -> List[Path]:
        """List directories below path, sorted"""
        pass

    @abstractmethod
    def chmod(self, path: PathLike, mode: int) -> None:
        """Change permission bits"""
        pass

    @abstractmethod
    def read_bytes(self, path: PathLike) -> bytes:
        """Read file content"""
        pass

    @abstractmethod
    def mtime(self, path: PathLike) -> float:
        """Get modification time as a POSIX timestamp"""
        pass

    @abstractmethod
    def size(self, path: PathLike) -> int:
        """Get file size in bytes"""
        pass


@contextmanager
def _io_errors(action: str, path: PathLike):
    """Re-raise OSError as ExportIOError naming the failing path"""
    try:
        yield
    except ExportIOError:
        raise
    except OSError as e:
        raise ExportIOError(f"Failed to {action} ({e.strerror or e})", str(path)) from e


def _raise_walk_error(error: OSError) -> None:
    """os.walk error hook: unreadable directories abort the listing"""
    raise ExportIOError(f"Failed to list directory ({error.strerror or error})", error.filename)


def _first_copy_failure(error: shutil.Error, source: PathLike):
    """Source path and reason of the first failure collected by copytree"""
    failures = error.args[0] if error.args and isinstance(error.args[0], list) else []
    if failures:
        failed_source, _, reason = failures[0]
        return str(failed_source), reason
    return str(source), error


class LocalFileStore(FileStore):
    """Local disk implementation"""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def make_dirs(self, path: PathLike, mode: int) -> None:
        path = Path(path)
        if path.is_dir():
            return

        # Create top-down so every new level gets the requested mode
        missing = []
        current = path
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for directory in reversed(missing):
            with _io_errors("create directory", directory):
                directory.mkdir(mode=mode)
                # mkdir is subject to the umask
                os.chmod(directory, mode)

    def copy_file(self, source: PathLike, target: PathLike) -> None:
        with _io_errors("copy file", source):
            shutil.copy2(source, target)

    def copy_tree(self, source: PathLike, target: PathLike, dir_mode: int) -> None:
        source = Path(source)
        target = Path(target)

        self.make_dirs(target, dir_mode)

        # Symlinked files and directories are copied as their content
        with _io_errors("copy directory", source):
            try:
                shutil.copytree(source, target, copy_function=shutil.copy2, dirs_exist_ok=True)
            except shutil.Error as e:
                failed_path, reason = _first_copy_failure(e, source)
                raise ExportIOError(f"Failed to copy directory ({reason})", failed_path) from e

        # copytree carries over source directory modes
        for directory in [target] + self.list_dirs(target):
            self.chmod(directory, dir_mode)

        self.logger.debug(f"Copied {source} -> {target}")

    def move(self, source: PathLike, target: PathLike) -> None:
        with _io_errors("move file", source):
            shutil.move(str(source), str(target))

    def delete_tree(self, path: PathLike) -> None:
        with _io_errors("delete directory", path):
            shutil.rmtree(path)

    def _walk(self, path: PathLike, recursive: bool):
        for root, dirs, files in os.walk(path, onerror=_raise_walk_error, followlinks=True):
            dirs.sort()
            yield Path(root), dirs, files
            if not recursive:
                break

    def list_files(self, path: PathLike, recursive: bool = True) -> List[Path]:
        return sorted(root / name for root, _, files in self._walk(path, recursive) for name in files)

    def list_dirs(self, path: PathLike, recursive: bool = True) -> List[Path]:
        return sorted(root / name for root, dirs, _ in self._walk(path, recursive) for name in dirs)

    def chmod(self, path: PathLike, mode: int) -> None:
        with _io_errors("change permissions of", path):
            os.chmod(path, mode)

    def read_bytes(self, path: PathLike) -> bytes:
        with _io_errors("read file", path):
            return Path(path).read_bytes()

    def mtime(self, path: PathLike) -> float:
        with _io_errors("stat file", path):
            return Path(path).stat().st_mtime

    def size(self, path: PathLike) -> int:
        with _io_errors("stat file", path):
            return Path(path).stat().st_size
