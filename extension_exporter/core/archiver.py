# extension_exporter/core/archiver.py
"""ZIP archive creation"""

import logging
import stat
import time
import zipfile
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .file_store import FileStore
from ..api.exceptions import ExportIOError
from ..constants import ErrorCode, ZIP_EPOCH


def zip_timestamp(mtime: float) -> Tuple[int, int, int, int, int, int]:
    """Convert a POSIX timestamp to a ZIP date_time tuple

    ZIP cannot represent dates before 1980; those are clamped.
    """
    date_time = tuple(time.localtime(mtime)[:6])
    if date_time < ZIP_EPOCH:
        return ZIP_EPOCH
    return date_time


def entry_name(base_dir: Path, file_path: Path) -> str:
    """Archive entry name of a file: base-relative, forward slashes"""
    return file_path.relative_to(base_dir).as_posix()


class ZipArchiver:
    """Builds a ZIP archive from a directory tree

    Entry names are computed against an explicit base directory, so the
    process working directory is never changed.
    """

    def __init__(self,
                 file_store: FileStore,
                 file_mode: Optional[int] = None,
                 compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize archiver

        Args:
            file_store: Filesystem access
            file_mode: Unix permission bits recorded for every entry
                (None keeps ZipInfo's default)
            compression: zipfile compression constant
        """
        self.file_store = file_store
        self.file_mode = file_mode
        self.compression = compression
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, base_dir: Union[str, Path], archive_path: Union[str, Path]) -> List[str]:
        """
        Archive every regular file below base_dir

        Args:
            base_dir: Directory whose content becomes the archive root
            archive_path: Archive file to write (replaced if present)

        Returns:
            Entry names in archive order
        """
        base_dir = Path(base_dir)
        archive_path = Path(archive_path)
        names = []

        self.logger.info(f"Creating archive {archive_path}")

        try:
            with zipfile.ZipFile(archive_path, 'w', self.compression) as archive:
                for file_path in self.file_store.list_files(base_dir, recursive=True):
                    name = entry_name(base_dir, file_path)

                    info = zipfile.ZipInfo(name, date_time=zip_timestamp(self.file_store.mtime(file_path)))
                    info.compress_type = self.compression
                    if self.file_mode is not None:
                        info.external_attr = (stat.S_IFREG | self.file_mode) << 16

                    archive.writestr(info, self.file_store.read_bytes(file_path))
                    names.append(name)

        except OSError as e:
            self._discard(archive_path)
            if isinstance(e, ExportIOError):
                raise
            raise ExportIOError(
                f"Failed to write archive ({e.strerror or e})", str(archive_path), ErrorCode.ARCHIVE_FAILED
            ) from e

        self.logger.debug(f"Archived {len(names)} file(s) from {base_dir}")
        return names

    def _discard(self, archive_path: Path) -> None:
        """Remove a partially written archive"""
        try:
            archive_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            self.logger.warning(f"Could not remove partial archive {archive_path}: {e}")
