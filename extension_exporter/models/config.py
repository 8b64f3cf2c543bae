"""Configuration data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional, Union

from ..api.exceptions import ConfigurationError
from ..constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE, DEFAULT_ADMIN_DIR
from ..utils import format_mode


def parse_mode(value: Union[int, str, None], default: int) -> int:
    """Parse a permission mode given as an int or an octal string

    Accepts 0o755, "0755", "0o755" and "755".
    """
    if value is None or value == "":
        return default

    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid permission mode: {value!r}")

    if isinstance(value, int):
        mode = value
    else:
        text = str(value).strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            mode = int(text, 8)
        except ValueError:
            raise ConfigurationError(f"Invalid permission mode: {value!r}")

    if not 0 <= mode <= 0o7777:
        raise ConfigurationError(f"Permission mode out of range: {oct(mode)}")

    return mode


@dataclass
class ExportConfig:
    """Settings shared by every export run"""

    export_directory: Path
    site_root: Path
    admin_root: Optional[Path] = None
    dir_mode: int = DEFAULT_DIR_MODE
    file_mode: int = DEFAULT_FILE_MODE

    def __post_init__(self):
        """Normalize paths and modes"""
        if not self.export_directory:
            raise ConfigurationError("Export directory is required")
        if not self.site_root:
            raise ConfigurationError("Site root is required")

        self.export_directory = Path(self.export_directory)
        self.site_root = Path(self.site_root)

        if self.admin_root:
            self.admin_root = Path(self.admin_root)
        else:
            self.admin_root = self.site_root / DEFAULT_ADMIN_DIR

        self.dir_mode = parse_mode(self.dir_mode, DEFAULT_DIR_MODE)
        self.file_mode = parse_mode(self.file_mode, DEFAULT_FILE_MODE)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "export_directory": str(self.export_directory),
            "site_root": str(self.site_root),
            "admin_root": str(self.admin_root),
            "dir_mode": format_mode(self.dir_mode),
            "file_mode": format_mode(self.file_mode),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExportConfig':
        """Create from dictionary"""
        return cls(
            export_directory=data.get("export_directory"),
            site_root=data.get("site_root"),
            admin_root=data.get("admin_root"),
            dir_mode=data.get("dir_mode", DEFAULT_DIR_MODE),
            file_mode=data.get("file_mode", DEFAULT_FILE_MODE)
        )
