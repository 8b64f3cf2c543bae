"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: Optional[str]
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus
    message: str = ""
    errors: List[ErrorDetail] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_error(self, code: Optional[str], message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.now()
        if status:
            self.status = status


@dataclass
class ExportResult(Result):
    """Result of an export operation"""

    extension_name: Optional[str] = None
    extension_type: Optional[str] = None
    package_name: Optional[str] = None
    archive_path: Optional[Path] = None
    archive_size: Optional[int] = None
    staging_path: Optional[Path] = None
    file_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "extension": {
                "name": self.extension_name,
                "type": self.extension_type,
            },
            "package_name": self.package_name,
            "archive_path": str(self.archive_path) if self.archive_path else None,
            "archive_size": self.archive_size,
            "staging_path": str(self.staging_path) if self.staging_path else None,
            "file_count": self.file_count,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": self.warnings,
            "duration": self.duration,
            "metadata": self.metadata
        }
