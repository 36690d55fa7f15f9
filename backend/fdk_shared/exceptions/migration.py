"""
Data file exceptions raised by the migration runs

Both are fatal: the run aborts and nothing is written.
"""

from .base import DomainException


class MigrationException(DomainException):
    """Base migration error"""
    pass


class DataFileNotFoundError(MigrationException):
    """Input data file missing or unreadable"""

    def __init__(self, path: str, reason: str = None):
        super().__init__(
            message=f"Data file not found: {path}",
            code="DATA_FILE_NOT_FOUND",
            details={"path": path, "reason": reason} if reason else {"path": path},
        )
        self.path = path


class DataFileFormatError(MigrationException):
    """Input data file is not valid JSON or has an unexpected shape"""

    def __init__(self, path: str, reason: str, index: int = None):
        details = {"path": path, "reason": reason}
        if index is not None:
            details["index"] = index
        location = f"{path} (record {index})" if index is not None else path
        super().__init__(
            message=f"Malformed data file {location}: {reason}",
            code="DATA_FILE_FORMAT_ERROR",
            details=details,
        )
        self.path = path
        self.index = index
