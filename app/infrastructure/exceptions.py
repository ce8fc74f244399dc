"""Infrastructure exceptions for storage and external operations.

Storage errors extend FlowFillException so callers can report them
consistently with domain errors.
"""

from app.domain.exceptions import FlowFillException


class StorageException(FlowFillException):
    """Base exception for storage operations."""


class StoragePermissionError(StorageException):
    """Insufficient permissions for storage operation (including paths outside the root)."""

    def __init__(self, file_path: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {file_path}",
            "STORAGE_PERMISSION_DENIED",
            {"file_path": file_path, "operation": operation},
        )
