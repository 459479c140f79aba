"""Error types raised by gradlesync."""

from __future__ import annotations

from pathlib import Path


class DescriptorValidationError(ValueError):
    """Raised when a version descriptor is missing required data or malformed."""


class FileSyncError(Exception):
    """Raised when a target file cannot be digested or written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
