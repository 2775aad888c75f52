"""
Exception types raised by the scanner and the label loader.
"""

from pathlib import Path
from typing import Optional


class ExtensionCountError(Exception):
    """Base class for every failure surfaced to the CLI."""


class ScanError(ExtensionCountError):
    """A root could not be walked: missing, unreadable, or a nested read failed."""

    def __init__(self, path: Path, error: Optional[OSError] = None, message: Optional[str] = None):
        self.path = path
        self.error = error
        if message is None:
            reason = error.strerror if error is not None and error.strerror else str(error)
            message = f"Cannot scan {path}: {reason}"
        super().__init__(message)


class CycleError(ScanError):
    def __init__(self, path: Path):
        super().__init__(path, None, f"Symlink cycle detected at {path}")


class LabelsError(ExtensionCountError):
    """The label file exists but does not hold a flat JSON object of strings."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid label data in {path}: {reason}")
