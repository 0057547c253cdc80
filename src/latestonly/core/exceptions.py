"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Error taxonomy shared by the core engine, services and CLI.
"""
from typing import Optional


class LatestOnlyError(Exception):
    """Base class for every error raised by latestonly."""


class ConfigurationError(LatestOnlyError, ValueError):
    """Malformed configuration or unknown hash algorithm."""


class IndexFormatError(LatestOnlyError, ValueError):
    """The persisted hash index could not be parsed."""


class FileOperationError(LatestOnlyError, RuntimeError):
    """
    A filesystem operation failed.

    Attributes:
        operation: Short name of the failing step ("scan", "hash", "stat", "delete", ...)
        path: Path the operation was applied to
    """

    def __init__(self, operation: str, path: str, reason: Optional[BaseException] = None):
        self.operation = operation
        self.path = path
        self.reason = reason
        message = f"{operation} failed for {path}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
