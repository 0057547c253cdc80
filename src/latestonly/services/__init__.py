"""File removal and deletion-set execution services."""

from .file_service import FileService
from .deletion_service import DeletionExecutor

__all__ = ["FileService", "DeletionExecutor"]
