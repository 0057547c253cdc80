"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Permanent file removal. There is no trash or undo: removed files are gone.
"""
import os
import logging
from pathlib import Path

from latestonly.core.exceptions import FileOperationError

logger = logging.getLogger(__name__)


class FileService:
    """Filesystem operations used by the deletion executor."""

    @staticmethod
    def delete_file(file_path: str) -> None:
        """
        Permanently removes a regular file.

        Raises:
            FileOperationError: If the file is missing, is not a regular file or cannot be removed
        """
        path = Path(file_path)

        if not path.is_file():
            raise FileOperationError("delete", file_path, FileNotFoundError(f"File not found: {path}"))

        try:
            os.remove(path)
        except OSError as e:
            raise FileOperationError("delete", file_path, e) from e
        logger.debug(f"Deleted {file_path}")
