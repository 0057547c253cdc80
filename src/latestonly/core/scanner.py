"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Lists the candidate files of a single directory.
Features:
- Only immediate entries are considered; subdirectories and symlinks are ignored
- Reserved names (the persisted index file) are skipped explicitly
- Results are sorted by filename so reconciliation order is reproducible
"""

import os
from typing import List, Optional, Iterable
from pathlib import Path
import logging

from latestonly.core.models import RESULTS_FILENAME
from latestonly.core.interfaces import FileScanner
from latestonly.core.exceptions import FileOperationError

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans one directory level for regular files.

    Attributes:
        root_dir: Directory to scan
        excluded_names: File names that are never returned (defaults to the index file)
    """

    def __init__(self, root_dir: str, excluded_names: Optional[Iterable[str]] = None):
        self.root_dir = root_dir
        if excluded_names is None:
            excluded_names = [RESULTS_FILENAME]
        self.excluded_names = set(excluded_names)

    def scan(self) -> List[str]:
        """
        Returns absolute paths of the directory's regular files, sorted by name.

        Raises:
            FileOperationError: If the directory is missing or cannot be listed
        """
        root_path = Path(self.root_dir)
        logger.debug(f"Scanning directory: {self.root_dir}")

        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise FileOperationError("scan", self.root_dir, NotADirectoryError(error_msg))

        found_files = []
        try:
            with os.scandir(root_path) as entries:
                for entry in entries:
                    if entry.name in self.excluded_names:
                        logger.debug(f"Skipping reserved file: {entry.name}")
                        continue
                    if self._is_regular_file(entry):
                        found_files.append(entry.name)
        except OSError as e:
            logger.error(f"Cannot list {self.root_dir}: {e}")
            raise FileOperationError("scan", self.root_dir, e) from e

        found_files.sort()
        base = os.path.abspath(str(root_path))
        logger.debug(f"Scan completed. Found {len(found_files)} files.")
        return [os.path.join(base, name) for name in found_files]

    @staticmethod
    def _is_regular_file(entry: os.DirEntry) -> bool:
        # Symlinks are never candidates, even when they point at a file
        try:
            return entry.is_file(follow_symlinks=False)
        except OSError:
            return False
