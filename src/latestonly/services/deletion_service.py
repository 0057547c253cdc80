"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/deletion_service.py
Applies a deletion set and persists the resulting index.
"""
import logging
from pathlib import Path
from typing import List, Union, Optional, Callable

from latestonly.core.hash_index import HashIndex
from latestonly.services.file_service import FileService

logger = logging.getLogger(__name__)


class DeletionExecutor:
    """
    Removes every file in a deletion set, then saves the index.

    The first failed removal aborts the run: remaining files are left alone,
    already removed files are not restored and the index is not written, so
    the index from the previous successful run stays on disk.
    """

    def __init__(self, file_service: Optional[FileService] = None):
        self.file_service = file_service or FileService()

    def apply(
            self,
            deletion_set: List[str],
            index: HashIndex,
            index_path: Union[str, Path],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> int:
        """
        Args:
            deletion_set: Paths to remove, in order
            index: Final index to persist after all removals succeed
            index_path: Location of the index file
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Number of files removed
        """
        total = len(deletion_set)
        for i, path in enumerate(deletion_set, 1):
            self.file_service.delete_file(path)
            if progress_callback:
                progress_callback("deleting", i, total)

        index.save(index_path)
        logger.debug(f"Removed {total} files, index saved to {index_path}")
        return total
