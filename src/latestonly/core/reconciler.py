"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reconciler.py
Decides which file survives for every distinct content and which files are redundant.

PASSES
------
1. Scan      : list the directory's regular files in filename order (index file excluded)
2. Hash      : build a ScanEntry (digest, path, mtime) for every file
3. Invalidate: drop index entries whose file now hashes to a different digest
4. Resolve   : walk entries in scan order against the index
                 - unknown digest            -> file becomes the survivor
                 - digest maps to same file  -> nothing to do
                 - current file strictly newer -> old survivor scheduled, index updated
                 - otherwise (older or tie)  -> current file scheduled, index untouched
5. Heal      : optional, drop entries that point at files which no longer exist

The index passed in is mutated in place and returned in the result.
"""

import os
import logging
from typing import Callable, Dict, List, Optional, Set

from latestonly.core.models import (
    HashAlgorithm, ScanEntry, ReconcileResult, DeduplicationStats, RESULTS_FILENAME)
from latestonly.core.interfaces import Reconciler, Hasher
from latestonly.core.hasher import HasherImpl
from latestonly.core.scanner import FileScannerImpl
from latestonly.core.hash_index import HashIndex, normalize_path
from latestonly.core.exceptions import FileOperationError

logger = logging.getLogger(__name__)


def get_mtime_ns(path: str) -> int:
    """
    Modification time of `path` in nanoseconds.

    Raises:
        FileOperationError: If the file metadata is unavailable
    """
    try:
        return os.stat(path).st_mtime_ns
    except OSError as e:
        raise FileOperationError("stat", path, e) from e


class ReconcilerImpl(Reconciler):
    """
    Reconciliation engine for a single directory.

    Args:
        hasher: Digest implementation (HasherImpl by default)
        heal_stale_entries: Treat index entries pointing at missing files as absent
            instead of failing the run
        results_filename: Name of the index file, excluded from the scan
    """

    def __init__(
            self,
            hasher: Optional[Hasher] = None,
            heal_stale_entries: bool = False,
            results_filename: str = RESULTS_FILENAME
    ):
        self.hasher = hasher or HasherImpl()
        self.heal_stale_entries = heal_stale_entries
        self.results_filename = results_filename

    def reconcile(
            self,
            directory: str,
            algorithm: HashAlgorithm,
            index: HashIndex,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ReconcileResult:
        stats = DeduplicationStats()
        result = ReconcileResult(index=index, stats=stats)

        scanner = FileScannerImpl(directory, excluded_names=[self.results_filename])
        paths = scanner.scan()

        result.entries = self._hash_files(paths, algorithm, progress_callback)
        stats.files_scanned = len(result.entries)

        scanned: Dict[str, ScanEntry] = {normalize_path(e.path): e for e in result.entries}
        stats.changed_entries_dropped = self._drop_changed_entries(index, scanned)

        scheduled: Set[str] = set()
        for entry in result.entries:
            self._resolve(entry, index, scanned, scheduled, result)

        if self.heal_stale_entries:
            stats.stale_entries_dropped += self._drop_missing_entries(index)

        stats.duplicates_found = len(result.deletion_set)
        logger.debug(
            f"Reconciled {stats.files_scanned} files: "
            f"{len(index)} survivors, {len(result.deletion_set)} scheduled for deletion"
        )
        return result

    def _hash_files(
            self,
            paths: List[str],
            algorithm: HashAlgorithm,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[ScanEntry]:
        entries = []
        total = len(paths)
        for i, path in enumerate(paths, 1):
            digest = self.hasher.compute(path, algorithm)
            entries.append(ScanEntry(digest=digest, path=path, mtime_ns=get_mtime_ns(path)))
            if progress_callback:
                progress_callback("hashing", i, total)
        return entries

    @staticmethod
    def _drop_changed_entries(index: HashIndex, scanned: Dict[str, ScanEntry]) -> int:
        """Remove entries whose file was rescanned with different content."""
        dropped = 0
        for digest, path in index.items():
            entry = scanned.get(normalize_path(path))
            if entry is not None and entry.digest != digest:
                logger.debug(f"Content of {path} changed, dropping entry {digest}")
                index.remove(digest)
                dropped += 1
        return dropped

    def _resolve(
            self,
            entry: ScanEntry,
            index: HashIndex,
            scanned: Dict[str, ScanEntry],
            scheduled: Set[str],
            result: ReconcileResult
    ) -> None:
        current = normalize_path(entry.path)
        if current in scheduled:
            return

        existing_path = index.lookup(entry.digest)
        if existing_path is None:
            index.insert(entry.digest, entry.path)
            result.stats.new_digests += 1
            return

        existing = normalize_path(existing_path)
        if existing == current:
            return

        existing_mtime = self._survivor_mtime(existing_path, scanned)
        if existing_mtime is None:
            # stale entry, healing enabled
            logger.debug(f"Survivor {existing_path} is gone, {entry.path} takes its place")
            index.insert(entry.digest, entry.path)
            result.stats.stale_entries_dropped += 1
            return

        if entry.mtime_ns > existing_mtime:
            logger.debug(f"{entry.path} supersedes {existing_path}")
            self._schedule(existing_path, scheduled, result)
            index.insert(entry.digest, entry.path)
            result.stats.superseded += 1
        else:
            logger.debug(f"{entry.path} duplicates {existing_path}")
            self._schedule(entry.path, scheduled, result)

    def _survivor_mtime(self, path: str, scanned: Dict[str, ScanEntry]) -> Optional[int]:
        """Mtime of the recorded survivor; None if it is missing and healing is on."""
        entry = scanned.get(normalize_path(path))
        if entry is not None:
            return entry.mtime_ns
        try:
            return get_mtime_ns(path)
        except FileOperationError as e:
            if self.heal_stale_entries and isinstance(e.reason, FileNotFoundError):
                return None
            logger.error(f"Recorded survivor is unavailable: {e}")
            raise

    @staticmethod
    def _schedule(path: str, scheduled: Set[str], result: ReconcileResult) -> None:
        scheduled.add(normalize_path(path))
        result.deletion_set.append(path)

    @staticmethod
    def _drop_missing_entries(index: HashIndex) -> int:
        dropped = 0
        for digest, path in index.items():
            if not os.path.exists(path):
                logger.debug(f"Dropping stale entry {digest} -> {path}")
                index.remove(digest)
                dropped += 1
        return dropped
