"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication engine.
These protocols use Python's `typing.Protocol` for structural typing, so tests
and alternative implementations can be plugged in without inheritance.

Key Components:
---------------
- Hasher: Interface for computing a full-content digest of a file.
- FileScanner: Interface for listing the candidate files of a directory.
- Reconciler: Interface for the engine that decides survivors and the deletion set.
"""

from typing import Protocol, List, Optional, Callable
from latestonly.core.models import HashAlgorithm, ReconcileResult
from latestonly.core.hash_index import HashIndex


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""

    def compute(self, path: str, algorithm: HashAlgorithm) -> str:
        """Return the lowercase hex digest of the file at `path`."""
        ...


class FileScanner(Protocol):
    """
    Interface for listing the files of a single directory.

    Methods:
        scan: Returns paths of candidate files in a stable order.
    """
    def scan(self) -> List[str]:
        ...


class Reconciler(Protocol):
    """
    Interface for the reconciliation engine.

    Hashes every candidate file, consults and updates the in-memory index,
    and accumulates the list of redundant files.
    """
    def reconcile(
        self,
        directory: str,
        algorithm: HashAlgorithm,
        index: HashIndex,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> ReconcileResult:
        """
        Args:
            directory: Directory whose immediate files are reconciled.
            algorithm: Digest function to apply.
            index: Index loaded from the previous run; mutated in place.
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            ReconcileResult holding the updated index and the deletion set.
        """
        ...
