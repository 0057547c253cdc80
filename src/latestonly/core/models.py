"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for hashing, reconciliation and deletion.
"""

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING
from enum import Enum

from latestonly.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from latestonly.core.hash_index import HashIndex

RESULTS_FILENAME = "results.json"


# =============================
# Enums
# =============================

class HashAlgorithm(Enum):
    """
    Digest functions a run may be configured with.
    Values are the names accepted in configuration files.
    """
    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def hashlib_name(self) -> str:
        """Name understood by hashlib.new()."""
        return self.value.lower()

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """
        Parse a configuration value. Only the exact names MD5, SHA1, SHA256 and SHA512 are accepted.

        Raises:
            ConfigurationError: If the name is not one of the supported algorithms
        """
        if not isinstance(name, str):
            raise ConfigurationError(f"Hash algorithm must be a string, got {type(name).__name__}")
        for algorithm in cls:
            if algorithm.value == name:
                return algorithm
        valid = ", ".join(a.value for a in cls)
        raise ConfigurationError(f"Invalid hash algorithm: '{name}'. Valid options: {valid}")

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class ScanEntry:
    """A file encountered during the current run. Never persisted."""
    digest: str
    path: str
    mtime_ns: int

    def __repr__(self):
        return f"<ScanEntry path={self.path}, digest={self.digest[:12]}>"


@dataclass
class DeduplicationParams:
    """
    Settings for a single run.
    Built from the configuration file (or defaults) by latestonly.config.
    """
    directory: str = "."
    algorithm: HashAlgorithm = HashAlgorithm.MD5
    heal_stale_entries: bool = False
    results_filename: str = RESULTS_FILENAME

    def __post_init__(self):
        if not isinstance(self.algorithm, HashAlgorithm):
            self.algorithm = HashAlgorithm.from_name(self.algorithm)


@dataclass
class DeduplicationStats:
    """Counters collected while reconciling and deleting."""
    files_scanned: int = 0
    new_digests: int = 0
    superseded: int = 0
    duplicates_found: int = 0
    stale_entries_dropped: int = 0
    changed_entries_dropped: int = 0
    files_deleted: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            f"  Files scanned:          {self.files_scanned}",
            f"  New distinct contents:  {self.new_digests}",
            f"  Survivors superseded:   {self.superseded}",
            f"  Duplicates found:       {self.duplicates_found}",
            f"  Files deleted:          {self.files_deleted}",
        ]
        if self.stale_entries_dropped:
            lines.append(f"  Stale entries dropped:  {self.stale_entries_dropped}")
        if self.changed_entries_dropped:
            lines.append(f"  Changed entries dropped: {self.changed_entries_dropped}")
        lines.append(f"  Total time:             {self.total_time:.2f}s")
        return "\n".join(lines)


@dataclass
class ReconcileResult:
    """
    Output of one reconciliation pass.

    Attributes:
        index: The updated in-memory hash index (one survivor per digest)
        deletion_set: Paths scheduled for removal, in the order they were decided
        entries: Every file scanned this run, in scan order
        stats: Counters collected during the pass
    """
    index: "HashIndex"
    deletion_set: List[str] = field(default_factory=list)
    entries: List[ScanEntry] = field(default_factory=list)
    stats: DeduplicationStats = field(default_factory=DeduplicationStats)
