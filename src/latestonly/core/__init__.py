"""
Core deduplication engine — scanner, hasher, hash index and reconciler.

This package contains the pure logic of latestonly:
- FileScannerImpl: single-level directory listing, sorted, index file excluded
- HasherImpl: hashlib-based full-content digests (MD5, SHA1, SHA256, SHA512)
- HashIndex: persisted digest -> survivor path mapping (results.json)
- ReconcilerImpl: newest-survives resolution producing the deletion set
- Models: HashAlgorithm, ScanEntry, DeduplicationParams and result objects

Nothing here deletes files; that is left to latestonly.services.
"""

from .exceptions import LatestOnlyError, ConfigurationError, IndexFormatError, FileOperationError
from .models import (
    HashAlgorithm, ScanEntry, DeduplicationParams, DeduplicationStats,
    ReconcileResult, RESULTS_FILENAME)
from .hash_index import HashIndex
from .hasher import HasherImpl
from .scanner import FileScannerImpl
from .reconciler import ReconcilerImpl

__all__ = [
    "LatestOnlyError",
    "ConfigurationError",
    "IndexFormatError",
    "FileOperationError",
    "HashAlgorithm",
    "ScanEntry",
    "DeduplicationParams",
    "DeduplicationStats",
    "ReconcileResult",
    "RESULTS_FILENAME",
    "HashIndex",
    "HasherImpl",
    "FileScannerImpl",
    "ReconcilerImpl",
]
