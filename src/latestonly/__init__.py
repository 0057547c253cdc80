"""
latestonly — keep only the most recently modified copy of each file content.

Core features:
- Duplicate detection by full-content digest (MD5, SHA1, SHA256 or SHA512)
- The newest copy survives; equal timestamps keep the copy recorded first
- Survivors persisted in results.json inside the scanned directory
- Single-directory, single-threaded, fail-fast on any error
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("latestonly")
except PackageNotFoundError:
    from pathlib import Path as _Path
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from latestonly.commands import DeduplicationCommand
from latestonly.config import load_config
from latestonly.core import (
    HashAlgorithm, DeduplicationParams, ReconcileResult, HashIndex, ReconcilerImpl,
    LatestOnlyError, ConfigurationError, IndexFormatError, FileOperationError)
from latestonly.services import DeletionExecutor, FileService

__all__ = [
    "DeduplicationCommand",
    "load_config",
    "HashAlgorithm",
    "DeduplicationParams",
    "ReconcileResult",
    "HashIndex",
    "ReconcilerImpl",
    "LatestOnlyError",
    "ConfigurationError",
    "IndexFormatError",
    "FileOperationError",
    "DeletionExecutor",
    "FileService",
    "__version__",
]
