"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements full-content file hashing with a selectable hashlib algorithm.

This implementation ensures predictable behavior:
- The whole file is read and hashed in one pass
- Digests are returned as lowercase hex strings
- Read failures are raised, never replaced by a placeholder digest
"""

import hashlib
import logging

from latestonly.core.models import HashAlgorithm
from latestonly.core.interfaces import Hasher
from latestonly.core.exceptions import FileOperationError

logger = logging.getLogger(__name__)


def hash_bytes(data: bytes, algorithm: HashAlgorithm) -> str:
    """Hex digest of `data` under `algorithm`."""
    return hashlib.new(algorithm.hashlib_name, data).hexdigest()


class HasherImpl(Hasher):
    """
    Concrete implementation of the Hasher interface backed by hashlib.
    Holds no state, so one instance can serve any number of runs.
    """

    def compute(self, path: str, algorithm: HashAlgorithm) -> str:
        """
        Computes the digest of the entire file.

        Raises:
            FileOperationError: If the file cannot be opened or read
        """
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise FileOperationError("hash", path, e) from e
        digest = hash_bytes(data, algorithm)
        logger.debug(f"{algorithm.value} {digest} {path}")
        return digest
