"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hash_index.py
Persisted digest -> path mapping kept between runs.

The index is read wholesale at the start of a run and written wholesale at the
end. It is a plain object owned by one run; there is no module-level state.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple, Union

from latestonly.core.exceptions import FileOperationError, IndexFormatError

logger = logging.getLogger(__name__)


def normalize_path(path: Union[str, Path]) -> str:
    """Absolute, case-normalized form used when comparing paths."""
    return os.path.normcase(os.path.abspath(str(path)))


class HashIndex:
    """
    Mapping from content digest to the path of its canonical survivor.
    Keys are unique: one surviving file per distinct content.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries) if entries else {}

    # ---------- persistence ----------

    @classmethod
    def load(cls, path: Union[str, Path]) -> "HashIndex":
        """
        Load the index from `path`, or return an empty index if the file is absent.

        Raises:
            IndexFormatError: If the file exists but is not a flat JSON object of strings
            FileOperationError: If the file exists but cannot be read
        """
        index_path = Path(path)
        if not index_path.exists():
            logger.debug(f"No index at {index_path}, starting empty")
            return cls()

        try:
            raw = index_path.read_bytes()
        except OSError as e:
            raise FileOperationError("read-index", str(index_path), e) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise IndexFormatError(f"Malformed index file {index_path}: {e}") from e

        if not isinstance(data, dict):
            raise IndexFormatError(
                f"Malformed index file {index_path}: expected an object, got {type(data).__name__}"
            )
        for digest, file_path in data.items():
            if not isinstance(file_path, str):
                raise IndexFormatError(
                    f"Malformed index file {index_path}: path for {digest} is not a string"
                )

        logger.debug(f"Loaded {len(data)} entries from {index_path}")
        return cls(data)

    def save(self, path: Union[str, Path]) -> None:
        """
        Serialize the full mapping to `path`, replacing any previous content.

        Raises:
            FileOperationError: If the file cannot be written
        """
        index_path = Path(path)
        try:
            index_path.write_text(
                json.dumps(self._entries, indent=2, sort_keys=True, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise FileOperationError("write-index", str(index_path), e) from e
        logger.debug(f"Saved {len(self._entries)} entries to {index_path}")

    # ---------- queries ----------

    def lookup(self, digest: str) -> Optional[str]:
        return self._entries.get(digest)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._entries.items()))

    def as_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    # ---------- mutation ----------

    def insert(self, digest: str, path: str) -> None:
        """Record `path` as the survivor for `digest`, replacing any previous one."""
        self._entries[digest] = path

    def remove(self, digest: str) -> Optional[str]:
        return self._entries.pop(digest, None)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, digest: object) -> bool:
        return digest in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashIndex):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return f"<HashIndex entries={len(self._entries)}>"
