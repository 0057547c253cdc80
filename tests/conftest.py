"""
Shared fixtures for latestonly tests.
Creates isolated temporary directories with files of controlled content and mtime.
"""
import os
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Optional
import sys

# Add src/ to sys.path so 'latestonly' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Fixed base time (2024-01-01 00:00:00 UTC) so tests never depend on the clock
BASE_MTIME_NS = 1_704_067_200 * 1_000_000_000
SECOND_NS = 1_000_000_000


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_file(temp_dir) -> Callable[..., Path]:
    """
    Factory: make_file("a.txt", b"X", age=2) writes the file and sets its mtime
    to BASE_MTIME_NS + age seconds (higher age value = newer file).
    """
    def _make(name: str, content: bytes, age: Optional[int] = 0, directory: Optional[Path] = None) -> Path:
        path = (directory or temp_dir) / name
        path.write_bytes(content)
        if age is not None:
            mtime = BASE_MTIME_NS + age * SECOND_NS
            os.utime(path, ns=(mtime, mtime))
        return path
    return _make


@pytest.fixture
def test_files(make_file, temp_dir):
    """
    Directory with:
    - old.txt / new.txt: identical content, new.txt is newer
    - unique1.txt / unique2.txt: distinct content
    - subdir/copy.txt: same content as the pair (must be ignored)
    """
    files = {
        "old": make_file("old.txt", b"A" * 1024, age=1),
        "new": make_file("new.txt", b"A" * 1024, age=5),
        "unique1": make_file("unique1.txt", b"C" * 1500, age=2),
        "unique2": make_file("unique2.txt", b"D" * 2500, age=3),
    }
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_copy"] = make_file("copy.txt", b"A" * 1024, age=9, directory=subdir)
    return files
