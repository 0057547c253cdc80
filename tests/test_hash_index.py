"""
Tests for HashIndex — load/save of the persisted digest -> path mapping.
"""
import json
import pytest
from latestonly.core.hash_index import HashIndex, normalize_path
from latestonly.core.exceptions import IndexFormatError, FileOperationError


class TestLoad:

    def test_missing_file_gives_empty_index(self, temp_dir):
        index = HashIndex.load(temp_dir / "results.json")
        assert len(index) == 0

    def test_loads_flat_mapping(self, temp_dir):
        path = temp_dir / "results.json"
        path.write_text(json.dumps({"d1": "/x/a.txt", "d2": "/x/b.txt"}))

        index = HashIndex.load(path)

        assert len(index) == 2
        assert index.lookup("d1") == "/x/a.txt"
        assert "d2" in index

    @pytest.mark.parametrize("content", [
        "{not json",
        "[1, 2, 3]",
        '"just a string"',
        '{"d1": 42}',
        '{"d1": {"nested": "x"}}',
        "",
    ])
    def test_malformed_content_is_fatal(self, temp_dir, content):
        """Malformed index is never silently discarded."""
        path = temp_dir / "results.json"
        path.write_text(content)

        with pytest.raises(IndexFormatError):
            HashIndex.load(path)

    @pytest.mark.parametrize("content", [
        b'{"d": "\xff\xfe"}',
        b"\xff\xfe{}",
    ])
    def test_invalid_utf8_is_an_index_format_error(self, temp_dir, content):
        path = temp_dir / "results.json"
        path.write_bytes(content)

        with pytest.raises(IndexFormatError):
            HashIndex.load(path)

    def test_unreadable_index_raises_file_operation_error(self, temp_dir):
        # A directory in place of the file cannot be read
        path = temp_dir / "results.json"
        path.mkdir()

        with pytest.raises(FileOperationError) as exc_info:
            HashIndex.load(path)
        assert exc_info.value.operation == "read-index"


class TestSave:

    def test_save_then_load_preserves_entries(self, temp_dir):
        path = temp_dir / "results.json"
        index = HashIndex({"d1": "/x/a.txt"})
        index.insert("d2", "/x/b.txt")

        index.save(path)

        assert HashIndex.load(path) == index

    def test_save_overwrites_previous_content(self, temp_dir):
        path = temp_dir / "results.json"
        HashIndex({"old": "/x/old.txt", "other": "/x/o.txt"}).save(path)

        HashIndex({"new": "/x/new.txt"}).save(path)

        assert json.loads(path.read_text()) == {"new": "/x/new.txt"}

    def test_saved_file_is_flat_json_object(self, temp_dir):
        path = temp_dir / "results.json"
        HashIndex({"b": "/x/2", "a": "/x/1"}).save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"a": "/x/1", "b": "/x/2"}

    def test_unwritable_location_raises(self, temp_dir):
        path = temp_dir / "missing_dir" / "results.json"

        with pytest.raises(FileOperationError) as exc_info:
            HashIndex().save(path)
        assert exc_info.value.operation == "write-index"


class TestMutation:

    def test_insert_replaces_existing_survivor(self):
        index = HashIndex({"d": "/x/old.txt"})
        index.insert("d", "/x/new.txt")
        assert index.lookup("d") == "/x/new.txt"
        assert len(index) == 1

    def test_remove_returns_previous_path(self):
        index = HashIndex({"d": "/x/a.txt"})
        assert index.remove("d") == "/x/a.txt"
        assert index.remove("d") is None
        assert len(index) == 0

    def test_items_can_be_mutated_during_iteration(self):
        index = HashIndex({"a": "/1", "b": "/2"})
        for digest, _ in index.items():
            index.remove(digest)
        assert len(index) == 0

    def test_constructor_copies_input(self):
        source = {"d": "/x"}
        index = HashIndex(source)
        index.insert("e", "/y")
        assert source == {"d": "/x"}


def test_normalize_path_is_absolute(temp_dir):
    assert normalize_path("relative.txt").endswith("relative.txt")
    assert normalize_path(temp_dir / "a" / ".." / "b.txt") == normalize_path(temp_dir / "b.txt")
