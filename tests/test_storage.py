"""
test_storage.py
---------------
Tests for pickle persistence of the record book.
"""
import pickle

import pytest

from recordbook.book import RecordBook
from recordbook.exceptions import StorageError
from recordbook.parser_util import parse_contacts
from recordbook.storage import FORMAT_VERSION, load_book, save_book


class TestSaveLoad:
    """Test save_book and load_book."""

    def test_round_trip(self, tmp_path, book, lunch):
        book.set_entry(lunch, lunch.with_changes(contacts=parse_contacts(["Alex", "Bea"])))
        path = tmp_path / "book.pkl"
        save_book(book, path)

        loaded = load_book(path)
        assert loaded.persons == book.persons
        assert loaded.entries == book.entries
        assert [p.name.value for p in loaded.entries.as_tuple()[0].contacts] == ["Alex", "Bea"]

    def test_loaded_lists_still_enforce_uniqueness(self, tmp_path, book, alice):
        path = tmp_path / "book.pkl"
        save_book(book, path)
        loaded = load_book(path)
        assert loaded.persons.contains(alice.with_changes(id=None))

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "book.pkl"
        save_book(RecordBook(), path)
        assert path.exists()

    def test_missing_file_gives_empty_book(self, tmp_path):
        loaded = load_book(tmp_path / "absent.pkl")
        assert len(loaded.persons) == 0
        assert len(loaded.entries) == 0

    def test_filters_are_not_saved(self, tmp_path, book):
        book.filter_persons(lambda p: False)
        path = tmp_path / "book.pkl"
        save_book(book, path)
        assert len(load_book(path).visible_persons()) == 3

    def test_failed_write_keeps_previous_file(self, tmp_path, book, monkeypatch):
        path = tmp_path / "book.pkl"
        save_book(book, path)

        def dump_then_fail(obj, f):
            f.write(pickle.dumps(obj)[:10])
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(pickle, "dump", dump_then_fail)
        book.clear_persons()
        with pytest.raises(StorageError, match="No space left"):
            save_book(book, path)
        monkeypatch.undo()

        assert len(load_book(path).persons) == 3
        assert list(tmp_path.iterdir()) == [path]


class TestBadFiles:
    """Test rejection of unreadable files."""

    @pytest.mark.parametrize("content", [
        b"",
        b"not a pickle",
        b"\x80\x09.",
        b"\x80\x04cnosuchmod\nX\n.",
    ])
    def test_corrupted(self, tmp_path, content):
        path = tmp_path / "book.pkl"
        path.write_bytes(content)
        with pytest.raises(StorageError, match="corrupted"):
            load_book(path)

    def test_unknown_format(self, tmp_path):
        path = tmp_path / "book.pkl"
        path.write_bytes(pickle.dumps({"version": FORMAT_VERSION + 1}))
        with pytest.raises(StorageError, match="unsupported"):
            load_book(path)

    def test_duplicates_in_file(self, tmp_path, alice):
        path = tmp_path / "book.pkl"
        twin = alice.with_changes(id=None)
        path.write_bytes(pickle.dumps({"version": FORMAT_VERSION, "contacts": (alice, twin), "entries": ()}))
        with pytest.raises(StorageError, match="already exists"):
            load_book(path)
