"""
Pickle persistence for the record book.

Only plain entity tuples are written; loading rebuilds the unique lists so a
file holding duplicates is rejected instead of silently accepted.
"""
import logging
import os
import pickle
from pathlib import Path
from typing import Union

from .book import RecordBook
from .exceptions import DuplicateEntityError, StorageError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def _save(obj, path: Path):
    # a failed dump leaves the previous file untouched
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp, "wb") as f:
            pickle.dump(obj, f)
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()


def _load(path: Path, factory):
    try:
        with open(path, "rb") as f:
            return pickle.load(f)
    except FileNotFoundError:
        return factory()
    except (pickle.PickleError, EOFError, AttributeError, ImportError,
            ValueError, TypeError, IndexError) as e:
        logger.warning("Unreadable data file %s: %s", path, e)
        raise StorageError(f"Cannot read {path}: the file is corrupted.") from e


def save_book(book: RecordBook, path: Union[str, Path]) -> None:
    path = Path(path)
    payload = {
        "version": FORMAT_VERSION,
        "contacts": tuple(book.persons),
        "entries": tuple(book.entries),
    }
    try:
        _save(payload, path)
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e.strerror}") from e
    logger.info("Saved %d contacts and %d entries to %s",
                len(payload["contacts"]), len(payload["entries"]), path)


def load_book(path: Union[str, Path]) -> RecordBook:
    path = Path(path)
    payload = _load(path, dict)
    if not payload:
        logger.info("No data file at %s, starting empty", path)
        return RecordBook()
    if not isinstance(payload, dict) or payload.get("version") != FORMAT_VERSION:
        raise StorageError(f"Cannot read {path}: unsupported file format.")
    try:
        book = RecordBook(payload.get("contacts", ()), payload.get("entries", ()))
    except DuplicateEntityError as e:
        logger.warning("Duplicate records in %s: %s", path, e)
        raise StorageError(f"Cannot read {path}: {e}") from e
    logger.info("Loaded %d contacts and %d entries from %s",
                len(book.persons), len(book.entries), path)
    return book
