"""
In-memory record book: the contact list, the journal and what is on screen.
"""
from typing import Callable, Iterable, List, Optional

from .collection import Index, UniqueEntityList
from .entities import (
    MESSAGE_INVALID_ENTRY_INDEX, MESSAGE_INVALID_PERSON_INDEX,
    JournalEntry, Person, entry_list, person_list,
)
from .exceptions import IndexOutOfRangeError

PersonFilter = Callable[[Person], bool]
EntryFilter = Callable[[JournalEntry], bool]


def show_all(_record) -> bool:
    return True


class RecordBook:
    def __init__(self, people: Iterable[Person] = (), entries: Iterable[JournalEntry] = ()):
        self.persons: UniqueEntityList = person_list(people)
        self.entries: UniqueEntityList = entry_list(entries)
        self._person_filter: PersonFilter = show_all
        self._entry_filter: EntryFilter = show_all

    # --- contacts ---
    def add_person(self, person: Person) -> None:
        self.persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self.persons.set(target.id, edited)

    def remove_person(self, person: Person) -> Person:
        return self.persons.remove_by_id(person.id)

    def filter_persons(self, predicate: Optional[PersonFilter] = None) -> None:
        self._person_filter = predicate or show_all

    def visible_persons(self) -> List[Person]:
        return [p for p in self.persons if self._person_filter(p)]

    def visible_person(self, index: Index) -> Person:
        return _pick(self.visible_persons(), index, MESSAGE_INVALID_PERSON_INDEX)

    # --- journal ---
    def add_entry(self, entry: JournalEntry) -> None:
        self.entries.add(entry)

    def set_entry(self, target: JournalEntry, edited: JournalEntry) -> None:
        self.entries.set(target.id, edited)

    def remove_entry(self, entry: JournalEntry) -> JournalEntry:
        return self.entries.remove_by_id(entry.id)

    def filter_entries(self, predicate: Optional[EntryFilter] = None) -> None:
        self._entry_filter = predicate or show_all

    def visible_entries(self) -> List[JournalEntry]:
        return [e for e in self.entries if self._entry_filter(e)]

    def visible_entry(self, index: Index) -> JournalEntry:
        return _pick(self.visible_entries(), index, MESSAGE_INVALID_ENTRY_INDEX)

    # --- misc ---
    def clear_persons(self) -> None:
        self.persons.clear()
        self._person_filter = show_all

    def clear_entries(self) -> None:
        self.entries.clear()
        self._entry_filter = show_all

    def __repr__(self):
        return f"RecordBook({len(self.persons)} contacts, {len(self.entries)} entries)"


def _pick(records: list, index: Index, message: str):
    if index.one_based > len(records):
        raise IndexOutOfRangeError(message)
    return records[index.zero_based]
