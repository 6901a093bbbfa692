"""
Contacts and journal entries.

Entities are immutable; editing one means building a replacement with the
same ``id``.
"""
import uuid
from dataclasses import dataclass, field, replace
from typing import Callable, FrozenSet, Iterable

from .collection import UniqueEntityList
from .fields import Address, Date, Description, Email, Name, Phone, Tag

IdSource = Callable[[], uuid.UUID]

MESSAGE_DUPLICATE_PERSON = "This contact already exists in the record book"
MESSAGE_DUPLICATE_ENTRY = "This journal entry already exists in the record book"
MESSAGE_INVALID_PERSON_INDEX = "The contact index provided is invalid"
MESSAGE_INVALID_ENTRY_INDEX = "The journal entry index provided is invalid"


def _tags_text(tags: FrozenSet[Tag]) -> str:
    return "".join(str(t) for t in sorted(tags))


@dataclass(frozen=True)
class Person:
    name: Name
    phone: Phone = Phone.EMPTY
    email: Email = Email.EMPTY
    address: Address = Address.EMPTY
    tags: FrozenSet[Tag] = frozenset()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def named(cls, name: Name, id_source: IdSource = uuid.uuid4) -> "Person":
        """A contact with only a name, as attached to journal entries."""
        return cls(name=name, id=id_source())

    def with_changes(self, **changes) -> "Person":
        return replace(self, **changes)

    def __str__(self):
        parts = [str(self.name)]
        if not self.phone.is_empty:
            parts.append(f"Phone: {self.phone}")
        if not self.email.is_empty:
            parts.append(f"Email: {self.email}")
        if not self.address.is_empty:
            parts.append(f"Address: {self.address}")
        if self.tags:
            parts.append(f"Tags: {_tags_text(self.tags)}")
        return "; ".join(parts)


def same_person(a: Person, b: Person) -> bool:
    return a.name.same_as(b.name)


def person_list(people: Iterable[Person] = ()) -> UniqueEntityList:
    contacts = UniqueEntityList(
        same_person, MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_INDEX
    )
    for person in people:
        contacts.add(person)
    return contacts


@dataclass(frozen=True)
class JournalEntry:
    title: Name
    date: Date
    description: Description = Description(None)
    contacts: UniqueEntityList = field(default_factory=person_list, hash=False)
    tags: FrozenSet[Tag] = frozenset()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def with_changes(self, **changes) -> "JournalEntry":
        return replace(self, **changes)

    def __str__(self):
        parts = [f"{self.title} ({self.date})"]
        if not self.description.is_empty:
            parts.append(f"Description: {self.description}")
        if self.contacts:
            parts.append("Contacts: " + ", ".join(str(p.name) for p in self.contacts))
        if self.tags:
            parts.append(f"Tags: {_tags_text(self.tags)}")
        return "; ".join(parts)


def same_entry(a: JournalEntry, b: JournalEntry) -> bool:
    return a.title.same_as(b.title) and a.date == b.date


def entry_list(entries: Iterable[JournalEntry] = ()) -> UniqueEntityList:
    journal = UniqueEntityList(
        same_entry, MESSAGE_DUPLICATE_ENTRY, MESSAGE_INVALID_ENTRY_INDEX
    )
    for entry in entries:
        journal.add(entry)
    return journal
