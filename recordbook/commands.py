"""
Parsed commands.

A command is an immutable value built by a parser; ``execute`` applies it to
a ``RecordBook`` and returns what the console should show. A command that
raises leaves the book untouched.
"""
import logging
from dataclasses import dataclass, fields
from typing import FrozenSet, Optional

from .book import RecordBook
from .collection import Index, UniqueEntityList
from .entities import JournalEntry, Person
from .fields import Address, Date, Description, Email, Name, Phone, Tag
from .scope import Scope

logger = logging.getLogger(__name__)

MESSAGE_PERSONS_LISTED = "{} contacts listed!"
MESSAGE_ENTRIES_LISTED = "{} journal entries listed!"


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    listing: Optional[Scope] = None
    show_help: bool = False
    exit: bool = False


class Command:
    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    def execute(self, book: RecordBook) -> CommandResult:
        raise NotImplementedError


# ────────────────────────────────────────────────────────────────────────────
# add
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class AddContactCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add in/c: Adds a contact to the record book.\n"
        "Parameters: n/NAME [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: add in/c n/John Doe p/98765432 e/johnd@example.com t/friends"
    )
    MESSAGE_SUCCESS = "New contact added: {}"

    person: Person

    def execute(self, book):
        book.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.person), Scope.CONTACTS)


@dataclass(frozen=True)
class AddEntryCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add in/j: Adds an entry to the journal.\n"
        "Parameters: n/TITLE [d/DATE] [desc/DESCRIPTION] [c/CONTACT]... [t/TAG]...\n"
        "Example: add in/j n/Lunch d/01-03-2024 desc/Talked shop c/John Doe t/work"
    )
    MESSAGE_SUCCESS = "New journal entry added: {}"

    entry: JournalEntry

    def execute(self, book):
        book.add_entry(self.entry)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.entry), Scope.JOURNAL)


# ────────────────────────────────────────────────────────────────────────────
# delete
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class DeleteContactCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete in/c: Deletes the contact at INDEX in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete in/c 1"
    )
    MESSAGE_SUCCESS = "Deleted contact: {}"

    index: Index

    def execute(self, book):
        target = book.visible_person(self.index)
        book.remove_person(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target), Scope.CONTACTS)


@dataclass(frozen=True)
class DeleteEntryCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete in/j: Deletes the journal entry at INDEX in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete in/j 1"
    )
    MESSAGE_SUCCESS = "Deleted journal entry: {}"

    index: Index

    def execute(self, book):
        target = book.visible_entry(self.index)
        book.remove_entry(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target), Scope.JOURNAL)


# ────────────────────────────────────────────────────────────────────────────
# edit
# ────────────────────────────────────────────────────────────────────────────
class _Descriptor:
    """Fields left as None are not edited."""

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def changes(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class EditPersonDescriptor(_Descriptor):
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    tags: Optional[FrozenSet[Tag]] = None


@dataclass(frozen=True)
class EditEntryDescriptor(_Descriptor):
    title: Optional[Name] = None
    date: Optional[Date] = None
    description: Optional[Description] = None
    contacts: Optional[UniqueEntityList] = None
    tags: Optional[FrozenSet[Tag]] = None


@dataclass(frozen=True)
class EditContactCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit in/c: Edits the contact at INDEX in the displayed list. "
        "Given values overwrite existing ones; a lone t/ removes all tags.\n"
        "Parameters: INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: edit in/c 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited contact: {}"

    index: Index
    descriptor: EditPersonDescriptor

    def execute(self, book):
        target = book.visible_person(self.index)
        edited = target.with_changes(**self.descriptor.changes())
        book.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited), Scope.CONTACTS)


@dataclass(frozen=True)
class EditEntryCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit in/j: Edits the journal entry at INDEX in the displayed list. "
        "Given values overwrite existing ones; a lone t/ removes all tags.\n"
        "Parameters: INDEX [n/TITLE] [d/DATE] [desc/DESCRIPTION] [c/CONTACT]... [t/TAG]...\n"
        "Example: edit in/j 2 d/05-03-2024 desc/Moved to Friday"
    )
    MESSAGE_SUCCESS = "Edited journal entry: {}"

    index: Index
    descriptor: EditEntryDescriptor

    def execute(self, book):
        target = book.visible_entry(self.index)
        edited = target.with_changes(**self.descriptor.changes())
        book.set_entry(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited), Scope.JOURNAL)


# ────────────────────────────────────────────────────────────────────────────
# find
# ────────────────────────────────────────────────────────────────────────────
def _contains(haystack, needle: Optional[str]) -> bool:
    return needle is None or needle.casefold() in str(haystack).casefold()


def _has_tags(tags: FrozenSet[Tag], wanted: FrozenSet[Tag]) -> bool:
    return wanted <= tags


@dataclass(frozen=True)
class PersonMatcher:
    """Matches contacts whose fields contain every given string."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: FrozenSet[Tag] = frozenset()

    def __call__(self, person: Person) -> bool:
        return (
            _contains(person.name, self.name)
            and _contains(person.phone, self.phone)
            and _contains(person.email, self.email)
            and _contains(person.address, self.address)
            and _has_tags(person.tags, self.tags)
        )


@dataclass(frozen=True)
class EntryMatcher:
    """Matches journal entries whose fields contain every given string."""

    title: Optional[str] = None
    date: Optional[Date] = None
    description: Optional[str] = None
    tags: FrozenSet[Tag] = frozenset()

    def __call__(self, entry: JournalEntry) -> bool:
        return (
            _contains(entry.title, self.title)
            and (self.date is None or entry.date == self.date)
            and _contains(entry.description, self.description)
            and _has_tags(entry.tags, self.tags)
        )


@dataclass(frozen=True)
class FindContactCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find in/c: Finds all contacts whose fields contain the given strings "
        "and that carry all the given tags.\n"
        "Parameters: [n/NAME] [a/ADDRESS] [e/EMAIL] [p/PHONE] [t/TAG]..."
    )

    predicate: PersonMatcher

    def execute(self, book):
        book.filter_persons(self.predicate)
        shown = len(book.visible_persons())
        return CommandResult(MESSAGE_PERSONS_LISTED.format(shown), Scope.CONTACTS)


@dataclass(frozen=True)
class FindEntryCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find in/j: Finds all journal entries whose fields contain the given "
        "strings and that carry all the given tags.\n"
        "Parameters: [n/TITLE] [d/DATE] [desc/DESCRIPTION] [t/TAG]..."
    )

    predicate: EntryMatcher

    def execute(self, book):
        book.filter_entries(self.predicate)
        shown = len(book.visible_entries())
        return CommandResult(MESSAGE_ENTRIES_LISTED.format(shown), Scope.JOURNAL)


# ────────────────────────────────────────────────────────────────────────────
# list / clear
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list in/c | list in/j: Shows every contact or journal entry."
    MESSAGES = {
        Scope.CONTACTS: "Listed all contacts",
        Scope.JOURNAL: "Listed all journal entries",
    }

    scope: Scope

    def execute(self, book):
        if self.scope is Scope.CONTACTS:
            book.filter_persons(None)
        else:
            book.filter_entries(None)
        return CommandResult(self.MESSAGES[self.scope], self.scope)


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear in/c | clear in/j: Deletes every contact or journal entry."
    MESSAGES = {
        Scope.CONTACTS: "Contacts have been cleared!",
        Scope.JOURNAL: "Journal has been cleared!",
    }

    scope: Scope

    def execute(self, book):
        if self.scope is Scope.CONTACTS:
            book.clear_persons()
        else:
            book.clear_entries()
        logger.info("Cleared %s", self.scope.label)
        return CommandResult(self.MESSAGES[self.scope], self.scope)


# ────────────────────────────────────────────────────────────────────────────
# help / exit
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows every command and its parameters."

    def execute(self, book):
        return CommandResult("Opened help.", show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Saves the record book and quits."

    def execute(self, book):
        return CommandResult("Data saved. Bye!", exit=True)
