"""
One parser per command kind and scope.

Parsers receive an ``ArgumentMultimap`` (already split by the tokenizer) and
either return a fully validated command or raise. Nothing is half-applied: a
command object only exists once every field it carries has been validated.
"""
import datetime
import uuid
from typing import Callable, FrozenSet, List

from .commands import (
    AddContactCommand, AddEntryCommand, ClearCommand, Command,
    DeleteContactCommand, DeleteEntryCommand, EditContactCommand,
    EditEntryCommand, EditEntryDescriptor, EditPersonDescriptor, EntryMatcher,
    FindContactCommand, FindEntryCommand, ListCommand, PersonMatcher,
)
from .entities import IdSource, JournalEntry, Person, person_list
from .exceptions import ParseError
from .fields import Description, Tag
from .parser_util import (
    parse_address, parse_contacts, parse_date, parse_description, parse_email,
    parse_index, parse_name, parse_phone, parse_tags,
)
from .scope import Scope
from .tokenizer import (
    MESSAGE_INVALID_COMMAND_FORMAT, PREFIX_ADDRESS, PREFIX_CONTACT, PREFIX_DATE,
    PREFIX_DESCRIPTION, PREFIX_EMAIL, PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG,
    ArgumentMultimap, Prefix,
)

Clock = Callable[[], datetime.date]

MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_NOTHING_TO_FIND = "At least one field to search must be provided."


def invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


class Parser:
    def parse(self, args: ArgumentMultimap) -> Command:
        raise NotImplementedError


def _tags_for_edit(args: ArgumentMultimap):
    """None if t/ was not given, an empty set for a lone empty t/."""
    if not args.has(PREFIX_TAG):
        return None
    values = args.get_all_values(PREFIX_TAG)
    if values == [""]:
        return frozenset()
    return parse_tags(values)


def _keyword(args: ArgumentMultimap, prefix: Prefix, usage: str):
    value = args.get_value(prefix)
    if value is not None and not value:
        raise invalid_format(usage)
    return value


def _search_tags(args: ArgumentMultimap) -> FrozenSet[Tag]:
    return parse_tags(args.get_all_values(PREFIX_TAG))


# ────────────────────────────────────────────────────────────────────────────
# add
# ────────────────────────────────────────────────────────────────────────────
class AddContactParser(Parser):
    def __init__(self, id_source: IdSource = uuid.uuid4):
        self._id_source = id_source

    def parse(self, args):
        if not args.has(PREFIX_NAME) or args.preamble:
            raise invalid_format(AddContactCommand.MESSAGE_USAGE)
        person = Person(
            name=parse_name(args.get_value(PREFIX_NAME)),
            phone=parse_phone(args.get_value(PREFIX_PHONE)),
            email=parse_email(args.get_value(PREFIX_EMAIL)),
            address=parse_address(args.get_value(PREFIX_ADDRESS)),
            tags=parse_tags(args.get_all_values(PREFIX_TAG)),
            id=self._id_source(),
        )
        return AddContactCommand(person)


class AddEntryParser(Parser):
    def __init__(self, id_source: IdSource = uuid.uuid4, today: Clock = datetime.date.today):
        self._id_source = id_source
        self._today = today

    def parse(self, args):
        if not args.has(PREFIX_NAME) or args.preamble:
            raise invalid_format(AddEntryCommand.MESSAGE_USAGE)
        title = parse_name(args.get_value(PREFIX_NAME))
        date = parse_date(args.get_value(PREFIX_DATE), self._today)
        description = parse_description(args.get_value(PREFIX_DESCRIPTION))
        tags = parse_tags(args.get_all_values(PREFIX_TAG))
        contacts = parse_contacts(args.get_all_values(PREFIX_CONTACT), self._id_source)
        entry = JournalEntry(
            title=title,
            date=date,
            description=description,
            contacts=contacts,
            tags=tags,
            id=self._id_source(),
        )
        return AddEntryCommand(entry)


# ────────────────────────────────────────────────────────────────────────────
# delete
# ────────────────────────────────────────────────────────────────────────────
class DeleteContactParser(Parser):
    def parse(self, args):
        return DeleteContactCommand(parse_index(args.preamble))


class DeleteEntryParser(Parser):
    def parse(self, args):
        return DeleteEntryCommand(parse_index(args.preamble))


# ────────────────────────────────────────────────────────────────────────────
# edit
# ────────────────────────────────────────────────────────────────────────────
class EditContactParser(Parser):
    def parse(self, args):
        if not args.preamble:
            raise invalid_format(EditContactCommand.MESSAGE_USAGE)
        index = parse_index(args.preamble)

        changes = {}
        if args.has(PREFIX_NAME):
            changes["name"] = parse_name(args.get_value(PREFIX_NAME))
        if args.has(PREFIX_PHONE):
            changes["phone"] = parse_phone(args.get_value(PREFIX_PHONE))
        if args.has(PREFIX_EMAIL):
            changes["email"] = parse_email(args.get_value(PREFIX_EMAIL))
        if args.has(PREFIX_ADDRESS):
            changes["address"] = parse_address(args.get_value(PREFIX_ADDRESS))
        changes["tags"] = _tags_for_edit(args)

        descriptor = EditPersonDescriptor(**changes)
        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return EditContactCommand(index, descriptor)


class EditEntryParser(Parser):
    def __init__(self, id_source: IdSource = uuid.uuid4, today: Clock = datetime.date.today):
        self._id_source = id_source
        self._today = today

    def parse(self, args):
        if not args.preamble:
            raise invalid_format(EditEntryCommand.MESSAGE_USAGE)
        index = parse_index(args.preamble)

        changes = {}
        if args.has(PREFIX_NAME):
            changes["title"] = parse_name(args.get_value(PREFIX_NAME))
        if args.has(PREFIX_DATE):
            changes["date"] = parse_date(args.get_value(PREFIX_DATE), self._today)
        if args.has(PREFIX_DESCRIPTION):
            raw = args.get_value(PREFIX_DESCRIPTION)
            # a lone desc/ removes the description
            changes["description"] = Description(None) if raw == "" else parse_description(raw)
        if args.has(PREFIX_CONTACT):
            names = args.get_all_values(PREFIX_CONTACT)
            changes["contacts"] = (
                person_list() if names == [""] else parse_contacts(names, self._id_source)
            )
        changes["tags"] = _tags_for_edit(args)

        descriptor = EditEntryDescriptor(**changes)
        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return EditEntryCommand(index, descriptor)


# ────────────────────────────────────────────────────────────────────────────
# find
# ────────────────────────────────────────────────────────────────────────────
class FindContactParser(Parser):
    SEARCHABLE: List[Prefix] = [
        PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG,
    ]

    def parse(self, args):
        usage = FindContactCommand.MESSAGE_USAGE
        if not any(args.has(p) for p in self.SEARCHABLE):
            raise ParseError(MESSAGE_NOTHING_TO_FIND)
        matcher = PersonMatcher(
            name=_keyword(args, PREFIX_NAME, usage),
            phone=_keyword(args, PREFIX_PHONE, usage),
            email=_keyword(args, PREFIX_EMAIL, usage),
            address=_keyword(args, PREFIX_ADDRESS, usage),
            tags=_search_tags(args),
        )
        return FindContactCommand(matcher)


class FindEntryParser(Parser):
    SEARCHABLE: List[Prefix] = [PREFIX_NAME, PREFIX_DATE, PREFIX_DESCRIPTION, PREFIX_TAG]

    def parse(self, args):
        usage = FindEntryCommand.MESSAGE_USAGE
        if not any(args.has(p) for p in self.SEARCHABLE):
            raise ParseError(MESSAGE_NOTHING_TO_FIND)
        date = args.get_value(PREFIX_DATE)
        matcher = EntryMatcher(
            title=_keyword(args, PREFIX_NAME, usage),
            date=parse_date(date) if date is not None else None,
            description=_keyword(args, PREFIX_DESCRIPTION, usage),
            tags=_search_tags(args),
        )
        return FindEntryCommand(matcher)


# ────────────────────────────────────────────────────────────────────────────
# list / clear
# ────────────────────────────────────────────────────────────────────────────
class ListParser(Parser):
    def __init__(self, scope: Scope):
        self._scope = scope

    def parse(self, args):
        return ListCommand(self._scope)


class ClearParser(Parser):
    def __init__(self, scope: Scope):
        self._scope = scope

    def parse(self, args):
        return ClearCommand(self._scope)
