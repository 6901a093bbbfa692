"""
Field-level parsing shared by every command parser.

Each ``parse_*`` function trims its input where the field allows it,
validates it and returns a value type, or raises ``ParseError`` carrying the
field's constraint message. Absent input is passed as ``None`` and resolved
by ``resolve_absent`` from the field's ``ON_ABSENT`` policy.
"""
import datetime
import re
import uuid
from typing import Callable, FrozenSet, Iterable, Optional

from .collection import Index, UniqueEntityList
from .config import MAX_INDEX
from .entities import IdSource, Person, person_list
from .exceptions import InvalidIndexError, InvalidScopeError, ParseError
from .fields import (
    AbsencePolicy, Address, Date, Description, Email, Field, Name, Phone, Tag,
)
from .scope import Scope

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_SCOPE = 'Scope can only be "c" or "j".'

_UNSIGNED = re.compile(r"[0-9]+")


def parse_index(one_based_index: str) -> Index:
    """The same message is raised for text, zero, signs and overflow."""
    trimmed = (one_based_index or "").strip()
    if not _UNSIGNED.fullmatch(trimmed):
        raise InvalidIndexError(MESSAGE_INVALID_INDEX)
    value = int(trimmed)
    if not 1 <= value <= MAX_INDEX:
        raise InvalidIndexError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(value)


def resolve_absent(
    field_type,
    today: Callable[[], datetime.date] = datetime.date.today,
) -> Field:
    """The value a parser produces when the user leaves ``field_type`` out."""
    policy = field_type.ON_ABSENT
    if policy is AbsencePolicy.EMPTY_SENTINEL:
        return field_type.EMPTY
    if policy is AbsencePolicy.DEFAULT_TODAY:
        return field_type.today(today)
    if policy is AbsencePolicy.KEEP_NULL:
        return field_type(None)
    raise ParseError(field_type.MESSAGE_CONSTRAINTS)


def _parse_field(
    field_type,
    raw: Optional[str],
    today: Callable[[], datetime.date] = datetime.date.today,
    trim: bool = True,
) -> Field:
    if raw is None:
        return resolve_absent(field_type, today)
    value = raw.strip() if trim else raw
    if not field_type.is_valid(value):
        raise ParseError(field_type.MESSAGE_CONSTRAINTS)
    return field_type(value)


def parse_name(name: Optional[str]) -> Name:
    return _parse_field(Name, name)


def parse_phone(phone: Optional[str]) -> Phone:
    return _parse_field(Phone, phone)


def parse_email(email: Optional[str]) -> Email:
    return _parse_field(Email, email)


def parse_address(address: Optional[str]) -> Address:
    return _parse_field(Address, address)


def parse_tag(tag: Optional[str]) -> Tag:
    return _parse_field(Tag, tag)


def parse_tags(tags: Iterable[str]) -> FrozenSet[Tag]:
    """Fail-fast: the first invalid tag aborts the whole set."""
    return frozenset([parse_tag(tag) for tag in tags])


def parse_contacts(
    names: Iterable[str], id_source: IdSource = uuid.uuid4
) -> UniqueEntityList:
    """
    Build a list of name-only contacts, one fresh id each.

    A name that repeats an earlier one (ignoring case) raises
    ``DuplicateEntityError``.
    """
    contacts = person_list()
    for name in names:
        contacts.add(Person.named(parse_name(name), id_source))
    return contacts


def parse_date(
    date: Optional[str],
    today: Callable[[], datetime.date] = datetime.date.today,
) -> Date:
    """An absent date means today, not an empty value."""
    return _parse_field(Date, date, today)


def parse_description(description: Optional[str]) -> Description:
    """None is kept as None; anything else is validated untrimmed."""
    return _parse_field(Description, description, trim=False)


def parse_scope(scope: Optional[str]) -> Scope:
    trimmed = (scope or "").strip()
    try:
        return Scope(trimmed)
    except ValueError:
        raise InvalidScopeError(MESSAGE_INVALID_SCOPE) from None
