"""
Value types for contact and journal fields.

Every value type validates in its constructor and raises ``ValueError`` with
the type's ``MESSAGE_CONSTRAINTS`` on bad input, so an instance is always
valid. Optional person fields additionally expose an ``EMPTY`` sentinel.
"""
import datetime
import re
from enum import Enum
from typing import Callable

from .config import DATE_FORMAT, DATE_FORMAT_HINT


class AbsencePolicy(Enum):
    """What a parser produces when the user leaves a field out."""

    REQUIRED = "required"  # absence is an error
    EMPTY_SENTINEL = "empty"  # the type's EMPTY value
    DEFAULT_TODAY = "today"  # the current date
    KEEP_NULL = "null"  # None, stored as-is


# ────────────────────────────────────────────────────────────────────────────
# Base
# ────────────────────────────────────────────────────────────────────────────
class Field:
    MESSAGE_CONSTRAINTS = ""
    ON_ABSENT = AbsencePolicy.REQUIRED

    def __init__(self, value):
        if not self.is_valid(value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self._convert(value))

    @classmethod
    def is_valid(cls, value) -> bool:
        return value is not None

    @classmethod
    def _convert(cls, value):
        return value

    @classmethod
    def _empty(cls):
        field = object.__new__(cls)
        object.__setattr__(field, "value", "")
        return field

    @property
    def is_empty(self) -> bool:
        return self.value == ""

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class _PatternField(Field):
    PATTERN: "re.Pattern[str]" = re.compile(r".*")

    @classmethod
    def is_valid(cls, value) -> bool:
        return isinstance(value, str) and cls.PATTERN.fullmatch(value) is not None


# ────────────────────────────────────────────────────────────────────────────
# Contact fields
# ────────────────────────────────────────────────────────────────────────────
class Name(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # first character must not be a space, so "   " is rejected
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    def same_as(self, other: "Name") -> bool:
        """Case-insensitive comparison used for duplicate detection."""
        return self.value.casefold() == other.value.casefold()


class Phone(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, "
        "and it should be at least 3 digits long"
    )
    ON_ABSENT = AbsencePolicy.EMPTY_SENTINEL
    PATTERN = re.compile(r"[0-9]{3,}")
    EMPTY: "Phone"


class Email(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and "
        "these special characters, excluding the parentheses, (+_.-). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    ON_ABSENT = AbsencePolicy.EMPTY_SENTINEL
    MAX_LENGTH = 254
    # every repetition consumes a separator, which keeps matching linear
    PATTERN = re.compile(
        r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
        r"@"
        r"(?:[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*\.)+"
        r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*"
    )
    EMPTY: "Email"

    @classmethod
    def is_valid(cls, value) -> bool:
        if not isinstance(value, str) or len(value) > cls.MAX_LENGTH:
            return False
        if not super().is_valid(value):
            return False
        return len(value.rsplit(".", 1)[1]) >= 2


class Address(_PatternField):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    ON_ABSENT = AbsencePolicy.EMPTY_SENTINEL
    PATTERN = re.compile(r"\S.*", re.DOTALL)
    EMPTY: "Address"


Phone.EMPTY = Phone._empty()
Email.EMPTY = Email._empty()
Address.EMPTY = Address._empty()


class Tag(_PatternField):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    PATTERN = re.compile(r"[A-Za-z0-9]+")

    def __str__(self):
        return f"[{self.value}]"


# ────────────────────────────────────────────────────────────────────────────
# Journal fields
# ────────────────────────────────────────────────────────────────────────────
class Date(Field):
    MESSAGE_CONSTRAINTS = (
        f"Dates should be in the format {DATE_FORMAT_HINT} "
        "and must be a valid calendar date"
    )
    ON_ABSENT = AbsencePolicy.DEFAULT_TODAY
    PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")

    @classmethod
    def is_valid(cls, value) -> bool:
        if isinstance(value, datetime.date):
            return True
        if not isinstance(value, str) or not cls.PATTERN.fullmatch(value):
            return False
        try:
            datetime.datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            return False
        return True

    @classmethod
    def _convert(cls, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        return datetime.datetime.strptime(value, DATE_FORMAT).date()

    @classmethod
    def today(cls, clock: Callable[[], datetime.date] = datetime.date.today) -> "Date":
        return cls(clock())

    @property
    def is_empty(self) -> bool:
        return False

    def __str__(self):
        return self.value.strftime(DATE_FORMAT)


class Description(Field):
    MESSAGE_CONSTRAINTS = (
        "Descriptions should not start with whitespace, should not be blank "
        "and should be at most 1000 characters long"
    )
    ON_ABSENT = AbsencePolicy.KEEP_NULL
    MAX_LENGTH = 1000
    PATTERN = re.compile(r"\S.*", re.DOTALL)

    @classmethod
    def is_valid(cls, value) -> bool:
        if value is None:
            return True
        return (
            isinstance(value, str)
            and len(value) <= cls.MAX_LENGTH
            and cls.PATTERN.fullmatch(value) is not None
        )

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def __str__(self):
        return "" if self.value is None else self.value
