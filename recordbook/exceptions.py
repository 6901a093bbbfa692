"""
Exception hierarchy for the record book.

    RecordBookError
    ├── ParseError - a raw value or command line was rejected
    │   ├── InvalidIndexError - index is not a non-zero unsigned integer
    │   ├── InvalidScopeError - scope token is neither "c" nor "j"
    │   └── UnknownCommandError - command word is not recognised
    ├── CommandError - a well-formed command could not be applied
    │   ├── DuplicateEntityError
    │   ├── IndexOutOfRangeError
    │   └── EntityNotFoundError
    └── StorageError - the data file could not be read or written

The message of every error is shown to the user verbatim.
"""


class RecordBookError(Exception):
    """Base class for every error the record book reports to the user."""

    @property
    def message(self) -> str:
        return str(self)


class ParseError(RecordBookError):
    """Raised when user input does not satisfy a field or command format."""


class InvalidIndexError(ParseError):
    pass


class InvalidScopeError(ParseError):
    pass


class UnknownCommandError(ParseError):
    pass


class CommandError(RecordBookError):
    """Raised when a parsed command cannot be applied to the record book."""


class DuplicateEntityError(CommandError):
    pass


class IndexOutOfRangeError(CommandError, IndexError):
    pass


class EntityNotFoundError(CommandError, KeyError):
    # KeyError wraps its message in quotes
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class StorageError(RecordBookError):
    pass
