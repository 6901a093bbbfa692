from enum import Enum


class Scope(str, Enum):
    """Which record family a command works on."""

    CONTACTS = "c"
    JOURNAL = "j"

    @property
    def label(self) -> str:
        return "contacts" if self is Scope.CONTACTS else "journal"

    def __str__(self):
        return self.value
