"""
Splits a command line into its command word and prefixed arguments.

    add in/c n/Alex Yeoh p/98765432 t/friends t/colleagues

gives the command word ``add`` and a multimap
``{in/: [c], n/: [Alex Yeoh], p/: [98765432], t/: [friends, colleagues]}``.
A prefix only counts when it opens the argument string or follows whitespace,
so ``desc/`` never matches as ``c/``.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .exceptions import ParseError


@dataclass(frozen=True)
class Prefix:
    text: str

    def __str__(self):
        return self.text


# ────────────────────────────────────────────────────────────────────────────
# Known prefixes
# ────────────────────────────────────────────────────────────────────────────
PREFIX_SCOPE = Prefix("in/")
PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_DATE = Prefix("d/")
PREFIX_DESCRIPTION = Prefix("desc/")
PREFIX_CONTACT = Prefix("c/")

ALL_PREFIXES = (
    PREFIX_SCOPE, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
    PREFIX_TAG, PREFIX_DATE, PREFIX_DESCRIPTION, PREFIX_CONTACT,
)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"

_COMMAND_LINE = re.compile(r"\s*(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


class ArgumentMultimap:
    """Prefix -> values, in the order they were typed."""

    def __init__(self):
        self._values: Dict[Prefix, List[str]] = {}
        self._preamble = ""

    def put(self, prefix: Optional[Prefix], value: str) -> None:
        if prefix is None:
            self._preamble = value
        else:
            self._values.setdefault(prefix, []).append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Last value given for ``prefix``, or None if it never appeared."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> List[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def prefixes(self) -> Tuple[Prefix, ...]:
        return tuple(self._values)

    def with_preamble(self, preamble: str) -> "ArgumentMultimap":
        copy = ArgumentMultimap()
        copy._values = {p: list(v) for p, v in self._values.items()}
        copy._preamble = preamble
        return copy

    @classmethod
    def of(cls, preamble: str = "", **values: Iterable[str]) -> "ArgumentMultimap":
        """Build a multimap from prefix names, e.g. ``of(name=["Alex"])``."""
        multimap = cls()
        multimap.put(None, preamble)
        for key, items in values.items():
            prefix = _PREFIX_BY_KEY[key]
            for item in items:
                multimap.put(prefix, item)
        return multimap

    def __repr__(self):
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={self._values!r})"


_PREFIX_BY_KEY = {
    "scope": PREFIX_SCOPE,
    "name": PREFIX_NAME,
    "phone": PREFIX_PHONE,
    "email": PREFIX_EMAIL,
    "address": PREFIX_ADDRESS,
    "tag": PREFIX_TAG,
    "date": PREFIX_DATE,
    "description": PREFIX_DESCRIPTION,
    "contact": PREFIX_CONTACT,
}


def split_command(line: str) -> Tuple[str, str]:
    """Return ``(command_word, arguments)``; the arguments keep their leading space."""
    match = _COMMAND_LINE.fullmatch(line or "")
    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format("Type 'help' to see all commands."))
    return match.group("word"), match.group("arguments")


def tokenize(arguments: str, prefixes: Iterable[Prefix] = ALL_PREFIXES) -> ArgumentMultimap:
    """
    Split ``arguments`` on the given prefixes.

    Text before the first prefix becomes the preamble. Every value and the
    preamble are trimmed. Unknown prefixes are left inside the value they
    appear in.
    """
    prefixes = sorted(set(prefixes), key=lambda p: len(p.text), reverse=True)
    pattern = re.compile(
        r"(?:^|(?<=\s))(" + "|".join(re.escape(p.text) for p in prefixes) + ")"
    )
    by_text = {p.text: p for p in prefixes}

    multimap = ArgumentMultimap()
    positions = [(m.start(), m.end(), by_text[m.group(1)]) for m in pattern.finditer(arguments)]
    first = positions[0][0] if positions else len(arguments)
    multimap.put(None, arguments[:first].strip())

    for i, (_, value_start, prefix) in enumerate(positions):
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(arguments)
        multimap.put(prefix, arguments[value_start:value_end].strip())
    return multimap
