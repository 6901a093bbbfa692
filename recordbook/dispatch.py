"""
Command dispatch: command word + scope -> parser -> command.

The set of command words is closed (``CommandWord``); the table from
``(CommandWord, Scope)`` to parser is built once and checked for gaps when
the dispatcher is created.
"""
import datetime
import logging
import uuid
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .commands import (
    AddContactCommand, AddEntryCommand, ClearCommand, Command,
    DeleteContactCommand, DeleteEntryCommand, EditContactCommand,
    EditEntryCommand, ExitCommand, FindContactCommand, FindEntryCommand,
    HelpCommand, ListCommand,
)
from .entities import IdSource
from .exceptions import ParseError, UnknownCommandError
from .parser_util import parse_scope
from .parsers import (
    AddContactParser, AddEntryParser, ClearParser, Clock, DeleteContactParser,
    DeleteEntryParser, EditContactParser, EditEntryParser, FindContactParser,
    FindEntryParser, ListParser, Parser, invalid_format,
)
from .scope import Scope
from .tokenizer import PREFIX_SCOPE, ArgumentMultimap, split_command, tokenize

logger = logging.getLogger(__name__)

MESSAGE_UNKNOWN_COMMAND = "Unknown command"


class CommandWord(Enum):
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    FIND = "find"
    LIST = "list"
    CLEAR = "clear"
    HELP = "help"
    EXIT = "exit"

    @property
    def scoped(self) -> bool:
        return self not in (CommandWord.HELP, CommandWord.EXIT)

    @classmethod
    def lookup(cls, word: str) -> "CommandWord":
        try:
            return cls(word.strip().lower())
        except ValueError:
            raise UnknownCommandError(MESSAGE_UNKNOWN_COMMAND) from None


USAGE = {
    CommandWord.ADD: (AddContactCommand.MESSAGE_USAGE, AddEntryCommand.MESSAGE_USAGE),
    CommandWord.EDIT: (EditContactCommand.MESSAGE_USAGE, EditEntryCommand.MESSAGE_USAGE),
    CommandWord.DELETE: (DeleteContactCommand.MESSAGE_USAGE, DeleteEntryCommand.MESSAGE_USAGE),
    CommandWord.FIND: (FindContactCommand.MESSAGE_USAGE, FindEntryCommand.MESSAGE_USAGE),
    CommandWord.LIST: (ListCommand.MESSAGE_USAGE,),
    CommandWord.CLEAR: (ClearCommand.MESSAGE_USAGE,),
    CommandWord.HELP: (HelpCommand.MESSAGE_USAGE,),
    CommandWord.EXIT: (ExitCommand.MESSAGE_USAGE,),
}


def all_usages() -> List[str]:
    return [usage for word in CommandWord for usage in USAGE[word]]


def build_registry(
    id_source: IdSource = uuid.uuid4,
    today: Clock = datetime.date.today,
) -> Dict[Tuple[CommandWord, Scope], Parser]:
    registry = {
        (CommandWord.ADD, Scope.CONTACTS): AddContactParser(id_source),
        (CommandWord.ADD, Scope.JOURNAL): AddEntryParser(id_source, today),
        (CommandWord.EDIT, Scope.CONTACTS): EditContactParser(),
        (CommandWord.EDIT, Scope.JOURNAL): EditEntryParser(id_source, today),
        (CommandWord.DELETE, Scope.CONTACTS): DeleteContactParser(),
        (CommandWord.DELETE, Scope.JOURNAL): DeleteEntryParser(),
        (CommandWord.FIND, Scope.CONTACTS): FindContactParser(),
        (CommandWord.FIND, Scope.JOURNAL): FindEntryParser(),
    }
    for scope in Scope:
        registry[(CommandWord.LIST, scope)] = ListParser(scope)
        registry[(CommandWord.CLEAR, scope)] = ClearParser(scope)
    return registry


def split_scope(args: ArgumentMultimap) -> Tuple[Optional[str], ArgumentMultimap]:
    """
    Separate the scope token from whatever follows it.

    ``delete in/c 2`` tokenizes to ``in/ -> "c 2"``; the scope is the first
    word and the rest joins the preamble, giving scope ``c`` and index ``2``.
    """
    raw = args.get_value(PREFIX_SCOPE)
    if raw is None:
        return None, args
    words = raw.split(None, 1)
    if len(words) < 2:
        return raw, args
    preamble = " ".join(part for part in (args.preamble, words[1]) if part)
    return words[0], args.with_preamble(preamble)


class CommandDispatcher:
    """
    Turns user input into validated commands.

    ``id_source`` supplies identifiers for new contacts and entries and
    ``today`` the default journal date; both can be replaced in tests.
    """

    def __init__(
        self,
        id_source: IdSource = uuid.uuid4,
        today: Clock = datetime.date.today,
        registry: Optional[Dict[Tuple[CommandWord, Scope], Parser]] = None,
    ):
        self._registry = registry if registry is not None else build_registry(id_source, today)
        missing = [
            f"{word.value} in/{scope.value}"
            for word in CommandWord if word.scoped
            for scope in Scope if (word, scope) not in self._registry
        ]
        if missing:
            raise ValueError(f"No parser registered for: {', '.join(missing)}")

    def parse(self, line: str) -> Command:
        """Parse a whole command line such as ``add in/c n/Alex p/123``."""
        try:
            word, arguments = split_command(line)
            command_word = CommandWord.lookup(word)
            scope_token, args = split_scope(tokenize(arguments))
            command = self.dispatch(scope_token, command_word, args)
        except ParseError as e:
            logger.info("Rejected %r: %s", line, e)
            raise
        logger.debug("Parsed %r as %r", line, command)
        return command

    def dispatch(
        self,
        scope_token: Optional[str],
        command_word,
        args: ArgumentMultimap,
    ) -> Command:
        """
        Build a command from already tokenized input.

        ``command_word`` may be a ``CommandWord`` or its text. Unscoped
        commands ignore ``scope_token``; scoped ones require it.
        """
        if not isinstance(command_word, CommandWord):
            command_word = CommandWord.lookup(command_word)

        if command_word is CommandWord.HELP:
            return HelpCommand()
        if command_word is CommandWord.EXIT:
            return ExitCommand()

        if scope_token is None:
            raise invalid_format("\n".join(USAGE[command_word]))
        scope = parse_scope(scope_token)
        return self._registry[(command_word, scope)].parse(args)
