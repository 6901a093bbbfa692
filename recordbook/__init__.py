"""Contacts and a journal, edited through short text commands."""
from .book import RecordBook
from .dispatch import CommandDispatcher
from .scope import Scope

__version__ = "0.1.0"

__all__ = ["CommandDispatcher", "RecordBook", "Scope", "__version__"]
