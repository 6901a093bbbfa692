"""
conftest.py
-----------
Shared pytest fixtures for recordbook tests.

Provides fixtures for:
- Deterministic identifiers and a fixed "today"
- Sample contacts and journal entries
- A ready-made dispatcher and record book
"""
import datetime
import itertools
import logging
import uuid

import pytest

from recordbook.book import RecordBook
from recordbook.dispatch import CommandDispatcher
from recordbook.entities import JournalEntry, Person
from recordbook.fields import Address, Date, Description, Email, Name, Phone, Tag

FIXED_TODAY = datetime.date(2024, 3, 15)


# ----- Deterministic sources -----

@pytest.fixture
def id_source():
    """Yields UUID(int=1), UUID(int=2), ... on successive calls."""
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def today():
    return lambda: FIXED_TODAY


@pytest.fixture
def dispatcher(id_source, today):
    return CommandDispatcher(id_source=id_source, today=today)


# ----- Sample records -----

@pytest.fixture
def alice():
    return Person(
        name=Name("Alice Pauline"),
        phone=Phone("94351253"),
        email=Email("alice@example.com"),
        address=Address("123 Jurong West Ave 6"),
        tags=frozenset({Tag("friends")}),
        id=uuid.UUID(int=101),
    )


@pytest.fixture
def benson():
    return Person(
        name=Name("Benson Meier"),
        phone=Phone("98765432"),
        tags=frozenset({Tag("owesMoney"), Tag("friends")}),
        id=uuid.UUID(int=102),
    )


@pytest.fixture
def carl():
    return Person(name=Name("Carl Kurz"), address=Address("wall street"), id=uuid.UUID(int=103))


@pytest.fixture
def lunch():
    return JournalEntry(
        title=Name("Lunch"),
        date=Date("01-03-2024"),
        description=Description("Talked about the trip"),
        tags=frozenset({Tag("food")}),
        id=uuid.UUID(int=201),
    )


@pytest.fixture
def meeting():
    return JournalEntry(
        title=Name("Project meeting"),
        date=Date("04-03-2024"),
        id=uuid.UUID(int=202),
    )


@pytest.fixture
def book(alice, benson, carl, lunch, meeting):
    return RecordBook([alice, benson, carl], [lunch, meeting])


# ----- Logging -----

@pytest.fixture(autouse=True)
def reset_recordbook_logger():
    """Drop handlers added by setup_logging so they do not leak between tests."""
    yield
    logger = logging.getLogger("recordbook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
