"""
test_collection.py
------------------
Unit tests for recordbook.collection (Index and UniqueEntityList).
"""
import uuid

import pytest

from recordbook.collection import Index, UniqueEntityList
from recordbook.entities import (
    MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_INDEX, Person, person_list, same_person,
)
from recordbook.exceptions import (
    DuplicateEntityError, EntityNotFoundError, IndexOutOfRangeError, InvalidIndexError,
)
from recordbook.fields import Name, Phone


def person(name, phone=None, n=None):
    return Person(
        name=Name(name),
        phone=Phone(phone) if phone else Phone.EMPTY,
        id=uuid.UUID(int=n) if n else uuid.uuid4(),
    )


class TestIndex:
    """Test Index conversions."""

    def test_one_and_zero_based(self):
        index = Index.from_one_based(3)
        assert index.one_based == 3
        assert index.zero_based == 2
        assert Index.from_zero_based(2) == index

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValueError):
            Index.from_one_based(value)

    def test_ordering(self):
        assert Index(1) < Index(2)


class TestAdd:
    """Test UniqueEntityList.add."""

    def test_keeps_insertion_order(self):
        people = person_list()
        for name in ["Carl", "Alice", "Bob"]:
            people.add(person(name))
        assert [p.name.value for p in people] == ["Carl", "Alice", "Bob"]

    def test_same_name_different_phone_is_duplicate(self):
        people = person_list()
        people.add(person("Alex", "123"))
        with pytest.raises(DuplicateEntityError) as exc_info:
            people.add(person("Alex", "456"))
        assert str(exc_info.value) == MESSAGE_DUPLICATE_PERSON
        assert len(people) == 1

    def test_name_comparison_ignores_case(self):
        people = person_list()
        people.add(person("Alex"))
        with pytest.raises(DuplicateEntityError):
            people.add(person("alex"))

    def test_same_id_is_duplicate(self):
        people = person_list()
        people.add(person("Alex", n=1))
        with pytest.raises(DuplicateEntityError):
            people.add(person("Bob", n=1))

    def test_contains(self):
        people = person_list([person("Alex", "123")])
        assert people.contains(person("ALEX"))
        assert not people.contains(person("Alexa"))

    def test_asymmetric_rule_checked_both_ways(self):
        # "a is duplicate of b" only when a's name is a prefix of b's
        def prefix_rule(a, b):
            return b.name.value.startswith(a.name.value)

        items = UniqueEntityList(prefix_rule)
        items.add(person("Alexander"))
        with pytest.raises(DuplicateEntityError):
            items.add(person("Alex"))


class TestRemove:
    """Test UniqueEntityList.remove and remove_by_id."""

    @pytest.fixture
    def three(self):
        return person_list([person("A", n=1), person("B", n=2), person("C", n=3)])

    def test_remove_shifts_later_indices(self, three):
        removed = three.remove(Index(2))
        assert removed.name == Name("B")
        assert three.get(Index(2)).name == Name("C")
        assert len(three) == 2

    def test_remove_out_of_range_leaves_list_unchanged(self, three):
        before = three.as_tuple()
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            three.remove(Index(5))
        assert str(exc_info.value) == MESSAGE_INVALID_PERSON_INDEX
        assert three.as_tuple() == before

    def test_out_of_range_differs_from_invalid_index(self, three):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            three.get(Index(4))
        assert not isinstance(exc_info.value, InvalidIndexError)
        assert isinstance(exc_info.value, IndexError)

    def test_remove_by_id(self, three):
        three.remove_by_id(uuid.UUID(int=1))
        assert [p.name.value for p in three] == ["B", "C"]

    def test_remove_unknown_id(self, three):
        with pytest.raises(EntityNotFoundError):
            three.remove_by_id(uuid.UUID(int=99))
        assert len(three) == 3

    def test_name_freed_after_removal(self, three):
        three.remove(Index(1))
        three.add(person("a"))
        assert three.get(Index(3)).name == Name("a")


class TestSet:
    """Test UniqueEntityList.set."""

    def test_replace_keeps_position(self):
        people = person_list([person("A", n=1), person("B", n=2)])
        people.set(uuid.UUID(int=1), person("Z", n=1))
        assert [p.name.value for p in people] == ["Z", "B"]

    def test_replace_with_same_name_allowed(self):
        people = person_list([person("A", "111", n=1)])
        people.set(uuid.UUID(int=1), person("a", "222", n=1))
        assert people.get(Index(1)).phone == Phone("222")

    def test_replace_clashing_with_other_rejected(self):
        people = person_list([person("A", n=1), person("B", n=2)])
        with pytest.raises(DuplicateEntityError):
            people.set(uuid.UUID(int=1), person("b", n=1))
        assert [p.name.value for p in people] == ["A", "B"]


class TestView:
    """Test read-only access."""

    def test_iteration_is_a_snapshot(self):
        people = person_list([person("A"), person("B")])
        seen = []
        for p in people:
            seen.append(p.name.value)
            if p.name.value == "A":
                people.add(person("C"))
        assert seen == ["A", "B"]

    def test_lookups_do_not_reorder(self):
        people = person_list([person("A"), person("B"), person("C")])
        people.get(Index(3))
        people.contains(person("A"))
        assert [p.name.value for p in people] == ["A", "B", "C"]

    def test_index_of(self):
        people = person_list([person("A", n=1), person("B", n=2)])
        assert people.index_of(uuid.UUID(int=2)) == Index(2)

    def test_clear(self):
        people = person_list([person("A")])
        people.clear()
        assert len(people) == 0
        assert not people

    def test_equality(self):
        a = person("A", n=1)
        assert person_list([a]) == person_list([a])
        assert UniqueEntityList(same_person) == person_list()
