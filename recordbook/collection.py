"""
Index and the uniqueness-enforcing entity list.
"""
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Sequence, TypeVar
from uuid import UUID

from .exceptions import DuplicateEntityError, EntityNotFoundError, IndexOutOfRangeError

T = TypeVar("T")
Equivalence = Callable[[T, T], bool]


@dataclass(frozen=True, order=True)
class Index:
    """A 1-based position as the user sees it."""

    one_based: int

    def __post_init__(self):
        if not isinstance(self.one_based, int) or self.one_based < 1:
            raise ValueError("Index must be a positive integer.")

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(value)

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(value + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self):
        return str(self.one_based)


class UniqueEntityList(Generic[T]):
    """
    Ordered list in which no two elements are equivalent.

    Equivalence is supplied by the caller and is usually weaker than ``==``
    (two contacts with the same name but different phones are still "the
    same contact"). Entities must expose an ``id`` attribute; identifiers are
    unique within the list as well.
    """

    def __init__(
        self,
        equivalence: Equivalence,
        duplicate_message: str = "Operation would result in duplicate entities",
        out_of_range_message: str = "The index provided is invalid",
    ):
        self._items: List[T] = []
        self._equivalence = equivalence
        self.duplicate_message = duplicate_message
        self.out_of_range_message = out_of_range_message

    # --- queries ---
    def contains(self, entity: T) -> bool:
        return any(self._clashes(existing, entity) for existing in self._items)

    def get(self, index: Index) -> T:
        return self._items[self._offset(index)]

    def index_of(self, entity_id: UUID) -> Index:
        for offset, existing in enumerate(self._items):
            if existing.id == entity_id:
                return Index.from_zero_based(offset)
        raise EntityNotFoundError(f"No entity with id {entity_id}")

    def as_tuple(self) -> Sequence[T]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other):
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self):
        return f"UniqueEntityList({self._items!r})"

    # --- mutations ---
    def add(self, entity: T) -> None:
        if self.contains(entity):
            raise DuplicateEntityError(self.duplicate_message)
        self._items.append(entity)

    def set(self, entity_id: UUID, replacement: T) -> None:
        """Replace the entity with ``entity_id``, re-checking every other element."""
        offset = self.index_of(entity_id).zero_based
        for i, existing in enumerate(self._items):
            if i != offset and self._clashes(existing, replacement):
                raise DuplicateEntityError(self.duplicate_message)
        self._items[offset] = replacement

    def remove(self, index: Index) -> T:
        return self._items.pop(self._offset(index))

    def remove_by_id(self, entity_id: UUID) -> T:
        return self._items.pop(self.index_of(entity_id).zero_based)

    def clear(self) -> None:
        self._items.clear()

    # --- helpers ---
    def _offset(self, index: Index) -> int:
        if not 1 <= index.one_based <= len(self._items):
            raise IndexOutOfRangeError(self.out_of_range_message)
        return index.zero_based

    def _clashes(self, a: T, b: T) -> bool:
        # both directions, so an asymmetric rule cannot let a duplicate in
        return a.id == b.id or self._equivalence(a, b) or self._equivalence(b, a)
