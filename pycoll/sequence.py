from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .errors import IndexOutOfRangeError

T = TypeVar("T")

SEQUENCE_INIT_CAPACITY = 8


@dataclass
class Sequence(Generic[T]):
    """Resizable array with amortized O(1) append and 0-based contiguous indices.

    The backing list always has `capacity()` cells; only the first `size()`
    of them hold elements.
    """

    _elements: list[T | None]
    _size: int

    def __init__(self, capacity: int = SEQUENCE_INIT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._elements = [None] * capacity
        self._size = 0

    def add(self, element: T) -> bool:
        self._ensure_capacity()
        self._elements[self._size] = element
        self._size += 1
        return True

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._elements[index]

    def set(self, index: int, element: T):
        self._check_index(index)
        self._elements[index] = element

    def remove(self, element: T) -> bool:
        index = self.index_of(element)
        if index == -1:
            return False

        for i in range(index, self._size - 1):
            self._elements[i] = self._elements[i + 1]
        self._elements[self._size - 1] = None
        self._size -= 1
        return True

    def index_of(self, element: T) -> int:
        for i in range(self._size):
            if self._elements[i] == element:
                return i
        return -1

    def contains(self, element: T) -> bool:
        return self.index_of(element) != -1

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._elements[i]

    def _ensure_capacity(self):
        if self._size == len(self._elements):
            new_elements: list[T | None] = [None] * (len(self._elements) * 2)
            new_elements[: self._size] = self._elements
            self._elements = new_elements

    def _check_index(self, index: int):
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)


@dataclass
class UniqueSequence(Generic[T]):
    """Sequence that silently rejects elements equal to one already held.

    Membership is a linear scan, so building a set of n elements is O(n^2).
    """

    _items: Sequence[T]

    def __init__(self, capacity: int = SEQUENCE_INIT_CAPACITY) -> None:
        self._items = Sequence(capacity)

    def add(self, element: T) -> bool:
        if self._items.contains(element):
            return False
        return self._items.add(element)

    def get(self, index: int) -> T:
        return self._items.get(index)

    def set(self, index: int, element: T):
        # no uniqueness check on overwrite
        self._items.set(index, element)

    def remove(self, element: T) -> bool:
        return self._items.remove(element)

    def index_of(self, element: T) -> int:
        return self._items.index_of(element)

    def contains(self, element: T) -> bool:
        return self._items.contains(element)

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def size(self) -> int:
        return self._items.size()

    def capacity(self) -> int:
        return self._items.capacity()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
