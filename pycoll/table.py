from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from .errors import InvalidKeyError
from .pair import KeyValuePair
from .prime import is_prime, next_prime
from .sequence import Sequence
from .shared import printf

K = TypeVar("K")
V = TypeVar("V")

TABLE_MAX_LOAD = 0.7
TABLE_INIT_CAPACITY = 11


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass(frozen=True)
class Occupied:
    pair: KeyValuePair


Slot = Empty | Tombstone | Occupied


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Table(Generic[K, V]):
    """Open-addressing hash table with double hashing.

    Capacity is always prime so that every step size in [1, capacity-1] is
    coprime to it and a probe sequence visits each slot exactly once.
    Deleted slots become tombstones: lookups probe past them and inserts
    may reuse them.

    Growth is checked before every insert. Passing ``max_load=None`` pins
    the capacity; ``put`` then returns False once every slot is taken.
    """

    count: int
    slots: list[Slot]
    max_load: float | None

    def __init__(
        self,
        capacity: int = TABLE_INIT_CAPACITY,
        max_load: float | None = TABLE_MAX_LOAD,
    ) -> None:
        if capacity < 2:
            raise ValueError(f"capacity must be at least 2, got {capacity}")
        if max_load is not None and not 0 < max_load <= 1:
            raise ValueError(f"max_load must be in (0, 1], got {max_load}")
        self.max_load = max_load
        self._init_capacity = next_prime(capacity)
        self.clear()

    def put(self, key: K, value: V) -> bool:
        hashed = _hash_key(key)
        # updates never add an entry, so only new keys can trigger growth
        if self._find(key, hashed) is None:
            while self._needs_grow():
                self._grow()
        return self._insert(KeyValuePair(key, value), hashed)

    def get(self, key: K) -> V | NotFound:
        index = self._find(key, _hash_key(key))
        if index is None:
            return NotFound()

        slot = self.slots[index]
        assert isinstance(slot, Occupied)
        return slot.pair.value

    def contains_key(self, key: K) -> bool:
        return not isinstance(self.get(key), NotFound)

    def remove(self, key: K) -> bool:
        index = self._find(key, _hash_key(key))
        if index is None:
            return False

        self.slots[index] = Tombstone()
        self.count -= 1
        return True

    def size(self) -> int:
        return self.count

    def capacity(self) -> int:
        return len(self.slots)

    def keys(self) -> Sequence[K]:
        result: Sequence[K] = Sequence()
        for pair in self._pairs():
            result.add(pair.key)
        return result

    def values(self) -> Sequence[V]:
        result: Sequence[V] = Sequence()
        for pair in self._pairs():
            result.add(pair.value)
        return result

    def items(self) -> Sequence[KeyValuePair[K, V]]:
        result: Sequence[KeyValuePair[K, V]] = Sequence()
        for pair in self._pairs():
            result.add(pair)
        return result

    def add_all(self, from_t: "Table[K, V]"):
        for pair in from_t._pairs():
            self.put(pair.key, pair.value)

    def clear(self):
        self.count = 0
        self.slots = [Empty() for _ in range(self._init_capacity)]

    def __len__(self) -> int:
        return self.count

    def _pairs(self) -> Iterator[KeyValuePair]:
        for slot in self.slots:
            if isinstance(slot, Occupied):
                yield slot.pair

    def _needs_grow(self) -> bool:
        if self.max_load is None:
            return False
        # count the incoming entry so the bound holds once put returns
        return (self.count + 1) / len(self.slots) > self.max_load

    def _grow(self):
        old_slots = self.slots
        capacity = next_prime(len(old_slots) * 2)
        assert is_prime(capacity)

        if _debug_trace_resize:
            printf(
                "resize {0:d} -> {1:d} ({2:d} entries)\n",
                len(old_slots),
                capacity,
                self.count,
            )

        self.slots = [Empty() for _ in range(capacity)]
        self.count = 0
        for slot in old_slots:
            if isinstance(slot, Occupied):
                inserted = self._insert(slot.pair, _hash_key(slot.pair.key))
                assert inserted

    def _insert(self, pair: KeyValuePair, hashed: int) -> bool:
        tombstone: int | None = None

        for index in self._probe(hashed):
            match self.slots[index]:
                case Empty():
                    if tombstone is not None:
                        index = tombstone
                    self.slots[index] = Occupied(pair)
                    self.count += 1
                    return True
                case Tombstone():
                    if tombstone is None:
                        tombstone = index
                case Occupied(pair=existing) if existing.key == pair.key:
                    self.slots[index] = Occupied(pair)
                    return True

        # every slot probed without meeting an empty one
        if tombstone is not None:
            self.slots[tombstone] = Occupied(pair)
            self.count += 1
            return True
        return False

    def _find(self, key: K, hashed: int) -> int | None:
        for index in self._probe(hashed):
            match self.slots[index]:
                case Empty():
                    return None
                case Tombstone():
                    continue
                case Occupied(pair=existing) if existing.key == key:
                    return index
        return None

    def _probe(self, hashed: int) -> Iterator[int]:
        capacity = len(self.slots)
        index = hashed % capacity
        step = 1 + hashed % (capacity - 1)
        for i in range(capacity):
            yield (index + i * step) % capacity


def _hash_key(key: Any) -> int:
    if key is None:
        raise InvalidKeyError(key)
    try:
        return abs(hash(key))
    except TypeError as e:
        raise InvalidKeyError(key, str(e)) from e
