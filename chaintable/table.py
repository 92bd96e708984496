from dataclasses import dataclass
from typing import Any, Iterator

from .buckets import BucketStore, Chain, Entry
from .hashing import KeyHasher, fnv1a_digest, index_for
from .shared import printf


TABLE_INITIAL_CAPACITY = 8
TABLE_MAX_LOAD = 0.7
TABLE_GROW_FACTOR = 2


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


class InvalidKey(Exception):
    pass


class InvalidValue(ValueError):
    pass


class InvalidCapacity(ValueError):
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(eq=False)
class Table:
    count: int
    buckets: BucketStore
    hash_fn: KeyHasher
    max_load: float
    grow_factor: int

    def __init__(
        self,
        initial_capacity: int = TABLE_INITIAL_CAPACITY,
        hash_fn: KeyHasher = fnv1a_digest,
        max_load: float = TABLE_MAX_LOAD,
        grow_factor: int = TABLE_GROW_FACTOR,
    ) -> None:
        if not isinstance(initial_capacity, int) or initial_capacity < 1:
            raise InvalidCapacity("initial capacity must be positive", initial_capacity)
        if not isinstance(grow_factor, int) or grow_factor < 2:
            raise InvalidCapacity("grow factor must be at least 2", grow_factor)
        if max_load <= 0:
            raise InvalidCapacity("max load must be positive", max_load)

        self._initial_capacity = initial_capacity
        self.hash_fn = hash_fn
        self.max_load = max_load
        self.grow_factor = grow_factor
        self.count = 0
        self.buckets = BucketStore(initial_capacity)

    @property
    def capacity(self) -> int:
        return self.buckets.capacity

    def size(self) -> int:
        return self.count

    def load_factor(self) -> float:
        return self.count / self.buckets.capacity

    def insert(self, key: Any, value: Any) -> bool:
        if isinstance(value, NotFound):
            raise InvalidValue("NotFound cannot be stored", key)

        digest = self._digest(key)
        chain = self.buckets.get_chain(index_for(digest, self.buckets.capacity))

        entry = _find_entry(chain, key)
        is_new_key = entry is None
        if entry is None:
            chain.append(Entry(key, value, digest))
            self.count += 1
        else:
            entry.value = value

        if self.load_factor() > self.max_load:
            self._resize(self.buckets.capacity * self.grow_factor)
        return is_new_key

    def get(self, key: Any) -> Any | NotFound:
        entry = self._find(key)
        if entry is None:
            return NotFound()
        return entry.value

    def contains(self, key: Any) -> bool:
        return self._find(key) is not None

    def delete(self, key: Any) -> bool:
        digest = self._digest(key)
        chain = self.buckets.get_chain(index_for(digest, self.buckets.capacity))

        for i, entry in enumerate(chain):
            if entry.key == key:
                del chain[i]
                self.count -= 1
                return True
        return False

    def add_all(self, from_t: "Table"):
        for entry in from_t.buckets.entries():
            self.insert(entry.key, entry.value)

    def keys(self) -> Iterator[Any]:
        for entry in self.buckets.entries():
            yield entry.key

    def values(self) -> Iterator[Any]:
        for entry in self.buckets.entries():
            yield entry.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        for entry in self.buckets.entries():
            yield entry.key, entry.value

    def clear(self):
        self.count = 0
        self.buckets = BucketStore(self._initial_capacity)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        try:
            return self.contains(key)
        except InvalidKey:
            return False

    def __getitem__(self, key: Any) -> Any:
        value = self.get(key)
        if isinstance(value, NotFound):
            raise KeyError(key)
        return value

    def __setitem__(self, key: Any, value: Any):
        self.insert(key, value)

    def __delitem__(self, key: Any):
        if not self.delete(key):
            raise KeyError(key)

    def _digest(self, key: Any) -> int:
        if key is None:
            raise InvalidKey("key is nil")

        try:
            digest = self.hash_fn(key)
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidKey("key is not hashable", key) from e

        if not isinstance(digest, int) or digest < 0:
            raise InvalidKey("digest is not a non-negative integer", key, digest)
        return digest

    def _find(self, key: Any) -> Entry | None:
        digest = self._digest(key)
        chain = self.buckets.get_chain(index_for(digest, self.buckets.capacity))
        return _find_entry(chain, key)

    def _resize(self, capacity: int):
        old = self.buckets
        new = old.replace(capacity)

        for entry in old.entries():
            new.get_chain(index_for(entry.digest, capacity)).append(entry)

        self.buckets = new

        if _debug_trace_resize:
            printf(
                "resize {0:d} -> {1:d} ({2:d} entries)\n",
                old.capacity,
                capacity,
                self.count,
            )


def _find_entry(chain: Chain, key: Any) -> Entry | None:
    for entry in chain:
        if entry.key == key:
            return entry
    return None
