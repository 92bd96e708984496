from dataclasses import dataclass
from typing import Any, Iterator

from .hashing import KeyHasher, fnv1a_digest
from .table import TABLE_INITIAL_CAPACITY, Table


@dataclass(frozen=True)
class _Present:
    pass


_PRESENT = _Present()


@dataclass(eq=False)
class HashSet:
    table: Table

    def __init__(
        self,
        initial_capacity: int = TABLE_INITIAL_CAPACITY,
        hash_fn: KeyHasher = fnv1a_digest,
    ) -> None:
        self.table = Table(initial_capacity=initial_capacity, hash_fn=hash_fn)

    def add(self, key: Any) -> bool:
        return self.table.insert(key, _PRESENT)

    def has(self, key: Any) -> bool:
        return self.table.contains(key)

    def size(self) -> int:
        return self.table.size()

    def __len__(self) -> int:
        return self.table.size()

    def __contains__(self, key: Any) -> bool:
        return key in self.table

    def __iter__(self) -> Iterator[Any]:
        return self.table.keys()
