from dataclasses import dataclass
from typing import Any, Iterator


class IndexOutOfRange(IndexError):
    pass


@dataclass
class Entry:
    key: Any
    value: Any
    digest: int


Chain = list[Entry]


@dataclass
class BucketStore:
    chains: tuple[Chain, ...]

    def __init__(self, capacity: int) -> None:
        assert capacity > 0, capacity
        self.chains = tuple([] for _ in range(capacity))

    @property
    def capacity(self) -> int:
        return len(self.chains)

    def get_chain(self, index: int) -> Chain:
        if not 0 <= index < len(self.chains):
            raise IndexOutOfRange(index, len(self.chains))
        return self.chains[index]

    def replace(self, new_capacity: int) -> "BucketStore":
        return BucketStore(new_capacity)

    def entries(self) -> Iterator[Entry]:
        for chain in self.chains:
            yield from chain
