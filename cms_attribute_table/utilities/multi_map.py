from dataclasses import dataclass
from itertools import chain
from typing import Any, Generic, Optional, TypeVar, Union

from cms_attribute_table.errors import InternalConsistencyError

K = TypeVar('K')
V = TypeVar('V')


@dataclass(frozen=True)
class Single(Generic[V]):
    value: V

    @property
    def values(self) -> tuple[V, ...]:
        return (self.value,)

    def __len__(self) -> int:
        return 1


# Only used once a second value arrives for the same key; a key with exactly
# one value is always stored as Single.
@dataclass(frozen=True)
class Multiple(Generic[V]):
    values: tuple[V, ...]

    def __len__(self) -> int:
        return len(self.values)


Entry = Union[Single[V], Multiple[V]]


def entry_values(entry: Any) -> tuple:
    if isinstance(entry, Single):
        return entry.values
    if isinstance(entry, Multiple) and len(entry.values) > 0:
        return entry.values

    raise InternalConsistencyError(f'Malformed multi-map entry: {entry!r}')


def merge(entry: Optional[Entry[V]], value: V) -> Entry[V]:
    if entry is None:
        return Single(value)

    return Multiple(entry_values(entry) + (value,))


class MultiMap(Generic[K, V], dict[K, Entry[V]]):
    # Entries are frozen and replaced rather than mutated, so a shallow copy
    # of a MultiMap shares nothing that a later add() could change.
    def add(self, key: K, value: V):
        self[key] = merge(self.get(key), value)

    def first(self, key: K) -> Optional[V]:
        if (entry := self.get(key)) is not None:
            return entry_values(entry)[0]
        else:
            return None

    def values_of(self, key: K) -> tuple[V, ...]:
        if (entry := self.get(key)) is not None:
            return entry_values(entry)
        else:
            return ()

    def count(self) -> int:
        return sum(len(entry_values(entry)) for entry in self.values())

    def flat_values(self) -> list[V]:
        return list(chain.from_iterable(entry_values(entry) for entry in self.values()))
