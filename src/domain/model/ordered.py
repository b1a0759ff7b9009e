"""Order-preserving containers used by the entry merge pipeline.

Both containers make first-insertion order part of their contract so that
display order never depends on hashing.
"""

from typing import Callable, Generic, Hashable, Iterable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T", bound=Hashable)


class OrderedMap(Generic[K, V]):
    """Insertion-ordered key -> value mapping.

    Pairs an explicit key sequence with a lookup table. Iteration, keys()
    and values() always follow the order in which keys were first inserted;
    re-assigning an existing key keeps its original position.
    """

    def __init__(self) -> None:
        self._order: list[K] = []
        self._lookup: dict[K, V] = {}

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __iter__(self) -> Iterator[K]:
        return iter(self._order)

    def __getitem__(self, key: K) -> V:
        return self._lookup[key]

    def __setitem__(self, key: K, value: V) -> None:
        if key not in self._lookup:
            self._order.append(key)
        self._lookup[key] = value

    def get(self, key: K, default: V | None = None) -> V | None:
        return self._lookup.get(key, default)

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        """Return the value for key, inserting factory() at the end if absent."""
        if key not in self._lookup:
            self[key] = factory()
        return self._lookup[key]

    def keys(self) -> list[K]:
        return list(self._order)

    def values(self) -> list[V]:
        return [self._lookup[k] for k in self._order]

    def items(self) -> list[tuple[K, V]]:
        return [(k, self._lookup[k]) for k in self._order]


class UniqueList(Generic[T]):
    """Deduplicating accumulator: insert-if-absent, first occurrence wins."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._seen: set[T] = set()
        self._items: list[T] = []
        self.extend(values)

    def add(self, value: T) -> bool:
        """Append value unless already present. Returns True if it was added."""
        if value in self._seen:
            return False
        self._seen.add(value)
        self._items.append(value)
        return True

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.add(value)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._seen

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def to_tuple(self, limit: int | None = None) -> tuple[T, ...]:
        """Items in first-occurrence order, optionally cut to a prefix of `limit`."""
        if limit is None:
            return tuple(self._items)
        return tuple(self._items[:limit])
