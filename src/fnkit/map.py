"""Map[K, V]: an immutable key-value map with functional operations.

All modification operations (set, remove, update, union, ...) return a new
Map; the receiver is never changed. Keys are strings or integers and keep
insertion order.

Example:
    ```python
    from fnkit import Map, Some

    def init_or_increment(current):
        return Some(current.get() + 1) if current.is_some() else Some(0)

    counts = Map.empty().update('a', init_or_increment).update('a', init_or_increment)
    counts.get('a')
    # Some(value=1)

    Map.from_dict({'a': 5, 'c': 10}).union(Map.from_dict({'a': 10, 'b': 10})).to_dict()
    # {'a': 10, 'c': 10, 'b': 10}
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, NoReturn

import msgspec

from fnkit._internal import adapt
from fnkit.assertions import assert_bool, safe_assert
from fnkit.errors import ImmutableError
from fnkit.option import Nothing, NothingType, Option, Some

if TYPE_CHECKING:
    from fnkit.collection import Collection

__all__ = ['Map']

type Key = str | int


def _normalize(data: Mapping[Any, Any] | Iterable[Any]) -> dict[Any, Any]:
    if isinstance(data, Mapping):
        normalized = dict(data.items())
    else:
        normalized = dict(enumerate(data))
    for key in normalized:
        safe_assert(isinstance(key, str | int), f'Map: keys must be str or int, got {type(key).__name__}')
    return normalized


def _is_pair(pair: object) -> bool:
    return isinstance(pair, Sequence) and not isinstance(pair, str | bytes) and len(pair) == 2


class Map[K: Key, V](msgspec.Struct, frozen=True):
    """An immutable mapping from unique str/int keys to values.

    Iterating a Map yields its keys in insertion order; ``items()`` yields
    ``(key, value)`` pairs. ``m[key]`` reads a value (KeyError when
    missing); item assignment and deletion raise ImmutableError.

    Attributes:
        data: Private copy of the key-value pairs. Never mutated.
    """

    data: dict[K, V] = msgspec.field(default_factory=dict)

    def __post_init__(self) -> None:
        msgspec.structs.force_setattr(self, 'data', _normalize(self.data))

    # --- construction ---

    @classmethod
    def from_dict(cls, data: Mapping[K, V] | Iterable[V]) -> Map[K, V]:
        """Create a Map from a mapping.

        A plain sequence is accepted too and keyed by position.
        """
        return cls(_normalize(data))

    @classmethod
    def from_list(cls, pairs: Iterable[Sequence[Any]]) -> Map[Any, Any]:
        """Create a Map from (key, value) pairs. Later pairs win.

        Raises:
            AssertionError: If any pair does not hold exactly two elements.
        """
        data: dict[Any, Any] = {}
        for pair in pairs:
            safe_assert(_is_pair(pair), 'Map.from_list: every pair must consist of two elements')
            key, value = pair
            safe_assert(isinstance(key, str | int), f'Map.from_list: keys must be str or int, got {type(key).__name__}')
            data[key] = value
        return cls(data)

    @classmethod
    def from_collection(cls, collection: Collection[Sequence[Any]]) -> Map[Any, Any]:
        return cls.from_list(collection)

    @classmethod
    def empty(cls) -> Map[Any, Any]:
        return cls({})

    # --- mapping protocol ---

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[K]:
        return iter(self.data)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __getitem__(self, key: K) -> V:
        if key not in self.data:
            raise KeyError(f'Map: Invalid index requested: {key!r}')
        return self.data[key]

    def __setitem__(self, key: Any, value: Any) -> NoReturn:
        raise ImmutableError()

    def __delitem__(self, key: Any) -> NoReturn:
        raise ImmutableError()

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in insertion order.

        Each call starts a fresh pass.
        """
        yield from self.data.items()

    # --- queries ---

    def exists(self, key: K) -> bool:
        return key in self.data

    def get(self, key: K) -> Option[V]:
        """Value for key wrapped in Some, or Nothing."""
        if key not in self.data:
            return Nothing
        return Some(self.data[key])

    def find(self, fn: Callable[..., bool]) -> Option[V]:
        """Value of the first pair for which fn(key, value) is True.

        Raises:
            AssertionError: If fn returns a non-bool.
        """
        call = adapt(fn, 2)
        for key, value in self.data.items():
            if assert_bool(call(key, value), 'Map.find'):
                return Some(value)
        return Nothing

    def keys(self) -> list[K]:
        return list(self.data)

    def values(self) -> list[V]:
        return list(self.data.values())

    def length(self) -> int:
        return len(self.data)

    # --- updates ---

    def set(self, key: K, value: V) -> Map[K, V]:
        """Return a new Map with key set to value."""
        return Map({**self.data, key: value})

    def remove(self, key: K) -> Map[K, V]:
        """Return a Map without key. The receiver is returned if key is absent."""
        if key not in self.data:
            return self
        return Map({k: v for k, v in self.data.items() if k != key})

    def update(self, key: K, fn: Callable[[Option[V]], V | Option[V]]) -> Map[K, V]:
        """Insert, modify or delete key through one function.

        fn receives the current value as an Option. Returning Nothing
        removes the key; returning Some(v) or a plain v sets it to v.

        Example:
            ```python
            Map.empty().update('a', lambda cur: cur.map(lambda v: v + 1) if cur.is_some() else 0)
            ```
        """
        result = fn(self.get(key))
        if isinstance(result, NothingType):
            return self.remove(key)
        if isinstance(result, Some):
            return self.set(key, result.value)
        return self.set(key, result)

    def union(self, other: Map[K, V]) -> Map[K, V]:
        """Merge two Maps; values from other win on conflicting keys."""
        return Map({**self.data, **other.data})

    def intersect(self, other: Map[K, V]) -> Map[K, V]:
        """Keys present in both Maps, with values from other."""
        return self.union(other).filter(lambda key: key in self.data and key in other.data)

    def filter(self, fn: Callable[..., Any]) -> Map[K, V]:
        """Keep the pairs for which fn(key, value) is truthy."""
        call = adapt(fn, 2)
        return Map({k: v for k, v in self.data.items() if call(k, v)})

    def map[U](self, fn: Callable[..., U]) -> Map[K, U]:
        """Replace every value with fn(key, value)."""
        call = adapt(fn, 2)
        return Map({k: call(k, v) for k, v in self.data.items()})

    def for_all(self, fn: Callable[..., Any]) -> None:
        """Call fn(key, value) on every pair for its side effects."""
        call = adapt(fn, 2)
        for key, value in self.data.items():
            call(key, value)

    # --- conversion ---

    def to_dict(self) -> dict[K, V]:
        """Return the pairs as a new dict."""
        return dict(self.data)

    def to_list(self) -> list[tuple[K, V]]:
        """Return the pairs as a list of (key, value) tuples."""
        return list(self.data.items())

    def to_collection(self) -> Collection[tuple[K, V]]:
        from fnkit.collection import Collection

        return Collection(tuple(self.data.items()))


Mapping.register(Map)
