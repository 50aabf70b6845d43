"""Collection[T]: an immutable ordered sequence with list operations as methods.

Example:
    ```python
    from fnkit import Collection

    col = Collection.from_iterable([3, 1, 2, 3])
    col.unique().sort(lambda a, b: a - b).map(lambda x: x * 10).to_list()
    # [10, 20, 30]
    col.get(10)
    # NothingType()
    col[0] = 5
    # ImmutableError: Attempted to modify an immutable object.
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, NoReturn, overload

import msgspec

from fnkit import lst
from fnkit.errors import ImmutableError
from fnkit.option import Option

if TYPE_CHECKING:
    from fnkit.map import Map

__all__ = ['Collection']


def _normalize(items: Iterable[Any]) -> tuple[Any, ...]:
    if isinstance(items, tuple):
        return items
    if isinstance(items, Mapping):
        return tuple(items.values())
    return tuple(items)


class Collection[T](msgspec.Struct, frozen=True):
    """An immutable, 0-indexed, gap-free sequence of T.

    Every transformation returns a new Collection; the receiver is never
    modified. Item assignment and deletion raise ImmutableError.

    Iterating a Collection yields its elements in order; ``items()``
    yields ``(index, element)`` pairs.

    Attributes:
        data: The elements, always stored as a tuple.
    """

    data: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.data, tuple):
            msgspec.structs.force_setattr(self, 'data', _normalize(self.data))

    # --- construction ---

    @classmethod
    def from_iterable(cls, items: Iterable[T] | Mapping[Any, T]) -> Collection[T]:
        """Create a Collection from any finite iterable.

        A Mapping contributes its values in insertion order, so arbitrary
        or sparse keys end up re-indexed from 0.
        """
        return cls(_normalize(items))

    @classmethod
    def from_iterator(cls, iterator: Iterator[T]) -> Collection[T]:
        """Drain a finite iterator into a new Collection.

        The iterator is consumed eagerly; an infinite iterator never returns.
        """
        return cls(tuple(iterator))

    @classmethod
    def empty(cls) -> Collection[Any]:
        return cls(())

    # --- sequence protocol ---

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.data)

    def __contains__(self, value: object) -> bool:
        return value in self.data

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Collection[T]: ...
    def __getitem__(self, index: int | slice) -> T | Collection[T]:
        if isinstance(index, slice):
            return Collection(self.data[index])
        return self.data[index]

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        raise ImmutableError()

    def __delitem__(self, index: Any) -> NoReturn:
        raise ImmutableError()

    def items(self) -> Iterator[tuple[int, T]]:
        """Yield (index, element) pairs in order.

        Each call starts a fresh pass.
        """
        yield from enumerate(self.data)

    # --- access ---

    def has(self, index: int) -> bool:
        """True if index is within 0..len-1."""
        return 0 <= index < len(self.data)

    def get(self, index: int) -> Option[T]:
        """Element at index wrapped in Some, or Nothing when out of range."""
        return lst.try_nth(self.data, index)

    def try_nth(self, index: int) -> Option[T]:
        return lst.try_nth(self.data, index)

    def nth(self, index: int) -> T:
        return lst.nth(self.data, index)

    def hd(self) -> T:
        return lst.hd(self.data)

    def first(self) -> T:
        return lst.first(self.data)

    def second(self) -> T:
        return lst.second(self.data)

    def third(self) -> T:
        return lst.third(self.data)

    def last(self) -> T:
        return lst.last(self.data)

    def length(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def to_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self.data)

    # --- transformation ---

    def map[U](self, fn: Callable[..., U]) -> Collection[U]:
        """Apply fn(element, index) to every element."""
        return Collection(lst.map(fn, self.data))

    def filter(self, fn: Callable[..., Any]) -> Collection[T]:
        """Keep elements for which fn(element, index) is truthy."""
        return Collection(lst.filter(fn, self.data))

    def partition(self, fn: Callable[..., bool]) -> tuple[Collection[T], Collection[T]]:
        """Split into (matches, non_matches) in one pass."""
        matches, non_matches = lst.partition(fn, self.data)
        return Collection(matches), Collection(non_matches)

    def find(self, fn: Callable[..., bool]) -> Option[T]:
        return lst.find(fn, self.data)

    def find_index(self, fn: Callable[..., bool]) -> Option[int]:
        return lst.find_index(fn, self.data)

    def for_all(self, fn: Callable[..., Any]) -> None:
        lst.for_all(fn, self.data)

    def foldl[R](self, fn: Callable[..., R], initial: R | None = None) -> R | None:
        """Reduce left to right with fn(acc, element, index)."""
        return lst.foldl(fn, self.data, initial)

    def foldr[R](self, fn: Callable[[T, R | None], R], initial: R | None = None) -> R | None:
        """Reduce with fn(element, acc), traversing left to right."""
        return lst.foldr(fn, self.data, initial)

    def some(self, fn: Callable[..., bool]) -> bool:
        return lst.some(fn, self.data)

    def every(self, fn: Callable[..., bool]) -> bool:
        return lst.every(fn, self.data)

    def tl(self) -> Collection[T]:
        return Collection(lst.tl(self.data))

    def rev(self) -> Collection[T]:
        return Collection(lst.rev(self.data))

    def append[U](self, other: Iterable[U]) -> Collection[T | U]:
        """Concatenate with another Collection or iterable."""
        return Collection(lst.append(self.data, other))

    def cons[U](self, value: U) -> Collection[T | U]:
        """Add value at the end."""
        return Collection(lst.cons(self.data, value))

    def flatten(self) -> Collection[Any]:
        return Collection(lst.flatten(self.data))

    def flat_map(self, fn: Callable[..., Any]) -> Collection[Any]:
        return Collection(lst.flat_map(fn, self.data))

    def take(self, n: int) -> Collection[T]:
        return Collection(lst.take(self.data, n))

    def drop(self, n: int) -> Collection[T]:
        return Collection(lst.drop(self.data, n))

    def take_while(self, fn: Callable[..., Any]) -> Collection[T]:
        return Collection(lst.take_while(fn, self.data))

    def drop_while(self, fn: Callable[..., Any]) -> Collection[T]:
        return Collection(lst.drop_while(fn, self.data))

    def slice(self, start: int = 0, length: int | None = None) -> Collection[T]:
        """See :func:`fnkit.lst.slice`."""
        return Collection(lst.slice(self.data, start, length))

    def sort(self, fn: Callable[[T, T], int]) -> Collection[T]:
        """Sort ascending with a 3-way comparator."""
        return Collection(lst.sort(fn, self.data))

    def unique(self) -> Collection[T]:
        """Drop repeated values by equality; elements must be hashable."""
        return Collection(lst.unique(self.data))

    def sort_unique(self, fn: Callable[[T, T], int]) -> Collection[T]:
        """Sort, then keep one element per comparator-equal run."""
        return Collection(lst.sort_unique(fn, self.data))

    def group_by[K](self, fn: Callable[[T], K]) -> Map[K, Collection[T]]:
        """Group elements by fn(element) into a Map of Collections."""
        return lst.group_by(fn, self.data).map(lambda _key, group: Collection(group))


Sequence.register(Collection)
