"""Pure functions over ordered sequences.

Every function accepts any finite iterable and returns a fresh ``list``
(or a scalar, an Option, or a Map). Inputs are never mutated. A Mapping
passed as input contributes its values, re-indexed from 0.

Callbacks documented as receiving ``(element, index)`` may declare just
``element``; see :mod:`fnkit._internal.calling`.

Example:
    ```python
    from fnkit import lst

    lst.map(lambda x, i: x * i, [5, 5, 5])
    # [0, 5, 10]
    lst.sort_unique(lambda a, b: a - b, [3, 1, 2, 1, 3])
    # [1, 2, 3]
    lst.group_by(lambda n: 'even' if n % 2 == 0 else 'odd', range(1, 5)).to_dict()
    # {'odd': [1, 3], 'even': [2, 4]}
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from fnkit._internal import adapt
from fnkit.assertions import assert_bool, safe_assert
from fnkit.option import Nothing, Option, Some

if TYPE_CHECKING:
    from fnkit.map import Map

__all__ = [
    'append',
    'cons',
    'drop',
    'drop_while',
    'every',
    'filter',
    'find',
    'find_index',
    'first',
    'flat_map',
    'flatten',
    'foldl',
    'foldr',
    'for_all',
    'group_by',
    'hd',
    'init',
    'is_empty',
    'last',
    'length',
    'map',
    'nth',
    'partition',
    'rev',
    'second',
    'slice',
    'some',
    'sort',
    'sort_unique',
    'take',
    'take_while',
    'third',
    'tl',
    'try_nth',
    'unique',
]

type Comparator[T] = Callable[[T, T], int]

_ATOMIC = (str, bytes, bytearray)


def _items[T](seq: Iterable[T]) -> list[T]:
    if isinstance(seq, Mapping):
        return list(seq.values())
    return list(seq)


# ---------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------


def map[T, U](fn: Callable[..., U], seq: Iterable[T]) -> list[U]:  # noqa: A001
    """Apply fn(element, index) to every element.

    Returns:
        A list of the results, same length as the input.
    """
    call = adapt(fn, 2)
    return [call(elem, index) for index, elem in enumerate(_items(seq))]


def filter[T](fn: Callable[..., Any], seq: Iterable[T]) -> list[T]:  # noqa: A001
    """Keep the elements for which fn(element, index) is truthy, in order."""
    call = adapt(fn, 2)
    return [elem for index, elem in enumerate(_items(seq)) if call(elem, index)]


def partition[T](fn: Callable[..., bool], seq: Iterable[T]) -> tuple[list[T], list[T]]:
    """Split seq into (matches, non_matches) in a single pass.

    Both lists keep encounter order.

    Raises:
        AssertionError: If fn returns a non-bool.
    """
    call = adapt(fn, 2)
    matches: list[T] = []
    non_matches: list[T] = []
    for index, elem in enumerate(_items(seq)):
        if assert_bool(call(elem, index), 'partition'):
            matches.append(elem)
        else:
            non_matches.append(elem)
    return matches, non_matches


def find[T](fn: Callable[..., bool], seq: Iterable[T]) -> Option[T]:
    """Return the first element for which fn(element, index) is True.

    Returns:
        Some(element), or Nothing if no element matches.
    """
    call = adapt(fn, 2)
    for index, elem in enumerate(_items(seq)):
        if assert_bool(call(elem, index), 'find'):
            return Some(elem)
    return Nothing


def find_index[T](fn: Callable[..., bool], seq: Iterable[T]) -> Option[int]:
    """Return the index of the first element for which fn is True."""
    call = adapt(fn, 2)
    for index, elem in enumerate(_items(seq)):
        if assert_bool(call(elem, index), 'find_index'):
            return Some(index)
    return Nothing


def for_all[T](fn: Callable[..., Any], seq: Iterable[T]) -> None:
    """Call fn(element, index) on every element for its side effects."""
    call = adapt(fn, 2)
    for index, elem in enumerate(_items(seq)):
        call(elem, index)


def foldl[T, R](fn: Callable[..., R], seq: Iterable[T], initial: R | None = None) -> R | None:
    """Reduce from left to right with fn(acc, element, index)."""
    call = adapt(fn, 3)
    acc = initial
    for index, elem in enumerate(_items(seq)):
        acc = call(acc, elem, index)
    return acc


def foldr[T, R](fn: Callable[[T, R | None], R], seq: Iterable[T], initial: R | None = None) -> R | None:
    """Reduce with fn(element, acc).

    The traversal is still left to right; only the argument order differs
    from foldl. foldr(lambda x, acc: [x, acc], [1, 2], None) is
    [2, [1, None]].
    """
    acc = initial
    for elem in _items(seq):
        acc = fn(elem, acc)
    return acc


def some[T](fn: Callable[..., bool], seq: Iterable[T]) -> bool:
    """True if fn(element, index) is True for at least one element.

    Stops at the first match.
    """
    call = adapt(fn, 2)
    for index, elem in enumerate(_items(seq)):
        if assert_bool(call(elem, index), 'some'):
            return True
    return False


def every[T](fn: Callable[..., bool], seq: Iterable[T]) -> bool:
    """True if fn(element, index) is True for every element.

    Stops at the first miss. True for an empty sequence.
    """
    call = adapt(fn, 2)
    for index, elem in enumerate(_items(seq)):
        if not assert_bool(call(elem, index), 'every'):
            return False
    return True


# ---------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------


def length(seq: Iterable[Any]) -> int:
    return len(_items(seq))


def is_empty(seq: Iterable[Any]) -> bool:
    return length(seq) == 0


def hd[T](seq: Iterable[T]) -> T:
    """First element.

    Raises:
        AssertionError: If seq is empty.
    """
    items = _items(seq)
    safe_assert(len(items) > 0, 'hd: empty list')
    return items[0]


def tl[T](seq: Iterable[T]) -> list[T]:
    """All elements but the first. Empty input gives an empty list."""
    return _items(seq)[1:]


def try_nth[T](seq: Iterable[T], index: int) -> Option[T]:
    """Element at index, or Nothing when index is outside 0..len-1."""
    items = _items(seq)
    if 0 <= index < len(items):
        return Some(items[index])
    return Nothing


def nth[T](seq: Iterable[T], index: int) -> T:
    """Element at index.

    Raises:
        AssertionError: If index is outside 0..len-1.
    """
    value = try_nth(seq, index)
    safe_assert(value.is_some(), f'nth: index {index} out of range')
    return value.get()


def first[T](seq: Iterable[T]) -> T:
    return nth(seq, 0)


def second[T](seq: Iterable[T]) -> T:
    return nth(seq, 1)


def third[T](seq: Iterable[T]) -> T:
    return nth(seq, 2)


def last[T](seq: Iterable[T]) -> T:
    """Last element.

    Raises:
        AssertionError: If seq is empty.
    """
    items = _items(seq)
    safe_assert(len(items) > 0, 'last: empty list')
    return items[-1]


# ---------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------


def rev[T](seq: Iterable[T]) -> list[T]:
    return _items(seq)[::-1]


def init[T](fn: Callable[[int], T], length: int) -> list[T]:
    """Build a list of the given length from fn(0) .. fn(length - 1)."""
    return [fn(index) for index in range(length)]


def append[T, U](first: Iterable[T], second: Iterable[U]) -> list[T | U]:
    """Concatenate two sequences, first then second."""
    return [*_items(first), *_items(second)]


def cons[T, U](seq: Iterable[T], value: U) -> list[T | U]:
    """Add value at the end of seq.

    Note this appends; it does not prepend like a classic cons cell.
    """
    return [*_items(seq), value]


def flatten(seq: Iterable[Any]) -> list[Any]:
    """Concatenate nested sequences of any depth into one flat list.

    Strings and bytes are treated as single elements.

    Example:
        ```python
        flatten([[[1, 2], 3], [4, [5]], 6])
        # [1, 2, 3, 4, 5, 6]
        ```
    """
    flat: list[Any] = []
    for elem in _items(seq):
        if isinstance(elem, Sequence) and not isinstance(elem, _ATOMIC):
            flat.extend(flatten(elem))
        else:
            flat.append(elem)
    return flat


def flat_map[T](fn: Callable[..., Any], seq: Iterable[T]) -> list[Any]:
    """flatten(map(fn, seq))."""
    return flatten(map(fn, seq))


# ---------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------


def take[T](seq: Iterable[T], n: int) -> list[T]:
    """The first min(n, len) elements. Negative n takes nothing."""
    return _items(seq)[: max(0, n)]


def drop[T](seq: Iterable[T], n: int) -> list[T]:
    """Everything after the first min(n, len) elements."""
    return _items(seq)[max(0, n) :]


def _split_index(fn: Callable[..., Any], items: list[Any]) -> int:
    call = adapt(fn, 2)
    for index, elem in enumerate(items):
        if not call(elem, index):
            return index
    return len(items)


def take_while[T](fn: Callable[..., Any], seq: Iterable[T]) -> list[T]:
    """Longest prefix whose elements all satisfy fn(element, index)."""
    items = _items(seq)
    return items[: _split_index(fn, items)]


def drop_while[T](fn: Callable[..., Any], seq: Iterable[T]) -> list[T]:
    """Everything from the first element that fails fn(element, index)."""
    items = _items(seq)
    return items[_split_index(fn, items) :]


def slice[T](seq: Iterable[T], start: int = 0, length: int | None = None) -> list[T]:  # noqa: A001
    """A bounded slice described by a start index and a length.

    Args:
        seq: The input sequence.
        start: First index. Negative values count from the end.
        length: Number of elements. None means up to the end; a negative
            value stops that many elements before the end.

    Returns:
        The selected elements.
    """
    tail = _items(seq)[start:]
    if length is None:
        return tail
    # a negative length counts back from the shared end of tail and seq
    return tail[:length]


# ---------------------------------------------------------------------
# Ordering and grouping
# ---------------------------------------------------------------------


def sort[T](fn: Comparator[T], seq: Iterable[T]) -> list[T]:
    """Sort ascending with a 3-way comparator.

    fn(a, b) returns a negative number when a < b, zero when equal and a
    positive number when a > b. The sort is stable.
    """
    return sorted(_items(seq), key=functools.cmp_to_key(fn))


def unique[T](seq: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping the first occurrence of each.

    Values are compared by hash and equality, so elements must be
    hashable, and values Python considers equal (1, 1.0, True) collapse
    into one. Use sort_unique to deduplicate by a comparator instead.
    """
    seen: set[Any] = set()
    kept: list[T] = []
    for elem in _items(seq):
        if elem not in seen:
            seen.add(elem)
            kept.append(elem)
    return kept


def sort_unique[T](fn: Comparator[T], seq: Iterable[T]) -> list[T]:
    """Sort with fn, then keep one element per comparator-equal run.

    The first element of each run wins.

    Example:
        ```python
        sort_unique(lambda a, b: a - b, [100, 1, 2, 1, 3, 4, 3, 5, 5, 6, 6, 6, 0])
        # [0, 1, 2, 3, 4, 5, 6, 100]
        ```
    """
    kept: list[T] = []
    for elem in sort(fn, seq):
        if not kept or fn(kept[-1], elem) != 0:
            kept.append(elem)
    return kept


def group_by[T, K](fn: Callable[[T], K], seq: Iterable[T]) -> Map[K, list[T]]:
    """Group elements by fn(element).

    Keys keep first-seen order and each group keeps encounter order.

    Returns:
        A Map from key to the list of elements with that key.
    """
    from fnkit.map import Map

    def step(groups: Map[K, list[T]], elem: T) -> Map[K, list[T]]:
        return groups.update(
            fn(elem),
            lambda current: [*current.get(), elem] if current.is_some() else [elem],
        )

    return foldl(step, seq, Map.empty())
