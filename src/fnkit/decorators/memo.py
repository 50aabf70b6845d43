"""Memoization keyed by the string form of the call arguments.

Example:
    ```python
    from fnkit import Memo

    fib = Memo.make(lambda n: n if n <= 1 else fib(n - 1) + fib(n - 2))
    fib(80)
    # 23416728348467685
    len(fib)
    # 81
    ```

Arguments are identified by ``str()`` only, so ``f(1)`` and ``f('1')``
share one cache entry. Only memoize pure functions whose arguments have a
faithful string form.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Any

import wrapt

from fnkit._logging import get_logger

__all__ = ['Memo', 'memoize', 'memo_key']

_log = get_logger(__name__)


def memo_key(args: tuple[Any, ...], kwargs: dict[str, Any] | None = None) -> str:
    """Cache key for a call: BLAKE2b digest of the joined argument strings.

    Keyword arguments are added as ``(name, str(value))`` pairs in name
    order, kept apart from the positional part so that ``f('x=1')`` and
    ``f(x=1)`` get different keys.
    """
    ident = 'memo::' + '::'.join(str(arg) for arg in args)
    if kwargs:
        # ident never starts with '(' so the two forms cannot collide
        ident = repr((ident, tuple((name, str(kwargs[name])) for name in sorted(kwargs))))
    return hashlib.blake2b(ident.encode(), digest_size=16).hexdigest()


class Memo[R]:
    """A function wrapped with a result cache.

    Calling the Memo calls the function once per distinct argument key and
    replays the stored result afterwards, including None results and
    results of recursive calls.
    """

    def __init__(self, fn: Callable[..., R]) -> None:
        self._fn = fn
        self._cache: dict[str, R] = {}

    @classmethod
    def make(cls, fn: Callable[..., R]) -> Memo[R]:
        """Create a memoized version of fn."""
        return cls(fn)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        return self.lookup(args, kwargs, lambda: self._fn(*args, **kwargs))

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f'Memo({getattr(self._fn, "__qualname__", self._fn)!r}, entries={len(self._cache)})'

    def lookup(self, params: tuple[Any, ...], kwargs: dict[str, Any], compute: Callable[[], R]) -> R:
        """Return the cached result for params, calling compute on a miss."""
        key = memo_key(params, kwargs)
        if key in self._cache:
            return self._cache[key]
        _log.debug('memo.miss', function=getattr(self._fn, '__qualname__', repr(self._fn)), key=key)
        value = compute()
        self._cache[key] = value
        return value

    def clear(self) -> None:
        self._cache.clear()


def memoize[R](func: Callable[..., R]) -> Callable[..., R]:
    """Decorator form of :meth:`Memo.make`.

    On methods the instance is part of the key, so each object gets its own
    entries. The backing Memo is reachable as ``decorated.memo``.

    Example:
        ```python
        @memoize
        def slow_square(n: int) -> int:
            return n * n

        slow_square(4)
        slow_square(4)
        len(slow_square.memo)
        # 1
        ```
    """
    memo: Memo[R] = Memo(func)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        params = args if instance is None else (instance, *args)
        return memo.lookup(params, kwargs, lambda: wrapped(*args, **kwargs))

    decorated = wrapper(func)
    decorated.memo = memo
    return decorated
