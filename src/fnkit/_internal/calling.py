"""Callback arity adaptation.

List operations hand callbacks ``(element, index)`` and folds hand them
``(acc, element, index)``. Python callables are strict about their arity,
so each callback is called with only as many leading positional arguments
as it declares without defaults.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['adapt', 'required_positional']

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def required_positional(fn: Callable[..., Any], limit: int) -> int:
    """Number of positional arguments to pass to fn, between 1 and limit.

    Args:
        fn: The callback.
        limit: How many arguments the caller has available.

    Returns:
        ``limit`` for callbacks taking ``*args``, otherwise the number of
        positional parameters without defaults, clamped to ``1..limit``.
        Callables without an inspectable signature get 1.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return limit
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            count += 1
    return max(1, min(limit, count))


def adapt[R](fn: Callable[..., R], limit: int) -> Callable[..., R]:
    """Wrap fn so that it can always be called with ``limit`` arguments.

    Extra trailing arguments are dropped before reaching fn.

    Example:
        ```python
        call = adapt(lambda x: x * 2, 2)
        call(21, 0)
        # 42
        ```
    """
    n = required_positional(fn, limit)
    if n >= limit:
        return fn

    def call(*args: Any) -> R:
        return fn(*args[:n])

    return call
