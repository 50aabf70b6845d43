"""@safe decorator: exceptions become Err values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from fnkit._logging import get_logger
from fnkit.result import Err, Ok

__all__ = ['safe']

_log = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Make a function return Ok(value) or Err(exception) instead of raising.

    The decorator form of :func:`fnkit.capture`. Works on plain functions,
    methods and classmethods alike.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(KeyError, ValueError))
        def narrow(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,);
            anything else propagates.

    Returns:
        The wrapped function.

    Example:
        ```python
        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port('8080')
        # Ok(value=8080)
        parse_port('http').or_else(80)
        # 80
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            _log.debug(
                'result.captured_fault',
                function=getattr(wrapped, '__qualname__', repr(wrapped)),
                exc_type=type(e).__name__,
            )
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper
