"""Result type: Ok[T] | Err[E] for explicit error handling.

Example:
    ```python
    from fnkit import capture, ok

    capture(lambda: 10 / 2)
    # Ok(value=5.0)

    capture(lambda: 10 / 0)
    # Err(error=ZeroDivisionError('division by zero'))

    ok('{"api": 1}').map(json.loads).map(lambda d: d['api']).or_else(0)
    # 1
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fnkit._logging import get_logger
from fnkit.assertions import safe_assert
from fnkit.errors import InvariantViolationError, ResultError
from fnkit.option import Nothing, NothingType, Some

if TYPE_CHECKING:
    from fnkit.collection import Collection

__all__ = ['Err', 'Ok', 'Result', 'capture', 'error', 'is_error_like', 'ok']

_log = get_logger(__name__)


def _is_result(value: object) -> bool:
    return isinstance(value, Ok | Err)


def is_error_like(value: object) -> bool:
    """Return True if value can be an Err payload.

    Accepted payloads are strings, exceptions, and objects whose class
    defines its own ``__str__``.
    """
    if isinstance(value, str | BaseException):
        return True
    return type(value).__str__ is not object.__str__


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> res = Ok(42)
        >>> res.get()
        42
        >>> res.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def has_error(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def get(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def error_value(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            InvariantViolationError: Always. Check has_error() first.
        """
        raise InvariantViolationError("Can't get Result error on an Ok value")

    def map[U, E](self, f: Callable[[T], U | Result[U, E]]) -> Result[U, E]:
        """Apply a function to the contained value.

        A plain return value is wrapped in Ok; a Result return value is
        passed through as is.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok(f(value)), or f(value) itself when it is a Result.
        """
        result = f(self.value)
        if _is_result(result):
            return result  # type: ignore[return-value]
        return Ok(result)  # type: ignore[arg-type]

    def bind[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap. Unlike map, f must return a Result.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.

        Raises:
            AssertionError: If f returns something other than a Result.
        """
        result = f(self.value)
        safe_assert(_is_result(result), f'Result.bind: function must return a Result, got {type(result).__name__}')
        return result

    flat_map = bind

    def or_else(self, _default: Any) -> T:
        """Return the contained Ok value, ignoring the fallback."""
        return self.value

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def to_collection(self) -> Collection[T]:
        """Return a Collection holding only the contained value."""
        from fnkit.collection import Collection

        return Collection((self.value,))

    def panic(self) -> NoReturn:
        """Raise since there is no error to raise.

        Raises:
            InvariantViolationError: Always. panic() is only meaningful on Err.
        """
        raise InvariantViolationError("Can't panic on an Ok value")


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    The payload is a string, an exception, or any object with its own
    ``__str__``. It is kept unchanged so it can be inspected or re-raised.

    Examples:
        >>> res = Err('something went wrong')
        >>> res.has_error()
        True
        >>> res.or_else(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def has_error(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking has_error(),
        the type checker knows the result is Err[E].
        """
        return True

    def get(self) -> NoReturn:
        """Raise since Err has no Ok value.

        Raises:
            InvariantViolationError: Always. Check is_ok() first.
        """
        raise InvariantViolationError("Can't get Result on an Error value")

    def error_value(self) -> E:
        """Return the error payload."""
        return self.error

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def bind(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    flat_map = bind

    def or_else[U](self, default: U | Callable[[], U]) -> U:
        """Return the fallback.

        Args:
            default: A value, or a zero-argument callable producing it.

        Returns:
            default() if default is callable, otherwise default.
        """
        if callable(default):
            return default()
        return default

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing. The payload is dropped."""
        return Nothing

    def to_collection(self) -> Collection[Any]:
        """Return an empty Collection."""
        from fnkit.collection import Collection

        return Collection.empty()

    def panic(self) -> NoReturn:
        """Raise the error for exception-based callers.

        When the payload is itself an exception it is chained as the cause.

        Raises:
            ResultError: Always, wrapping this Err.
        """
        _log.debug('result.panic', error=str(self.error))
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ResultError(self) from cause


type Result[T, E = Exception] = Ok[T] | Err[E]


def ok[T](value: T) -> Ok[T]:
    """Create a successful Result."""
    return Ok(value)


def error[E](err: E) -> Err[E]:
    """Create a failed Result.

    Args:
        err: A string, an exception, or an object with its own __str__.

    Raises:
        AssertionError: If err is none of those.
    """
    safe_assert(is_error_like(err), f'Result.error: unsupported error payload {type(err).__name__}')
    return Err(err)


def capture[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """Call fn and capture its outcome as a Result.

    This is the one place where exceptions become values. Only Exception
    subclasses are captured; KeyboardInterrupt and friends propagate.

    Args:
        fn: Zero-argument function to call.

    Returns:
        Ok(fn()) on normal return, Err(exception) if fn raised.

    Example:
        ```python
        capture(lambda: int('5'))
        # Ok(value=5)
        capture(lambda: int('five')).has_error()
        # True
        ```
    """
    try:
        return Ok(fn())
    except Exception as e:
        _log.debug('result.captured_fault', exc_type=type(e).__name__)
        return Err(e)
