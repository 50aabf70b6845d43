"""Error types raised by fnkit.

Three kinds of failure leave the library as exceptions:

- ``InvariantViolationError``: a programming error such as calling ``get()``
  on ``Nothing`` or on an ``Err``. Never caught internally.
- ``ImmutableError``: an attempted write through the indexed-access
  protocol of a ``Collection`` or ``Map``. Callers may catch it.
- ``ResultError``: an ``Err`` turned back into an exception by
  ``Err.panic()`` for code that expects raise-based error handling.

Contract violations (non-boolean predicates, malformed pairs) raise plain
``AssertionError`` through :func:`fnkit.assertions.safe_assert`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fnkit.result import Err

__all__ = [
    'FunctionalError',
    'ImmutableError',
    'InvariantViolationError',
    'ResultError',
]


class FunctionalError(Exception):
    """Base exception class for fnkit errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (int): A stable numeric code for programmatic error handling.

    Example:
        ```python
        from fnkit import FunctionalError, Nothing

        try:
            Nothing.get()
        except FunctionalError as e:
            print(e.code)
        ```
    """

    code: int = 0

    def __init__(self, message: str) -> None:
        """Initialize a FunctionalError.

        Args:
            message (str): A human-readable description of the error.
        """
        self.message = message
        super().__init__(message)


class InvariantViolationError(FunctionalError, RuntimeError):
    """A value was accessed in a state where it does not exist.

    Raised by ``Nothing.get()``, ``Err.get()``, ``Ok.error_value()`` and
    ``Ok.panic()``. Usually means an ``is_some()``/``is_ok()`` check is
    missing.
    """

    code = 1764600921

    def __init__(self, message: str) -> None:
        super().__init__(f'Invariant Violation: {message}')


class ImmutableError(FunctionalError, TypeError):
    """Item assignment or deletion on an immutable container."""

    code = 1727081676

    def __init__(self) -> None:
        super().__init__('Attempted to modify an immutable object.')


class ResultError(FunctionalError):
    """Wraps an ``Err`` so it can be raised into exception-based code.

    The wrapped Err stays available on ``result``; the payload's
    string form is part of the message.
    """

    code = 1727082028

    def __init__(self, result: Err[object]) -> None:
        self.result = result
        super().__init__(f'{type(result).__name__}: {result.error}')
