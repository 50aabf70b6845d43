"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fnkit.assertions import safe_assert
from fnkit.errors import InvariantViolationError

if TYPE_CHECKING:
    from fnkit.collection import Collection

__all__ = ['Nothing', 'NothingType', 'Option', 'none', 'some']


def _is_option(value: object) -> bool:
    return isinstance(value, Some | NothingType)


class Some[T](msgspec.Struct, frozen=True):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> opt = Some(42)
        >>> opt.get()
        42
        >>> opt.map(lambda x: x * 2)
        Some(value=84)
        >>> opt.map(lambda x: Nothing)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def map[U](self, f: Callable[[T], U | Option[U]]) -> Option[U]:
        """Apply a function to the contained value.

        f may be total or partial: a plain return value is wrapped in Some,
        an Option return value is passed through as is, so nested
        Option[Option[U]] never appears.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some(f(value)), or f(value) itself when it is an Option.
        """
        result = f(self.value)
        if _is_option(result):
            return result  # type: ignore[return-value]
        return Some(result)  # type: ignore[arg-type]

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap. Unlike map, f must return an Option.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.

        Raises:
            AssertionError: If f returns something other than an Option.
        """
        result = f(self.value)
        safe_assert(_is_option(result), f'Option.bind: function must return an Option, got {type(result).__name__}')
        return result

    flat_map = bind

    def or_else(self, _default: Any) -> T:
        """Return the contained value, ignoring the fallback."""
        return self.value

    def to_collection(self) -> Collection[T]:
        """Return a Collection holding only the contained value."""
        from fnkit.collection import Collection

        return Collection((self.value,))


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant (or `none()`) instead
    of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.or_else(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def get(self) -> NoReturn:
        """Raise since Nothing holds no value.

        Raises:
            InvariantViolationError: Always. Check is_some() first.
        """
        raise InvariantViolationError("Can't get value from None type, did you forget to check the value?")

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling the function."""
        return self

    def bind(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling the function."""
        return self

    flat_map = bind

    def or_else[U](self, default: U | Callable[[], U]) -> U:
        """Return the fallback.

        Args:
            default: A value, or a zero-argument callable producing it.
                Callables are always invoked; wrap a callable you want
                returned as-is in a lambda.

        Returns:
            default() if default is callable, otherwise default.
        """
        if callable(default):
            return default()
        return default

    def to_collection(self) -> Collection[Any]:
        """Return an empty Collection."""
        from fnkit.collection import Collection

        return Collection.empty()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Create an Option holding value. ``some(None)`` is still Some."""
    return Some(value)


def none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing
