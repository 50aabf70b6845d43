"""Collection helpers for Enum classes.

Example:
    ```python
    from enum import Enum

    from fnkit import EnumCollectionMixin

    class Priority(EnumCollectionMixin, Enum):
        LOW = 1
        MEDIUM = 2
        HIGH = 3

    Priority.values()
    # [1, 2, 3]
    Priority.except_([Priority.LOW]).to_list()
    # [<Priority.MEDIUM: 2>, <Priority.HIGH: 3>]
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Self

from fnkit.assertions import safe_assert
from fnkit.collection import Collection

__all__ = ['EnumCollectionMixin']


class EnumCollectionMixin:
    """Mixin for ``enum.Enum`` subclasses; list it before the Enum base."""

    @classmethod
    def collection(cls) -> Collection[Self]:
        """All members in definition order."""
        return Collection(tuple(cls))  # type: ignore[arg-type]

    @classmethod
    def values(cls) -> list[Any]:
        """Member values in definition order.

        Raises:
            AssertionError: If any value is not an int or str.
        """
        values = [member.value for member in cls.collection()]
        safe_assert(
            all(isinstance(value, int | str) for value in values),
            f'{cls.__name__}.values: every member value must be int or str',
        )
        return values

    @classmethod
    def collection_values(cls) -> Collection[Any]:
        return Collection(tuple(cls.values()))

    @classmethod
    def except_(cls, items: Iterable[Self]) -> Collection[Self]:
        """All members except those listed, in definition order.

        Raises:
            AssertionError: If items holds something that is not a member.
        """
        excluded = list(items)
        members = cls.collection()
        safe_assert(
            all(isinstance(item, Enum) and item in members for item in excluded),
            f'{cls.__name__}.except_: every item must be a {cls.__name__} member',
        )
        return members.filter(lambda member: member not in excluded)
