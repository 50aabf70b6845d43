"""safe_assert and predicate contract checks.

Provides assertion utilities used for fnkit's contract checks:
- safe_assert: Always runs, even with python -O
- assert_bool: Checks that a predicate produced a real bool
"""

from __future__ import annotations

__all__ = ['assert_bool', 'safe_assert']


def safe_assert(condition: bool, message: str = '') -> None:
    """Assert that works even in optimized mode (-O flag).

    Unlike the built-in assert, this always executes regardless of __debug__.
    fnkit uses it for contract violations, which must fail loudly.

    Args:
        condition: The condition to check.
        message: Optional error message if assertion fails.

    Raises:
        AssertionError: If condition is False.

    Example:
        ```python
        safe_assert(1 + 1 == 2)  # passes
        safe_assert(False, "This always fails")  # raises AssertionError
        ```
    """
    if not condition:
        raise AssertionError(message)


def assert_bool(value: object, operation: str) -> bool:
    """Return value if it is a bool, else fail the predicate contract.

    Args:
        value: What the predicate returned.
        operation: Name of the operation, used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        AssertionError: If value is not a bool (truthy values such as 1 or
            'yes' are rejected too).
    """
    safe_assert(
        isinstance(value, bool),
        f'{operation}: predicate must return bool, got {type(value).__name__}',
    )
    return value  # type: ignore[return-value]
