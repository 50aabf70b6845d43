"""Assertion utilities: safe_assert and assert_bool."""

from fnkit.assertions.safe import assert_bool, safe_assert

__all__ = ['assert_bool', 'safe_assert']
