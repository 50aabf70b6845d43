"""Tests for Option type (Some and Nothing)."""

import gc
import weakref

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fnkit import Collection, InvariantViolationError, Nothing, NothingType, Some, none, some


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        opt = some(None)
        assert opt.is_some()
        assert opt.get() is None

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        opt = Some(42)
        with pytest.raises(AttributeError):
            opt.value = 100  # type: ignore[misc]


class TestNothingCreation:
    """Tests for Nothing singleton."""

    def test_nothing_is_singleton(self):
        """none() returns the Nothing singleton."""
        assert none() is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Multiple NothingType instances are equal."""
        assert NothingType() == Nothing


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Some(1) != Nothing

    def test_some_hashable(self):
        assert hash(Some('a')) == hash(Some('a'))
        assert len({Some(1), Some(1), Nothing}) == 2


class TestOptionQueries:
    """Tests for is_some/is_none/get."""

    def test_some_queries(self, sample_some):
        assert sample_some.is_some()
        assert not sample_some.is_none()
        assert sample_some.get() == 'hello'

    def test_nothing_queries(self, sample_nothing):
        assert sample_nothing.is_none()
        assert not sample_nothing.is_some()

    def test_nothing_get_raises(self, sample_nothing):
        """get() on Nothing is an invariant violation."""
        with pytest.raises(InvariantViolationError) as exc_info:
            sample_nothing.get()
        assert str(exc_info.value).startswith('Invariant Violation: ')
        assert exc_info.value.code == 1764600921


class TestOptionMap:
    """Tests for map/bind/flat_map."""

    def test_map_wraps_plain_result(self):
        assert Some(21).map(lambda x: x * 2) == Some(42)

    def test_map_passes_option_through(self):
        """A function returning an Option is not double wrapped."""
        assert Some(5).map(lambda x: Some(x + 1)) == Some(6)
        assert Some(5).map(lambda x: Nothing) is Nothing

    def test_map_on_nothing_skips_function(self):
        calls = []
        assert Nothing.map(calls.append) is Nothing
        assert calls == []

    def test_bind_returns_function_result(self):
        assert Some(4).bind(lambda x: Some(x * x)) == Some(16)
        assert Some(4).flat_map(lambda x: Nothing) is Nothing

    def test_bind_requires_option(self):
        """bind asserts that the function returns an Option."""
        with pytest.raises(AssertionError, match='must return an Option'):
            Some(4).bind(lambda x: x + 1)

    def test_bind_on_nothing(self):
        assert Nothing.bind(lambda x: Some(x)) is Nothing


class TestOptionOrElse:
    """Tests for or_else."""

    def test_some_ignores_fallback(self):
        assert Some(1).or_else(2) == 1
        assert Some(1).or_else(lambda: 2) == 1

    def test_nothing_uses_value(self):
        assert Nothing.or_else(2) == 2

    def test_nothing_calls_callable(self):
        assert Nothing.or_else(lambda: 'computed') == 'computed'


class TestOptionToCollection:
    """Tests for to_collection."""

    def test_some_to_collection(self):
        assert Some(3).to_collection() == Collection((3,))

    def test_nothing_to_collection(self):
        assert Nothing.to_collection().is_empty()


class TestOptionMatch:
    """Option variants work with structural pattern matching."""

    def test_match(self):
        def describe(opt):
            match opt:
                case Some(value=v):
                    return f'some {v}'
                case NothingType():
                    return 'nothing'

        assert describe(Some(1)) == 'some 1'
        assert describe(Nothing) == 'nothing'


class TestOptionProperties:
    """Property-based tests for Option."""

    @given(st.integers())
    def test_map_identity(self, x):
        assert Some(x).map(lambda v: v) == Some(x)

    @given(st.integers())
    def test_bind_left_identity(self, x):
        def f(v):
            return Some(v + 1) if v % 2 else Nothing

        assert Some(x).bind(f) == f(x)

    @given(st.integers(), st.integers())
    def test_or_else_on_some(self, x, fallback):
        assert Some(x).or_else(fallback) == x


class TestOptionLifecycle:
    """Some takes part in garbage collection like any container."""

    def test_self_referencing_payload_is_collected(self):
        class Holder:
            pass

        holder = Holder()
        opt = Some(holder)
        holder.opt = opt
        ref = weakref.ref(holder)
        del holder, opt
        gc.collect()
        assert ref() is None
