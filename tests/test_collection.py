"""Tests for the immutable Collection."""

from collections.abc import Sequence

import pytest
from hypothesis import given

from fnkit import Collection, ImmutableError, Map, Nothing, Some
from tests.strategies import int_lists


class TestCollectionCreation:
    """Tests for constructors and normalisation."""

    def test_from_iterable(self):
        col = Collection.from_iterable([1, 2, 3])
        assert col.to_list() == [1, 2, 3]
        assert isinstance(col.data, tuple)

    def test_constructor_normalises_lists(self):
        assert Collection([1, 2]) == Collection((1, 2))

    def test_from_mapping_reindexes(self):
        """Sparse or string keys are dropped in favour of 0..n-1."""
        col = Collection.from_iterable({5: 'a', 9: 'b'})
        assert col.to_list() == ['a', 'b']
        assert col.get(0) == Some('a')

    def test_from_iterator_drains(self):
        it = iter(range(3))
        assert Collection.from_iterator(it).to_list() == [0, 1, 2]
        assert list(it) == []

    def test_empty(self):
        assert Collection.empty().is_empty()
        assert Collection.empty().length() == 0


class TestCollectionProtocol:
    """Tests for the sequence protocol and immutability."""

    def test_is_sequence(self):
        assert isinstance(Collection((1,)), Sequence)

    def test_len_iter_contains(self):
        col = Collection((1, 2, 3))
        assert len(col) == 3
        assert list(col) == [1, 2, 3]
        assert 2 in col
        assert list(reversed(col)) == [3, 2, 1]

    def test_indexing(self):
        col = Collection(('a', 'b', 'c'))
        assert col[1] == 'b'
        assert col[-1] == 'c'
        assert col[1:] == Collection(('b', 'c'))
        with pytest.raises(IndexError):
            col[3]

    def test_items_is_restartable(self):
        col = Collection(('a', 'b'))
        assert list(col.items()) == [(0, 'a'), (1, 'b')]
        assert list(col.items()) == [(0, 'a'), (1, 'b')]

    def test_setitem_raises(self):
        col = Collection((1, 2))
        with pytest.raises(ImmutableError) as exc_info:
            col[0] = 5
        assert exc_info.value.code == 1727081676
        assert col.to_list() == [1, 2]

    def test_delitem_raises(self):
        col = Collection((1, 2))
        with pytest.raises(ImmutableError):
            del col[0]
        assert col.length() == 2

    def test_attribute_assignment_raises(self):
        col = Collection((1,))
        with pytest.raises(AttributeError):
            col.data = (2,)  # type: ignore[misc]

    def test_to_list_is_a_copy(self):
        col = Collection((1, 2))
        out = col.to_list()
        out.append(3)
        assert col.length() == 2


class TestCollectionAccess:
    """Tests for has/get/nth and positional access."""

    def test_has_and_get(self):
        col = Collection((10, 20))
        assert col.has(1)
        assert not col.has(2)
        assert not col.has(-1)
        assert col.get(1) == Some(20)
        assert col.get(5) is Nothing
        assert col.try_nth(-1) is Nothing

    def test_positional(self):
        col = Collection(('a', 'b', 'c'))
        assert col.hd() == 'a'
        assert col.first() == 'a'
        assert col.second() == 'b'
        assert col.third() == 'c'
        assert col.last() == 'c'
        assert col.nth(1) == 'b'

    def test_positional_out_of_range(self):
        with pytest.raises(AssertionError):
            Collection.empty().hd()
        with pytest.raises(AssertionError):
            Collection((1,)).second()


class TestCollectionTransformations:
    """Tests for methods returning new Collections."""

    def test_chain(self):
        col = Collection.from_iterable([3, 1, 2, 3])
        out = col.unique().sort(lambda a, b: a - b).map(lambda x: x * 10)
        assert out == Collection((10, 20, 30))
        assert col.to_list() == [3, 1, 2, 3]

    def test_map_with_index(self):
        assert Collection((5, 5)).map(lambda x, i: x + i).to_list() == [5, 6]

    def test_filter_and_partition(self):
        col = Collection(range(6))
        assert col.filter(lambda x: x % 3 == 0).to_list() == [0, 3]
        matches, rest = col.partition(lambda x: x < 2)
        assert matches == Collection((0, 1))
        assert rest == Collection((2, 3, 4, 5))

    def test_find(self):
        col = Collection(('x', 'yy', 'zzz'))
        assert col.find(lambda s: len(s) == 2) == Some('yy')
        assert col.find_index(lambda s: len(s) == 3) == Some(2)
        assert col.some(lambda s: s == 'x')
        assert not col.every(lambda s: s == 'x')

    def test_for_all(self):
        seen = []
        Collection(('a', 'b')).for_all(lambda x, i: seen.append(f'{i}{x}'))
        assert seen == ['0a', '1b']

    def test_folds(self):
        col = Collection((1, 2, 3))
        assert col.foldl(lambda acc, x: acc * x, 1) == 6
        assert col.foldr(lambda x, acc: acc + [x], []) == [1, 2, 3]

    def test_structure(self):
        col = Collection((1, 2, 3))
        assert col.tl() == Collection((2, 3))
        assert col.rev() == Collection((3, 2, 1))
        assert col.append(Collection((4,))) == Collection((1, 2, 3, 4))
        assert col.append([4, 5]).length() == 5
        assert col.cons(9).last() == 9

    def test_flatten(self):
        col = Collection(([1, [2]], Collection((3,)), 4))
        assert col.flatten().to_list() == [1, 2, 3, 4]
        assert Collection((1, 2)).flat_map(lambda x: [x] * x).to_list() == [1, 2, 2]

    def test_slicing(self):
        col = Collection(range(5))
        assert col.take(2).to_list() == [0, 1]
        assert col.drop(3).to_list() == [3, 4]
        assert col.take_while(lambda x: x < 2).to_list() == [0, 1]
        assert col.drop_while(lambda x: x < 4).to_list() == [4]
        assert col.slice(1, 2).to_list() == [1, 2]
        assert col.slice(-1).to_list() == [4]

    def test_sort_unique(self):
        col = Collection((100, 1, 2, 1, 3, 4, 3, 5, 5, 6, 6, 6, 0))
        assert col.sort_unique(lambda a, b: a - b).to_list() == [0, 1, 2, 3, 4, 5, 6, 100]

    def test_group_by_returns_map_of_collections(self):
        groups = Collection(range(1, 11)).group_by(lambda n: 'even' if n % 2 == 0 else 'odd')
        assert isinstance(groups, Map)
        assert groups['even'] == Collection((2, 4, 6, 8, 10))
        assert groups['odd'] == Collection((1, 3, 5, 7, 9))


class TestCollectionProperties:
    """Property-based tests for Collection."""

    @given(int_lists)
    def test_round_trip(self, s):
        assert Collection.from_iterable(s).to_list() == s

    @given(int_lists)
    def test_items_match_enumerate(self, s):
        assert list(Collection(s).items()) == list(enumerate(s))

    @given(int_lists)
    def test_rev_rev(self, s):
        col = Collection(s)
        assert col.rev().rev() == col
