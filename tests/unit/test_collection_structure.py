"""Unit tests for flattening, chunking, slicing, piping and sampling."""

from __future__ import annotations

from typing import Any, List

import pytest

from collectkit import Collection, InvalidArgumentException


class TestCollectionFlattening:
    """Test suite for flatten and collapse."""

    def test_flatten_fully(self) -> None:
        """Test nested lists, mappings and collections are unwrapped."""
        collection = Collection([1, [2, [3, Collection([4, [5]])]], {'a': 6, 'b': {'c': 7}}])

        assert collection.flatten().all() == [1, 2, 3, 4, 5, 6, 7]

    def test_flatten_discards_keys(self) -> None:
        """Test the result is always a list."""
        assert Collection({'a': {'x': 1}, 'b': 2}).flatten().all() == [1, 2]

    def test_flatten_with_depth(self) -> None:
        """Test depth limits how many levels are descended."""
        collection = Collection([1, [2, [3, [4]]]])

        assert collection.flatten(1).all() == [1, 2, [3, [4]]]
        assert collection.flatten(2).all() == [1, 2, 3, [4]]

    def test_flatten_zero_depth_does_nothing(self) -> None:
        """Test an explicit zero depth leaves values unwrapped."""
        collection = Collection({'a': [1, 2], 'b': 3})

        assert collection.flatten(0).all() == [[1, 2], 3]

    def test_flatten_is_idempotent(self) -> None:
        """Test flattening twice equals flattening once."""
        collection = Collection([[1, [2]], Collection([3, [4, [5]]])])

        assert collection.flatten().flatten().all() == collection.flatten().all()

    def test_flatten_leaves_strings(self) -> None:
        """Test strings are not split into characters."""
        assert Collection(['ab', ['cd']]).flatten().all() == ['ab', 'cd']

    def test_collapse(self) -> None:
        """Test one level is merged into a list."""
        collection = Collection([[1, 2], Collection([3]), {'a': [4]}])

        assert collection.collapse().all() == [1, 2, 3, [4]]

    def test_collapse_passes_scalars_through(self) -> None:
        """Test non-container elements are appended."""
        assert Collection([1, [2, 3]]).collapse().all() == [1, 2, 3]


class TestCollectionChunking:
    """Test suite for chunk, split and every."""

    def test_chunk_preserves_keys(self) -> None:
        """Test chunk sizes and keys."""
        chunks = Collection([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]).chunk(3)

        assert chunks.count() == 4
        assert chunks.first().to_dict() == {0: 1, 1: 2, 2: 3}
        assert chunks.last().to_dict() == {9: 10}

    @pytest.mark.parametrize("size", [0, -1])
    def test_chunk_with_invalid_size(self, size: int) -> None:
        """Test a non-positive size yields no chunks."""
        assert Collection([1, 2, 3]).chunk(size).is_empty()

    def test_split_evenly(self) -> None:
        """Test remainders go to the earliest groups."""
        groups = Collection(['a', 'b', 'c']).split(2)

        assert groups.map(lambda group: group.count()).all() == [2, 1]
        assert groups.to_array() == [['a', 'b'], {2: 'c'}]

    def test_split_more_groups_than_items(self) -> None:
        """Test fewer groups are returned than requested."""
        groups = Collection([1, 2]).split(5)

        assert groups.count() == 2
        assert groups.map(lambda group: group.count()).all() == [1, 1]

    @pytest.mark.parametrize("items,groups,sizes", [
        (list(range(10)), 3, [4, 3, 3]),
        (list(range(9)), 3, [3, 3, 3]),
        (list(range(5)), 4, [2, 1, 1, 1]),
        ([], 3, []),
    ])
    def test_split_sizes(self, items: List[int], groups: int, sizes: List[int]) -> None:
        """Test group sizes differ by at most one."""
        assert Collection(items).split(groups).map(lambda group: group.count()).all() == sizes

    def test_every(self) -> None:
        """Test every n-th element with keys preserved."""
        collection = Collection(['a', 'b', 'c', 'd', 'e', 'f'])

        assert collection.every(4).all() == {0: 'a', 4: 'e'}
        assert collection.every(2, 1).all() == {1: 'b', 3: 'd', 5: 'f'}
        assert collection.every(1).all() == collection.all()


class TestCollectionSlicing:
    """Test suite for slice, take and for_page."""

    @pytest.fixture
    def collection(self) -> Collection[int]:
        """Create a list of eight numbers."""
        return Collection([1, 2, 3, 4, 5, 6, 7, 8])

    def test_slice(self, collection: Collection[int]) -> None:
        """Test offsets and lengths keep keys."""
        assert collection.slice(3).all() == {3: 4, 4: 5, 5: 6, 6: 7, 7: 8}
        assert collection.slice(3, 2).all() == {3: 4, 4: 5}
        assert collection.slice(0, 2).all() == [1, 2]

    def test_slice_negative(self, collection: Collection[int]) -> None:
        """Test negative offsets and lengths count from the end."""
        assert collection.slice(-3).values().all() == [6, 7, 8]
        assert collection.slice(-5, -2).values().all() == [4, 5, 6]
        assert collection.slice(2, -2).values().all() == [3, 4, 5, 6]

    def test_take(self, collection: Collection[int]) -> None:
        """Test take from either end."""
        assert collection.take(2).all() == [1, 2]
        assert collection.take(-2).all() == {6: 7, 7: 8}
        assert collection.take(100).count() == 8

    def test_for_page(self, collection: Collection[int]) -> None:
        """Test pages are re-indexed."""
        assert collection.for_page(2, 3).all() == [4, 5, 6]
        assert collection.for_page(3, 3).all() == [7, 8]
        assert collection.for_page(4, 3).all() == []


class TestCollectionPipeline:
    """Test suite for each, pipe and implode."""

    def test_each_visits_in_order(self) -> None:
        """Test each receives the value and key and returns the receiver."""
        collection = Collection({'a': 1, 'b': 2})
        seen: List[Any] = []

        result = collection.each(lambda value, key: seen.append((key, value)))

        assert result is collection
        assert seen == [('a', 1), ('b', 2)]

    def test_each_stops_on_false(self) -> None:
        """Test returning False breaks the loop."""
        seen: List[int] = []

        def visit(value: int) -> bool:
            seen.append(value)
            return value < 2

        Collection([1, 2, 3]).each(visit)

        assert seen == [1, 2]

    def test_each_does_not_stop_on_falsy(self) -> None:
        """Test only False itself stops the loop."""
        seen: List[int] = []

        def visit(value: int) -> int:
            seen.append(value)
            return 0

        Collection([1, 2]).each(visit)

        assert seen == [1, 2]

    def test_pipe(self) -> None:
        """Test pipe passes the collection through."""
        assert Collection([1, 2, 3]).pipe(lambda collection: collection.sum()) == 6

    def test_implode_values(self) -> None:
        """Test joining raw values."""
        assert Collection(['foo', 'bar']).implode(',') == 'foo,bar'
        assert Collection([1, 2.0, True, None]).implode('-') == '1-2-1-'
        assert Collection(['a', 'b']).implode() == 'ab'

    def test_implode_path(self) -> None:
        """Test joining a path of each row."""
        collection = Collection([{'name': 'taylor', 'email': 'foo'}, {'name': 'dayle', 'email': 'bar'}])

        assert collection.implode('email') == 'foobar'
        assert collection.implode('email', ',') == 'foo,bar'

    def test_implode_empty(self) -> None:
        """Test imploding nothing gives an empty string."""
        assert Collection().implode(',') == ''


class TestCollectionRandom:
    """Test suite for random sampling."""

    def test_random_single_value(self) -> None:
        """Test a raw value is returned without an argument."""
        assert Collection([1, 2, 3, 4, 5, 6]).random() in [1, 2, 3, 4, 5, 6]

    def test_random_sample_without_replacement(self) -> None:
        """Test a sample has the requested size and no duplicates."""
        sample = Collection([1, 2, 3, 4, 5, 6]).random(3)

        assert isinstance(sample, Collection)
        assert sample.count() == 3
        assert len(set(sample)) == 3
        assert set(sample) <= {1, 2, 3, 4, 5, 6}
        assert sample.keys().all() == [0, 1, 2]

    def test_random_whole_collection(self) -> None:
        """Test sampling everything returns a permutation."""
        sample = Collection(['a', 'b']).random(2)

        assert sorted(sample) == ['a', 'b']

    def test_random_zero(self) -> None:
        """Test sampling nothing returns an empty collection."""
        assert Collection([1]).random(0).is_empty()

    def test_random_too_many_items(self) -> None:
        """Test oversized samples raise."""
        with pytest.raises(InvalidArgumentException) as exc_info:
            Collection([1, 2]).random(3)

        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2
        assert 'You requested 3 items, but there are only 2 items in the collection.' in str(exc_info.value)

    def test_random_negative_amount(self) -> None:
        """Test a negative sample size raises the package error."""
        with pytest.raises(InvalidArgumentException) as exc_info:
            Collection([1, 2, 3]).random(-1)

        assert exc_info.value.requested == -1
        assert exc_info.value.available == 3
        assert 'must not be negative' in str(exc_info.value)

    def test_random_on_empty(self) -> None:
        """Test a single value cannot be drawn from nothing."""
        with pytest.raises(InvalidArgumentException):
            Collection().random()

    def test_invalid_argument_is_value_error(self) -> None:
        """Test callers may catch the builtin base."""
        with pytest.raises(ValueError):
            Collection().random(1)

    def test_combine_length_mismatch(self) -> None:
        """Test combining unequal lengths raises."""
        with pytest.raises(InvalidArgumentException):
            Collection(['a', 'b']).combine([1])
