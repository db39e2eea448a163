"""Unit tests for the Arr helper class."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from collectkit import Arr, Collection, InvalidArgumentException


class AccessorModel:
    """Exposes a virtual attribute through an accessor method."""

    def __init__(self) -> None:
        self.name = 'taylor'

    def get_full_name_attribute(self) -> str:
        return f"{self.name} otwell"


class Indexable:
    """Supports subscript access only."""

    def __init__(self, data: Dict[str, Any]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]


class TestArrKeys:
    """Test suite for key normalization and list detection."""

    @pytest.mark.parametrize("key,expected", [
        (True, 1),
        (False, 0),
        (1.9, 1),
        (-1.9, -1),
        (None, ''),
        ('7', 7),
        ('-3', -3),
        ('0', 0),
        ('07', '07'),
        ('+1', '+1'),
        ('1.0', '1.0'),
        (' 1', ' 1'),
        ('-0', '-0'),
        ('name', 'name'),
    ])
    def test_normalize_key(self, key: Any, expected: Any) -> None:
        """Test the key casting table."""
        normalized = Arr.normalize_key(key)

        assert normalized == expected
        assert type(normalized) is type(expected)

    def test_normalize_key_rejects_containers(self) -> None:
        """Test illegal offsets raise TypeError."""
        with pytest.raises(TypeError, match='Illegal offset type'):
            Arr.normalize_key((1, 2))

    def test_is_list(self) -> None:
        """Test list mode detection."""
        assert Arr.is_list({})
        assert Arr.is_list({0: 'a', 1: 'b'})
        assert not Arr.is_list({1: 'a', 0: 'b'})
        assert not Arr.is_list({0: 'a', 2: 'b'})
        assert not Arr.is_list({'a': 1})

    def test_next_index(self) -> None:
        """Test the append key is one past the highest integer key."""
        assert Arr.next_index({}) == 0
        assert Arr.next_index({'a': 1}) == 0
        assert Arr.next_index({3: 'a', 1: 'b'}) == 4
        assert Arr.next_index({-5: 'a'}) == 0


class TestArrGet:
    """Test suite for dot-path lookup."""

    def test_get_from_nested_mappings(self) -> None:
        """Test nested dict access."""
        data = {'products': {'desk': {'price': 100}}}

        assert Arr.get(data, 'products.desk.price') == 100
        assert Arr.get(data, 'products.chair.price', 'none') == 'none'
        assert Arr.get(data, None) is data

    def test_get_from_lists(self) -> None:
        """Test numeric segments index into lists."""
        data = {'users': [{'name': 'a'}, {'name': 'b'}]}

        assert Arr.get(data, 'users.1.name') == 'b'
        assert Arr.get(data, 'users.5.name') is None
        assert Arr.get(['x', 'y'], 1) == 'y'

    def test_get_from_objects(self) -> None:
        """Test attributes, accessors and subscriptable objects."""
        assert Arr.get(AccessorModel(), 'name') == 'taylor'
        assert Arr.get(AccessorModel(), 'full_name') == 'taylor otwell'
        assert Arr.get(Indexable({'a': {'b': 1}}), 'a.b') == 1
        assert Arr.get(Indexable({}), 'missing', 'default') == 'default'

    def test_get_from_collection(self) -> None:
        """Test collections are traversed by key."""
        assert Arr.get(Collection({'a': Collection([1, 2])}), 'a.1') == 2

    def test_get_keeps_none_values(self) -> None:
        """Test a present None is returned rather than the default."""
        assert Arr.get({'a': None}, 'a', 'default') is None

    def test_get_through_scalars_is_missing(self) -> None:
        """Test paths cannot descend into scalars."""
        assert Arr.get({'a': 'text'}, 'a.b', 'default') == 'default'

    def test_get_with_integer_keyed_mapping(self) -> None:
        """Test numeric segments match integer keys."""
        assert Arr.get({1: {'x': 'y'}}, '1.x') == 'y'


class TestArrHelpers:
    """Test suite for the structural helpers."""

    def test_wrap(self) -> None:
        """Test wrapping values in a list."""
        assert Arr.wrap(None) == []
        assert Arr.wrap('a') == ['a']
        assert Arr.wrap(['a']) == ['a']
        assert Arr.wrap(('a', 'b')) == ['a', 'b']

    def test_merge(self) -> None:
        """Test integer keys append and string keys overwrite."""
        assert Arr.merge({0: 'a', 'k': 1}, {0: 'b', 'k': 2}) == {0: 'a', 'k': 2, 1: 'b'}

    def test_reindex(self) -> None:
        """Test integer and None keys are renumbered."""
        assert Arr.reindex([(5, 'a'), ('k', 'b'), (None, 'c')]) == {0: 'a', 'k': 'b', 1: 'c'}

    @pytest.mark.parametrize("offset,length,expected", [
        (0, None, (0, 5)),
        (2, 2, (2, 4)),
        (-2, None, (3, 5)),
        (1, -1, (1, 4)),
        (10, None, (5, 5)),
        (-10, 2, (0, 2)),
        (3, -4, (3, 3)),
    ])
    def test_slice_bounds(self, offset: int, length: Any, expected: Any) -> None:
        """Test offset and length resolution."""
        assert Arr.slice_bounds(5, offset, length) == expected

    def test_except_and_only(self) -> None:
        """Test key subsets."""
        data = {'a': 1, 'b': 2, 0: 3}

        assert Arr.except_(data, ['a', '0']) == {'b': 2}
        assert Arr.only(data, ['a', 'z']) == {'a': 1}

    def test_prepend(self) -> None:
        """Test prepend with and without a key."""
        assert Arr.prepend({0: 'b', 'k': 'c'}, 'a') == {0: 'a', 1: 'b', 'k': 'c'}
        assert list(Arr.prepend({'k': 'c'}, 'a', 'z')) == ['z', 'k']

    def test_pluck(self) -> None:
        """Test pluck with a key path."""
        rows = [{'id': '1', 'name': 'a'}, {'id': '2', 'name': 'b'}]

        assert Arr.pluck(rows, 'name') == {0: 'a', 1: 'b'}
        assert Arr.pluck(rows, 'name', 'id') == {1: 'a', 2: 'b'}

    def test_combine(self) -> None:
        """Test combining keys and values."""
        assert Arr.combine(['a', '1'], [1, 2]) == {'a': 1, 1: 2}

        with pytest.raises(InvalidArgumentException, match='equal number of elements'):
            Arr.combine(['a'], [])

    def test_collapse_and_flatten(self) -> None:
        """Test one level and full flattening."""
        assert Arr.collapse([[1], (2, 3), 4]) == [1, 2, 3, 4]
        assert Arr.flatten([[1, [2, [3]]]], 1) == [1, [2, [3]]]
        assert Arr.flatten([[1, [2, [3]]]]) == [1, 2, 3]
