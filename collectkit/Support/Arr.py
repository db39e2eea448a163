from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Sequence, Tuple, Union

from collectkit.Support.Exceptions import InvalidArgumentException
from collectkit.Types.JsonTypes import ArrayItems, ArrayKey

_CANONICAL_INT = re.compile(r'^(0|-?[1-9][0-9]*)$')

_MISSING = object()


class Arr:
    """Laravel-style array helper class with dot notation support."""

    @staticmethod
    def normalize_key(key: Any) -> ArrayKey:
        """Cast a key the way associative-array keys are cast."""
        if isinstance(key, bool):
            return int(key)
        if isinstance(key, int):
            return int(key)
        if isinstance(key, float):
            return int(key)
        if key is None:
            return ''
        if isinstance(key, str):
            return int(key) if _CANONICAL_INT.match(key) else key
        raise TypeError(f"Illegal offset type: {type(key).__name__}")

    @staticmethod
    def is_list(items: ArrayItems) -> bool:
        """Determine if the keys are exactly 0..n-1 in order."""
        for position, key in enumerate(items):
            if key != position or not isinstance(key, int):
                return False
        return True

    @staticmethod
    def next_index(items: ArrayItems) -> int:
        """Get the key an appended item would receive."""
        highest = max((key for key in items if isinstance(key, int)), default=-1)
        return max(highest + 1, 0)

    @staticmethod
    def reindex(pairs: Iterable[Tuple[Any, Any]]) -> ArrayItems:
        """Renumber integer (or None) keys from zero, keeping string keys."""
        result: ArrayItems = {}
        position = 0
        for key, value in pairs:
            if key is None or isinstance(key, int):
                result[position] = value
                position += 1
            else:
                result[key] = value
        return result

    @staticmethod
    def accessible(value: Any) -> bool:
        """Determine whether the given value is array accessible."""
        from collectkit.Support.Collection import Collection
        return isinstance(value, (Mapping, list, tuple, Collection))

    @staticmethod
    def values_of(value: Any) -> List[Any]:
        """Get the values of an accessible value, discarding keys."""
        from collectkit.Support.Collection import Collection
        if isinstance(value, Collection):
            return value.to_list()
        if isinstance(value, Mapping):
            return list(value.values())
        return list(value)

    @staticmethod
    def get(target: Any, key: Union[str, int, Sequence[str], None], default: Any = None) -> Any:
        """Get an item from an array or object using dot notation."""
        if key is None:
            return target

        segments = list(key) if isinstance(key, (list, tuple)) else str(key).split('.')

        for segment in segments:
            target = Arr._segment(target, segment)
            if target is _MISSING:
                return default

        return target

    @staticmethod
    def _segment(target: Any, segment: str) -> Any:
        """Resolve one path segment against a mapping, sequence or object."""
        from collectkit.Support.Collection import Collection

        if isinstance(target, Collection):
            target = target.to_dict()

        if isinstance(target, Mapping):
            if segment in target:
                return target[segment]
            normalized = Arr.normalize_key(segment)
            return target[normalized] if normalized in target else _MISSING

        if isinstance(target, (list, tuple)):
            index = Arr.normalize_key(segment)
            if isinstance(index, int) and 0 <= index < len(target):
                return target[index]
            return _MISSING

        if target is None or isinstance(target, (str, bytes, int, float)):
            return _MISSING

        if hasattr(target, '__getitem__'):
            try:
                return target[segment]
            except (KeyError, IndexError, TypeError):
                pass

        if hasattr(target, segment):
            return getattr(target, segment)

        accessor = getattr(target, f"get_{segment}_attribute", None)
        if callable(accessor):
            return accessor()

        return _MISSING

    @staticmethod
    def exists(data: ArrayItems, key: Any) -> bool:
        """Determine if the given key exists in the provided array."""
        return Arr.normalize_key(key) in data

    @staticmethod
    def wrap(value: Any) -> List[Any]:
        """Wrap the given value in an array if it's not already an array."""
        if value is None:
            return []
        if isinstance(value, list):
            return value
        if isinstance(value, tuple):
            return list(value)
        return [value]

    @staticmethod
    def collapse(data: Iterable[Any]) -> List[Any]:
        """Collapse an array of arrays into a single array."""
        result: List[Any] = []
        for item in data:
            if Arr.accessible(item):
                result.extend(Arr.values_of(item))
            else:
                result.append(item)
        return result

    @staticmethod
    def flatten(data: Iterable[Any], depth: Union[int, float] = float('inf')) -> List[Any]:
        """Flatten a multi-dimensional array into a single level."""
        if depth <= 0:
            return list(data)

        result: List[Any] = []
        for item in data:
            if not Arr.accessible(item):
                result.append(item)
            elif depth == 1:
                result.extend(Arr.values_of(item))
            else:
                result.extend(Arr.flatten(Arr.values_of(item), depth - 1))
        return result

    @staticmethod
    def merge(*arrays: ArrayItems) -> ArrayItems:
        """Merge arrays; integer keys are appended, string keys overwrite."""
        result: ArrayItems = {}
        position = 0
        for array in arrays:
            for key, value in array.items():
                if isinstance(key, int):
                    result[position] = value
                    position += 1
                else:
                    result[key] = value
        return result

    @staticmethod
    def slice_bounds(count: int, offset: int, length: Optional[int] = None) -> Tuple[int, int]:
        """Resolve offset/length (negative values count from the end) to start and end positions."""
        if offset < 0:
            offset = max(count + offset, 0)
        offset = min(offset, count)

        if length is None:
            end = count
        elif length < 0:
            end = max(count + length, offset)
        else:
            end = min(offset + length, count)

        return offset, end

    @staticmethod
    def slice(data: ArrayItems, offset: int, length: Optional[int] = None) -> ArrayItems:
        """Slice an array, preserving keys."""
        start, end = Arr.slice_bounds(len(data), offset, length)
        return dict(list(data.items())[start:end])

    @staticmethod
    def except_(data: ArrayItems, keys: Iterable[Any]) -> ArrayItems:
        """Get all of the given array except for a specified array of keys."""
        excluded = {Arr.normalize_key(key) for key in keys}
        return {key: value for key, value in data.items() if key not in excluded}

    @staticmethod
    def only(data: ArrayItems, keys: Iterable[Any]) -> ArrayItems:
        """Get a subset of the items from the given array."""
        wanted = {Arr.normalize_key(key) for key in keys}
        return {key: value for key, value in data.items() if key in wanted}

    @staticmethod
    def prepend(data: ArrayItems, value: Any, key: Any = None) -> ArrayItems:
        """Push an item onto the beginning of an array."""
        if key is None:
            return Arr.merge({0: value}, data)

        key = Arr.normalize_key(key)
        result: ArrayItems = {key: value}
        for existing_key, existing_value in data.items():
            if existing_key != key:
                result[existing_key] = existing_value
        return result

    @staticmethod
    def pluck(data: Iterable[Any], value: Any, key: Any = None) -> ArrayItems:
        """Pluck an array of values from an array."""
        results: ArrayItems = {}

        for position, item in enumerate(data):
            item_value = Arr.get(item, value)

            if key is None:
                results[position] = item_value
            else:
                results[Arr.normalize_key(Arr.get(item, key))] = item_value

        return results

    @staticmethod
    def combine(keys: Sequence[Any], values: Sequence[Any]) -> ArrayItems:
        """Create an array by using one array for keys and another for its values."""
        if len(keys) != len(values):
            raise InvalidArgumentException(
                "Both parameters should have an equal number of elements.",
                requested=len(values),
                available=len(keys),
            )
        return {Arr.normalize_key(key): value for key, value in zip(keys, values)}
