from __future__ import annotations

import inspect
import json
import random
import warnings
from collections.abc import Mapping
from functools import cmp_to_key, reduce
from itertools import zip_longest
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, Union
from typing_extensions import TypeAlias

from collectkit.Support.Arr import Arr
from collectkit.Support.Comparison import (
    ComparisonOperator,
    is_truthy,
    loose_compare,
    loose_equals,
    strict_equals,
    to_number,
    to_string,
)
from collectkit.Support.Exceptions import InvalidArgumentException, UndefinedIndexWarning
from collectkit.Support.Types import T, array_value, arrayable_items, serializable_value
from collectkit.Types.JsonTypes import ArrayItems, ArrayKey, ArrayView, JsonValue
from collectkit.Utils.Logger import get_logger
from collectkit.config.collection import get_collection_settings

logger = get_logger(__name__)

_MISSING: Any = object()

_random = random.Random(get_collection_settings().random_seed)

Retriever: TypeAlias = Callable[..., Any]


def _accepted_arguments(callback: Callable[..., Any]) -> Optional[int]:
    """Count the positional arguments a callback takes; None means any number."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _adapt(callback: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a callback so it only receives the (value, key) arguments it declares."""
    accepted = _accepted_arguments(callback)
    if accepted is None:
        return callback

    def invoke(*arguments: Any) -> Any:
        return callback(*arguments[:accepted])

    return invoke


def _use_as_callable(value: Any) -> bool:
    """Determine if the given value is callable, but not a string."""
    return not isinstance(value, str) and callable(value)


def _value_retriever(value: Any) -> Retriever:
    """Get a value retrieving callback."""
    if _use_as_callable(value):
        return _adapt(value)
    return lambda item, *_: Arr.get(item, value)


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def _shape(items: ArrayItems) -> ArrayView:
    """Present storage as a list in list mode, otherwise as a dict."""
    if Arr.is_list(items):
        return list(items.values())
    return dict(items)


def _serialize(value: Any) -> Any:
    value = serializable_value(value)
    if isinstance(value, Mapping):
        return _shape({key: _serialize(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


def _string_keys(value: Any) -> Any:
    """Convert integer mapping keys to strings, recursively."""
    if isinstance(value, Mapping):
        return {
            str(key) if isinstance(key, int) and not isinstance(key, bool) else key: _string_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value


class Collection(Generic[T]):
    """Laravel-style collection over an ordered mapping of keys to values."""

    def __init__(self, items: Any = None):
        self._items: ArrayItems = arrayable_items(items)
        self._next_index: Optional[int] = None

    @classmethod
    def make(cls, items: Any = None) -> 'Collection[Any]':
        """Create a new collection instance."""
        return cls(items)

    @classmethod
    def wrap(cls, value: Any) -> 'Collection[Any]':
        """Wrap a value in a collection if it's not already one."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (list, tuple, Mapping)):
            return cls(value)
        return cls(Arr.wrap(value))

    @classmethod
    def times(cls, number: int, callback: Optional[Callable[[int], Any]] = None) -> 'Collection[Any]':
        """Create a collection by invoking callback a given number of times."""
        if number < 1:
            return cls()
        numbers = cls(list(range(1, number + 1)))
        if callback is None:
            return numbers
        return numbers.map(callback)

    # Core methods
    def all(self) -> ArrayView:
        """Get all items as a list (list mode) or a dict."""
        return _shape(self._items)

    def to_dict(self) -> ArrayItems:
        """Get a copy of the keyed items."""
        return dict(self._items)

    def to_list(self) -> List[T]:
        """Get the values as a list."""
        return list(self._items.values())

    def items(self) -> Iterator[Tuple[ArrayKey, T]]:
        """Iterate over (key, value) pairs."""
        return iter(list(self._items.items()))

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._items) == 0

    def is_not_empty(self) -> bool:
        """Check if the collection is not empty."""
        return not self.is_empty()

    def keys(self) -> 'Collection[ArrayKey]':
        """Get the keys of the collection items."""
        return self.__class__(list(self._items.keys()))

    def values(self) -> 'Collection[T]':
        """Reset the keys on the underlying array."""
        return self.__class__(list(self._items.values()))

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item from the collection by key."""
        key = Arr.normalize_key(key)
        if key in self._items:
            return self._items[key]
        return default

    def has(self, key: Any) -> bool:
        """Determine if an item exists in the collection by key."""
        return self.offset_exists(key)

    # Adding/Removing items
    def push(self, *values: T) -> 'Collection[T]':
        """Add items to the end of the collection."""
        for value in values:
            self.offset_set(None, value)
        return self

    def put(self, key: Any, value: T) -> 'Collection[T]':
        """Put an item in the collection by key."""
        self.offset_set(key, value)
        return self

    def prepend(self, value: T, key: Any = None) -> 'Collection[T]':
        """Push an item onto the beginning of the collection."""
        self._replace(Arr.prepend(self._items, value, key))
        return self

    def pop(self) -> Optional[T]:
        """Get and remove the last item from the collection."""
        if not self._items:
            return None
        return self._remove(next(reversed(self._items)))

    def shift(self) -> Optional[T]:
        """Get and remove the first item from the collection."""
        if not self._items:
            return None
        return self._remove(next(iter(self._items)))

    def pull(self, key: Any, default: Any = None) -> Any:
        """Get and remove an item from the collection."""
        return self._remove(Arr.normalize_key(key), default)

    def forget(self, keys: Any) -> 'Collection[T]':
        """Remove an item from the collection by key."""
        for key in Arr.wrap(keys):
            self._remove(Arr.normalize_key(key))
        return self

    def splice(self, offset: int, length: Optional[int] = None, replacement: Any = None) -> 'Collection[T]':
        """Splice a portion of the underlying collection array."""
        pairs = list(self._items.items())
        start, end = Arr.slice_bounds(len(pairs), offset, length)
        removed = [value for _, value in pairs[start:end]]
        inserted = [(None, value) for value in arrayable_items(replacement).values()]

        self._replace(Arr.reindex(pairs[:start] + inserted + pairs[end:]))
        return self.__class__(removed)

    def transform(self, callback: Callable[..., T]) -> 'Collection[T]':
        """Transform each item in the collection using a callback."""
        self._replace(self.map(callback)._items)
        return self

    # Offset access
    def offset_exists(self, key: Any) -> bool:
        """Determine if an item exists at an offset."""
        return Arr.exists(self._items, key)

    def offset_get(self, key: Any) -> Optional[T]:
        """Get an item at a given offset; a missing offset warns and yields None."""
        normalized = Arr.normalize_key(key)
        if normalized in self._items:
            return self._items[normalized]

        logger.debug("Undefined index read", {'key': repr(key)})
        warnings.warn(UndefinedIndexWarning(key), stacklevel=3)
        return None

    def offset_set(self, key: Any, value: T) -> None:
        """Set the item at a given offset; a None offset appends."""
        if key is None:
            if self._next_index is None:
                self._next_index = Arr.next_index(self._items)
            key = self._next_index
        else:
            key = Arr.normalize_key(key)

        self._items[key] = value
        if self._next_index is not None and isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1

    def offset_unset(self, key: Any) -> None:
        """Unset the item at a given offset."""
        self._remove(Arr.normalize_key(key))

    def _replace(self, items: ArrayItems) -> None:
        """Swap in new storage; the append index is recomputed on next use."""
        self._items = items
        self._next_index = None

    def _remove(self, key: ArrayKey, default: Any = None) -> Any:
        """Remove a normalized key; the append index is recomputed on next use."""
        self._next_index = None
        return self._items.pop(key, default)

    # Filtering and searching
    def filter(self, callback: Optional[Callable[..., Any]] = None) -> 'Collection[T]':
        """Run a filter over each of the items."""
        if callback is None:
            return self.__class__({key: value for key, value in self._items.items() if is_truthy(value)})

        callback = _adapt(callback)
        return self.__class__({
            key: value for key, value in self._items.items() if is_truthy(callback(value, key))
        })

    def reject(self, callback: Any) -> 'Collection[T]':
        """Create a collection of all elements that do not pass a given truth test."""
        if _use_as_callable(callback):
            callback = _adapt(callback)
            return self.filter(lambda value, key: not is_truthy(callback(value, key)))

        return self.filter(lambda value: not loose_equals(value, callback))

    def where(self, key: Any, operator: Any = _MISSING, value: Any = _MISSING) -> 'Collection[T]':
        """Filter items by the given key value pair."""
        if operator is _MISSING:
            return self.filter(lambda item: is_truthy(Arr.get(item, key)))

        if value is _MISSING:
            value = operator
            operator = '='

        comparison = ComparisonOperator.from_symbol(operator)
        return self.filter(lambda item: comparison.evaluate(Arr.get(item, key), value))

    def where_strict(self, key: Any, value: Any) -> 'Collection[T]':
        """Filter items by the given key value pair using strict comparison."""
        return self.where(key, '===', value)

    def where_in(self, key: Any, values: Any, strict: bool = False) -> 'Collection[T]':
        """Filter items by the given key value pair."""
        candidates = list(arrayable_items(values).values())
        equals = strict_equals if strict else loose_equals

        return self.filter(
            lambda item: any(equals(Arr.get(item, key), candidate) for candidate in candidates)
        )

    def where_in_strict(self, key: Any, values: Any) -> 'Collection[T]':
        """Filter items by the given key value pair using strict comparison."""
        return self.where_in(key, values, True)

    def first(self, callback: Optional[Callable[..., Any]] = None, default: Any = None) -> Any:
        """Get the first item from the collection."""
        if callback is None:
            return next(iter(self._items.values()), default)

        callback = _adapt(callback)
        for key, value in self._items.items():
            if is_truthy(callback(value, key)):
                return value
        return default

    def last(self, callback: Optional[Callable[..., Any]] = None, default: Any = None) -> Any:
        """Get the last item from the collection."""
        if callback is None:
            return next(reversed(self._items.values()), default)

        callback = _adapt(callback)
        for key, value in reversed(self._items.items()):
            if is_truthy(callback(value, key)):
                return value
        return default

    def contains(self, key: Any, value: Any = _MISSING) -> bool:
        """Determine if an item exists in the collection."""
        if value is not _MISSING:
            return self.contains(lambda item: loose_equals(Arr.get(item, key), value))

        if _use_as_callable(key):
            callback = _adapt(key)
            return any(is_truthy(callback(item, k)) for k, item in self._items.items())

        return any(loose_equals(item, key) for item in self._items.values())

    def contains_strict(self, key: Any, value: Any = _MISSING) -> bool:
        """Determine if an item exists in the collection using strict comparison."""
        if value is not _MISSING:
            return self.contains(lambda item: strict_equals(Arr.get(item, key), value))

        if _use_as_callable(key):
            return self.contains(key)

        return any(strict_equals(item, key) for item in self._items.values())

    def search(self, value: Any, strict: bool = False) -> Union[ArrayKey, bool]:
        """Search the collection for a given value and return the corresponding key if successful."""
        if not _use_as_callable(value):
            equals = strict_equals if strict else loose_equals
            for key, item in self._items.items():
                if equals(item, value):
                    return key
            return False

        callback = _adapt(value)
        for key, item in self._items.items():
            if is_truthy(callback(item, key)):
                return key
        return False

    def partition(self, callback: Any) -> 'Collection[Collection[T]]':
        """Partition the collection into two arrays using the given callback or key."""
        retriever = _value_retriever(callback)
        passed: ArrayItems = {}
        failed: ArrayItems = {}

        for key, item in self._items.items():
            if is_truthy(retriever(item, key)):
                passed[key] = item
            else:
                failed[key] = item

        return self.__class__([self.__class__(passed), self.__class__(failed)])

    def every(self, step: int, offset: int = 0) -> 'Collection[T]':
        """Create a new collection consisting of every n-th element."""
        result: ArrayItems = {}
        for position, (key, item) in enumerate(self._items.items()):
            if position % step == offset:
                result[key] = item
        return self.__class__(result)

    def each(self, callback: Callable[..., Any]) -> 'Collection[T]':
        """Execute a callback over each item; returning False stops the loop."""
        callback = _adapt(callback)
        for key, item in list(self._items.items()):
            if callback(item, key) is False:
                break
        return self

    def pipe(self, callback: Callable[['Collection[T]'], Any]) -> Any:
        """Pass the collection to the given callback and return the result."""
        return callback(self)

    # Transforming
    def map(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Run a map over each of the items."""
        callback = _adapt(callback)
        return self.__class__({key: callback(value, key) for key, value in self._items.items()})

    def map_with_keys(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Run an associative map over each of the items."""
        callback = _adapt(callback)
        result: ArrayItems = {}

        for key, value in self._items.items():
            assoc = callback(value, key)
            if isinstance(assoc, tuple) and len(assoc) == 2:
                pairs: Iterable[Tuple[Any, Any]] = [assoc]
            else:
                pairs = arrayable_items(assoc).items()

            for map_key, map_value in pairs:
                result[Arr.normalize_key(map_key)] = map_value

        return self.__class__(result)

    def flat_map(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Map a collection and flatten the result by a single level."""
        return self.map(callback).collapse()

    def collapse(self) -> 'Collection[Any]':
        """Collapse the collection of items into a single array."""
        return self.__class__(Arr.collapse(self._items.values()))

    def flatten(self, depth: Union[int, float] = float('inf')) -> 'Collection[Any]':
        """Get a flattened array of the items in the collection."""
        return self.__class__(Arr.flatten(self._items.values(), depth))

    def flip(self) -> 'Collection[ArrayKey]':
        """Flip the items in the collection."""
        return self.__class__({Arr.normalize_key(value): key for key, value in self._items.items()})

    def group_by(self, group_by: Any, preserve_keys: bool = False) -> 'Collection[Collection[T]]':
        """Group an associative array by a field or using a callback."""
        retriever = _value_retriever(group_by)
        results: Dict[ArrayKey, Collection[T]] = {}

        for key, value in self._items.items():
            group_keys = retriever(value, key)
            if Arr.accessible(group_keys):
                group_keys = Arr.values_of(group_keys)
            else:
                group_keys = [group_keys]

            for group_key in group_keys:
                group_key = Arr.normalize_key(group_key)
                if group_key not in results:
                    results[group_key] = self.__class__()
                results[group_key].offset_set(key if preserve_keys else None, value)

        return self.__class__(results)

    def key_by(self, key_by: Any) -> 'Collection[T]':
        """Key an associative array by a field or using a callback."""
        retriever = _value_retriever(key_by)
        results: ArrayItems = {}

        for key, item in self._items.items():
            results[Arr.normalize_key(retriever(item, key))] = item

        return self.__class__(results)

    def pluck(self, value: Any, key: Any = None) -> 'Collection[Any]':
        """Get the values of a given key."""
        return self.__class__(Arr.pluck(self._items.values(), value, key))

    def implode(self, value: Any = None, glue: Optional[str] = None) -> str:
        """Concatenate values of a given key as a string."""
        first = self.first()

        if not _is_scalar(first):
            return (glue or '').join(to_string(item) for item in self.pluck(value))

        return (value or '').join(to_string(item) for item in self._items.values())

    def combine(self, values: Any) -> 'Collection[Any]':
        """Create a collection by using this collection for keys and another for its values."""
        return self.__class__(Arr.combine(self.to_list(), list(arrayable_items(values).values())))

    def zip(self, *items: Any) -> 'Collection[Collection[Any]]':
        """Zip the collection together with one or more arrays."""
        arrays = [list(arrayable_items(item).values()) for item in items]
        rows = zip_longest(self.to_list(), *arrays, fillvalue=None)
        return self.__class__([self.__class__(list(row)) for row in rows])

    # Sorting
    def sort(self, callback: Optional[Callable[[Any, Any], int]] = None) -> 'Collection[T]':
        """Sort through each item with a callback."""
        compare = callback if callback is not None else loose_compare
        ordered = sorted(self._items.items(), key=cmp_to_key(lambda a, b: compare(a[1], b[1])))
        return self.__class__(dict(ordered))

    def sort_by(self, callback: Any, descending: bool = False) -> 'Collection[T]':
        """Sort the collection using the given callback."""
        retriever = _value_retriever(callback)
        results = [(key, retriever(value, key)) for key, value in self._items.items()]

        results.sort(key=cmp_to_key(lambda a, b: loose_compare(a[1], b[1])), reverse=descending)

        return self.__class__({key: self._items[key] for key, _ in results})

    def sort_by_desc(self, callback: Any) -> 'Collection[T]':
        """Sort the collection in descending order using the given callback."""
        return self.sort_by(callback, True)

    def reverse(self) -> 'Collection[T]':
        """Reverse items order."""
        return self.__class__(dict(reversed(self._items.items())))

    # Set operations
    def merge(self, items: Any) -> 'Collection[Any]':
        """Merge the collection with the given items."""
        return self.__class__(Arr.merge(self._items, arrayable_items(items)))

    def union(self, items: Any) -> 'Collection[Any]':
        """Union the collection with the given items."""
        result = dict(self._items)
        for key, value in arrayable_items(items).items():
            result.setdefault(key, value)
        return self.__class__(result)

    def diff(self, items: Any) -> 'Collection[T]':
        """Get the items in the collection that are not present in the given items."""
        others = list(arrayable_items(items).values())
        return self.filter(lambda value: not any(loose_equals(value, other) for other in others))

    def diff_keys(self, items: Any) -> 'Collection[T]':
        """Get the items in the collection whose keys are not present in the given items."""
        other_keys = list(arrayable_items(items).keys())
        return self.filter(lambda value, key: not any(loose_equals(key, other) for other in other_keys))

    def intersect(self, items: Any) -> 'Collection[T]':
        """Intersect the collection with the given items."""
        others = list(arrayable_items(items).values())
        return self.filter(lambda value: any(loose_equals(value, other) for other in others))

    def unique(self, key: Any = None, strict: bool = False) -> 'Collection[T]':
        """Return only unique items from the collection array."""
        retriever = _value_retriever(key) if key is not None else (lambda item, *_: item)
        equals = strict_equals if strict else loose_equals
        seen: List[Any] = []
        result: ArrayItems = {}

        for item_key, item in self._items.items():
            identity = retriever(item, item_key)
            if any(equals(identity, existing) for existing in seen):
                continue
            seen.append(identity)
            result[item_key] = item

        return self.__class__(result)

    def unique_strict(self, key: Any = None) -> 'Collection[T]':
        """Return only unique items from the collection array using strict comparison."""
        return self.unique(key, True)

    def except_(self, *keys: Any) -> 'Collection[T]':
        """Get all items except for those with the specified keys."""
        return self.__class__(Arr.except_(self._items, self._key_list(keys)))

    def only(self, *keys: Any) -> 'Collection[T]':
        """Get the items with the specified keys."""
        if keys == (None,) or not keys:
            return self.__class__(self._items)
        return self.__class__(Arr.only(self._items, self._key_list(keys)))

    def _key_list(self, keys: Tuple[Any, ...]) -> List[Any]:
        """Accept either one list of keys or several positional keys."""
        if len(keys) == 1 and isinstance(keys[0], (list, tuple, Collection)):
            return list(keys[0])
        return list(keys)

    # Aggregating
    def reduce(self, callback: Callable[[Any, T], Any], initial: Any = _MISSING) -> Any:
        """Reduce the collection to a single value."""
        values = self.to_list()
        if initial is _MISSING:
            if not values:
                return None
            return reduce(callback, values)
        return reduce(callback, values, initial)

    def sum(self, callback: Any = None) -> Union[int, float]:
        """Get the sum of the given values."""
        if callback is None:
            return sum(to_number(value) for value in self._items.values())

        retriever = _value_retriever(callback)
        return sum(to_number(retriever(item, key)) for key, item in self._items.items())

    def avg(self, callback: Any = None) -> Optional[Union[int, float]]:
        """Get the average value of a given key."""
        count = self.count()
        if count:
            return self.sum(callback) / count
        return None

    def average(self, callback: Any = None) -> Optional[Union[int, float]]:
        """Alias for the "avg" method."""
        return self.avg(callback)

    def max(self, callback: Any = None) -> Any:
        """Get the max value of a given key."""
        return self._extremum(callback, 1)

    def min(self, callback: Any = None) -> Any:
        """Get the min value of a given key."""
        return self._extremum(callback, -1)

    def _extremum(self, callback: Any, direction: int) -> Any:
        retriever = _value_retriever(callback) if callback is not None else (lambda item, *_: item)
        result = None

        for key, item in self._items.items():
            value = retriever(item, key)
            if value is None:
                continue
            if result is None or loose_compare(value, result) == direction:
                result = value

        return result

    def median(self, key: Any = None) -> Optional[Union[int, float]]:
        """Get the median of a given key."""
        values = self._extract(key).filter(lambda item: item is not None).sort().to_list()
        count = len(values)

        if count == 0:
            return None

        middle = count // 2
        if count % 2:
            return values[middle]

        return (to_number(values[middle - 1]) + to_number(values[middle])) / 2

    def mode(self, key: Any = None) -> Optional[List[Any]]:
        """Get the mode of a given key."""
        if self.is_empty():
            return None

        counts: List[List[Any]] = []
        for value in self._extract(key):
            for entry in counts:
                if loose_equals(entry[0], value):
                    entry[1] += 1
                    break
            else:
                counts.append([value, 1])

        highest = max(count for _, count in counts)
        return [value for value, count in counts if count == highest]

    def _extract(self, key: Any) -> 'Collection[Any]':
        """Get the per-entry values a dot-path or callback resolves to."""
        if key is None:
            return self
        return self.map(_value_retriever(key)).values()

    # Slicing and taking
    def chunk(self, size: int) -> 'Collection[Collection[T]]':
        """Chunk the underlying collection array."""
        if size <= 0:
            return self.__class__()

        pairs = list(self._items.items())
        chunks = [self.__class__(dict(pairs[i:i + size])) for i in range(0, len(pairs), size)]
        return self.__class__(chunks)

    def split(self, number_of_groups: int) -> 'Collection[Collection[T]]':
        """Split a collection into a certain number of groups."""
        if number_of_groups <= 0 or self.is_empty():
            return self.__class__()

        pairs = list(self._items.items())
        group_size, remainder = divmod(len(pairs), number_of_groups)

        groups = []
        start = 0
        for i in range(number_of_groups):
            current_size = group_size + (1 if i < remainder else 0)
            if current_size == 0:
                break
            groups.append(self.__class__(dict(pairs[start:start + current_size])))
            start += current_size

        return self.__class__(groups)

    def slice(self, offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """Slice the underlying collection array."""
        return self.__class__(Arr.slice(self._items, offset, length))

    def take(self, limit: int) -> 'Collection[T]':
        """Take the first or last {limit} items."""
        if limit < 0:
            return self.slice(limit, abs(limit))
        return self.slice(0, limit)

    def for_page(self, page: int, per_page: int) -> 'Collection[T]':
        """"Paginate" the collection by slicing it into a smaller collection."""
        return self.slice((page - 1) * per_page, per_page).values()

    def random(self, amount: Optional[int] = None) -> Any:
        """Get one or a specified number of items randomly from the collection."""
        requested = 1 if amount is None else amount
        count = self.count()

        if requested < 0:
            logger.warning("Negative random sample size", {'requested': requested, 'available': count})
            raise InvalidArgumentException.negative_amount(requested, count)

        if requested > count:
            logger.warning("Random sample larger than collection", {'requested': requested, 'available': count})
            raise InvalidArgumentException.too_many_items(requested, count)

        values = self.to_list()
        if amount is None:
            return _random.choice(values)

        return self.__class__(_random.sample(values, amount))

    # Serialization
    def to_array(self) -> ArrayView:
        """Get the collection of items as a plain array."""
        return _shape({key: array_value(value) for key, value in self._items.items()})

    def json_serialize(self) -> ArrayView:
        """Convert the object into something JSON serializable."""
        return _shape({key: _serialize(value) for key, value in self._items.items()})

    def to_json_value(self) -> JsonValue:
        """Get the JSON-ready value of the collection."""
        return self.json_serialize()

    def to_json(self, **options: Any) -> str:
        """Get the collection of items as JSON."""
        arguments: Dict[str, Any] = get_collection_settings().json_options()
        arguments.update(options)

        payload = self.json_serialize()
        if arguments.get('sort_keys'):
            payload = _string_keys(payload)
        return json.dumps(payload, **arguments)

    # Magic methods
    def __iter__(self) -> Iterator[T]:
        """Iterate over values."""
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        """Get length."""
        return len(self._items)

    def __getitem__(self, key: Any) -> Any:
        """Get item by key, or a key-preserving slice."""
        if isinstance(key, slice):
            return self.__class__(dict(list(self._items.items())[key]))
        return self.offset_get(key)

    def __setitem__(self, key: Any, value: T) -> None:
        """Set item by key; a None key appends."""
        self.offset_set(key, value)

    def __delitem__(self, key: Any) -> None:
        """Unset item by key."""
        self.offset_unset(key)

    def __contains__(self, key: Any) -> bool:
        """Check if a key exists in the collection."""
        return self.offset_exists(key)

    def __bool__(self) -> bool:
        """Check if collection is not empty."""
        return not self.is_empty()

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}({self.all()!r})"

    def __str__(self) -> str:
        """JSON representation."""
        return self.to_json()


# Helper function
def collect(items: Any = None) -> Collection[Any]:
    """Create a collection instance."""
    return Collection.make(items)
