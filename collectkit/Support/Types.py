"""
Capability protocols for values a Collection can unwrap or serialize

This module provides:
- Protocol-based interfaces (Arrayable, Jsonable, JsonSerializable)
- A Capability enum naming how a value exposes its contents
- Capability resolution, checked once per unwrap
- Conversion of arbitrary "items" into raw collection storage
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Protocol,
    Sequence,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel

from collectkit.Types.JsonTypes import ArrayItems, JsonValue

T = TypeVar("T")


@runtime_checkable
class Arrayable(Protocol):
    """Protocol for objects that can be converted to arrays."""

    def to_array(self) -> Any:
        """Convert to array representation."""
        ...


@runtime_checkable
class Jsonable(Protocol):
    """Protocol for objects that can be converted to JSON."""

    def to_json(self, **kwargs: Any) -> str:
        """Convert to JSON string."""
        ...


@runtime_checkable
class JsonSerializable(Protocol):
    """Protocol for objects that provide a JSON-ready value."""

    def to_json_value(self) -> JsonValue:
        """Get a value that is ready to be serialized."""
        ...


class Capability(Enum):
    """How a value exposes its contents."""
    RAW = 'raw'
    NESTED = 'nested'
    ARRAYABLE = 'arrayable'
    JSONABLE = 'jsonable'
    JSON_SERIALIZABLE = 'json_serializable'
    MODEL = 'model'


def _is_collection(value: Any) -> bool:
    from collectkit.Support.Collection import Collection
    return isinstance(value, Collection)


def _is_model(value: Any) -> bool:
    return isinstance(value, BaseModel)


def _has_capability(protocol: type) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return not isinstance(value, type) and isinstance(value, protocol)
    return check


_CHECKS: Dict[Capability, Callable[[Any], bool]] = {
    Capability.NESTED: _is_collection,
    Capability.ARRAYABLE: _has_capability(Arrayable),
    Capability.JSONABLE: _has_capability(Jsonable),
    Capability.JSON_SERIALIZABLE: _has_capability(JsonSerializable),
    Capability.MODEL: _is_model,
}

# Preference when unwrapping items into storage
UNWRAP_ORDER = (
    Capability.NESTED,
    Capability.ARRAYABLE,
    Capability.JSONABLE,
    Capability.JSON_SERIALIZABLE,
    Capability.MODEL,
)

# Preference when producing a JSON-ready value
SERIALIZE_ORDER = (
    Capability.NESTED,
    Capability.JSON_SERIALIZABLE,
    Capability.JSONABLE,
    Capability.ARRAYABLE,
    Capability.MODEL,
)

# Preference when producing a plain array view
ARRAY_ORDER = (
    Capability.NESTED,
    Capability.ARRAYABLE,
    Capability.MODEL,
)


def resolve_capability(value: Any, order: Sequence[Capability] = UNWRAP_ORDER) -> Capability:
    """Resolve the first capability in order that the value supports."""
    for capability in order:
        if _CHECKS[capability](value):
            return capability
    return Capability.RAW


def entries(value: Any) -> ArrayItems:
    """Get raw keyed entries of an already-unwrapped value."""
    from collectkit.Support.Arr import Arr

    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {Arr.normalize_key(key): item for key, item in value.items()}
    if isinstance(value, (str, bytes, int, float, bool)):
        return {0: value}
    if isinstance(value, Iterable):
        return dict(enumerate(value))
    if hasattr(value, '__dict__'):
        return {key: item for key, item in vars(value).items() if not key.startswith('_')}
    return {0: value}


def arrayable_items(items: Any) -> ArrayItems:
    """Results array of items from Collection or Arrayable."""
    capability = resolve_capability(items, UNWRAP_ORDER)

    if capability is Capability.NESTED:
        return items.to_dict()
    if capability is Capability.ARRAYABLE:
        return entries(items.to_array())
    if capability is Capability.JSONABLE:
        return entries(json.loads(items.to_json()))
    if capability is Capability.JSON_SERIALIZABLE:
        return entries(items.to_json_value())
    if capability is Capability.MODEL:
        return entries(items.model_dump())

    return entries(items)


def array_value(value: Any) -> Any:
    """Get the array view of a single value, or the value itself."""
    capability = resolve_capability(value, ARRAY_ORDER)

    if capability in (Capability.NESTED, Capability.ARRAYABLE):
        return value.to_array()
    if capability is Capability.MODEL:
        return value.model_dump()

    return value


def serializable_value(value: Any) -> Any:
    """Get the JSON-ready view of a single value, or the value itself."""
    capability = resolve_capability(value, SERIALIZE_ORDER)

    if capability is Capability.NESTED:
        return value.json_serialize()
    if capability is Capability.JSON_SERIALIZABLE:
        return value.to_json_value()
    if capability is Capability.JSONABLE:
        return json.loads(value.to_json())
    if capability is Capability.ARRAYABLE:
        return value.to_array()
    if capability is Capability.MODEL:
        return value.model_dump(mode='json')

    return value
