"""Common JSON type definitions for collection serialization.

This module provides reusable type definitions for the JSON-like data
structures produced by Collection.json_serialize() and consumed by
Collection.to_json().
"""

from __future__ import annotations

from typing import Union, Dict, List

# JSON-compatible value types
JsonValue = Union[
    str, 
    int, 
    float, 
    bool, 
    None, 
    List['JsonValue'], 
    Dict[str, 'JsonValue']
]

# Common JSON object structures
JsonObject = Dict[str, JsonValue]
JsonArray = List[JsonValue]

# Collection keys and raw storage
ArrayKey = Union[int, str]
ArrayItems = Dict[ArrayKey, object]

# Either shape a collection converts to
ArrayView = Union[List[object], Dict[ArrayKey, object]]
