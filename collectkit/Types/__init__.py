from .JsonTypes import JsonValue, JsonObject, JsonArray, ArrayKey, ArrayItems, ArrayView

__all__ = [
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "ArrayKey",
    "ArrayItems",
    "ArrayView",
]
