from .Arr import Arr
from .Collection import Collection, collect
from .Comparison import ComparisonOperator, loose_compare, loose_equals, strict_equals
from .Exceptions import CollectionException, InvalidArgumentException, UndefinedIndexWarning
from .Types import Arrayable, Capability, Jsonable, JsonSerializable, resolve_capability

__all__ = [
    "Arr",
    "Collection",
    "collect",
    "ComparisonOperator",
    "loose_compare",
    "loose_equals",
    "strict_equals",
    "CollectionException",
    "InvalidArgumentException",
    "UndefinedIndexWarning",
    "Arrayable",
    "Capability",
    "Jsonable",
    "JsonSerializable",
    "resolve_capability",
]
