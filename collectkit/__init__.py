"""Laravel-style collections for Python."""

from collectkit.Support import (
    Arr,
    Collection,
    CollectionException,
    InvalidArgumentException,
    UndefinedIndexWarning,
    collect,
)

__version__ = "1.0.0"

__all__ = [
    "Arr",
    "Collection",
    "CollectionException",
    "InvalidArgumentException",
    "UndefinedIndexWarning",
    "collect",
]
