from __future__ import annotations

from typing import Any, Optional


class CollectionException(Exception):
    """Base exception for collection errors"""
    pass


class InvalidArgumentException(CollectionException, ValueError):
    """Exception raised when an operation receives an argument it cannot honour"""
    
    def __init__(self, message: str, requested: Optional[int] = None, available: Optional[int] = None) -> None:
        self.requested = requested
        self.available = available
        super().__init__(message)
    
    @classmethod
    def too_many_items(cls, requested: int, available: int) -> InvalidArgumentException:
        """Build the error for a sample larger than the collection."""
        return cls(
            f"You requested {requested} items, but there are only {available} items in the collection.",
            requested=requested,
            available=available,
        )
    
    @classmethod
    def negative_amount(cls, requested: int, available: int) -> InvalidArgumentException:
        """Build the error for a negative sample size."""
        return cls(
            f"You requested {requested} items, but the amount of items must not be negative.",
            requested=requested,
            available=available,
        )


class UndefinedIndexWarning(UserWarning):
    """Warning emitted when a missing key is read through offset access"""
    
    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Undefined index: {key}")
