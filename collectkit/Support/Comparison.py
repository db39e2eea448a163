"""
Value comparison and coercion rules

Collections compare values the way a dynamically typed host language does:
- Loose equality coerces numeric strings to numbers before comparing
- Strict equality additionally requires matching types
- Ordering falls back to lexical comparison for non-numeric strings
- Truthiness treats '', '0', 0, None and empty containers as false

Every rule lives here so that filtering, searching, sorting and
de-duplication share one coercion table.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Tuple, Union
from typing_extensions import TypeAlias

Number: TypeAlias = Union[int, float]

_NUMERIC_PATTERN = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
_LEADING_NUMERIC_PATTERN = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')
_INTEGER_PATTERN = re.compile(r'^\s*[+-]?\d+\s*$')

_SCALAR_TYPES = (type(None), bool, int, float, str)


class ComparisonOperator(Enum):
    """Operators understood by where() style filters."""
    LOOSE_EQ = '=='
    STRICT_EQ = '==='
    LOOSE_NEQ = '!='
    STRICT_NEQ = '!=='
    LT = '<'
    GT = '>'
    LE = '<='
    GE = '>='

    @classmethod
    def from_symbol(cls, symbol: Any) -> ComparisonOperator:
        """Resolve an operator symbol; anything unrecognised means loose equality."""
        if isinstance(symbol, cls):
            return symbol
        if symbol == '=':
            return cls.LOOSE_EQ
        if symbol == '<>':
            return cls.LOOSE_NEQ
        for member in cls:
            if member.value == symbol:
                return member
        return cls.LOOSE_EQ

    def evaluate(self, left: Any, right: Any) -> bool:
        """Apply the operator to two values."""
        if self is ComparisonOperator.LOOSE_EQ:
            return loose_equals(left, right)
        if self is ComparisonOperator.STRICT_EQ:
            return strict_equals(left, right)
        if self is ComparisonOperator.LOOSE_NEQ:
            return not loose_equals(left, right)
        if self is ComparisonOperator.STRICT_NEQ:
            return not strict_equals(left, right)

        result = loose_compare(left, right)
        if self is ComparisonOperator.LT:
            return result < 0
        if self is ComparisonOperator.GT:
            return result > 0
        if self is ComparisonOperator.LE:
            return result <= 0
        return result >= 0


def is_number(value: Any) -> bool:
    """Determine if the value is an int or float (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """Determine if the value is a number or a string that fully parses as one."""
    if is_number(value):
        return True
    return isinstance(value, str) and _NUMERIC_PATTERN.match(value) is not None


def _parse_number(text: str) -> Number:
    if _INTEGER_PATTERN.match(text):
        return int(text)
    return float(text)


def to_number(value: Any) -> Number:
    """Coerce a value to a number for arithmetic."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, str):
        match = _LEADING_NUMERIC_PATTERN.match(value)
        if match is None:
            return 0
        return _parse_number(match.group(0))
    raise TypeError(f"Unsupported operand type for arithmetic: {type(value).__name__}")


def to_string(value: Any) -> str:
    """Convert a scalar to its string form (None -> '', True -> '1', False -> '')."""
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)


def is_truthy(value: Any) -> bool:
    """Truthiness with '0' treated as false."""
    if isinstance(value, str):
        return value not in ('', '0')
    return bool(value)


def _is_array(value: Any) -> bool:
    from collectkit.Support.Collection import Collection
    return isinstance(value, (list, tuple, Mapping, Collection))


def _array_pairs(value: Any) -> List[Tuple[Any, Any]]:
    from collectkit.Support.Collection import Collection
    if isinstance(value, Collection):
        return list(value.items())
    if isinstance(value, Mapping):
        return list(value.items())
    return list(enumerate(value))


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def loose_equals(left: Any, right: Any) -> bool:
    """Equality with type coercion."""
    if left is None or right is None:
        if left is None and right is None:
            return True
        other = right if left is None else left
        if isinstance(other, str):
            return other == ''
        return not is_truthy(other)

    if isinstance(left, bool) or isinstance(right, bool):
        return is_truthy(left) == is_truthy(right)

    if is_number(left) and is_number(right):
        return left == right

    if is_number(left) and isinstance(right, str):
        return left == to_number(right) if is_numeric(right) else to_string(left) == right

    if isinstance(left, str) and is_number(right):
        return to_number(left) == right if is_numeric(left) else left == to_string(right)

    if isinstance(left, str) and isinstance(right, str):
        if is_numeric(left) and is_numeric(right):
            return to_number(left) == to_number(right)
        return left == right

    if _is_array(left) and _is_array(right):
        left_items: Dict[Any, Any] = dict(_array_pairs(left))
        right_items: Dict[Any, Any] = dict(_array_pairs(right))
        if len(left_items) != len(right_items):
            return False
        for key, value in left_items.items():
            if key not in right_items or not loose_equals(value, right_items[key]):
                return False
        return True

    if _is_array(left) or _is_array(right):
        return False

    return bool(left == right)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that also requires matching types; objects compare by identity."""
    if isinstance(left, _SCALAR_TYPES) and isinstance(right, _SCALAR_TYPES):
        return type(left) is type(right) and left == right

    if isinstance(left, (list, tuple, dict)) and isinstance(right, (list, tuple, dict)):
        left_pairs = _array_pairs(left)
        right_pairs = _array_pairs(right)
        if len(left_pairs) != len(right_pairs):
            return False
        return all(
            strict_equals(lk, rk) and strict_equals(lv, rv)
            for (lk, lv), (rk, rv) in zip(left_pairs, right_pairs)
        )

    return left is right


def loose_compare(left: Any, right: Any) -> int:
    """Three-way comparison with type coercion; returns -1, 0 or 1."""
    if left is None and right is None:
        return 0
    if left is None and isinstance(right, str):
        return _sign('', right)
    if right is None and isinstance(left, str):
        return _sign(left, '')

    if left is None or right is None or isinstance(left, bool) or isinstance(right, bool):
        return _sign(int(is_truthy(left)), int(is_truthy(right)))

    if is_number(left) and is_number(right):
        return _sign(left, right)

    if is_number(left) and isinstance(right, str):
        return _sign(left, to_number(right)) if is_numeric(right) else _sign(to_string(left), right)

    if isinstance(left, str) and is_number(right):
        return _sign(to_number(left), right) if is_numeric(left) else _sign(left, to_string(right))

    if isinstance(left, str) and isinstance(right, str):
        if is_numeric(left) and is_numeric(right):
            return _sign(to_number(left), to_number(right))
        return _sign(left, right)

    if _is_array(left) and _is_array(right):
        left_items = dict(_array_pairs(left))
        right_items = dict(_array_pairs(right))
        if len(left_items) != len(right_items):
            return _sign(len(left_items), len(right_items))
        for key, value in left_items.items():
            if key not in right_items:
                return 1
            result = loose_compare(value, right_items[key])
            if result != 0:
                return result
        return 0

    # arrays rank above every non-array value
    if _is_array(left):
        return 1
    if _is_array(right):
        return -1

    try:
        return _sign(left, right)
    except TypeError:
        return _sign(str(left), str(right))
