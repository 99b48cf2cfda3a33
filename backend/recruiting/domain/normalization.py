"""
Input Normalization

Helpers that turn loosely-typed caller data into safe values.
Nothing in here raises: unusable input becomes the "no credit" default.
"""

import math
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def coerce_optional_number(value: Any) -> Optional[float]:
    """
    Convert a value to a finite float, or None when it is unusable.

    Booleans are rejected even though Python treats them as ints.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if math.isnan(number) or math.isinf(number):
        return None

    return number


def coerce_number(value: Any) -> float:
    """Like coerce_optional_number, but missing values become 0.0."""
    number = coerce_optional_number(value)
    return 0.0 if number is None else number


def coerce_enum(value: Any, enum_cls: Type[E]) -> Optional[E]:
    """Case-insensitive lookup of an enum member by value."""
    if isinstance(value, enum_cls):
        return value

    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == key:
            return member

    return None


def coerce_string_list(value: Any) -> List[str]:
    """
    Keep the non-empty string items of a list-like value.

    Sets are sorted so the result does not depend on hash order.
    """
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []

    cleaned = []
    for item in value:
        if isinstance(item, str) and item.strip():
            cleaned.append(item.strip())

    if isinstance(value, (set, frozenset)):
        cleaned.sort()
    return cleaned


def coerce_optional_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 going up.

    Python's round() uses banker's rounding, so 72.5 would become 72.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
