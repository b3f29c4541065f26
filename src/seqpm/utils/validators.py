"""Validation utilities for sequences and itemsets."""
from datetime import datetime, timezone
from typing import Union

import numpy as np
from dateutil.parser import parse

from ..exceptions import InvalidParameterError, IndexOutOfRangeError


def validate_support(support: float, param_name: str = "min_support") -> None:
    """Validate support threshold.

    Args:
        support: Support value to validate (0.0-1.0 for relative, >1 for absolute)
        param_name: Name of parameter (for error messages)

    Raises:
        InvalidParameterError: If support is invalid
    """
    if isinstance(support, bool) or not isinstance(support, (int, float, np.number)):
        raise InvalidParameterError(f"{param_name} must be a number, got {type(support)}")

    if support <= 0:
        raise InvalidParameterError(f"{param_name} must be positive, got {support}")


def validate_position(index: int, size: int, what: str = "index", allow_end: bool = False) -> int:
    """Check that a position is valid for a container of the given size.

    Negative positions are rejected rather than wrapped around.

    Args:
        index: Position to check
        size: Current number of elements
        what: Name of the position (for error messages)
        allow_end: Accept ``index == size`` (insertion after the last element)

    Returns:
        The position as a plain int

    Raises:
        InvalidParameterError: If index is not an integer
        IndexOutOfRangeError: If index is outside the valid bounds
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise InvalidParameterError(f"{what} must be an integer, got {type(index)}")

    upper = size if allow_end else size - 1
    if index < 0 or index > upper:
        raise IndexOutOfRangeError(f"{what} {index} out of range [0, {upper}]")

    return int(index)


def coerce_timestamp(value: Union[int, float, str, datetime]) -> int:
    """Convert a timestamp value to integer epoch seconds.

    Integers pass through. Integral floats and numeric strings are
    converted; other strings are parsed as dates. Naive datetimes are
    read as UTC.

    Args:
        value: Timestamp to convert

    Returns:
        Timestamp as int

    Raises:
        InvalidParameterError: If value cannot be read as a timestamp
    """
    if isinstance(value, bool):
        raise InvalidParameterError("timestamp must not be a boolean")

    if isinstance(value, (int, np.integer)):
        return int(value)

    if isinstance(value, (float, np.floating)):
        if not float(value).is_integer():
            raise InvalidParameterError(f"timestamp must be integral, got {value}")
        return int(value)

    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        try:
            value = parse(value)
        except (ValueError, OverflowError):
            raise InvalidParameterError(f"No valid date-time format found in '{value}'")

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())

    raise InvalidParameterError(f"Cannot use {type(value)} as a timestamp")
