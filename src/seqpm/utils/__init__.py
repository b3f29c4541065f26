"""Utility functions for sequence handling."""

from .bitmap import OccurrenceBitmap
from .validators import validate_support, validate_position, coerce_timestamp
from .formatters import format_itemset, format_sequence

__all__ = [
    'OccurrenceBitmap',
    'validate_support',
    'validate_position',
    'coerce_timestamp',
    'format_itemset',
    'format_sequence',
]
