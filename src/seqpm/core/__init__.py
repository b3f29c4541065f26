"""Core components for sequential pattern mining."""

from .data_structures import Item, Itemset
from .sequence import Sequence

__all__ = [
    'Item',
    'Itemset',
    'Sequence',
]
