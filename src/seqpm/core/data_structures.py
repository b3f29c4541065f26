"""Core data structures for sequential pattern mining.

This module provides the item and itemset types that sequences are
built from.
"""
import functools
from typing import Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from ..exceptions import ItemNotFoundError
from ..utils.bitmap import OccurrenceBitmap
from ..utils.validators import coerce_timestamp, validate_position, validate_support
from ..utils.formatters import format_itemset


@functools.total_ordering
class Item:
    """Represents an atomic item of a sequence database.

    Items compare, order and hash by their symbol, so they can be used
    as keys of an occurrence map.

    Example:
        >>> item = Item(3)
        >>> print(item)
        3

    Attributes:
        symbol: Integer or string identifying the item
    """

    def __init__(self, symbol: Union[int, str]):
        self.symbol = symbol

    def get_id(self) -> Union[int, str]:
        """Return the item symbol."""
        return self.symbol

    def __str__(self) -> str:
        return str(self.symbol)

    def __repr__(self) -> str:
        return f"Item({self.symbol!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.symbol == other.symbol

    def __lt__(self, other) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.symbol < other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)


class Itemset:
    """Represents a timestamped itemset.

    An itemset is an ordered group of items occurring together at one
    timestamp. Insertion order is kept; avoiding duplicates inside one
    itemset is left to the caller. Itemsets compare by value and are
    not hashable.

    Example:
        >>> itemset = Itemset([Item(1), Item(2)], timestamp=10)
        >>> itemset.add_item(Item(5))
        >>> print(itemset)
        {t=10, 1 2 5 }

    Attributes:
        timestamp: Occurrence time as integer
    """

    def __init__(self, items: Optional[Iterable[Hashable]] = None, timestamp=0):
        """Initialize an itemset.

        Args:
            items: Initial items, in order
            timestamp: Occurrence time (int, date string or datetime)

        Raises:
            InvalidParameterError: If timestamp cannot be read
        """
        self.timestamp = coerce_timestamp(timestamp)
        self._items: List[Hashable] = list(items) if items is not None else []

    def size(self) -> int:
        """Number of items in the itemset."""
        return len(self._items)

    def get_timestamp(self) -> int:
        return self.timestamp

    def set_timestamp(self, timestamp):
        """Set the occurrence time.

        Args:
            timestamp: Occurrence time (int, date string or datetime)
        """
        self.timestamp = coerce_timestamp(timestamp)

    def get_items(self) -> Tuple[Hashable, ...]:
        """Get the items as a read-only tuple."""
        return tuple(self._items)

    def get(self, index: int) -> Hashable:
        """Get the item at a position.

        Raises:
            IndexOutOfRangeError: If index is invalid
        """
        return self._items[validate_position(index, len(self._items), "item index")]

    def add_item(self, item: Hashable):
        """Append an item at the end of the itemset."""
        self._items.append(item)

    def add_item_at(self, index: int, item: Hashable):
        """Insert an item, shifting later items right.

        Args:
            index: Position in 0..size()
            item: Item to insert

        Raises:
            IndexOutOfRangeError: If index is invalid
        """
        index = validate_position(index, len(self._items), "item index", allow_end=True)
        self._items.insert(index, item)

    def remove_item(self, item: Hashable):
        """Remove the first occurrence of an item.

        Raises:
            ItemNotFoundError: If the item is not in the itemset
        """
        try:
            self._items.remove(item)
        except ValueError:
            raise ItemNotFoundError(f"Item {item} not found in itemset at t={self.timestamp}") from None

    def remove_item_at(self, index: int) -> Hashable:
        """Remove and return the item at a position.

        Raises:
            IndexOutOfRangeError: If index is invalid
        """
        index = validate_position(index, len(self._items), "item index")
        return self._items.pop(index)

    def clone_itemset(self) -> 'Itemset':
        """Return an independent copy of the itemset."""
        return Itemset(self._items, self.timestamp)

    def clone_filtered(self, occurrences: Mapping[Hashable, np.ndarray], min_support: float) -> 'Itemset':
        """Copy the itemset without its infrequent items.

        Args:
            occurrences: Occurrence bitmap of each item in the database
            min_support: Relative (0.0-1.0) or absolute (>1) threshold

        Returns:
            New itemset with the same timestamp, possibly empty

        Raises:
            InvalidParameterError: If min_support is invalid or an occurrence record
                is not a 1-D boolean array
        """
        validate_support(min_support)
        kept = [
            item for item in self._items
            if item in occurrences and OccurrenceBitmap.meets_support(occurrences[item], min_support)
        ]
        return Itemset(kept, self.timestamp)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __eq__(self, other) -> bool:
        if not isinstance(other, Itemset):
            return NotImplemented
        return self.timestamp == other.timestamp and self._items == other._items

    # Itemsets are mutable, so they are not hashable.
    __hash__ = None

    def __str__(self) -> str:
        return format_itemset(self)

    def __repr__(self) -> str:
        return f"Itemset(items={self._items!r}, timestamp={self.timestamp})"
