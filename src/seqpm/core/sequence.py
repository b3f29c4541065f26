"""Temporal sequence of itemsets."""
import logging
from typing import Hashable, Iterator, List, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from .data_structures import Itemset
from ..config import config
from ..exceptions import EmptySequenceError, InvalidDataError
from ..utils.formatters import format_sequence
from ..utils.validators import validate_position, validate_support

logger = logging.getLogger(__name__)


class Sequence:
    """Represents one record of a sequence database.

    A sequence is an ordered list of itemsets (insertion order is
    temporal order) with an identifier. The total number of items is
    cached and kept equal to the sum of the itemset sizes by every
    mutating method, so itemsets must be changed through the sequence
    and not through the objects returned by ``get()``.

    Example:
        >>> seq = Sequence(1)
        >>> seq.add_itemset(Itemset([Item('a'), Item('b')], timestamp=10))
        >>> seq.add_itemset(Itemset([Item('c')], timestamp=20))
        >>> seq.length(), seq.size(), seq.get_time_length()
        (3, 2, 10)

    Attributes:
        sequence_id: Sequence identifier (uniqueness is up to the caller)
    """

    def __init__(self, sequence_id: int):
        """Initialize an empty sequence.

        Args:
            sequence_id: The sequence identifier
        """
        self.sequence_id = sequence_id
        self._itemsets: List[Itemset] = []
        self._number_of_items = 0

    def get_id(self) -> int:
        return self.sequence_id

    def set_id(self, sequence_id: int):
        self.sequence_id = sequence_id

    def add_itemset(self, itemset: Itemset):
        """Append an itemset at the end of the sequence.

        Args:
            itemset: Itemset to add; the sequence takes ownership of it

        Raises:
            InvalidDataError: If timestamp order checking is enabled and the
                itemset is older than the current last itemset
        """
        if config.check_timestamp_order and self._itemsets:
            last_timestamp = self._itemsets[-1].get_timestamp()
            if itemset.get_timestamp() < last_timestamp:
                raise InvalidDataError(
                    f"Itemset at t={itemset.get_timestamp()} added after t={last_timestamp} "
                    f"in sequence {self.sequence_id}"
                )

        self._itemsets.append(itemset)
        self._number_of_items += itemset.size()

    def append_item(self, item: Hashable):
        """Append an item to the last itemset.

        Raises:
            EmptySequenceError: If the sequence has no itemsets
        """
        if not self._itemsets:
            raise EmptySequenceError(f"Sequence {self.sequence_id} has no itemset to append an item to")

        self._itemsets[-1].add_item(item)
        self._number_of_items += 1

    def insert_item(self, itemset_index: int, item: Hashable, item_index: Optional[int] = None):
        """Add an item to the itemset at a given position.

        Args:
            itemset_index: Position of the itemset
            item: Item to add
            item_index: Position inside the itemset; appended at the end if None

        Raises:
            IndexOutOfRangeError: If either index is invalid
        """
        itemset = self.get(itemset_index)
        if item_index is None:
            itemset.add_item(item)
        else:
            itemset.add_item_at(item_index, item)
        self._number_of_items += 1

    def remove_itemset(self, itemset_index: int) -> Itemset:
        """Remove and return the itemset at a given position.

        Raises:
            IndexOutOfRangeError: If itemset_index is invalid
        """
        itemset_index = validate_position(itemset_index, len(self._itemsets), "itemset index")
        itemset = self._itemsets.pop(itemset_index)
        self._number_of_items -= itemset.size()

        logger.debug(f"Removed itemset {itemset_index} ({itemset.size()} items) from sequence {self.sequence_id}")
        return itemset

    def remove_item_at(self, itemset_index: int, item_index: int) -> Hashable:
        """Remove and return the item at item_index in the itemset at itemset_index.

        Raises:
            IndexOutOfRangeError: If either index is invalid
        """
        item = self.get(itemset_index).remove_item_at(item_index)
        self._number_of_items -= 1
        return item

    def remove_item(self, itemset_index: int, item: Hashable):
        """Remove the first occurrence of an item from the itemset at itemset_index.

        Raises:
            IndexOutOfRangeError: If itemset_index is invalid
            ItemNotFoundError: If the itemset does not contain the item
        """
        self.get(itemset_index).remove_item(item)
        self._number_of_items -= 1

    def clone_sequence(self) -> 'Sequence':
        """Return a deep copy of the sequence with the same identifier."""
        sequence = Sequence(self.sequence_id)
        for itemset in self._itemsets:
            sequence._append_unchecked(itemset.clone_itemset())
        return sequence

    def clone_sequence_filtered(self, occurrences: Mapping[Hashable, np.ndarray], min_support: float) -> 'Sequence':
        """Copy the sequence without its infrequent items.

        Itemsets left empty by the filtering are dropped from the copy.

        Args:
            occurrences: Occurrence bitmap of each item in the database
            min_support: Relative (0.0-1.0) or absolute (>1) threshold

        Returns:
            New sequence with the same identifier

        Raises:
            InvalidParameterError: If min_support is invalid or an occurrence record
                is not a 1-D boolean array
        """
        validate_support(min_support)

        sequence = Sequence(self.sequence_id)
        for itemset in self._itemsets:
            new_itemset = itemset.clone_filtered(occurrences, min_support)
            if new_itemset.size() != 0:
                sequence._append_unchecked(new_itemset)

        logger.debug(
            f"Filtered clone of sequence {self.sequence_id}: "
            f"dropped {self._number_of_items - sequence.length()} items, "
            f"{self.size() - sequence.size()} itemsets"
        )
        return sequence

    def _append_unchecked(self, itemset: Itemset):
        # Clones keep the source order, so the timestamp check does not apply.
        self._itemsets.append(itemset)
        self._number_of_items += itemset.size()

    def get_itemsets(self) -> Tuple[Itemset, ...]:
        """Get the itemsets as a read-only tuple."""
        return tuple(self._itemsets)

    def get(self, index: int) -> Itemset:
        """Get the itemset at a given position.

        Raises:
            IndexOutOfRangeError: If index is invalid
        """
        return self._itemsets[validate_position(index, len(self._itemsets), "itemset index")]

    def size(self) -> int:
        """Number of itemsets in the sequence."""
        return len(self._itemsets)

    def length(self) -> int:
        """Number of items in the sequence."""
        return self._number_of_items

    def get_time_length(self) -> int:
        """Timestamp of the last itemset minus timestamp of the first one.

        Raises:
            EmptySequenceError: If the sequence has no itemsets
        """
        if not self._itemsets:
            raise EmptySequenceError(f"Sequence {self.sequence_id} has no itemsets")

        return self._itemsets[-1].get_timestamp() - self._itemsets[0].get_timestamp()

    def to_string(self) -> str:
        """Debug representation, e.g. ``{t=10, a b }{t=20, c }    ``."""
        return format_sequence(self, config.string_padding)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the sequence to a pandas DataFrame with one row per item.

        Returns:
            DataFrame with sequence_id, itemset_index, timestamp and item columns
        """
        data = []
        for itemset_index, itemset in enumerate(self._itemsets):
            for item in itemset:
                data.append({
                    'sequence_id': self.sequence_id,
                    'itemset_index': itemset_index,
                    'timestamp': itemset.get_timestamp(),
                    'item': item,
                })

        return pd.DataFrame(data, columns=['sequence_id', 'itemset_index', 'timestamp', 'item'])

    def __getitem__(self, index: int) -> Itemset:
        return self.get(index)

    def __iter__(self) -> Iterator[Itemset]:
        return iter(self._itemsets)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Sequence(id={self.sequence_id}, itemsets={self.size()}, items={self._number_of_items})"
