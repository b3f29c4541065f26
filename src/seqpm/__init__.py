"""Sequential Pattern Mining - temporal sequence records

Items, timestamped itemsets and sequences used as input records by
sequential pattern mining algorithms, with an SPMF-like interface.

Example:
    >>> from seqpm import Item, Itemset, Sequence
    >>> seq = Sequence(1)
    >>> seq.add_itemset(Itemset([Item('a'), Item('b')], timestamp=10))
    >>> seq.append_item(Item('c'))
    >>> print(seq.to_string())
    {t=10, a b c }
"""

__version__ = '0.1.0'
__author__ = 'Sequential Mining Team'

from .core.data_structures import Item, Itemset
from .core.sequence import Sequence

from .utils.bitmap import OccurrenceBitmap

from .config import config

from .exceptions import (
    SequenceMiningError,
    IndexOutOfRangeError,
    EmptySequenceError,
    ItemNotFoundError,
    InvalidParameterError,
    InvalidDataError,
)

__all__ = [
    'Item',
    'Itemset',
    'Sequence',
    'OccurrenceBitmap',
    'config',
    'SequenceMiningError',
    'IndexOutOfRangeError',
    'EmptySequenceError',
    'ItemNotFoundError',
    'InvalidParameterError',
    'InvalidDataError',
]
