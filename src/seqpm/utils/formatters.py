"""Output formatting utilities."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.data_structures import Itemset
    from ..core.sequence import Sequence


def format_itemset(itemset: 'Itemset') -> str:
    """Format an itemset as ``{t=<timestamp>, <item> <item> ... }``.

    Args:
        itemset: Itemset to render

    Returns:
        Formatted string
    """
    items = ''.join(f"{item} " for item in itemset)
    return f"{{t={itemset.get_timestamp()}, {items}}}"


def format_sequence(sequence: 'Sequence', padding: int = 4) -> str:
    """Format a sequence as its itemsets followed by padding spaces.

    Args:
        sequence: Sequence to render
        padding: Number of trailing spaces

    Returns:
        Formatted string
    """
    return ''.join(format_itemset(itemset) for itemset in sequence) + ' ' * padding
