"""Bitmap operations for per-item occurrence records."""
import numpy as np
from typing import Iterable

from ..exceptions import InvalidParameterError


class OccurrenceBitmap:
    """Helper class for occurrence bitmaps.

    An occurrence bitmap is a boolean vector with one entry per sequence
    of the database; entry ``k`` is set when sequence ``k`` contains the
    item. The vector length is the database size. Collections of
    sequence ids must be converted with ``from_sequence_ids`` first.
    """

    @staticmethod
    def from_sequence_ids(sequence_ids: Iterable[int], database_size: int) -> np.ndarray:
        """Build a bitmap from the positions of the sequences containing an item.

        Args:
            sequence_ids: Positions of the sequences in the database
            database_size: Number of sequences in the database

        Returns:
            Boolean vector of length database_size

        Raises:
            InvalidParameterError: If a position is outside [0, database_size)
        """
        bitmap = np.zeros(database_size, dtype=bool)
        ids = np.fromiter(sequence_ids, dtype=int)
        out_of_range = ids[(ids < 0) | (ids >= database_size)]
        if out_of_range.size:
            raise InvalidParameterError(
                f"Sequence ids {out_of_range.tolist()} out of range [0, {database_size})"
            )
        bitmap[ids] = True
        return bitmap

    @staticmethod
    def as_bitmap(bitmap) -> np.ndarray:
        """Check that a value is a 1-D boolean occurrence vector.

        Args:
            bitmap: Occurrence record to check

        Returns:
            The record as a numpy array

        Raises:
            InvalidParameterError: If the record is not a 1-D boolean vector
        """
        array = np.asarray(bitmap)
        if array.ndim != 1 or array.dtype != bool:
            raise InvalidParameterError(
                f"Occurrence record must be a 1-D boolean array, got {type(bitmap).__name__} "
                f"with dtype {array.dtype} and {array.ndim} dimension(s)"
            )
        return array

    @staticmethod
    def support_count(bitmap: np.ndarray) -> int:
        """Number of sequences in which the item occurs."""
        return int(np.count_nonzero(OccurrenceBitmap.as_bitmap(bitmap)))

    @staticmethod
    def relative_support(bitmap: np.ndarray) -> float:
        """Compute relative support of a bitmap.

        Args:
            bitmap: Occurrence vector

        Returns:
            Support value (0.0 to 1.0)
        """
        bitmap = OccurrenceBitmap.as_bitmap(bitmap)
        n = bitmap.size
        if n == 0:
            return 0.0

        return int(np.count_nonzero(bitmap)) / float(n)

    @staticmethod
    def meets_support(bitmap: np.ndarray, min_support: float) -> bool:
        """Check if bitmap meets minimum support threshold.

        Args:
            bitmap: Occurrence vector
            min_support: Relative (0.0-1.0) or absolute (>1) threshold

        Returns:
            True if valid, False otherwise

        Raises:
            InvalidParameterError: If the bitmap is not a 1-D boolean vector
        """
        if min_support <= 1:
            return OccurrenceBitmap.relative_support(bitmap) >= min_support
        return OccurrenceBitmap.support_count(bitmap) >= min_support

    @staticmethod
    def intersect(bitmap1: np.ndarray, bitmap2: np.ndarray) -> np.ndarray:
        """Sequences containing both items."""
        return np.logical_and(OccurrenceBitmap.as_bitmap(bitmap1), OccurrenceBitmap.as_bitmap(bitmap2))

    @staticmethod
    def union(bitmap1: np.ndarray, bitmap2: np.ndarray) -> np.ndarray:
        """Sequences containing either item."""
        return np.logical_or(OccurrenceBitmap.as_bitmap(bitmap1), OccurrenceBitmap.as_bitmap(bitmap2))
