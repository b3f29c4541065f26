"""Custom exceptions for the sequential pattern mining package."""


class SequenceMiningError(Exception):
    """Base exception for all sequence mining errors."""
    pass


class IndexOutOfRangeError(SequenceMiningError, IndexError):
    """Raised when an itemset or item position is outside valid bounds."""
    pass


class EmptySequenceError(SequenceMiningError):
    """Raised when an operation needs at least one itemset."""
    pass


class ItemNotFoundError(SequenceMiningError, ValueError):
    """Raised when the item to remove is not in the itemset."""
    pass


class InvalidParameterError(SequenceMiningError):
    """Raised when invalid parameters are provided."""
    pass


class InvalidDataError(SequenceMiningError):
    """Raised when an itemset does not fit the sequence it is added to."""
    pass
