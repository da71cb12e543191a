"""Exception classes for seqlist."""


class SeqListError(Exception):
    """Base exception for all seqlist errors."""


class EmptyCollectionError(SeqListError, LookupError):
    """Raised when removing from an empty list in strict mode."""


class IndexOutOfRangeError(SeqListError, IndexError):
    """Raised when an index is outside [0, len) and the caller asked to be told."""
