class NormalizationError(Exception):
    """Raised when a raw processo document cannot be normalized."""


class InvalidRecordError(NormalizationError):
    """Raised when the raw root is not an object at all.

    Empty or partial objects are valid input and normalize to a record with
    safe defaults; only a non-mapping root is rejected.
    """
