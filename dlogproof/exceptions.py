"""
Common exception classes.
"""


class DLogProofError(Exception):
    """Base class for errors raised by this package."""


class RandomSourceError(DLogProofError):
    """The secure random generator failed to produce a scalar."""


class HashToScalarError(DLogProofError):
    """A transcript could not be mapped to a scalar of the group."""


class DecodingError(DLogProofError, ValueError):
    """A wire record does not encode a valid proof."""
