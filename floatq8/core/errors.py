"""Error types raised by the 8-bit float codec.

Every error derives from InvalidInputError, which is itself a ValueError, so
callers that already guard codec calls with ``except ValueError`` keep working.
"""


class InvalidInputError(ValueError):
    """Input cannot be encoded or decoded."""


class EmptyInputError(InvalidInputError):
    """encode() was given an empty sample sequence."""


class NonFiniteInputError(InvalidInputError):
    """encode() was given NaN or infinite samples."""


class TruncatedBufferError(InvalidInputError):
    """decode() was given a buffer shorter than the header."""


class InvalidHeaderError(InvalidInputError):
    """Header bounds are non-finite or out of order."""
