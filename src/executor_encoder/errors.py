"""
Exceptions raised while building executor calldata.

Every error here is a caller bug (bad recipient, truncated input, ...) and is
raised immediately. Arithmetic failures use the built-in ZeroDivisionError and
OverflowError.
"""


class EncoderError(Exception):
    """Base class for encoder errors."""


class InvalidRecipientError(EncoderError, ValueError):
    """Raised when an operation needs a non-zero recipient."""


class MalformedInputError(EncoderError, ValueError):
    """Raised when input bytes are too short or cannot be decoded."""
