"""
errors.py

Exceptions raised by huffcodec.
"""


class HuffmanError(ValueError):
    """Base class for every huffcodec failure."""


class EmptyInputError(HuffmanError):
    """Raised when a code tree is requested for an empty frequency table."""


class MalformedHeaderError(HuffmanError):
    """Raised when a tree header or the container preamble cannot be parsed."""


class CorruptBitstreamError(HuffmanError):
    """Raised when the payload does not decode against the header's code tree."""
