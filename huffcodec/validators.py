"""
validators.py

Shared codes for input validation in huffcodec.
"""


import os
from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_bit(bit: int) -> None:
    """Validate that bit is 0 or 1."""
    if bit not in (0, 1):
        raise ValueError("Bit must be 0 or 1")


def validate_symbol(symbol: int) -> None:
    """Validate that symbol is a single byte value."""
    if not isinstance(symbol, int) or not 0 <= symbol <= 255:
        raise ValueError(f"Symbol must be an int in range 0-255, got {symbol!r}")
