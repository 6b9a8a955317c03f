"""
frequency.py

Symbol frequency analysis over a byte stream.
"""


from typing import IO, Optional

import numpy as np

from .logger import Logger, FrequencyAnalysisLog
from .models import FrequencyTable
from .settings import READ_CHUNK_SIZE, SYMBOL_COUNT


def build_frequency_table(input: IO[bytes], logger: Optional[Logger] = None,
                          chunk_size: int = READ_CHUNK_SIZE) -> FrequencyTable:
    """
    Count every byte of the stream, consuming it fully.

    Args:
        input (IO[bytes]): A readable binary stream.
        logger (Optional[Logger]): Logger instance for logging.
        chunk_size (int): Number of bytes read at a time.

    Returns:
        FrequencyTable: The counts. Empty input gives an empty table.
    """
    if chunk_size < 1:
        raise ValueError("Chunk size must be at least 1")
    counts = np.zeros(SYMBOL_COUNT, dtype=np.int64)
    while True:
        chunk = input.read(chunk_size)
        if not chunk:
            break
        counts += np.bincount(np.frombuffer(chunk, dtype=np.uint8), minlength=SYMBOL_COUNT)
    table = FrequencyTable(counts)
    if logger is not None:
        logger.log(FrequencyAnalysisLog(len(table), table.total()))
    return table
