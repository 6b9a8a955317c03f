"""
huffcodec: A Python library for lossless static Huffman compression and decompression.
"""

from .codecs import (
    CompressionStats,
    HuffmanCodec,
    HuffmanCodecFile,
)

from .coders import (
    BitOutputStream,
    BitInputStream,
    HuffmanCoder,
    EOF_BIT,
)

from .models import (
    FrequencyTable,
    HuffmanNode,
    HuffmanLeaf,
    HuffmanInternal,
)

from .frequency import build_frequency_table
from .priority_queue import PriorityQueue
from .tree_builder import build_encoding_tree
from .header import (
    HeaderParser,
    flatten_tree_to_header,
    recreate_tree_from_header,
)
from .encoding_map import (
    build_encoding_map,
    build_decoding_map,
    is_prefix_free,
)

from .errors import (
    HuffmanError,
    EmptyInputError,
    MalformedHeaderError,
    CorruptBitstreamError,
)

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyAnalysisLog,
    TreeConstructionLog,
    HeaderLog,
    CodingLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "CompressionStats",
    "HuffmanCodec",
    "HuffmanCodecFile",

    "BitOutputStream",
    "BitInputStream",
    "HuffmanCoder",
    "EOF_BIT",

    "FrequencyTable",
    "HuffmanNode",
    "HuffmanLeaf",
    "HuffmanInternal",

    "build_frequency_table",
    "PriorityQueue",
    "build_encoding_tree",
    "HeaderParser",
    "flatten_tree_to_header",
    "recreate_tree_from_header",
    "build_encoding_map",
    "build_decoding_map",
    "is_prefix_free",

    "HuffmanError",
    "EmptyInputError",
    "MalformedHeaderError",
    "CorruptBitstreamError",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyAnalysisLog",
    "TreeConstructionLog",
    "HeaderLog",
    "CodingLog",
    "CodingProgressStep",
]
