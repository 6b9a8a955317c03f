from io import BytesIO
from typing import Optional

import numpy as np

from .coders import HuffmanCoder, payload_bit_count
from .encoding_map import build_encoding_map
from .errors import EmptyInputError
from .frequency import build_frequency_table
from .header import flatten_tree_to_header
from .logger import Logger
from .tree_builder import build_encoding_tree
from .validators import validate_type, validate_file_exists


class CompressionStats:
    """Summary of how a piece of data compresses."""

    def __init__(
        self,
        input_size: int,
        output_size: int,
        header_size: int,
        payload_bits: int,
        entropy: float,
        average_code_length: float,
    ) -> None:
        self.input_size = input_size
        self.output_size = output_size
        self.header_size = header_size
        self.payload_bits = payload_bits
        self.entropy = entropy
        self.average_code_length = average_code_length

    @property
    def compression_ratio(self) -> float:
        """Input size over output size."""
        if self.output_size == 0:
            return 0.0
        return self.input_size / self.output_size

    def __repr__(self) -> str:
        return (
            f"CompressionStats(input_size={self.input_size}, output_size={self.output_size}, "
            f"header_size={self.header_size}, payload_bits={self.payload_bits}, "
            f"entropy={self.entropy:.4f}, average_code_length={self.average_code_length:.4f})"
        )


class HuffmanCodec:
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def compress(self, data: bytes) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.

        Returns:
            bytes: The compressed container.
        """
        validate_type(data, "Data", bytes)
        output = BytesIO()
        HuffmanCoder(self.logger).compress(BytesIO(data), output)
        return output.getvalue()

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress the encoded data.

        Args:
            data (bytes): A container produced by compress.

        Returns:
            bytes: The decompressed data.
        """
        validate_type(data, "Data", bytes)
        output = BytesIO()
        HuffmanCoder(self.logger).decompress(BytesIO(data), output)
        return output.getvalue()

    def analyze(self, data: bytes) -> CompressionStats:
        """
        Measure how the data compresses without keeping the output.

        Args:
            data (bytes): The data to analyze.

        Returns:
            CompressionStats: Sizes, entropy and average code length.
        """
        validate_type(data, "Data", bytes)
        output = BytesIO()
        HuffmanCoder().compress(BytesIO(data), output)
        compressed = output.getvalue()
        table = build_frequency_table(BytesIO(data))
        try:
            tree = build_encoding_tree(table)
        except EmptyInputError:
            return CompressionStats(0, len(compressed), 0, 0, 0.0, 0.0)
        encoding_map = build_encoding_map(tree)
        payload_bits = payload_bit_count(table, encoding_map)
        lengths = np.array([len(encoding_map[symbol]) for symbol, _ in table.items()], dtype=np.float64)
        probs = np.array([count for _, count in table.items()], dtype=np.float64) / table.total()
        return CompressionStats(
            len(data),
            len(compressed),
            len(flatten_tree_to_header(tree)),
            payload_bits,
            table.entropy(),
            float(np.dot(lengths, probs)),
        )


class HuffmanCodecFile(HuffmanCodec):
    def compress(self, input_path: str, output_path: str) -> None:
        """
        Compress the input file and write the container to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        with open(input_path, "rb") as input_file, open(output_path, "wb") as output_file:
            HuffmanCoder(self.logger).compress(input_file, output_file)

    def decompress(self, compressed_file_path: str, output_file_path: str) -> None:
        """
        Decompress the input file and write the decompressed data to an output file.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)

        with open(compressed_file_path, "rb") as input_file, open(output_file_path, "wb") as output_file:
            HuffmanCoder(self.logger).decompress(input_file, output_file)

    def analyze(self, input_path: str) -> CompressionStats:
        validate_type(input_path, "Input path", str)
        validate_file_exists(input_path)
        with open(input_path, "rb") as file:
            data = file.read()
        return super().analyze(data)
