"""
coders.py

Bit-level streams and the stream-level Huffman compressor/decompressor.

"""


import struct
from io import BytesIO
from typing import IO, Dict, Optional, Tuple

from .encoding_map import build_encoding_map, build_decoding_map
from .errors import EmptyInputError, MalformedHeaderError, CorruptBitstreamError
from .frequency import build_frequency_table
from .header import flatten_tree_to_header, recreate_tree_from_header
from .logger import Logger, HeaderLog, CodingLog, CodingProgressStep
from .models import FrequencyTable
from .settings import FILE_SIGNATURE, FORMAT_VERSION, READ_CHUNK_SIZE
from .tree_builder import build_encoding_tree
from .validators import validate_bit

EOF_BIT = -1

# signature, version, header length
PREAMBLE_FORMAT = ">3sHI"
PAYLOAD_LENGTH_FORMAT = ">Q"


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        validate_bit(bit)
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        self.finish()
        self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes], bit_limit: Optional[int] = None) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
            bit_limit (Optional[int]): Number of valid bits; the padding after
                them reads as end of stream. None reads to the end of inp.
        """
        if bit_limit is not None and bit_limit < 0:
            raise ValueError("Bit limit must be non-negative")
        self.inp: IO[bytes] = inp
        self.bit_limit: Optional[int] = bit_limit
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0
        self.exhausted: bool = False

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.bit_limit is not None and self.bits_read >= self.bit_limit:
            return EOF_BIT
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                self.exhausted = True
                return EOF_BIT
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()


def payload_bit_count(table: FrequencyTable, encoding_map: Dict[int, str]) -> int:
    """Number of payload bits the table encodes to under encoding_map."""
    return sum(count * len(encoding_map[symbol]) for symbol, count in table.items())


def _reject_trailing_data(inp: IO[bytes]) -> None:
    if inp.read(1):
        raise CorruptBitstreamError("Unexpected data after the payload")


def _read_exact(inp: IO[bytes], size: int, what: str) -> bytes:
    data = inp.read(size)
    if len(data) != size:
        raise MalformedHeaderError(f"Compressed data is truncated in the {what}")
    return data


def write_preamble(output: IO[bytes], header: bytes, payload_bits: int) -> None:
    """
    Write the container fields that precede the payload.

    The format:
      - signature (3 bytes)
      - version (2 bytes, unsigned, big-endian)
      - header length (4 bytes, unsigned, big-endian)
      - header (variable length)
      - payload bit count (8 bytes, unsigned, big-endian)
    """
    output.write(struct.pack(PREAMBLE_FORMAT, FILE_SIGNATURE, FORMAT_VERSION, len(header)))
    output.write(header)
    output.write(struct.pack(PAYLOAD_LENGTH_FORMAT, payload_bits))


def read_preamble(inp: IO[bytes]) -> Tuple[bytes, int]:
    """
    Read the container fields written by write_preamble.

    Returns:
        Tuple[bytes, int]: The tree header and the payload bit count.

    Raises:
        MalformedHeaderError: On a bad signature, an unsupported version, or truncation.
    """
    preamble = _read_exact(inp, struct.calcsize(PREAMBLE_FORMAT), "preamble")
    signature, version, header_length = struct.unpack(PREAMBLE_FORMAT, preamble)
    if signature != FILE_SIGNATURE:
        raise MalformedHeaderError("Invalid file signature")
    if version != FORMAT_VERSION:
        raise MalformedHeaderError(f"Unsupported format version: {version}")
    header = _read_exact(inp, header_length, "tree header")
    payload_bits, = struct.unpack(
        PAYLOAD_LENGTH_FORMAT, _read_exact(inp, struct.calcsize(PAYLOAD_LENGTH_FORMAT), "payload length"))
    return header, payload_bits


class HuffmanCoder:
    """
    Static Huffman compressor/decompressor over binary streams.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def compress(self, input: IO[bytes], output: IO[bytes]) -> int:
        """
        Compress input into output.

        The input is read twice, once to count symbols and once to encode
        them. A stream that cannot seek is buffered in memory first.

        Args:
            input (IO[bytes]): The data to compress.
            output (IO[bytes]): Receives the container.

        Returns:
            int: The number of payload bits written.
        """
        if not input.seekable():
            input = BytesIO(input.read())
        start = input.tell()

        table = build_frequency_table(input, self.logger)
        try:
            tree = build_encoding_tree(table, self.logger)
        except EmptyInputError:
            write_preamble(output, b"", 0)
            output.flush()
            return 0
        header = flatten_tree_to_header(tree)
        encoding_map = build_encoding_map(tree)
        del tree

        payload_bits = payload_bit_count(table, encoding_map)
        write_preamble(output, header, payload_bits)
        if self.logger is not None:
            self.logger.log(HeaderLog(len(header)))
            for symbol, code in sorted(encoding_map.items()):
                if symbol in table:
                    self.logger.log(CodingLog(symbol, 8, len(code)))

        input.seek(start)
        bit_out = BitOutputStream(output)
        while True:
            chunk = input.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            for symbol in chunk:
                for bit in encoding_map[symbol]:
                    bit_out.write(1 if bit == "1" else 0)
                if self.logger is not None:
                    self.logger.log(CodingProgressStep("Encoding symbols", table.total()))
        bit_out.finish()
        return bit_out.bits_written

    def decompress(self, input: IO[bytes], output: IO[bytes]) -> int:
        """
        Decompress a container read from input into output.

        Args:
            input (IO[bytes]): The compressed data.
            output (IO[bytes]): Receives the original bytes.

        Returns:
            int: The number of bytes written.

        Raises:
            MalformedHeaderError: If the container or tree header is invalid.
            CorruptBitstreamError: If the payload does not fit the code tree,
                holds a bit sequence no code starts with, or is followed by
                more data.
        """
        header, payload_bits = read_preamble(input)
        if not header:
            if payload_bits != 0:
                raise CorruptBitstreamError("Payload present without a code tree")
            _reject_trailing_data(input)
            output.flush()
            return 0

        tree = recreate_tree_from_header(header)
        if tree.is_leaf():
            raise MalformedHeaderError("Code tree must have at least two leaves")
        decoding_map = build_decoding_map(build_encoding_map(tree))
        max_code_length = max(len(code) for code in decoding_map)
        del tree
        if self.logger is not None:
            self.logger.log(HeaderLog(len(header)))

        bit_in = BitInputStream(input, payload_bits)
        written = 0
        bits = ""
        while True:
            bit = bit_in.read()
            if bit == EOF_BIT:
                break
            bits += "1" if bit else "0"
            if bits in decoding_map:
                output.write(bytes((decoding_map[bits],)))
                written += 1
                bits = ""
                if self.logger is not None:
                    self.logger.log(CodingProgressStep("Decoding symbols"))
            elif len(bits) >= max_code_length:
                raise CorruptBitstreamError(
                    f"No code matches the bits ending at payload bit {bit_in.bits_read}")

        if bit_in.exhausted:
            raise CorruptBitstreamError(
                f"Payload truncated after {bit_in.bits_read} of {payload_bits} bits")
        if bits:
            raise CorruptBitstreamError(
                f"Payload ended inside a code ({len(bits)} dangling bits)")
        _reject_trailing_data(input)
        output.flush()
        return written
