"""
header.py

Serialization of code trees to and from the compressed file header.

Grammar:
    Tree := '.' <byte> | '(' Tree Tree ')'

Symbol bytes are read by position, so '.', '(' and ')' need no escaping.
A single-symbol tree is written as '(.s.s)'; no other tree repeats a symbol.
"""


from typing import Optional, Set

from .errors import MalformedHeaderError
from .models import HuffmanNode, HuffmanLeaf, HuffmanInternal
from .settings import SYMBOL_COUNT
from .validators import validate_type

LEAF_MARKER = ord(".")
OPEN_MARKER = ord("(")
CLOSE_MARKER = ord(")")

# a tree with one leaf per byte value is never deeper than this
MAX_TREE_DEPTH = SYMBOL_COUNT - 1


def is_single_symbol_tree(tree: Optional[HuffmanNode]) -> bool:
    """Check for the '(.s.s)' shape used when the input holds one symbol."""
    return (
        tree is not None
        and not tree.is_leaf()
        and tree.zero.is_leaf()
        and tree.zero == tree.one
    )


def flatten_tree_to_header(tree: Optional[HuffmanNode]) -> bytes:
    """
    Flatten a code tree in pre-order.

    Args:
        tree (Optional[HuffmanNode]): The code tree.

    Returns:
        bytes: The header. An empty tree gives an empty header.
    """
    out = bytearray()
    if tree is not None:
        _flatten(tree, out)
    return bytes(out)


def _flatten(node: HuffmanNode, out: bytearray) -> None:
    if node.is_leaf():
        out.append(LEAF_MARKER)
        out.append(node.symbol)
    else:
        out.append(OPEN_MARKER)
        _flatten(node.zero, out)
        _flatten(node.one, out)
        out.append(CLOSE_MARKER)


class HeaderParser:
    """
    Recursive-descent parser over an immutable header buffer.
    """

    def __init__(self, header: bytes) -> None:
        validate_type(header, "Header", bytes)
        self.header: bytes = header
        self.position: int = 0
        self._symbols: Set[int] = set()
        self._repeated: Set[int] = set()

    def parse(self) -> HuffmanNode:
        """
        Parse the whole header into a code tree.

        Returns:
            HuffmanNode: The root of the tree.

        Raises:
            MalformedHeaderError: If the header is empty, truncated, holds an
                unexpected token, has bytes left after the root node, or
                repeats a symbol anywhere but in the single-symbol tree.
        """
        if not self.header:
            raise MalformedHeaderError("Header is empty")
        tree = self._parse_node(0)
        if self.position != len(self.header):
            raise MalformedHeaderError(
                f"Unexpected trailing data at offset {self.position}")
        if self._repeated and not is_single_symbol_tree(tree):
            raise MalformedHeaderError(
                f"Symbol {min(self._repeated)} appears in more than one leaf")
        return tree

    def _next_byte(self, expecting: str) -> int:
        if self.position >= len(self.header):
            raise MalformedHeaderError(
                f"Header ended at offset {self.position} while expecting {expecting}")
        value = self.header[self.position]
        self.position += 1
        return value

    def _parse_node(self, depth: int) -> HuffmanNode:
        if depth > MAX_TREE_DEPTH:
            raise MalformedHeaderError(f"Tree nesting exceeds {MAX_TREE_DEPTH} levels")
        start = self.position
        token = self._next_byte("'.' or '('")
        if token == LEAF_MARKER:
            symbol = self._next_byte("a symbol byte")
            if symbol in self._symbols:
                self._repeated.add(symbol)
            self._symbols.add(symbol)
            return HuffmanLeaf(symbol)
        if token != OPEN_MARKER:
            raise MalformedHeaderError(
                f"Unexpected token {bytes([token])!r} at offset {start}")
        zero = self._parse_node(depth + 1)
        one = self._parse_node(depth + 1)
        close_at = self.position
        if self._next_byte("')'") != CLOSE_MARKER:
            raise MalformedHeaderError(f"Expected ')' at offset {close_at}")
        return HuffmanInternal(zero, one)


def recreate_tree_from_header(header: bytes) -> HuffmanNode:
    """
    Rebuild a code tree from its header.

    Args:
        header (bytes): A header produced by flatten_tree_to_header.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        MalformedHeaderError: If the header is not a valid tree.
    """
    return HeaderParser(header).parse()
