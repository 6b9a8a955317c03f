"""
models.py

The shared objects used in huffcodec.

"""


import abc
from typing import Iterator, Optional, Tuple

import numpy as np

from .settings import SYMBOL_COUNT
from .validators import validate_symbol


class FrequencyTable:
    """
    Represents the occurrence count of every byte value in the data.
    """
    def __init__(self, counts: Optional[np.ndarray] = None) -> None:
        if counts is None:
            counts = np.zeros(SYMBOL_COUNT, dtype=np.int64)
        counts = np.asarray(counts, dtype=np.int64)
        if counts.shape != (SYMBOL_COUNT,):
            raise ValueError(f"Counts must be a one-dimensional array of {SYMBOL_COUNT} values")
        if np.any(counts < 0):
            raise ValueError("Counts must be non-negative")
        self.counts: np.ndarray = counts

    @classmethod
    def from_dict(cls, frequencies: dict) -> "FrequencyTable":
        """
        Build a table from a mapping of symbol to count.

        Args:
            frequencies (dict): Mapping from byte value to occurrence count.

        Returns:
            FrequencyTable: The table.
        """
        table = cls()
        for symbol, count in frequencies.items():
            validate_symbol(symbol)
            table.counts[symbol] = count
        if np.any(table.counts < 0):
            raise ValueError("Counts must be non-negative")
        return table

    def add(self, symbol: int, count: int = 1) -> None:
        validate_symbol(symbol)
        self.counts[symbol] += count

    def __getitem__(self, symbol: int) -> int:
        validate_symbol(symbol)
        return int(self.counts[symbol])

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, int) and 0 <= symbol < SYMBOL_COUNT and self.counts[symbol] > 0

    def __len__(self) -> int:
        """Number of distinct symbols with a non-zero count."""
        return int(np.count_nonzero(self.counts))

    def __iter__(self) -> Iterator[int]:
        return (symbol for symbol, _ in self.items())

    def items(self) -> Iterator[Tuple[int, int]]:
        """
        Iterate over (symbol, count) pairs with a non-zero count.

        Returns:
            Iterator[Tuple[int, int]]: Pairs in ascending symbol order.
        """
        for symbol in np.flatnonzero(self.counts):
            yield int(symbol), int(self.counts[symbol])

    def total(self) -> int:
        """Total number of symbols counted."""
        return int(self.counts.sum())

    def probabilities(self) -> np.ndarray:
        """
        Get the probability of every byte value.

        Returns:
            np.ndarray: 256 probabilities summing to 1.

        Raises:
            ValueError: If the table is empty.
        """
        total = self.total()
        if total == 0:
            raise ValueError("Total frequency cannot be zero")
        return self.counts / total

    def entropy(self) -> float:
        """Shannon entropy of the distribution in bits per symbol."""
        if self.total() == 0:
            return 0.0
        probs = self.probabilities()
        probs = probs[probs > 0]
        return float(-np.sum(probs * np.log2(probs)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return bool(np.array_equal(self.counts, other.counts))

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self.items())})"


class HuffmanNode(abc.ABC):
    """
    Abstract base of the two code tree variants.
    """

    @abc.abstractmethod
    def is_leaf(self) -> bool:
        """
        Tell a leaf from an internal node.

        Returns:
            bool: True for a leaf.
        """
        pass


class HuffmanLeaf(HuffmanNode):
    """
    A leaf holding one byte value.
    """
    def __init__(self, symbol: int) -> None:
        validate_symbol(symbol)
        self.symbol: int = symbol

    def is_leaf(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HuffmanLeaf) and self.symbol == other.symbol

    def __repr__(self) -> str:
        return f"HuffmanLeaf({self.symbol!r})"


class HuffmanInternal(HuffmanNode):
    """
    An internal node owning exactly two children.
    """
    def __init__(self, zero: HuffmanNode, one: HuffmanNode) -> None:
        if not isinstance(zero, HuffmanNode) or not isinstance(one, HuffmanNode):
            raise ValueError("Children must be instances of HuffmanNode")
        self.zero: HuffmanNode = zero
        self.one: HuffmanNode = one

    def is_leaf(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HuffmanInternal):
            return False
        return self.zero == other.zero and self.one == other.one

    def __repr__(self) -> str:
        return f"HuffmanInternal({self.zero!r}, {self.one!r})"


def tree_depth(tree: Optional[HuffmanNode]) -> int:
    """
    Get the depth of the deepest leaf.

    Args:
        tree (Optional[HuffmanNode]): The code tree.

    Returns:
        int: 0 for a lone leaf or an empty tree.
    """
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(tree_depth(tree.zero), tree_depth(tree.one))


def count_leaves(tree: Optional[HuffmanNode]) -> int:
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return count_leaves(tree.zero) + count_leaves(tree.one)
