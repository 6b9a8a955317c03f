"""
tree_builder.py

Huffman code tree construction from a frequency table.
"""


from typing import Optional

from .errors import EmptyInputError
from .logger import Logger, TreeConstructionLog
from .models import FrequencyTable, HuffmanNode, HuffmanLeaf, HuffmanInternal, tree_depth, count_leaves
from .priority_queue import PriorityQueue
from .validators import validate_type


def build_encoding_tree(table: FrequencyTable, logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build a Huffman code tree.

    Leaves are queued in ascending symbol order and ties are resolved in
    insertion order, so the same table always yields the same tree. The
    two lowest nodes are merged with the first one extracted as the
    zero-child.

    A table with a single symbol gives the tree "(.s.s)": both children are
    leaves for the same symbol. The symbol takes the code "0" and a 1-bit
    never decodes.

    Args:
        table (FrequencyTable): The symbol counts.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        EmptyInputError: If the table holds no symbols.
    """
    validate_type(table, "Table", FrequencyTable)
    if len(table) == 0:
        raise EmptyInputError("Cannot build a code tree from an empty frequency table")

    weights = PriorityQueue()
    for symbol, frequency in table.items():
        weights.insert(HuffmanLeaf(symbol), frequency)

    if weights.size() == 1:
        symbol = weights.extract_min().symbol
        tree = HuffmanInternal(HuffmanLeaf(symbol), HuffmanLeaf(symbol))
    else:
        while weights.size() > 1:
            first = weights.peek_min_priority()
            zero = weights.extract_min()
            second = weights.peek_min_priority()
            one = weights.extract_min()
            weights.insert(HuffmanInternal(zero, one), first + second)
        tree = weights.extract_min()

    if logger is not None:
        logger.log(TreeConstructionLog(count_leaves(tree), tree_depth(tree)))
    return tree
