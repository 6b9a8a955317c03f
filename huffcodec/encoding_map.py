"""
encoding_map.py

Derivation of symbol codes from a code tree.
"""


from typing import Dict, Optional

from .models import HuffmanNode


def build_encoding_map(tree: Optional[HuffmanNode]) -> Dict[int, str]:
    """
    Map every leaf symbol to its root-to-leaf path.

    The zero-child adds '0' to the path and the one-child adds '1'.

    Args:
        tree (Optional[HuffmanNode]): The code tree.

    Returns:
        Dict[int, str]: Symbol to code. An empty tree gives an empty map.
    """
    codes: Dict[int, str] = {}
    if tree is None:
        return codes
    stack = [(tree, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            # the single-symbol tree repeats its leaf; the '0' path is kept
            if node.symbol not in codes:
                codes[node.symbol] = code
        else:
            stack.append((node.one, code + "1"))
            stack.append((node.zero, code + "0"))
    return codes


def build_decoding_map(encoding_map: Dict[int, str]) -> Dict[str, int]:
    """
    Invert an encoding map.

    Raises:
        ValueError: If two symbols share a code.
    """
    decoding_map: Dict[str, int] = {}
    for symbol, code in encoding_map.items():
        if code in decoding_map:
            raise ValueError(f"Code {code!r} is assigned to more than one symbol")
        decoding_map[code] = symbol
    return decoding_map


def is_prefix_free(encoding_map: Dict[int, str]) -> bool:
    """Check that no code is a prefix of another."""
    codes = sorted(encoding_map.values())
    # after sorting, a prefix sorts directly before some code that extends it
    for shorter, longer in zip(codes, codes[1:]):
        if longer.startswith(shorter):
            return False
    return True
