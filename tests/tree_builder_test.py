import random
import unittest
from io import BytesIO

from huffcodec.errors import EmptyInputError
from huffcodec.frequency import build_frequency_table
from huffcodec.logger import Logger, TreeConstructionLog
from huffcodec.models import FrequencyTable, HuffmanLeaf, HuffmanInternal, count_leaves
from huffcodec.tree_builder import build_encoding_tree
from huffcodec.encoding_map import build_encoding_map

def leaf_depths(node, depth=0):
    if node.is_leaf():
        return {node.symbol: depth}
    depths = leaf_depths(node.zero, depth + 1)
    depths.update(leaf_depths(node.one, depth + 1))
    return depths

class TestBuildEncodingTree(unittest.TestCase):
    def test_two_symbols(self):
        table = FrequencyTable.from_dict({ord('a'): 3, ord('b'): 1})
        tree = build_encoding_tree(table)
        self.assertEqual(tree, HuffmanInternal(HuffmanLeaf(ord('b')), HuffmanLeaf(ord('a'))))
        self.assertEqual(leaf_depths(tree), {ord('a'): 1, ord('b'): 1})

    def test_single_symbol_gets_one_bit_code(self):
        table = FrequencyTable.from_dict({ord('z'): 4})
        tree = build_encoding_tree(table)
        self.assertFalse(tree.is_leaf())
        self.assertEqual(tree.zero, HuffmanLeaf(ord('z')))
        self.assertEqual(build_encoding_map(tree)[ord('z')], "0")

    def test_single_symbol_repeats_leaf(self):
        tree = build_encoding_tree(FrequencyTable.from_dict({255: 2}))
        self.assertEqual(tree, HuffmanInternal(HuffmanLeaf(255), HuffmanLeaf(255)))
        self.assertEqual(build_encoding_map(tree), {255: "0"})

    def test_empty_table(self):
        with self.assertRaises(EmptyInputError):
            build_encoding_tree(FrequencyTable())

    def test_invalid_table_type(self):
        with self.assertRaises(ValueError):
            build_encoding_tree({97: 1})

    def test_equal_frequencies_break_ties_in_symbol_order(self):
        table = FrequencyTable.from_dict({ord('a'): 1, ord('b'): 1, ord('c'): 1})
        tree = build_encoding_tree(table)
        expected = HuffmanInternal(
            HuffmanLeaf(ord('c')),
            HuffmanInternal(HuffmanLeaf(ord('a')), HuffmanLeaf(ord('b'))),
        )
        self.assertEqual(tree, expected)

    def test_code_lengths_follow_frequencies(self):
        freqs = {ord('a'): 45, ord('b'): 13, ord('c'): 12, ord('d'): 16, ord('e'): 9, ord('f'): 5}
        tree = build_encoding_tree(FrequencyTable.from_dict(freqs))
        depths = leaf_depths(tree)
        self.assertEqual(depths[ord('a')], 1)
        self.assertEqual(depths[ord('b')], 3)
        self.assertEqual(depths[ord('c')], 3)
        self.assertEqual(depths[ord('d')], 3)
        self.assertEqual(depths[ord('e')], 4)
        self.assertEqual(depths[ord('f')], 4)

    def test_every_symbol_is_one_leaf(self):
        rng = random.Random(7)
        data = bytes(rng.randrange(256) for _ in range(5000))
        table = build_frequency_table(BytesIO(data))
        tree = build_encoding_tree(table)
        depths = leaf_depths(tree)
        self.assertEqual(count_leaves(tree), len(table))
        self.assertEqual(set(depths), set(table))
        weighted = sum(count for _, count in table.items())
        self.assertEqual(weighted, len(data))

    def test_deterministic(self):
        table = build_frequency_table(BytesIO(b"the quick brown fox jumps over the lazy dog"))
        self.assertEqual(build_encoding_tree(table), build_encoding_tree(table))

    def test_logs_construction(self):
        logger = Logger()
        build_encoding_tree(FrequencyTable.from_dict({1: 1, 2: 2, 3: 4}), logger)
        logs = logger.get_logs(TreeConstructionLog)
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].leaf_count, 3)
        self.assertEqual(logs[0].depth, 2)

if __name__ == '__main__':
    unittest.main()
