import unittest

import numpy as np

from huffcodec.models import FrequencyTable, HuffmanNode, HuffmanLeaf, HuffmanInternal, tree_depth, count_leaves

class TestFrequencyTable(unittest.TestCase):
    def test_from_dict_and_items(self):
        table = FrequencyTable.from_dict({98: 1, 97: 3})
        self.assertEqual(list(table.items()), [(97, 3), (98, 1)])
        self.assertEqual(list(table), [97, 98])
        self.assertIn(97, table)
        self.assertNotIn(99, table)
        self.assertEqual(table.total(), 4)

    def test_add(self):
        table = FrequencyTable()
        table.add(5)
        table.add(5, 2)
        self.assertEqual(table[5], 3)

    def test_invalid_symbol(self):
        table = FrequencyTable()
        with self.assertRaises(ValueError):
            table.add(256)
        with self.assertRaises(ValueError):
            FrequencyTable.from_dict({-1: 1})

    def test_invalid_counts(self):
        with self.assertRaises(ValueError):
            FrequencyTable(np.zeros(10))
        with self.assertRaises(ValueError):
            FrequencyTable.from_dict({1: -3})

    def test_probabilities_and_entropy(self):
        table = FrequencyTable.from_dict({0: 1, 1: 1})
        self.assertAlmostEqual(table.probabilities()[0], 0.5)
        self.assertAlmostEqual(table.entropy(), 1.0)
        self.assertEqual(FrequencyTable.from_dict({7: 10}).entropy(), 0.0)
        self.assertEqual(FrequencyTable().entropy(), 0.0)
        with self.assertRaises(ValueError):
            FrequencyTable().probabilities()

    def test_equality(self):
        self.assertEqual(FrequencyTable.from_dict({1: 2}), FrequencyTable.from_dict({1: 2}))
        self.assertNotEqual(FrequencyTable.from_dict({1: 2}), FrequencyTable.from_dict({1: 3}))

class TestCodeTree(unittest.TestCase):
    def test_leaf(self):
        leaf = HuffmanLeaf(65)
        self.assertTrue(leaf.is_leaf())
        self.assertEqual(leaf, HuffmanLeaf(65))
        self.assertNotEqual(leaf, HuffmanLeaf(66))
        with self.assertRaises(ValueError):
            HuffmanLeaf(300)

    def test_internal(self):
        node = HuffmanInternal(HuffmanLeaf(1), HuffmanLeaf(2))
        self.assertFalse(node.is_leaf())
        self.assertNotEqual(node, HuffmanInternal(HuffmanLeaf(2), HuffmanLeaf(1)))
        with self.assertRaises(ValueError):
            HuffmanInternal(HuffmanLeaf(1), None)

    def test_node_base_is_abstract(self):
        with self.assertRaises(TypeError):
            HuffmanNode()

    def test_depth_and_leaves(self):
        tree = HuffmanInternal(HuffmanLeaf(1), HuffmanInternal(HuffmanLeaf(2), HuffmanLeaf(3)))
        self.assertEqual(tree_depth(tree), 2)
        self.assertEqual(count_leaves(tree), 3)
        self.assertEqual(tree_depth(None), 0)
        self.assertEqual(count_leaves(None), 0)

if __name__ == '__main__':
    unittest.main()
