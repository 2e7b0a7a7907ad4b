import unittest

from puzzles import (
    TreeNode,
    is_same_tree,
    parse_tree,
    tree_from_json,
    tree_from_list,
    tree_to_json,
    tree_to_list,
)


class TestTreeCodec(unittest.TestCase):
    def test_given_level_order_with_holes_when_building_then_shape_matches(self):
        root = tree_from_list([1, 2, None, 3])
        self.assertEqual(root.value, 1)
        self.assertEqual(root.left.value, 2)
        self.assertIsNone(root.right)
        self.assertEqual(root.left.left.value, 3)
        self.assertIsNone(root.left.right)

    def test_given_empty_inputs_when_building_then_empty_tree(self):
        self.assertIsNone(tree_from_list([]))
        self.assertIsNone(tree_from_list([None]))
        self.assertEqual(tree_to_list(None), [])

    def test_given_trimmed_lists_when_converting_back_then_same_list(self):
        for values in ([1], [1, 2, 3], [1, None, 2], [5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1]):
            self.assertEqual(tree_to_list(tree_from_list(values)), values)

    def test_given_trailing_holes_when_converting_back_then_trimmed(self):
        self.assertEqual(tree_to_list(tree_from_list([1, 2, None, None, None])), [1, 2])

    def test_given_values_without_parent_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            tree_from_list([None, 1])
        with self.assertRaises(ValueError):
            tree_from_list([1, None, None, 5])

    def test_given_nested_json_when_roundtrip_then_same_tree(self):
        obj = {"value": 1, "left": {"value": 2}, "right": None}
        root = tree_from_json(obj)
        self.assertTrue(is_same_tree(root, TreeNode(1, left=TreeNode(2))))
        self.assertEqual(
            tree_to_json(root),
            {"value": 1, "left": {"value": 2, "left": None, "right": None}, "right": None},
        )
        self.assertIsNone(tree_from_json(None))

    def test_given_malformed_json_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            tree_from_json({"left": None})
        with self.assertRaises(ValueError):
            tree_from_json({"value": 1, "left": [2]})

    def test_given_either_encoding_when_parsing_then_equivalent_trees(self):
        a = parse_tree([1, 2, 3])
        b = parse_tree({"value": 1, "left": {"value": 2}, "right": {"value": 3}})
        self.assertTrue(is_same_tree(a, b))
        self.assertIsNone(parse_tree(None))
        with self.assertRaises(ValueError):
            parse_tree("1,2,3")

    def test_given_tree_when_pretty_then_right_above_left(self):
        txt = tree_from_list([1, 2, 3]).pretty()
        self.assertEqual(txt.splitlines(), ["    3", "1", "    2"])


if __name__ == '__main__':
    unittest.main(verbosity=2)
