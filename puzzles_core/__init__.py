"""
Puzzles core Python package.

Pure-logic helpers for the two exercises, kept apart from the CLI and the
Flask app so they are easy to test.
Modules:
- nim.py: can_win, move generation, closed-form and exhaustive solvers
- tree.py: TreeNode
- same_tree.py: is_same_tree (recursive and explicit-stack)
- tree_codec.py: level-order list / nested JSON conversions
"""
