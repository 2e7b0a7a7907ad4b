from __future__ import annotations

from typing import List, Optional, Tuple

from .tree import TreeNode


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """
    Structural equality of two binary trees.
    Compares the node values, then the left subtrees, then the right subtrees,
    stopping at the first difference. Neither tree is modified.
    """
    if p is None or q is None:
        return p is q
    return p.value == q.value and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_same_tree_iterative(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Same answer and visiting order as is_same_tree, with an explicit stack instead of recursion."""
    stack: List[Tuple[Optional[TreeNode], Optional[TreeNode]]] = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None or b is None:
            if a is not b:
                return False
            continue
        if a.value != b.value:
            return False
        # Right pair first so the left pair is popped next.
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True
