from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Optional, Sequence

from .tree import TreeNode


def tree_from_list(values: Sequence[Any]) -> Optional[TreeNode]:
    """
    Builds a tree from level-order values, where None marks an absent child,
    e.g. [1, 2, None, 3] is 1 with left child 2, whose left child is 3.
    """
    if not values or values[0] is None:
        if any(v is not None for v in values):
            raise ValueError('level-order list has values but no root')
        return None
    root = TreeNode(values[0])
    queue: Deque[TreeNode] = deque([root])
    i = 1
    while queue and i < len(values):
        node = queue.popleft()
        if values[i] is not None:
            node.left = TreeNode(values[i])
            queue.append(node.left)
        i += 1
        if i < len(values) and values[i] is not None:
            node.right = TreeNode(values[i])
            queue.append(node.right)
        i += 1
    if any(v is not None for v in values[i:]):
        raise ValueError(f'level-order list has values past the last node at index {i}')
    return root


def tree_to_list(root: Optional[TreeNode]) -> List[Any]:
    """Level-order values with None holes; trailing Nones trimmed."""
    out: List[Any] = []
    queue: Deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            out.append(None)
            continue
        out.append(node.value)
        queue.append(node.left)
        queue.append(node.right)
    while out and out[-1] is None:
        out.pop()
    return out


def tree_from_json(obj: Optional[Dict[str, Any]]) -> Optional[TreeNode]:
    """Nested {"value", "left", "right"} dicts; None (JSON null) is the empty tree."""
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise ValueError(f'tree node must be an object or null, got {type(obj).__name__}')
    if 'value' not in obj:
        raise ValueError('tree node is missing "value"')
    return TreeNode(
        obj['value'],
        left=tree_from_json(obj.get('left')),
        right=tree_from_json(obj.get('right')),
    )


def tree_to_json(root: Optional[TreeNode]) -> Optional[Dict[str, Any]]:
    if root is None:
        return None
    return {'value': root.value, 'left': tree_to_json(root.left), 'right': tree_to_json(root.right)}


def parse_tree(obj: Any) -> Optional[TreeNode]:
    """Accepts a level-order list, a nested dict or None."""
    if obj is None:
        return None
    if isinstance(obj, (list, tuple)):
        return tree_from_list(obj)
    if isinstance(obj, dict):
        return tree_from_json(obj)
    raise ValueError(f'cannot build a tree from {type(obj).__name__}')
