from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree. Equality is identity; use is_same_tree to compare shapes."""
    value: Any
    left: Optional['TreeNode'] = None
    right: Optional['TreeNode'] = None

    def pretty(self, indent: str = '    ') -> str:
        """Sideways rendering: right subtree above the node, left subtree below."""
        lines: List[str] = []

        def walk(node: Optional[TreeNode], depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append(f"{indent * depth}{node.value}")
            walk(node.left, depth + 1)

        walk(self, 0)
        return "\n".join(lines)
