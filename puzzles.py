from __future__ import annotations

# Facade module that re-exports the puzzles core functionality.
# Single-responsibility modules live under puzzles_core/*.

from puzzles_core.nim import (
    MAX_TAKE,
    SolveResult,
    can_win,
    legal_moves,
    apply_move,
    winning_move,
    solve,
    solve_moves,
    solve_exhaustive,
    ai_pick_move,
)
from puzzles_core.tree import TreeNode
from puzzles_core.same_tree import is_same_tree, is_same_tree_iterative
from puzzles_core.tree_codec import (
    tree_from_list,
    tree_to_list,
    tree_from_json,
    tree_to_json,
    parse_tree,
)

__all__ = [
    'MAX_TAKE',
    'SolveResult',
    'can_win',
    'legal_moves',
    'apply_move',
    'winning_move',
    'solve',
    'solve_moves',
    'solve_exhaustive',
    'ai_pick_move',
    'TreeNode',
    'is_same_tree',
    'is_same_tree_iterative',
    'tree_from_list',
    'tree_to_list',
    'tree_from_json',
    'tree_to_json',
    'parse_tree',
]


def main() -> None:
    # CLI driver delegated to puzzles_core.cli
    from puzzles_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
