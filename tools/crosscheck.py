import argparse
import os
import random
import sys
import time
from typing import Optional

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import puzzles  # type: ignore  # noqa: E402


def check_nim(max_pile: int, max_take: int) -> int:
    """Closed form vs exhaustive search for every pile up to max_pile. Returns mismatch count."""
    mismatches = 0
    t0 = time.time()
    for pile in range(max_pile + 1):
        fast = puzzles.solve(pile, max_take)
        slow = puzzles.solve_exhaustive(pile, max_take)
        if fast != slow or puzzles.can_win(pile, max_take) != slow.win:
            mismatches += 1
            print(f"pile={pile} max_take={max_take} closed={fast} exhaustive={slow}")
    took = int((time.time() - t0) * 1000)
    print(f"nim max_take={max_take}: checked {max_pile + 1} piles in {took}ms, mismatches={mismatches}")
    return mismatches


def random_tree(rng: random.Random, depth: int, values: int) -> Optional[puzzles.TreeNode]:
    if depth <= 0 or rng.random() < 0.2:
        return None
    return puzzles.TreeNode(
        rng.randrange(values),
        left=random_tree(rng, depth - 1, values),
        right=random_tree(rng, depth - 1, values),
    )


def check_trees(seed: int, total: int) -> int:
    """Recursive vs explicit-stack comparison on random tree pairs. Returns mismatch count."""
    rng = random.Random(seed)
    mismatches = 0
    same_count = 0
    for _ in range(total):
        # Few distinct values and shallow trees so equal pairs actually occur.
        p = random_tree(rng, 4, 2)
        q = random_tree(rng, 4, 2)
        rec = puzzles.is_same_tree(p, q)
        it = puzzles.is_same_tree_iterative(p, q)
        same_count += int(rec)
        if rec != it:
            mismatches += 1
            print(f"p={puzzles.tree_to_list(p)} q={puzzles.tree_to_list(q)} recursive={rec} iterative={it}")
    print(f"trees seed={seed}: checked {total} pairs ({same_count} same), mismatches={mismatches}")
    return mismatches


def main():
    parser = argparse.ArgumentParser(description='Cross-check closed forms against brute force')
    parser.add_argument('--max-pile', type=int, default=500)
    parser.add_argument('--max-take', type=int, default=5, help='Check every max_take from 1 up to this')
    parser.add_argument('--trees', type=int, default=2000, help='Random tree pairs to compare')
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    mismatches = 0
    for m in range(1, args.max_take + 1):
        mismatches += check_nim(args.max_pile, m)
    mismatches += check_trees(args.seed, args.trees)
    sys.exit(1 if mismatches else 0)


if __name__ == '__main__':
    main()
