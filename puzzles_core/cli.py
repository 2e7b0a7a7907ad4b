from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .nim import MAX_TAKE, ai_pick_move, apply_move, legal_moves, solve, solve_moves
from .same_tree import is_same_tree, is_same_tree_iterative
from .tree_codec import parse_tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Nim and Same Tree exercises')
    sub = parser.add_subparsers(dest='command', required=True)

    nim = sub.add_parser('nim', help='Decide a single-pile Nim position')
    nim.add_argument('--pile', type=int, required=True, help='Objects in the pile')
    nim.add_argument('--max-take', type=int, default=MAX_TAKE, help='Most objects removable per turn')
    nim.add_argument('--moves', action='store_true', help='Show the outcome of every legal move')
    nim.add_argument('--play', action='store_true', help='Play against the AI (you move first)')

    same = sub.add_parser('same-tree', help='Compare two binary trees')
    same.add_argument('p', help='First tree as JSON: level-order list or nested {"value","left","right"}')
    same.add_argument('q', help='Second tree, same format')
    same.add_argument('--iterative', action='store_true', help='Use the explicit-stack comparison')
    return parser


def _run_nim(args: argparse.Namespace) -> int:
    if not args.play:
        res = solve(args.pile, args.max_take)
        print(f"Pile of {args.pile}, up to {args.max_take} per turn.")
        print('Mover has a forced win.' if res.win else 'Mover cannot force a win.')
        if res.best_move is not None:
            print('Suggested move: take', res.best_move)
        print('Plies under optimal play:', res.plies)
        if args.moves:
            for it in solve_moves(args.pile, args.max_take):
                verdict = 'wins' if it['win'] else 'loses'
                print(f"  take {it['take']}: {verdict} in {it['plies']} plies")
        return 0

    # Interactive play vs AI
    pile = args.pile
    print(f"Pile of {pile}. You move first; whoever takes the last object wins.")

    def prompt_human_move(p: int) -> int:
        moves = legal_moves(p, args.max_take)
        print('Your legal moves:', moves)
        while True:
            text = input('How many do you take? ').strip()
            try:
                take = int(text)
            except ValueError:
                print('Could not parse. Try again.')
                continue
            if take in moves:
                return take
            print('Illegal move. Try again.')

    human_turn = True
    while True:
        if not legal_moves(pile, args.max_take):
            # The previous mover took the last object.
            print('AI wins!' if human_turn else 'You win!')
            return 0
        if human_turn:
            take = prompt_human_move(pile)
        else:
            take = ai_pick_move(pile, args.max_take)
            if take is None:
                print('error: AI failed to return a move.', file=sys.stderr)
                return 2
            print(f"AI takes {take}")
        pile = apply_move(pile, take, args.max_take)
        print('Pile is now', pile)
        human_turn = not human_turn


def _run_same_tree(args: argparse.Namespace) -> int:
    try:
        p = parse_tree(json.loads(args.p))
        q = parse_tree(json.loads(args.q))
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        print(f"error: bad tree: {e}", file=sys.stderr)
        return 2
    for label, root in (('p', p), ('q', q)):
        print(f"{label}:")
        print(root.pretty() if root is not None else '(empty)')
    check = is_same_tree_iterative if args.iterative else is_same_tree
    same = check(p, q)
    print('same' if same else 'different')
    return 0 if same else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == 'nim':
            return _run_nim(args)
        return _run_same_tree(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
