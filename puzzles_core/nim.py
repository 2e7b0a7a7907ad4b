from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .debug import debug_enabled, trace

# Classic exercise: each turn removes 1, 2 or 3 objects; taking the last one wins.
MAX_TAKE = 3


def _check_pile(pile_size: int) -> int:
    # bool is an int subclass; True/False are not pile sizes.
    if isinstance(pile_size, bool) or not isinstance(pile_size, int):
        raise ValueError(f'pile size must be an integer, got {pile_size!r}')
    if pile_size < 0:
        raise ValueError(f'pile size must be non-negative, got {pile_size}')
    return pile_size


def _check_take(take: int) -> int:
    if isinstance(take, bool) or not isinstance(take, int):
        raise ValueError(f'take must be an integer, got {take!r}')
    return take


def _check_max_take(max_take: int) -> int:
    if isinstance(max_take, bool) or not isinstance(max_take, int) or max_take < 1:
        raise ValueError(f'max_take must be a positive integer, got {max_take!r}')
    return max_take


def can_win(pile_size: int, max_take: int = MAX_TAKE) -> bool:
    """Whether the player about to move can force a win.

    Multiples of ``max_take + 1`` (zero included) are losing: whatever the
    mover takes, the opponent restores the multiple, until the mover faces
    an empty pile.
    """
    pile_size = _check_pile(pile_size)
    return pile_size % (_check_max_take(max_take) + 1) != 0


def legal_moves(pile_size: int, max_take: int = MAX_TAKE) -> List[int]:
    """Take counts available on this pile, ascending."""
    pile_size = _check_pile(pile_size)
    return list(range(1, min(_check_max_take(max_take), pile_size) + 1))


def apply_move(pile_size: int, take: int, max_take: int = MAX_TAKE) -> int:
    """Returns the pile left after removing ``take`` objects."""
    if _check_take(take) not in legal_moves(pile_size, max_take):
        raise ValueError(f'illegal move: take {take!r} from a pile of {pile_size}')
    return pile_size - take


def winning_move(pile_size: int, max_take: int = MAX_TAKE) -> Optional[int]:
    """The take that leaves the opponent on a losing pile, or None if there is none."""
    pile_size = _check_pile(pile_size)
    rem = pile_size % (_check_max_take(max_take) + 1)
    return rem if rem else None


@dataclass
class SolveResult:
    """Outcome of a pile under optimal play."""
    win: bool
    best_move: Optional[int]
    plies: int


def solve(pile_size: int, max_take: int = MAX_TAKE) -> SolveResult:
    """
    Closed-form solution.
    The winner empties the pile as fast as possible and the loser stalls, so
    every full round of two plies removes exactly ``max_take + 1`` objects.
    """
    pile_size = _check_pile(pile_size)
    rounds, rem = divmod(pile_size, _check_max_take(max_take) + 1)
    if rem:
        return SolveResult(win=True, best_move=rem, plies=2 * rounds + 1)
    return SolveResult(win=False, best_move=None, plies=2 * rounds)


def solve_moves(pile_size: int, max_take: int = MAX_TAKE) -> List[Dict[str, Any]]:
    """Per-move outcomes for the mover: does this take win, and in how many plies."""
    items: List[Dict[str, Any]] = []
    for take in legal_moves(pile_size, max_take):
        child = solve(pile_size - take, max_take)
        items.append({'take': take, 'win': not child.win, 'plies': 1 + child.plies})
    return items


def solve_exhaustive(pile_size: int, max_take: int = MAX_TAKE) -> SolveResult:
    """
    Game-tree search over every pile from 0 up to ``pile_size``, without using
    the closed form. Built bottom-up so large piles do not hit the recursion limit.
    """
    pile_size = _check_pile(pile_size)
    max_take = _check_max_take(max_take)
    debug = debug_enabled()
    # table[p] = (win, best_take, plies)
    table: List[Tuple[bool, Optional[int], int]] = [(False, None, 0)]
    for p in range(1, pile_size + 1):
        # (plies, take) per take; the pile is non-empty so there is at least one
        outcomes = [(table[p - take][2] + 1, take) for take in range(1, min(max_take, p) + 1)]
        winning = [o for o in outcomes if not table[p - o[1]][0]]
        if winning:
            plies, take = min(winning)
            table.append((True, take, plies))
        else:
            # Every take hands the opponent a win; the loser stalls as long as possible.
            plies = max(o[0] for o in outcomes)
            table.append((False, None, plies))
        if debug:
            win, take_opt, plies_opt = table[p]
            trace('nim', f"pile={p} win={win} best={take_opt} plies={plies_opt}")
    win, best_take, plies = table[pile_size]
    return SolveResult(win=win, best_move=best_take, plies=plies)


def ai_pick_move(pile_size: int, max_take: int = MAX_TAKE) -> Optional[int]:
    """Fastest winning take if one exists, otherwise the take that drags the game out longest."""
    detailed = solve_moves(pile_size, max_take)
    if not detailed:
        return None
    wins = [it for it in detailed if it['win']]
    chosen = min(wins, key=lambda it: it['plies']) if wins else max(detailed, key=lambda it: it['plies'])
    return int(chosen['take'])
