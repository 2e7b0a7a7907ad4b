from __future__ import annotations

import os
import sys
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from puzzles import (  # noqa: E402
    MAX_TAKE,
    ai_pick_move,
    apply_move,
    can_win,
    is_same_tree,
    is_same_tree_iterative,
    legal_moves,
    parse_tree,
    solve,
    solve_moves,
    winning_move,
)

app = Flask(__name__)


def _default_max_take() -> int:
    raw = os.getenv("PUZZLES_MAX_TAKE", "")
    try:
        return int(raw) if raw else MAX_TAKE
    except ValueError:
        return MAX_TAKE


def _nim_args(body: Dict[str, Any]) -> Tuple[int, int]:
    """Pulls (pile, maxTake) out of a request body; the core functions validate the values."""
    if "pile" not in body:
        raise ValueError("pile required")
    return body["pile"], body.get("maxTake", _default_max_take())


def _body() -> Dict[str, Any]:
    """JSON request body; anything but an object is a bad request."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError(f"request body must be a JSON object, got {type(body).__name__}")
    return body


def _turn(body: Dict[str, Any]) -> int:
    turn = body.get("turn", 1)
    if isinstance(turn, bool) or not isinstance(turn, int) or turn not in (1, 2):
        raise ValueError(f"turn must be 1 or 2, got {turn!r}")
    return int(turn)


def _bad_request(e: Exception) -> Any:
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


# ---------- Index ----------

@app.get("/")
def index() -> Any:
    return jsonify({
        "ok": True,
        "service": "puzzles",
        "routes": sorted(str(rule) for rule in app.url_map.iter_rules() if str(rule).startswith("/api/")),
    })


# ---------- Nim ----------

@app.post("/api/nim/can_win")
def api_nim_can_win() -> Any:
    try:
        body = _body()
        pile, max_take = _nim_args(body)
        win = can_win(pile, max_take)
        move = winning_move(pile, max_take)
    except (ValueError, TypeError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "canWin": win, "winningMove": move})


@app.post("/api/nim/solve")
def api_nim_solve() -> Any:
    try:
        body = _body()
        pile, max_take = _nim_args(body)
        res = solve(pile, max_take)
        detailed = solve_moves(pile, max_take)
    except (ValueError, TypeError) as e:
        return _bad_request(e)
    return jsonify({
        "ok": True,
        "win": bool(res.win),
        "best": res.best_move,
        "plies": res.plies,
        "moves": detailed,
    })


@app.post("/api/nim/move")
def api_nim_move() -> Any:
    try:
        body = _body()
        pile, max_take = _nim_args(body)
        turn = _turn(body)
        legal = legal_moves(pile, max_take)
        take = body.get("take")
        if isinstance(take, bool) or not isinstance(take, int):
            raise ValueError(f"take must be an integer, got {take!r}")
    except (ValueError, TypeError) as e:
        return _bad_request(e)
    if take not in legal:
        return jsonify({"ok": False, "error": "Illegal move", "legalMoves": legal}), 400
    try:
        next_pile = apply_move(pile, take, max_take)
    except ValueError as e:
        return _bad_request(e)
    winner: Optional[int] = turn if next_pile == 0 else None  # taking the last object wins
    return jsonify({
        "ok": True,
        "pile": next_pile,
        "turn": 2 if turn == 1 else 1,
        "legalMoves": legal_moves(next_pile, max_take),
        "winner": winner,
    })


@app.post("/api/nim/ai")
def api_nim_ai() -> Any:
    try:
        body = _body()
        pile, max_take = _nim_args(body)
        turn = _turn(body)
        take = ai_pick_move(pile, max_take)
        legal = legal_moves(pile, max_take)
    except (ValueError, TypeError) as e:
        return _bad_request(e)
    if take is None or take not in legal:
        return jsonify({"ok": False, "error": "No AI move available"}), 400
    next_pile = apply_move(pile, take, max_take)
    return jsonify({
        "ok": True,
        "take": take,
        "pile": next_pile,
        "turn": 2 if turn == 1 else 1,
        "legalMoves": legal_moves(next_pile, max_take),
        "winner": turn if next_pile == 0 else None,
    })


# ---------- Same Tree ----------

@app.post("/api/tree/same")
def api_tree_same() -> Any:
    try:
        body = _body()
        p = parse_tree(body.get("p"))
        q = parse_tree(body.get("q"))
    except (ValueError, TypeError) as e:
        return jsonify({"ok": False, "error": f"bad tree: {e}"}), 400
    except RecursionError:
        return jsonify({"ok": False, "error": "bad tree: nested too deeply, send it as a level-order list"}), 400
    check = is_same_tree_iterative if body.get("iterative") else is_same_tree
    try:
        same = check(p, q)
    except RecursionError:
        return jsonify({"ok": False, "error": "tree too deep for the recursive check, retry with \"iterative\": true"}), 400
    return jsonify({"ok": True, "same": bool(same)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
