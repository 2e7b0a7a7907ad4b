from __future__ import annotations

import os


def debug_enabled() -> bool:
    """True when PUZZLES_DEBUG is set to a truthy value."""
    return os.getenv('PUZZLES_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def trace(tag: str, msg: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {msg}")
