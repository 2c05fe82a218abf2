"""Move pickers shared by the priority strategies.

Every picker receives the legal outcomes ordered by token id and returns the
first matching outcome, or None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from ..dice import Dice
    from ..types import MoveOutcome


def _first(moves: Sequence["MoveOutcome"], attr: str) -> Optional["MoveOutcome"]:
    return next((m for m in moves if getattr(m, attr)), None)


def pocket_entry(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    return _first(moves, "enters_from_pocket")


def finish(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    return _first(moves, "finishes")


def home_stretch_entry(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    return _first(moves, "enters_home_stretch")


def stack(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    return _first(moves, "forms_stack")


def capture(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    return _first(moves, "captures_opponent")


def largest_capture(moves: Sequence["MoveOutcome"]) -> Optional["MoveOutcome"]:
    # strict comparison keeps the earliest outcome on ties
    best = None
    for move in moves:
        if move.captures_opponent and (best is None or move.stack_size > best.stack_size):
            best = move
    return best


def random_move(moves: Sequence["MoveOutcome"], rng: "Dice") -> "MoveOutcome":
    return rng.choice(moves)
