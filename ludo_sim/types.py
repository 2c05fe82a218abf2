from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class Zone(IntEnum):
    POCKET = 0
    TRACK = 1
    HOME_STRETCH = 2


@dataclass(slots=True)
class MoveOutcome:
    """Legality and consequences of moving one token with one dice value."""

    token_id: int
    dice_roll: int
    legal: bool = False
    enters_from_pocket: bool = False
    finishes: bool = False
    enters_home_stretch: bool = False
    forms_stack: bool = False
    captures_opponent: bool = False
    blocked_by_path: bool = False
    blocked_by_enemy_home: bool = False
    already_finished: bool = False
    overshoots: bool = False
    # size of the stack formed, or number of tokens captured
    stack_size: int = 0
    captured_owner: int | None = None
    new_distance: int | None = None
    new_zone: Zone | None = None
    new_cell: int | None = None

    @property
    def is_plain_advance(self) -> bool:
        return self.legal and not (
            self.enters_from_pocket
            or self.finishes
            or self.enters_home_stretch
            or self.forms_stack
            or self.captures_opponent
        )


@dataclass(slots=True)
class TurnResult:
    player: int
    rolls: List[int] = field(default_factory=list)
    moves: List[MoveOutcome] = field(default_factory=list)
    won: bool = False

    @property
    def captures(self) -> int:
        return sum(m.stack_size for m in self.moves if m.captures_opponent)


@dataclass(slots=True)
class RoundResult:
    winners: List[int]
    turns: int
    captures: int = 0

    @property
    def tied(self) -> bool:
        return len(self.winners) > 1
