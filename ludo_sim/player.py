from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from .dice import Dice
    from .strategy.base import BaseStrategy
    from .types import MoveOutcome

from .token import Token


@dataclass(slots=True)
class Player:
    number: int
    strategy: "BaseStrategy"
    tokens: list[Token] = field(default_factory=list)

    @property
    def strategy_name(self) -> str:
        return self.strategy.name

    def completed_count(self, finish_distance: int) -> int:
        return sum(1 for tok in self.tokens if tok.distance == finish_distance)

    def all_in_pocket(self) -> bool:
        return all(tok.in_pocket for tok in self.tokens)

    def move_group(self, token: Token) -> list[Token]:
        """Tokens moving together with ``token``: its tower, chosen token first."""
        if token.distance == 0:
            return [token]
        tower = [t for t in self.tokens if t.distance == token.distance and t is not token]
        return [token, *tower]

    def choose(self, outcomes: Sequence["MoveOutcome"], rng: "Dice") -> int:
        """Delegate move selection to the attached strategy."""
        return self.strategy.choose(self.number, outcomes, rng)
