from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Sequence

from .base import BaseStrategy
from .features import random_move

if TYPE_CHECKING:
    from ..dice import Dice
    from ..types import MoveOutcome


class RandomStrategy(BaseStrategy):
    name: ClassVar[str] = "random"

    def select_move(
        self, legal: Sequence["MoveOutcome"], rng: "Dice"
    ) -> "MoveOutcome":
        return random_move(legal, rng)
