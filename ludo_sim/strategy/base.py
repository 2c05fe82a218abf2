from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Sequence

from .features import random_move

if TYPE_CHECKING:
    from ..dice import Dice
    from ..types import MoveOutcome

Picker = Callable[[Sequence["MoveOutcome"]], Optional["MoveOutcome"]]


class BaseStrategy:
    """Base class for strategies: filters legal outcomes and returns a token id."""

    name: ClassVar[str] = "base"

    def choose(
        self, player: int, outcomes: Sequence["MoveOutcome"], rng: "Dice"
    ) -> int:
        legal = sorted((o for o in outcomes if o.legal), key=lambda o: o.token_id)
        if not legal:
            raise ValueError(f"Player {player} has no legal move to choose from")
        return self.select_move(legal, rng).token_id

    def select_move(
        self, legal: Sequence["MoveOutcome"], rng: "Dice"
    ) -> "MoveOutcome":  # pragma: no cover - abstract
        raise NotImplementedError


class PriorityStrategy(BaseStrategy):
    """Walks an ordered list of pickers; the first one that matches wins.

    Falls back to a uniformly random legal move when nothing matches.
    """

    priorities: ClassVar[tuple[Picker, ...]] = ()

    def select_move(
        self, legal: Sequence["MoveOutcome"], rng: "Dice"
    ) -> "MoveOutcome":
        for pick in self.priorities:
            move = pick(legal)
            if move is not None:
                return move
        return random_move(legal, rng)
