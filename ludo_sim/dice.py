from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from .config import config

T = TypeVar("T")


@dataclass(slots=True)
class Dice:
    """Random source for dice rolls and uniform index selection.

    Pass a seed (or an existing ``random.Random``) for reproducible games.
    """

    seed: int | None = None
    rng: random.Random = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(1, config.DICE_FACES)

    def index(self, count: int) -> int:
        """Uniform index in ``[0, count)``."""
        if count < 1:
            raise ValueError("count must be >= 1")
        return self.rng.randrange(count)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.index(len(items))]

    def spawn_seed(self) -> int:
        """Draw an independent seed, e.g. for a round played on another worker."""
        return self.rng.randint(0, 2**32 - 1)


@dataclass(slots=True)
class LoadedDice(Dice):
    """Plays back a fixed sequence of rolls; used to script games in tests."""

    rolls: list[int] = field(default_factory=list)

    def roll(self) -> int:
        if not self.rolls:
            raise IndexError("LoadedDice ran out of scripted rolls")
        return self.rolls.pop(0)
