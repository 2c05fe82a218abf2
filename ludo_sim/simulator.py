from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Mapping

import numpy as np
from loguru import logger

from .config import Config, config
from .dice import Dice
from .errors import ConfigurationError
from .game import Game
from .types import RoundResult


@dataclass(slots=True)
class Tally:
    """Win counts per player number, accumulated round by round."""

    num_players: int
    wins: np.ndarray = field(init=False, repr=False)
    rounds: int = field(default=0, init=False)
    tied_rounds: int = field(default=0, init=False)
    total_turns: int = field(default=0, init=False)
    total_captures: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        # index 0 unused so player numbers index directly
        self.wins = np.zeros(self.num_players + 1, dtype=np.int64)

    def record(self, result: RoundResult) -> None:
        np.add.at(self.wins, np.asarray(result.winners, dtype=np.int64), 1)
        self.rounds += 1
        self.tied_rounds += int(result.tied)
        self.total_turns += result.turns
        self.total_captures += result.captures

    def wins_for(self, player: int) -> int:
        return int(self.wins[player])

    def standings(self) -> List[tuple[int, int]]:
        """(player, wins) for every player with a win, most wins first."""
        winners = np.flatnonzero(self.wins)
        return sorted(
            ((int(p), int(self.wins[p])) for p in winners),
            key=lambda item: (-item[1], item[0]),
        )

    @property
    def mean_turns(self) -> float:
        return self.total_turns / self.rounds if self.rounds else 0.0


@dataclass(slots=True)
class Simulator:
    """Plays ``num_rounds`` independent rounds and tallies the winners.

    Each round draws its own seed from the master dice, so a fixed seed gives
    the same tally whether rounds run sequentially or on worker threads.
    """

    num_players: int = config.NUM_PLAYERS
    num_tokens: int = config.NUM_TOKENS
    num_rounds: int = config.NUM_ROUNDS
    seed: int | None = None
    workers: int = 1
    strategies: Mapping[int, str] | None = None
    max_turns: int = config.MAX_TURNS

    def __post_init__(self) -> None:
        for name in ("num_players", "num_tokens", "num_rounds", "workers"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")

    @classmethod
    def from_config(cls, cfg: Config) -> "Simulator":
        return cls(
            num_players=cfg.NUM_PLAYERS,
            num_tokens=cfg.NUM_TOKENS,
            num_rounds=cfg.NUM_ROUNDS,
            seed=cfg.SEED,
            workers=cfg.WORKERS,
            strategies=cfg.STRATEGIES,
            max_turns=cfg.MAX_TURNS,
        )

    def play_round(self, index: int, seed: int) -> RoundResult:
        game = Game(
            num_players=self.num_players,
            num_tokens=self.num_tokens,
            dice=Dice(seed=seed),
            strategies=self.strategies,
            max_turns=self.max_turns,
        )
        result = game.play_round()
        logger.debug(f"Round {index:04d}: winners {result.winners} in {result.turns} turns")
        return result

    def run(self) -> Tally:
        master = Dice(seed=self.seed)
        seeds = [master.spawn_seed() for _ in range(self.num_rounds)]
        tally = Tally(self.num_players)

        if self.workers <= 1:
            for index, seed in enumerate(seeds, start=1):
                tally.record(self.play_round(index, seed))
        else:
            max_workers = min(self.workers, os.cpu_count() or 1)
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = executor.map(
                    self.play_round, range(1, self.num_rounds + 1), seeds
                )
                for result in results:
                    tally.record(result)

        logger.info(
            f"Simulated {tally.rounds} rounds ({self.num_players} players, "
            f"{self.num_tokens} tokens): {tally.tied_rounds} tied, "
            f"{tally.mean_turns:.1f} turns per round"
        )
        return tally


def simulate(cfg: Config) -> Tally:
    return Simulator.from_config(cfg).run()
