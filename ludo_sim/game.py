from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping

from loguru import logger

from .board import Board
from .config import config
from .dice import Dice
from .errors import ConfigurationError, StalledRoundError
from .geometry import BoardGeometry
from .player import Player
from .rules import MoveResolver
from .strategy import registry
from .turn import TurnController
from .types import RoundResult


@dataclass(slots=True)
class Game:
    """One round of Ludo: fresh pocketed tokens, turns until someone wins.

    Within a turn every player acts in ascending order, even after another
    player has already completed all tokens, so a round can end with
    several winners.
    """

    num_players: int = config.NUM_PLAYERS
    num_tokens: int = config.NUM_TOKENS
    dice: Dice = field(default_factory=Dice)
    strategies: Mapping[int, str] | None = None
    max_turns: int = config.MAX_TURNS
    geometry: BoardGeometry = field(init=False)
    board: Board = field(init=False)
    players: List[Player] = field(init=False)
    resolver: MoveResolver = field(init=False)
    turns: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ConfigurationError(f"num_players must be >= 1, got {self.num_players}")
        if self.num_tokens < 1:
            raise ConfigurationError(f"num_tokens must be >= 1, got {self.num_tokens}")
        if self.strategies is None:
            self.strategies = config.STRATEGIES

        self.geometry = BoardGeometry(self.num_players)
        self.board = Board.create(self.geometry, self.num_tokens)
        self.resolver = MoveResolver(self.geometry)
        strategies = registry.for_players(self.num_players, self.strategies)
        self.players = [
            Player(
                number=number,
                strategy=strategies[number],
                tokens=self.board.tokens_of(number),
            )
            for number in range(1, self.num_players + 1)
        ]

    def play_round(self) -> RoundResult:
        controller = TurnController(
            board=self.board,
            resolver=self.resolver,
            dice=self.dice,
            num_tokens=self.num_tokens,
        )
        winners: List[int] = []
        captures = 0
        while not winners:
            self.turns += 1
            if self.max_turns and self.turns > self.max_turns:
                raise StalledRoundError(
                    f"Round exceeded {self.max_turns} turns without a winner"
                )
            for player in self.players:
                turn = controller.play_turn(player)
                captures += turn.captures
                if turn.won:
                    winners.append(player.number)

        logger.debug(f"Round finished after {self.turns} turns, winners: {winners}")
        return RoundResult(winners=winners, turns=self.turns, captures=captures)
