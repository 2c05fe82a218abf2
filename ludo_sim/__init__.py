"""
Ludo round simulator.
Plays repeated Ludo rounds with scripted strategies and tallies the winners.
"""

from .board import Board
from .config import Config, config
from .dice import Dice, LoadedDice
from .errors import ConfigurationError, LudoSimError, StalledRoundError
from .game import Game
from .geometry import BoardGeometry
from .log import configure_logging
from .player import Player
from .rules import MoveResolver
from .simulator import Simulator, Tally, simulate
from .token import Token
from .turn import TurnController
from .types import MoveOutcome, RoundResult, TurnResult, Zone

__all__ = [
    "Board",
    "BoardGeometry",
    "Config",
    "config",
    "ConfigurationError",
    "Dice",
    "Game",
    "LoadedDice",
    "LudoSimError",
    "MoveOutcome",
    "MoveResolver",
    "Player",
    "RoundResult",
    "Simulator",
    "StalledRoundError",
    "Tally",
    "Token",
    "TurnController",
    "TurnResult",
    "Zone",
    "configure_logging",
    "simulate",
]
