"""Move-selection strategies, looked up by player number."""

from .aggressive import AggressiveStrategy
from .balanced import BalancedStrategy
from .base import BaseStrategy, PriorityStrategy
from .baseline import RandomStrategy
from .defensive import DefensiveStrategy
from .registry import STRATEGY_REGISTRY, available, create, for_players

__all__ = [
    "BaseStrategy",
    "PriorityStrategy",
    "AggressiveStrategy",
    "DefensiveStrategy",
    "BalancedStrategy",
    "RandomStrategy",
    "STRATEGY_REGISTRY",
    "available",
    "create",
    "for_players",
]
