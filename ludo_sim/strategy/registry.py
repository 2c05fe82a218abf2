from __future__ import annotations

from typing import Dict, Mapping, Type

from ..errors import ConfigurationError
from .aggressive import AggressiveStrategy
from .balanced import BalancedStrategy
from .base import BaseStrategy
from .baseline import RandomStrategy
from .defensive import DefensiveStrategy

DEFAULT_STRATEGY = RandomStrategy.name

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {
    AggressiveStrategy.name: AggressiveStrategy,
    DefensiveStrategy.name: DefensiveStrategy,
    BalancedStrategy.name: BalancedStrategy,
    RandomStrategy.name: RandomStrategy,
}


def create(strategy_name: str) -> BaseStrategy:
    cls = STRATEGY_REGISTRY.get(strategy_name.lower())
    if cls is None:
        raise ConfigurationError(
            f"Unknown strategy '{strategy_name}'. Available: {sorted(STRATEGY_REGISTRY)}"
        )
    return cls()


def available() -> Dict[str, Type[BaseStrategy]]:
    return dict(STRATEGY_REGISTRY)


def for_players(
    num_players: int, assignments: Mapping[int, str] | None = None
) -> Dict[int, BaseStrategy]:
    """Strategy instance per player number; unmapped players get the baseline."""
    assignments = assignments or {}
    return {
        number: create(assignments.get(number, DEFAULT_STRATEGY))
        for number in range(1, num_players + 1)
    }
