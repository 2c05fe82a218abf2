from __future__ import annotations

from typing import ClassVar

from . import features
from .base import PriorityStrategy


class DefensiveStrategy(PriorityStrategy):
    """Gets tokens out and home before picking fights."""

    name: ClassVar[str] = "defensive"
    priorities = (
        features.pocket_entry,
        features.finish,
        features.home_stretch_entry,
        features.capture,
        features.stack,
    )
