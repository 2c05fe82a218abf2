from __future__ import annotations

from typing import ClassVar

from . import features
from .base import PriorityStrategy


class BalancedStrategy(PriorityStrategy):
    """Develops and finishes first, then captures ahead of safety moves."""

    name: ClassVar[str] = "balanced"
    priorities = (
        features.pocket_entry,
        features.finish,
        features.capture,
        features.stack,
        features.home_stretch_entry,
    )
