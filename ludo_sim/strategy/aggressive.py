from __future__ import annotations

from typing import ClassVar

from . import features
from .base import PriorityStrategy


class AggressiveStrategy(PriorityStrategy):
    """Hunts opponents first, taking the biggest stack on offer."""

    name: ClassVar[str] = "aggressive"
    priorities = (
        features.largest_capture,
        features.pocket_entry,
        features.finish,
        features.stack,
        features.home_stretch_entry,
    )
