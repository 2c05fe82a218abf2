from __future__ import annotations

from dataclasses import dataclass

from .config import config
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Track layout derived from the number of players (no mutable state).

    Cells on the shared ring are numbered 1..track_length. A token's
    ``distance`` counts steps from its pocket: 1 is the owner's entry cell,
    ``track_length - 1`` the last ring cell before the home stretch and
    ``finish_distance`` the finished state.
    """

    num_players: int

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ConfigurationError(
                f"num_players must be >= 1, got {self.num_players}"
            )

    @property
    def track_length(self) -> int:
        return config.CELLS_PER_PLAYER * self.num_players

    @property
    def finish_distance(self) -> int:
        return self.track_length + config.HOME_STRETCH_LENGTH

    @property
    def last_track_distance(self) -> int:
        return self.track_length - 1

    def entry_cell(self, player: int) -> int:
        return 1 + config.CELLS_PER_PLAYER * (player - 1)

    def cell_for(self, player: int, distance: int) -> int | None:
        """Ring cell of a token of ``player`` at ``distance``, None off the ring."""
        if not 1 <= distance <= self.last_track_distance:
            return None
        return (self.entry_cell(player) - 1 + distance - 1) % self.track_length + 1

    def home_entry_cell(self, player: int) -> int:
        return self.cell_for(player, self.last_track_distance)

    def advance_cell(self, cell: int, steps: int) -> int:
        return (cell - 1 + steps) % self.track_length + 1
