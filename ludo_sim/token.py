from dataclasses import dataclass

from .types import Zone


@dataclass(slots=True)
class Token:
    """Lightweight token model. Holds state only.

    Rule logic (legality, captures, finishing) lives in ``rules.MoveResolver``
    and cell mapping in ``geometry.BoardGeometry``.
    """

    token_id: int  # unique across the round
    owner: int  # player number 1..N
    distance: int = 0  # 0 = pocket; 1..track_length-1 ring; above = home stretch
    zone: Zone = Zone.POCKET
    cell: int | None = None  # ring cell, only while zone is TRACK

    @property
    def in_pocket(self) -> bool:
        return self.zone == Zone.POCKET

    @property
    def on_track(self) -> bool:
        return self.zone == Zone.TRACK

    @property
    def in_home_stretch(self) -> bool:
        return self.zone == Zone.HOME_STRETCH

    def move_to(self, distance: int, zone: Zone, cell: int | None = None) -> None:
        self.distance = distance
        self.zone = zone
        self.cell = cell if zone == Zone.TRACK else None

    def send_to_pocket(self) -> None:
        self.move_to(0, Zone.POCKET)
