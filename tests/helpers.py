from ludo_sim.geometry import BoardGeometry
from ludo_sim.token import Token
from ludo_sim.types import Zone


def place(geometry: BoardGeometry, token: Token, distance: int) -> Token:
    """Force a token to ``distance`` with a zone and cell consistent with it."""
    if distance == 0:
        token.send_to_pocket()
    elif distance < geometry.track_length:
        token.move_to(distance, Zone.TRACK, geometry.cell_for(token.owner, distance))
    else:
        token.move_to(distance, Zone.HOME_STRETCH)
    return token


def distance_for_cell(geometry: BoardGeometry, player: int, cell: int) -> int:
    """Distance at which a token of ``player`` sits on ring ``cell``."""
    return (cell - geometry.entry_cell(player)) % geometry.track_length + 1
