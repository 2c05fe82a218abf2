from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .board import Board
from .config import config
from .geometry import BoardGeometry
from .token import Token
from .types import MoveOutcome, Zone


@dataclass(slots=True)
class MoveResolver:
    """Decides whether a token may move with a dice value and what the move does.

    ``evaluate`` never touches the board. ``commit`` runs the same checks and,
    when the move is legal, updates the mover and sends captured tokens back
    to their pocket. Illegal outcomes never change any token.
    """

    geometry: BoardGeometry

    def evaluate(self, token: Token, board: Board, dice: int) -> MoveOutcome:
        return self._resolve(token, board, dice)

    def commit(self, token: Token, board: Board, dice: int) -> MoveOutcome:
        outcome = self._resolve(token, board, dice)
        if not outcome.legal:
            return outcome

        if outcome.captures_opponent:
            for victim in board.occupants(outcome.new_cell, exclude=token):
                if victim.owner != token.owner:
                    logger.debug(
                        f"Token {token.token_id} (P{token.owner}) captures token "
                        f"{victim.token_id} (P{victim.owner}) on cell {outcome.new_cell}"
                    )
                    victim.send_to_pocket()

        token.move_to(outcome.new_distance, outcome.new_zone, outcome.new_cell)
        return outcome

    # --- Rules ---
    def _resolve(self, token: Token, board: Board, dice: int) -> MoveOutcome:
        geo = self.geometry
        outcome = MoveOutcome(token_id=token.token_id, dice_roll=dice)

        if token.distance == geo.finish_distance:
            outcome.already_finished = True
            return outcome

        if token.in_pocket:
            if dice != config.EXIT_POCKET_ROLL:
                return outcome
            candidate = 1
            new_zone = Zone.TRACK
            new_cell = geo.entry_cell(token.owner)
        else:
            candidate = token.distance + dice
            if candidate > geo.finish_distance:
                outcome.overshoots = True
                return outcome
            # inside the home stretch only an exact finishing roll moves
            if token.in_home_stretch and candidate < geo.finish_distance:
                outcome.overshoots = True
                return outcome
            if candidate >= geo.track_length:
                new_zone = Zone.HOME_STRETCH
                new_cell = None
            else:
                new_zone = Zone.TRACK
                new_cell = geo.advance_cell(token.cell, dice)

            if (
                token.on_track
                and candidate > 1
                and token.distance < geo.last_track_distance - 1
                and self._path_blocked(token, board, new_cell)
            ):
                outcome.blocked_by_path = True
                return outcome

        outcome.new_distance = candidate
        outcome.new_zone = new_zone
        outcome.new_cell = new_cell

        if new_zone == Zone.TRACK:
            occupants = board.occupants(new_cell, exclude=token)
            opponents = [tok for tok in occupants if tok.owner != token.owner]
            if occupants and not opponents:
                outcome.forms_stack = True
                outcome.stack_size = len(occupants) + 1
            elif any(tok.distance == 1 for tok in opponents):
                # entry cells are capture-immune
                outcome.blocked_by_enemy_home = True
                return outcome
            elif opponents:
                outcome.captures_opponent = True
                outcome.stack_size = len(opponents)
                outcome.captured_owner = opponents[0].owner

        outcome.legal = True
        if candidate == 1:
            outcome.enters_from_pocket = True
        elif candidate == geo.finish_distance:
            outcome.finishes = True
        elif new_zone == Zone.HOME_STRETCH and not token.in_home_stretch:
            outcome.enters_home_stretch = True
        return outcome

    def _path_blocked(
        self, token: Token, board: Board, new_cell: int | None
    ) -> bool:
        """True if an opponent stack sits on a ring cell the token would pass over.

        Cells are checked in ascending order, strictly between the token's cell
        and the farther of its home-stretch entry cell and its destination cell
        (the home-stretch entry when the move leaves the ring). The scan never
        wraps past the highest cell, so only stacks above the mover can block it.
        """
        home_entry = self.geometry.home_entry_cell(token.owner)
        destination = new_cell if new_cell is not None else home_entry
        for cell in range(token.cell + 1, max(home_entry, destination)):
            owner = board.blockade_owner(cell, exclude=token)
            if owner is not None and owner != token.owner:
                return True
        return False
