from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from .board import Board
from .config import config
from .dice import Dice
from .player import Player
from .rules import MoveResolver
from .types import TurnResult


@dataclass(slots=True)
class TurnController:
    """Plays one player's turn.

    Roll, evaluate every unfinished token, let the strategy pick, move the
    picked token (with its whole tower), then either stop or roll again.
    A player stuck with every token in the pocket may roll up to three times;
    a six after a move earns another roll unless the move won the round.
    """

    board: Board
    resolver: MoveResolver
    dice: Dice
    num_tokens: int

    def play_turn(self, player: Player) -> TurnResult:
        result = TurnResult(player=player.number)
        finish = self.board.geometry.finish_distance

        while True:
            roll = self.dice.roll()
            result.rolls.append(roll)

            outcomes = [
                self.resolver.evaluate(tok, self.board, roll)
                for tok in player.tokens
                if tok.distance != finish
            ]
            if not any(o.legal for o in outcomes):
                if (
                    len(result.rolls) < config.MAX_ROLLS_IN_POCKET
                    and player.all_in_pocket()
                ):
                    logger.debug(f"P{player.number} rolled {roll} in pocket, rethrow")
                    continue
                logger.debug(f"P{player.number} rolled {roll}, no legal move")
                break

            token_id = player.choose(outcomes, self.dice)
            chosen = self.board.token(token_id)
            for tok in player.move_group(chosen):
                outcome = self.resolver.commit(tok, self.board, roll)
                if outcome.legal:
                    result.moves.append(outcome)
                    logger.debug(
                        f"P{player.number} ({player.strategy_name}) rolled {roll}: "
                        f"token {tok.token_id} -> distance {tok.distance}"
                    )

            if player.completed_count(finish) == self.num_tokens:
                result.won = True
                logger.debug(f"P{player.number} completed all {self.num_tokens} tokens")
                break
            if roll != config.EXIT_POCKET_ROLL:
                break

        return result
