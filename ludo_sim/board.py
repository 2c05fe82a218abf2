from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from .geometry import BoardGeometry
from .token import Token
from .types import Zone


@dataclass(slots=True)
class Board:
    """Owns the round's token collection and occupancy lookups (no rule logic)."""

    geometry: BoardGeometry
    tokens: List[Token] = field(default_factory=list)

    @classmethod
    def create(cls, geometry: BoardGeometry, num_tokens: int) -> "Board":
        """All tokens pocketed, ids assigned sequentially, player 1 first."""
        tokens: List[Token] = []
        for player in range(1, geometry.num_players + 1):
            for _ in range(num_tokens):
                tokens.append(Token(token_id=len(tokens), owner=player))
        return cls(geometry=geometry, tokens=tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def token(self, token_id: int) -> Token:
        for tok in self.tokens:
            if tok.token_id == token_id:
                return tok
        raise KeyError(f"Unknown token id {token_id}")

    def tokens_of(self, player: int) -> List[Token]:
        return [tok for tok in self.tokens if tok.owner == player]

    def occupants(self, cell: int, *, exclude: Token | None = None) -> List[Token]:
        """Tokens on ring ``cell``, optionally leaving out ``exclude``."""
        return [
            tok
            for tok in self.tokens
            if tok.zone == Zone.TRACK and tok.cell == cell and tok is not exclude
        ]

    def blockade_owner(self, cell: int, *, exclude: Token | None = None) -> int | None:
        """Owner of a 2+ token stack on ``cell`` held by a single player, else None."""
        occupants = self.occupants(cell, exclude=exclude)
        if len(occupants) < 2:
            return None
        owners = {tok.owner for tok in occupants}
        return owners.pop() if len(owners) == 1 else None

    def completed_count(self, player: int) -> int:
        finish = self.geometry.finish_distance
        return sum(1 for tok in self.tokens_of(player) if tok.distance == finish)

    def snapshot(self) -> Sequence[tuple[int, int, int, int | None]]:
        """Hashable view of every token's state, handy for before/after comparisons."""
        return tuple(
            (tok.token_id, tok.distance, int(tok.zone), tok.cell) for tok in self.tokens
        )
