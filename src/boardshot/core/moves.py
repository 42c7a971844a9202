"""Move suggestion value types shared by the client and the server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Side(StrEnum):
    """The two sides a suggestion can be made for."""

    WHITE = "White"
    BLACK = "Black"


@dataclass(slots=True, frozen=True)
class Move:
    """A suggested piece relocation with the model's explanation.

    Square labels are algebraic coordinates by convention (``"e2"``) but are
    not validated beyond being strings.
    """

    from_square: str
    to_square: str
    comments: str


@dataclass(slots=True, frozen=True)
class MoveResult:
    """Best-move suggestions for both sides of one board image.

    ``None`` on either side means no legal or determinable move.
    """

    white_best_move: Move | None
    black_best_move: Move | None

    def best_move(self, side: Side) -> Move | None:
        if side is Side.WHITE:
            return self.white_best_move
        return self.black_best_move
