"""Core value types and wire schema."""

from boardshot.core.moves import Move, MoveResult, Side
from boardshot.core.wire import (
    DEFAULT_MIME_TYPE,
    MovePayload,
    MoveResultPayload,
    MovesRequest,
)

__all__ = [
    "DEFAULT_MIME_TYPE",
    "Move",
    "MovePayload",
    "MoveResult",
    "MoveResultPayload",
    "MovesRequest",
    "Side",
]
