"""JSON wire schema for move suggestions.

The same models validate the model's raw answer on the server and the
server's response on the client, so both ends agree on one contract:

* both ``whiteBestMove`` and ``blackBestMove`` must be present,
* each is ``null`` or an object with string ``from``/``to``/``comments``,
* values are never coerced; unknown top-level keys are dropped.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from boardshot.core.moves import Move, MoveResult

DEFAULT_MIME_TYPE = "image/jpeg"


class MovePayload(BaseModel):
    """One side's suggestion as it appears on the wire."""

    model_config = ConfigDict(frozen=True)

    from_: StrictStr = Field(alias="from")
    to: StrictStr
    comments: StrictStr

    @classmethod
    def from_move(cls, move: Move) -> MovePayload:
        return cls.model_validate(
            {"from": move.from_square, "to": move.to_square, "comments": move.comments}
        )

    def to_move(self) -> Move:
        return Move(from_square=self.from_, to_square=self.to, comments=self.comments)


class MoveResultPayload(BaseModel):
    """Paired suggestions; a side without a move is an explicit ``null``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    white_best_move: MovePayload | None = Field(alias="whiteBestMove")
    black_best_move: MovePayload | None = Field(alias="blackBestMove")

    @classmethod
    def from_result(cls, result: MoveResult) -> MoveResultPayload:
        return cls.model_validate(
            {
                "whiteBestMove": _payload_or_none(result.white_best_move),
                "blackBestMove": _payload_or_none(result.black_best_move),
            }
        )

    def to_result(self) -> MoveResult:
        return MoveResult(
            white_best_move=self.white_best_move.to_move()
            if self.white_best_move
            else None,
            black_best_move=self.black_best_move.to_move()
            if self.black_best_move
            else None,
        )


class MovesRequest(BaseModel):
    """Client request carrying one base64-encoded board image."""

    image_base64: str = Field(
        alias="imageBase64",
        min_length=1,
        description="Base64-encoded image bytes",
    )
    mime_type: str = Field(
        default=DEFAULT_MIME_TYPE,
        alias="mimeType",
        description="Declared content type of the encoded image",
    )


def _payload_or_none(move: Move | None) -> MovePayload | None:
    return MovePayload.from_move(move) if move is not None else None
