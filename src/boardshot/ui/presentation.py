"""Pure mapping from upload state to what the window shows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from boardshot.core.moves import Move, MoveResult, Side
from boardshot.ui.i18n import t
from boardshot.ui.intake import SelectedFile
from boardshot.ui.upload_state import Failed, Idle, Pending, Succeeded, UploadState


class ZonePage(IntEnum):
    """Which page of the drop zone is visible."""

    PROMPT = 0
    PENDING = auto()
    PREVIEW = auto()


@dataclass(slots=True, frozen=True)
class SideLine:
    """Rendered suggestion for one side."""

    side: Side
    headline: str
    comments: str | None


@dataclass(slots=True, frozen=True)
class Presentation:
    page: ZonePage
    preview: SelectedFile | None = None
    error: str | None = None
    sides: tuple[SideLine, ...] | None = None
    busy: bool = False


def side_line(side: Side, move: Move | None) -> SideLine:
    """Render one side independently of the other."""
    s = t()
    label = s.side_white if side is Side.WHITE else s.side_black
    if move is None:
        return SideLine(side, s.side_no_move.format(side=label), None)
    headline = s.side_move.format(side=label, frm=move.from_square, to=move.to_square)
    return SideLine(side, headline, move.comments)


def side_lines(result: MoveResult) -> tuple[SideLine, ...]:
    return tuple(side_line(side, result.best_move(side)) for side in Side)


def present(state: UploadState) -> Presentation:
    """Return the presentation for *state* in the active locale."""
    if isinstance(state, Idle):
        return Presentation(ZonePage.PROMPT)
    if isinstance(state, Pending):
        return Presentation(ZonePage.PENDING, preview=state.preview, busy=True)
    if isinstance(state, Succeeded):
        return Presentation(
            ZonePage.PREVIEW,
            preview=state.preview,
            sides=side_lines(state.result),
        )
    if isinstance(state, Failed):
        page = ZonePage.PREVIEW if state.preview is not None else ZonePage.PROMPT
        return Presentation(page, preview=state.preview, error=state.message)
    raise TypeError(f"Unknown upload state: {state!r}")
