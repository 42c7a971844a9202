"""Tests for the state-to-presentation mapping and the result panel."""

from __future__ import annotations

from PyQt6.QtWidgets import QApplication

from boardshot.core.moves import Move, MoveResult, Side
from boardshot.ui.i18n import set_language
from boardshot.ui.intake import SelectedFile
from boardshot.ui.panels.result_panel import MoveResultPanel
from boardshot.ui.presentation import ZonePage, present, side_lines
from boardshot.ui.upload_state import Failed, Idle, Pending, Succeeded

_FILE = SelectedFile("board.png", "image/png", data=b"png")


def test_idle_shows_prompt_only() -> None:
    view = present(Idle())
    assert view.page is ZonePage.PROMPT
    assert view.preview is None
    assert view.error is None
    assert view.sides is None
    assert view.busy is False


def test_pending_shows_preview_and_busy_indicator() -> None:
    view = present(Pending(preview=_FILE))
    assert view.page is ZonePage.PENDING
    assert view.preview is _FILE
    assert view.busy is True
    assert view.sides is None


def test_sides_render_independently() -> None:
    result = MoveResult(Move("e2", "e4", "Open the center"), None)

    view = present(Succeeded(preview=_FILE, result=result))

    assert view.page is ZonePage.PREVIEW
    assert view.sides is not None
    white, black = view.sides
    assert (white.side, white.headline, white.comments) == (
        Side.WHITE,
        "White: e2 to e4",
        "Open the center",
    )
    assert (black.side, black.headline, black.comments) == (
        Side.BLACK,
        "Black: No move found or suggested.",
        None,
    )


def test_failed_keeps_preview_and_shows_message() -> None:
    view = present(Failed(preview=_FILE, message="Failed to get moves: boom"))
    assert view.page is ZonePage.PREVIEW
    assert view.preview is _FILE
    assert view.error == "Failed to get moves: boom"
    assert view.sides is None


def test_failed_without_preview_falls_back_to_prompt() -> None:
    view = present(Failed(preview=None, message="Failed to read image file."))
    assert view.page is ZonePage.PROMPT
    assert view.error == "Failed to read image file."


def test_side_lines_follow_active_language() -> None:
    set_language("Russian")
    white, black = side_lines(MoveResult(Move("g1", "f3", ""), None))
    assert white.headline == "Белые: g1 → f3"
    assert black.headline.startswith("Чёрные:")


def test_result_panel_hidden_until_lines_arrive(qapp: object) -> None:
    del qapp
    panel = MoveResultPanel()
    assert panel.isHidden()

    panel.set_lines(side_lines(MoveResult(None, Move("d7", "d5", "Strike back"))))

    assert not panel.isHidden()
    assert panel.block(Side.WHITE).headline() == "White: No move found or suggested."
    assert panel.block(Side.BLACK).headline() == "Black: d7 to d5"
    assert panel.block(Side.BLACK).comments() == "Strike back"

    panel.set_lines(None)
    assert panel.isHidden()


def test_result_panel_uses_application_font_family(qapp: object) -> None:
    del qapp
    panel = MoveResultPanel()
    headline = panel.block(Side.WHITE)._headline.font()

    assert headline.family() == QApplication.font().family()
    assert headline.bold()
