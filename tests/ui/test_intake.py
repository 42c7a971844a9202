"""Tests for image intake normalization and the drop zone."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from PyQt6.QtCore import QMimeData, QPoint, QPointF, Qt, QUrl
from PyQt6.QtGui import QColor, QDragEnterEvent, QDropEvent, QImage

from boardshot.ui.drop_zone import ImageDropZone
from boardshot.ui.intake import (
    SelectedFile,
    files_from_mime_data,
    first_file,
    is_image,
    preview_pixmap,
    selected_file_from_path,
)
from boardshot.ui.presentation import ZonePage


def test_first_file_picks_only_the_first() -> None:
    a = SelectedFile("a.png", "image/png", data=b"a")
    b = SelectedFile("b.png", "image/png", data=b"b")
    assert first_file([a, b]) is a
    assert first_file([]) is None


@pytest.mark.parametrize(
    ("mime_type", "expected"),
    [
        ("image/png", True),
        ("image/jpeg", True),
        ("image/webp", True),
        ("application/pdf", False),
        ("text/plain", False),
        ("application/octet-stream", False),
    ],
)
def test_is_image_checks_declared_type_prefix(mime_type: str, expected: bool) -> None:
    assert is_image(SelectedFile("f", mime_type, data=b"x")) is expected


def test_path_mime_type_comes_from_mime_database(tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("not a board", encoding="utf-8")

    assert selected_file_from_path(notes).mime_type == "text/plain"


def test_local_png_is_detected_as_image(board_png: Path) -> None:
    file = selected_file_from_path(board_png)
    assert file.name == "board.png"
    assert file.mime_type == "image/png"
    assert file.read_bytes() == board_png.read_bytes()


def test_missing_file_read_raises_oserror(tmp_path: Path) -> None:
    file = SelectedFile("gone.png", "image/png", path=tmp_path / "gone.png")
    with pytest.raises(OSError):
        file.read_bytes()


def test_mime_data_urls_come_in_order(board_png: Path, tmp_path: Path) -> None:
    other = tmp_path / "other.txt"
    other.write_text("x", encoding="utf-8")
    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(str(board_png)), QUrl.fromLocalFile(str(other))])

    files = files_from_mime_data(mime)

    assert [f.name for f in files] == ["board.png", "other.txt"]


def test_clipboard_bitmap_becomes_png_file() -> None:
    image = QImage(8, 8, QImage.Format.Format_RGB32)
    image.fill(QColor(240, 217, 181))
    mime = QMimeData()
    mime.setImageData(image)

    (file,) = files_from_mime_data(mime)

    assert file.mime_type == "image/png"
    assert file.path is None
    assert file.read_bytes().startswith(b"\x89PNG")
    assert not preview_pixmap(file).isNull()


def test_empty_mime_data_yields_nothing() -> None:
    assert files_from_mime_data(QMimeData()) == []
    assert files_from_mime_data(None) == []


def test_drop_zone_emits_first_pasted_file(
    board_png: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    zone = ImageDropZone()
    selected: list[object] = []
    zone.file_selected.connect(selected.append)

    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(str(board_png))])
    monkeypatch.setattr(
        "boardshot.ui.drop_zone.QApplication.clipboard",
        lambda: SimpleNamespace(mimeData=lambda: mime),
    )
    zone.paste_from_clipboard()

    assert len(selected) == 1
    assert isinstance(selected[0], SelectedFile)
    assert selected[0].name == "board.png"


def test_drop_zone_file_dialog_is_blocked_while_busy(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    zone = ImageDropZone()
    opened: list[bool] = []

    def _fake_dialog(*_args: object, **_kwargs: object) -> tuple[str, str]:
        opened.append(True)
        return "", ""

    monkeypatch.setattr(
        "boardshot.ui.drop_zone.QFileDialog.getOpenFileName", _fake_dialog
    )

    zone.set_busy(True)
    zone.open_file_dialog()
    assert opened == []

    zone.set_busy(False)
    zone.open_file_dialog()
    assert opened == [True]


def test_drop_zone_pages_follow_zone_page_order() -> None:
    zone = ImageDropZone()
    for page in ZonePage:
        zone.set_page(page)
        assert zone.page is page


def _drop_event(mime: QMimeData) -> QDropEvent:
    return QDropEvent(
        QPointF(10, 10),
        Qt.DropAction.CopyAction,
        mime,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )


def test_drop_of_several_files_emits_only_the_first(
    board_png: Path, tmp_path: Path
) -> None:
    second = tmp_path / "second.png"
    second.write_bytes(board_png.read_bytes())
    zone = ImageDropZone()
    selected: list[object] = []
    zone.file_selected.connect(selected.append)

    mime = QMimeData()
    mime.setUrls([QUrl.fromLocalFile(str(board_png)), QUrl.fromLocalFile(str(second))])
    zone.dropEvent(_drop_event(mime))

    assert len(selected) == 1
    assert isinstance(selected[0], SelectedFile)
    assert selected[0].name == "board.png"
    assert selected[0].path == board_png


def test_drop_without_files_or_image_emits_nothing() -> None:
    zone = ImageDropZone()
    selected: list[object] = []
    zone.file_selected.connect(selected.append)

    mime = QMimeData()
    mime.setText("e4 e5")
    zone.dropEvent(_drop_event(mime))

    assert selected == []


def test_drag_enter_accepts_files_and_ignores_text(board_png: Path) -> None:
    zone = ImageDropZone()

    files = QMimeData()
    files.setUrls([QUrl.fromLocalFile(str(board_png))])
    enter = QDragEnterEvent(
        QPoint(10, 10),
        Qt.DropAction.CopyAction,
        files,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )
    zone.dragEnterEvent(enter)
    assert enter.isAccepted()

    text = QMimeData()
    text.setText("not an image")
    ignored = QDragEnterEvent(
        QPoint(10, 10),
        Qt.DropAction.CopyAction,
        text,
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
    )
    zone.dragEnterEvent(ignored)
    assert not ignored.isAccepted()
