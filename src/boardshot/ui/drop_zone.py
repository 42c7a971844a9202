"""ImageDropZone — single drop / paste / click target for board images."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import (
    QDragEnterEvent,
    QDragMoveEvent,
    QDropEvent,
    QKeyEvent,
    QKeySequence,
    QPixmap,
)
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QFrame,
    QLabel,
    QProgressBar,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from boardshot.ui.i18n import t
from boardshot.ui.intake import (
    SelectedFile,
    files_from_mime_data,
    first_file,
    selected_file_from_path,
)
from boardshot.ui.presentation import ZonePage

_IMAGE_PATTERNS = "*.png *.jpg *.jpeg *.webp *.gif *.bmp *.heic *.heif"
_PREVIEW_SIZE = 192
_PENDING_THUMB_SIZE = 96


def _link(text: str) -> str:
    return f'<a href="upload" style="color: #c77dff; font-weight: bold;">{text}</a>'


class ImageDropZone(QFrame):
    """Dashed drop target with prompt, spinner, and preview pages.

    Emits :attr:`file_selected` with the first file of every drop, paste, or
    dialog pick. Validation is left to the receiver.
    """

    file_selected = pyqtSignal(object)  # SelectedFile

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("dropZone")
        self.setAcceptDrops(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(360, 260)
        self._busy = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)

        self._stack = QStackedWidget()
        root.addWidget(self._stack)

        # ── Prompt ──
        prompt = QWidget()
        prompt_layout = QVBoxLayout(prompt)
        prompt_layout.addStretch()
        self._prompt_label = QLabel()
        self._prompt_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._prompt_label.setWordWrap(True)
        prompt_layout.addWidget(self._prompt_label)
        self._upload_link = QLabel()
        self._upload_link.setObjectName("uploadLink")
        self._upload_link.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._upload_link.linkActivated.connect(self._on_link_activated)
        prompt_layout.addWidget(self._upload_link)
        prompt_layout.addStretch()

        # ── Pending ──
        pending = QWidget()
        pending_layout = QVBoxLayout(pending)
        pending_layout.addStretch()
        self._pending_thumb = QLabel()
        self._pending_thumb.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pending_layout.addWidget(self._pending_thumb)
        self._spinner = QProgressBar()
        self._spinner.setRange(0, 0)  # busy indicator
        self._spinner.setTextVisible(False)
        self._spinner.setFixedHeight(8)
        pending_layout.addWidget(self._spinner)
        self._pending_label = QLabel()
        self._pending_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        pending_layout.addWidget(self._pending_label)
        pending_layout.addStretch()

        # ── Preview ──
        preview = QWidget()
        preview_layout = QVBoxLayout(preview)
        self._preview_image = QLabel()
        self._preview_image.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._preview_image.setMinimumHeight(_PREVIEW_SIZE)
        preview_layout.addWidget(self._preview_image, stretch=1)
        self._again_label = QLabel()
        self._again_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._again_label.setWordWrap(True)
        self._again_label.linkActivated.connect(self._on_link_activated)
        preview_layout.addWidget(self._again_label)

        # Order must match ZonePage
        self._stack.addWidget(prompt)
        self._stack.addWidget(pending)
        self._stack.addWidget(preview)

    def retranslate_ui(self) -> None:
        s = t()
        self._prompt_label.setText(s.drop_prompt)
        self._upload_link.setText(_link(s.drop_upload_link))
        self._pending_label.setText(s.drop_analyzing)
        self._again_label.setText(
            f"{s.drop_again_prefix} {_link(s.drop_again_link)} {s.drop_again_suffix}"
        )

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def page(self) -> ZonePage:
        return ZonePage(self._stack.currentIndex())

    def set_page(self, page: ZonePage) -> None:
        self._stack.setCurrentIndex(int(page))

    def set_preview(self, pixmap: QPixmap | None) -> None:
        if pixmap is None or pixmap.isNull():
            self._preview_image.clear()
            self._pending_thumb.clear()
            return
        self._preview_image.setPixmap(self._scaled(pixmap, _PREVIEW_SIZE))
        self._pending_thumb.setPixmap(self._scaled(pixmap, _PENDING_THUMB_SIZE))

    def set_busy(self, busy: bool) -> None:
        """While busy the file dialog is unavailable; drops still work."""
        self._busy = busy
        self._upload_link.setEnabled(not busy)
        self._again_label.setEnabled(not busy)

    def open_file_dialog(self) -> None:
        if self._busy:
            return
        s = t()
        path, _ = QFileDialog.getOpenFileName(
            self,
            s.open_image_title,
            "",
            f"{s.image_filter} ({_IMAGE_PATTERNS})",
        )
        if path:
            self._emit_first([selected_file_from_path(Path(path))])

    def paste_from_clipboard(self) -> None:
        clipboard = QApplication.clipboard()
        if clipboard is None:
            return
        self._emit_first(files_from_mime_data(clipboard.mimeData()))

    # ── Qt events ────────────────────────────────────────────────────────

    def dragEnterEvent(self, event: QDragEnterEvent | None) -> None:
        if event is None:
            return
        mime = event.mimeData()
        if mime is not None and (mime.hasUrls() or mime.hasImage()):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event: QDragMoveEvent | None) -> None:
        if event is not None:
            event.acceptProposedAction()

    def dropEvent(self, event: QDropEvent | None) -> None:
        if event is None:
            return
        event.acceptProposedAction()
        self._emit_first(files_from_mime_data(event.mimeData()))

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.matches(QKeySequence.StandardKey.Paste):
            self.paste_from_clipboard()
            event.accept()
            return
        super().keyPressEvent(event)

    # ── Internals ────────────────────────────────────────────────────────

    def _on_link_activated(self, _href: str) -> None:
        self.open_file_dialog()

    def _emit_first(self, files: list[SelectedFile]) -> None:
        file = first_file(files)
        if file is not None:
            self.file_selected.emit(file)

    @staticmethod
    def _scaled(pixmap: QPixmap, size: int) -> QPixmap:
        return pixmap.scaled(
            size,
            size,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
