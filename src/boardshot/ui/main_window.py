"""MainWindow — top-level window assembling the intake zone and results."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence, QPixmap
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from boardshot.core.moves import MoveResult
from boardshot.ui.dialogs.settings_dialog import AppSettings, SettingsDialog
from boardshot.ui.drop_zone import ImageDropZone
from boardshot.ui.i18n import set_language, t
from boardshot.ui.intake import SelectedFile, is_image, preview_pixmap
from boardshot.ui.move_request import MoveRequestSession
from boardshot.ui.panels.result_panel import MoveResultPanel
from boardshot.ui.presentation import present
from boardshot.ui.upload_state import Failed, Idle, Pending, Succeeded, UploadState

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Boardshot."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(440, 520)
        self.resize(520, 680)

        self._settings = settings or AppSettings.from_env()
        self._state: UploadState = Idle()
        self._current_file: SelectedFile | None = None
        self._current_pixmap: QPixmap | None = None

        self._session = MoveRequestSession(
            on_finished=self._on_moves_ready,
            on_failed=self._on_request_failed,
            server_url=self._settings.server_url,
            timeout_s=self._settings.request_timeout_s,
            parent=self,
        )

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._session.setup()
        self._apply_state(Idle())

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        self._drop_zone = ImageDropZone()
        root.addWidget(self._drop_zone, stretch=1)

        self._error_label = QLabel()
        self._error_label.setObjectName("errorLabel")
        self._error_label.setWordWrap(True)
        self._error_label.setVisible(False)
        root.addWidget(self._error_label)

        self._result_panel = MoveResultPanel()
        root.addWidget(self._result_panel)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_file = menu_bar.addMenu(s.menu_file)
        assert self._menu_file is not None

        self._act_open = QAction(s.menu_open_image, self)
        self._act_open.setShortcut(QKeySequence.StandardKey.Open)
        self._act_open.triggered.connect(self._drop_zone.open_file_dialog)
        self._menu_file.addAction(self._act_open)

        self._act_paste = QAction(s.menu_paste_image, self)
        self._act_paste.setShortcut(QKeySequence.StandardKey.Paste)
        self._act_paste.triggered.connect(self._drop_zone.paste_from_clipboard)
        self._menu_file.addAction(self._act_paste)

        self._menu_file.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_settings = QAction(s.menu_settings_action, self)
        self._act_settings.setShortcut("Ctrl+,")
        self._act_settings.triggered.connect(self._on_settings)
        self._menu_settings.addAction(self._act_settings)

    def _connect_signals(self) -> None:
        self._drop_zone.file_selected.connect(self._on_file_selected)

    # ── Intake ───────────────────────────────────────────────────────────

    def _on_file_selected(self, file_obj: object) -> None:
        if not isinstance(file_obj, SelectedFile):
            return
        file = file_obj

        if not is_image(file):
            _LOGGER.info("Rejected %s (%s)", file.name, file.mime_type)
            self._session.cancel()
            self._current_file = None
            self._current_pixmap = None
            self._apply_state(Idle())
            self._status_label.setText(t().status_rejected.format(name=file.name))
            return

        # Preview goes up before encoding or any network traffic.
        self._current_file = file
        self._current_pixmap = preview_pixmap(file)
        self._apply_state(Pending(preview=file))
        self._status_label.setText(t().status_analyzing.format(name=file.name))
        self._session.submit(file)

    # ── Request callbacks ────────────────────────────────────────────────

    def _on_moves_ready(self, result: MoveResult) -> None:
        if self._current_file is None:
            return
        self._apply_state(Succeeded(preview=self._current_file, result=result))
        self._status_label.setText(t().status_done)

    def _on_request_failed(self, message: str) -> None:
        self._apply_state(Failed(preview=self._current_file, message=message))
        self._status_label.setText(t().status_failed)

    # ── Rendering ────────────────────────────────────────────────────────

    @property
    def state(self) -> UploadState:
        return self._state

    def _apply_state(self, state: UploadState) -> None:
        self._state = state
        view = present(state)

        self._drop_zone.set_preview(self._current_pixmap if view.preview else None)
        self._drop_zone.set_page(view.page)
        self._drop_zone.set_busy(view.busy)

        self._error_label.setText(view.error or "")
        self._error_label.setVisible(view.error is not None)

        self._result_panel.set_lines(view.sides)

    # ── Settings ─────────────────────────────────────────────────────────

    def _on_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec():
            self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        # Server (applied to subsequent requests; doesn't interrupt current)
        self._session.set_server(s.server_url, s.request_timeout_s)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_file.setTitle(s.menu_file)
        self._act_open.setText(s.menu_open_image)
        self._act_paste.setText(s.menu_paste_image)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_settings.setText(s.menu_settings_action)
        self._drop_zone.retranslate_ui()
        self._result_panel.retranslate_ui()
        # Side lines are rendered text; rebuild them in the new locale.
        self._apply_state(self._state)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._session.shutdown()
        super().closeEvent(event)
