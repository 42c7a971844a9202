"""SettingsDialog — application-wide settings with a category sidebar."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from boardshot.ui.i18n import LANGUAGES, t

DEFAULT_SERVER_URL = "http://127.0.0.1:8000"

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Server
    server_url: str = DEFAULT_SERVER_URL
    request_timeout_s: int = 60

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults, with the server URL overridable by ``BOARDSHOT_SERVER_URL``."""
        env = os.environ if environ is None else environ
        return cls(server_url=env.get("BOARDSHOT_SERVER_URL", "").strip() or DEFAULT_SERVER_URL)


# ── Individual settings pages ────────────────────────────────────────────────


class _GeneralPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        idx = self._lang_combo.findText(settings.language)
        self._lang_combo.setCurrentIndex(max(0, idx))
        self._form.addRow(self._lang_label, self._lang_combo)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_language)
        self._lang_label.setText(s.settings_language)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()


class _ServerPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet("font-size: 16px; font-weight: bold; color: #e0e0e0;")
        self._form.addRow(self._title)

        self._url_label = QLabel()
        self._url_edit = QLineEdit(settings.server_url)
        self._url_edit.setMinimumWidth(260)
        self._form.addRow(self._url_label, self._url_edit)

        self._timeout_label = QLabel()
        self._timeout_spin = QSpinBox()
        self._timeout_spin.setRange(5, 600)
        self._timeout_spin.setSingleStep(5)
        self._timeout_spin.setValue(settings.request_timeout_s)
        self._form.addRow(self._timeout_label, self._timeout_spin)

        self._note = QLabel()
        self._note.setWordWrap(True)
        self._note.setStyleSheet("color: #888; font-size: 11px;")
        self._form.addRow(self._note)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_server)
        self._url_label.setText(s.settings_server_url)
        self._timeout_label.setText(s.settings_timeout)
        self._timeout_spin.setSuffix(s.settings_timeout_suffix)
        self._note.setText(s.settings_server_note)

    def apply(self, settings: AppSettings) -> None:
        url = self._url_edit.text().strip()
        if url:
            settings.server_url = url
        settings.request_timeout_s = self._timeout_spin.value()


# ── Main dialog ──────────────────────────────────────────────────────────────

_PAGE_FACTORIES: list[tuple[str, type[_GeneralPage | _ServerPage]]] = [
    ("settings_language", _GeneralPage),
    ("settings_server", _ServerPage),
]


class SettingsDialog(QDialog):
    """Modal settings dialog with a left category list and stacked pages."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(560, 320)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = settings
        self._pages: list[_GeneralPage | _ServerPage] = []
        self._page_attr_names: list[str] = []

        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #1e1e1e; border: none;"
            "  border-right: 1px solid #3c3c3c; }"
            "QListWidget::item { padding: 10px 14px; color: #c0c0c0; font-size: 13px; }"
            "QListWidget::item:selected { background: #264f78; color: #ffffff; }"
        )

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: #2b2b2b;")

        for attr, PageClass in _PAGE_FACTORIES:
            self._page_attr_names.append(attr)
            item = QListWidgetItem()
            item.setTextAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            self._sidebar.addItem(item)

            page = PageClass(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)

        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

        root.addWidget(self._sidebar)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.setSpacing(0)
        right.addWidget(self._stack)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        right.addWidget(self._btn_box)

        right_widget = QWidget()
        right_widget.setLayout(right)
        root.addWidget(right_widget)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        for i, attr in enumerate(self._page_attr_names):
            item = self._sidebar.item(i)
            if item is not None:
                item.setText(getattr(s, attr))
        for page in self._pages:
            page.retranslate_ui()

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
