"""MoveResultPanel — best-move suggestions for both sides."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from boardshot.core.moves import Side
from boardshot.ui.i18n import t
from boardshot.ui.presentation import SideLine


def _bold_font(point_size: int) -> QFont:
    """Application default family at *point_size*, bold."""
    font = QFont()
    font.setPointSize(point_size)
    font.setWeight(QFont.Weight.Bold)
    return font


class _SideBlock(QWidget):
    """Headline plus optional comment line for one side."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 6)
        layout.setSpacing(2)

        self._headline = QLabel()
        self._headline.setFont(_bold_font(11))
        self._headline.setWordWrap(True)
        layout.addWidget(self._headline)

        self._comments = QLabel()
        self._comments.setWordWrap(True)
        self._comments.setStyleSheet("color: #9a9a9a; font-size: 12px;")
        layout.addWidget(self._comments)

    def set_line(self, line: SideLine) -> None:
        self._headline.setText(line.headline)
        self._comments.setText(line.comments or "")
        self._comments.setVisible(bool(line.comments))

    def headline(self) -> str:
        return self._headline.text()

    def comments(self) -> str:
        return self._comments.text()


class MoveResultPanel(QFrame):
    """Shows one block per side; hidden while there is no result."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("resultPanel")
        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(6)

        self._title = QLabel()
        self._title.setFont(_bold_font(12))
        root.addWidget(self._title)

        self._blocks: dict[Side, _SideBlock] = {}
        for side in Side:
            block = _SideBlock()
            self._blocks[side] = block
            root.addWidget(block)

        self.retranslate_ui()
        self.setVisible(False)

    def retranslate_ui(self) -> None:
        self._title.setText(t().results_header)

    def set_lines(self, lines: tuple[SideLine, ...] | None) -> None:
        if lines is None:
            self.setVisible(False)
            return
        for line in lines:
            self._blocks[line.side].set_line(line)
        self.setVisible(True)

    def block(self, side: Side) -> _SideBlock:
        return self._blocks[side]
