"""QSS styles for Boardshot."""

from __future__ import annotations

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
}

QFrame#dropZone {
    background: #262626;
    border: 2px dashed #8a8a8a;
    border-radius: 12px;
}
QFrame#dropZone:focus {
    border-color: #c77dff;
}

QFrame#resultPanel {
    background: #303030;
    border: 1px solid #4a4a4a;
    border-radius: 8px;
}

QLabel#errorLabel {
    color: #ef4444;
    font-size: 13px;
}

QProgressBar {
    background: #333;
    border: none;
    border-radius: 4px;
}
QProgressBar::chunk {
    background: #c77dff;
    border-radius: 4px;
}

QLineEdit, QSpinBox, QComboBox {
    background: #1e1e1e;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    padding: 4px 6px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
