"""Internationalisation strings for the Boardshot UI.

Usage::

    from boardshot.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_file)        # "Файл"
    print(t().side_move.format(side=t().side_white, frm="e2", to="e4"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open_image: str
    menu_paste_image: str
    menu_quit: str
    menu_settings: str
    menu_settings_action: str

    status_ready: str
    status_analyzing: str  # e.g. "Analyzing {name}..."
    status_done: str
    status_failed: str
    status_rejected: str  # e.g. "{name} is not an image"

    # ── Drop zone ────────────────────────────────────────────────────────
    drop_prompt: str
    drop_upload_link: str
    drop_again_prefix: str  # "Drop, paste, or"
    drop_again_link: str  # "click to upload"
    drop_again_suffix: str  # "another image."
    drop_analyzing: str
    open_image_title: str
    image_filter: str

    # ── Results ──────────────────────────────────────────────────────────
    results_header: str
    side_white: str
    side_black: str
    side_move: str  # "{side}: {frm} to {to}"
    side_no_move: str  # "{side}: No move found or suggested."

    # ── Errors ───────────────────────────────────────────────────────────
    error_request: str  # "Failed to get moves: {msg}"
    error_read: str

    # ── Settings dialog ──────────────────────────────────────────────────
    settings_title: str
    settings_language: str
    settings_server: str
    settings_server_url: str
    settings_timeout: str
    settings_timeout_suffix: str
    settings_server_note: str


_EN = Strings(
    window_title="Boardshot",
    menu_file="File",
    menu_open_image="Open Image…",
    menu_paste_image="Paste Image",
    menu_quit="Quit",
    menu_settings="Settings",
    menu_settings_action="Preferences…",
    status_ready="Ready",
    status_analyzing="Analyzing {name}...",
    status_done="Analysis complete",
    status_failed="Analysis failed",
    status_rejected="{name} is not an image",
    drop_prompt="Drop an image here, paste from clipboard, or",
    drop_upload_link="Upload a file",
    drop_again_prefix="Drop, paste, or",
    drop_again_link="click to upload",
    drop_again_suffix="another image.",
    drop_analyzing="Analyzing Image...",
    open_image_title="Open Chessboard Image",
    image_filter="Images",
    results_header="Best Moves:",
    side_white="White",
    side_black="Black",
    side_move="{side}: {frm} to {to}",
    side_no_move="{side}: No move found or suggested.",
    error_request="Failed to get moves: {msg}",
    error_read="Failed to read image file.",
    settings_title="Settings",
    settings_language="Language",
    settings_server="Server",
    settings_server_url="Server URL:",
    settings_timeout="Request timeout:",
    settings_timeout_suffix=" s",
    settings_server_note="Changes apply to the next image you submit.",
)

_RU = Strings(
    window_title="Boardshot",
    menu_file="Файл",
    menu_open_image="Открыть изображение…",
    menu_paste_image="Вставить изображение",
    menu_quit="Выход",
    menu_settings="Настройки",
    menu_settings_action="Параметры…",
    status_ready="Готово",
    status_analyzing="Анализ {name}...",
    status_done="Анализ завершён",
    status_failed="Ошибка анализа",
    status_rejected="{name} не является изображением",
    drop_prompt="Перетащите изображение, вставьте из буфера обмена или",
    drop_upload_link="Загрузите файл",
    drop_again_prefix="Перетащите, вставьте или",
    drop_again_link="нажмите, чтобы загрузить",
    drop_again_suffix="другое изображение.",
    drop_analyzing="Анализ изображения...",
    open_image_title="Открыть изображение доски",
    image_filter="Изображения",
    results_header="Лучшие ходы:",
    side_white="Белые",
    side_black="Чёрные",
    side_move="{side}: {frm} → {to}",
    side_no_move="{side}: ход не найден или не предложен.",
    error_request="Не удалось получить ходы: {msg}",
    error_read="Не удалось прочитать файл изображения.",
    settings_title="Настройки",
    settings_language="Язык",
    settings_server="Сервер",
    settings_server_url="Адрес сервера:",
    settings_timeout="Тайм-аут запроса:",
    settings_timeout_suffix=" с",
    settings_server_note="Изменения вступят в силу со следующего изображения.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
