"""Internationalisation strings for the PinLocator UI.

Usage::

    from pinlocator.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_open)       # "Открыть…"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_open: str
    menu_close: str
    menu_quit: str
    menu_view: str
    menu_zoom_in: str
    menu_zoom_out: str
    menu_reset_view: str

    status_ready: str
    status_loaded: str  # e.g. "Loaded {name}: {count} nails"
    status_load_failed: str  # e.g. "Failed to load {name}"
    drop_hint: str

    # File dialog
    open_title: str
    nail_filter: str
    all_files: str
    open_failed: str  # "Could not load {name}:\n{exc}"

    # ── SearchPanel ──────────────────────────────────────────────────────
    search_by_id: str
    search_by_net: str
    search_placeholder_id: str
    search_placeholder_net: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_zoom_in: str
    btn_zoom_out: str
    btn_reset: str
    show_ids: str
    pin_size: str

    # ── SummaryPanel ─────────────────────────────────────────────────────
    legend_header: str
    legend_searching: str
    summary_header: str
    summary_total: str
    summary_width: str
    summary_height: str
    summary_date: str
    matches_header: str
    match_net: str  # "Net: {net}"


_EN = Strings(
    window_title="PinLocator",
    menu_file="&File",
    menu_open="&Open…",
    menu_close="&Close",
    menu_quit="&Quit",
    menu_view="&View",
    menu_zoom_in="Zoom &In",
    menu_zoom_out="Zoom &Out",
    menu_reset_view="&Reset View",
    status_ready="Drop a nail file or use File → Open",
    status_loaded="Loaded {name}: {count} nails",
    status_load_failed="Failed to load {name}",
    drop_hint="Drop a Tebo-ICT nail file here",
    open_title="Open Nail File",
    nail_filter="Nail files",
    all_files="All files (*)",
    open_failed="Could not load {name}:\n{exc}",
    search_by_id="Nail ID",
    search_by_net="Net Name",
    search_placeholder_id="Search nail ID, Enter for next",
    search_placeholder_net="Search net name, Enter for next",
    btn_zoom_in="+",
    btn_zoom_out="−",
    btn_reset="Reset",
    show_ids="Show IDs",
    pin_size="Pin size",
    legend_header="Legend",
    legend_searching="Searching",
    summary_header="Layout Summary",
    summary_total="Total pins",
    summary_width="Width",
    summary_height="Height",
    summary_date="Date",
    matches_header="Match Results",
    match_net="Net: {net}",
)

_RU = Strings(
    window_title="PinLocator",
    menu_file="&Файл",
    menu_open="&Открыть…",
    menu_close="&Закрыть",
    menu_quit="&Выход",
    menu_view="&Вид",
    menu_zoom_in="&Приблизить",
    menu_zoom_out="&Отдалить",
    menu_reset_view="&Сбросить вид",
    status_ready="Перетащите файл или выберите Файл → Открыть",
    status_loaded="Загружен {name}: {count} игл",
    status_load_failed="Не удалось загрузить {name}",
    drop_hint="Перетащите сюда файл Tebo-ICT",
    open_title="Открыть файл игл",
    nail_filter="Файлы игл",
    all_files="Все файлы (*)",
    open_failed="Не удалось загрузить {name}:\n{exc}",
    search_by_id="ID иглы",
    search_by_net="Цепь",
    search_placeholder_id="Поиск по ID, Enter — следующий",
    search_placeholder_net="Поиск по цепи, Enter — следующий",
    btn_zoom_in="+",
    btn_zoom_out="−",
    btn_reset="Сброс",
    show_ids="Показывать ID",
    pin_size="Размер игл",
    legend_header="Легенда",
    legend_searching="Поиск",
    summary_header="Сводка",
    summary_total="Всего игл",
    summary_width="Ширина",
    summary_height="Высота",
    summary_date="Дата",
    matches_header="Совпадения",
    match_net="Цепь: {net}",
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
