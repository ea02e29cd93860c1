"""Visual theme constants and QSS styles for PinLocator."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class MapTheme:
    """Colour scheme for the nail map."""

    background: QColor
    grid_minor: QColor
    grid_major: QColor
    label: QColor
    active_label: QColor
    active_stroke: QColor  # outline of the focused nail
    hint_text: QColor

    @classmethod
    def default(cls) -> MapTheme:
        return cls(
            background=QColor(15, 23, 42),  # slate-900
            grid_minor=QColor(255, 255, 255, 8),
            grid_major=QColor(255, 255, 255, 15),
            label=QColor(255, 255, 255, 204),
            active_label=QColor("#ef4444"),
            active_stroke=QColor(255, 255, 255),
            hint_text=QColor(148, 163, 184),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

# Slate palette shared with MapTheme; the focus accent is the highlight red.
APP_STYLE = """
QMainWindow, QStatusBar {
    background: #0f172a;
}
QStatusBar QLabel {
    color: #94a3b8;
    padding: 0 6px;
}

QLabel, QCheckBox {
    color: #cbd5e1;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e293b;
    color: #f1f5f9;
    border: 1px solid #334155;
    border-radius: 6px;
    padding: 6px 10px;
    font-size: 14px;
    selection-background-color: #475569;
}
QLineEdit:focus {
    border-color: #ef4444;
}

QListWidget {
    background: #111827;
    color: #e2e8f0;
    border: 1px solid #1e293b;
    border-radius: 6px;
    font-family: "Adwaita Mono", "Consolas", monospace;
    font-size: 12px;
}
QListWidget::item {
    padding: 3px 2px;
}
QListWidget::item:hover {
    background: #1e293b;
}

QPushButton {
    background: #1e293b;
    color: #e2e8f0;
    border: 1px solid #334155;
    border-radius: 6px;
    padding: 5px 12px;
}
QPushButton:hover {
    border-color: #64748b;
}
QPushButton:checked {
    background: #ef4444;
    border-color: #ef4444;
    color: #ffffff;
}
QPushButton:disabled, QCheckBox:disabled {
    color: #475569;
}

QSlider::groove:horizontal {
    height: 4px;
    background: #334155;
    border-radius: 2px;
}
QSlider::handle:horizontal {
    width: 14px;
    margin: -5px 0;
    background: #ef4444;
    border-radius: 7px;
}

QMenuBar, QMenu {
    background: #0f172a;
    color: #e2e8f0;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #334155;
}
QMenu {
    border: 1px solid #1e293b;
}
"""
