"""SummaryPanel — legend, board summary and the list of search matches."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QFormLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from pinlocator.navigation.render import HIGHLIGHT_COLOR, DisplayModel
from pinlocator.ui.i18n import t


def _dot_icon(color: str, size: int = 12) -> QIcon:
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setBrush(QBrush(QColor(color)))
    painter.setPen(Qt.PenStyle.NoPen)
    painter.drawEllipse(1, 1, size - 2, size - 2)
    painter.end()
    return QIcon(pixmap)


class SummaryPanel(QWidget):
    """Sidebar with the type legend, board dimensions and match results.

    Signals:
        match_selected(int): Index of the clicked row in the match list.
    """

    match_selected = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        header_font = QFont("Adwaita Sans", 11, QFont.Weight.Bold)

        self._legend_header = QLabel()
        self._legend_header.setFont(header_font)
        layout.addWidget(self._legend_header)
        self._legend = QListWidget()
        self._legend.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._legend.setMaximumHeight(160)
        layout.addWidget(self._legend)

        self._summary_header = QLabel()
        self._summary_header.setFont(header_font)
        layout.addWidget(self._summary_header)

        form = QFormLayout()
        form.setSpacing(4)
        self._total_label, self._total_value = QLabel(), QLabel()
        self._width_label, self._width_value = QLabel(), QLabel()
        self._height_label, self._height_value = QLabel(), QLabel()
        self._date_label, self._date_value = QLabel(), QLabel()
        self._total_value.setFont(QFont("Adwaita Sans", 18, QFont.Weight.Black))
        for label, value in (
            (self._total_label, self._total_value),
            (self._width_label, self._width_value),
            (self._height_label, self._height_value),
            (self._date_label, self._date_value),
        ):
            value.setAlignment(Qt.AlignmentFlag.AlignRight)
            form.addRow(label, value)
        layout.addLayout(form)

        self._matches_header = QLabel()
        self._matches_header.setFont(header_font)
        layout.addWidget(self._matches_header)
        self._matches = QListWidget()
        self._matches.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self._matches, stretch=1)

    def retranslate_ui(self) -> None:
        s = t()
        self._legend_header.setText(s.legend_header)
        self._summary_header.setText(s.summary_header)
        self._total_label.setText(s.summary_total)
        self._width_label.setText(s.summary_width)
        self._height_label.setText(s.summary_height)
        self._date_label.setText(s.summary_date)
        self._matches_header.setText(s.matches_header)

    # ── Public API ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self._legend.clear()
        self._matches.clear()
        for value in (
            self._total_value,
            self._width_value,
            self._height_value,
            self._date_value,
        ):
            value.clear()

    def set_model(self, model: DisplayModel | None) -> None:
        if model is None:
            self.clear()
            return
        self._set_legend(model)
        summary = model.summary
        self._total_value.setText(str(summary.total_nails))
        self._width_value.setText(summary.dimension_text(summary.width))
        self._height_value.setText(summary.dimension_text(summary.height))
        self._date_value.setText(summary.date or "—")
        self._set_matches(model)

    @property
    def match_rows(self) -> int:
        return self._matches.count()

    @property
    def legend_rows(self) -> int:
        return self._legend.count()

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_legend(self, model: DisplayModel) -> None:
        self._legend.clear()
        for entry in model.legend:
            self._legend.addItem(QListWidgetItem(_dot_icon(entry.color), entry.type))
        searching = QListWidgetItem(_dot_icon(HIGHLIGHT_COLOR), t().legend_searching)
        searching.setForeground(QBrush(QColor(HIGHLIGHT_COLOR)))
        self._legend.addItem(searching)

    def _set_matches(self, model: DisplayModel) -> None:
        self._matches.clear()
        for idx, point in enumerate(model.matches):
            text = f"{point.id}  [{point.type}]\n{t().match_net.format(net=point.net_name)}"
            item = QListWidgetItem(text)
            item.setData(Qt.ItemDataRole.UserRole, idx)
            if idx == model.active_index:
                item.setForeground(QBrush(QColor(HIGHLIGHT_COLOR)))
            self._matches.addItem(item)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        index = item.data(Qt.ItemDataRole.UserRole)
        if index is not None:
            self.match_selected.emit(int(index))
