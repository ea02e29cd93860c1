"""SearchPanel — mode toggle, query box and match counter."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QWidget,
)

from pinlocator.navigation.search import SearchMode
from pinlocator.ui.i18n import t


class SearchPanel(QWidget):
    """Query input; Enter asks for the next match.

    Signals:
        query_changed(str): Query text edited.
        mode_changed(str): New :class:`SearchMode` value.
        cycle_requested(): Enter pressed in the query box.
    """

    query_changed = pyqtSignal(str)
    mode_changed = pyqtSignal(str)
    cycle_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._mode = SearchMode.BY_ID
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10, QFont.Weight.Bold)

        self._btn_id = QPushButton()
        self._btn_net = QPushButton()
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        for btn in (self._btn_id, self._btn_net):
            btn.setCheckable(True)
            btn.setFont(btn_font)
            btn.setMinimumHeight(30)
            self._mode_group.addButton(btn)
            layout.addWidget(btn)
        self._btn_id.setChecked(True)
        self._btn_id.clicked.connect(lambda: self._set_mode(SearchMode.BY_ID))
        self._btn_net.clicked.connect(lambda: self._set_mode(SearchMode.BY_NET))

        self._edit = QLineEdit()
        self._edit.setClearButtonEnabled(True)
        self._edit.setMinimumWidth(260)
        self._edit.textChanged.connect(self.query_changed)
        self._edit.returnPressed.connect(self.cycle_requested)
        layout.addWidget(self._edit, stretch=1)

        self._counter = QLabel()
        self._counter.setFont(QFont("Adwaita Mono", 10, QFont.Weight.Bold))
        self._counter.setMinimumWidth(60)
        layout.addWidget(self._counter)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_id.setText(s.search_by_id)
        self._btn_net.setText(s.search_by_net)
        self._edit.setPlaceholderText(
            s.search_placeholder_net
            if self._mode == SearchMode.BY_NET
            else s.search_placeholder_id
        )

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def mode(self) -> SearchMode:
        return self._mode

    @property
    def query(self) -> str:
        return self._edit.text()

    def set_counter(self, text: str) -> None:
        self._counter.setText(text)

    def clear_query(self) -> None:
        """Empty the query box without emitting ``query_changed``."""
        was_blocked = self._edit.blockSignals(True)
        self._edit.clear()
        self._edit.blockSignals(was_blocked)
        self._counter.clear()

    def _set_mode(self, mode: SearchMode) -> None:
        if mode == self._mode:
            return
        self._mode = mode
        self.retranslate_ui()
        self.mode_changed.emit(str(mode))
