"""MainWindow — search bar, nail map and sidebar in one window."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QDragEnterEvent, QDropEvent
from PyQt6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pinlocator.core.models import Dataset
from pinlocator.navigation.navigator import Navigator
from pinlocator.navigation.search import SearchMode
from pinlocator.navigation.state import SessionState
from pinlocator.ui.file_io import on_open_file, open_nail_file
from pinlocator.ui.i18n import t
from pinlocator.ui.map.map_view import MapView
from pinlocator.ui.panels.control_panel import ControlPanel
from pinlocator.ui.panels.search_panel import SearchPanel
from pinlocator.ui.panels.summary_panel import SummaryPanel


class MainWindow(QMainWindow):
    """Main application window for PinLocator."""

    def __init__(self, navigator: Navigator | None = None) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(900, 640)
        self.resize(1200, 800)
        self.setAcceptDrops(True)

        self._navigator = navigator if navigator is not None else Navigator()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_navigator_events()
        self._refresh(self._navigator.state)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        outer = QVBoxLayout(central)
        outer.setContentsMargins(6, 6, 6, 6)
        outer.setSpacing(6)

        self._search_panel = SearchPanel()
        outer.addWidget(self._search_panel)

        root = QHBoxLayout()
        root.setSpacing(6)

        # Map (center)
        self._map_view = MapView()
        root.addWidget(self._map_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._summary_panel = SummaryPanel()
        right.addWidget(self._summary_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)
        outer.addLayout(root, stretch=1)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label, stretch=1)
        self._zoom_label = QLabel()
        self._status.addPermanentWidget(self._zoom_label)
        self._count_label = QLabel()
        self._status.addPermanentWidget(self._count_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # File menu
        self._menu_file = menu_bar.addMenu(s.menu_file)
        assert self._menu_file is not None

        self._act_open = QAction(s.menu_open, self)
        self._act_open.setShortcut("Ctrl+O")
        self._act_open.triggered.connect(self._on_open)
        self._menu_file.addAction(self._act_open)

        self._act_close = QAction(s.menu_close, self)
        self._act_close.setShortcut("Ctrl+W")
        self._act_close.triggered.connect(self._on_close)
        self._menu_file.addAction(self._act_close)

        self._menu_file.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu(s.menu_view)
        assert self._menu_view is not None

        self._act_zoom_in = QAction(s.menu_zoom_in, self)
        self._act_zoom_in.setShortcut("Ctrl++")
        self._act_zoom_in.triggered.connect(self._navigator.zoom_in)
        self._menu_view.addAction(self._act_zoom_in)

        self._act_zoom_out = QAction(s.menu_zoom_out, self)
        self._act_zoom_out.setShortcut("Ctrl+-")
        self._act_zoom_out.triggered.connect(self._navigator.zoom_out)
        self._menu_view.addAction(self._act_zoom_out)

        self._act_reset = QAction(s.menu_reset_view, self)
        self._act_reset.setShortcut("Ctrl+0")
        self._act_reset.triggered.connect(self._navigator.reset_view)
        self._menu_view.addAction(self._act_reset)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        nav = self._navigator
        self._search_panel.query_changed.connect(nav.set_query)
        self._search_panel.mode_changed.connect(self._on_mode_changed)
        self._search_panel.cycle_requested.connect(nav.cycle)

        self._control_panel.zoom_in_clicked.connect(nav.zoom_in)
        self._control_panel.zoom_out_clicked.connect(nav.zoom_out)
        self._control_panel.reset_clicked.connect(nav.reset_view)
        self._control_panel.labels_toggled.connect(nav.set_show_labels)
        self._control_panel.pin_scale_changed.connect(nav.set_pin_scale)

        self._summary_panel.match_selected.connect(nav.select_match)

        self._map_view.wheel_scrolled.connect(nav.wheel)
        self._map_view.drag_started.connect(nav.begin_drag)
        self._map_view.drag_moved.connect(nav.drag_to)
        self._map_view.drag_ended.connect(nav.end_drag)

    def _connect_navigator_events(self) -> None:
        events = self._navigator.events
        if self._refresh not in events.on_state_changed:
            events.on_state_changed.append(self._refresh)

    # ── Handlers ─────────────────────────────────────────────────────────

    def _on_open(self) -> None:
        on_open_file(self, file_dialog_cls=QFileDialog, message_box_cls=QMessageBox)

    def open_path(self, file_path: Path) -> bool:
        return open_nail_file(self, file_path, message_box_cls=QMessageBox)

    def _on_close(self) -> None:
        """Unload the current file and return to the drop screen."""
        self._navigator.close()
        self.setWindowTitle(t().window_title)
        self._search_panel.clear_query()
        self._set_status(t().status_ready)

    def _on_mode_changed(self, mode: str) -> None:
        self._navigator.set_mode(SearchMode(mode))

    def _after_load(self, dataset: Dataset) -> None:
        self.setWindowTitle(f"{t().window_title} — {dataset.metadata.file_name}")
        self._search_panel.clear_query()
        self._control_panel.set_pin_scale(self._navigator.state.display.pin_scale)

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def _refresh(self, state: SessionState) -> None:
        """Redraw everything from the navigator's current display model."""
        model = self._navigator.display()
        self._map_view.set_model(model)
        self._summary_panel.set_model(model)
        self._control_panel.set_map_active(model is not None)
        self._act_close.setEnabled(model is not None)
        if model is None:
            self._search_panel.set_counter("")
            self._zoom_label.clear()
            self._count_label.clear()
            return
        self._search_panel.set_counter(model.match_counter)
        self._zoom_label.setText(model.zoom_text)
        self._count_label.setText(model.count_text)
        self._control_panel.set_pin_scale(state.display.pin_scale)

    # ── Drag and drop ────────────────────────────────────────────────────

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:
        mime = event.mimeData()
        if mime is not None and mime.hasUrls():
            event.acceptProposedAction()
            return
        event.ignore()

    def dropEvent(self, event: QDropEvent) -> None:
        mime = event.mimeData()
        if mime is None:
            return
        for url in mime.urls():
            if url.isLocalFile():
                self.open_path(Path(url.toLocalFile()))
                event.setDropAction(Qt.DropAction.CopyAction)
                event.accept()
                return
        event.ignore()
