"""Navigator — owns the active dataset and session state.

Coordinates: parser, search, viewport, renderer.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pinlocator.core.models import Dataset, Point
from pinlocator.core.parser import load_nail_file, parse_nail_file
from pinlocator.navigation import state as st
from pinlocator.navigation.render import DisplayModel, render
from pinlocator.navigation.search import SearchMode
from pinlocator.navigation.state import SessionState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

DatasetCallback = Callable[[Dataset], None]
StateCallback = Callable[[SessionState], None]
FocusCallback = Callable[[Point], None]


@dataclass
class NavigatorEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_dataset_loaded: list[DatasetCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_focus_changed: list[FocusCallback] = field(default_factory=list)


# ── Navigator ────────────────────────────────────────────────────────────────


class Navigator:
    """Applies UI events to the session state and notifies listeners.

    Without a loaded dataset only the query and search mode can change;
    every other command is a no-op. A failed load raises and leaves the
    previous dataset and state untouched.

    Instances must stay weak-referenceable: Qt signals connect straight to
    the command methods.
    """

    __slots__ = ("__weakref__", "_dataset", "_state", "events")

    def __init__(self) -> None:
        self._dataset: Dataset | None = None
        self._state = SessionState()
        self.events = NavigatorEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def dataset(self) -> Dataset | None:
        return self._dataset

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def matches(self) -> list[Point]:
        return st.current_matches(self._dataset, self._state)

    @property
    def focused_point(self) -> Point | None:
        focus_id = self._state.search.focus_id
        if self._dataset is None or focus_id is None:
            return None
        return self._dataset.find(focus_id)

    def display(self) -> DisplayModel | None:
        if self._dataset is None:
            return None
        return render(self._dataset, self._state)

    # ── Loading ──────────────────────────────────────────────────────────

    def load_text(self, text: str, file_name: str) -> Dataset:
        dataset = parse_nail_file(text, file_name)
        self._install(dataset)
        return dataset

    def load_file(self, file_path: Path) -> Dataset:
        dataset = load_nail_file(file_path)
        self._install(dataset)
        return dataset

    def _install(self, dataset: Dataset) -> None:
        self._dataset = dataset
        self._state = st.on_load(self._state, dataset)
        _LOGGER.debug(
            "Dataset %s installed, bounds %s", dataset.metadata.file_name, dataset.bounds
        )
        for cb in self.events.on_dataset_loaded:
            cb(dataset)
        self._emit_state()

    def close(self) -> None:
        """Unload the dataset; the search mode survives, all else resets."""
        if self._dataset is None:
            return
        _LOGGER.debug("Dataset %s closed", self._dataset.metadata.file_name)
        self._dataset = None
        self._state = st.on_close(self._state)
        self._emit_state()

    # ── Search commands ──────────────────────────────────────────────────

    def set_query(self, query: str) -> None:
        self._apply(st.on_query_changed(self._state, query), needs_dataset=False)

    def set_mode(self, mode: SearchMode) -> None:
        self._apply(st.on_mode_changed(self._state, mode), needs_dataset=False)

    def cycle(self) -> None:
        if self._dataset is None:
            return
        self._apply(st.on_cycle(self._state, self._dataset))

    def select_match(self, index: int) -> None:
        if self._dataset is None:
            return
        self._apply(st.on_select(self._state, self._dataset, index))

    # ── Viewport commands ────────────────────────────────────────────────

    def zoom_in(self) -> None:
        self._apply(st.on_zoom_in(self._state))

    def zoom_out(self) -> None:
        self._apply(st.on_zoom_out(self._state))

    def wheel(self, delta_y: float) -> None:
        self._apply(st.on_wheel(self._state, delta_y))

    def pan(self, dx: float, dy: float) -> None:
        self._apply(st.on_pan(self._state, dx, dy))

    def begin_drag(self, sx: float, sy: float) -> None:
        self._apply(st.on_drag_start(self._state, sx, sy))

    def drag_to(self, sx: float, sy: float) -> None:
        self._apply(st.on_drag_move(self._state, sx, sy))

    def end_drag(self) -> None:
        self._apply(st.on_drag_end(self._state))

    def reset_view(self) -> None:
        self._apply(st.on_reset(self._state))

    # ── Display commands ─────────────────────────────────────────────────

    def set_show_labels(self, visible: bool) -> None:
        self._apply(st.on_toggle_labels(self._state, visible))

    def set_pin_scale(self, scale: float) -> None:
        self._apply(st.on_pin_scale(self._state, scale))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, new_state: SessionState, *, needs_dataset: bool = True) -> None:
        if needs_dataset and self._dataset is None:
            return
        if new_state == self._state:
            return
        old_focus = self._state.search.focus_id
        self._state = new_state
        self._emit_state()

        focus_id = new_state.search.focus_id
        if self._dataset is None or focus_id is None or focus_id == old_focus:
            return
        point = self._dataset.find(focus_id)
        if point is not None:
            for cb in self.events.on_focus_changed:
                cb(point)

    def _emit_state(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._state)
