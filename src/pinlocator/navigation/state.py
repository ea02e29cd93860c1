"""Session state and reducer-style transitions.

One :class:`SessionState` bundles everything the map view depends on besides
the dataset itself. Each ``on_*`` function handles one UI event and returns a
new state; none of them mutate their inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pinlocator.core.models import Bounds, Dataset, Point
from pinlocator.navigation import search as srch
from pinlocator.navigation import viewport as vp
from pinlocator.navigation.search import SearchMode, SearchState
from pinlocator.navigation.viewport import ViewportState

PIN_SCALE_MIN = 0.05
PIN_SCALE_MAX = 5.0
PIN_SCALE_FLOOR = 0.1
PIN_SCALE_DIVISOR = 150.0


def clamp_pin_scale(scale: float) -> float:
    return min(max(scale, PIN_SCALE_MIN), PIN_SCALE_MAX)


def initial_pin_scale(bounds: Bounds) -> float:
    """Default pin size for a board: about 1/150 of its mean dimension."""
    avg_dim = (bounds.width + bounds.height) / 2
    return clamp_pin_scale(max(PIN_SCALE_FLOOR, avg_dim / PIN_SCALE_DIVISOR))


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """User-adjustable drawing options."""

    show_labels: bool = True
    pin_scale: float = vp.BASE_POINT_RADIUS


@dataclass(frozen=True, slots=True)
class SessionState:
    viewport: ViewportState = field(default_factory=ViewportState)
    search: SearchState = field(default_factory=SearchState)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    def as_dict(self) -> dict[str, Any]:
        return {
            "viewport": self.viewport.as_dict(),
            "search": self.search.as_dict(),
            "display": {
                "show_labels": self.display.show_labels,
                "pin_scale": self.display.pin_scale,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SessionState:
        display = data.get("display", {})
        return cls(
            viewport=ViewportState.from_dict(data.get("viewport", {})),
            search=SearchState.from_dict(data.get("search", {})),
            display=DisplaySettings(
                show_labels=bool(display.get("show_labels", True)),
                pin_scale=clamp_pin_scale(
                    float(display.get("pin_scale", vp.BASE_POINT_RADIUS))
                ),
            ),
        )


def current_matches(dataset: Dataset | None, state: SessionState) -> list[Point]:
    if dataset is None:
        return []
    return srch.search(dataset, state.search.query, state.search.mode)


# ── Dataset lifecycle ────────────────────────────────────────────────────────


def on_load(state: SessionState, dataset: Dataset) -> SessionState:
    """Fresh view and empty search for a newly loaded dataset."""
    return SessionState(
        viewport=vp.reset_view(),
        search=SearchState(mode=state.search.mode),
        display=replace(state.display, pin_scale=initial_pin_scale(dataset.bounds)),
    )


def on_close(state: SessionState) -> SessionState:
    """Default session for an empty map; only the search mode is kept."""
    return SessionState(search=SearchState(mode=state.search.mode))


# ── Search ───────────────────────────────────────────────────────────────────


def on_query_changed(state: SessionState, query: str) -> SessionState:
    return replace(state, search=srch.with_query(state.search, query))


def on_mode_changed(state: SessionState, mode: SearchMode) -> SessionState:
    return replace(state, search=srch.with_mode(state.search, mode))


def _focus(state: SessionState, dataset: Dataset, search: SearchState) -> SessionState:
    viewport = state.viewport
    if search.focus_id is not None:
        viewport = vp.focus_on(viewport, dataset, search.focus_id)
    return replace(state, search=search, viewport=viewport)


def on_cycle(state: SessionState, dataset: Dataset) -> SessionState:
    """Select the next match and center the view on it, even if unchanged."""
    matches = current_matches(dataset, state)
    if not matches:
        return state
    return _focus(state, dataset, srch.cycle(state.search, matches))


def on_select(state: SessionState, dataset: Dataset, index: int) -> SessionState:
    matches = current_matches(dataset, state)
    if not 0 <= index < len(matches):
        return state
    return _focus(state, dataset, srch.select(state.search, matches, index))


# ── Viewport ─────────────────────────────────────────────────────────────────


def on_zoom_in(state: SessionState) -> SessionState:
    return replace(state, viewport=vp.zoom_in(state.viewport))


def on_zoom_out(state: SessionState) -> SessionState:
    return replace(state, viewport=vp.zoom_out(state.viewport))


def on_wheel(state: SessionState, delta_y: float) -> SessionState:
    return replace(state, viewport=vp.wheel(state.viewport, delta_y))


def on_pan(state: SessionState, dx: float, dy: float) -> SessionState:
    return replace(state, viewport=vp.pan(state.viewport, dx, dy))


def on_drag_start(state: SessionState, sx: float, sy: float) -> SessionState:
    return replace(state, viewport=vp.begin_drag(state.viewport, sx, sy))


def on_drag_move(state: SessionState, sx: float, sy: float) -> SessionState:
    return replace(state, viewport=vp.drag_to(state.viewport, sx, sy))


def on_drag_end(state: SessionState) -> SessionState:
    return replace(state, viewport=vp.end_drag(state.viewport))


def on_reset(state: SessionState) -> SessionState:
    return replace(state, viewport=vp.reset_view())


# ── Display ──────────────────────────────────────────────────────────────────


def on_toggle_labels(state: SessionState, visible: bool) -> SessionState:
    return replace(state, display=replace(state.display, show_labels=visible))


def on_pin_scale(state: SessionState, scale: float) -> SessionState:
    return replace(
        state, display=replace(state.display, pin_scale=clamp_pin_scale(scale))
    )
