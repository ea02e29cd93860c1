"""Viewport engine — pan/zoom state and the center-on-focus transform.

All functions are pure: they take a :class:`ViewportState` and return a new
one. The logical frame is the dataset bounds plus a fixed padding; the view
transform is ``scale(zoom) · translate(offset)`` applied inside that frame.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any

from pinlocator.core.models import Bounds, Dataset

ZOOM_MIN = 0.05
ZOOM_MAX = 100.0
FOCUS_ZOOM = 10.0
FRAME_PADDING = 20.0

ZOOM_IN_STEP = 1.5
ZOOM_OUT_STEP = 0.7
WHEEL_IN_FACTOR = 1.1
WHEEL_OUT_FACTOR = 0.9

BASE_POINT_RADIUS = 0.4
RADIUS_ZOOM_EXPONENT = 0.3
ACTIVE_RADIUS_FACTOR = 2.5


def clamp_zoom(zoom: float) -> float:
    return min(max(zoom, ZOOM_MIN), ZOOM_MAX)


@dataclass(frozen=True, slots=True)
class ViewFrame:
    """Fixed logical coordinate frame: dataset bounds plus padding."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, bounds: Bounds, padding: float = FRAME_PADDING) -> ViewFrame:
        return cls(
            x=bounds.min_x - padding,
            y=bounds.min_y - padding,
            width=bounds.width + padding * 2,
            height=bounds.height + padding * 2,
        )

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass(frozen=True, slots=True)
class ViewTransform:
    """Maps data coordinates into frame coordinates."""

    scale: float
    translate_x: float
    translate_y: float

    def map(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.scale * (x + self.translate_x),
            self.scale * (y + self.translate_y),
        )

    def inverse(self, fx: float, fy: float) -> tuple[float, float]:
        return fx / self.scale - self.translate_x, fy / self.scale - self.translate_y


@dataclass(frozen=True, slots=True)
class ViewportState:
    """Transient pan/zoom state of the map.

    ``drag_anchor`` holds the last pointer position (screen pixels) while a
    drag gesture is in progress, ``None`` otherwise.
    """

    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    drag_anchor: tuple[float, float] | None = None

    @property
    def offset(self) -> tuple[float, float]:
        return self.offset_x, self.offset_y

    @property
    def is_dragging(self) -> bool:
        return self.drag_anchor is not None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ViewportState:
        anchor = data.get("drag_anchor")
        return cls(
            zoom=clamp_zoom(float(data.get("zoom", 1.0))),
            offset_x=float(data.get("offset_x", 0.0)),
            offset_y=float(data.get("offset_y", 0.0)),
            drag_anchor=tuple(anchor) if anchor is not None else None,
        )


# ── Zoom ─────────────────────────────────────────────────────────────────────


def zoom_by(state: ViewportState, factor: float) -> ViewportState:
    """Multiply zoom by *factor*, clamped to ``[ZOOM_MIN, ZOOM_MAX]``."""
    return replace(state, zoom=clamp_zoom(state.zoom * factor))


def zoom_in(state: ViewportState) -> ViewportState:
    return zoom_by(state, ZOOM_IN_STEP)


def zoom_out(state: ViewportState) -> ViewportState:
    return zoom_by(state, ZOOM_OUT_STEP)


def wheel(state: ViewportState, delta_y: float) -> ViewportState:
    """Apply one wheel tick; a positive (downward) delta zooms out."""
    if delta_y == 0:
        return state
    factor = WHEEL_OUT_FACTOR if delta_y > 0 else WHEEL_IN_FACTOR
    return zoom_by(state, factor)


# ── Pan / drag ───────────────────────────────────────────────────────────────


def pan(state: ViewportState, dx: float, dy: float) -> ViewportState:
    """Shift the offset by a delta expressed in data units."""
    return replace(state, offset_x=state.offset_x + dx, offset_y=state.offset_y + dy)


def pan_screen(state: ViewportState, sdx: float, sdy: float) -> ViewportState:
    """Shift the offset by a screen-space delta (divided by zoom)."""
    return pan(state, sdx / state.zoom, sdy / state.zoom)


def begin_drag(state: ViewportState, sx: float, sy: float) -> ViewportState:
    return replace(state, drag_anchor=(sx, sy))


def drag_to(state: ViewportState, sx: float, sy: float) -> ViewportState:
    """Pan by the pointer movement since the last drag event."""
    if state.drag_anchor is None:
        return state
    ax, ay = state.drag_anchor
    moved = pan_screen(state, sx - ax, sy - ay)
    return replace(moved, drag_anchor=(sx, sy))


def end_drag(state: ViewportState) -> ViewportState:
    if state.drag_anchor is None:
        return state
    return replace(state, drag_anchor=None)


def reset_view() -> ViewportState:
    """Return the fixed default view (zoom 1, no offset)."""
    return ViewportState()


# ── Focus ────────────────────────────────────────────────────────────────────


def focus_on(state: ViewportState, dataset: Dataset, point_id: str) -> ViewportState:
    """Center the view on *point_id*, zooming in to at least ``FOCUS_ZOOM``.

    An unknown id leaves the state unchanged. Focusing never zooms out.
    """
    point = dataset.find(point_id)
    if point is None:
        return state

    cx, cy = ViewFrame.from_bounds(dataset.bounds).center
    target_zoom = clamp_zoom(max(state.zoom, FOCUS_ZOOM))
    return replace(
        state,
        zoom=target_zoom,
        offset_x=cx / target_zoom - point.x,
        offset_y=cy / target_zoom - point.y,
    )


# ── Derived values ───────────────────────────────────────────────────────────


def view_transform(state: ViewportState) -> ViewTransform:
    return ViewTransform(state.zoom, state.offset_x, state.offset_y)


def point_radius(zoom: float, base: float = BASE_POINT_RADIUS) -> float:
    """Render radius in data units; shrinks as ``zoom ** -0.3``."""
    return base / zoom**RADIUS_ZOOM_EXPONENT


def active_point_radius(zoom: float, base: float = BASE_POINT_RADIUS) -> float:
    return point_radius(zoom, base) * ACTIVE_RADIUS_FACTOR
