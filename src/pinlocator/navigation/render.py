"""Pure rendering: ``render(Dataset, SessionState) -> DisplayModel``.

The display model is framework-agnostic. Point positions and sizes are in
frame coordinates (the view transform is already applied), colours are hex
strings. The Qt layer only has to draw what it gets.
"""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass

from pinlocator.core.models import Dataset, Point, Units
from pinlocator.navigation import viewport as vp
from pinlocator.navigation.search import match_counter
from pinlocator.navigation.state import SessionState, current_matches
from pinlocator.navigation.viewport import ViewFrame, ViewTransform

HIGHLIGHT_COLOR = "#ef4444"
MAX_LISTED_MATCHES = 50
GRID_MINOR = 10.0
GRID_MAJOR = 50.0

TYPE_COLORS: dict[str, str] = {
    "7": "#3b82f6",
    "AA": "#10b981",
    "BB": "#f59e0b",
    "CC": "#ef4444",
    "TP": "#8b5cf6",
    "FIX": "#64748b",
}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def type_color(type_code: str) -> str:
    """Colour for a nail type: fixed palette, else a hue from a string hash."""
    known = TYPE_COLORS.get(type_code)
    if known is not None:
        return known
    h = 0
    for ch in type_code:
        h = ord(ch) + (_to_int32(_to_int32(h) << 5) - h)
    hue = abs(int(math.fmod(h, 360)))
    r, g, b = colorsys.hls_to_rgb(hue / 360, 0.5, 0.7)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


@dataclass(frozen=True, slots=True)
class PointGlyph:
    """One drawable nail."""

    point: Point
    x: float
    y: float
    radius: float
    color: str
    is_active: bool
    stroke_width: float  # 0 means no outline
    halo_radius: float | None
    label: str
    label_x: float
    label_y: float
    label_size: float
    show_label: bool


@dataclass(frozen=True, slots=True)
class LegendEntry:
    type: str
    color: str


@dataclass(frozen=True, slots=True)
class BoardSummary:
    file_name: str
    total_nails: int
    width: float
    height: float
    units: Units
    date: str | None

    def dimension_text(self, value: float) -> str:
        return f"{value:.2f} {self.units}"


@dataclass(frozen=True, slots=True)
class DisplayModel:
    frame: ViewFrame
    transform: ViewTransform
    glyphs: tuple[PointGlyph, ...]
    legend: tuple[LegendEntry, ...]
    summary: BoardSummary
    matches: tuple[Point, ...]
    match_count: int
    active_index: int
    match_counter: str
    zoom_text: str
    count_text: str
    grid_minor: float = GRID_MINOR
    grid_major: float = GRID_MAJOR

    @property
    def active_glyph(self) -> PointGlyph | None:
        for glyph in self.glyphs:
            if glyph.is_active:
                return glyph
        return None


def _label_size(zoom: float, active: bool) -> float:
    size = (2.5 if active else 1.2) / math.sqrt(zoom)
    return max(0.4, size)


def _glyph(
    point: Point,
    transform: ViewTransform,
    zoom: float,
    base: float,
    active: bool,
    show_labels: bool,
) -> PointGlyph:
    fx, fy = transform.map(point.x, point.y)
    radius = vp.point_radius(zoom, base)
    drawn = vp.active_point_radius(zoom, base) if active else radius
    # Lengths below are in data units; scale them into the frame.
    return PointGlyph(
        point=point,
        x=fx,
        y=fy,
        radius=drawn * zoom,
        color=HIGHLIGHT_COLOR if active else type_color(point.type),
        is_active=active,
        stroke_width=0.8 if active else 0.0,
        halo_radius=radius * 4 * zoom if active else None,
        label=point.id,
        label_x=fx + radius * 1.5 * zoom,
        label_y=fy + radius * 0.5 * zoom,
        label_size=_label_size(zoom, active) * zoom,
        show_label=show_labels,
    )


def render(dataset: Dataset, state: SessionState) -> DisplayModel:
    """Build everything the map, legend and sidebar need for one frame."""
    viewport = state.viewport
    zoom = viewport.zoom
    transform = vp.view_transform(viewport)
    focus_id = state.search.focus_id

    glyphs: list[PointGlyph] = []
    for point in dataset.points:
        glyphs.append(
            _glyph(
                point,
                transform,
                zoom,
                state.display.pin_scale,
                active=point.id == focus_id,
                show_labels=state.display.show_labels,
            )
        )

    matches = current_matches(dataset, state)
    meta = dataset.metadata
    return DisplayModel(
        frame=ViewFrame.from_bounds(dataset.bounds),
        transform=transform,
        glyphs=tuple(glyphs),
        legend=tuple(LegendEntry(t, type_color(t)) for t in dataset.unique_types()),
        summary=BoardSummary(
            file_name=meta.file_name,
            total_nails=meta.total_nails,
            width=dataset.bounds.width,
            height=dataset.bounds.height,
            units=meta.units,
            date=meta.date,
        ),
        matches=tuple(matches[:MAX_LISTED_MATCHES]),
        match_count=len(matches),
        active_index=state.search.index,
        match_counter=match_counter(state.search, matches),
        zoom_text=f"{zoom * 100:.0f}%",
        count_text=f"{len(dataset)} pins",
    )
