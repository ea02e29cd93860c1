"""MapScene — QGraphicsScene that draws a nail-map display model."""

from __future__ import annotations

import math

from PyQt6.QtCore import QObject, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from pinlocator.navigation.render import DisplayModel, PointGlyph
from pinlocator.navigation.viewport import ViewFrame
from pinlocator.ui.i18n import t
from pinlocator.ui.styles.theme import MapTheme


class MapScene(QGraphicsScene):
    """Renders grid, nails, focus halo and labels in frame coordinates."""

    LABEL_FONT_PX = 10.0
    MAX_GRID_LINES = 400
    _EMPTY_RECT = QRectF(0, 0, 400, 300)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = MapTheme.default()
        self._model: DisplayModel | None = None

        # Visual layers
        self._background: QGraphicsRectItem | None = None
        self._grid_items: list[QGraphicsLineItem] = []
        self._nail_items: list[QGraphicsEllipseItem] = []
        self._halo_items: list[QGraphicsEllipseItem] = []
        self._label_items: list[QGraphicsSimpleTextItem] = []
        self._hint_item: QGraphicsSimpleTextItem | None = None

        self._draw_empty()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def model(self) -> DisplayModel | None:
        return self._model

    def set_model(self, model: DisplayModel | None) -> None:
        """Replace the drawn content (full redraw)."""
        self._model = model
        self.clear()
        self._background = None
        self._grid_items.clear()
        self._nail_items.clear()
        self._halo_items.clear()
        self._label_items.clear()
        self._hint_item = None

        if model is None:
            self._draw_empty()
            return

        frame = model.frame
        self.setSceneRect(QRectF(frame.x, frame.y, frame.width, frame.height))
        self._draw_background(frame)
        self._draw_grid(model, model.grid_minor, self._theme.grid_minor)
        self._draw_grid(model, model.grid_major, self._theme.grid_major)
        # Active nail last so it sits on top of its neighbours.
        for glyph in sorted(model.glyphs, key=lambda g: g.is_active):
            self._draw_glyph(glyph)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_empty(self) -> None:
        self.setSceneRect(self._EMPTY_RECT)
        bg = QGraphicsRectItem(self._EMPTY_RECT)
        bg.setBrush(QBrush(self._theme.background))
        bg.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(bg)
        self._background = bg

        hint = QGraphicsSimpleTextItem(t().drop_hint)
        hint.setFont(QFont("Adwaita Sans", 12))
        hint.setBrush(QBrush(self._theme.hint_text))
        rect = hint.boundingRect()
        hint.setPos(
            self._EMPTY_RECT.center().x() - rect.width() / 2,
            self._EMPTY_RECT.center().y() - rect.height() / 2,
        )
        self.addItem(hint)
        self._hint_item = hint

    def _draw_background(self, frame: ViewFrame) -> None:
        bg = QGraphicsRectItem(frame.x, frame.y, frame.width, frame.height)
        bg.setBrush(QBrush(self._theme.background))
        bg.setPen(QPen(Qt.PenStyle.NoPen))
        bg.setZValue(-2)
        self.addItem(bg)
        self._background = bg

    def _draw_grid(self, model: DisplayModel, spacing: float, color: QColor) -> None:
        """Draw data-space grid lines that fall inside the frame."""
        frame = model.frame
        tr = model.transform
        step = spacing * tr.scale
        if step <= 0 or max(frame.width, frame.height) / step > self.MAX_GRID_LINES:
            return

        x0, y0 = tr.inverse(frame.x, frame.y)
        x1, y1 = tr.inverse(frame.x + frame.width, frame.y + frame.height)
        pen = QPen(color)
        pen.setCosmetic(True)

        for k in range(math.ceil(x0 / spacing), math.floor(x1 / spacing) + 1):
            fx, _ = tr.map(k * spacing, 0.0)
            self._add_grid_line(fx, frame.y, fx, frame.y + frame.height, pen)
        for k in range(math.ceil(y0 / spacing), math.floor(y1 / spacing) + 1):
            _, fy = tr.map(0.0, k * spacing)
            self._add_grid_line(frame.x, fy, frame.x + frame.width, fy, pen)

    def _add_grid_line(
        self, x1: float, y1: float, x2: float, y2: float, pen: QPen
    ) -> None:
        line = QGraphicsLineItem(x1, y1, x2, y2)
        line.setPen(pen)
        line.setZValue(-1)
        self.addItem(line)
        self._grid_items.append(line)

    def _draw_glyph(self, glyph: PointGlyph) -> None:
        r = glyph.radius
        dot = QGraphicsEllipseItem(glyph.x - r, glyph.y - r, 2 * r, 2 * r)
        dot.setBrush(QBrush(QColor(glyph.color)))
        if glyph.stroke_width > 0:
            pen = QPen(self._theme.active_stroke)
            pen.setWidthF(glyph.stroke_width)
            dot.setPen(pen)
        else:
            dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2 if glyph.is_active else 1)
        dot.setData(0, glyph.point.id)
        self.addItem(dot)
        self._nail_items.append(dot)

        if glyph.halo_radius is not None:
            hr = glyph.halo_radius
            halo = QGraphicsEllipseItem(glyph.x - hr, glyph.y - hr, 2 * hr, 2 * hr)
            halo.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            pen = QPen(QColor(glyph.color))
            pen.setWidthF(0.15)
            halo.setPen(pen)
            halo.setZValue(2)
            self.addItem(halo)
            self._halo_items.append(halo)

        if glyph.show_label:
            self._draw_label(glyph)

    def _draw_label(self, glyph: PointGlyph) -> None:
        label = QGraphicsSimpleTextItem(glyph.label)
        font = QFont("Adwaita Mono", int(self.LABEL_FONT_PX))
        font.setBold(True)
        label.setFont(font)
        color = self._theme.active_label if glyph.is_active else self._theme.label
        label.setBrush(QBrush(color))
        # Text is laid out at a fixed size and scaled down to the glyph size.
        scale = glyph.label_size / self.LABEL_FONT_PX
        label.setScale(scale)
        label.setPos(glyph.label_x, glyph.label_y - label.boundingRect().height() * scale)
        label.setZValue(3)
        self.addItem(label)
        self._label_items.append(label)
