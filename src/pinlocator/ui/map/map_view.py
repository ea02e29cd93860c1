"""MapView — QGraphicsView wrapper for the map scene."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPainter, QResizeEvent, QWheelEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from pinlocator.navigation.render import DisplayModel
from pinlocator.ui.map.map_scene import MapScene


class MapView(QGraphicsView):
    """Displays the map scene fitted to the widget and turns mouse input
    into navigation signals.

    Drag positions are reported in scene (frame) coordinates, so a drag
    delta divided by zoom is exactly a data-space delta.

    Signals:
        wheel_scrolled(float): Vertical wheel delta (positive = down).
        drag_started(float, float): Left button pressed at a scene position.
        drag_moved(float, float): Pointer moved while dragging.
        drag_ended(): Button released or pointer left the view.
    """

    wheel_scrolled = pyqtSignal(float)
    drag_started = pyqtSignal(float, float)
    drag_moved = pyqtSignal(float, float)
    drag_ended = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = MapScene()
        super().__init__(self._scene, parent)
        self._dragging = False

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setCursor(Qt.CursorShape.SizeAllCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    @property
    def map_scene(self) -> MapScene:
        return self._scene

    def set_model(self, model: DisplayModel | None) -> None:
        self._scene.set_model(model)
        self._fit()

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    # ── Qt events ────────────────────────────────────────────────────────

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._fit()

    def wheelEvent(self, event: QWheelEvent) -> None:
        delta = event.angleDelta().y()
        if delta:
            # Qt reports "up" as positive; emit with positive meaning down.
            self.wheel_scrolled.emit(float(-delta))
        event.accept()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            pos = self.mapToScene(event.position().toPoint())
            self.drag_started.emit(pos.x(), pos.y())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._dragging:
            pos = self.mapToScene(event.position().toPoint())
            self.drag_moved.emit(pos.x(), pos.y())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self._dragging and event.button() == Qt.MouseButton.LeftButton:
            self._stop_drag()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event: QEvent) -> None:
        self._stop_drag()
        super().leaveEvent(event)

    def _stop_drag(self) -> None:
        if not self._dragging:
            return
        self._dragging = False
        self.drag_ended.emit()
