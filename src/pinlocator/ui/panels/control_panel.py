"""ControlPanel — zoom buttons and display toggles."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from pinlocator.navigation.state import PIN_SCALE_MAX, PIN_SCALE_MIN
from pinlocator.ui.i18n import t

# The slider works in integer steps of 0.05.
_SLIDER_STEP = 0.05


class ControlPanel(QWidget):
    """Buttons for view actions: zoom in/out, reset; labels and pin size."""

    zoom_in_clicked = pyqtSignal()
    zoom_out_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()
    labels_toggled = pyqtSignal(bool)
    pin_scale_changed = pyqtSignal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        row1 = QHBoxLayout()
        self._btn_zoom_in = QPushButton()
        self._btn_zoom_in.setFont(btn_font)
        self._btn_zoom_in.setMinimumHeight(36)
        self._btn_zoom_in.clicked.connect(self.zoom_in_clicked)
        row1.addWidget(self._btn_zoom_in)

        self._btn_zoom_out = QPushButton()
        self._btn_zoom_out.setFont(btn_font)
        self._btn_zoom_out.setMinimumHeight(36)
        self._btn_zoom_out.clicked.connect(self.zoom_out_clicked)
        row1.addWidget(self._btn_zoom_out)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        row1.addWidget(self._btn_reset)
        layout.addLayout(row1)

        self._labels_check = QCheckBox()
        self._labels_check.setChecked(True)
        self._labels_check.toggled.connect(self.labels_toggled)
        layout.addWidget(self._labels_check)

        row2 = QHBoxLayout()
        self._pin_label = QLabel()
        row2.addWidget(self._pin_label)
        self._pin_value = QLabel()
        self._pin_value.setAlignment(Qt.AlignmentFlag.AlignRight)
        row2.addWidget(self._pin_value)
        layout.addLayout(row2)

        self._pin_slider = QSlider(Qt.Orientation.Horizontal)
        self._pin_slider.setRange(
            round(PIN_SCALE_MIN / _SLIDER_STEP), round(PIN_SCALE_MAX / _SLIDER_STEP)
        )
        self._pin_slider.valueChanged.connect(self._on_slider)
        layout.addWidget(self._pin_slider)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_zoom_in.setText(s.btn_zoom_in)
        self._btn_zoom_out.setText(s.btn_zoom_out)
        self._btn_reset.setText(s.btn_reset)
        self._labels_check.setText(s.show_ids)
        self._pin_label.setText(s.pin_size)

    def set_pin_scale(self, scale: float) -> None:
        """Move the slider to *scale* without emitting ``pin_scale_changed``."""
        was_blocked = self._pin_slider.blockSignals(True)
        self._pin_slider.setValue(round(scale / _SLIDER_STEP))
        self._pin_slider.blockSignals(was_blocked)
        self._pin_value.setText(f"{scale:.2f}")

    def set_map_active(self, active: bool) -> None:
        """Enable/disable controls depending on whether a file is loaded."""
        for widget in (
            self._btn_zoom_in,
            self._btn_zoom_out,
            self._btn_reset,
            self._labels_check,
            self._pin_slider,
        ):
            widget.setEnabled(active)

    def _on_slider(self, value: int) -> None:
        scale = value * _SLIDER_STEP
        self._pin_value.setText(f"{scale:.2f}")
        self.pin_scale_changed.emit(scale)
