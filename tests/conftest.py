"""Shared pytest fixtures: sample nail file, Qt application, i18n reset."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Headless Linux (CI containers) has no display server to attach to.
if sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

SAMPLE_ASC = """\
Tebo-ICT nail file export
Metric units
Created 03-March-2024 09:15
--------------------------------------------------------------
$A1   10.5   20.25  TP  3  (T)  N100  GND T PIN 5
$A2   30.0   5.0    AA  4  (B)  N101  VCC_3V3
$B7   -4.0   40.0   7   1  (T)  N102  NET_CLK T PIN 12
$BAD  xx     1.0    TP  1  (T)  N103  FOO
$SHORT 1.0 2.0 TP
"""


@pytest.fixture
def sample_text() -> str:
    """Three valid rows (A1, A2, B7) plus two malformed ones."""
    return SAMPLE_ASC


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    from pinlocator.ui.i18n import set_language

    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _ui_widgets(request: pytest.FixtureRequest) -> Iterator[None]:
    """Give UI tests a QApplication and close their windows afterwards."""
    if "ui" not in request.node.path.parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
