"""Tests for viewport math: zoom, pan, drag and focus."""

from __future__ import annotations

import pytest

from pinlocator.core.models import Bounds, Dataset, Metadata, Point
from pinlocator.navigation import viewport as vp
from pinlocator.navigation.viewport import ViewFrame, ViewportState


def _dataset(*coords: tuple[str, float, float]) -> Dataset:
    pts = tuple(Point(pid, x, y, "TP", "1", "T", "N1", "GND") for pid, x, y in coords)
    return Dataset(pts, Metadata("test.asc", len(pts)), Bounds.from_points(pts))


@pytest.fixture
def two_points() -> Dataset:
    return _dataset(("P1", 0.0, 0.0), ("P2", 100.0, 100.0))


class TestFrame:
    def test_frame_pads_bounds(self) -> None:
        frame = ViewFrame.from_bounds(Bounds(0, 100, 10, 50))
        assert (frame.x, frame.y) == (-20, -10)
        assert (frame.width, frame.height) == (140, 80)
        assert frame.center == (50, 30)


class TestZoom:
    def test_zoom_by_multiplies(self) -> None:
        assert vp.zoom_by(ViewportState(zoom=2.0), 1.5).zoom == pytest.approx(3.0)

    def test_zoom_clamps_high_and_low(self) -> None:
        assert vp.zoom_by(ViewportState(zoom=90.0), 5).zoom == vp.ZOOM_MAX
        assert vp.zoom_by(ViewportState(zoom=0.1), 0.01).zoom == vp.ZOOM_MIN

    def test_step_controls(self) -> None:
        assert vp.zoom_in(ViewportState()).zoom == pytest.approx(1.5)
        assert vp.zoom_out(ViewportState()).zoom == pytest.approx(0.7)

    def test_wheel_direction(self) -> None:
        assert vp.wheel(ViewportState(), 120).zoom == pytest.approx(0.9)
        assert vp.wheel(ViewportState(), -120).zoom == pytest.approx(1.1)
        state = ViewportState(zoom=3.0)
        assert vp.wheel(state, 0) is state

    def test_zoom_keeps_offset(self) -> None:
        state = vp.zoom_in(ViewportState(offset_x=4, offset_y=-2))
        assert state.offset == (4, -2)


class TestPan:
    def test_pan_adds_data_delta(self) -> None:
        state = vp.pan(ViewportState(offset_x=1, offset_y=1), 2, -3)
        assert state.offset == (3, -2)

    def test_pan_screen_divides_by_zoom(self) -> None:
        state = vp.pan_screen(ViewportState(zoom=4.0), 8, -4)
        assert state.offset == (2, -1)

    def test_drag_gesture(self) -> None:
        state = vp.begin_drag(ViewportState(zoom=2.0), 10, 10)
        assert state.is_dragging
        state = vp.drag_to(state, 14, 6)
        assert state.offset == (2, -2)
        state = vp.drag_to(state, 16, 6)
        assert state.offset == (3, -2)
        state = vp.end_drag(state)
        assert not state.is_dragging
        assert vp.drag_to(state, 100, 100) == state

    def test_end_drag_without_drag_is_noop(self) -> None:
        state = ViewportState(zoom=3.0)
        assert vp.end_drag(state) is state


class TestReset:
    def test_reset_is_fixed_default(self) -> None:
        assert vp.reset_view() == ViewportState(zoom=1.0, offset_x=0.0, offset_y=0.0)


class TestFocus:
    def test_focus_from_default_zooms_to_ten_and_centers(
        self, two_points: Dataset
    ) -> None:
        state = vp.focus_on(ViewportState(), two_points, "P2")
        assert state.zoom == vp.FOCUS_ZOOM

        frame = ViewFrame.from_bounds(two_points.bounds)
        mapped = vp.view_transform(state).map(100.0, 100.0)
        assert mapped == pytest.approx(frame.center)

    def test_focus_never_zooms_out(self, two_points: Dataset) -> None:
        state = vp.focus_on(ViewportState(zoom=25.0), two_points, "P1")
        assert state.zoom == 25.0
        frame = ViewFrame.from_bounds(two_points.bounds)
        assert vp.view_transform(state).map(0.0, 0.0) == pytest.approx(frame.center)

    def test_focus_is_idempotent(self, two_points: Dataset) -> None:
        once = vp.focus_on(ViewportState(zoom=3, offset_x=9), two_points, "P2")
        twice = vp.focus_on(once, two_points, "P2")
        assert twice == once

    def test_focus_unknown_id_is_noop(self, two_points: Dataset) -> None:
        state = ViewportState(zoom=2.0, offset_x=5.0)
        assert vp.focus_on(state, two_points, "nope") is state

    def test_focus_ignores_prior_pan(self, two_points: Dataset) -> None:
        panned = vp.pan(ViewportState(zoom=12.0), 300, -70)
        state = vp.focus_on(panned, two_points, "P1")
        frame = ViewFrame.from_bounds(two_points.bounds)
        assert vp.view_transform(state).map(0.0, 0.0) == pytest.approx(frame.center)


class TestTransformAndRadius:
    def test_transform_inverse(self) -> None:
        tr = vp.view_transform(ViewportState(zoom=2.0, offset_x=3, offset_y=-1))
        fx, fy = tr.map(5, 7)
        assert (fx, fy) == (16, 12)
        assert tr.inverse(fx, fy) == pytest.approx((5, 7))

    def test_radius_power_law(self) -> None:
        assert vp.point_radius(1.0) == pytest.approx(0.4)
        assert vp.point_radius(10.0) == pytest.approx(0.4 / 10**0.3)
        assert vp.point_radius(10.0) > 0.4 / 10

    def test_active_radius_is_larger(self) -> None:
        assert vp.active_point_radius(4.0, 1.0) == pytest.approx(
            2.5 * vp.point_radius(4.0, 1.0)
        )


class TestSerialisation:
    def test_round_trip(self) -> None:
        state = ViewportState(zoom=3.5, offset_x=-2.0, offset_y=8.0)
        assert ViewportState.from_dict(state.as_dict()) == state

    def test_from_dict_clamps_zoom(self) -> None:
        assert ViewportState.from_dict({"zoom": 1e6}).zoom == vp.ZOOM_MAX
