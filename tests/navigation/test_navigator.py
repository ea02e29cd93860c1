"""Tests for the Navigator controller and its event callbacks."""

from __future__ import annotations

import weakref
from pathlib import Path

import pytest

from pinlocator.core import NoDataFoundError
from pinlocator.core.models import Dataset, Point
from pinlocator.navigation.navigator import Navigator
from pinlocator.navigation.search import SearchMode, SearchState
from pinlocator.navigation.state import SessionState
from pinlocator.navigation.viewport import ViewportState


@pytest.fixture
def nav(sample_text: str) -> Navigator:
    navigator = Navigator()
    navigator.load_text(sample_text, "board.asc")
    return navigator


class TestLoading:
    def test_initial_state(self) -> None:
        nav = Navigator()
        assert nav.dataset is None
        assert nav.display() is None
        assert nav.matches == []
        assert nav.focused_point is None

    def test_load_emits_events(self, sample_text: str) -> None:
        nav = Navigator()
        loaded: list[Dataset] = []
        states: list[SessionState] = []
        nav.events.on_dataset_loaded.append(loaded.append)
        nav.events.on_state_changed.append(states.append)

        dataset = nav.load_text(sample_text, "board.asc")

        assert loaded == [dataset]
        assert len(states) == 1
        assert nav.state.viewport == ViewportState()

    def test_failed_load_keeps_previous_dataset(self, nav: Navigator) -> None:
        nav.set_query("a")
        nav.cycle()
        before_dataset, before_state = nav.dataset, nav.state

        with pytest.raises(NoDataFoundError):
            nav.load_text("just a header\n", "broken.asc")

        assert nav.dataset is before_dataset
        assert nav.state == before_state

    def test_load_file(self, tmp_path: Path, sample_text: str) -> None:
        path = tmp_path / "fixture.asc"
        path.write_text(sample_text, encoding="utf-8")
        nav = Navigator()
        nav.load_file(path)
        assert nav.dataset is not None
        assert nav.dataset.metadata.file_name == "fixture.asc"

    def test_close_unloads_dataset(self, nav: Navigator) -> None:
        states: list[SessionState] = []
        nav.events.on_state_changed.append(states.append)
        nav.set_mode(SearchMode.BY_NET)
        nav.set_query("gnd")
        nav.cycle()

        nav.close()

        assert nav.dataset is None
        assert nav.display() is None
        assert nav.focused_point is None
        assert nav.state == SessionState(search=SearchState(mode=SearchMode.BY_NET))
        assert len(states) == 4

        nav.zoom_in()
        assert len(states) == 4

    def test_reload_resets_search(self, nav: Navigator, sample_text: str) -> None:
        nav.set_query("a")
        nav.cycle()
        nav.load_text(sample_text, "again.asc")
        assert nav.state.search.query == ""
        assert nav.focused_point is None


class TestCommands:
    def test_commands_without_dataset_are_noops(self) -> None:
        nav = Navigator()
        states: list[SessionState] = []
        nav.events.on_state_changed.append(states.append)

        nav.cycle()
        nav.select_match(0)
        nav.zoom_in()
        nav.wheel(1)
        nav.pan(1, 1)
        nav.reset_view()
        nav.set_pin_scale(2.0)
        nav.close()

        assert states == []
        assert nav.state == SessionState()

    def test_search_mode_set_before_load_is_kept(self, sample_text: str) -> None:
        nav = Navigator()
        states: list[SessionState] = []
        nav.events.on_state_changed.append(states.append)

        nav.set_mode(SearchMode.BY_NET)
        nav.set_query("x")
        assert len(states) == 2
        assert nav.matches == []

        nav.load_text(sample_text, "board.asc")
        nav.set_query("GND")

        assert nav.state.search.mode == SearchMode.BY_NET
        assert [p.id for p in nav.matches] == ["A1"]

    def test_navigator_is_weak_referenceable(self) -> None:
        nav = Navigator()
        ref = weakref.ref(nav)
        assert ref() is nav
        assert weakref.WeakMethod(nav.zoom_in)() == nav.zoom_in

    def test_cycle_emits_focus(self, nav: Navigator) -> None:
        focused: list[Point] = []
        nav.events.on_focus_changed.append(focused.append)

        nav.set_query("a")
        nav.cycle()
        nav.cycle()
        nav.cycle()

        assert [p.id for p in focused] == ["A1", "A2", "A1"]
        assert nav.focused_point is not None
        assert nav.focused_point.id == "A1"

    def test_recentering_same_point_emits_state_only(self, nav: Navigator) -> None:
        focused: list[Point] = []
        states: list[SessionState] = []
        nav.events.on_focus_changed.append(focused.append)
        nav.events.on_state_changed.append(states.append)

        nav.set_query("b7")
        nav.cycle()
        nav.pan(5, 5)
        nav.cycle()

        assert [p.id for p in focused] == ["B7"]
        assert len(states) == 4

    def test_unchanged_state_does_not_emit(self, nav: Navigator) -> None:
        states: list[SessionState] = []
        nav.events.on_state_changed.append(states.append)
        nav.reset_view()
        nav.set_query("")
        nav.set_mode(SearchMode.BY_ID)
        assert states == []

    def test_select_match(self, nav: Navigator) -> None:
        nav.set_mode(SearchMode.BY_NET)
        nav.set_query("n")
        assert [p.id for p in nav.matches] == ["A1", "B7"]
        nav.select_match(1)
        assert nav.focused_point is not None
        assert nav.focused_point.id == "B7"

    def test_drag_and_display_settings(self, nav: Navigator) -> None:
        nav.begin_drag(0, 0)
        nav.drag_to(3, 4)
        nav.end_drag()
        assert nav.state.viewport.offset == (3, 4)

        nav.set_show_labels(False)
        nav.set_pin_scale(1.25)
        model = nav.display()
        assert model is not None
        assert all(not g.show_label for g in model.glyphs)
        assert nav.state.display.pin_scale == 1.25
