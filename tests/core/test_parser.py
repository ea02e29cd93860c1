"""Tests for Tebo-ICT nail-file parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from pinlocator.core import (
    NoDataFoundError,
    ParseError,
    Point,
    Units,
    bind_row,
    load_nail_file,
    parse,
    parse_coordinate,
    parse_nail_file,
    parse_tail,
    tokenize_row,
)


class TestScenarios:
    def test_full_row_with_virtual_pin(self) -> None:
        ds = parse("$A1 10.5 20.25 TP 3 (T) N100 GND T PIN 5", "a.asc")
        assert ds.points == (
            Point(
                id="A1",
                x=10.5,
                y=20.25,
                type="TP",
                grid="3",
                side="T",
                net_id="N100",
                net_name="GND",
                virtual_pin="5",
            ),
        )

    def test_headers_only_raises(self) -> None:
        text = "Tebo-ICT export\nMetric units\n01-May-2023 12:00\n"
        with pytest.raises(NoDataFoundError, match="Tebo-ICT"):
            parse_nail_file(text, "empty.asc")

    def test_no_data_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_nail_file("", "blank.asc")
        assert issubclass(NoDataFoundError, ParseError)


class TestRowAcceptance:
    def test_sample_file_keeps_valid_rows_in_order(self, sample_text: str) -> None:
        ds = parse_nail_file(sample_text, "board.asc")
        assert [p.id for p in ds.points] == ["A1", "A2", "B7"]
        assert ds.metadata.total_nails == 3
        assert ds.metadata.file_name == "board.asc"

    def test_short_row_is_skipped(self) -> None:
        text = "$X 1 2 TP 3 (T)\n$Y 1 2 TP 3 (T) N1"
        ds = parse_nail_file(text, "f")
        assert [p.id for p in ds.points] == ["Y"]

    def test_non_numeric_coordinate_drops_row(self) -> None:
        text = "$X abc 2 TP 3 (T) N1\n$Y 1 2 TP 3 (T) N1"
        ds = parse_nail_file(text, "f")
        assert [p.id for p in ds.points] == ["Y"]

    @pytest.mark.parametrize("token", ["inf", "nan", "Infinity", "1_0", "", "1.2.3"])
    def test_rejected_coordinate_tokens(self, token: str) -> None:
        assert parse_coordinate(token) is None

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("10", 10.0), ("-4.5", -4.5), ("+.5", 0.5), ("1e3", 1000.0), ("7.", 7.0)],
    )
    def test_accepted_coordinate_tokens(self, token: str, expected: float) -> None:
        assert parse_coordinate(token) == expected

    def test_leading_whitespace_before_marker(self) -> None:
        ds = parse_nail_file("    $Z 1 1 TP 1 (B) N9", "f")
        assert ds.points[0].id == "Z"

    def test_comment_and_blank_lines_ignored(self) -> None:
        text = "\n   \n# $ not a row\n// comment\n$Q 0 0 TP 1 (T) N1\n"
        ds = parse_nail_file(text, "f")
        assert len(ds) == 1

    def test_crlf_line_endings(self) -> None:
        ds = parse_nail_file("$A 1 2 TP 1 (T) N1 GND\r\n$B 3 4 TP 1 (T) N2\r\n", "f")
        assert [p.net_name for p in ds.points] == ["GND", "N/A"]


class TestFieldBinding:
    def test_tokenize_requires_marker(self) -> None:
        assert tokenize_row("A1 1 2 TP 1 (T) N1") is None
        assert tokenize_row("  $A1   1\t2  ") == ["$A1", "1", "2"]

    def test_bind_row_arity(self) -> None:
        assert bind_row(["$A", "1", "2", "TP", "1", "(T)"]) is None
        record = bind_row(["$A", "1", "2", "TP", "1", "(T)", "N1", "GND", "X"])
        assert record is not None
        assert record.side == "T"
        assert record.tail == ("GND", "X")

    def test_side_strips_only_parentheses(self) -> None:
        record = bind_row(["$A", "1", "2", "TP", "1", "[(B)]", "N1"])
        assert record is not None
        assert record.side == "[B]"

    def test_missing_tail_uses_placeholder(self) -> None:
        ds = parse_nail_file("$A 1 2 TP 1 (T) N1", "f")
        assert ds.points[0].net_name == "N/A"
        assert ds.points[0].virtual_pin == ""


class TestParseTail:
    def test_net_and_pin(self) -> None:
        assert parse_tail("GND T PIN 5", "GND") == ("GND", "5")

    def test_multi_word_net_name(self) -> None:
        assert parse_tail("MAIN POWER T PIN 7", "MAIN") == ("MAIN POWER", "7")

    def test_no_marker_falls_back_to_first_token(self) -> None:
        assert parse_tail("VCC EXTRA", "VCC") == ("VCC", "")

    def test_empty_tail(self) -> None:
        assert parse_tail("", None) == ("N/A", "")

    def test_marker_at_start_has_no_net_name(self) -> None:
        # No whitespace precedes the marker, so the first token names the net.
        assert parse_tail("T PIN 3", "T") == ("T", "3")

    def test_virtual_pin_stops_at_second_marker(self) -> None:
        assert parse_tail("A T PIN 5 T PIN 6", "A") == ("A", "5")

    def test_marker_inside_word(self) -> None:
        net, pin = parse_tail("NET PIN 4", "NET")
        assert net == "NET"
        assert pin == "4"


class TestMetadata:
    def test_units_and_date(self, sample_text: str) -> None:
        meta = parse_nail_file(sample_text, "board.asc").metadata
        assert meta.units == Units.METRIC
        assert meta.date == "03-March-2024 09:15"

    def test_unknown_units_without_header(self) -> None:
        meta = parse_nail_file("$A 1 2 TP 1 (T) N1", "f").metadata
        assert meta.units == Units.UNKNOWN
        assert meta.date is None

    def test_last_units_header_wins(self) -> None:
        text = "Metric units\nImperial units\n$A 1 2 TP 1 (T) N1"
        assert parse_nail_file(text, "f").metadata.units == Units.IMPERIAL

    def test_last_date_wins(self) -> None:
        text = "1-Jan-2020 08:00\n$A 1 2 TP 1 (T) N1\n22-Feb-2021 17:45\n"
        assert parse_nail_file(text, "f").metadata.date == "22-Feb-2021 17:45"

    def test_date_without_time_is_ignored(self) -> None:
        text = "1-Jan-2020\n$A 1 2 TP 1 (T) N1"
        assert parse_nail_file(text, "f").metadata.date is None


class TestBoundsAndIdempotence:
    def test_bounds_contain_every_point(self, sample_text: str) -> None:
        ds = parse_nail_file(sample_text, "board.asc")
        assert (ds.bounds.min_x, ds.bounds.max_x) == (-4.0, 30.0)
        assert (ds.bounds.min_y, ds.bounds.max_y) == (5.0, 40.0)
        assert all(ds.bounds.contains(p.x, p.y) for p in ds.points)

    def test_parse_twice_is_identical(self, sample_text: str) -> None:
        first = parse_nail_file(sample_text, "board.asc")
        second = parse_nail_file(sample_text, "board.asc")
        assert first.points == second.points
        assert first.bounds == second.bounds


class TestLoadFile:
    def test_load_uses_base_name(self, tmp_path: Path, sample_text: str) -> None:
        path = tmp_path / "panel.asc"
        path.write_text(sample_text, encoding="utf-8")
        ds = load_nail_file(path)
        assert ds.metadata.file_name == "panel.asc"
        assert len(ds) == 3

    def test_load_tolerates_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.fab"
        path.write_bytes(b"Header \xff\xfe\n$A 1 2 TP 1 (T) N1 GND\n")
        ds = load_nail_file(path)
        assert ds.points[0].net_name == "GND"
