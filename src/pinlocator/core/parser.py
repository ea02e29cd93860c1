"""Tebo-ICT nail-file parsing helpers.

The format is line oriented. Header lines carry the unit system and a
timestamp; data rows start with ``$`` and hold whitespace-separated fields::

    $A1   10.5  20.25  TP  3  (T)  N100  GND T PIN 5

Malformed rows are skipped, never fatal. Only an input with no usable rows
at all is rejected.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path

from pinlocator.core.errors import NoDataFoundError
from pinlocator.core.models import Bounds, Dataset, Metadata, Point, Units

_LOGGER = logging.getLogger(__name__)

ROW_MARKER = "$"
MIN_ROW_TOKENS = 7
NET_NAME_PLACEHOLDER = "N/A"
VIRTUAL_PIN_MARKER = "T PIN"
ACCEPTED_EXTENSIONS = (".txt", ".fab", ".csv", ".asc")

_DATE_RE = re.compile(r"\d{1,2}-\w+-\d{4}\s+\d{2}:\d{2}", re.ASCII)
_NET_NAME_RE = re.compile(r"^(.*?)\s+T\s+PIN")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Positional field names of a data row, in column order.
ROW_FIELDS = ("id", "x", "y", "type", "grid", "side", "net_id")


@dataclass(slots=True)
class _HeaderScan:
    units: Units = Units.UNKNOWN
    date: str | None = None


@dataclass(frozen=True, slots=True)
class RowRecord:
    """Tokens of one data row bound to their named fields."""

    id: str
    x: str
    y: str
    type: str
    grid: str
    side: str
    net_id: str
    tail: tuple[str, ...] = ()


# ── Tokenizer / record schema ────────────────────────────────────────────────


def tokenize_row(line: str) -> list[str] | None:
    """Split a candidate data row into tokens.

    Returns ``None`` when the line is not a data row (no ``$`` marker).
    """
    trimmed = line.strip()
    if not trimmed.startswith(ROW_MARKER):
        return None
    return trimmed.split()


def bind_row(tokens: list[str]) -> RowRecord | None:
    """Bind tokens to :data:`ROW_FIELDS`; ``None`` if the arity is too small.

    The row marker is not part of the id: ``$A1`` binds to id ``A1``.
    """
    if len(tokens) < MIN_ROW_TOKENS:
        return None
    fields = dict(zip(ROW_FIELDS, tokens, strict=False))
    fields["id"] = fields["id"].removeprefix(ROW_MARKER)
    fields["side"] = fields["side"].replace("(", "").replace(")", "")
    return RowRecord(**fields, tail=tuple(tokens[MIN_ROW_TOKENS:]))


def parse_tail(tail: str, fallback: str | None = None) -> tuple[str, str]:
    """Derive ``(net_name, virtual_pin)`` from the text after the net id.

    *fallback* is the first tail token; it names the net when the tail has
    no ``T PIN`` suffix.
    """
    match = _NET_NAME_RE.match(tail)
    if match is not None:
        net_name = match.group(1)
    else:
        net_name = fallback or NET_NAME_PLACEHOLDER

    virtual_pin = ""
    if VIRTUAL_PIN_MARKER in tail:
        virtual_pin = tail.split(VIRTUAL_PIN_MARKER)[1].strip()
    return net_name, virtual_pin


def parse_coordinate(token: str) -> float | None:
    """Parse a coordinate token; ``None`` unless it is a finite number."""
    if _NUMBER_RE.fullmatch(token) is None:
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def point_from_record(record: RowRecord) -> Point | None:
    """Validate a bound row and build a :class:`Point` from it."""
    x = parse_coordinate(record.x)
    y = parse_coordinate(record.y)
    if x is None or y is None:
        return None

    tail = " ".join(record.tail)
    net_name, virtual_pin = parse_tail(tail, record.tail[0] if record.tail else None)
    return Point(
        id=record.id,
        x=x,
        y=y,
        type=record.type,
        grid=record.grid,
        side=record.side,
        net_id=record.net_id,
        net_name=net_name,
        virtual_pin=virtual_pin,
    )


# ── Header metadata ──────────────────────────────────────────────────────────


def _scan_header(line: str, scan: _HeaderScan) -> None:
    if "Metric units" in line:
        scan.units = Units.METRIC
    if "Imperial units" in line:
        scan.units = Units.IMPERIAL
    match = _DATE_RE.search(line)
    if match is not None:
        # Later dated lines replace earlier ones.
        scan.date = match.group(0)


# ── Public API ───────────────────────────────────────────────────────────────


def parse_nail_file(content: str, file_name: str) -> Dataset:
    """Parse Tebo-ICT nail-file text into a :class:`Dataset`.

    Raises:
        NoDataFoundError: If no line yields a valid point record.
    """
    scan = _HeaderScan()
    points: list[Point] = []
    dropped = 0

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        _scan_header(line, scan)

        tokens = tokenize_row(line)
        if tokens is None:
            continue
        record = bind_row(tokens)
        point = point_from_record(record) if record is not None else None
        if point is None:
            dropped += 1
            continue
        points.append(point)

    if dropped:
        _LOGGER.debug("Skipped %d malformed data rows in %s", dropped, file_name)
    if not points:
        raise NoDataFoundError()

    _LOGGER.info("Loaded %d nails from %s", len(points), file_name)
    return Dataset(
        points=tuple(points),
        metadata=Metadata(
            file_name=file_name,
            total_nails=len(points),
            units=scan.units,
            date=scan.date,
        ),
        bounds=Bounds.from_points(points),
    )


parse = parse_nail_file


def load_nail_file(file_path: Path) -> Dataset:
    """Read a nail file from disk and parse it.

    The file is decoded as UTF-8; undecodable bytes become U+FFFD.
    """
    text = file_path.read_bytes().decode("utf-8", errors="replace")
    return parse_nail_file(text, file_path.name)
