"""Test-point dataset value objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum


class Units(StrEnum):
    """Coordinate units declared in the file header."""

    METRIC = "Metric"
    IMPERIAL = "Imperial"
    UNKNOWN = "Unknown"


@dataclass(frozen=True, slots=True)
class Point:
    """One test location (nail) on the board."""

    id: str
    x: float
    y: float
    type: str  # classification code, used for colour grouping
    grid: str
    side: str
    net_id: str
    net_name: str
    virtual_pin: str = ""


@dataclass(frozen=True, slots=True)
class Metadata:
    """File-level information gathered while scanning headers."""

    file_name: str
    total_nails: int
    units: Units = Units.UNKNOWN
    date: str | None = None


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned extent of all points in data units."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Bounds:
        """Compute min/max over point coordinates.

        Raises:
            ValueError: If *points* is empty.
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot compute bounds of an empty point set")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(frozen=True, slots=True)
class Dataset:
    """Immutable result of one successful parse.

    Points keep source-file order; that order drives search results and
    match cycling.
    """

    points: tuple[Point, ...]
    metadata: Metadata
    bounds: Bounds

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def find(self, point_id: str) -> Point | None:
        """Return the first point with *point_id*, or ``None``."""
        for point in self.points:
            if point.id == point_id:
                return point
        return None

    def unique_types(self) -> list[str]:
        """Sorted distinct type codes (used by the legend)."""
        return sorted({p.type for p in self.points})
