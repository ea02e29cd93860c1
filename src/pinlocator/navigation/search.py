"""Search by nail id or net name, with ordered match cycling."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from pinlocator.core.models import Dataset, Point

NO_SELECTION = -1


class SearchMode(StrEnum):
    """Which point field a query is matched against."""

    BY_ID = "id"
    BY_NET = "net"


def search(dataset: Dataset, query: str, mode: SearchMode) -> list[Point]:
    """Return points whose id / net name contains *query* (case-insensitive).

    Results keep dataset order and are not deduplicated. A blank query
    matches nothing.
    """
    if not query.strip():
        return []
    needle = query.lower()
    if mode == SearchMode.BY_NET:
        return [p for p in dataset.points if needle in p.net_name.lower()]
    return [p for p in dataset.points if needle in p.id.lower()]


@dataclass(frozen=True, slots=True)
class SearchState:
    """Query text, mode, selected match index and current focus target."""

    query: str = ""
    mode: SearchMode = SearchMode.BY_ID
    index: int = NO_SELECTION
    focus_id: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "mode": str(self.mode),
            "index": self.index,
            "focus_id": self.focus_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchState:
        return cls(
            query=str(data.get("query", "")),
            mode=SearchMode(data.get("mode", SearchMode.BY_ID)),
            index=int(data.get("index", NO_SELECTION)),
            focus_id=data.get("focus_id"),
        )


def with_query(state: SearchState, query: str) -> SearchState:
    """Change the query text; the selection resets only on an actual change."""
    if query == state.query:
        return state
    return replace(state, query=query, index=NO_SELECTION)


def with_mode(state: SearchState, mode: SearchMode) -> SearchState:
    if mode == state.mode:
        return state
    return replace(state, mode=mode, index=NO_SELECTION)


def cycle(state: SearchState, matches: list[Point]) -> SearchState:
    """Advance to the next match, wrapping around; no-op without matches."""
    if not matches:
        return state
    index = (state.index + 1) % len(matches)
    return replace(state, index=index, focus_id=matches[index].id)


def select(state: SearchState, matches: list[Point], index: int) -> SearchState:
    """Jump straight to ``matches[index]`` (result-list click)."""
    if not 0 <= index < len(matches):
        return state
    return replace(state, index=index, focus_id=matches[index].id)


def match_counter(state: SearchState, matches: list[Point]) -> str:
    """Return ``"i / n"`` for the search bar, ``""`` without matches."""
    if not matches:
        return ""
    return f"{state.index + 1} / {len(matches)}"
