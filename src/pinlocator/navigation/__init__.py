"""Navigation layer — viewport math, search, session state, rendering.

Quick start::

    from pinlocator.navigation import Navigator

    nav = Navigator()
    nav.load_text(text, "board.asc")
    nav.set_query("GND")
    nav.cycle()            # centers the first match
    model = nav.display()
"""

from pinlocator.navigation.navigator import Navigator, NavigatorEvents
from pinlocator.navigation.render import (
    DisplayModel,
    LegendEntry,
    PointGlyph,
    render,
    type_color,
)
from pinlocator.navigation.search import SearchMode, SearchState, search
from pinlocator.navigation.state import DisplaySettings, SessionState
from pinlocator.navigation.viewport import (
    ViewFrame,
    ViewportState,
    ViewTransform,
    focus_on,
    pan,
    reset_view,
    view_transform,
    zoom_by,
)

__all__ = [
    # Orchestration
    "Navigator",
    "NavigatorEvents",
    # State
    "DisplaySettings",
    "SearchState",
    "SessionState",
    "ViewportState",
    # Viewport
    "ViewFrame",
    "ViewTransform",
    "focus_on",
    "pan",
    "reset_view",
    "view_transform",
    "zoom_by",
    # Search
    "SearchMode",
    "search",
    # Rendering
    "DisplayModel",
    "LegendEntry",
    "PointGlyph",
    "render",
    "type_color",
]
