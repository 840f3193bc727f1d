from __future__ import annotations

__all__ = ["IDs", "filter_select_id"]


class IDs:
    class Store:
        LOAD_TRIGGER = "load-trigger"
        TIMETABLE = "timetable-data"
        FILTER_STATE = "filter-state"

    class Control:
        FILTER_GRID = "filter-grid"

        # Table panel
        VIEW_LABEL = "view-label"
        ROW_COUNT = "row-count"
        TABLE_CONTAINER = "table-container"

        # Status bar
        STATUS_BAR = "status-bar"

        # Navbar
        NAVBAR_SUBTITLE = "navbar-subtitle"


def filter_select_id(key: str) -> str:
    """Dropdown id for a filter key, e.g. faculty_code -> faculty-code-select."""
    return f"{key.replace('_', '-')}-select"
