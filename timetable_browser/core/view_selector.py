from __future__ import annotations

from enum import Enum

from timetable_browser.core.filter_state import FilterState


class ViewKind(str, Enum):
    FACULTY = "faculty"
    VENUE = "venue"
    DEFAULT = "default"


def select_view(state: FilterState) -> ViewKind:
    """
    Pick the table layout for a filter state. First match wins:
    faculty filters, then venue filters, then the default layout.
    """
    if state.faculty_active:
        return ViewKind.FACULTY
    if state.venue_active:
        return ViewKind.VENUE
    return ViewKind.DEFAULT
