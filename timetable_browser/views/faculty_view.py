from __future__ import annotations

from typing import List

from timetable_browser.core.base_view import BaseView, TableData
from timetable_browser.core.columns import FILTER_LABELS
from timetable_browser.core.filter_state import FilterState
from timetable_browser.core.view_selector import ViewKind


FACULTY_COLUMNS = [
    "faculty",
    "faculty_code",
    "department",
    "year",
    "semester",
    "section",
    "subject",
    "subject_code",
]


class FacultyView(BaseView):
    """
    Teaching load per faculty member.

    Chosen whenever a faculty or faculty code filter is set. The Day column
    is only added when the day filter is also set.
    """

    id = ViewKind.FACULTY.value
    label = "Faculty View"

    def columns_for(self, state: FilterState) -> List[str]:
        keys = list(FACULTY_COLUMNS)
        if state.day_active:
            keys.append("day")
        return keys

    def compute_data(self, state: FilterState) -> TableData:
        keys = self.columns_for(state)
        filtered = self.filtered_timetable(state)
        return TableData(
            columns=[FILTER_LABELS[k] for k in keys],
            rows=self.project(filtered, keys),
        )
