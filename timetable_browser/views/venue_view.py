from __future__ import annotations

from timetable_browser.core.base_view import BaseView, TableData
from timetable_browser.core.columns import FILTER_LABELS
from timetable_browser.core.filter_state import FilterState
from timetable_browser.core.view_selector import ViewKind


VENUE_COLUMNS = ["venue", "faculty", "subject", "subject_code", "day"]


class VenueView(BaseView):
    """Room occupancy: who teaches what, where, on which day."""

    id = ViewKind.VENUE.value
    label = "Venue View"

    def compute_data(self, state: FilterState) -> TableData:
        filtered = self.filtered_timetable(state)
        return TableData(
            columns=[FILTER_LABELS[k] for k in VENUE_COLUMNS],
            rows=self.project(filtered, VENUE_COLUMNS),
        )
