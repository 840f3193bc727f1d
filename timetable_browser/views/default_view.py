from __future__ import annotations

from timetable_browser.core.base_view import BaseView, TableData
from timetable_browser.core.filter_state import FilterState
from timetable_browser.core.view_selector import ViewKind

NO_RESULTS_MESSAGE = "No results found."


class DefaultView(BaseView):
    """
    The sheet as-is: every header column in its original order and every
    raw cell of each matching row, including unmapped columns.
    """

    id = ViewKind.DEFAULT.value
    label = "Full Timetable"

    def compute_data(self, state: FilterState) -> TableData:
        filtered = self.filtered_timetable(state)
        return TableData(
            columns=list(self.timetable.headers),
            rows=[list(row) for row in filtered.rows],
            empty_message=NO_RESULTS_MESSAGE,
        )
