from __future__ import annotations

from typing import List, Optional

from dash import html

from timetable_browser.core.columns import FILTER_KEYS
from timetable_browser.core.dataset import Timetable
from timetable_browser.core.filtering import all_filter_options


def get_filter_dropdown_options(timetable: Timetable) -> List[List[dict]]:
    """Options for all filter dropdowns, in FILTER_KEYS order."""
    options = all_filter_options(timetable)
    return [options[key] for key in FILTER_KEYS]


def _rows(n: int) -> str:
    return "row" if n == 1 else "rows"


def load_status(timetable: Optional[Timetable], error: Optional[str]) -> html.Span:
    if timetable is None:
        return html.Span(
            [html.Strong("Status: "), "Loading timetable…"],
            className="tt-status tt-status-pending",
        )

    if error:
        return html.Span(
            [html.Strong("Status: "), f"Could not load timetable: {error}"],
            className="tt-status tt-status-error",
        )

    return html.Span(
        [html.Strong("Status: "), f"{len(timetable)} {_rows(len(timetable))} loaded."],
        className="tt-status tt-status-ok",
    )


def row_count_text(n_rows: int, n_total: int) -> str:
    if n_rows == n_total:
        return f"{n_total} {_rows(n_total)}"
    return f"{n_rows} of {n_total} {_rows(n_total)}"
