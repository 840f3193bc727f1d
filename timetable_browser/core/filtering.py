from __future__ import annotations

import logging
from typing import Dict, List

import pandas as pd

from timetable_browser.core.columns import FILTER_KEYS
from timetable_browser.core.dataset import Timetable
from timetable_browser.core.filter_state import FilterState

logger = logging.getLogger(__name__)


def filter_options(timetable: Timetable, key: str) -> List[dict]:
    """
    Dropdown options for one filter key: the distinct non-empty values of
    its column across all loaded rows, in first-seen order.
    """
    values = pd.unique(timetable.column(key))
    return [{"label": v, "value": v} for v in values if v]


def all_filter_options(timetable: Timetable) -> Dict[str, List[dict]]:
    return {key: filter_options(timetable, key) for key in FILTER_KEYS}


def apply_filters(timetable: Timetable, state: FilterState) -> Timetable:
    """
    Keep the rows that satisfy every active filter key.

    A key with an empty selection matches everything; otherwise the row's
    mapped value must be one of the selected values. Row order and
    duplicate rows are preserved.
    """
    frame = timetable.frame
    mask = pd.Series(True, index=frame.index, dtype=bool)

    for key, selected in state.selections().items():
        if selected:
            mask &= frame[key].isin(selected)

    positions = [i for i, keep in enumerate(mask.tolist()) if keep]

    logger.debug(
        "Filters applied",
        extra={"rows_in": len(timetable), "rows_out": len(positions)},
    )
    return timetable.take(positions)
