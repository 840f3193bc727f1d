from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State

from timetable_browser.core.columns import FILTER_KEYS
from timetable_browser.core.filter_state import FilterState
from timetable_browser.services.sheet_service import LoadResult
from timetable_browser.ui.helpers import get_filter_dropdown_options
from timetable_browser.ui.ids import IDs, filter_select_id

if TYPE_CHECKING:
    from timetable_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

_SELECT_ID_TO_KEY = {filter_select_id(key): key for key in FILTER_KEYS}


def build_filter_state(
    previous: dict[str, Any] | None,
    triggered_id: str | None,
    values: tuple[Any, ...] | list[Any],
) -> dict[str, Any]:
    """
    New FilterState payload after a dropdown change.

    Only the dropdown that fired replaces its key; every other key keeps its
    previous selection. Without a known trigger (initial call) the state is
    rebuilt from all dropdown values.
    """
    try:
        state = FilterState.from_dict(previous)
    except (TypeError, ValueError):
        logger.warning("Invalid filter state in store, resetting", extra={"filter_state": previous})
        state = FilterState()

    values_by_key = dict(zip(FILTER_KEYS, values))
    key = _SELECT_ID_TO_KEY.get(triggered_id) if triggered_id else None

    if key is not None:
        state = state.with_selection(key, values_by_key.get(key))
    else:
        for k in FILTER_KEYS:
            state = state.with_selection(k, values_by_key.get(k))

    return state.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Dropdown options (from the loaded, unfiltered timetable)
    # ---------------------------------------------------------
    @app.callback(
        *[Output(filter_select_id(key), "options") for key in FILTER_KEYS],
        Input(IDs.Store.TIMETABLE, "data"),
    )
    def update_filter_options(timetable_data: dict[str, Any] | None):
        if timetable_data is None:
            return tuple([] for _ in FILTER_KEYS)
        timetable = LoadResult.from_dict(timetable_data).timetable
        return tuple(get_filter_dropdown_options(timetable))

    # ---------------------------------------------------------
    # Dropdown values -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        *[Input(filter_select_id(key), "value") for key in FILTER_KEYS],
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def update_filter_state(*args: Any):
        *values, previous = args
        return build_filter_state(previous, dash.ctx.triggered_id, values)
