from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output

from timetable_browser.core.filter_state import FilterState
from timetable_browser.services.sheet_service import LoadResult
from timetable_browser.ui.helpers import load_status, row_count_text
from timetable_browser.ui.ids import IDs

if TYPE_CHECKING:
    from timetable_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Error placeholder
# -----------------------------------------------------------------------------
def _error_alert(details: str) -> dbc.Alert:
    return dbc.Alert(
        ["Something went wrong while rendering this table. ", details],
        color="danger",
        className="mb-0",
    )


def render_timetable(ctx: AppConfig, timetable_data: Optional[dict[str, Any]], fs_data: Optional[dict[str, Any]]):
    """
    Stored timetable + FilterState -> (table, view label, row count, status).

    Before the load finishes the store is empty; the page then shows the
    default layout over an empty timetable.
    """
    result = LoadResult.from_dict(timetable_data)
    timetable = result.timetable
    status = load_status(None if timetable_data is None else timetable, result.error)

    try:
        state = FilterState.from_dict(fs_data)
    except (TypeError, ValueError):
        logger.exception("Invalid filter state in render callback: %r", fs_data)
        state = FilterState()

    registry = ctx.registry
    if registry is None:
        return _error_alert("View registry is not available."), "Timetable", "", status

    try:
        view = registry.for_state(state, timetable)

        logger.info(
            "render_start",
            extra={
                "view_id": view.id,
                "rows": len(timetable),
                "active_filters": [k for k, v in state.selections().items() if v],
            },
        )

        data = view.compute_data(state)
        table = view.render_table(data)
        return table, view.label, row_count_text(len(data.rows), len(timetable)), status

    except Exception:
        logger.exception(
            "Error in update_table_from_state",
            extra={"filter_state": fs_data},
        )
        return (
            _error_alert("If this keeps happening, grab the logs and open an issue."),
            "Timetable",
            "",
            status,
        )


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Main table: timetable + FilterState -> table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_CONTAINER, "children"),
        Output(IDs.Control.VIEW_LABEL, "children"),
        Output(IDs.Control.ROW_COUNT, "children"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.TIMETABLE, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_table_from_state(timetable_data: dict[str, Any] | None, fs_data: dict[str, Any] | None):
        return render_timetable(ctx, timetable_data, fs_data)
