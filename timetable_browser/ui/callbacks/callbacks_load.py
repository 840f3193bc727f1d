from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from timetable_browser.core.dataset import Timetable
from timetable_browser.services.sheet_service import LoadResult, load_timetable
from timetable_browser.ui.ids import IDs

if TYPE_CHECKING:
    from timetable_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_load_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # One fetch per page load
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.TIMETABLE, "data"),
        Input(IDs.Store.LOAD_TRIGGER, "data"),
    )
    def load_timetable_on_page_load(_trigger: Any) -> dict[str, Any]:
        try:
            result = load_timetable(ctx.sheet_config)
        except Exception:
            logger.exception("Unexpected error while loading timetable")
            result = LoadResult(timetable=Timetable.empty(), error="Unexpected error while loading the timetable.")
        return result.to_dict()
