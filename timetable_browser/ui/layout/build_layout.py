from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from timetable_browser.core.filter_state import FilterState
from timetable_browser.ui.ids import IDs
from timetable_browser.ui.layout.build_filter_panel import build_filter_panel
from timetable_browser.ui.layout.build_navbar import build_navbar
from timetable_browser.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from timetable_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    return dbc.Container(
        fluid=True,
        className="tt-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores. LOAD_TRIGGER never changes, so the load
            # callback runs once per page load.
            dcc.Store(id=IDs.Store.LOAD_TRIGGER, data=0),
            dcc.Store(id=IDs.Store.TIMETABLE, storage_type="memory"),
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="memory",
                data=FilterState().to_dict(),
            ),

            dbc.Row(
                dbc.Col(
                    [
                        build_filter_panel(),
                        build_table_panel(),
                    ],
                    className="mt-3",
                ),
                className="gx-3",
            ),
        ],
    )
