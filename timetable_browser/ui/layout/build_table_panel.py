from __future__ import annotations

import dash_bootstrap_components as dbc

from dash import dcc, html

from timetable_browser.ui.ids import IDs


def build_table_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Timetable", id=IDs.Control.VIEW_LABEL),
                        html.Small("", id=IDs.Control.ROW_COUNT, className="text-muted ms-auto"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.STATUS_BAR, className="mb-2"),
                    dcc.Loading(
                        id="table-loading",
                        type="default",
                        children=html.Div(id=IDs.Control.TABLE_CONTAINER),
                    ),
                ],
                className="tt-main-body",
            ),
        ],
        className="tt-maincard",
    )
