from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from timetable_browser.core.columns import FILTER_KEYS, FILTER_LABELS
from timetable_browser.ui.ids import IDs, filter_select_id


def build_filter_dropdown(key: str) -> html.Div:
    label = FILTER_LABELS[key]
    return html.Div(
        [
            html.Label(label, className="form-label", htmlFor=filter_select_id(key)),
            dcc.Dropdown(
                id=filter_select_id(key),
                options=[],
                value=[],
                multi=True,
                placeholder=f"Select {label}",
                className="mb-3",
            ),
        ],
    )


def build_filter_panel() -> dbc.Card:
    # Options are filled in once the timetable has loaded
    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                dbc.Row(
                    [
                        dbc.Col(build_filter_dropdown(key), xs=12, md=6, lg=4)
                        for key in FILTER_KEYS
                    ],
                    id=IDs.Control.FILTER_GRID,
                    className="g-3",
                )
            ),
        ],
        className="tt-filters mb-3",
    )
