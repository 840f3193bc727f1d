from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import html

from .dataset import Timetable
from .filter_state import FilterState
from .filtering import apply_filters


@dataclass(frozen=True)
class TableData:
    """
    Output of {@link BaseView.compute_data}: header cells plus body rows.

    empty_message is rendered as a single full-width row when there are no rows.
    """
    columns: List[str]
    rows: List[List[str]] = field(default_factory=list)
    empty_message: Optional[str] = None


class BaseView(ABC):
    """
    Abstract base class for all table views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally, matches a ViewKind value
    - expose a 'label' - used for UI/human-readable applications
    - implement 'compute_data' - project the filtered timetable into TableData

    Views never filter on their own; they all share {@link filtered_timetable}.
    """

    id: str = None
    label: str = None

    def __init__(self, timetable: Timetable):
        self.timetable = timetable

    @abstractmethod
    def compute_data(self, state: FilterState) -> TableData:
        """
        Compute the table given the current FilterState
        :param state: the current {@link FilterState} - what filters the user has toggled for
        :return: the header and body cells for this layout
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    def filtered_timetable(self, state: FilterState) -> Timetable:
        return apply_filters(self.timetable, state)

    @staticmethod
    def project(timetable: Timetable, keys: Sequence[str]) -> List[List[str]]:
        """Mapped cells of every row, in the order of `keys`."""
        return [[entry.get(k) for k in keys] for entry in timetable.entries]

    def render_table(self, data: TableData) -> dbc.Table:
        header = html.Thead(
            html.Tr([html.Th(c, className="text-nowrap") for c in data.columns]),
            className="table-light",
        )

        if not data.rows and data.empty_message:
            body_rows = [
                html.Tr(
                    html.Td(
                        data.empty_message,
                        colSpan=max(len(data.columns), 1),
                        className="text-center text-muted py-3",
                    )
                )
            ]
        else:
            body_rows = [html.Tr([html.Td(cell) for cell in row]) for row in data.rows]

        return dbc.Table(
            [header, html.Tbody(body_rows)],
            id=f"{self.id}-table",
            bordered=False,
            hover=True,
            responsive=True,
            size="sm",
            className="tt-table mb-0",
        )
