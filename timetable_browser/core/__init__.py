"""
Core domain layer: timetable abstraction, column mapping, filter state,
filtering, view selection, view base class and the view registry
"""

from .columns import FILTER_KEYS, ColumnMapping, TimetableEntry
from .dataset import Timetable
from .filter_state import FilterState
from .filtering import apply_filters, filter_options
from .view_selector import ViewKind, select_view
from .base_view import BaseView, TableData
from .view_registry import ViewRegistry

__all__ = [
    "FILTER_KEYS",
    "ColumnMapping",
    "TimetableEntry",
    "Timetable",
    "FilterState",
    "apply_filters",
    "filter_options",
    "ViewKind",
    "select_view",
    "BaseView",
    "TableData",
    "ViewRegistry",
]
