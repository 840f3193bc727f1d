from .sheet_service import (
    LoadResult,
    build_values_url,
    fetch_sheet_values,
    load_timetable,
    parse_sheet_values,
)

__all__ = [
    "LoadResult",
    "build_values_url",
    "fetch_sheet_values",
    "load_timetable",
    "parse_sheet_values",
]
