from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

# Dropdown order in the UI, and the order of FilterState fields
FILTER_KEYS: Tuple[str, ...] = (
    "department",
    "year",
    "semester",
    "section",
    "day",
    "faculty",
    "faculty_code",
    "subject",
    "subject_code",
    "venue",
    "session",
)

FILTER_LABELS: Dict[str, str] = {
    "department": "Department",
    "year": "Year",
    "semester": "Semester",
    "section": "Section",
    "day": "Day",
    "faculty": "Faculty",
    "faculty_code": "Faculty Code",
    "subject": "Subject",
    "subject_code": "Subject Code",
    "venue": "Venue",
    "session": "Session",
}


@dataclass(frozen=True)
class ColumnMapping:
    """
    Positional index of each semantic field within a raw sheet row.

    The sheet has no reliable header names, so the positions are fixed.
    Column 10 is not mapped to any field.
    """
    department: int = 0
    year: int = 1
    semester: int = 2
    section: int = 3
    day: int = 4
    subject_code: int = 5
    session: int = 6
    subject: int = 7
    faculty: int = 8
    faculty_code: int = 9
    venue: int = 11

    def index_of(self, key: str) -> int:
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key '{key}'")
        return getattr(self, key)

    def value(self, row: Sequence[str], key: str) -> str:
        """Cell for `key` in `row`, or "" when the row is too short."""
        idx = self.index_of(key)
        if idx < len(row):
            return row[idx]
        return ""


DEFAULT_MAPPING = ColumnMapping()


@dataclass(frozen=True)
class TimetableEntry:
    """
    One data row with its mapped cells pulled out by name.

    `cells` keeps the full raw row (including unmapped columns) for the
    default view.
    """
    department: str
    year: str
    semester: str
    section: str
    day: str
    faculty: str
    faculty_code: str
    subject: str
    subject_code: str
    venue: str
    session: str
    cells: Tuple[str, ...] = ()

    @classmethod
    def from_row(cls, row: Sequence[str], mapping: ColumnMapping = DEFAULT_MAPPING) -> TimetableEntry:
        values = {key: mapping.value(row, key) for key in FILTER_KEYS}
        return cls(cells=tuple(row), **values)

    def get(self, key: str) -> str:
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key '{key}'")
        return getattr(self, key)

