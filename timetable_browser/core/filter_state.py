from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from typing import List, Dict, Any, Iterable, Optional

from timetable_browser.core.columns import FILTER_KEYS


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    One list of selected values per filter key. An empty list means the
    key puts no constraint on the rows.

    Activity flags:

    - faculty_active: faculty or faculty_code has a selection
    - venue_active: venue has a selection
    - subject_active: subject or subject_code has a selection (no view depends on it)
    - day_active: day has a selection
    """

    department: List[str] = field(default_factory=list)
    year: List[str] = field(default_factory=list)
    semester: List[str] = field(default_factory=list)
    section: List[str] = field(default_factory=list)
    day: List[str] = field(default_factory=list)
    faculty: List[str] = field(default_factory=list)
    faculty_code: List[str] = field(default_factory=list)
    subject: List[str] = field(default_factory=list)
    subject_code: List[str] = field(default_factory=list)
    venue: List[str] = field(default_factory=list)
    session: List[str] = field(default_factory=list)

    def selection(self, key: str) -> List[str]:
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key '{key}'")
        return getattr(self, key)

    def selections(self) -> Dict[str, List[str]]:
        return {key: self.selection(key) for key in FILTER_KEYS}

    def with_selection(self, key: str, values: Optional[Iterable[Any]]) -> FilterState:
        """Copy of this state with only `key` replaced."""
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key '{key}'")
        return replace(self, **{key: [str(v) for v in values or []]})

    @property
    def is_empty(self) -> bool:
        return not any(self.selections().values())

    @property
    def faculty_active(self) -> bool:
        return bool(self.faculty) or bool(self.faculty_code)

    @property
    def venue_active(self) -> bool:
        return bool(self.venue)

    @property
    def subject_active(self) -> bool:
        return bool(self.subject) or bool(self.subject_code)

    @property
    def day_active(self) -> bool:
        return bool(self.day)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        return cls(**{key: [str(v) for v in data.get(key) or []] for key in FILTER_KEYS})
