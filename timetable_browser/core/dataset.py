from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from timetable_browser.core.columns import (
    DEFAULT_MAPPING,
    FILTER_KEYS,
    ColumnMapping,
    TimetableEntry,
)


class Timetable:
    """
    In-memory timetable loaded from the sheet.

    Includes:
    - the header row exactly as the sheet returned it
    - the raw data rows (already trimmed), positional
    - one TimetableEntry per row with the mapped fields pulled out by name
    - a pandas frame of the mapped fields, used for filtering and options

    Instances are treated as immutable; filtering returns a new Timetable.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[str]],
        mapping: ColumnMapping = DEFAULT_MAPPING,
    ) -> None:
        self.headers: List[str] = list(headers)
        self.rows: List[List[str]] = [list(r) for r in rows]
        self.mapping = mapping

        self.entries: List[TimetableEntry] = [
            TimetableEntry.from_row(r, mapping) for r in self.rows
        ]

        # Mapped fields only; index is the row position in self.rows
        self.frame: pd.DataFrame = pd.DataFrame(
            [[e.get(k) for k in FILTER_KEYS] for e in self.entries],
            columns=list(FILTER_KEYS),
            dtype=object,
        )

    @classmethod
    def empty(cls) -> Timetable:
        return cls(headers=[], rows=[])

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def column(self, key: str) -> pd.Series:
        """Mapped column for a filter key, "" where a row is too short."""
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key '{key}'")
        return self.frame[key]

    def take(self, positions: Iterable[int]) -> Timetable:
        """New Timetable with the rows at `positions`, in that order."""
        return Timetable(
            headers=self.headers,
            rows=[self.rows[i] for i in positions],
            mapping=self.mapping,
        )

    # -------------------------------------------------------------------------
    # Serialisation (dcc.Store payloads)
    # -------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"headers": list(self.headers), "rows": [list(r) for r in self.rows]}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Timetable:
        if not data:
            return cls.empty()
        return cls(
            headers=[str(h) for h in data.get("headers") or []],
            rows=[[str(c) for c in row] for row in data.get("rows") or []],
        )

    def __repr__(self) -> str:
        return f"Timetable(columns={len(self.headers)}, rows={len(self.rows)})"
