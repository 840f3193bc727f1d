from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from timetable_browser.core.exceptions import ConfigError

ENV_SHEET_ID = "TIMETABLE_SHEET_ID"
ENV_API_KEY = "TIMETABLE_API_KEY"
ENV_SHEET_NAME = "TIMETABLE_SHEET_NAME"
ENV_FETCH_TIMEOUT = "TIMETABLE_FETCH_TIMEOUT"

DEFAULT_FETCH_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class SheetConfig:
    """
    Where the timetable lives: spreadsheet id, API key and tab name.

    Read once at startup and passed explicitly into the loader.
    """
    sheet_id: str = ""
    api_key: str = field(default="", repr=False)
    sheet_name: str = ""
    timeout_s: float = DEFAULT_FETCH_TIMEOUT_S

    def missing_fields(self) -> List[str]:
        return [
            name
            for name, value in (
                ("sheet_id", self.sheet_id),
                ("api_key", self.api_key),
                ("sheet_name", self.sheet_name),
            )
            if not value
        ]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ConfigError(f"Sheet is not configured: missing {', '.join(missing)}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> SheetConfig:
        env = os.environ if environ is None else environ

        raw_timeout = (env.get(ENV_FETCH_TIMEOUT) or "").strip()
        if raw_timeout:
            try:
                timeout_s = float(raw_timeout)
            except ValueError:
                raise ConfigError(f"{ENV_FETCH_TIMEOUT} must be a number, got {raw_timeout!r}")
            if timeout_s <= 0:
                raise ConfigError(f"{ENV_FETCH_TIMEOUT} must be positive, got {raw_timeout!r}")
        else:
            timeout_s = DEFAULT_FETCH_TIMEOUT_S

        return cls(
            sheet_id=(env.get(ENV_SHEET_ID) or "").strip(),
            api_key=(env.get(ENV_API_KEY) or "").strip(),
            sheet_name=(env.get(ENV_SHEET_NAME) or "").strip(),
            timeout_s=timeout_s,
        )


@dataclass
class GlobalConfig:
    ui_title: str = "Timetable Manager"
    subtitle: str = "Browse the published timetable"
