from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from timetable_browser.config.model import SheetConfig
from timetable_browser.core.dataset import Timetable
from timetable_browser.core.exceptions import ConfigError, SheetFetchError

logger = logging.getLogger(__name__)

SHEETS_API_BASE = "https://sheets.googleapis.com/v4/spreadsheets"

# Rows 0-3 are title/metadata rows in the published sheet
HEADER_ROW_INDEX = 4
MIN_ROWS = HEADER_ROW_INDEX + 1


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of one load attempt. `error` is None on success; on failure the
    timetable is empty and `error` carries the reason shown to the user.
    """
    timetable: Timetable
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        payload = self.timetable.to_dict()
        payload["error"] = self.error
        return payload

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> LoadResult:
        data = data or {}
        return cls(timetable=Timetable.from_dict(data), error=data.get("error"))


def build_values_url(config: SheetConfig) -> str:
    """Values endpoint for the configured tab (the API key goes in the query string)."""
    sheet_id = quote(config.sheet_id, safe="")
    sheet_name = quote(config.sheet_name, safe="")
    return f"{SHEETS_API_BASE}/{sheet_id}/values/{sheet_name}"


def _redact(text: str, config: SheetConfig) -> str:
    """Mask the API key; requests puts the full query string into its errors."""
    if config.api_key:
        text = text.replace(config.api_key, "***")
    return text


def fetch_sheet_values(config: SheetConfig) -> Dict[str, Any]:
    """
    GET the sheet values and return the decoded JSON object.

    Raises:
        SheetFetchError: transport failure, non-2xx response, or a body that
        is not a JSON object
    """
    url = build_values_url(config)
    try:
        resp = requests.get(url, params={"key": config.api_key}, timeout=float(config.timeout_s))
    except requests.RequestException as e:
        raise SheetFetchError(_redact(f"Request to sheets API failed: {e}", config)) from e

    if resp.status_code // 100 != 2:
        raise SheetFetchError(
            _redact(f"Sheets API returned HTTP {resp.status_code}: {resp.text[:200]}", config),
            status_code=int(resp.status_code),
        )

    try:
        payload = resp.json()
    except ValueError as e:
        raise SheetFetchError(_redact(f"Invalid JSON response: {e}", config), status_code=int(resp.status_code)) from e

    if not isinstance(payload, dict):
        raise SheetFetchError("Sheets API response is not a JSON object", status_code=int(resp.status_code))
    return payload


def _clean_cell(cell: Any) -> str:
    return str(cell).strip() if cell else ""


def parse_sheet_values(payload: Dict[str, Any]) -> Timetable:
    """
    Turn a values payload into a Timetable.

    Row 4 is the header; rows 5+ are data rows with every cell trimmed.

    Raises:
        SheetFetchError: if 'values' is missing or has fewer than 5 rows
    """
    rows = payload.get("values")
    if not isinstance(rows, list) or len(rows) < MIN_ROWS:
        raise SheetFetchError("No valid data found in the sheet.")

    headers = [str(h) if h is not None else "" for h in rows[HEADER_ROW_INDEX] or []]
    data_rows = [[_clean_cell(cell) for cell in (row or [])] for row in rows[MIN_ROWS:]]

    return Timetable(headers=headers, rows=data_rows)


def load_timetable(config: SheetConfig) -> LoadResult:
    """
    Fetch and parse the timetable. Never raises for config/fetch/parse
    problems: they are logged and an empty timetable is returned.
    """
    try:
        config.validate()
        payload = fetch_sheet_values(config)
        timetable = parse_sheet_values(payload)
    except ConfigError as e:
        logger.error("Timetable not loaded", extra={"error": str(e)})
        return LoadResult(timetable=Timetable.empty(), error=str(e))
    except SheetFetchError as e:
        logger.error(
            "Error fetching timetable",
            extra={
                "error": str(e),
                "status_code": e.status_code,
                "sheet_name": config.sheet_name,
            },
        )
        return LoadResult(timetable=Timetable.empty(), error=str(e))

    logger.info(
        "Timetable loaded",
        extra={
            "sheet_name": config.sheet_name,
            "rows": len(timetable),
            "columns": len(timetable.headers),
        },
    )
    return LoadResult(timetable=timetable)
