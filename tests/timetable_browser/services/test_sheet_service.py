from __future__ import annotations

import pytest
import requests

import timetable_browser.services.sheet_service as sheet_mod
from timetable_browser.config.model import SheetConfig
from timetable_browser.core.exceptions import SheetFetchError
from timetable_browser.services.sheet_service import (
    LoadResult,
    build_values_url,
    fetch_sheet_values,
    load_timetable,
    parse_sheet_values,
)

HEADERS = ["Dept", "Year", "Sem", "Sec", "Day", "SubjCode", "Session", "Subject", "Faculty", "FacCode", "X", "Venue"]


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, text="", json_error=False):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


def _config() -> SheetConfig:
    return SheetConfig(sheet_id="abc123", api_key="KEY", sheet_name="Spring 2026", timeout_s=5.0)


def _values_payload():
    return {
        "range": "'Spring 2026'!A1:L8",
        "values": [
            ["University Timetable"],
            [],
            ["Version 1.2"],
            [],
            HEADERS,
            ["  CS ", "2", "1", "A", "Mon", "CS101", "S1", "Algorithms", " Dr. Smith", "FAC1", "", "Room5 "],
            ["EE", "3", "", "B", "Tue"],
        ],
    }


def _patch_get(monkeypatch, response=None, exc=None):
    calls = []

    def fake_get(url, params=None, timeout=None, **kwargs):
        calls.append({"url": url, "params": params, "timeout": timeout})
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(sheet_mod.requests, "get", fake_get)
    return calls


def test_build_values_url_quotes_sheet_name():
    url = build_values_url(_config())

    assert url == "https://sheets.googleapis.com/v4/spreadsheets/abc123/values/Spring%202026"


def test_parse_sheet_values_splits_header_and_trims_cells():
    tt = parse_sheet_values(_values_payload())

    assert tt.headers == HEADERS
    assert tt.rows[0] == ["CS", "2", "1", "A", "Mon", "CS101", "S1", "Algorithms", "Dr. Smith", "FAC1", "", "Room5"]
    assert tt.rows[1] == ["EE", "3", "", "B", "Tue"]


def test_parse_sheet_values_none_cells_become_empty():
    payload = {"values": [[], [], [], [], ["H"], [None, " x ", ""]]}

    tt = parse_sheet_values(payload)

    assert tt.rows == [["", "x", ""]]


def test_parse_sheet_values_header_only():
    payload = {"values": [[], [], [], [], HEADERS]}

    tt = parse_sheet_values(payload)

    assert tt.headers == HEADERS
    assert tt.is_empty


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"values": None},
        {"values": "nope"},
        {"values": [["a"], ["b"], ["c"], ["d"]]},
    ],
)
def test_parse_sheet_values_rejects_invalid_payload(payload):
    with pytest.raises(SheetFetchError, match="No valid data"):
        parse_sheet_values(payload)


def test_fetch_sheet_values_passes_key_and_timeout(monkeypatch):
    calls = _patch_get(monkeypatch, response=_FakeResponse(payload={"values": []}))

    out = fetch_sheet_values(_config())

    assert out == {"values": []}
    assert calls[0]["params"] == {"key": "KEY"}
    assert calls[0]["timeout"] == 5.0
    assert calls[0]["url"].endswith("/abc123/values/Spring%202026")


def test_fetch_sheet_values_http_error(monkeypatch):
    _patch_get(monkeypatch, response=_FakeResponse(status_code=403, text="API key not valid"))

    with pytest.raises(SheetFetchError) as excinfo:
        fetch_sheet_values(_config())

    assert excinfo.value.status_code == 403
    assert "API key not valid" in str(excinfo.value)


def test_fetch_sheet_values_invalid_json(monkeypatch):
    _patch_get(monkeypatch, response=_FakeResponse(json_error=True, text="<html>"))

    with pytest.raises(SheetFetchError, match="Invalid JSON"):
        fetch_sheet_values(_config())


def test_fetch_sheet_values_non_object_json(monkeypatch):
    _patch_get(monkeypatch, response=_FakeResponse(payload=[1, 2, 3]))

    with pytest.raises(SheetFetchError, match="not a JSON object"):
        fetch_sheet_values(_config())


def test_fetch_sheet_values_network_error(monkeypatch):
    _patch_get(monkeypatch, exc=requests.ConnectionError("connection refused"))

    with pytest.raises(SheetFetchError, match="connection refused"):
        fetch_sheet_values(_config())


def test_load_timetable_success(monkeypatch):
    _patch_get(monkeypatch, response=_FakeResponse(payload=_values_payload()))

    result = load_timetable(_config())

    assert result.ok
    assert len(result.timetable) == 2
    assert result.timetable.headers == HEADERS


def test_load_timetable_too_few_rows_degrades_to_empty(monkeypatch):
    payload = {"values": [["Title"], [], [], HEADERS]}
    _patch_get(monkeypatch, response=_FakeResponse(payload=payload))

    result = load_timetable(_config())

    assert not result.ok
    assert result.timetable.is_empty
    assert result.timetable.headers == []


def test_load_timetable_network_error_degrades_to_empty(monkeypatch):
    _patch_get(monkeypatch, exc=requests.Timeout("read timed out"))

    result = load_timetable(_config())

    assert result.timetable.is_empty
    assert "read timed out" in result.error


def test_load_timetable_incomplete_config_skips_request(monkeypatch):
    calls = _patch_get(monkeypatch, response=_FakeResponse(payload=_values_payload()))

    result = load_timetable(SheetConfig(sheet_id="abc123"))

    assert calls == []
    assert result.timetable.is_empty
    assert "api_key" in result.error and "sheet_name" in result.error


def test_load_result_to_from_dict():
    result = LoadResult(timetable=parse_sheet_values(_values_payload()))

    rebuilt = LoadResult.from_dict(result.to_dict())

    assert rebuilt.ok
    assert rebuilt.timetable.rows == result.timetable.rows
    assert LoadResult.from_dict({"headers": [], "rows": [], "error": "boom"}).error == "boom"


def test_load_timetable_network_error_does_not_expose_api_key(monkeypatch, caplog):
    config = SheetConfig(sheet_id="abc123", api_key="SECRET-KEY-123", sheet_name="Tab")
    exc = requests.ConnectionError(
        "HTTPSConnectionPool(host='sheets.googleapis.com', port=443): Max retries exceeded with url: "
        "/v4/spreadsheets/abc123/values/Tab?key=SECRET-KEY-123 (Caused by NewConnectionError('Connection refused'))"
    )
    _patch_get(monkeypatch, exc=exc)

    with caplog.at_level("ERROR"):
        result = load_timetable(config)

    assert result.timetable.is_empty
    assert "Connection refused" in result.error
    assert "SECRET-KEY-123" not in result.error
    assert all("SECRET-KEY-123" not in getattr(r, "error", "") for r in caplog.records)


def test_fetch_sheet_values_http_error_body_does_not_expose_api_key(monkeypatch):
    config = SheetConfig(sheet_id="abc123", api_key="SECRET-KEY-123", sheet_name="Tab")
    _patch_get(monkeypatch, response=_FakeResponse(status_code=400, text="API key SECRET-KEY-123 not valid"))

    with pytest.raises(SheetFetchError) as excinfo:
        fetch_sheet_values(config)

    assert "SECRET-KEY-123" not in str(excinfo.value)
    assert excinfo.value.status_code == 400
