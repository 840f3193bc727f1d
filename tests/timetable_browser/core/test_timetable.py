from __future__ import annotations

from timetable_browser.core.dataset import Timetable

HEADERS = ["Dept", "Year", "Sem", "Sec", "Day", "SubjCode", "Session", "Subject", "Faculty", "FacCode", "X", "Venue"]
ROW = ["CS", "2", "1", "A", "Mon", "CS101", "S1", "Algorithms", "Dr. Smith", "FAC1", "", "Room5"]


def test_timetable_frame_holds_mapped_fields():
    tt = Timetable(headers=HEADERS, rows=[ROW, ["EE"]])

    assert len(tt) == 2
    assert list(tt.column("faculty")) == ["Dr. Smith", ""]
    assert list(tt.column("department")) == ["CS", "EE"]


def test_take_keeps_headers_and_order():
    tt = Timetable(headers=HEADERS, rows=[ROW, ["EE"], ["ME"]])

    sub = tt.take([2, 0])

    assert sub.headers == HEADERS
    assert sub.rows == [["ME"], ROW]


def test_to_from_dict_roundtrip():
    tt = Timetable(headers=HEADERS, rows=[ROW])

    rebuilt = Timetable.from_dict(tt.to_dict())

    assert rebuilt.headers == tt.headers
    assert rebuilt.rows == tt.rows


def test_empty_timetable():
    tt = Timetable.from_dict(None)

    assert tt.is_empty
    assert tt.headers == []
    assert list(tt.column("venue")) == []
