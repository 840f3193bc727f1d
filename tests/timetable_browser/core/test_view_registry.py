from __future__ import annotations

import pytest

from timetable_browser.core.dataset import Timetable
from timetable_browser.core.filter_state import FilterState
from timetable_browser.core.view_registry import ViewRegistry
from timetable_browser.ui.dash_app import build_view_registry
from timetable_browser.views import DefaultView, FacultyView, VenueView


def test_registry_has_all_three_views():
    registry = build_view_registry()

    assert registry.all_classes() == [FacultyView, VenueView, DefaultView]


def test_for_state_picks_view_by_filter_activity():
    registry = build_view_registry()
    tt = Timetable.empty()

    assert isinstance(registry.for_state(FilterState(), tt), DefaultView)
    assert isinstance(registry.for_state(FilterState(venue=["R1"]), tt), VenueView)
    assert isinstance(registry.for_state(FilterState(faculty=["A"], venue=["R1"]), tt), FacultyView)


def test_register_rejects_duplicates_and_non_views():
    registry = ViewRegistry()
    registry.register(DefaultView)

    with pytest.raises(ValueError):
        registry.register(DefaultView)

    with pytest.raises(TypeError):
        registry.register(dict)


def test_create_unknown_view_raises():
    with pytest.raises(KeyError):
        ViewRegistry().create("subject", Timetable.empty())
