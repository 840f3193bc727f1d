"""
Top-level package for the timetable browser.

Most code should import from submodules such as:
    timetable_browser.core
    timetable_browser.services
    timetable_browser.views
    timetable_browser.ui
"""

__all__: list[str] = []
