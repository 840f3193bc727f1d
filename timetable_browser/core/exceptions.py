from typing import Optional


class TimetableBrowserError(Exception):
    """Base exception for all timetable_browser errors"""
    pass

class ConfigError(TimetableBrowserError):
    """Missing or inconsistent sheet configuration / global.json"""
    pass

class SheetFetchError(TimetableBrowserError):
    """
    The spreadsheet values could not be turned into a timetable:
    network error, non-2xx response, malformed JSON, missing 'values'
    or too few rows
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
