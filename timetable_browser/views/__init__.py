from .faculty_view import FacultyView
from .venue_view import VenueView
from .default_view import DefaultView

__all__ = ["FacultyView", "VenueView", "DefaultView"]
