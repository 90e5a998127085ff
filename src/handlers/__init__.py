"""
Presentation handlers for the period tracker.
"""
from .tracker_view import TrackerView

__all__ = ["TrackerView"]
