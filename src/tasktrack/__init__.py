"""Personal task tracker ordered by time-decayed urgency."""

__version__ = "0.1.0"
