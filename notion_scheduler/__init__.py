"""Materializes a weekly Notion template into next week's calendar events."""

__version__ = "1.0.0"
