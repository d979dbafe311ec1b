"""Datetime formatting utilities for note dates and output file names."""

from __future__ import annotations

from datetime import datetime

# Local time, no timezone suffix: notes are named after the user's wall clock.
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


def local_now() -> datetime:
    return datetime.now()


def format_date(dt: datetime) -> str:
    """Format ``dt`` as ``YYYY-MM-DD``."""

    return dt.strftime(DATE_FORMAT)


def format_time(dt: datetime) -> str:
    """Format ``dt`` as a 24-hour ``HH:MM:SS`` clock time."""

    return dt.strftime(TIME_FORMAT)


def today_local() -> str:
    """Return the current local date, e.g. ``"2025-01-31"``."""

    return format_date(local_now())
