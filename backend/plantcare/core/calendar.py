"""
Calendar display helpers.
"""

from datetime import datetime


def is_all_day_event(start: datetime, end: datetime) -> bool:
    """An event spanning 00:00 to 23:59 is shown as all-day on the calendar."""
    return (
        start.hour == 0
        and start.minute == 0
        and end.hour == 23
        and end.minute == 59
    )
