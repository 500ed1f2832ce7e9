"""
Time source used by date checks.

Validators never read the wall clock directly; they take a ``Clock`` so tests
and request handlers can pin "now".
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def fixed_clock(instant: datetime) -> Clock:
    return lambda: instant


def to_clock_zone(value: datetime, reference: datetime) -> datetime:
    """
    Express ``value`` in the zone of ``reference``.

    Naive values are taken as already being in that zone; aware values are
    converted. A naive reference means local time.
    """
    if reference.tzinfo is None:
        if value.tzinfo is None:
            return value
        return value.astimezone().replace(tzinfo=None)
    if value.tzinfo is None:
        return value.replace(tzinfo=reference.tzinfo)
    return value.astimezone(reference.tzinfo)

