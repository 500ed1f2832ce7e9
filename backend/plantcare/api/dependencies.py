"""
FastAPI dependencies shared by the route modules.
"""

from plantcare.services.store import Store, get_store
from plantcare.validation.clock import Clock, system_clock


def get_clock() -> Clock:
    """Time source for date checks; overridden in tests to pin "today"."""
    return system_clock


__all__ = ["Store", "get_store", "get_clock"]
