"""
Field-level checks reused by the entity validators.

Inputs are untyped request bodies (``dict[str, Any]``). Checks return a
``ValidationError`` or ``None``; coercions return ``Ok``/``ValidationError``.
None of them raise for malformed input.
"""

import math
import re
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional

from plantcare.core.logging import get_logger
from plantcare.validation.clock import Clock, system_clock, to_clock_zone
from plantcare.validation.result import Ok, Result, ValidationError, invalid

logger = get_logger(__name__)

# Loose syntactic check (something@something.something), not RFC 5322.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 8


def is_present(body: Mapping[str, Any], field: str) -> bool:
    """Empty strings and zero count as present; only a missing key or None does not."""
    return body.get(field) is not None


def validate_required_fields(
    body: Mapping[str, Any], fields: Iterable[str]
) -> Optional[ValidationError]:
    missing = [field for field in fields if not is_present(body, field)]
    if missing:
        return invalid(f"Missing required fields: {', '.join(missing)}")
    return None


def validate_email(email: Any) -> Optional[ValidationError]:
    if not isinstance(email, str):
        return invalid("Email must be a string")
    if not EMAIL_PATTERN.fullmatch(email):
        return invalid("Invalid email format")
    return None


def parse_int(text: str) -> Optional[int]:
    """
    Parse the leading integer of ``text``, ignoring whatever follows.

    Same reading as the web client's parseInt: ``"5abc"`` -> 5, ``"3.7"`` -> 3,
    ``"0x1F"`` -> 31, ``"abc"`` and ``"0x"`` -> None.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def coerce_int(value: Any) -> Optional[int]:
    """Integer view of an id-like value, or None when it is not a number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        return parse_int(value)
    return None


def validate_id(value: Any) -> Result[int]:
    number = coerce_int(value)
    if number is None or number <= 0:
        return invalid("Invalid ID format")
    return Ok(number)


def positive_int(value: Any, label: str) -> Result[int]:
    number = coerce_int(value)
    if number is None:
        return invalid(f"{label} must be a number")
    if number <= 0:
        return invalid(f"{label} must be a positive integer")
    return Ok(number)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Accept datetimes, dates, and ISO-8601 strings (``Z`` means UTC)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def validate_date_range(
    start: Any,
    end: Any,
    now: Optional[Clock] = None,
    *,
    allow_past: bool = False,
) -> Optional[ValidationError]:
    """
    Check that ``start`` <= ``end`` and that ``start`` is not on a day before today.

    "Today" is the calendar day of ``now()`` in the clock's zone. Updates pass
    ``allow_past=True`` to skip that check.
    """
    if not isinstance(start, datetime) or not isinstance(end, datetime):
        return invalid("Invalid date format")

    clock = now or system_clock
    try:
        current = clock()
        start_local = to_clock_zone(start, current)
        end_local = to_clock_zone(end, current)

        if start_local > end_local:
            return invalid("Start time must be earlier than end time")
        if not allow_past and start_local.date() < current.date():
            return invalid("Start time cannot be before today")
    except (OverflowError, ValueError, TypeError) as e:
        logger.warning(
            "date_range_validation_failed",
            error=str(e),
            start=repr(start),
            end=repr(end),
        )
        return invalid("Invalid date format")
    return None


def check_string(value: Any, label: str) -> Optional[ValidationError]:
    if not isinstance(value, str):
        return invalid(f"{label} must be a string")
    return None


def check_text(
    value: str, label: str, max_length: int, allow_empty: bool = False
) -> Optional[ValidationError]:
    if not allow_empty and len(value) == 0:
        return invalid(f"{label} cannot be empty")
    if len(value) > max_length:
        return invalid(f"{label} cannot exceed {max_length} characters")
    return None


def check_photo(value: Any) -> Optional[ValidationError]:
    if value is not None and not isinstance(value, str):
        return invalid("Photo must be a string")
    return None


def check_flag(value: Any, label: str) -> Optional[ValidationError]:
    if value is not None and not isinstance(value, bool):
        return invalid(f"{label} must be a boolean")
    return None


def check_username(username: str) -> Optional[ValidationError]:
    if len(username) < USERNAME_MIN_LENGTH:
        return invalid(f"Username must be at least {USERNAME_MIN_LENGTH} characters long")
    if len(username) > USERNAME_MAX_LENGTH:
        return invalid(f"Username cannot exceed {USERNAME_MAX_LENGTH} characters in length")
    if not USERNAME_PATTERN.fullmatch(username):
        return invalid("Username can only contain letters, numbers, and underscores")
    return None


def check_password(password: str) -> Optional[ValidationError]:
    if len(password) < PASSWORD_MIN_LENGTH:
        return invalid(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    has_upper = re.search(r"[A-Z]", password) is not None
    has_lower = re.search(r"[a-z]", password) is not None
    has_digit = re.search(r"[0-9]", password) is not None
    if not (has_upper and has_lower and has_digit):
        return invalid(
            "Password must contain uppercase letters, lowercase letters, and numbers"
        )
    return None
