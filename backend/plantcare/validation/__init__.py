"""
Request validation for the Plant Care API.

Validators take an untyped request body and return ``Ok(value)`` or a
``ValidationError``; they never raise for bad input.
"""

from plantcare.validation.clock import Clock, system_clock, fixed_clock
from plantcare.validation.result import (
    Ok, Result, ValidationError, is_validation_error, validation_error_response,
)
from plantcare.validation.fields import (
    validate_required_fields, validate_email, validate_date_range, validate_id,
)
from plantcare.validation.entities import (
    validate_event, validate_plant, validate_user, validate_post, validate_comment,
)
from plantcare.validation.partial import (
    validate_partial_event, validate_partial_plant, validate_partial_post, validate_partial_user,
)
from plantcare.validation.images import validate_image, validate_file_extension

__all__ = [
    "Clock", "system_clock", "fixed_clock",
    "Ok", "Result", "ValidationError", "is_validation_error", "validation_error_response",
    "validate_required_fields", "validate_email", "validate_date_range", "validate_id",
    "validate_event", "validate_plant", "validate_user", "validate_post", "validate_comment",
    "validate_partial_event", "validate_partial_plant", "validate_partial_post",
    "validate_partial_user",
    "validate_image", "validate_file_extension",
]
