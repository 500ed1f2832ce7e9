"""
Result types shared by every validator.

A validator returns either ``Ok(value)`` or a ``ValidationError``. Both carry
an explicit ``ok`` tag, so callers branch on the variant instead of probing
the shape of the value.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from fastapi import status
from fastapi.responses import JSONResponse

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    error: str
    status: int = status.HTTP_400_BAD_REQUEST

    ok = False


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    ok = True


Result = Union[Ok[T], ValidationError]


def invalid(message: str) -> ValidationError:
    return ValidationError(error=message, status=status.HTTP_400_BAD_REQUEST)


def is_validation_error(result: Any) -> bool:
    return isinstance(result, ValidationError)


def validation_error_response(validation_error: ValidationError) -> JSONResponse:
    """Render a validation error as ``{"error": ...}`` with its HTTP status."""
    return JSONResponse(
        status_code=validation_error.status,
        content={"error": validation_error.error},
    )
