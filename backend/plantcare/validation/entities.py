"""
Validators for create requests.

Each validator checks required fields first, then the remaining rules in a
fixed order, and returns the first failure. Callers rely on that order for
the message a client sees when a body has several problems.
"""

from typing import Any, Mapping, Optional

from plantcare.schemas.event import ValidEvent
from plantcare.schemas.plant import ValidPlant
from plantcare.schemas.post import ValidComment, ValidPost
from plantcare.schemas.user import ValidUser
from plantcare.validation.clock import Clock
from plantcare.validation.fields import (
    check_flag,
    check_password,
    check_photo,
    check_string,
    check_text,
    check_username,
    is_present,
    parse_datetime,
    positive_int,
    validate_date_range,
    validate_email,
    validate_required_fields,
)
from plantcare.validation.result import Ok, Result, invalid

PLANT_NAME_MAX_LENGTH = 100
POST_TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10000

REPEAT_CONFLICT = "Event cannot repeat both weekly and monthly"


def validate_event(body: Mapping[str, Any], now: Optional[Clock] = None) -> Result[ValidEvent]:
    error = validate_required_fields(body, ["title", "start", "end"])
    if error:
        return error

    title = body["title"]
    error = check_string(title, "Title")
    if error:
        return error
    if not title:
        return invalid("Title cannot be empty")

    start = parse_datetime(body["start"])
    end = parse_datetime(body["end"])
    if start is None or end is None:
        return invalid("Invalid date format")

    error = validate_date_range(start, end, now)
    if error:
        return error

    plant_id = None
    if is_present(body, "plantId"):
        coerced = positive_int(body["plantId"], "Plant ID")
        if not coerced.ok:
            return coerced
        plant_id = coerced.value

    for flag in ("repeatWeekly", "repeatMonthly"):
        error = check_flag(body.get(flag), flag)
        if error:
            return error

    repeat_weekly = body.get("repeatWeekly") is True
    repeat_monthly = body.get("repeatMonthly") is True
    if repeat_weekly and repeat_monthly:
        return invalid(REPEAT_CONFLICT)

    return Ok(ValidEvent(
        title=title,
        start=start,
        end=end,
        plant_id=plant_id,
        repeat_weekly=repeat_weekly,
        repeat_monthly=repeat_monthly,
    ))


def validate_plant(body: Mapping[str, Any]) -> Result[ValidPlant]:
    error = validate_required_fields(body, ["plant_name", "plant_type_id"])
    if error:
        return error

    plant_name = body["plant_name"]
    error = check_string(plant_name, "Plant name") or check_text(
        plant_name, "Plant name", PLANT_NAME_MAX_LENGTH
    )
    if error:
        return error

    plant_type_id = positive_int(body["plant_type_id"], "Plant type ID")
    if not plant_type_id.ok:
        return plant_type_id

    error = check_photo(body.get("photo"))
    if error:
        return error

    return Ok(ValidPlant(
        plant_name=plant_name,
        plant_type_id=plant_type_id.value,
        photo=body.get("photo"),
    ))


def validate_user(body: Mapping[str, Any]) -> Result[ValidUser]:
    error = validate_required_fields(body, ["username", "email", "password"])
    if error:
        return error

    username, email, password = body["username"], body["email"], body["password"]
    error = (
        check_string(username, "Username")
        or check_string(email, "Email")
        or check_string(password, "Password")
        or validate_email(email)
        or check_username(username)
        or check_password(password)
    )
    if error:
        return error

    return Ok(ValidUser(username=username, email=email, password=password))


def validate_post(body: Mapping[str, Any]) -> Result[ValidPost]:
    error = validate_required_fields(body, ["title", "content", "plant_id"])
    if error:
        return error

    title, content = body["title"], body["content"]
    error = (
        check_string(title, "Title")
        or check_string(content, "Content")
        or check_text(title, "Title", POST_TITLE_MAX_LENGTH)
        or check_text(content, "Content", CONTENT_MAX_LENGTH)
    )
    if error:
        return error

    plant_id = positive_int(body["plant_id"], "Plant ID")
    if not plant_id.ok:
        return plant_id

    error = check_photo(body.get("photo"))
    if error:
        return error

    return Ok(ValidPost(
        title=title,
        content=content,
        plant_id=plant_id.value,
        photo=body.get("photo"),
    ))


def validate_comment(body: Mapping[str, Any]) -> Result[ValidComment]:
    error = validate_required_fields(body, ["content"])
    if error:
        return error

    content = body["content"]
    error = (
        check_string(content, "Comment content")
        or check_text(content, "Comment content", CONTENT_MAX_LENGTH, allow_empty=True)
        or check_photo(body.get("photo"))
    )
    if error:
        return error

    return Ok(ValidComment(content=content, photo=body.get("photo")))
