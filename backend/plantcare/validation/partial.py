"""
Validators for update (PATCH) requests.

Every field is optional. Only fields present in the body (key set and not
None) are checked and copied into the result; a body with no recognised
fields yields an empty model, which the caller decides how to treat.
"""

from typing import Any, Mapping, Optional

from plantcare.schemas.event import PartialEvent
from plantcare.schemas.plant import PartialPlant
from plantcare.schemas.post import PartialPost
from plantcare.schemas.user import PartialUser
from plantcare.validation.clock import Clock
from plantcare.validation.entities import (
    CONTENT_MAX_LENGTH,
    PLANT_NAME_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
    REPEAT_CONFLICT,
)
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
)
from plantcare.validation.result import Ok, Result, invalid


def validate_partial_user(body: Mapping[str, Any]) -> Result[PartialUser]:
    fields = {}

    if is_present(body, "username"):
        username = body["username"]
        error = check_string(username, "Username") or check_username(username)
        if error:
            return error
        fields["username"] = username

    if is_present(body, "email"):
        error = validate_email(body["email"])
        if error:
            return error
        fields["email"] = body["email"]

    if is_present(body, "password"):
        password = body["password"]
        error = check_string(password, "Password") or check_password(password)
        if error:
            return error
        fields["password"] = password

    return Ok(PartialUser(**fields))


def validate_partial_plant(body: Mapping[str, Any]) -> Result[PartialPlant]:
    fields = {}

    if is_present(body, "plant_name"):
        plant_name = body["plant_name"]
        error = check_string(plant_name, "Plant name") or check_text(
            plant_name, "Plant name", PLANT_NAME_MAX_LENGTH
        )
        if error:
            return error
        fields["plant_name"] = plant_name

    if is_present(body, "plant_type_id"):
        plant_type_id = positive_int(body["plant_type_id"], "Plant type ID")
        if not plant_type_id.ok:
            return plant_type_id
        fields["plant_type_id"] = plant_type_id.value

    if is_present(body, "photo"):
        error = check_photo(body["photo"])
        if error:
            return error
        fields["photo"] = body["photo"]

    return Ok(PartialPlant(**fields))


def validate_partial_post(body: Mapping[str, Any]) -> Result[PartialPost]:
    fields = {}

    if is_present(body, "title"):
        title = body["title"]
        error = check_string(title, "Title") or check_text(title, "Title", POST_TITLE_MAX_LENGTH)
        if error:
            return error
        fields["title"] = title

    if is_present(body, "content"):
        content = body["content"]
        error = check_string(content, "Content") or check_text(
            content, "Content", CONTENT_MAX_LENGTH
        )
        if error:
            return error
        fields["content"] = content

    if is_present(body, "plant_id"):
        plant_id = positive_int(body["plant_id"], "Plant ID")
        if not plant_id.ok:
            return plant_id
        fields["plant_id"] = plant_id.value

    if is_present(body, "photo"):
        error = check_photo(body["photo"])
        if error:
            return error
        fields["photo"] = body["photo"]

    return Ok(PartialPost(**fields))


def validate_partial_event(
    body: Mapping[str, Any], now: Optional[Clock] = None
) -> Result[PartialEvent]:
    """
    Dates are checked for ordering only when both arrive in the same call;
    an update may move an event that already started.

    The repeat conflict fires only when both flags are true in this body. A
    flag left out is not read as false here, so the caller has to re-check
    against the stored event.
    """
    fields = {}

    if is_present(body, "title"):
        title = body["title"]
        error = check_string(title, "Title")
        if error:
            return error
        if not title:
            return invalid("Title cannot be empty")
        fields["title"] = title

    for key in ("start", "end"):
        if is_present(body, key):
            parsed = parse_datetime(body[key])
            if parsed is None:
                return invalid("Invalid date format")
            fields[key] = parsed

    if "start" in fields and "end" in fields:
        error = validate_date_range(fields["start"], fields["end"], now, allow_past=True)
        if error:
            return error

    if is_present(body, "plantId"):
        plant_id = positive_int(body["plantId"], "Plant ID")
        if not plant_id.ok:
            return plant_id
        fields["plant_id"] = plant_id.value

    for key, attribute in (("repeatWeekly", "repeat_weekly"), ("repeatMonthly", "repeat_monthly")):
        if is_present(body, key):
            error = check_flag(body[key], key)
            if error:
                return error
            fields[attribute] = body[key]

    if fields.get("repeat_weekly") is True and fields.get("repeat_monthly") is True:
        return invalid(REPEAT_CONFLICT)

    return Ok(PartialEvent(**fields))
