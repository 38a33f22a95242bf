"""Request payload validation.

Each ``validate_*`` function takes the decoded JSON body, applies its rules
in order and raises ``ValidationException`` on the first failure. Nothing
here touches the database; referential checks live in the routers.
"""
import re
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from mentorship_admin.exceptions import ValidationException
from mentorship_admin.schemas.action_ticket import ActionTicketCreate, ActionTicketUpdate
from mentorship_admin.schemas.application_ticket import ApplicationCreate, ApplicationUpdate
from mentorship_admin.schemas.assignment import AssignmentCreate, AssignmentUpdate
from mentorship_admin.schemas.mentor_intake import MentorIntakeCreate
from mentorship_admin.schemas.profile import ProfileCreate, ProfileUpdate

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
INTAKE_TEXT_MAX_LENGTH = 255

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def require(payload: dict, field: str, message: Optional[str] = None) -> Any:
    value = payload.get(field)
    if is_missing(value):
        raise ValidationException(message or f"{field} is required")
    return value


def require_id(payload: dict, field: str, message: Optional[str] = None) -> str:
    """Profile ids are strings; numeric ids sent by older clients are accepted as text."""
    value = require(payload, field, message)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationException(f"{field} must be a string")
    return str(value)


def check_length(payload: dict, field: str, low: int, high: int) -> None:
    value = payload[field]
    if not isinstance(value, str) or not low <= len(value) <= high:
        raise ValidationException(f"{field} must be between {low}-{high} chars")


def check_max_length(payload: dict, field: str, high: int) -> None:
    value = payload.get(field)
    if value is not None and (not isinstance(value, str) or len(value) > high):
        raise ValidationException(f"{field} must be at most {high} chars")


def check_email(payload: dict, field: str = "email") -> None:
    value = payload[field]
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        raise ValidationException(f"{field} must be validly formatted")


def build(schema: Type[SchemaT], data: dict) -> SchemaT:
    """Instantiate a schema, reporting the first type error as a 400."""
    try:
        return schema(**data)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err["loc"]) or "body"
        raise ValidationException(f"{field} is invalid: {err['msg']}")


def ensure_object(payload: Any, message: str = "Request body must be a JSON object") -> dict:
    if payload is None or not isinstance(payload, dict):
        raise ValidationException(message)
    return payload


# Profiles

def validate_new_profile(payload: Any) -> ProfileCreate:
    payload = ensure_object(payload)
    profile_id = require_id(payload, "profile_id")

    require(payload, "first_name")
    check_length(payload, "first_name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    require(payload, "last_name")
    check_length(payload, "last_name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)

    require(payload, "email")
    check_email(payload)

    data = {k: payload[k] for k in ("first_name", "last_name", "email")}
    data["profile_id"] = profile_id
    if payload.get("role_id") is not None:
        data["role_id"] = payload["role_id"]
    return build(ProfileCreate, data)


def validate_profile_changes(payload: Any) -> Tuple[str, dict]:
    """Validate a partial profile update.

    Returns the target profile id and only the fields the caller supplied.
    """
    payload = ensure_object(payload)
    profile_id = require_id(payload, "profile_id")

    if "first_name" in payload:
        check_length(payload, "first_name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)
    if "last_name" in payload:
        check_length(payload, "last_name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)
    if "email" in payload:
        check_email(payload)
    if "role_id" in payload and payload["role_id"] is None:
        raise ValidationException("role_id must reference an existing role")

    changes = build(ProfileUpdate, payload).model_dump(exclude_unset=True)
    return profile_id, changes


# Assignments

def validate_new_assignment(payload: Any) -> AssignmentCreate:
    payload = ensure_object(payload, "Missing Assignment Data")
    mentor_id = require_id(payload, "mentor_id", "Missing mentor_id field")
    mentee_id = require_id(payload, "mentee_id", "Missing mentee_id field")
    # Anything besides the two ids is ignored
    return AssignmentCreate(mentor_id=mentor_id, mentee_id=mentee_id)


def validate_assignment_changes(payload: Any) -> dict:
    payload = ensure_object(payload)
    changes = {}
    for field in ("mentor_id", "mentee_id"):
        if field in payload:
            changes[field] = require_id(payload, field, f"{field} cannot be empty")
    return build(AssignmentUpdate, changes).model_dump(exclude_unset=True)


# Action tickets

def validate_new_action(payload: Any) -> ActionTicketCreate:
    payload = ensure_object(payload)
    data = dict(payload)
    data["submitted_by"] = require_id(payload, "submitted_by")
    data["subject_id"] = require_id(payload, "subject_id")
    require(payload, "issue")
    return build(ActionTicketCreate, data)


def validate_action_changes(payload: Any) -> dict:
    payload = ensure_object(payload)
    if "issue" in payload and is_missing(payload["issue"]):
        raise ValidationException("issue cannot be empty")
    for flag in ("pending", "resolved", "strike"):
        if flag in payload and not isinstance(payload[flag], bool):
            raise ValidationException(f"{flag} must be a boolean")
    return build(ActionTicketUpdate, payload).model_dump(exclude_unset=True)


# Application tickets

def validate_new_application(payload: Any) -> ApplicationCreate:
    payload = ensure_object(payload)
    data = dict(payload)
    data["profile_id"] = require_id(payload, "profile_id")
    require(payload, "position")
    if data.get("application_notes") is None:
        data.pop("application_notes", None)
    return build(ApplicationCreate, data)


def validate_application_changes(payload: Any) -> dict:
    payload = ensure_object(payload)
    if "approved" in payload and not isinstance(payload["approved"], bool):
        raise ValidationException("approved must be a boolean")
    if "position" in payload and payload["position"] is None:
        raise ValidationException("position must reference an existing role")
    return build(ApplicationUpdate, payload).model_dump(exclude_unset=True)


# Mentor intake

INTAKE_REQUIRED_FIELDS = (
    "email",
    "location",
    "first_name",
    "last_name",
    "experience_level",
    "mentor_commitment",
)


def validate_new_intake(payload: Any) -> MentorIntakeCreate:
    payload = ensure_object(payload)
    data = dict(payload)
    data["profile_id"] = require_id(payload, "profile_id")
    for field in INTAKE_REQUIRED_FIELDS:
        require(payload, field)
    check_email(payload)
    check_max_length(payload, "mentor_commitment", INTAKE_TEXT_MAX_LENGTH)
    check_max_length(payload, "other_info", INTAKE_TEXT_MAX_LENGTH)
    return build(MentorIntakeCreate, data)


def parse_int_id(value: str) -> Optional[int]:
    """Numeric path ids; anything else can never match a row."""
    value = value.strip()
    if not value.isdigit():
        return None
    return int(value)
