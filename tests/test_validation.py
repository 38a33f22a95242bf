"""Validation rules exercised without a database."""
import pytest

from mentorship_admin.exceptions import ErrorKind, ValidationException
from mentorship_admin.services.validation import (
    parse_int_id,
    validate_new_assignment,
    validate_new_profile,
    validate_profile_changes,
)


def _message(func, payload):
    with pytest.raises(ValidationException) as exc_info:
        func(payload)
    assert exc_info.value.status_code == 400
    assert exc_info.value.kind is ErrorKind.validation
    return exc_info.value.message


@pytest.mark.parametrize("name", ["Al", "x" * 50])
def test_name_length_bounds_are_inclusive(name):
    profile = validate_new_profile({
        "profile_id": "p1", "first_name": name, "last_name": name, "email": "p1@maildrop.cc",
    })
    assert profile.first_name == name


@pytest.mark.parametrize("email", ["plain", "a@b", "@maildrop.cc", "spaces in@maildrop.cc"])
def test_bad_emails_rejected(email):
    payload = {"profile_id": "p1", "first_name": "Ann", "last_name": "Lee", "email": email}
    assert _message(validate_new_profile, payload) == "email must be validly formatted"


def test_blank_profile_id_is_missing():
    payload = {"profile_id": "   ", "first_name": "Ann", "last_name": "Lee", "email": "ann@maildrop.cc"}
    assert _message(validate_new_profile, payload) == "profile_id is required"


def test_profile_changes_only_returns_supplied_fields():
    profile_id, changes = validate_profile_changes({"profile_id": "7", "is_active": False})
    assert profile_id == "7"
    assert changes == {"is_active": False}


def test_numeric_assignment_ids_become_strings():
    assignment = validate_new_assignment({"mentor_id": 7, "mentee_id": 10})
    assert assignment.mentor_id == "7"
    assert assignment.mentee_id == "10"


def test_missing_assignment_payload():
    assert _message(validate_new_assignment, None) == "Missing Assignment Data"


def test_parse_int_id():
    assert parse_int_id("12") == 12
    assert parse_int_id("12abc") is None
    assert parse_int_id("-1") is None
