import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import NotFoundException, PersistenceException, ValidationException
from mentorship_admin.models.assignment import Assignment
from mentorship_admin.repositories import AssignmentRepository, ProfileRepository
from mentorship_admin.schemas.assignment import AssignmentCreate, AssignmentOut, AssignmentUpdated
from mentorship_admin.services.validation import (
    parse_int_id,
    validate_assignment_changes,
    validate_new_assignment,
)

logger = logging.getLogger("mentorship_admin.assignments")

router = APIRouter(prefix="/assignments", tags=["Assignments"])


# Dependencies

def valid_assignment_id(assignment_id: str, db: Session = Depends(get_db)) -> Assignment:
    """Resolve the path id to an assignment or stop the request."""
    parsed = parse_int_id(assignment_id)
    assignment = AssignmentRepository(db).find_by_id(parsed) if parsed is not None else None
    if not assignment:
        raise NotFoundException("Invalid assignment ID")
    return assignment


def ensure_profiles_exist(db: Session, values: dict) -> None:
    profiles = ProfileRepository(db)
    for field in ("mentor_id", "mentee_id"):
        if field in values and not profiles.exists(values[field]):
            raise ValidationException(f"Invalid {field}")


def valid_new_assignment(
    payload: dict | None = Body(default=None),
    db: Session = Depends(get_db),
) -> AssignmentCreate:
    assignment = validate_new_assignment(payload)
    ensure_profiles_exist(db, assignment.model_dump())
    return assignment


# Routes

@router.get("", response_model=list[AssignmentOut])
def list_assignments(db: Session = Depends(get_db)):
    try:
        return AssignmentRepository(db).find_all()
    except SQLAlchemyError as e:
        raise PersistenceException("Could not retrieve assignments", cause=e, expose_cause=True)


@router.get("/mentor/{mentor_id}", response_model=list[AssignmentOut])
def list_mentor_assignments(mentor_id: str, db: Session = Depends(get_db)):
    assignments = AssignmentRepository(db).find_by_mentor_id(mentor_id)
    if not assignments:
        raise NotFoundException("Assignment Not Found, Check mentor ID", field="error")
    return assignments


@router.get("/mentee/{mentee_id}", response_model=list[AssignmentOut])
def list_mentee_assignments(mentee_id: str, db: Session = Depends(get_db)):
    assignments = AssignmentRepository(db).find_by_mentee_id(mentee_id)
    if not assignments:
        raise NotFoundException("Assignment Not Found, Check mentee ID", field="error")
    return assignments


@router.get("/{assignment_id}", response_model=AssignmentOut)
def get_assignment(assignment: Assignment = Depends(valid_assignment_id)):
    return assignment


@router.post("", status_code=201, response_model=AssignmentOut)
def create_assignment(
    new_assignment: AssignmentCreate = Depends(valid_new_assignment),
    db: Session = Depends(get_db),
):
    try:
        added = AssignmentRepository(db).add(new_assignment.model_dump())
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to add Assignment to the Database", cause=e
        )
    logger.info(f"Assignment {added.assignment_id}: mentor {added.mentor_id} -> mentee {added.mentee_id}")
    return added


@router.put("/{assignment_id}", response_model=AssignmentUpdated)
def update_assignment(
    payload: dict | None = Body(default=None),
    assignment: Assignment = Depends(valid_assignment_id),
    db: Session = Depends(get_db),
):
    assignment_id = assignment.assignment_id
    changes = validate_assignment_changes(payload)
    ensure_profiles_exist(db, changes)

    assignments = AssignmentRepository(db)
    try:
        count = assignments.update(assignment_id, changes)
    except SQLAlchemyError as e:
        raise PersistenceException(f"Could not update assignment '{assignment_id}'", cause=e)

    # Deleted by someone else between the lookup and the write or the re-fetch
    updated = assignments.find_by_id(assignment_id) if count == 1 else None
    if not updated:
        raise NotFoundException(f"Assignment '{assignment_id}' not found")

    return {"message": f"Assignment '{updated.assignment_id}' updated", "success": updated}


@router.delete("/{assignment_id}")
def delete_assignment(
    assignment: Assignment = Depends(valid_assignment_id),
    db: Session = Depends(get_db),
):
    assignment_id = assignment.assignment_id
    try:
        deleted = AssignmentRepository(db).remove(assignment_id)
    except SQLAlchemyError as e:
        raise PersistenceException(f"Could not delete assignment '{assignment_id}'", cause=e)
    if not deleted:
        raise NotFoundException(f"Assignment '{assignment_id}' not found")

    logger.info(f"Assignment {assignment_id} deleted")
    return {"message": "assignment deleted"}
