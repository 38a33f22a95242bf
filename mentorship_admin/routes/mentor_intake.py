from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import NotFoundException, PersistenceException, ValidationException
from mentorship_admin.repositories import MentorIntakeRepository, ProfileRepository
from mentorship_admin.schemas.mentor_intake import MentorIntakeCreated, MentorIntakeOut
from mentorship_admin.services.auth import require_admin, verify_token
from mentorship_admin.services.validation import parse_int_id, validate_new_intake

router = APIRouter(prefix="/mentor-intake", tags=["Mentor Intake"], dependencies=[Depends(verify_token)])


@router.get("", response_model=list[MentorIntakeOut])
def list_intakes(db: Session = Depends(get_db), admin=Depends(require_admin)):
    return MentorIntakeRepository(db).find_all()


@router.get("/{mentor_intake_id}", response_model=MentorIntakeOut)
def get_intake(mentor_intake_id: str, db: Session = Depends(get_db)):
    parsed = parse_int_id(mentor_intake_id)
    intake = MentorIntakeRepository(db).find_by_id(parsed) if parsed is not None else None
    if not intake:
        raise NotFoundException("mentor intake id not found")
    return intake


@router.post("", status_code=201, response_model=MentorIntakeCreated)
def create_intake(payload: dict | None = Body(default=None), db: Session = Depends(get_db)):
    new_intake = validate_new_intake(payload)
    if not ProfileRepository(db).exists(new_intake.profile_id):
        raise ValidationException("profile_id must reference an existing profile")

    try:
        intake = MentorIntakeRepository(db).add(new_intake.model_dump())
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to add Mentor Intake to the Database", cause=e
        )
    return {"message": "mentor intake submitted successfully", "intake": intake}
