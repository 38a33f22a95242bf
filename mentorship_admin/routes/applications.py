import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import NotFoundException, PersistenceException, ValidationException
from mentorship_admin.models.application_ticket import ApplicationTicket
from mentorship_admin.repositories import ApplicationRepository, ProfileRepository, RoleRepository
from mentorship_admin.schemas.application_ticket import ApplicationOut, ApplicationResult
from mentorship_admin.services.auth import require_admin, verify_token
from mentorship_admin.services.validation import (
    parse_int_id,
    validate_application_changes,
    validate_new_application,
)

logger = logging.getLogger("mentorship_admin.applications")

router = APIRouter(prefix="/applications", tags=["Applications"], dependencies=[Depends(verify_token)])


def valid_application_id(application_id: str, db: Session = Depends(get_db)) -> ApplicationTicket:
    parsed = parse_int_id(application_id)
    application = ApplicationRepository(db).find_by_id(parsed) if parsed is not None else None
    if not application:
        raise NotFoundException("application id not found")
    return application


def ensure_position_exists(db: Session, position: int) -> None:
    if not RoleRepository(db).exists(position):
        raise ValidationException("position must reference an existing role")


@router.get("", response_model=list[ApplicationOut])
def list_applications(db: Session = Depends(get_db), admin=Depends(require_admin)):
    return ApplicationRepository(db).find_all()


@router.get("/profile/{profile_id}", response_model=list[ApplicationOut])
def list_profile_applications(profile_id: str, db: Session = Depends(get_db)):
    return ApplicationRepository(db).find_by_profile_id(profile_id)


@router.get("/{application_id}", response_model=ApplicationOut)
def get_application(application: ApplicationTicket = Depends(valid_application_id)):
    return application


@router.post("", status_code=201, response_model=ApplicationResult)
def create_application(payload: dict | None = Body(default=None), db: Session = Depends(get_db)):
    new_application = validate_new_application(payload)
    if not ProfileRepository(db).exists(new_application.profile_id):
        raise ValidationException("profile_id must reference an existing profile")
    ensure_position_exists(db, new_application.position)

    try:
        application = ApplicationRepository(db).add(new_application.model_dump())
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to add Application to the Database", cause=e
        )

    logger.info(f"Application {application.application_id} submitted by {application.profile_id}")
    return {"message": "application submitted successfully", "application": application}


@router.put("/{application_id}", response_model=ApplicationResult)
def update_application(
    payload: dict | None = Body(default=None),
    application: ApplicationTicket = Depends(valid_application_id),
    db: Session = Depends(get_db),
    admin=Depends(require_admin),
):
    changes = validate_application_changes(payload)
    if "position" in changes:
        ensure_position_exists(db, changes["position"])

    application_id = application.application_id
    profile_id = application.profile_id
    position = changes.get("position", application.position)

    applications = ApplicationRepository(db)
    # Approval grants the applied-for role
    granted_role = position if changes.get("approved") else None
    try:
        count = applications.update_and_grant_role(application_id, changes, profile_id, granted_role)
    except SQLAlchemyError as e:
        raise PersistenceException(f"Could not update application '{application_id}'", cause=e)

    updated = applications.find_by_id(application_id) if count else None
    if not updated:
        raise NotFoundException("application id not found")

    if changes.get("approved"):
        logger.info(f"Application {application_id} approved by {admin.profile_id}; {profile_id} now role {position}")
    return {"message": f"Application '{application_id}' updated", "application": updated}
