import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import (
    ForbiddenException,
    NotFoundException,
    PersistenceException,
    ValidationException,
)
from mentorship_admin.models.profile import Profile
from mentorship_admin.models.role import RoleName
from mentorship_admin.repositories import ProfileRepository, RoleRepository
from mentorship_admin.schemas.profile import ProfileCreated, ProfileOut
from mentorship_admin.services.auth import (
    get_current_profile,
    is_admin_identity,
    require_admin,
    verify_token,
)
from mentorship_admin.services.validation import validate_new_profile, validate_profile_changes

logger = logging.getLogger("mentorship_admin.profiles")

router = APIRouter(tags=["Profiles"], dependencies=[Depends(verify_token)])


def profile_not_found(profile_id: str) -> NotFoundException:
    return NotFoundException(f"ProfileNotFound: no profile with id '{profile_id}'", field="error")


def ensure_role_exists(db: Session, role_id) -> None:
    if not RoleRepository(db).exists(role_id):
        raise ValidationException("role_id must reference an existing role")


@router.get("/profiles", response_model=list[ProfileOut])
def list_profiles(db: Session = Depends(get_db)):
    return ProfileRepository(db).find_all()


@router.get("/profile/current_user_profile", response_model=ProfileOut)
def get_current_user_profile(current_profile: Profile = Depends(get_current_profile)):
    return current_profile


@router.get("/profiles/role/{role_id}", response_model=list[ProfileOut])
def list_profiles_by_role(role_id: int, db: Session = Depends(get_db), admin=Depends(require_admin)):
    ensure_role_exists(db, role_id)
    return ProfileRepository(db).find_by_role(role_id)


@router.get("/profile/{profile_id}", response_model=ProfileOut)
@router.get("/profiles/{profile_id}", response_model=ProfileOut, include_in_schema=False)
def get_profile(profile_id: str, db: Session = Depends(get_db)):
    profile = ProfileRepository(db).find_by_id(profile_id)
    if not profile:
        raise profile_not_found(profile_id)
    return profile


@router.post("/profile", status_code=201, response_model=ProfileCreated)
def create_profile(
    payload: dict | None = Body(default=None),
    db: Session = Depends(get_db),
    decoded_token: dict = Depends(verify_token),
):
    new_profile = validate_new_profile(payload)
    profiles = ProfileRepository(db)

    values = new_profile.model_dump()
    if not is_admin_identity(db, decoded_token):
        # Self-registration: the caller's own identity, pending approval
        values["profile_id"] = decoded_token["uid"]
        values["role_id"] = None

    if profiles.exists(values["profile_id"]):
        raise ValidationException("profile_id already exists")

    if values["role_id"] is None:
        values["role_id"] = RoleName.pending.value
    else:
        ensure_role_exists(db, values["role_id"])

    try:
        profile = profiles.add(values)
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to add Profile to the Database", cause=e
        )

    logger.info(f"Profile {profile.profile_id} created with role {profile.role_id}")
    return {"message": "profile created", "profile": profile}


@router.put("/profile", response_model=ProfileCreated)
def update_profile(
    payload: dict | None = Body(default=None),
    db: Session = Depends(get_db),
    decoded_token: dict = Depends(verify_token),
):
    profile_id, changes = validate_profile_changes(payload)
    # Role changes and edits to other people's profiles are admin-only
    if "role_id" in changes or profile_id != decoded_token.get("uid"):
        if not is_admin_identity(db, decoded_token):
            raise ForbiddenException("Admin privileges required")
    profiles = ProfileRepository(db)

    if not profiles.exists(profile_id):
        raise profile_not_found(profile_id)
    if "role_id" in changes:
        ensure_role_exists(db, changes["role_id"])

    try:
        updated = profiles.update(profile_id, changes)
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to update Profile", cause=e
        )
    profile = profiles.find_by_id(profile_id) if updated else None
    if not profile:
        raise profile_not_found(profile_id)

    logger.info(f"Profile {profile_id} updated fields: {sorted(changes)}")
    return {"message": "profile updated", "profile": profile}
