import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import UnauthorizedException, ForbiddenException
from mentorship_admin.models.profile import Profile
from mentorship_admin.models.role import ADMIN_ROLES

logger = logging.getLogger("mentorship_admin.auth")

security = HTTPBearer(auto_error=False)


def verify_token(credentials: HTTPAuthorizationCredentials | None = Depends(security)) -> dict:
    """Return the decoded identity token for the caller or reject the request."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Authorization header missing or invalid")
    try:
        return firebase_auth.verify_id_token(credentials.credentials)
    except (ValueError, firebase_exceptions.FirebaseError) as e:
        logger.info(f"Rejected identity token: {e}")
        raise UnauthorizedException("Invalid or expired token")


def get_current_profile(
    decoded_token: dict = Depends(verify_token),
    db: Session = Depends(get_db),
) -> Profile:
    profile = db.query(Profile).filter(Profile.profile_id == decoded_token.get("uid")).first()
    if not profile:
        raise ForbiddenException("Profile not registered")
    return profile


def require_admin(profile: Profile = Depends(get_current_profile)) -> Profile:
    if profile.role_id not in ADMIN_ROLES:
        raise ForbiddenException("Admin privileges required")
    return profile


def is_admin_identity(db: Session, decoded_token: dict) -> bool:
    """Whether the token belongs to a registered admin. Unregistered callers are not."""
    profile = db.query(Profile).filter(Profile.profile_id == decoded_token.get("uid")).first()
    return profile is not None and profile.role_id in ADMIN_ROLES
