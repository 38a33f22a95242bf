from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.repositories import RoleRepository
from mentorship_admin.schemas.profile import RoleOut

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get("", response_model=list[RoleOut])
def list_roles(db: Session = Depends(get_db)):
    return RoleRepository(db).find_all()
