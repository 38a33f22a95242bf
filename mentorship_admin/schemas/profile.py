from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ProfileCreate(BaseModel):
    profile_id: str
    first_name: str
    last_name: str
    email: str
    role_id: Optional[int] = None


class ProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role_id: Optional[int] = None
    is_active: Optional[bool] = None
    progress_id: Optional[int] = None
    progress_status: Optional[str] = None


class ProfileOut(BaseModel):
    profile_id: str
    first_name: str
    last_name: str
    email: str
    role_id: int
    is_active: Optional[bool] = None
    progress_id: Optional[int] = None
    progress_status: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        'from_attributes': True
    }


class ProfileCreated(BaseModel):
    message: str
    profile: ProfileOut


class RoleOut(BaseModel):
    role_id: int
    role_name: str

    model_config = {
        'from_attributes': True
    }
