from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ApplicationCreate(BaseModel):
    profile_id: str
    position: int
    application_notes: str = ""


class ApplicationUpdate(BaseModel):
    position: Optional[int] = None
    approved: Optional[bool] = None
    application_notes: Optional[str] = None


class ApplicationOut(BaseModel):
    application_id: int
    profile_id: str
    position: int
    approved: bool
    application_notes: Optional[str] = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        'from_attributes': True
    }


class ApplicationResult(BaseModel):
    message: str
    application: ApplicationOut
