from pydantic import BaseModel
from typing import Optional


class AssignmentCreate(BaseModel):
    mentor_id: str
    mentee_id: str


class AssignmentUpdate(BaseModel):
    mentor_id: Optional[str] = None
    mentee_id: Optional[str] = None


class AssignmentOut(BaseModel):
    assignment_id: int
    mentor_id: str
    mentee_id: str

    model_config = {
        'from_attributes': True
    }


class AssignmentUpdated(BaseModel):
    message: str
    success: AssignmentOut
