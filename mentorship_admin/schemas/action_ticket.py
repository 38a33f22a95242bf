from pydantic import BaseModel
from typing import Optional


class ActionTicketCreate(BaseModel):
    submitted_by: str
    subject_id: str
    issue: str
    strike: bool = False
    comments: Optional[str] = None


class ActionTicketUpdate(BaseModel):
    issue: Optional[str] = None
    pending: Optional[bool] = None
    resolved: Optional[bool] = None
    strike: Optional[bool] = None
    comments: Optional[str] = None


class ActionTicketOut(BaseModel):
    action_ticket_id: int
    submitted_by: str
    subject_id: str
    issue: str
    pending: bool
    resolved: bool
    strike: bool
    comments: Optional[str] = None

    model_config = {
        'from_attributes': True
    }


class ActionTicketCreated(BaseModel):
    message: str
    action: ActionTicketOut
