from pydantic import BaseModel
from typing import Optional


class MentorIntakeCreate(BaseModel):
    profile_id: str
    email: str
    location: str
    first_name: str
    last_name: str
    current_comp: Optional[str] = None
    other_tech: Optional[bool] = None
    front_end: bool = False
    back_end: bool = False
    full_stack: bool = False
    android_mobile: bool = False
    ios_mobile: bool = False
    experience_level: str
    mentor_commitment: str
    other_info: Optional[str] = None


class MentorIntakeOut(MentorIntakeCreate):
    mentor_intake_id: int

    model_config = {
        'from_attributes': True
    }


class MentorIntakeCreated(BaseModel):
    message: str
    intake: MentorIntakeOut
