from __future__ import annotations

from mentorship_admin.models.mentor_intake import MentorIntake
from .base import BaseRepository


class MentorIntakeRepository(BaseRepository[MentorIntake]):
    model = MentorIntake
    pk = "mentor_intake_id"
