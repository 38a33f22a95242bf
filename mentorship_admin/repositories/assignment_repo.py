from __future__ import annotations

from typing import List

from mentorship_admin.models.assignment import Assignment
from .base import BaseRepository


class AssignmentRepository(BaseRepository[Assignment]):
    model = Assignment
    pk = "assignment_id"

    def find_by_mentor_id(self, mentor_id: str) -> List[Assignment]:
        return (
            self.db.query(Assignment)
            .filter(Assignment.mentor_id == mentor_id)
            .order_by(Assignment.assignment_id)
            .all()
        )

    def find_by_mentee_id(self, mentee_id: str) -> List[Assignment]:
        return (
            self.db.query(Assignment)
            .filter(Assignment.mentee_id == mentee_id)
            .order_by(Assignment.assignment_id)
            .all()
        )
