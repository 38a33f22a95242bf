from __future__ import annotations

from typing import List, Optional

from mentorship_admin.models.application_ticket import ApplicationTicket
from .base import BaseRepository
from .profile_repo import ProfileRepository


class ApplicationRepository(BaseRepository[ApplicationTicket]):
    model = ApplicationTicket
    pk = "application_id"

    def find_by_profile_id(self, profile_id: str) -> List[ApplicationTicket]:
        return (
            self.db.query(ApplicationTicket)
            .filter(ApplicationTicket.profile_id == profile_id)
            .order_by(ApplicationTicket.application_id)
            .all()
        )

    def update_and_grant_role(
        self,
        application_id: int,
        changes: dict,
        profile_id: str,
        role_id: Optional[int],
    ) -> int:
        """Update an application and, when ``role_id`` is given, the applicant's role.

        Both UPDATEs share one transaction: either both land or neither does.
        """
        if not changes:
            return self.update(application_id, changes)
        try:
            count = self.stage_update(application_id, changes)
            if count and role_id is not None:
                ProfileRepository(self.db).stage_update(profile_id, {"role_id": role_id})
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.expire_all()
        return count
