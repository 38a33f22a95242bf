from __future__ import annotations

from typing import List

from mentorship_admin.models.profile import Profile
from mentorship_admin.models.role import Role
from .base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    model = Profile
    pk = "profile_id"

    def exists(self, profile_id: str) -> bool:
        return self.find_by_id(profile_id) is not None

    def find_by_role(self, role_id: int) -> List[Profile]:
        return (
            self.db.query(Profile)
            .filter(Profile.role_id == role_id)
            .order_by(Profile.profile_id)
            .all()
        )


class RoleRepository(BaseRepository[Role]):
    model = Role
    pk = "role_id"

    def exists(self, role_id: int) -> bool:
        return self.find_by_id(role_id) is not None
