from sqlalchemy import Column, Integer, String
import enum

from mentorship_admin.db import Base


class RoleName(enum.IntEnum):
    super_admin = 1
    admin = 2
    mentor = 3
    mentee = 4
    pending = 5


# Rows inserted by the initial migration (and the test fixtures)
DEFAULT_ROLES = [
    {"role_id": RoleName.super_admin.value, "role_name": "superAdmin"},
    {"role_id": RoleName.admin.value, "role_name": "admin"},
    {"role_id": RoleName.mentor.value, "role_name": "mentor"},
    {"role_id": RoleName.mentee.value, "role_name": "mentee"},
    {"role_id": RoleName.pending.value, "role_name": "pending"},
]

ADMIN_ROLES = {RoleName.super_admin.value, RoleName.admin.value}


class Role(Base):
    __tablename__ = "roles"
    role_id = Column(Integer, primary_key=True, autoincrement=False)
    role_name = Column(String, unique=True, nullable=False)
