from sqlalchemy import Column, String, DateTime, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, UTC

from mentorship_admin.db import Base
from mentorship_admin.models.role import RoleName


class Profile(Base):
    __tablename__ = "profiles"
    # Externally supplied identity (SSO subject id)
    profile_id = Column(String, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String, nullable=False, index=True)
    role_id = Column(
        Integer,
        ForeignKey("roles.role_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        default=RoleName.pending.value,
    )
    is_active = Column(Boolean, nullable=True)
    progress_id = Column(Integer, nullable=True)
    progress_status = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))

    role = relationship("Role")
