from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey
from datetime import datetime, UTC

from mentorship_admin.db import Base


class ApplicationTicket(Base):
    __tablename__ = "application_tickets"
    application_id = Column(Integer, primary_key=True, autoincrement=True)
    # Role the applicant is asking for
    position = Column(
        Integer,
        ForeignKey("roles.role_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
    )
    profile_id = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        index=True,
    )
    approved = Column(Boolean, nullable=False, default=False)
    application_notes = Column(String, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC))
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))
