from sqlalchemy import Column, String, Integer, Boolean, Text, ForeignKey

from mentorship_admin.db import Base


class ActionTicket(Base):
    __tablename__ = "action_tickets"
    action_ticket_id = Column(Integer, primary_key=True, autoincrement=True)
    submitted_by = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
    )
    subject_id = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
    )
    issue = Column(Text, nullable=False)
    pending = Column(Boolean, nullable=False, default=True)
    resolved = Column(Boolean, nullable=False, default=False)
    strike = Column(Boolean, nullable=False, default=False)
    comments = Column(Text, nullable=True)
