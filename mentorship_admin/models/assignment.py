from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship

from mentorship_admin.db import Base


class Assignment(Base):
    __tablename__ = "assignments"
    assignment_id = Column(Integer, primary_key=True, autoincrement=True)
    mentor_id = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        index=True,
    )
    mentee_id = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        index=True,
    )

    mentor = relationship("Profile", foreign_keys=[mentor_id])
    mentee = relationship("Profile", foreign_keys=[mentee_id])
