from sqlalchemy import Column, String, Integer, Boolean, ForeignKey

from mentorship_admin.db import Base


class MentorIntake(Base):
    __tablename__ = "mentor_intake"
    mentor_intake_id = Column(Integer, primary_key=True, autoincrement=True)
    profile_id = Column(
        String,
        ForeignKey("profiles.profile_id", ondelete="RESTRICT", onupdate="RESTRICT"),
        nullable=False,
        index=True,
    )
    email = Column(String, nullable=False)
    location = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    current_comp = Column(String, nullable=True)
    # Tech focus
    other_tech = Column(Boolean, nullable=True)
    front_end = Column(Boolean, default=False)
    back_end = Column(Boolean, default=False)
    full_stack = Column(Boolean, default=False)
    android_mobile = Column(Boolean, default=False)
    ios_mobile = Column(Boolean, default=False)
    experience_level = Column(String, nullable=False)
    mentor_commitment = Column(String(255), nullable=False)
    other_info = Column(String(255), nullable=True)
