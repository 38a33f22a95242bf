"""Persistence accessors.

One repository per table. Each public method issues a single statement and
commits it; routers compose them. Methods return ORM rows, lists of rows or
affected row counts and never raise for "no match".
"""

from .base import BaseRepository
from .profile_repo import ProfileRepository, RoleRepository
from .assignment_repo import AssignmentRepository
from .action_ticket_repo import ActionTicketRepository
from .application_repo import ApplicationRepository
from .mentor_intake_repo import MentorIntakeRepository

__all__ = [
    "BaseRepository",
    "ProfileRepository",
    "RoleRepository",
    "AssignmentRepository",
    "ActionTicketRepository",
    "ApplicationRepository",
    "MentorIntakeRepository",
]
