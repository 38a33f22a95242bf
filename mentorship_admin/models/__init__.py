from mentorship_admin.models.role import Role, RoleName
from mentorship_admin.models.profile import Profile
from mentorship_admin.models.assignment import Assignment
from mentorship_admin.models.action_ticket import ActionTicket
from mentorship_admin.models.application_ticket import ApplicationTicket
from mentorship_admin.models.mentor_intake import MentorIntake

__all__ = [
    "Role",
    "RoleName",
    "Profile",
    "Assignment",
    "ActionTicket",
    "ApplicationTicket",
    "MentorIntake",
]
