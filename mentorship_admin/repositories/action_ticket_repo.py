from __future__ import annotations

from mentorship_admin.models.action_ticket import ActionTicket
from .base import BaseRepository


class ActionTicketRepository(BaseRepository[ActionTicket]):
    model = ActionTicket
    pk = "action_ticket_id"
