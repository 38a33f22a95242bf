import logging

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorship_admin.db import get_db
from mentorship_admin.exceptions import NotFoundException, PersistenceException, ValidationException
from mentorship_admin.models.action_ticket import ActionTicket
from mentorship_admin.repositories import ActionTicketRepository, ProfileRepository
from mentorship_admin.schemas.action_ticket import ActionTicketCreated, ActionTicketOut
from mentorship_admin.services.validation import (
    parse_int_id,
    validate_action_changes,
    validate_new_action,
)

logger = logging.getLogger("mentorship_admin.actions")

router = APIRouter(prefix="/actions", tags=["Action Tickets"])


def valid_action_id(action_ticket_id: str, db: Session = Depends(get_db)) -> ActionTicket:
    parsed = parse_int_id(action_ticket_id)
    ticket = ActionTicketRepository(db).find_by_id(parsed) if parsed is not None else None
    if not ticket:
        raise NotFoundException("action ticket id not found")
    return ticket


@router.get("", response_model=list[ActionTicketOut])
def list_actions(db: Session = Depends(get_db)):
    return ActionTicketRepository(db).find_all()


@router.get("/{action_ticket_id}", response_model=ActionTicketOut)
def get_action(ticket: ActionTicket = Depends(valid_action_id)):
    return ticket


@router.post("", status_code=201, response_model=ActionTicketCreated)
def create_action(payload: dict | None = Body(default=None), db: Session = Depends(get_db)):
    new_ticket = validate_new_action(payload)

    profiles = ProfileRepository(db)
    for field in ("submitted_by", "subject_id"):
        if not profiles.exists(getattr(new_ticket, field)):
            raise ValidationException(f"{field} must reference an existing profile")

    try:
        ticket = ActionTicketRepository(db).add(new_ticket.model_dump())
    except SQLAlchemyError as e:
        raise PersistenceException(
            "An Error occurred when attempting to add Action Ticket to the Database", cause=e
        )

    logger.info(f"Action ticket {ticket.action_ticket_id} filed by {ticket.submitted_by} about {ticket.subject_id}")
    return {"message": "action ticket created successfully", "action": ticket}


@router.put("/{action_ticket_id}")
def update_action(
    payload: dict | None = Body(default=None),
    ticket: ActionTicket = Depends(valid_action_id),
    db: Session = Depends(get_db),
):
    changes = validate_action_changes(payload)
    ticket_id = ticket.action_ticket_id
    try:
        count = ActionTicketRepository(db).update(ticket_id, changes)
    except SQLAlchemyError as e:
        raise PersistenceException(f"Could not update action ticket '{ticket_id}'", cause=e)
    if not count:
        raise NotFoundException("action ticket id not found")
    return {"changes": changes}


@router.delete("/{action_ticket_id}")
def delete_action(ticket: ActionTicket = Depends(valid_action_id), db: Session = Depends(get_db)):
    ticket_id = ticket.action_ticket_id
    try:
        deleted = ActionTicketRepository(db).remove(ticket_id)
    except SQLAlchemyError as e:
        raise PersistenceException(f"Could not delete action ticket '{ticket_id}'", cause=e)
    if not deleted:
        raise NotFoundException("action ticket id not found")
    return {"message": "action ticket deleted"}
