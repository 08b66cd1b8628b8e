import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from hackclub.core.security.permissions import Capability, require_capability
from hackclub.crud import events as events_crud
from hackclub.db.session import get_db
from hackclub.schemas.event import EventCreate, EventDisplay, EventList, EventUpdate

logger = logging.getLogger("hackclub.events")

router = APIRouter(prefix="/events", tags=["events"])

def _get_event_or_404(db: Session, event_id: int):
    event = events_crud.get_event(db, event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Event not found with id of {event_id}"
        )
    return event

@router.get("", response_model=EventList)
def list_events(db: Session = Depends(get_db)):
    events = events_crud.get_events(db)
    return EventList(
        count=len(events),
        data=[EventDisplay.model_validate(event) for event in events]
    )

@router.get("/{event_id}", response_model=EventDisplay)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return EventDisplay.model_validate(_get_event_or_404(db, event_id))

@router.post("", response_model=EventDisplay, status_code=status.HTTP_201_CREATED)
def create_event(
    request: EventCreate,
    current_user: dict = Depends(require_capability(Capability.CREATE_EVENT)),
    db: Session = Depends(get_db)
):
    event = events_crud.create_event(db, request.model_dump(), current_user["user"].id)
    logger.info(f"Event {event.id} created by user {current_user['user'].id}")
    return EventDisplay.model_validate(event)

@router.put("/{event_id}", response_model=EventDisplay)
def update_event(
    event_id: int,
    request: EventUpdate,
    current_user: dict = Depends(require_capability(Capability.UPDATE_EVENT)),
    db: Session = Depends(get_db)
):
    event = _get_event_or_404(db, event_id)
    event = events_crud.update_event(db, event, request.model_dump(exclude_unset=True))
    logger.info(f"Event {event.id} updated by user {current_user['user'].id}")
    return EventDisplay.model_validate(event)

@router.delete("/{event_id}")
def delete_event(
    event_id: int,
    current_user: dict = Depends(require_capability(Capability.DELETE_EVENT)),
    db: Session = Depends(get_db)
):
    event = _get_event_or_404(db, event_id)
    events_crud.delete_event(db, event)
    logger.info(f"Event {event_id} deleted by user {current_user['user'].id}")
    return {"data": {}}
