from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from hackclub.models.event import Event

def _commit(db: Session):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

def get_event(db: Session, event_id: int):
    return db.query(Event).filter(Event.id == event_id).first()

def get_events(db: Session):
    return db.query(Event).order_by(Event.date.asc(), Event.id.asc()).all()

def create_event(db: Session, event_data: dict, creator_id: int):
    event = Event(**event_data, created_by=creator_id)
    db.add(event)
    _commit(db)
    db.refresh(event)
    return event

def update_event(db: Session, event: Event, event_data: dict):
    for key, value in event_data.items():
        setattr(event, key, value)
    _commit(db)
    db.refresh(event)
    return event

def delete_event(db: Session, event: Event):
    db.delete(event)
    _commit(db)
