from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from hackclub.models.attendance import Attendance

def find_attendance(db: Session, event_id: int, user_id: int):
    return (
        db.query(Attendance)
        .filter(Attendance.event_id == event_id, Attendance.user_id == user_id)
        .first()
    )

def insert_attendance(db: Session, attendance_data: dict):
    attendance = Attendance(**attendance_data)
    db.add(attendance)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(attendance)
    return attendance

def list_attendance_by_event(db: Session, event_id: int):
    return (
        db.query(Attendance)
        .options(joinedload(Attendance.user))
        .filter(Attendance.event_id == event_id)
        .order_by(Attendance.marked_at.desc(), Attendance.id.desc())
        .all()
    )
