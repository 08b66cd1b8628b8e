import csv
import io
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hackclub.core.errors import Conflict, NotFound
from hackclub.crud import attendance as attendance_crud
from hackclub.crud import events as events_crud
from hackclub.crud import users as users_crud
from hackclub.models.attendance import Attendance
from hackclub.schemas.attendance import AttendanceCreate
from hackclub.utils.helpers import format_datetime, get_utc_now

logger = logging.getLogger("hackclub.attendance")

CSV_HEADER = ["Name", "Email", "Status", "Time"]


def mark_attendance(db: Session, payload: AttendanceCreate, marked_by: int) -> Attendance:
    """
    Record a user's attendance at an event, once per user and event

    Raises:
        NotFound: event or user does not exist
        Conflict: attendance already recorded for this user
    """
    if not events_crud.get_event(db, payload.event_id):
        raise NotFound("Event not found")
    if not users_crud.get_user(db, payload.user_id):
        raise NotFound("User not found")

    if attendance_crud.find_attendance(db, payload.event_id, payload.user_id):
        raise Conflict("Attendance already marked for this user")

    try:
        attendance = attendance_crud.insert_attendance(db, {
            "event_id": payload.event_id,
            "user_id": payload.user_id,
            "status": payload.status,
            "marked_at": get_utc_now(),
        })
    except IntegrityError:
        raise Conflict("Attendance already marked for this user")

    logger.info(
        "Attendance %s for user %s at event %s marked by user %s",
        attendance.status.value, attendance.user_id, attendance.event_id, marked_by,
    )
    return attendance


def list_event_attendance(db: Session, event_id: int) -> List[Attendance]:
    return attendance_crud.list_attendance_by_event(db, event_id)


def export_attendance_csv(db: Session, event_id: int) -> str:
    """Render an event's attendance as CSV, most recent first"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for record in attendance_crud.list_attendance_by_event(db, event_id):
        writer.writerow([
            record.user.name if record.user else "Unknown",
            record.user.email if record.user else "N/A",
            record.status.value,
            format_datetime(record.marked_at),
        ])
    return buffer.getvalue()
