from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from hackclub.core.security.auth import get_current_user
from hackclub.core.security.permissions import Capability, require_capability
from hackclub.db.session import get_db
from hackclub.models.attendance import Attendance
from hackclub.schemas.attendance import AttendanceCreate, AttendanceDisplay
from hackclub.services import attendance as attendance_service
from hackclub.utils.helpers import as_utc

router = APIRouter(prefix="/attendance", tags=["attendance"])

def attendance_to_display(record: Attendance) -> AttendanceDisplay:
    return AttendanceDisplay(
        id=record.id,
        event_id=record.event_id,
        user_id=record.user_id,
        user_name=record.user.name if record.user else None,
        user_email=record.user.email if record.user else None,
        status=record.status,
        marked_at=as_utc(record.marked_at),
    )

@router.post("", response_model=AttendanceDisplay, status_code=status.HTTP_201_CREATED)
def mark_attendance(
    request: AttendanceCreate,
    current_user: dict = Depends(require_capability(Capability.MARK_ATTENDANCE)),
    db: Session = Depends(get_db)
):
    record = attendance_service.mark_attendance(db, request, current_user["user"].id)
    return attendance_to_display(record)

@router.get("/{event_id}", response_model=List[AttendanceDisplay])
def get_event_attendance(
    event_id: int,
    current_user: dict = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    records = attendance_service.list_event_attendance(db, event_id)
    return [attendance_to_display(record) for record in records]

@router.get("/{event_id}/export")
def export_attendance(
    event_id: int,
    current_user: dict = Depends(require_capability(Capability.EXPORT_ATTENDANCE)),
    db: Session = Depends(get_db)
):
    content = attendance_service.export_attendance_csv(db, event_id)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="attendance-{event_id}.csv"'},
    )
