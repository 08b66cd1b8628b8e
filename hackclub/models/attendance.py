from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from hackclub.db.base import Base
from hackclub.utils.helpers import get_utc_now

class AttendanceStatus(enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"

class Attendance(Base):
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_attendance_event_user"),
    )

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(Enum(AttendanceStatus), nullable=False, default=AttendanceStatus.PRESENT)
    marked_at = Column(DateTime(timezone=True), default=get_utc_now)

    event = relationship("Event", back_populates="attendance")
    user = relationship("User")
