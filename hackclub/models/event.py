from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
import enum
from hackclub.db.base import Base
from hackclub.utils.helpers import get_utc_now

class EventType(enum.Enum):
    TEAM = "Team"
    INDIVIDUAL = "Individual"

class EventStatus(enum.Enum):
    UPCOMING = "Upcoming"
    OPEN = "Open"
    ENDED = "Ended"

class Event(Base):
    __tablename__ = "events"
    id = Column(Integer, primary_key=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)
    # Hard submission deadline when set
    end_date = Column(DateTime(timezone=True), nullable=True)
    image = Column(String, default="no-photo.jpg")
    type = Column(Enum(EventType), nullable=False, default=EventType.TEAM)
    status = Column(Enum(EventStatus), nullable=False, default=EventStatus.UPCOMING)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=get_utc_now)

    creator = relationship("User")
    teams = relationship("Team", back_populates="event", cascade="all")
    submissions = relationship("Submission", back_populates="event", cascade="all")
    attendance = relationship("Attendance", back_populates="event", cascade="all")
