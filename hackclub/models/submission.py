from sqlalchemy import Column, Integer, String, ForeignKey, Float, DateTime, Text, JSON, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from hackclub.db.base import Base
from hackclub.utils.helpers import get_utc_now

class SubmissionStatus(enum.Enum):
    SUBMITTED = "submitted"
    GRADED = "graded"

class Submission(Base):
    __tablename__ = "submissions"
    # One submission per team per event
    __table_args__ = (
        UniqueConstraint("event_id", "team_id", name="uq_submissions_event_team"),
    )

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False)
    project_title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    repo_link = Column(String, nullable=False)
    demo_link = Column(String, nullable=True)
    # List of {"name", "url", "type"} for files already on the media host
    attachments = Column(JSON, nullable=False, default=list)
    status = Column(Enum(SubmissionStatus), nullable=False, default=SubmissionStatus.SUBMITTED)
    submitted_by = Column(Integer, ForeignKey("users.id"), nullable=False)
    grade_score = Column(Float, nullable=True)
    grade_feedback = Column(Text, nullable=True)
    graded_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    graded_at = Column(DateTime(timezone=True), nullable=True)
    submitted_at = Column(DateTime(timezone=True), default=get_utc_now)
    updated_at = Column(DateTime(timezone=True), default=get_utc_now, onupdate=get_utc_now)

    event = relationship("Event", back_populates="submissions")
    team = relationship("Team", back_populates="submissions")
    submitter = relationship("User", foreign_keys=[submitted_by])
    grader = relationship("User", foreign_keys=[graded_by])

    @property
    def is_graded(self) -> bool:
        return self.grade_score is not None
