from sqlalchemy import Column, Integer, String, ForeignKey, Table, Text, DateTime
from sqlalchemy.orm import relationship
from hackclub.db.base import Base
from hackclub.utils.helpers import get_utc_now

# Association table; the composite key keeps a user in a team at most once
team_members = Table(
    "team_members", Base.metadata,
    Column("team_id", Integer, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
)

class Team(Base):
    __tablename__ = "teams"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False)
    leader_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    project_idea = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=get_utc_now)

    event = relationship("Event", back_populates="teams")
    leader = relationship("User", back_populates="led_teams", foreign_keys=[leader_id])
    members = relationship("User", secondary=team_members, back_populates="teams")
    submissions = relationship("Submission", back_populates="team", cascade="all")
