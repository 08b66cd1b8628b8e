from sqlalchemy import Column, Integer, String, Enum, DateTime
from sqlalchemy.orm import relationship
import enum
from hackclub.db.base import Base
from hackclub.models.team import team_members
from hackclub.utils.helpers import get_utc_now

class RoleType(enum.Enum):
    USER = "user"
    LEAD = "lead"
    CO_LEAD = "co-lead"
    ADMIN = "admin"
    JUDGE = "judge"

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    # Firebase-only accounts have no local password
    hashed_password = Column(String, nullable=True)
    firebase_uid = Column(String, nullable=True, unique=True)
    role = Column(Enum(RoleType), nullable=False, default=RoleType.USER)
    created_at = Column(DateTime(timezone=True), default=get_utc_now)

    teams = relationship("Team", secondary=team_members, back_populates="members")
    led_teams = relationship("Team", back_populates="leader", foreign_keys="Team.leader_id")
