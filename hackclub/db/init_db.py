import logging

from sqlalchemy.orm import Session

from hackclub.core.config.settings import Settings
from hackclub.core.security.auth import AuthService
from hackclub.db.base import Base
from hackclub.models.attendance import Attendance  # noqa: F401
from hackclub.models.event import Event  # noqa: F401
from hackclub.models.submission import Submission  # noqa: F401
from hackclub.models.team import Team  # noqa: F401
from hackclub.models.user import User, RoleType

logger = logging.getLogger("hackclub.db")

def create_tables(engine) -> None:
    Base.metadata.create_all(bind=engine)

def init_db(db: Session, settings: Settings, auth: AuthService) -> None:
    """Seed the default admin account when one is configured"""
    if not (settings.DEFAULT_ADMIN_EMAIL and settings.DEFAULT_ADMIN_PASSWORD):
        return

    email = settings.DEFAULT_ADMIN_EMAIL.lower()
    existing_admin = db.query(User).filter(User.email == email).first()
    if existing_admin:
        return

    db.add(User(
        name="Club Admin",
        email=email,
        hashed_password=auth.create_hashed_password(settings.DEFAULT_ADMIN_PASSWORD),
        role=RoleType.ADMIN,
    ))
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        raise e
    logger.info(f"Created default admin {email}")
