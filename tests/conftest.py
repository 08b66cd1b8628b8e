from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hackclub.main import app
from hackclub.core.errors import AuthenticationFailed
from hackclub.core.security.auth import AuthService, get_auth_service
from hackclub.db.base import Base
from hackclub.db.session import get_db
from hackclub.models.event import Event
from hackclub.models.team import Team
from hackclub.models.user import User, RoleType
from hackclub.services.firebase import get_firebase_verifier
from hackclub.utils.helpers import get_utc_now

PASSWORD = "secret123"


class FakeFirebaseVerifier:
    """Accepts tokens of the form ``valid:<email>:<name>``"""

    def verify(self, id_token):
        if not id_token.startswith("valid:"):
            raise AuthenticationFailed("Invalid Firebase token")
        _, email, name = id_token.split(":", 2)
        return {"email": email, "name": name or None, "uid": f"uid-{email}"}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def auth_service():
    return AuthService(secret_key="test-secret", access_token_expire_minutes=60, bcrypt_rounds=4)


@pytest.fixture
def client(db, auth_service):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_firebase_verifier] = lambda: FakeFirebaseVerifier()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db, auth_service):
    def _make_user(name, role=RoleType.USER, email=None):
        user = User(
            name=name,
            email=email or f"{name.lower().replace(' ', '.')}@hackclub.io",
            hashed_password=auth_service.create_hashed_password(PASSWORD),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def auth_headers(auth_service):
    def _auth_headers(user):
        return {"Authorization": f"Bearer {auth_service.generate_token(user.id)}"}
    return _auth_headers


@pytest.fixture
def make_event(db, make_user):
    def _make_event(title="Spring Hack", end_date=None, creator=None):
        creator = creator or make_user(f"Organizer {title}", RoleType.LEAD)
        event = Event(
            title=title,
            description="A weekend of building things",
            date=get_utc_now() - timedelta(days=1),
            end_date=end_date,
            created_by=creator.id,
        )
        db.add(event)
        db.commit()
        db.refresh(event)
        return event
    return _make_event


@pytest.fixture
def make_team(db):
    def _make_team(name, event, leader, members=()):
        team = Team(name=name, event_id=event.id, leader_id=leader.id)
        team.members.append(leader)
        for member in members:
            team.members.append(member)
        db.add(team)
        db.commit()
        db.refresh(team)
        return team
    return _make_team


@pytest.fixture
def user_password():
    return PASSWORD
