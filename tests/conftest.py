"""Pytest fixtures: in-memory SQLite + FastAPI TestClient."""

import os
import tempfile

# 설정은 import 시점에 읽히므로 앱 import 전에 환경변수 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-hoopers-vibes-0123456789")
os.environ.setdefault("NOTIFICATION_URL", "")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hoopers-logs-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.database import Base, get_db
from app.models import player, vote, device_fingerprint, player_milestone, user  # noqa: F401
from app.models.user import UserRole
from app.services import notification_service, user_service
from app.services.vote_store import VoteStore

ADMIN_EMAIL = "admin@hoopers.app"
ADMIN_PASSWORD = "admin-password-123"
FAN_EMAIL = "fan@hoopers.app"
FAN_PASSWORD = "fan-password-456"


@pytest.fixture()
def engine():
    """Fresh in-memory database per test, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db_session) -> VoteStore:
    return VoteStore(db_session)


@pytest.fixture()
def client(session_factory):
    """HTTP client with the app wired to the test database."""
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def sent_notifications(monkeypatch):
    """Capture owner notifications instead of calling the real sink."""
    sent = []

    def fake_notify_owner(title: str, content: str) -> bool:
        sent.append({"title": title, "content": content})
        return True

    monkeypatch.setattr(notification_service, "notify_owner", fake_notify_owner)
    return sent


@pytest.fixture()
def admin_user(db_session):
    return user_service.create_password_user(
        db_session,
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
        name="Admin",
        role=UserRole.ADMIN,
    )


@pytest.fixture()
def fan_user(db_session):
    return user_service.create_password_user(
        db_session,
        email=FAN_EMAIL,
        password=FAN_PASSWORD,
        name="Fan",
    )


@pytest.fixture()
def admin_headers(admin_user) -> dict:
    token = create_access_token({"sub": admin_user.open_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def fan_headers(fan_user) -> dict:
    token = create_access_token({"sub": fan_user.open_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def players(store):
    """Two active players and one inactive player."""
    curry = store.create_player({"name": "Stephen Curry", "team": "Warriors", "position": "PG", "number": 30})
    james = store.create_player({"name": "LeBron James", "team": "Lakers", "position": "SF", "number": 23})
    retired = store.create_player({"name": "Tim Duncan", "team": "Spurs", "is_active": False})
    return {"curry": curry, "james": james, "retired": retired}


@pytest.fixture()
def store_pair(session_factory):
    """Two stores on separate sessions, like two concurrent requests."""
    sessions = [session_factory(), session_factory()]
    try:
        yield VoteStore(sessions[0]), VoteStore(sessions[1])
    finally:
        for session in sessions:
            session.close()
