"""Tests for admin identity helpers."""

from app.models.user import UserRole
from app.services import user_service


def test_owner_open_id_becomes_admin(db_session, monkeypatch):
    monkeypatch.setattr(user_service.settings, "owner_open_id", "owner-123")

    owner = user_service.upsert_user(db_session, open_id="owner-123", name="Owner")
    other = user_service.upsert_user(db_session, open_id="someone-else", name="Fan")

    assert owner.role == UserRole.ADMIN
    assert other.role == UserRole.USER


def test_upsert_keeps_existing_fields(db_session):
    user_service.upsert_user(db_session, open_id="abc", name="Fan", email="fan@hoopers.app")

    user = user_service.upsert_user(db_session, open_id="abc", login_method="password")

    assert user.name == "Fan"
    assert user.email == "fan@hoopers.app"
    assert user.login_method == "password"


def test_authenticate(db_session):
    user_service.create_password_user(db_session, email="fan@hoopers.app", password="secret-pass")

    assert user_service.authenticate(db_session, "fan@hoopers.app", "secret-pass") is not None
    assert user_service.authenticate(db_session, "fan@hoopers.app", "wrong") is None
    assert user_service.authenticate(db_session, "nobody@hoopers.app", "secret-pass") is None
