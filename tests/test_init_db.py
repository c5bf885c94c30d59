from jobportal.core.config import settings
from jobportal.core.security import verify_password
from jobportal.models import Role, User
from jobportal.scripts.init_db import create_admin


def configure_admin(monkeypatch, email="root@example.com", username="root", password="root-password"):
    monkeypatch.setattr(settings, "ADMIN_EMAIL", email)
    monkeypatch.setattr(settings, "ADMIN_USERNAME", username)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", password)


def test_admin_is_created_from_settings(db, monkeypatch):
    configure_admin(monkeypatch)

    assert create_admin(db) is True

    admin = db.query(User).filter(User.username == "root").one()
    assert admin.role == Role.ADMIN.value
    assert admin.is_active
    assert verify_password("root-password", admin.password_hash)


def test_existing_admin_is_not_duplicated(db, monkeypatch):
    configure_admin(monkeypatch)

    assert create_admin(db) is True
    assert create_admin(db) is False
    assert db.query(User).count() == 1


def test_admin_creation_skipped_without_settings(db, monkeypatch):
    configure_admin(monkeypatch, password="")

    assert create_admin(db) is False
    assert db.query(User).count() == 0
