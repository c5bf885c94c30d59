import os

# Настройки должны быть заданы до импорта приложения
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import jobportal.models  # noqa: F401
from jobportal.core.database import Base, get_db
from jobportal.core.security import create_access_token, get_password_hash
from jobportal.main import app
from jobportal.models import Application, ApplicationStatus, Job, Role, User

PASSWORD = "secret123"
BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


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
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def create_user(db, username: str, role: Role = Role.CANDIDATE, is_active: bool = True, **fields) -> User:
    user = User(
        email=fields.pop("email", f"{username}@example.com"),
        username=username,
        password_hash=get_password_hash(fields.pop("password", PASSWORD)),
        first_name=fields.pop("first_name", username.capitalize()),
        last_name=fields.pop("last_name", "Tester"),
        role=role.value,
        is_active=is_active,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_job(db, poster: User, title: str = "Python Developer", minutes: int = 0, **fields) -> Job:
    created_at = BASE_TIME + timedelta(minutes=minutes)
    job = Job(
        title=title,
        description=fields.pop("description", "Build backend services"),
        location=fields.pop("location", "Berlin"),
        experience_required=fields.pop("experience_required", None),
        employment_type=fields.pop("employment_type", "FULL_TIME"),
        posted_by=poster.id,
        is_active=fields.pop("is_active", True),
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def create_application(db, candidate: User, job: Job, minutes: int = 0, **fields) -> Application:
    application = Application(
        candidate_id=candidate.id,
        job_id=job.id,
        status=fields.pop("status", ApplicationStatus.APPLIED).value,
        resume=fields.pop("resume", "My resume"),
        applied_at=BASE_TIME + timedelta(minutes=minutes),
        **fields,
    )
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def auth_headers(user: User) -> dict:
    token = create_access_token(user.id, user.username, user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def candidate(db):
    return create_user(db, "candidate", Role.CANDIDATE, first_name="Carol", last_name="Candidate")


@pytest.fixture
def recruiter(db):
    return create_user(db, "recruiter", Role.RECRUITER, first_name="Rick", last_name="Recruiter")


@pytest.fixture
def other_recruiter(db):
    return create_user(db, "recruiter2", Role.RECRUITER)


@pytest.fixture
def admin(db):
    return create_user(db, "admin", Role.ADMIN)


@pytest.fixture
def job(db, recruiter):
    return create_job(db, recruiter, skills=["python", "sql"], experience_required=2)
