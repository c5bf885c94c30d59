from datetime import datetime

import pytest

from jobportal.core.exceptions import ConflictError, ForbiddenError, InvalidError, NotFoundError
from jobportal.models import Application, ApplicationStatus
from jobportal.repositories import application_repository
from jobportal.schemas.application import ApplicationRequest, ApplicationStatusUpdateRequest
from jobportal.services import application_service
from jobportal.utils.pagination import PageRequest
from tests.conftest import BASE_TIME, create_application, create_job, create_user


def apply(db, job, user, resume="r"):
    return application_service.apply_for_job(db, ApplicationRequest(job_id=job.id, resume=resume), user.id)


def review(db, application, user, status=ApplicationStatus.REVIEWED, notes=None):
    request = ApplicationStatusUpdateRequest(status=status, notes=notes)
    return application_service.update_application_status(db, application.id, request, user.id)


def test_apply_creates_application(db, job, candidate):
    response = apply(db, job, candidate)

    assert response.status == ApplicationStatus.APPLIED
    assert response.candidate_id == candidate.id
    assert response.candidate_name == "Carol Candidate"
    assert response.job_title == job.title
    assert response.reviewed_at is None


def test_duplicate_application_conflicts(db, job, candidate):
    apply(db, job, candidate, resume="r")

    with pytest.raises(ConflictError):
        apply(db, job, candidate, resume="r2")

    assert db.query(Application).count() == 1


def test_duplicate_rejected_by_unique_index(db, job, candidate, monkeypatch):
    apply(db, job, candidate)
    # Имитация гонки: предварительная проверка не видит первый отклик
    monkeypatch.setattr(application_repository, "exists_by_candidate_and_job", lambda *args: False)

    with pytest.raises(ConflictError):
        apply(db, job, candidate, resume="r2")

    assert db.query(Application).count() == 1


def test_recruiter_cannot_apply(db, job, recruiter):
    with pytest.raises(ForbiddenError):
        apply(db, job, recruiter)


def test_cannot_apply_to_inactive_job(db, recruiter, candidate):
    closed = create_job(db, recruiter, title="Closed", is_active=False)

    with pytest.raises(InvalidError):
        apply(db, closed, candidate)


def test_cannot_apply_to_missing_job(db, candidate):
    request = ApplicationRequest(job_id="missing", resume="r")

    with pytest.raises(NotFoundError):
        application_service.apply_for_job(db, request, candidate.id)


def test_status_update_stamps_reviewed_at(db, job, recruiter, candidate, monkeypatch):
    application = create_application(db, candidate, job)
    assert application.reviewed_at is None

    first_review = datetime(2024, 1, 2, 9, 0, 0)
    monkeypatch.setattr(application_service, "utcnow", lambda: first_review)
    response = review(db, application, recruiter, ApplicationStatus.REVIEWED)

    assert response.status == ApplicationStatus.REVIEWED
    assert response.reviewed_at == first_review
    assert response.applied_at == BASE_TIME

    second_review = datetime(2024, 1, 3, 9, 0, 0)
    monkeypatch.setattr(application_service, "utcnow", lambda: second_review)
    response = review(db, application, recruiter, ApplicationStatus.SHORTLISTED, notes="Strong profile")

    assert response.status == ApplicationStatus.SHORTLISTED
    assert response.reviewed_at == second_review
    assert response.notes == "Strong profile"


def test_status_transitions_are_not_restricted(db, job, recruiter, candidate):
    application = create_application(db, candidate, job, status=ApplicationStatus.REJECTED)

    response = review(db, application, recruiter, ApplicationStatus.APPLIED)

    assert response.status == ApplicationStatus.APPLIED


def test_only_job_owner_or_admin_reviews(db, job, candidate, other_recruiter, admin):
    application = create_application(db, candidate, job)

    with pytest.raises(ForbiddenError):
        review(db, application, other_recruiter)

    with pytest.raises(ForbiddenError):
        review(db, application, candidate, ApplicationStatus.WITHDRAWN)

    assert review(db, application, admin, ApplicationStatus.ACCEPTED).status == ApplicationStatus.ACCEPTED


def test_update_unknown_application(db, recruiter):
    request = ApplicationStatusUpdateRequest(status=ApplicationStatus.REVIEWED)

    with pytest.raises(NotFoundError):
        application_service.update_application_status(db, "missing", request, recruiter.id)


def test_applications_by_candidate_newest_first(db, recruiter, candidate):
    first_job = create_job(db, recruiter, title="First")
    second_job = create_job(db, recruiter, title="Second")
    create_application(db, candidate, first_job, minutes=1)
    create_application(db, candidate, second_job, minutes=2)

    page = application_service.get_applications_by_candidate(db, candidate.id, PageRequest())

    assert [a.job_title for a in page.content] == ["Second", "First"]
    assert page.total_elements == 2


def test_applications_by_job_and_status(db, job, candidate):
    other = create_user(db, "other-candidate")
    create_application(db, candidate, job, status=ApplicationStatus.SHORTLISTED)
    create_application(db, other, job, minutes=1)

    everything = application_service.get_applications_by_job(db, job.id, PageRequest())
    shortlisted = application_service.get_applications_by_job_and_status(
        db, job.id, ApplicationStatus.SHORTLISTED, PageRequest()
    )

    assert everything.total_elements == 2
    assert [a.candidate_id for a in shortlisted.content] == [candidate.id]


def test_application_stats(db, job, candidate):
    other = create_user(db, "other-candidate")
    third = create_user(db, "third-candidate")
    create_application(db, candidate, job, status=ApplicationStatus.SHORTLISTED)
    create_application(db, other, job)
    create_application(db, third, job)

    stats = application_service.get_application_stats(db, job.id)

    assert stats.total == 3
    assert stats.by_status[ApplicationStatus.APPLIED] == 2
    assert stats.by_status[ApplicationStatus.SHORTLISTED] == 1
    assert stats.by_status[ApplicationStatus.REJECTED] == 0
