"""
Сервис откликов на вакансии.

Жизненный цикл: отклик создается кандидатом в статусе APPLIED, дальше статус
меняет владелец вакансии или администратор. Переходы между статусами не
ограничены, каждое изменение статуса обновляет reviewed_at.
"""
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from jobportal.core.exceptions import ConflictError, ForbiddenError, InvalidError, NotFoundError
from jobportal.core.permissions import can_review_application, is_candidate
from jobportal.models.application import Application
from jobportal.models.enums import ApplicationStatus
from jobportal.repositories import application_repository
from jobportal.schemas.application import (
    ApplicationRequest,
    ApplicationResponse,
    ApplicationStatsResponse,
    ApplicationStatusUpdateRequest,
)
from jobportal.schemas.common import PageResponse
from jobportal.services.job_service import get_job_entity
from jobportal.services.user_service import get_user_entity
from jobportal.utils.dates import utcnow
from jobportal.utils.pagination import PageRequest

logger = logging.getLogger(__name__)

DUPLICATE_APPLICATION = "You have already applied for this job"


def to_response(application: Application) -> ApplicationResponse:
    return ApplicationResponse(
        id=application.id,
        candidate_id=application.candidate_id,
        candidate_name=application.candidate.full_name,
        job_id=application.job_id,
        job_title=application.job.title,
        status=application.status,
        resume=application.resume,
        cover_letter=application.cover_letter,
        applied_at=application.applied_at,
        reviewed_at=application.reviewed_at,
        notes=application.notes,
    )


def _to_page(applications: List[Application], total: int, page_request: PageRequest) -> PageResponse[ApplicationResponse]:
    return PageResponse[ApplicationResponse].of(
        [to_response(application) for application in applications],
        page_request.page,
        page_request.size,
        total,
    )


def get_application_entity(db: Session, application_id: str) -> Application:
    application = application_repository.get_by_id(db, application_id)
    if application is None:
        raise NotFoundError(f"Application not found with id: {application_id}")
    return application


def apply_for_job(db: Session, request: ApplicationRequest, candidate_id: str) -> ApplicationResponse:
    logger.info(f"Candidate {candidate_id} applying for job {request.job_id}")

    candidate = get_user_entity(db, candidate_id)
    if not is_candidate(candidate):
        logger.warning(f"User {candidate_id} with role {candidate.role} tried to apply for a job")
        raise ForbiddenError("Only candidates can apply for jobs")

    job = get_job_entity(db, request.job_id)
    if not job.is_active:
        raise InvalidError("Cannot apply to inactive job")

    # Быстрая проверка; окончательно дубликат отсекает уникальный индекс
    if application_repository.exists_by_candidate_and_job(db, candidate_id, job.id):
        raise ConflictError(DUPLICATE_APPLICATION)

    application = Application(
        candidate_id=candidate.id,
        job_id=job.id,
        status=ApplicationStatus.APPLIED.value,
        resume=request.resume,
        cover_letter=request.cover_letter,
        applied_at=utcnow(),
        reviewed_at=None,
    )

    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Duplicate application rejected by unique index: candidate {candidate_id}, job {request.job_id}")
        raise ConflictError(DUPLICATE_APPLICATION)
    db.refresh(application)

    logger.info(f"Application created successfully with ID: {application.id}")
    return to_response(application)


def get_application_by_id(db: Session, application_id: str) -> ApplicationResponse:
    logger.debug(f"Fetching application by ID: {application_id}")
    return to_response(get_application_entity(db, application_id))


def get_applications_by_candidate(db: Session, candidate_id: str, page_request: PageRequest) -> PageResponse[ApplicationResponse]:
    logger.debug(f"Fetching applications for candidate: {candidate_id}")
    applications, total = application_repository.find_by_candidate(db, candidate_id, page_request)
    return _to_page(applications, total, page_request)


def get_applications_by_job(db: Session, job_id: str, page_request: PageRequest) -> PageResponse[ApplicationResponse]:
    logger.debug(f"Fetching applications for job: {job_id}")
    applications, total = application_repository.find_by_job(db, job_id, page_request)
    return _to_page(applications, total, page_request)


def get_applications_by_job_and_status(
    db: Session,
    job_id: str,
    status: ApplicationStatus,
    page_request: PageRequest,
) -> PageResponse[ApplicationResponse]:
    logger.debug(f"Fetching applications for job: {job_id} with status: {status.value}")
    applications, total = application_repository.find_by_job_and_status(db, job_id, status, page_request)
    return _to_page(applications, total, page_request)


def get_application_stats(db: Session, job_id: str) -> ApplicationStatsResponse:
    """Количество откликов на вакансию, всего и по статусам"""
    job = get_job_entity(db, job_id)
    counts = application_repository.count_by_job_grouped_by_status(db, job.id)
    by_status = {status: counts.get(status.value, 0) for status in ApplicationStatus}
    return ApplicationStatsResponse(
        job_id=job.id,
        total=sum(by_status.values()),
        by_status=by_status,
    )


def update_application_status(
    db: Session,
    application_id: str,
    request: ApplicationStatusUpdateRequest,
    caller_id: str,
) -> ApplicationResponse:
    logger.info(f"Updating application {application_id} status to {request.status.value} by user {caller_id}")

    application = get_application_entity(db, application_id)
    caller = get_user_entity(db, caller_id)

    if not can_review_application(caller, application):
        logger.warning(f"User {caller_id} is not allowed to review application {application_id}")
        raise ForbiddenError("You don't have permission to update this application")

    application.status = request.status.value
    application.notes = request.notes
    application.reviewed_at = utcnow()

    db.commit()
    db.refresh(application)

    logger.info(f"Application status updated successfully: {application_id}")
    return to_response(application)
