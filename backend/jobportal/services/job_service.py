"""
Сервис вакансий: создание, изменение, мягкое удаление, поиск и фильтрация
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from jobportal.core.exceptions import ForbiddenError, InvalidError, NotFoundError
from jobportal.core.permissions import can_manage_job, is_recruiter_or_admin
from jobportal.models.job import Job
from jobportal.repositories import job_repository
from jobportal.schemas.common import PageResponse
from jobportal.schemas.job import JobCreateRequest, JobResponse
from jobportal.services.user_service import get_user_entity
from jobportal.utils.dates import utcnow
from jobportal.utils.pagination import PageRequest
from jobportal.utils.text_processing import clean_optional_text, clean_skills

logger = logging.getLogger(__name__)


def to_response(job: Job) -> JobResponse:
    poster = job.poster
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        location=job.location,
        skills=job.skills,
        experience_required=job.experience_required,
        salary_min=job.salary_min,
        salary_max=job.salary_max,
        employment_type=job.employment_type,
        posted_by=job.posted_by,
        posted_by_name=poster.full_name if poster else None,
        is_active=job.is_active,
        created_at=job.created_at,
        updated_at=job.updated_at,
    )


def _to_page(jobs: List[Job], total: int, page_request: PageRequest) -> PageResponse[JobResponse]:
    return PageResponse[JobResponse].of(
        [to_response(job) for job in jobs],
        page_request.page,
        page_request.size,
        total,
    )


def _apply_request(job: Job, request: JobCreateRequest) -> None:
    job.title = request.title
    job.description = request.description
    job.location = request.location
    job.skills = request.skills
    job.experience_required = request.experience_required
    job.salary_min = request.salary_min
    job.salary_max = request.salary_max
    job.employment_type = request.employment_type


def get_job_entity(db: Session, job_id: str) -> Job:
    job = job_repository.get_by_id(db, job_id)
    if job is None:
        raise NotFoundError(f"Job not found with id: {job_id}")
    return job


def create_job(db: Session, request: JobCreateRequest, caller_id: str) -> JobResponse:
    logger.info(f"Creating new job: {request.title} by user: {caller_id}")

    caller = get_user_entity(db, caller_id)
    if not is_recruiter_or_admin(caller):
        logger.warning(f"User {caller_id} with role {caller.role} tried to create a job")
        raise ForbiddenError("Only recruiters and admins can create jobs")

    now = utcnow()
    job = Job(
        posted_by=caller.id,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    _apply_request(job, request)

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(f"Job created successfully with ID: {job.id}")
    return to_response(job)


def get_job_by_id(db: Session, job_id: str) -> JobResponse:
    """Вакансия по id, в том числе неактивная"""
    logger.debug(f"Fetching job by ID: {job_id}")
    return to_response(get_job_entity(db, job_id))


def get_all_active_jobs(db: Session, page_request: PageRequest) -> PageResponse[JobResponse]:
    logger.debug(f"Fetching all active jobs - page: {page_request.page}, size: {page_request.size}")
    jobs, total = job_repository.find_active(db, page_request)
    return _to_page(jobs, total, page_request)


def search_jobs(db: Session, query: str, page_request: PageRequest) -> PageResponse[JobResponse]:
    term = clean_optional_text(query)
    if term is None:
        raise InvalidError("Search query must not be blank")

    logger.debug(f"Searching jobs with term: {term}")
    jobs, total = job_repository.search(db, term, page_request)
    return _to_page(jobs, total, page_request)


def filter_jobs(
    db: Session,
    title: Optional[str],
    location: Optional[str],
    skills: Optional[List[str]],
    experience_required: Optional[int],
    page_request: PageRequest,
) -> PageResponse[JobResponse]:
    logger.debug(
        f"Filtering jobs - title: {title}, location: {location}, "
        f"skills: {skills}, experience: {experience_required}"
    )
    jobs, total = job_repository.find_by_filters(
        db,
        title=clean_optional_text(title),
        location=clean_optional_text(location),
        skills=clean_skills(skills),
        experience_required=experience_required,
        page_request=page_request,
    )
    return _to_page(jobs, total, page_request)


def get_jobs_by_recruiter(db: Session, recruiter_id: str, page_request: PageRequest) -> PageResponse[JobResponse]:
    logger.debug(f"Fetching jobs by recruiter: {recruiter_id}")
    jobs, total = job_repository.find_active_by_poster(db, recruiter_id, page_request)
    return _to_page(jobs, total, page_request)


def _get_managed_job(db: Session, job_id: str, caller_id: str, action: str) -> Job:
    job = get_job_entity(db, job_id)
    caller = get_user_entity(db, caller_id)
    if not can_manage_job(caller, job):
        logger.warning(f"User {caller_id} is not allowed to {action} job {job_id}")
        raise ForbiddenError(f"You don't have permission to {action} this job")
    return job


def update_job(db: Session, job_id: str, request: JobCreateRequest, caller_id: str) -> JobResponse:
    logger.info(f"Updating job: {job_id} by user: {caller_id}")
    job = _get_managed_job(db, job_id, caller_id, "update")

    # created_at и posted_by не меняются
    _apply_request(job, request)
    job.updated_at = utcnow()

    db.commit()
    db.refresh(job)

    logger.info(f"Job updated successfully: {job_id}")
    return to_response(job)


def delete_job(db: Session, job_id: str, caller_id: str) -> None:
    """Мягкое удаление: вакансия становится неактивной, отклики не трогаем"""
    logger.info(f"Deleting job: {job_id} by user: {caller_id}")
    job = _get_managed_job(db, job_id, caller_id, "delete")

    job.is_active = False
    job.updated_at = utcnow()
    db.commit()

    logger.info(f"Job deleted successfully: {job_id}")
