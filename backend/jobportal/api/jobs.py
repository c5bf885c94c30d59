from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional, List
import logging
from jobportal.api.dependencies import get_current_recruiter, get_current_user, page_params, sorted_page_params
from jobportal.core.database import get_db
from jobportal.models.user import User
from jobportal.schemas.common import ApiResponse, PageResponse
from jobportal.schemas.job import JobCreateRequest, JobResponse
from jobportal.services import job_service
from jobportal.utils.pagination import PageRequest

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=ApiResponse[PageResponse[JobResponse]])
def get_jobs(
    page_request: PageRequest = Depends(sorted_page_params),
    db: Session = Depends(get_db)
):
    """Список активных вакансий"""
    return ApiResponse.ok(job_service.get_all_active_jobs(db, page_request))


@router.get("/search", response_model=ApiResponse[PageResponse[JobResponse]])
def search_jobs(
    q: str = Query(...),
    page_request: PageRequest = Depends(page_params),
    db: Session = Depends(get_db)
):
    """Поиск по заголовку, описанию, локации и навыкам"""
    return ApiResponse.ok(job_service.search_jobs(db, q, page_request))


@router.get("/filter", response_model=ApiResponse[PageResponse[JobResponse]])
def filter_jobs(
    title: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    skills: Optional[List[str]] = Query(default=None),
    experienceRequired: Optional[int] = Query(None, ge=0),
    page_request: PageRequest = Depends(page_params),
    db: Session = Depends(get_db)
):
    """Фильтрация вакансий; все заданные фильтры объединяются через AND"""
    result = job_service.filter_jobs(
        db,
        title=title,
        location=location,
        skills=skills,
        experience_required=experienceRequired,
        page_request=page_request,
    )
    return ApiResponse.ok(result)


@router.get("/recruiter/my-jobs", response_model=ApiResponse[PageResponse[JobResponse]])
def get_my_jobs(
    page_request: PageRequest = Depends(page_params),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Активные вакансии текущего пользователя"""
    return ApiResponse.ok(job_service.get_jobs_by_recruiter(db, current_user.id, page_request))


@router.get("/{job_id}", response_model=ApiResponse[JobResponse])
def get_job(job_id: str, db: Session = Depends(get_db)):
    """Детальная информация о вакансии"""
    return ApiResponse.ok(job_service.get_job_by_id(db, job_id))


@router.post("", response_model=ApiResponse[JobResponse], status_code=status.HTTP_201_CREATED)
def create_job(
    request: JobCreateRequest,
    current_user: User = Depends(get_current_recruiter),
    db: Session = Depends(get_db)
):
    """Создание вакансии (рекрутер или администратор)"""
    job = job_service.create_job(db, request, current_user.id)
    return ApiResponse.ok(job, "Job created successfully")


@router.put("/{job_id}", response_model=ApiResponse[JobResponse])
def update_job(
    job_id: str,
    request: JobCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Изменение вакансии (владелец или администратор)"""
    job = job_service.update_job(db, job_id, request, current_user.id)
    return ApiResponse.ok(job, "Job updated successfully")


@router.delete("/{job_id}", response_model=ApiResponse[None])
def delete_job(
    job_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Мягкое удаление вакансии (владелец или администратор)"""
    job_service.delete_job(db, job_id, current_user.id)
    return ApiResponse.ok(None, "Job deleted successfully")
