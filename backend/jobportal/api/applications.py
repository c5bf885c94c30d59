from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from jobportal.api.dependencies import get_current_candidate, get_current_user, page_params
from jobportal.core.database import get_db
from jobportal.models.enums import ApplicationStatus
from jobportal.models.user import User
from jobportal.schemas.application import (
    ApplicationRequest,
    ApplicationResponse,
    ApplicationStatsResponse,
    ApplicationStatusUpdateRequest,
)
from jobportal.schemas.common import ApiResponse, PageResponse
from jobportal.services import application_service
from jobportal.utils.pagination import PageRequest

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("", response_model=ApiResponse[ApplicationResponse], status_code=status.HTTP_201_CREATED)
def apply_for_job(
    request: ApplicationRequest,
    current_user: User = Depends(get_current_candidate),
    db: Session = Depends(get_db)
):
    """Отклик кандидата на вакансию"""
    logger.info(f"Application request for job: {request.job_id}")
    application = application_service.apply_for_job(db, request, current_user.id)
    return ApiResponse.ok(application, "Application submitted successfully")


@router.get("/my-applications", response_model=ApiResponse[PageResponse[ApplicationResponse]])
def get_my_applications(
    page_request: PageRequest = Depends(page_params),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Отклики текущего пользователя"""
    return ApiResponse.ok(
        application_service.get_applications_by_candidate(db, current_user.id, page_request)
    )


@router.get("/job/{job_id}", response_model=ApiResponse[PageResponse[ApplicationResponse]])
def get_applications_by_job(
    job_id: str,
    page_request: PageRequest = Depends(page_params),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Отклики на вакансию"""
    return ApiResponse.ok(application_service.get_applications_by_job(db, job_id, page_request))


@router.get("/job/{job_id}/stats", response_model=ApiResponse[ApplicationStatsResponse])
def get_application_stats(
    job_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Количество откликов на вакансию по статусам"""
    return ApiResponse.ok(application_service.get_application_stats(db, job_id))


@router.get("/job/{job_id}/status/{application_status}", response_model=ApiResponse[PageResponse[ApplicationResponse]])
def get_applications_by_job_and_status(
    job_id: str,
    application_status: ApplicationStatus,
    page_request: PageRequest = Depends(page_params),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Отклики на вакансию с заданным статусом"""
    return ApiResponse.ok(
        application_service.get_applications_by_job_and_status(db, job_id, application_status, page_request)
    )


@router.get("/{application_id}", response_model=ApiResponse[ApplicationResponse])
def get_application(
    application_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Отклик по id"""
    return ApiResponse.ok(application_service.get_application_by_id(db, application_id))


@router.put("/{application_id}/status", response_model=ApiResponse[ApplicationResponse])
def update_application_status(
    application_id: str,
    request: ApplicationStatusUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Смена статуса отклика (владелец вакансии или администратор)"""
    application = application_service.update_application_status(db, application_id, request, current_user.id)
    return ApiResponse.ok(application, "Application status updated successfully")
