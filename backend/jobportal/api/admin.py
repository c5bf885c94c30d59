from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from jobportal.api.dependencies import get_current_admin, sorted_page_params
from jobportal.core.database import get_db
from jobportal.models.enums import Role
from jobportal.models.user import User
from jobportal.schemas.common import ApiResponse, PageResponse
from jobportal.schemas.user import UserResponse
from jobportal.services import user_service
from jobportal.utils.pagination import PageRequest

# Все эндпоинты только для администратора
router = APIRouter(dependencies=[Depends(get_current_admin)])

logger = logging.getLogger(__name__)


@router.get("/users", response_model=ApiResponse[PageResponse[UserResponse]])
def get_users(
    page_request: PageRequest = Depends(sorted_page_params),
    db: Session = Depends(get_db)
):
    """Список пользователей"""
    return ApiResponse.ok(user_service.get_all_users(db, page_request))


@router.get("/users/role/{role}", response_model=ApiResponse[PageResponse[UserResponse]])
def get_users_by_role(
    role: Role,
    page_request: PageRequest = Depends(sorted_page_params),
    db: Session = Depends(get_db)
):
    """Пользователи с заданной ролью"""
    return ApiResponse.ok(user_service.get_users_by_role(db, role, page_request))


@router.get("/users/{user_id}", response_model=ApiResponse[UserResponse])
def get_user(user_id: str, db: Session = Depends(get_db)):
    """Пользователь по id"""
    return ApiResponse.ok(user_service.get_user_by_id(db, user_id))


@router.put("/users/{user_id}/deactivate", response_model=ApiResponse[UserResponse])
def deactivate_user(
    user_id: str,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Деактивация пользователя"""
    logger.info(f"Admin {admin.id} deactivating user: {user_id}")
    user = user_service.deactivate_user(db, user_id)
    return ApiResponse.ok(user, "User deactivated successfully")


@router.put("/users/{user_id}/activate", response_model=ApiResponse[UserResponse])
def activate_user(
    user_id: str,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Активация пользователя"""
    logger.info(f"Admin {admin.id} activating user: {user_id}")
    user = user_service.activate_user(db, user_id)
    return ApiResponse.ok(user, "User activated successfully")
