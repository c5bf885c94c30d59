from typing import Optional
from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from jobportal.core.config import settings
from jobportal.core.database import get_db
from jobportal.core.exceptions import ForbiddenError, UnauthorizedError
from jobportal.core.permissions import is_admin, is_candidate, is_recruiter_or_admin
from jobportal.core.security import decode_access_token
from jobportal.models.user import User
from jobportal.repositories import user_repository
from jobportal.utils.pagination import PageRequest

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Получение текущего пользователя из JWT токена"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication required")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedError("Invalid token payload")

    user = user_repository.get_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("Invalid token")

    # Токен деактивированного пользователя больше не принимается
    if not user.is_active:
        raise UnauthorizedError("Account is deactivated")

    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not is_admin(current_user):
        raise ForbiddenError("Admin access required")
    return current_user


def get_current_recruiter(current_user: User = Depends(get_current_user)) -> User:
    if not is_recruiter_or_admin(current_user):
        raise ForbiddenError("Recruiter or admin access required")
    return current_user


def get_current_candidate(current_user: User = Depends(get_current_user)) -> User:
    if not is_candidate(current_user):
        raise ForbiddenError("Only candidates can perform this action")
    return current_user


def page_params(
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PageRequest:
    """Параметры страницы для списков с фиксированной сортировкой"""
    return PageRequest(page=page, size=size)


def sorted_page_params(
    page: int = Query(0, ge=0),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    sortBy: str = Query("createdAt"),
    sortDir: str = Query("desc"),
) -> PageRequest:
    """Параметры страницы с выбором поля и направления сортировки"""
    return PageRequest(page=page, size=size, sort_by=sortBy, sort_dir=sortDir)
