"""
Сервис пользователей: выдача профилей и управление активностью (для администратора)
"""
import logging
from sqlalchemy.orm import Session
from jobportal.core.exceptions import NotFoundError
from jobportal.models.enums import Role
from jobportal.models.user import User
from jobportal.repositories import user_repository
from jobportal.schemas.common import PageResponse
from jobportal.schemas.user import UserResponse
from jobportal.utils.dates import utcnow
from jobportal.utils.pagination import PageRequest

logger = logging.getLogger(__name__)


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def get_user_entity(db: Session, user_id: str) -> User:
    user = user_repository.get_by_id(db, user_id)
    if user is None:
        raise NotFoundError(f"User not found with id: {user_id}")
    return user


def get_user_by_id(db: Session, user_id: str) -> UserResponse:
    logger.debug(f"Fetching user by ID: {user_id}")
    return to_response(get_user_entity(db, user_id))


def get_user_by_username(db: Session, username: str) -> UserResponse:
    logger.debug(f"Fetching user by username: {username}")
    user = user_repository.get_by_username(db, username)
    if user is None:
        raise NotFoundError(f"User not found with username: {username}")
    return to_response(user)


def get_all_users(db: Session, page_request: PageRequest) -> PageResponse[UserResponse]:
    logger.debug(f"Fetching all users - page: {page_request.page}, size: {page_request.size}")
    users, total = user_repository.find_all(db, page_request)
    return PageResponse[UserResponse].of(
        [to_response(user) for user in users],
        page_request.page,
        page_request.size,
        total,
    )


def get_users_by_role(db: Session, role: Role, page_request: PageRequest) -> PageResponse[UserResponse]:
    logger.debug(f"Fetching users by role: {role.value}")
    users, total = user_repository.find_by_role(db, role, page_request)
    return PageResponse[UserResponse].of(
        [to_response(user) for user in users],
        page_request.page,
        page_request.size,
        total,
    )


def _set_active(db: Session, user_id: str, is_active: bool) -> UserResponse:
    user = get_user_entity(db, user_id)
    user.is_active = is_active
    user.updated_at = utcnow()
    db.commit()
    db.refresh(user)
    return to_response(user)


def deactivate_user(db: Session, user_id: str) -> UserResponse:
    logger.info(f"Deactivating user: {user_id}")
    response = _set_active(db, user_id, False)
    logger.info(f"User deactivated successfully: {user_id}")
    return response


def activate_user(db: Session, user_id: str) -> UserResponse:
    logger.info(f"Activating user: {user_id}")
    response = _set_active(db, user_id, True)
    logger.info(f"User activated successfully: {user_id}")
    return response
