from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session
from jobportal.models.enums import Role
from jobportal.models.user import User
from jobportal.utils.pagination import PageRequest, paginate, resolve_sort

SORT_FIELDS = {
    "createdAt": User.created_at,
    "updatedAt": User.updated_at,
    "username": User.username,
    "email": User.email,
    "firstName": User.first_name,
    "lastName": User.last_name,
    "role": User.role,
}


def get_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_by_email_or_username(db: Session, value: str) -> Optional[User]:
    """Логин может быть как email, так и username (с учетом регистра)"""
    return db.query(User).filter(
        or_(User.email == value, User.username == value)
    ).first()


def exists_by_email(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


def exists_by_username(db: Session, username: str) -> bool:
    return db.query(User.id).filter(User.username == username).first() is not None


def find_all(db: Session, page_request: PageRequest) -> Tuple[List[User], int]:
    order_by = resolve_sort(SORT_FIELDS, page_request)
    return paginate(db.query(User), page_request, order_by, User.id)


def find_by_role(db: Session, role: Role, page_request: PageRequest) -> Tuple[List[User], int]:
    order_by = resolve_sort(SORT_FIELDS, page_request)
    query = db.query(User).filter(User.role == role.value)
    return paginate(query, page_request, order_by, User.id)
