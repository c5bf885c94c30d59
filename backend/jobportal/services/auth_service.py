"""
Регистрация и вход пользователей, выпуск JWT токена
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from jobportal.core.exceptions import ConflictError, UnauthorizedError
from jobportal.core.security import create_access_token, get_password_hash, verify_password
from jobportal.models.user import User
from jobportal.repositories import user_repository
from jobportal.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from jobportal.utils.dates import utcnow

logger = logging.getLogger(__name__)

# Одно сообщение для всех причин отказа, чтобы не раскрывать наличие аккаунта
INVALID_CREDENTIALS = "Invalid credentials"


def _auth_response(user: User) -> AuthResponse:
    token = create_access_token(user.id, user.username, user.role)
    return AuthResponse(
        token=token,
        id=user.id,
        username=user.username,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role,
    )


def register(db: Session, request: RegisterRequest) -> AuthResponse:
    """Регистрация нового пользователя"""
    logger.info(f"Registering new user with email: {request.email}")

    if user_repository.exists_by_email(db, request.email):
        raise ConflictError("Email already exists")

    if user_repository.exists_by_username(db, request.username):
        raise ConflictError("Username already exists")

    now = utcnow()
    user = User(
        email=request.email,
        username=request.username,
        password_hash=get_password_hash(request.password),
        first_name=request.first_name,
        last_name=request.last_name,
        role=request.role.value,
        is_active=True,
        created_at=now,
        updated_at=now,
    )

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Параллельная регистрация с тем же email/username
        db.rollback()
        logger.warning(f"Concurrent registration rejected for: {request.email}")
        raise ConflictError("Email or username already exists")
    db.refresh(user)

    logger.info(f"User registered successfully with ID: {user.id}")
    return _auth_response(user)


def authenticate(db: Session, username_or_email: str, password: str) -> User:
    """Проверка учетных данных; любая причина отказа дает одинаковую ошибку"""
    user = user_repository.get_by_email_or_username(db, username_or_email)

    if user is None:
        logger.warning(f"Login failed, unknown user: {username_or_email}")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.warning(f"Invalid password attempt for user: {user.username}")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not user.is_active:
        logger.warning(f"Login attempt for deactivated user: {user.username}")
        raise UnauthorizedError(INVALID_CREDENTIALS)

    return user


def login(db: Session, request: LoginRequest) -> AuthResponse:
    """Вход по email или username"""
    logger.info(f"Login attempt for: {request.username_or_email}")
    user = authenticate(db, request.username_or_email, request.password)
    logger.info(f"User logged in successfully: {user.username}")
    return _auth_response(user)
