from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from jobportal.api.dependencies import get_current_user
from jobportal.core.database import get_db
from jobportal.models.user import User
from jobportal.schemas.common import ApiResponse
from jobportal.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from jobportal.services import auth_service, user_service

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """Регистрация нового пользователя"""
    logger.info(f"Registration request received for email: {request.email}")
    response = auth_service.register(db, request)
    return ApiResponse.ok(response, "User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthResponse])
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """Вход пользователя и получение JWT токена"""
    logger.info(f"Login request received for: {request.username_or_email}")
    response = auth_service.login(db, request)
    return ApiResponse.ok(response, "Login successful")


@router.get("/me", response_model=ApiResponse[UserResponse])
def get_me(current_user: User = Depends(get_current_user)):
    """Получение информации о текущем пользователе"""
    return ApiResponse.ok(user_service.to_response(current_user))
