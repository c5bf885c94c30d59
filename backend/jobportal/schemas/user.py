from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from jobportal.models.enums import Role
from jobportal.schemas.common import CamelModel, NonBlankStr


class RegisterRequest(CamelModel):
    email: str = Field(max_length=255)
    username: NonBlankStr = Field(min_length=3, max_length=100)
    password: NonBlankStr = Field(min_length=6, max_length=128)
    first_name: NonBlankStr = Field(max_length=100)
    last_name: NonBlankStr = Field(max_length=100)
    role: Role

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        # Email хранится в том виде, в котором введен: вход сравнивает его с учетом регистра
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}")
        return v


class LoginRequest(CamelModel):
    username_or_email: NonBlankStr
    password: NonBlankStr


class UserResponse(CamelModel):
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    role: Role
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    token: str
    token_type: str = "Bearer"
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: Role
