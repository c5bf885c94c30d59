from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Job Portal API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database - можно указать либо DATABASE_URL, либо компоненты
    DATABASE_URL: str = ""  # Если указан, будет использован напрямую
    POSTGRES_USER: str = "jobportal"
    POSTGRES_PASSWORD: str = "jobportal"
    POSTGRES_DB: str = "jobportal"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432

    def get_database_url(self) -> str:
        """Получает DATABASE_URL - либо из переменной, либо формирует из компонентов"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # JWT
    SECRET_KEY: str = "jobportal-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Стоимость bcrypt (в тестах понижается)
    BCRYPT_ROUNDS: int = 12

    # Пагинация
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        """Преобразует строку CORS_ORIGINS в список"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Начальный администратор (используется только scripts/init_db.py)
    ADMIN_EMAIL: str = ""
    ADMIN_USERNAME: str = ""
    ADMIN_PASSWORD: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
