from contextlib import asynccontextmanager
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from jobportal.api.router import api_router
from jobportal.core.config import settings
from jobportal.core.database import Base, engine
from jobportal.core.exceptions import AppError
from jobportal.schemas.common import ApiResponse

# Регистрируем модели в метаданных
import jobportal.models  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Создание таблиц при старте"""
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="API для портала вакансий: кандидаты, рекрутеры и администраторы",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS настройки
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS_LIST,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _envelope(status_code: int, message: str, data=None, headers=None) -> JSONResponse:
    body = ApiResponse.error(message, data).model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _envelope(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Ошибки разбора запроса отдаются как 400 с описанием полей"""
    errors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors[field or "request"] = error.get("msg")
    return _envelope(status.HTTP_400_BAD_REQUEST, "Validation failed", jsonable_encoder(errors))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    error_id = uuid.uuid4().hex
    logger.exception(f"Unexpected error [{error_id}] on {request.method} {request.url.path}")
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
        headers={"X-Error-Id": error_id},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def root():
    return {"message": settings.APP_NAME, "version": "1.0.0"}


@app.get("/health")
def health():
    return {"status": "healthy"}
