import math
from datetime import datetime
from typing import Annotated, Generic, List, Optional, TypeVar
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from jobportal.utils.dates import utcnow

T = TypeVar("T")


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# Строка, которая не может быть пустой или состоять из пробелов
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    """Базовая схема: поля в snake_case, JSON в camelCase"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Обертка для всех ответов API"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    timestamp: datetime = Field(default_factory=utcnow)

    @classmethod
    def ok(cls, data=None, message: Optional[str] = None) -> "ApiResponse":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data=None) -> "ApiResponse":
        return cls(success=False, message=message, data=data)


class PageResponse(CamelModel, Generic[T]):
    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    last: bool

    @classmethod
    def of(cls, content: list, page: int, size: int, total_elements: int) -> "PageResponse":
        total_pages = math.ceil(total_elements / size) if size > 0 else 0
        return cls(
            content=content,
            page=page,
            size=size,
            total_elements=total_elements,
            total_pages=total_pages,
            last=page >= total_pages - 1,
        )
