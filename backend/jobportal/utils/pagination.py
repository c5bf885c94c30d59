from dataclasses import dataclass
from typing import Dict, List, Tuple
from sqlalchemy.orm import Query
from jobportal.core.exceptions import InvalidError


@dataclass(frozen=True)
class PageRequest:
    """Параметры страницы: номер с нуля, размер, поле и направление сортировки"""
    page: int = 0
    size: int = 10
    sort_by: str = "createdAt"
    sort_dir: str = "desc"

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def descending(self) -> bool:
        return (self.sort_dir or "").lower() == "desc"


def resolve_sort(sort_fields: Dict[str, object], page_request: PageRequest):
    """Поле сортировки из API в выражение ORDER BY; неизвестное поле - ошибка запроса"""
    column = sort_fields.get(page_request.sort_by)
    if column is None:
        allowed = ", ".join(sorted(sort_fields))
        raise InvalidError(f"Cannot sort by '{page_request.sort_by}'. Allowed fields: {allowed}")
    return column.desc() if page_request.descending else column.asc()


def paginate(query: Query, page_request: PageRequest, *order_by) -> Tuple[List, int]:
    """Возвращает элементы страницы и общее количество по одному и тому же фильтру"""
    if page_request.page < 0:
        raise InvalidError("Page index must not be negative")
    if page_request.size < 1:
        raise InvalidError("Page size must be positive")

    total = query.order_by(None).count()
    items = (
        query.order_by(*order_by)
        .offset(page_request.offset)
        .limit(page_request.size)
        .all()
    )
    return items, total
