"""
Утилиты для обработки поисковых строк
"""
from typing import Iterable, List, Optional

LIKE_ESCAPE_CHAR = "\\"


def escape_like(term: str) -> str:
    """
    Экранирует спецсимволы LIKE (%, _ и сам символ экранирования),
    чтобы пользовательская строка искалась буквально
    """
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", LIKE_ESCAPE_CHAR + "%")
        .replace("_", LIKE_ESCAPE_CHAR + "_")
    )


def contains_pattern(term: str) -> str:
    """Шаблон LIKE для поиска подстроки"""
    return f"%{escape_like(term)}%"


def clean_optional_text(text: Optional[str]) -> Optional[str]:
    """Пустые строки и строки из пробелов считаются отсутствующим фильтром"""
    if text is None:
        return None
    text = text.strip()
    return text or None


def clean_skills(skills: Optional[Iterable[str]]) -> List[str]:
    """Убирает пробелы по краям и пустые значения из списка навыков"""
    if not skills:
        return []
    return [skill.strip() for skill in skills if skill and skill.strip()]
