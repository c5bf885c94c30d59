"""
Запросы к вакансиям: списки активных, поиск по строке и составной фильтр.

Все списки считают общее количество и страницу по одному и тому же фильтру.
"""
from typing import List, Optional, Tuple
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload
from jobportal.models.job import Job, JobSkill
from jobportal.utils.pagination import PageRequest, paginate, resolve_sort
from jobportal.utils.text_processing import LIKE_ESCAPE_CHAR, contains_pattern

SORT_FIELDS = {
    "createdAt": Job.created_at,
    "updatedAt": Job.updated_at,
    "title": Job.title,
    "location": Job.location,
    "experienceRequired": Job.experience_required,
    "salaryMin": Job.salary_min,
    "salaryMax": Job.salary_max,
    "employmentType": Job.employment_type,
}


def _base_query(db: Session):
    return db.query(Job).options(selectinload(Job.poster))


def _active_query(db: Session):
    return _base_query(db).filter(Job.is_active.is_(True))


def _ilike(column, term: str):
    return column.ilike(contains_pattern(term), escape=LIKE_ESCAPE_CHAR)


def get_by_id(db: Session, job_id: str) -> Optional[Job]:
    return _base_query(db).filter(Job.id == job_id).first()


def find_active(db: Session, page_request: PageRequest) -> Tuple[List[Job], int]:
    order_by = resolve_sort(SORT_FIELDS, page_request)
    return paginate(_active_query(db), page_request, order_by, Job.id)


def search(db: Session, term: str, page_request: PageRequest) -> Tuple[List[Job], int]:
    """
    Активные вакансии, где term входит в title/description/location без учета
    регистра, либо term точно (с учетом регистра) совпадает с одним из навыков
    """
    query = _active_query(db).filter(
        or_(
            _ilike(Job.title, term),
            _ilike(Job.description, term),
            _ilike(Job.location, term),
            Job.skills_rel.any(JobSkill.name == term),
        )
    )
    return paginate(query, page_request, Job.created_at.desc(), Job.id.desc())


def find_by_filters(
    db: Session,
    title: Optional[str],
    location: Optional[str],
    skills: Optional[List[str]],
    experience_required: Optional[int],
    page_request: PageRequest,
) -> Tuple[List[Job], int]:
    """Все заданные фильтры объединяются через AND; пустые фильтры пропускаются"""
    query = _active_query(db)

    if title:
        query = query.filter(_ilike(Job.title, title))

    if location:
        query = query.filter(_ilike(Job.location, location))

    if skills:
        # Достаточно пересечения хотя бы по одному навыку
        query = query.filter(Job.skills_rel.any(JobSkill.name.in_(skills)))

    if experience_required is not None:
        query = query.filter(Job.experience_required <= experience_required)

    return paginate(query, page_request, Job.created_at.desc(), Job.id.desc())


def find_active_by_poster(db: Session, poster_id: str, page_request: PageRequest) -> Tuple[List[Job], int]:
    query = _active_query(db).filter(Job.posted_by == poster_id)
    return paginate(query, page_request, Job.created_at.desc(), Job.id.desc())
