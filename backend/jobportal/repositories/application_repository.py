from typing import Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from jobportal.models.application import Application
from jobportal.models.enums import ApplicationStatus
from jobportal.utils.pagination import PageRequest, paginate


def _base_query(db: Session):
    # Кандидат и вакансия подгружаются вторым запросом для имени и заголовка в ответе
    return db.query(Application).options(
        selectinload(Application.candidate),
        selectinload(Application.job),
    )


def _newest_first():
    return Application.applied_at.desc(), Application.id.desc()


def get_by_id(db: Session, application_id: str) -> Optional[Application]:
    return _base_query(db).filter(Application.id == application_id).first()


def exists_by_candidate_and_job(db: Session, candidate_id: str, job_id: str) -> bool:
    return db.query(Application.id).filter(
        Application.candidate_id == candidate_id,
        Application.job_id == job_id
    ).first() is not None


def find_by_candidate(db: Session, candidate_id: str, page_request: PageRequest) -> Tuple[List[Application], int]:
    query = _base_query(db).filter(Application.candidate_id == candidate_id)
    return paginate(query, page_request, *_newest_first())


def find_by_job(db: Session, job_id: str, page_request: PageRequest) -> Tuple[List[Application], int]:
    query = _base_query(db).filter(Application.job_id == job_id)
    return paginate(query, page_request, *_newest_first())


def find_by_job_and_status(
    db: Session,
    job_id: str,
    status: ApplicationStatus,
    page_request: PageRequest
) -> Tuple[List[Application], int]:
    query = _base_query(db).filter(
        Application.job_id == job_id,
        Application.status == status.value
    )
    return paginate(query, page_request, *_newest_first())


def count_by_job_grouped_by_status(db: Session, job_id: str) -> Dict[str, int]:
    rows = db.query(Application.status, func.count(Application.id)).filter(
        Application.job_id == job_id
    ).group_by(Application.status).all()
    return {status: count for status, count in rows}
