"""
Предикаты доступа: чистые функции над (пользователь, ресурс).
"""
from jobportal.models.application import Application
from jobportal.models.enums import Role
from jobportal.models.job import Job
from jobportal.models.user import User


def is_admin(user: User) -> bool:
    return user.role == Role.ADMIN


def is_candidate(user: User) -> bool:
    return user.role == Role.CANDIDATE


def is_recruiter_or_admin(user: User) -> bool:
    return user.role in (Role.RECRUITER, Role.ADMIN)


def owns_job(user: User, job: Job) -> bool:
    return user.id == job.posted_by


def can_manage_job(user: User, job: Job) -> bool:
    return is_admin(user) or owns_job(user, job)


def can_review_application(user: User, application: Application) -> bool:
    """Администратор или рекрутер, разместивший вакансию отклика"""
    return is_admin(user) or user.id == application.job.posted_by
