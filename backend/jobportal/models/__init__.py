from jobportal.models.enums import Role, ApplicationStatus
from jobportal.models.user import User
from jobportal.models.job import Job, JobSkill
from jobportal.models.application import Application

__all__ = [
    "Role",
    "ApplicationStatus",
    "User",
    "Job",
    "JobSkill",
    "Application",
]
