from typing import Optional, Dict
from datetime import datetime
from jobportal.models.enums import ApplicationStatus
from jobportal.schemas.common import CamelModel, NonBlankStr


class ApplicationRequest(CamelModel):
    job_id: NonBlankStr
    resume: NonBlankStr
    cover_letter: Optional[str] = None


class ApplicationStatusUpdateRequest(CamelModel):
    status: ApplicationStatus
    notes: Optional[str] = None


class ApplicationResponse(CamelModel):
    id: str
    candidate_id: str
    candidate_name: str
    job_id: str
    job_title: str
    status: ApplicationStatus
    resume: str
    cover_letter: Optional[str] = None
    applied_at: datetime
    reviewed_at: Optional[datetime] = None
    notes: Optional[str] = None


class ApplicationStatsResponse(CamelModel):
    job_id: str
    total: int
    by_status: Dict[ApplicationStatus, int]
