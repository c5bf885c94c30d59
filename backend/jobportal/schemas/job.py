from decimal import Decimal
from pydantic import Field, field_validator
from typing import Annotated, Optional, List
from datetime import datetime
from jobportal.schemas.common import CamelModel, NonBlankStr


class JobCreateRequest(CamelModel):
    title: NonBlankStr = Field(max_length=500)
    description: NonBlankStr
    location: NonBlankStr = Field(max_length=255)
    skills: List[Annotated[str, Field(max_length=255)]] = Field(default_factory=list)
    experience_required: Optional[int] = Field(default=None, ge=0)
    salary_min: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    salary_max: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    # FULL_TIME, PART_TIME, CONTRACT, REMOTE - проверяется только наличие
    employment_type: NonBlankStr = Field(max_length=20)

    @field_validator("skills")
    @classmethod
    def strip_skills(cls, v: List[str]) -> List[str]:
        return [skill.strip() for skill in v if skill and skill.strip()]


class JobResponse(CamelModel):
    id: str
    title: str
    description: str
    location: str
    skills: List[str]
    experience_required: Optional[int] = None
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None
    employment_type: str
    posted_by: str
    posted_by_name: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
