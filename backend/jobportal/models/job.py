from sqlalchemy import Column, String, Boolean, Integer, Text, DateTime, ForeignKey, Numeric, Index
from sqlalchemy.orm import relationship
import uuid
from jobportal.core.database import Base
from jobportal.utils.dates import utcnow


class JobSkill(Base):
    """Навык вакансии; порядок хранится в position, сравнение идет как по множеству"""
    __tablename__ = "job_skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(String(36), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False, index=True)


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        # Основной запрос списков: активные вакансии, новые сверху
        Index("ix_jobs_active_created", "is_active", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(500), nullable=False, index=True)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False, index=True)
    experience_required = Column(Integer)  # лет опыта
    salary_min = Column(Numeric(12, 2))
    salary_max = Column(Numeric(12, 2))
    employment_type = Column(String(20), nullable=False)  # FULL_TIME, PART_TIME, CONTRACT, REMOTE
    posted_by = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    poster = relationship("User", back_populates="jobs")
    skills_rel = relationship(
        "JobSkill",
        order_by=JobSkill.position,
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    applications = relationship("Application", back_populates="job")

    @property
    def skills(self) -> list:
        return [skill.name for skill in self.skills_rel]

    @skills.setter
    def skills(self, names) -> None:
        self.skills_rel = [
            JobSkill(position=position, name=name)
            for position, name in enumerate(names or [])
        ]
