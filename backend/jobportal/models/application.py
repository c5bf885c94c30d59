from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
import uuid
from jobportal.core.database import Base
from jobportal.models.enums import ApplicationStatus
from jobportal.utils.dates import utcnow


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        # Не более одного отклика кандидата на вакансию
        UniqueConstraint("candidate_id", "job_id", name="uq_applications_candidate_job"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=ApplicationStatus.APPLIED.value, index=True)
    resume = Column(Text, nullable=False)
    cover_letter = Column(Text)
    applied_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    reviewed_at = Column(DateTime(timezone=True))
    notes = Column(Text)  # Заметки рекрутера

    # Relationships
    candidate = relationship("User", back_populates="applications")
    job = relationship("Job", back_populates="applications")
