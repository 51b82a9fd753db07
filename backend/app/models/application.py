"""
Application Model - A freelancer's bid on a job

Status Flow:
    PENDING → ACCEPTED | REJECTED

A freelancer may hold at most one application per job; the
(job_id, freelancer_id) unique constraint is what serializes concurrent
duplicate submissions.
"""

from enum import Enum

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from app.database import Base, utc_now
import uuid


class ApplicationStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


# Statuses a client may decide an application into
DECISION_STATUSES = (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED)


class Application(Base):
    """
    Job application entity.

    Attributes:
        seq: Insertion sequence (internal row key, breaks created_at ties)
        id: Public UUID identifier
        job_id: Job applied to (jobs.id)
        freelancer_id: Applicant (users.id)
        proposal: Cover text
        estimated_duration: Estimated days of work (> 0)
        bid_amount: Bid price (> 0)
        status: PENDING, ACCEPTED or REJECTED

    Relationships:
        job: Owning job, loaded with the application
        freelancer: Applicant user, loaded with the application
    """

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "freelancer_id", name="uq_applications_job_freelancer"),
        CheckConstraint("estimated_duration > 0", name="ck_applications_duration_positive"),
        CheckConstraint("bid_amount > 0", name="ck_applications_bid_positive"),
        CheckConstraint(
            "status IN ('PENDING', 'ACCEPTED', 'REJECTED')",
            name="ck_applications_status",
        ),
    )

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True, index=True, default=lambda: str(uuid.uuid4()))
    job_id = Column(String, ForeignKey("jobs.id"), nullable=False, index=True)
    freelancer_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    proposal = Column(Text, nullable=False)
    estimated_duration = Column(Integer, nullable=False)
    bid_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now, index=True)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    job = relationship("Job", lazy="selectin")
    freelancer = relationship("User", lazy="selectin")
