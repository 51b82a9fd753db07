"""
Job Model - SQLAlchemy ORM model for posted work items

Jobs are created by clients outside this service. The only transition this
service performs is OPEN -> IN_PROGRESS, as the side effect of a client
accepting an application.

Status Flow:
    OPEN → IN_PROGRESS → COMPLETED
    OPEN → CANCELLED
"""

from enum import Enum

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String, Text
from app.database import Base, utc_now
import uuid


class JobStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Job(Base):
    """
    Posted job owned by a client.

    Attributes:
        seq: Insertion sequence (internal row key, breaks created_at ties)
        id: Public UUID identifier
        client_id: Owning client (users.id)
        freelancer_id: Assigned freelancer, set only on acceptance
        title: Job title (max 200 chars)
        description: Full job description
        budget: Client budget
        status: Lifecycle status (indexed)
    """

    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint(
            "(freelancer_id IS NOT NULL) = (status IN ('IN_PROGRESS', 'COMPLETED'))",
            name="ck_jobs_freelancer_matches_status",
        ),
    )

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, unique=True, index=True, default=lambda: str(uuid.uuid4()))
    client_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    freelancer_id = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    budget = Column(Float, nullable=True)
    status = Column(String(20), nullable=False, default=JobStatus.OPEN.value, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)
