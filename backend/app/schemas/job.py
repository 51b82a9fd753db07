from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.models import JobStatus


class JobSummary(BaseModel):
    id: str
    title: str
    status: JobStatus

    class Config:
        from_attributes = True


class JobResponse(JobSummary):
    client_id: str
    freelancer_id: Optional[str] = None
    description: str
    budget: Optional[float] = None
    created_at: datetime
    updated_at: datetime


class JobListResponse(BaseModel):
    data: list[JobResponse]
    total: int
    page: int
    total_pages: int
