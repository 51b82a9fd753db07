from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

from app.models import ApplicationStatus
from app.schemas.job import JobSummary
from app.schemas.user import ApplicantDetail, ApplicantSummary


class ApplicationCreate(BaseModel):
    proposal: str = Field(..., min_length=1)
    estimated_duration: int = Field(..., gt=0, description="Estimated days of work")
    bid_amount: float = Field(..., gt=0)


class ApplicationUpdate(BaseModel):
    proposal: Optional[str] = Field(None, min_length=1)
    estimated_duration: Optional[int] = Field(None, gt=0)
    bid_amount: Optional[float] = Field(None, gt=0)


class ApplicationStatusUpdate(BaseModel):
    status: Literal["ACCEPTED", "REJECTED"]


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    freelancer_id: str
    proposal: str
    estimated_duration: int
    bid_amount: float
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ApplicationWithApplicant(ApplicationResponse):
    freelancer: Optional[ApplicantSummary] = None


class JobApplicationResponse(ApplicationResponse):
    """Entry of a per-job listing; carries the applicant's bio."""

    freelancer: Optional[ApplicantDetail] = None


class ApplicationWithJob(ApplicationWithApplicant):
    job: Optional[JobSummary] = None


class JobApplicationListResponse(BaseModel):
    data: list[JobApplicationResponse]
    total: int
    page: int
    total_pages: int


class ApplicationListResponse(BaseModel):
    data: list[ApplicationWithJob]
    total: int
    page: int
    total_pages: int
