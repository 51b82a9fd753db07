from app.schemas.job import JobSummary, JobResponse, JobListResponse
from app.schemas.user import ApplicantSummary, ApplicantDetail
from app.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationStatusUpdate,
    ApplicationResponse,
    ApplicationWithApplicant,
    ApplicationWithJob,
    JobApplicationResponse,
    JobApplicationListResponse,
    ApplicationListResponse,
)

__all__ = [
    "JobSummary",
    "JobResponse",
    "JobListResponse",
    "ApplicantSummary",
    "ApplicantDetail",
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationStatusUpdate",
    "ApplicationResponse",
    "ApplicationWithApplicant",
    "ApplicationWithJob",
    "JobApplicationResponse",
    "JobApplicationListResponse",
    "ApplicationListResponse",
]
