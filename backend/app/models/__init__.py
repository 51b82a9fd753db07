from app.models.user import User
from app.models.job import Job, JobStatus
from app.models.application import Application, ApplicationStatus

__all__ = [
    "User",
    "Job",
    "JobStatus",
    "Application",
    "ApplicationStatus",
]
