"""
Job Service - Read access to posted jobs

Jobs are created and completed outside this service; here they are only
looked up and listed. The single write this service performs on a job
(assignment on acceptance) lives in ApplicationService.

Usage:
    service = JobService(session)
    page = await service.list_jobs(JobFilters(status=JobStatus.OPEN), page=1, limit=20)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models import Job, JobStatus
from app.services.pagination import Page, paginate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobFilters:
    """
    Optional constraints for job listings.

    A field left as None (or empty) does not constrain the result.
    """

    status: Optional[JobStatus] = None
    client_id: Optional[str] = None
    freelancer_id: Optional[str] = None
    search: Optional[str] = None

    def clauses(self) -> list:
        clauses = []
        if self.status:
            clauses.append(Job.status == JobStatus(self.status).value)
        if self.client_id:
            clauses.append(Job.client_id == self.client_id)
        if self.freelancer_id:
            clauses.append(Job.freelancer_id == self.freelancer_id)
        if self.search:
            clauses.append(Job.title.ilike(f"%{self.search}%"))
        return clauses


class JobService:
    """
    Service for job lookups and listings.

    Attributes:
        session: AsyncSession for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_job(self, job_id: str) -> Job:
        result = await self.session.execute(select(Job).where(Job.id == job_id))
        job = result.scalar_one_or_none()
        if job is None:
            raise NotFoundError("Job not found.")
        return job

    async def list_jobs(self, filters: JobFilters, page: int, limit: int) -> Page[Job]:
        """List jobs newest first, ties in insertion order."""
        return await paginate(
            self.session,
            Job,
            filters.clauses(),
            [Job.created_at.desc(), Job.seq.asc()],
            page,
            limit,
        )
