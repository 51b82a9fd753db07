"""
Application Service - Job application lifecycle

Owns every write to an application and the one write this service makes to a
job: assigning the freelancer when their application is accepted.

Rules:
    create  - job exists, job is OPEN, caller is not the job's client,
              caller has not applied yet (checked in that order)
    decide  - only the job's client may accept or reject
    edit    - only the applicant may edit proposal / duration / bid

Accepting is a compound mutation. The application status update and the job
assignment run in one transaction, and the job update is conditional on the
job still being OPEN:

    UPDATE jobs SET freelancer_id = :applicant, status = 'IN_PROGRESS'
    WHERE id = :job_id AND status = 'OPEN'

If no row matches, another accept already won and the whole transaction is
rolled back, so a job never ends up with two accepted applications.

Usage:
    async with async_session() as session:
        service = ApplicationService(session)
        application = await service.create_application(
            caller_id, job_id, proposal="...", estimated_duration=14, bid_amount=500
        )
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import utc_now
from app.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    PartialFailureError,
    UnauthenticatedError,
)
from app.middleware.metrics import (
    record_accept_conflict,
    record_application_created,
    record_application_decision,
    record_compound_mutation_failure,
)
from app.models import Application, ApplicationStatus, Job, JobStatus
from app.models.application import DECISION_STATUSES
from app.services.pagination import Page, paginate

logger = logging.getLogger(__name__)

# Fields an applicant may change after submitting
UPDATABLE_FIELDS = ("proposal", "estimated_duration", "bid_amount")


@dataclass(frozen=True)
class ApplicationFilters:
    """
    Optional constraints for application listings.

    A field left as None (or empty) does not constrain the result.
    """

    job_id: Optional[str] = None
    freelancer_id: Optional[str] = None
    status: Optional[ApplicationStatus] = None

    def clauses(self) -> list:
        clauses = []
        if self.job_id:
            clauses.append(Application.job_id == self.job_id)
        if self.freelancer_id:
            clauses.append(Application.freelancer_id == self.freelancer_id)
        if self.status:
            clauses.append(Application.status == ApplicationStatus(self.status).value)
        return clauses


class ApplicationService:
    """
    Lifecycle engine for job applications.

    Errors are raised as app.errors.MarketplaceError subclasses; nothing is
    retried here.

    Attributes:
        session: AsyncSession for database operations
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _require_caller(caller_id: Optional[str]) -> str:
        if not caller_id:
            raise UnauthenticatedError()
        return caller_id

    async def _find(self, application_id: str) -> Optional[Application]:
        # populate_existing so job and freelancer load even for instances already in the session
        result = await self.session.execute(
            select(Application)
            .where(Application.id == application_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def _find_for(self, job_id: str, freelancer_id: str) -> Optional[Application]:
        result = await self.session.execute(
            select(Application).where(
                Application.job_id == job_id,
                Application.freelancer_id == freelancer_id,
            )
        )
        return result.scalar_one_or_none()

    # ==================== Create ====================

    async def create_application(
        self,
        caller_id: Optional[str],
        job_id: str,
        proposal: str,
        estimated_duration: int,
        bid_amount: float,
    ) -> Application:
        """
        Submit an application to an open job.

        Args:
            caller_id: Authenticated applicant
            job_id: Job being applied to
            proposal: Cover text
            estimated_duration: Estimated days of work
            bid_amount: Bid price

        Returns:
            The new PENDING application with its applicant loaded

        Raises:
            UnauthenticatedError: no caller
            NotFoundError: job does not exist
            InvalidStateError: job is not OPEN
            ForbiddenError: caller owns the job
            ConflictError: caller already applied to the job
        """
        caller_id = self._require_caller(caller_id)

        result = await self.session.execute(select(Job).where(Job.id == job_id))
        job = result.scalar_one_or_none()
        if job is None:
            raise NotFoundError("Job not found.")
        if job.status != JobStatus.OPEN.value:
            raise InvalidStateError("Job is not accepting applications.")
        if job.client_id == caller_id:
            raise ForbiddenError("Cannot apply to your own job.")
        if await self._find_for(job_id, caller_id) is not None:
            raise ConflictError("You have already applied to this job.")

        application = Application(
            job_id=job_id,
            freelancer_id=caller_id,
            proposal=proposal,
            estimated_duration=estimated_duration,
            bid_amount=bid_amount,
            status=ApplicationStatus.PENDING.value,
        )
        self.session.add(application)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            # A concurrent submission for the same pair won the unique constraint
            if await self._find_for(job_id, caller_id) is not None:
                raise ConflictError("You have already applied to this job.")
            raise

        record_application_created()
        logger.info(f"Application {application.id} submitted to job {job_id} by {caller_id}")

        return await self._find(application.id)

    # ==================== Read ====================

    async def get_application(self, application_id: str) -> Application:
        application = await self._find(application_id)
        if application is None:
            raise NotFoundError("Application not found.")
        return application

    async def list_applications(
        self,
        filters: ApplicationFilters,
        page: int,
        limit: int,
    ) -> Page[Application]:
        """
        List applications matching all present filters.

        Newest first; applications created at the same instant keep their
        insertion order. ``page`` and ``limit`` are validated upstream.
        """
        return await paginate(
            self.session,
            Application,
            filters.clauses(),
            [Application.created_at.desc(), Application.seq.asc()],
            page,
            limit,
        )

    async def list_applications_for_job(
        self,
        job_id: str,
        page: int,
        limit: int,
        status: Optional[ApplicationStatus] = None,
    ) -> Page[Application]:
        return await self.list_applications(
            ApplicationFilters(job_id=job_id, status=status), page, limit
        )

    # ==================== Decide ====================

    async def set_application_status(
        self,
        caller_id: Optional[str],
        application_id: str,
        new_status: ApplicationStatus,
    ) -> Application:
        """
        Accept or reject an application as the job's client.

        Accepting also assigns the applicant to the job and moves the job to
        IN_PROGRESS, atomically with the status change. Re-deciding an already
        decided application is permitted. Accepting the application the job is
        already assigned to returns it unchanged.

        Raises:
            UnauthenticatedError: no caller
            NotFoundError: application does not exist
            ForbiddenError: caller is not the job's client
            ConflictError: accepting, but the job is no longer OPEN and is not
                assigned to this applicant
            PartialFailureError: the store failed during the accept transaction
        """
        caller_id = self._require_caller(caller_id)
        new_status = ApplicationStatus(new_status)
        if new_status not in DECISION_STATUSES:
            raise ValueError(f"Cannot set application status to {new_status.value}")

        application = await self._find(application_id)
        if application is None:
            raise NotFoundError("Application not found.")
        if application.job.client_id != caller_id:
            raise ForbiddenError("Not authorized.")

        job_id = application.job_id
        freelancer_id = application.freelancer_id
        accepting = new_status == ApplicationStatus.ACCEPTED

        if (
            accepting
            and application.status == ApplicationStatus.ACCEPTED.value
            and application.job.freelancer_id == freelancer_id
        ):
            logger.info(f"Application {application_id} already accepted; nothing to do")
            return application

        application.status = new_status.value
        try:
            if accepting and not await self._assign_job(job_id, freelancer_id):
                await self.session.rollback()
                record_accept_conflict()
                logger.warning(
                    f"Accept of application {application_id} rolled back: "
                    f"job {job_id} is no longer open"
                )
                raise ConflictError("Job is no longer accepting applications.")
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            if not accepting:
                raise
            record_compound_mutation_failure()
            logger.error(
                f"Accept of application {application_id} on job {job_id} failed "
                f"and was rolled back: {e}"
            )
            raise PartialFailureError(
                "Could not accept application; no changes were applied."
            ) from e

        record_application_decision(new_status.value)
        if accepting:
            logger.info(f"Application {application_id} accepted; job {job_id} assigned to {freelancer_id}")
        else:
            logger.info(f"Application {application_id} rejected by {caller_id}")

        return application

    async def _assign_job(self, job_id: str, freelancer_id: str) -> bool:
        """Assign an OPEN job to a freelancer. Returns False if the job is not OPEN."""
        result = await self.session.execute(
            update(Job)
            .where(Job.id == job_id, Job.status == JobStatus.OPEN.value)
            .values(
                freelancer_id=freelancer_id,
                status=JobStatus.IN_PROGRESS.value,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount == 1

    # ==================== Edit ====================

    async def update_application(
        self,
        caller_id: Optional[str],
        application_id: str,
        patch: Dict[str, Any],
    ) -> Application:
        """
        Edit the content of an application as its applicant.

        Only proposal, estimated_duration and bid_amount are applied; keys that
        are missing or None are left untouched. There is no status guard.
        """
        caller_id = self._require_caller(caller_id)

        application = await self._find(application_id)
        if application is None:
            raise NotFoundError("Application not found.")
        if application.freelancer_id != caller_id:
            raise ForbiddenError("Not authorized to update this application.")

        changes = {
            field: value
            for field, value in patch.items()
            if field in UPDATABLE_FIELDS and value is not None
        }
        for field, value in changes.items():
            setattr(application, field, value)

        await self.session.commit()
        logger.info(f"Application {application_id} updated fields {sorted(changes)}")

        return application
