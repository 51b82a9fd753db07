from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.database import get_db
from app.models import ApplicationStatus
from app.schemas import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationStatusUpdate,
    ApplicationWithApplicant,
    ApplicationWithJob,
    ApplicationListResponse,
    JobApplicationResponse,
    JobApplicationListResponse,
)
from app.auth import get_current_user_id
from app.config import get_settings
from app.services.applications import ApplicationFilters, ApplicationService

settings = get_settings()
router = APIRouter()


@router.post(
    "/jobs/{job_id}/apply",
    response_model=ApplicationWithApplicant,
    status_code=status.HTTP_201_CREATED,
)
async def apply_to_job(
    job_id: str,
    body: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    application = await ApplicationService(db).create_application(
        user_id,
        job_id,
        proposal=body.proposal,
        estimated_duration=body.estimated_duration,
        bid_amount=body.bid_amount,
    )
    return ApplicationWithApplicant.model_validate(application)


@router.get("/jobs/{job_id}/applications", response_model=JobApplicationListResponse)
async def list_job_applications(
    job_id: str,
    status: Optional[ApplicationStatus] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: AsyncSession = Depends(get_db),
    _: str = Depends(get_current_user_id),
):
    result = await ApplicationService(db).list_applications_for_job(job_id, page, limit, status)

    return JobApplicationListResponse(
        data=[JobApplicationResponse.model_validate(a) for a in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get("/applications", response_model=ApplicationListResponse)
async def list_applications(
    job_id: Optional[str] = Query(None),
    freelancer_id: Optional[str] = Query(None),
    status: Optional[ApplicationStatus] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: AsyncSession = Depends(get_db),
    _: str = Depends(get_current_user_id),
):
    filters = ApplicationFilters(job_id=job_id, freelancer_id=freelancer_id, status=status)
    result = await ApplicationService(db).list_applications(filters, page, limit)

    return ApplicationListResponse(
        data=[ApplicationWithJob.model_validate(a) for a in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get("/applications/{application_id}", response_model=ApplicationWithJob)
async def get_application(
    application_id: str,
    db: AsyncSession = Depends(get_db),
    _: str = Depends(get_current_user_id),
):
    application = await ApplicationService(db).get_application(application_id)
    return ApplicationWithJob.model_validate(application)


@router.put("/applications/{application_id}/status", response_model=ApplicationWithJob)
async def set_application_status(
    application_id: str,
    body: ApplicationStatusUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    application = await ApplicationService(db).set_application_status(
        user_id, application_id, ApplicationStatus(body.status)
    )
    return ApplicationWithJob.model_validate(application)


@router.put("/applications/{application_id}", response_model=ApplicationWithApplicant)
async def update_application(
    application_id: str,
    update: ApplicationUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    application = await ApplicationService(db).update_application(
        user_id, application_id, update.model_dump(exclude_unset=True)
    )
    return ApplicationWithApplicant.model_validate(application)
