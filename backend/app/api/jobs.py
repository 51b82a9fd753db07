from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.database import get_db
from app.models import JobStatus
from app.schemas import JobResponse, JobListResponse
from app.auth import get_current_user_id
from app.config import get_settings
from app.services.jobs import JobFilters, JobService

settings = get_settings()
router = APIRouter()


@router.get("", response_model=JobListResponse)
async def list_jobs(
    status: Optional[JobStatus] = Query(None),
    client_id: Optional[str] = Query(None),
    freelancer_id: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: AsyncSession = Depends(get_db),
    _: str = Depends(get_current_user_id),
):
    filters = JobFilters(
        status=status,
        client_id=client_id,
        freelancer_id=freelancer_id,
        search=search,
    )
    result = await JobService(db).list_jobs(filters, page, limit)

    return JobListResponse(
        data=[JobResponse.model_validate(job) for job in result.items],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
    )


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: str,
    db: AsyncSession = Depends(get_db),
    _: str = Depends(get_current_user_id),
):
    job = await JobService(db).get_job(job_id)
    return JobResponse.model_validate(job)
