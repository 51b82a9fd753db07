from fastapi import APIRouter
from app.api import applications, jobs

api_router = APIRouter(prefix="/api")
api_router.include_router(applications.router, tags=["applications"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
