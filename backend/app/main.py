"""
Marketplace API - Main Application Entry Point

This module initializes the FastAPI application with:
- Database schema initialization
- CORS middleware for frontend communication
- Prometheus metrics
- Lifecycle error handlers
- API router registration

Architecture:
    FastAPI App
    ├── Lifespan Management (startup)
    ├── CORS Middleware (settings.frontend_url)
    ├── Prometheus Middleware + /metrics
    └── API Router (/api)
        ├── /jobs/{job_id}/apply, /jobs/{job_id}/applications
        ├── /applications - Listing, lookup, decisions, edits
        └── /jobs - Job listing and lookup
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import get_settings
from app.database import init_db
from app.api import api_router
from app.api.errors import register_error_handlers
from app.middleware import setup_metrics

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Startup:
        1. Initialize database tables

    Yields:
        Control to the application during its runtime
    """
    await init_db()
    logger.info("Marketplace API started")
    yield


app = FastAPI(
    title="Marketplace API",
    description="Job postings, freelancer applications and acceptance workflows",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_metrics(app)
register_error_handlers(app)
app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "marketplace-api"}
