"""
Middleware Package

Contains FastAPI middleware for:
- Prometheus metrics collection
- Performance monitoring
"""

from app.middleware.metrics import (
    PrometheusMiddleware,
    setup_metrics,
    REQUEST_LATENCY,
    REQUEST_COUNT,
    ACTIVE_REQUESTS,
    APPLICATIONS_CREATED,
    APPLICATION_DECISIONS,
)

__all__ = [
    "PrometheusMiddleware",
    "setup_metrics",
    "REQUEST_LATENCY",
    "REQUEST_COUNT",
    "ACTIVE_REQUESTS",
    "APPLICATIONS_CREATED",
    "APPLICATION_DECISIONS",
]
