"""
Prometheus Metrics Middleware

Provides request/response metrics for monitoring:
- HTTP request latency (p50, p95, p99)
- Request count by endpoint and status
- Active request gauge
- Application lifecycle counters (created, decided, rejected accepts,
  compound-mutation failures)

Usage:
    from app.middleware.metrics import setup_metrics

    # In main.py
    app = FastAPI()
    setup_metrics(app)

Metrics Endpoint:
    GET /metrics - Prometheus-format metrics
"""

import time
import logging
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    CONTENT_TYPE_LATEST,
    generate_latest,
    REGISTRY,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

logger = logging.getLogger(__name__)

# ==================== Prometheus Metrics ====================

# Request latency histogram with custom buckets for sub-second monitoring
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Request counter
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"]
)

# Active requests gauge
ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of active HTTP requests",
    ["method", "endpoint"]
)

# Lifecycle metrics
APPLICATIONS_CREATED = Counter(
    "applications_created_total",
    "Total applications submitted"
)

APPLICATION_DECISIONS = Counter(
    "application_decisions_total",
    "Application status decisions made by clients",
    ["status"]  # ACCEPTED, REJECTED
)

ACCEPT_CONFLICTS = Counter(
    "application_accept_conflicts_total",
    "Accepts rolled back because the job was no longer open"
)

COMPOUND_MUTATION_FAILURES = Counter(
    "application_compound_mutation_failures_total",
    "Store failures while applying the accept side effect"
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for Prometheus metrics collection.

    Records:
    - Request latency
    - Request count by status code
    - Active request count
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """Process request and record metrics."""
        # Get endpoint path (use route pattern for consistency)
        endpoint = self._get_endpoint(request)
        method = request.method

        # Skip metrics endpoint
        if endpoint == "/metrics":
            return await call_next(request)

        ACTIVE_REQUESTS.labels(method=method, endpoint=endpoint).inc()
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            status = str(response.status_code)
        except Exception as e:
            status = "500"
            logger.error(f"Request error: {e}")
            raise
        finally:
            duration = time.perf_counter() - start_time

            REQUEST_LATENCY.labels(
                method=method,
                endpoint=endpoint,
                status=status
            ).observe(duration)

            REQUEST_COUNT.labels(
                method=method,
                endpoint=endpoint,
                status=status
            ).inc()

            ACTIVE_REQUESTS.labels(
                method=method,
                endpoint=endpoint
            ).dec()

        return response

    def _get_endpoint(self, request: Request) -> str:
        """
        Get normalized endpoint path from request.

        Uses route pattern (e.g., /api/applications/{application_id}) instead
        of actual path to avoid high cardinality. Entries without a path
        template, such as included routers, are skipped.
        """
        for route in request.app.routes:
            if getattr(route, "path", None) is None:
                continue
            match, _ = route.matches(request.scope)
            if match == Match.FULL:
                return route.path

        return request.url.path


def metrics_endpoint(request: Request) -> Response:
    """
    Endpoint handler for Prometheus metrics scraping.

    Returns metrics in Prometheus text format.
    """
    return PlainTextResponse(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )


def setup_metrics(app: FastAPI) -> None:
    """
    Configure Prometheus metrics for FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(PrometheusMiddleware)
    app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    logger.info("Prometheus metrics configured")


# ==================== Helper Functions ====================

def record_application_created() -> None:
    """Record a newly submitted application."""
    APPLICATIONS_CREATED.inc()


def record_application_decision(status: str) -> None:
    """Record a client decision on an application."""
    APPLICATION_DECISIONS.labels(status=status).inc()


def record_accept_conflict() -> None:
    """Record an accept that lost to a job no longer open."""
    ACCEPT_CONFLICTS.inc()


def record_compound_mutation_failure() -> None:
    """Record a store failure during the accept side effect."""
    COMPOUND_MUTATION_FAILURES.inc()
