"""
Noteful Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Load balancers use this to route away from instances that can't reach
       the store.
How:   Runs SELECT 1 against the app's engine and reports the result.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from noteful import __version__
from noteful.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request):
    """
    Check that the service can reach its database.

    SELECT 1 is essentially free, so probes every few seconds are fine.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        async with request.app.state.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    report = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall != "healthy":
        return JSONResponse(status_code=503, content=report.model_dump())
    return report
