"""Health Probe - liveness endpoint.

Invariants:
    - GET /health always returns transport 200 with a success envelope while
      the process is up
    - Reported version comes from the application's settings
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import Response

from service_template.api.response_writer import envelope_response
from service_template.core.envelope import Envelope, success
from service_template.schemas.health import HealthStatus

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

HEALTHY = "healthy"


@router.get(
    "/health",
    response_model=Envelope[HealthStatus],
    summary="Health check endpoint",
    description="Returns the health status of the service",
)
async def health_check(request: Request) -> Response:
    settings = request.app.state.settings
    payload = HealthStatus(status=HEALTHY, version=settings.app_version)
    return envelope_response(status.HTTP_200_OK, success(payload))
