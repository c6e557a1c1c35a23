"""Health Schemas - payload of the liveness endpoint."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Liveness payload."""
    status: str
    version: str
