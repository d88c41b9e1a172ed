"""
Common health endpoints for services.

Provides a ``HealthEndpoints`` router exposing ``/health/live`` and
``/health/ready`` backed by a ``HealthManager``.
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from services.common.health import HealthManager


class HealthEndpoints:
    """Standardized health endpoints for all services."""

    def __init__(self, service_name: str, health_manager: HealthManager) -> None:
        self.service_name = service_name
        self.health_manager = health_manager
        self.router = APIRouter()
        self._register_endpoints()

    def _register_endpoints(self) -> None:
        self.router.add_api_route("/health/live", self.health_live, methods=["GET"])
        self.router.add_api_route("/health/ready", self.health_ready, methods=["GET"])

    async def health_live(self) -> dict[str, Any]:
        """Liveness probe: the process is up and serving HTTP."""
        return {"status": "alive", "service": self.service_name}

    async def health_ready(self) -> JSONResponse:
        """Readiness probe: 200 when ready, 503 otherwise."""
        health = self.health_manager.get_health_status()
        if health.ready:
            status = "ready"
        elif health.details.get("startup_complete"):
            status = "degraded"
        else:
            status = "not_ready"

        return JSONResponse(
            status_code=200 if health.ready else 503,
            content={
                "status": status,
                "service": self.service_name,
                "components": health.details.get("components", {}),
                "health_details": {
                    "startup_complete": health.details.get("startup_complete"),
                    "startup_failure": health.details.get("startup_failure"),
                },
            },
        )
