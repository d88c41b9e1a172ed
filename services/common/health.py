"""Health state tracking for service readiness."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .logging import get_logger


class HealthStatus(Enum):
    """Service health status levels."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass(slots=True)
class HealthCheck:
    """Health check result."""

    status: HealthStatus
    ready: bool  # Can serve requests
    details: dict[str, Any]


class HealthManager:
    """Tracks startup progress, startup failures and component checks."""

    def __init__(self, service_name: str) -> None:
        self._service_name = service_name
        self._components: dict[str, Callable[[], bool]] = {}
        self._startup_complete = False
        self._startup_time = time.time()
        self._startup_failure: dict[str, Any] | None = None
        self._logger = get_logger(__name__, service_name=service_name)

    @property
    def service_name(self) -> str:
        return self._service_name

    def register_component(self, name: str, check: Callable[[], bool]) -> None:
        """Register a synchronous readiness check for a local component."""
        self._components[name] = check
        self._logger.debug("health.component_registered", component=name)

    def mark_startup_complete(self) -> None:
        self._startup_complete = True
        self._logger.info(
            "health.startup_complete",
            startup_seconds=round(time.time() - self._startup_time, 3),
        )

    def record_startup_failure(
        self, error: Exception, component: str, *, is_critical: bool = True
    ) -> None:
        """Record a startup failure; critical failures keep the service not ready."""
        self._startup_failure = {
            "component": component,
            "error": str(error),
            "error_type": type(error).__name__,
            "is_critical": is_critical,
            "timestamp": time.time(),
        }
        self._logger.error(
            "health.startup_failure",
            component=component,
            error=str(error),
            is_critical=is_critical,
        )

    def get_startup_failure(self) -> dict[str, Any] | None:
        return self._startup_failure

    def get_health_status(self) -> HealthCheck:
        """Evaluate readiness from startup state and registered components."""
        components: dict[str, bool] = {}
        for name, check in self._components.items():
            try:
                components[name] = bool(check())
            except Exception as exc:
                self._logger.warning(
                    "health.component_check_failed", component=name, error=str(exc)
                )
                components[name] = False

        failure = self._startup_failure
        if failure is not None and failure["is_critical"]:
            status = HealthStatus.UNHEALTHY
        elif not self._startup_complete:
            status = HealthStatus.UNHEALTHY
        elif not all(components.values()):
            status = HealthStatus.DEGRADED
        else:
            status = HealthStatus.HEALTHY

        return HealthCheck(
            status=status,
            ready=status is HealthStatus.HEALTHY,
            details={
                "startup_complete": self._startup_complete,
                "components": components,
                "startup_failure": failure,
            },
        )
