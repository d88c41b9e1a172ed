"""Factory for creating FastAPI apps with standardized observability setup."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from services.common.health import HealthManager
from services.common.logging import get_logger
from services.common.middleware import ObservabilityMiddleware

logger = get_logger(__name__)


async def _run_callback(
    callback: Callable[[], Any] | Callable[[], Awaitable[Any]],
) -> None:
    if asyncio.iscoroutinefunction(callback):
        await callback()
    else:
        callback()


def create_service_app(
    service_name: str,
    service_version: str = "1.0.0",
    title: str | None = None,
    *,
    startup_callback: Callable[[], Any] | Callable[[], Awaitable[Any]] | None = None,
    shutdown_callback: Callable[[], Any] | Callable[[], Awaitable[Any]] | None = None,
    health_manager: HealthManager | None = None,
) -> FastAPI:
    """Create a FastAPI app with a standard lifespan and observability middleware.

    Args:
        service_name: Name of the service
        service_version: Version of the service
        title: FastAPI app title (defaults to service_name)
        startup_callback: Optional sync or async callback for service startup
        shutdown_callback: Optional sync or async callback for service shutdown
        health_manager: Optional HealthManager; startup callback exceptions are
                        recorded in it as critical failures.

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> Any:  # noqa: ARG001
        try:
            if startup_callback:
                await _run_callback(startup_callback)
            logger.info(f"{service_name}.startup_complete")
        except Exception as exc:
            logger.error(f"{service_name}.startup_failed", error=str(exc))
            if health_manager is None:
                raise
            # HealthManager keeps /health/ready at 503 from here on
            health_manager.record_startup_failure(
                error=exc,
                component="startup_callback",
                is_critical=True,
            )

        yield

        if shutdown_callback:
            try:
                await _run_callback(shutdown_callback)
            except Exception as exc:
                logger.error(f"{service_name}.shutdown_failed", error=str(exc))

        logger.info(f"{service_name}.shutdown")

    app = FastAPI(
        title=title or service_name,
        version=service_version,
        lifespan=lifespan,
    )
    app.state.service_name = service_name
    app.add_middleware(ObservabilityMiddleware)

    return app


__all__ = ["create_service_app"]
