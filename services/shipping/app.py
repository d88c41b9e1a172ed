"""
Shipping service.

Exposes ``POST /get-quote`` (prices a cart through the quote service) and
``POST /ship-order`` (accepts an order and returns a tracking id), plus the
standard health endpoints and Prometheus metrics at ``/metrics``.
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from services.common.app_factory import create_service_app
from services.common.config import load_config_from_env
from services.common.health import HealthManager
from services.common.health_endpoints import HealthEndpoints
from services.common.logging import get_logger

from .config import ShippingConfig
from .exceptions import (
    InvalidOrderPayload,
    MalformedResponse,
    ShippingError,
    UpstreamUnavailable,
)
from .models import (
    ErrorResponse,
    QuoteRequest,
    QuoteResponse,
    ShipOrderRequest,
    ShipOrderResponse,
)
from .money import money_from_decimal
from .quote_client import HttpQuoteClient, QuoteSource
from .tracking import create_tracking_id

SERVICE_NAME = "shipping"
SERVICE_VERSION = "1.0.0"

logger = get_logger(__name__, service_name=SERVICE_NAME)

_QUOTE_REQUESTS = Counter(
    "shipping_quote_requests_total",
    "Shipping quote requests by outcome",
    ["status"],
)
_QUOTE_DURATION = Histogram(
    "shipping_quote_seconds",
    "Latency of the quote service call",
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, float("inf")),
)
_ORDERS_SHIPPED = Counter(
    "shipping_orders_shipped_total",
    "Orders accepted for shipment",
)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def get_quote_source(request: Request) -> QuoteSource:
    """Return the quote source wired into the app at startup."""
    quote_source: QuoteSource | None = getattr(request.app.state, "quote_client", None)
    if quote_source is None:
        raise UpstreamUnavailable("quote service is not configured")
    return quote_source


async def _shipping_error_handler(request: Request, exc: ShippingError) -> JSONResponse:
    logger.warning(
        "shipping.request_failed",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.error_code,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in exc.errors()
    ]
    return await _shipping_error_handler(
        request, InvalidOrderPayload("request body is invalid", errors=errors)
    )


def create_app(
    config: ShippingConfig | None = None,
    *,
    quote_client: QuoteSource | None = None,
) -> FastAPI:
    """Build the shipping service app.

    Args:
        config: Service configuration. Loaded from the environment at startup
                when omitted and no ``quote_client`` is given.
        quote_client: Quote source to use instead of an ``HttpQuoteClient``
                      built from ``config``.
    """
    health_manager = HealthManager(SERVICE_NAME)
    owned_clients: list[HttpQuoteClient] = []

    async def _startup() -> None:
        if app.state.quote_client is None:
            cfg = config or load_config_from_env(ShippingConfig)
            client = HttpQuoteClient(cfg.quote_addr, timeout=cfg.quote_timeout)
            owned_clients.append(client)
            app.state.quote_client = client
            app.state.cfg = cfg
        health_manager.mark_startup_complete()

    async def _shutdown() -> None:
        while owned_clients:
            await owned_clients.pop().close()
        app.state.quote_client = quote_client

    app = create_service_app(
        SERVICE_NAME,
        SERVICE_VERSION,
        title="Shipping Service",
        startup_callback=_startup,
        shutdown_callback=_shutdown,
        health_manager=health_manager,
    )
    app.state.quote_client = quote_client
    app.state.health_manager = health_manager

    health_manager.register_component(
        "quote_client", lambda: app.state.quote_client is not None
    )
    app.include_router(HealthEndpoints(SERVICE_NAME, health_manager).router)

    app.add_exception_handler(ShippingError, _shipping_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    @app.post(
        "/get-quote", response_model=QuoteResponse, responses=_ERROR_RESPONSES
    )
    async def get_quote(
        payload: QuoteRequest | None = None,
        quote_source: QuoteSource = Depends(get_quote_source),
    ) -> QuoteResponse:
        """Price a cart through the quote service."""
        number_of_items = payload.number_of_items if payload else 0
        start_time = time.perf_counter()
        try:
            price = await quote_source.get_quote(number_of_items)
            try:
                cost = money_from_decimal(price)
            except ValueError as exc:
                raise MalformedResponse(str(exc), price=str(price)) from exc
        except ShippingError as exc:
            _QUOTE_REQUESTS.labels(status=exc.error_code).inc()
            raise
        finally:
            _QUOTE_DURATION.observe(time.perf_counter() - start_time)
        _QUOTE_REQUESTS.labels(status="success").inc()

        logger.info(
            "shipping.quote_served",
            number_of_items=number_of_items,
            price=str(price),
        )
        return QuoteResponse(cost_usd=cost)

    @app.post(
        "/ship-order", response_model=ShipOrderResponse, responses=_ERROR_RESPONSES
    )
    async def ship_order(payload: ShipOrderRequest) -> ShipOrderResponse:
        """Accept an order for shipment and return its tracking id."""
        tracking_id = create_tracking_id()
        _ORDERS_SHIPPED.inc()
        logger.info(
            "shipping.order_shipped",
            tracking_id=tracking_id,
            items=len(payload.items),
            country=payload.address.country,
        )
        return ShipOrderResponse(tracking_id=tracking_id)

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()
