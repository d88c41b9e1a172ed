"""HTTP client for the quote (pricing) service.

The shipping service asks the quote service for the price of shipping a
number of items. The quote service answers with a plain numeric body such
as ``5.99``.
"""

from __future__ import annotations

import time
from decimal import Decimal, InvalidOperation
from typing import Protocol, runtime_checkable

import httpx

from services.common.http_headers import inject_correlation_id
from services.common.logging import get_logger

from .exceptions import MalformedResponse, UpstreamUnavailable
from .money import MAX_UNITS

logger = get_logger(__name__, service_name="shipping")

QUOTE_PATH = "/getquote"


@runtime_checkable
class QuoteSource(Protocol):
    """Anything that can price a shipment."""

    async def get_quote(self, number_of_items: int = 0) -> Decimal: ...


def parse_quote(body: str) -> Decimal:
    """Parse a quote service body into a price.

    Raises:
        MalformedResponse: if the body is not a finite, non-negative number
            that fits in Money
    """
    token = body.strip()
    try:
        price = Decimal(token)
    except InvalidOperation as exc:
        raise MalformedResponse(
            f"quote service returned a non-numeric body: {token[:64]!r}"
        ) from exc

    if not price.is_finite() or price < 0:
        raise MalformedResponse(f"quote service returned an invalid price: {token!r}")
    if price >= MAX_UNITS + 1:
        raise MalformedResponse(
            f"quote service returned an out-of-range price: {token[:64]!r}"
        )
    return price


class HttpQuoteClient:
    """Fetches quotes from the quote service over HTTP.

    Each call issues exactly one request; there is no retry and no caching.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the quote client.

        Args:
            base_url: Base URL of the quote service, e.g. ``http://quote:8090``
            timeout: Request timeout in seconds
            client: Optional pre-built ``httpx.AsyncClient`` (tests pass one
                    backed by ``httpx.MockTransport``). An injected client is
                    not closed by ``close()``.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

        logger.info("quote_client.initialized", base_url=self.base_url, timeout=timeout)

    @property
    def url(self) -> str:
        return f"{self.base_url}{QUOTE_PATH}"

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
            logger.info("quote_client.closed")

    async def get_quote(self, number_of_items: int = 0) -> Decimal:
        """Request a quote for ``number_of_items`` items.

        Raises:
            UpstreamUnavailable: connection failure, timeout or non-2xx status
            MalformedResponse: the body is not a price
        """
        start_time = time.perf_counter()
        logger.debug(
            "quote_client.request_initiated",
            url=self.url,
            number_of_items=number_of_items,
        )

        try:
            response = await self._client.post(
                self.url,
                json={"numberOfItems": number_of_items},
                headers=inject_correlation_id(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as exc:
            logger.error(
                "quote_client.upstream_unavailable",
                url=self.url,
                error="timeout",
                timeout=self.timeout,
            )
            raise UpstreamUnavailable(
                f"quote service at {self.base_url} timed out after {self.timeout}s"
            ) from exc
        except httpx.TransportError as exc:
            logger.error(
                "quote_client.upstream_unavailable",
                url=self.url,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise UpstreamUnavailable(
                f"quote service at {self.base_url} is unreachable"
            ) from exc

        if not response.is_success:
            logger.error(
                "quote_client.upstream_unavailable",
                url=self.url,
                status_code=response.status_code,
            )
            raise UpstreamUnavailable(
                f"quote service answered with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            price = parse_quote(response.text)
        except MalformedResponse as exc:
            logger.error("quote_client.malformed_response", url=self.url, error=str(exc))
            raise

        logger.info(
            "quote_client.quote_received",
            price=str(price),
            number_of_items=number_of_items,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return price


__all__ = ["HttpQuoteClient", "QuoteSource", "parse_quote", "QUOTE_PATH"]
