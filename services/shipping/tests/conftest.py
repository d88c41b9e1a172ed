"""Test configuration for services.shipping module."""

from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from services.shipping.app import create_app
from services.tests.mocks import FakeQuoteClient


@pytest.fixture
def fake_quote_client() -> FakeQuoteClient:
    """Quote source that always prices at 5.99."""
    return FakeQuoteClient("5.99")


@pytest.fixture
def shipping_app(fake_quote_client: FakeQuoteClient) -> FastAPI:
    """Shipping app wired to the fake quote source."""
    return create_app(quote_client=fake_quote_client)


@pytest.fixture
def client(shipping_app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI test client with lifespan events run."""
    with TestClient(shipping_app) as test_client:
        yield test_client


@pytest.fixture
def address() -> dict[str, Any]:
    return {
        "street_address": "1600 Amphitheatre Parkway",
        "city": "Mountain View",
        "state": "CA",
        "country": "US",
        "zip_code": "94043",
    }


@pytest.fixture
def valid_order(address: dict[str, Any]) -> dict[str, Any]:
    """Order payload with two cart lines."""
    return {
        "items": [
            {"product_id": "OLJCESPC7Z", "quantity": 1},
            {"product_id": "66VCHSJNUP", "quantity": 3},
        ],
        "address": address,
    }


@pytest.fixture
def quote_request(address: dict[str, Any]) -> dict[str, Any]:
    return {"items": [{"product_id": "1", "quantity": 2}], "address": address}


@pytest.fixture
def quote_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport standing in for the quote service.

    ``handler`` receives each ``httpx.Request``; by default the transport
    answers every request with the body ``5.99``.
    """

    def build(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> httpx.MockTransport:
        def default_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="5.99")

        return httpx.MockTransport(handler or default_handler)

    return build
