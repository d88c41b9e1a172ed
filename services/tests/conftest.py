"""Global test configuration and fixtures for shipping services."""

from collections.abc import Generator
import os
from pathlib import Path
import random

import pytest
import structlog

from services.tests.mocks import FakeQuoteClient

REPO_ROOT = Path(__file__).resolve().parents[2]
CONTRACTS_DIR = REPO_ROOT / "contracts"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up the test environment for deterministic testing."""
    os.environ["TZ"] = "UTC"
    random.seed(42)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Restore environment variables after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def shipping_pact_path() -> Path:
    """Path of the Frontend -> ShippingService contract."""
    return CONTRACTS_DIR / "Frontend-ShippingService.json"


@pytest.fixture
def fake_quote_client() -> FakeQuoteClient:
    """Quote source that always prices at 5.99."""
    return FakeQuoteClient("5.99")
