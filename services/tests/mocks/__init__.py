"""Test doubles shared across service test suites."""

from services.tests.mocks.quote_client import FakeQuoteClient

__all__ = [
    "FakeQuoteClient",
]
