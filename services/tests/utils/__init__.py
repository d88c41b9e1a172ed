"""Test utilities for service testing."""

from .service_helpers import ServiceRunner, run_service


__all__ = [
    "ServiceRunner",
    "run_service",
]
