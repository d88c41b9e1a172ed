"""Shared utilities for HTTP header propagation."""

from __future__ import annotations

from collections.abc import Mapping

from services.common.middleware import ObservabilityMiddleware, get_correlation_id


def inject_correlation_id(headers: Mapping[str, str] | None = None) -> dict[str, str]:
    """Inject correlation ID from context into headers if not present.

    Args:
        headers: Optional existing headers dict

    Returns:
        New headers dict with correlation ID added (if available in context)
    """
    result = dict(headers or {})
    header = ObservabilityMiddleware.CORRELATION_HEADER

    if header in result:
        return result

    correlation_id = get_correlation_id()
    if correlation_id:
        result[header] = correlation_id
    return result


__all__ = ["inject_correlation_id"]
