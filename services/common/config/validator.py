"""Validators used by configuration field definitions."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from services.common.logging import get_logger

logger = get_logger(__name__)

_LABEL = r"[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?"

_URL_PATTERN = re.compile(
    r"^https?://"  # http:// or https://
    rf"{_LABEL}(?:\.{_LABEL})*"  # hostname, service name or IPv4
    r"(?::\d{1,5})?"  # optional port
    r"(?:/\S*)?$",
    re.IGNORECASE,
)


def validate_url(url: str) -> bool:
    """Return True for http(s) URLs with a host and optional port/path.

    Single-label hosts such as ``quote`` or ``localhost`` are accepted, since
    services address each other by container name.
    """
    if not url:
        return False
    return bool(_URL_PATTERN.match(url))


def validate_timeout(timeout: float) -> bool:
    return 0.1 <= timeout <= 300.0


def create_validator(
    validator_func: Callable[[Any], bool], error_msg: str
) -> Callable[[Any], bool]:
    """Wrap a validation function so that exceptions count as failures."""

    def validator(value: Any) -> bool:
        try:
            return validator_func(value)
        except Exception as exc:
            logger.warning(
                "config.validator_error",
                validator=validator_func.__name__,
                value=value,
                error=str(exc),
                message=error_msg,
            )
            return False

    return validator


validate_http_url = create_validator(validate_url, "Invalid HTTP URL")
validate_timeout_value = create_validator(validate_timeout, "Invalid timeout value")
