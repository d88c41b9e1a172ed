"""Helpers for instantiating configuration classes from the environment."""

from __future__ import annotations

from typing import Any, TypeVar

from services.common.logging import get_logger

from .base import BaseConfig, ConfigError

T = TypeVar("T", bound=BaseConfig)

logger = get_logger(__name__)


def load_config_from_env(config_class: type[T], **overrides: Any) -> T:
    """Load configuration from environment variables.

    Args:
        config_class: Configuration class to instantiate
        **overrides: Values used where the environment does not set a field

    Returns:
        Configured instance

    Raises:
        ConfigError: if a field is missing or invalid
    """
    try:
        return config_class(**overrides)
    except ConfigError as exc:
        logger.error(
            "config.load_failed", config_class=config_class.__name__, error=str(exc)
        )
        raise
