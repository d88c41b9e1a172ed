"""Configuration system for shipping services.

This module provides:
- Type-safe configuration classes declared with field definitions
- Environment variable loading with validation
"""

from .base import (
    BaseConfig,
    ConfigError,
    FieldDefinition,
    LoggingConfig,
    RequiredFieldError,
    ValidationError,
)
from .loader import load_config_from_env
from .validator import (
    create_validator,
    validate_http_url,
    validate_timeout_value,
    validate_url,
)


__all__ = [
    # Base classes
    "BaseConfig",
    "ConfigError",
    "ValidationError",
    "RequiredFieldError",
    "FieldDefinition",
    # Core configurations
    "LoggingConfig",
    # Utilities
    "load_config_from_env",
    # Validators
    "validate_url",
    "validate_http_url",
    "validate_timeout_value",
    "create_validator",
]
