"""Configuration for the shipping service."""

from __future__ import annotations

from services.common.config import (
    BaseConfig,
    FieldDefinition,
    validate_http_url,
    validate_timeout_value,
)


class ShippingConfig(BaseConfig):
    """Shipping service configuration.

    ``quote_addr`` is the base address of the pricing dependency; it is read
    once and injected into the quote client rather than looked up per call.
    """

    @classmethod
    def get_field_definitions(cls) -> list[FieldDefinition]:
        return [
            FieldDefinition(
                name="quote_addr",
                field_type=str,
                required=True,
                description="Base URL of the quote (pricing) service",
                env_var="QUOTE_ADDR",
                validator=validate_http_url,
            ),
            FieldDefinition(
                name="quote_timeout",
                field_type=float,
                default=5.0,
                description="Timeout in seconds for a single quote request",
                env_var="QUOTE_TIMEOUT",
                min_value=0.1,
                max_value=60.0,
                validator=validate_timeout_value,
            ),
            FieldDefinition(
                name="host",
                field_type=str,
                default="0.0.0.0",
                description="Interface the HTTP server binds to",
                env_var="SHIPPING_HOST",
            ),
            FieldDefinition(
                name="port",
                field_type=int,
                default=50050,
                description="Port the HTTP server listens on",
                env_var="SHIPPING_PORT",
                min_value=1,
                max_value=65535,
            ),
        ]
