"""Entrypoint for the shipping service."""

from __future__ import annotations

from services.common.config import LoggingConfig, load_config_from_env
from services.common.logging import configure_logging

from .config import ShippingConfig

_logging_config = LoggingConfig()

# Configure logging BEFORE importing the app so structured logging is in
# place before uvicorn initializes
configure_logging(
    _logging_config.level,
    json_logs=_logging_config.json_logs,
    service_name="shipping",
)


def main() -> None:
    """Run the shipping service under uvicorn."""
    import uvicorn

    from .app import create_app

    cfg = load_config_from_env(ShippingConfig)

    # log_config=None keeps uvicorn from replacing the structlog handlers
    uvicorn.run(
        create_app(cfg),
        host=cfg.host,
        port=cfg.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
