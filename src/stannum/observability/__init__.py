"""Public observability primitives: structlog configuration and context binding."""

from stannum.observability.logging import (
    LogFormat,
    LoggingConfig,
    configure_logging,
    evaluation_scope,
    setup_logging,
)

__all__ = [
    "LogFormat",
    "LoggingConfig",
    "configure_logging",
    "evaluation_scope",
    "setup_logging",
]
