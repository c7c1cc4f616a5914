"""Structured logging setup for stannum on top of ``structlog``.

The library itself only ever calls ``structlog.get_logger(__name__)``; nothing
is configured at import time. Applications opt in with ``configure_logging``
or ``setup_logging`` (which reads the ``[observability]`` config section).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from typing import IO, Any, Final

import structlog
from structlog.contextvars import bound_contextvars

_DEFAULT_LEVEL: Final[str] = "WARNING"


class LogFormat(StrEnum):
    """Renderer used for emitted log lines."""

    CONSOLE = "console"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Configuration for structlog output."""

    level: int | str = _DEFAULT_LEVEL
    log_format: LogFormat | str = LogFormat.CONSOLE
    stream: IO[str] | None = None


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog processors, level filtering and renderer."""

    resolved = config if config is not None else LoggingConfig()
    level = _parse_log_level(resolved.level)
    log_format = _parse_log_format(resolved.log_format)

    renderer: structlog.typing.Processor
    if log_format is LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(
            file=resolved.stream if resolved.stream is not None else sys.stderr
        ),
        cache_logger_on_first_use=False,
    )


def setup_logging(
    observability_config: Mapping[str, object] | None = None,
    *,
    stream: IO[str] | None = None,
) -> LoggingConfig:
    """Configure logging from an ``[observability]`` config mapping.

    Parameters
    ----------
    observability_config:
        Mapping compatible with the ``[observability]`` section of ``stannum.toml``.
    stream:
        Optional output stream; defaults to ``sys.stderr``.
    """

    cfg = dict(observability_config or {})
    raw_level = cfg.get("log_level", _DEFAULT_LEVEL)
    level: int | str = raw_level if isinstance(raw_level, (int, str)) else _DEFAULT_LEVEL
    raw_format = cfg.get("log_format", LogFormat.CONSOLE)
    log_format = raw_format if isinstance(raw_format, str) else LogFormat.CONSOLE

    config = LoggingConfig(level=level, log_format=log_format, stream=stream)
    configure_logging(config)
    return config


@contextmanager
def evaluation_scope(**fields: Any) -> Iterator[None]:
    """Temporarily bind context fields for log events emitted in scope."""

    for key in fields:
        _validate_context_key(key)
    with bound_contextvars(**fields):
        yield


def _parse_log_format(value: LogFormat | str) -> LogFormat:
    if isinstance(value, LogFormat):
        return value
    if not isinstance(value, str):
        raise ValueError(f"log_format must be a string, got {type(value).__name__}")
    try:
        return LogFormat(value.strip().lower())
    except ValueError:
        raise ValueError(f"unsupported log format {value!r}") from None


def _parse_log_level(value: int | str) -> int:
    if isinstance(value, int):
        return value

    if not isinstance(value, str):
        raise ValueError(f"level must be int or str, got {type(value).__name__}")

    normalized = value.strip().upper()
    parsed = logging.getLevelName(normalized)
    if isinstance(parsed, int):
        return parsed

    raise ValueError(f"unsupported logging level {value!r}")


def _validate_context_key(value: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"context key must be a string, got {type(value).__name__}")
    normalized = value.strip()
    if not normalized:
        raise ValueError("context key must not be empty")
    return normalized


__all__ = [
    "LogFormat",
    "LoggingConfig",
    "configure_logging",
    "evaluation_scope",
    "setup_logging",
]
