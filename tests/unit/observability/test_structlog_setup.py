"""
stannum — unit tests for observability logging

File: tests/unit/observability/test_structlog_setup.py

Purpose
- Validate structlog configuration, level filtering, renderers and context binding.

What this test file should cover
- JSON line validity and level filtering.
- ``setup_logging`` driven by the ``[observability]`` config section.
- Context fields bound by ``evaluation_scope`` reach library log events.
"""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from stannum.constraints import NothingConstraint
from stannum.contracts import BaseContract
from stannum.observability import (
    LogFormat,
    LoggingConfig,
    configure_logging,
    evaluation_scope,
    setup_logging,
)


def _json_lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_json_renderer_emits_one_object_per_event() -> None:
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="INFO", log_format=LogFormat.JSON, stream=stream))
    logger = structlog.get_logger("stannum.tests")

    logger.info("first_event", answer=42)
    logger.debug("filtered_event")

    lines = _json_lines(stream)
    assert len(lines) == 1
    assert lines[0]["event"] == "first_event"
    assert lines[0]["answer"] == 42
    assert lines[0]["level"] == "info"
    assert isinstance(lines[0]["timestamp"], str)


def test_console_renderer_writes_plain_text() -> None:
    stream = io.StringIO()
    configure_logging(LoggingConfig(level=logging.WARNING, stream=stream))

    structlog.get_logger("stannum.tests").warning("console_event", key="value")

    output = stream.getvalue()
    assert "console_event" in output
    assert "key=value" in output
    assert "\x1b[" not in output


def test_setup_logging_reads_observability_section() -> None:
    stream = io.StringIO()

    config = setup_logging({"log_level": "debug", "log_format": "json"}, stream=stream)
    contract = BaseContract().add_constraint(NothingConstraint(), sanity=True)
    with evaluation_scope(request_id="req-1"):
        contract.matches(None)
    contract.matches(None)

    assert config.level == "debug"
    assert config.log_format == "json"
    lines = _json_lines(stream)
    assert [line["event"] for line in lines] == ["contract_sanity_short_circuit"] * 2
    assert lines[0]["request_id"] == "req-1"
    assert lines[0]["contract"] == "BaseContract"
    assert "request_id" not in lines[1]


def test_setup_logging_defaults_to_warning_console() -> None:
    config = setup_logging(None)

    assert config.level == "WARNING"
    assert config.log_format == LogFormat.CONSOLE


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (LoggingConfig(level="LOUD"), "unsupported logging level"),
        (LoggingConfig(log_format="xml"), "unsupported log format"),
        (LoggingConfig(level=1.5), "level must be int or str"),  # type: ignore[arg-type]
    ],
)
def test_invalid_logging_config_raises(config: LoggingConfig, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        configure_logging(config)


def test_evaluation_scope_rejects_blank_keys() -> None:
    with pytest.raises(ValueError, match="context key must not be empty"):
        with evaluation_scope(**{" ": 1}):
            pass
