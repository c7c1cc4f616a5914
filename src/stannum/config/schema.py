"""
stannum — configuration schema and validation.

Purpose
- Define configuration defaults and the validation rules for ``stannum.toml``.

What should be included in this file
- Schema versioning and migration guidance.
- Validation rules for sections, types and enums, expressed as stannum
  contracts so configuration is validated by the library it configures.
- Deterministic deep-merge helpers.

Functional requirements
- Validate config payloads and return structured issues (field path + message).
- Reject unknown sections and unknown keys.

Non-functional requirements
- Keep rules deterministic and easy to audit.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Final, Literal, TypedDict, cast

from stannum.constants import CONFIG_SCHEMA_VERSION, DEFAULT_LOCALE
from stannum.constraints import (
    ArrayType,
    BlockConstraint,
    EnumConstraint,
    FormatConstraint,
)
from stannum.contracts import HashContract
from stannum.errors import Errors
from stannum.messages import MessageStrategy

ConfigSchemaVersion: Final[int] = CONFIG_SCHEMA_VERSION
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: Final[tuple[str, ...]] = ("console", "json")

_LOCALE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\A[a-z]{2,3}(?:[_-][A-Za-z0-9]+)*\Z")

# Config paths holding lists of paths normalized relative to the config file.
PATH_LIST_FIELDS: Final[tuple[tuple[str, ...], ...]] = (("messages", "catalog_paths"),)


class MetaConfig(TypedDict):
    schema_version: int


class MessagesConfig(TypedDict):
    locale: str
    catalog_paths: list[str]


class ObservabilityConfig(TypedDict):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_format: Literal["console", "json"]


class StannumConfig(TypedDict):
    meta: MetaConfig
    messages: MessagesConfig
    observability: ObservabilityConfig


DEFAULT_CONFIG: Final[StannumConfig] = {
    "meta": {"schema_version": CONFIG_SCHEMA_VERSION},
    "messages": {"locale": DEFAULT_LOCALE, "catalog_paths": []},
    "observability": {"log_level": "WARNING", "log_format": "console"},
}


@dataclass(frozen=True, slots=True)
class ConfigValidationIssue:
    """Single structured validation failure."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ConfigValidationResult:
    """Validation result with normalized config when no issues were found."""

    config: dict[str, Any] | None
    issues: tuple[ConfigValidationIssue, ...]

    @property
    def is_valid(self) -> bool:
        return self.config is not None and not self.issues


class ConfigValidationError(ValueError):
    """Raised when strict config validation fails."""

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = tuple(issues)
        if not self.issues:
            rendered = "unknown validation failure"
        else:
            rendered = "\n".join(f"- {item.path}: {item.message}" for item in self.issues)
        super().__init__(f"invalid config:\n{rendered}")


def _is_strict_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@lru_cache(maxsize=1)
def config_contract() -> HashContract:
    """Contract describing a complete (defaults-merged) configuration."""

    meta = HashContract(key_type=str).add_key_constraint(
        "schema_version",
        BlockConstraint(_is_strict_int, message="must be an integer"),
    )
    messages = (
        HashContract(key_type=str)
        .add_key_constraint(
            "locale",
            FormatConstraint(_LOCALE_PATTERN, message="must be a locale name such as 'en'"),
        )
        .add_key_constraint("catalog_paths", ArrayType(item_type=str))
    )
    observability = (
        HashContract(key_type=str)
        .add_key_constraint("log_level", EnumConstraint(*LOG_LEVELS))
        .add_key_constraint("log_format", EnumConstraint(*LOG_FORMATS))
    )
    return (
        HashContract(key_type=str)
        .add_key_constraint("meta", meta)
        .add_key_constraint("messages", messages)
        .add_key_constraint("observability", observability)
    )


def default_config() -> StannumConfig:
    """Return a deep copy of the built-in defaults."""

    return copy.deepcopy(DEFAULT_CONFIG)


def migration_guidance(found_version: int) -> str:
    """Return migration guidance for a schema version mismatch."""

    if found_version < ConfigSchemaVersion:
        return (
            f"schema version {found_version} is older than supported {ConfigSchemaVersion}; "
            "upgrade stannum.toml to the current schema"
        )
    if found_version > ConfigSchemaVersion:
        return (
            f"schema version {found_version} is newer than supported {ConfigSchemaVersion}; "
            "upgrade the stannum library"
        )
    return "schema version is current"


def merge_config(base: Mapping[str, object], overlay: Mapping[str, object]) -> dict[str, Any]:
    """Deterministically deep-merge ``overlay`` onto ``base``."""

    merged = _deep_copy_mapping(base)
    _merge_into(merged, overlay)
    return merged


def issues_from_errors(
    errors: Errors, *, strategy: MessageStrategy | None = None
) -> tuple[ConfigValidationIssue, ...]:
    """Render an ``Errors`` tree as dotted-path validation issues."""

    rendered = errors.with_messages(strategy)
    issues: list[ConfigValidationIssue] = []
    for record in rendered:
        path = ".".join(str(key) for key in record.path) or "<root>"
        message = record.message or record.type
        listed = record.data.get("keys", record.data.get("values"))
        if isinstance(listed, list) and listed:
            message = f"{message}: {', '.join(str(item) for item in listed)}"
        issues.append(ConfigValidationIssue(path=path, message=message))
    return tuple(issues)


def validate_config(config: Mapping[str, object] | object) -> ConfigValidationResult:
    """Validate a complete config and return structured issues."""

    matches, errors = config_contract().match(config)
    if not matches:
        return ConfigValidationResult(config=None, issues=issues_from_errors(errors))

    normalized = _deep_copy_mapping(cast(Mapping[str, object], config))
    version = normalized["meta"]["schema_version"]
    if version != ConfigSchemaVersion:
        issue = ConfigValidationIssue("meta.schema_version", migration_guidance(version))
        return ConfigValidationResult(config=None, issues=(issue,))

    return ConfigValidationResult(config=normalized, issues=())


def assert_valid_config(config: Mapping[str, object] | object) -> dict[str, Any]:
    """Validate config and raise ``ConfigValidationError`` on failure."""

    result = validate_config(config)
    if result.config is None:
        raise ConfigValidationError(result.issues)
    return result.config


def _merge_into(target: dict[str, Any], overlay: Mapping[str, object]) -> None:
    for key in sorted(overlay):
        value = overlay[key]
        if isinstance(value, Mapping):
            existing = target.get(key)
            if isinstance(existing, dict):
                _merge_into(existing, value)
            elif isinstance(existing, Mapping):
                nested = _deep_copy_mapping(existing)
                _merge_into(nested, value)
                target[key] = nested
            else:
                nested_new: dict[str, Any] = {}
                _merge_into(nested_new, value)
                target[key] = nested_new
        else:
            target[key] = _deep_copy_value(value)


def _deep_copy_mapping(value: Mapping[str, object]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in sorted(value, key=str):
        out[key] = _deep_copy_value(value[key])
    return out


def _deep_copy_value(value: object) -> Any:
    if isinstance(value, Mapping):
        return _deep_copy_mapping(value)
    if isinstance(value, list):
        return [_deep_copy_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_deep_copy_value(item) for item in value)
    return copy.deepcopy(value)


__all__ = [
    "DEFAULT_CONFIG",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_LIST_FIELDS",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "MessagesConfig",
    "MetaConfig",
    "ObservabilityConfig",
    "StannumConfig",
    "assert_valid_config",
    "config_contract",
    "default_config",
    "issues_from_errors",
    "merge_config",
    "migration_guidance",
    "validate_config",
]
