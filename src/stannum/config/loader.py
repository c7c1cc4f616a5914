"""
stannum — runtime config loader.

Purpose
- Load effective library config from defaults, TOML file, env vars, and
  explicit overrides.

What should be included in this file
- Precedence logic: overrides > env (STANNUM_) > file > defaults.
- TOML loading via ``tomllib``.
- Deterministic environment variable mapping and coercion.
- Catalog path normalization relative to the config file location.

Functional requirements
- Reject invalid config via schema validation.

Non-functional requirements
- Keep loading deterministic and reproducible.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import structlog

from stannum.config.schema import (
    PATH_LIST_FIELDS,
    assert_valid_config,
    default_config,
    merge_config,
)

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILE: Final[str] = "stannum.toml"
ENV_PREFIX: Final[str] = "STANNUM_"

_KeyPath = tuple[str, ...]


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or overrides cannot be coerced."""


def load_config(
    config_path: str | Path | None = None,
    *,
    overrides: Mapping[str, object] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Load effective config with deterministic precedence: overrides > env > file > defaults."""

    resolved_path = _resolve_config_path(config_path)
    explicit_path = config_path is not None
    env_map = dict(os.environ if environ is None else environ)

    file_payload = _load_toml_file(resolved_path, required=explicit_path)
    merged = merge_config(default_config(), file_payload)
    merged = assert_valid_config(merged)

    env_overrides = _collect_env_overrides(env_map)
    override_payload = _materialize_overrides(overrides or {})

    merged = merge_config(merged, env_overrides)
    merged = merge_config(merged, override_payload)
    merged = assert_valid_config(merged)

    normalized = normalize_paths(merged, base_dir=resolved_path.parent)
    normalized = assert_valid_config(normalized)

    logger.info(
        "config_loaded",
        path=resolved_path.as_posix() if resolved_path.exists() else None,
        env_overrides=len(_leaf_paths(env_overrides)),
        overrides=len(_leaf_paths(override_payload)),
    )
    return normalized


def normalize_paths(config: Mapping[str, object], *, base_dir: Path) -> dict[str, Any]:
    """Normalize configured catalog paths relative to ``base_dir``."""

    materialized = merge_config({}, config)
    for section_name, field_name in PATH_LIST_FIELDS:
        section = materialized.get(section_name)
        if not isinstance(section, dict) or not isinstance(section.get(field_name), list):
            continue
        section[field_name] = [
            _normalize_one_path(item, base_dir) if isinstance(item, str) else item
            for item in section[field_name]
        ]
    return materialized


def dump_effective_config(config: Mapping[str, object]) -> str:
    """Return deterministic JSON dump of the effective config."""

    return json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _resolve_config_path(config_path: str | Path | None) -> Path:
    if config_path is None:
        return (Path.cwd() / DEFAULT_CONFIG_FILE).resolve()
    return Path(config_path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigLoadError(f"config file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigLoadError(f"unable to read config file {path}: {exc}") from exc


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    # Every default leaf is bindable; its default value fixes the coercion.
    defaults = default_config()
    overrides: dict[str, Any] = {}
    for path in _leaf_paths(defaults):
        env_name = ENV_PREFIX + "_".join(part.upper() for part in path)
        raw = environ.get(env_name)
        if raw is None:
            continue
        template = _leaf_value(defaults, path)
        _set_nested(overrides, path, _coerce_env(raw.strip(), template, env_name, path))
    return overrides


def _coerce_env(value: str, template: object, env_name: str, path: _KeyPath) -> object:
    if isinstance(template, list):
        return [item.strip() for item in value.split(os.pathsep) if item.strip()]
    if isinstance(template, int):
        try:
            return int(value)
        except ValueError as exc:
            raise ConfigLoadError(f"{env_name} -> {'.'.join(path)} must be an integer") from exc
    return value


def _leaf_paths(payload: Mapping[str, object], prefix: _KeyPath = ()) -> list[_KeyPath]:
    paths: list[_KeyPath] = []
    for key in sorted(payload):
        value = payload[key]
        if isinstance(value, Mapping):
            paths.extend(_leaf_paths(value, (*prefix, key)))
        else:
            paths.append((*prefix, key))
    return paths


def _leaf_value(payload: Mapping[str, Any], path: _KeyPath) -> object:
    for part in path[:-1]:
        payload = payload[part]
    return payload[path[-1]]


def _materialize_overrides(overrides: Mapping[str, object]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for key in sorted(overrides):
        value = overrides[key]
        if "." not in key:
            payload = merge_config(payload, {key: value})
            continue
        path = tuple(part for part in key.split(".") if part)
        if not path:
            raise ConfigLoadError(f"invalid override key {key!r}")
        _set_nested(payload, path, value)
    return payload


def _set_nested(target: dict[str, Any], path: _KeyPath, value: object) -> None:
    cursor = target
    for part in path[:-1]:
        next_node = cursor.get(part)
        if not isinstance(next_node, dict):
            next_node = {}
            cursor[part] = next_node
        cursor = next_node
    cursor[path[-1]] = value


def _normalize_one_path(raw: str, base_dir: Path) -> str:
    candidate = Path(os.path.expandvars(raw)).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return Path(os.path.normpath(candidate)).as_posix()


__all__ = [
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "ConfigLoadError",
    "dump_effective_config",
    "load_config",
    "normalize_paths",
]
