"""
stannum — default message strategy.

Purpose
- Render human-readable messages for error records from YAML catalogs keyed
  by locale and dotted error type id.

Behavior
- The bundled ``locales/<locale>.yaml`` catalog is loaded first, then every
  path in ``catalog_paths`` is deep-merged over it in order.
- ``{name}`` placeholders are replaced with the matching record data; unknown
  placeholders are left untouched. Classes render as their ``__name__``.
- Entries with ``required``/``optional`` variants are selected by the record's
  ``required`` data, defaulting to ``required``.
- Catalogs load lazily on first use and are cached until ``reload``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from importlib import resources
from pathlib import Path
from typing import Any, Final

import structlog
import yaml

from stannum.constants import DEFAULT_LOCALE
from stannum.exceptions import InvalidArgumentError, MessageCatalogError

logger = structlog.get_logger(__name__)

_PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{(\w+)\}")
_VARIANT_KEYS: Final[frozenset[str]] = frozenset({"optional", "required"})

Catalog = dict[str, Any]


class DefaultStrategy:
    """Callable ``strategy(error_type, **data) -> str`` backed by YAML catalogs."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        catalog_paths: Sequence[Path | str] = (),
    ) -> None:
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidArgumentError("locale must be a non-empty string")
        self._locale = locale.strip()
        self._catalog_paths = tuple(Path(path) for path in catalog_paths)
        self._catalog: Catalog | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> DefaultStrategy:
        """Build a strategy from a loaded config (or its ``messages`` section)."""

        section = config.get("messages", config)
        if not isinstance(section, Mapping):
            raise InvalidArgumentError("messages config must be a mapping")
        locale = section.get("locale", DEFAULT_LOCALE)
        catalog_paths = section.get("catalog_paths", ())
        return cls(locale=locale, catalog_paths=catalog_paths)

    @property
    def catalog_paths(self) -> tuple[Path, ...]:
        return self._catalog_paths

    @property
    def locale(self) -> str:
        return self._locale

    def __call__(self, error_type: str, /, **data: Any) -> str:
        if not isinstance(error_type, str) or not error_type:
            raise InvalidArgumentError("error type must be a non-empty string")
        message = self._generate_message(error_type, data)
        return self._interpolate(message, data)

    def reload(self) -> DefaultStrategy:
        self._catalog = None
        return self

    def _generate_message(self, error_type: str, data: Mapping[str, Any]) -> str:
        node: Any = self._load_catalog().get(self._locale, {})
        for segment in error_type.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return f"no message defined for {error_type!r}"
            node = node[segment]

        if isinstance(node, str):
            return node
        if isinstance(node, Mapping) and _VARIANT_KEYS.issubset(node):
            variant = "required" if data.get("required", True) else "optional"
            return str(node[variant])
        if isinstance(node, Mapping):
            return f"configuration is a namespace at {error_type}"
        return str(node)

    def _interpolate(self, message: str, data: Mapping[str, Any]) -> str:
        def replace(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in data:
                return match.group(0)
            return _format_value(data[key])

        return _PLACEHOLDER_PATTERN.sub(replace, message)

    def _load_catalog(self) -> Catalog:
        if self._catalog is not None:
            return self._catalog

        catalog = _read_bundled_catalog(self._locale)
        for path in self._catalog_paths:
            catalog = _deep_merge(catalog, _read_catalog_file(path))

        logger.debug(
            "message_catalog_loaded",
            locale=self._locale,
            catalog_paths=[str(path) for path in self._catalog_paths],
        )
        self._catalog = catalog
        return catalog


def _deep_merge(source: Mapping[str, Any], overrides: Mapping[str, Any]) -> Catalog:
    merged: Catalog = dict(source)
    for key, value in overrides.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(existing, value)
        else:
            merged[key] = value
    return merged


def _format_value(value: object) -> str:
    if isinstance(value, type):
        return value.__name__
    return str(value)


def _parse_catalog(text: str, *, source: str) -> Catalog:
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MessageCatalogError(f"invalid message catalog {source}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise MessageCatalogError(f"message catalog {source} must contain a mapping")
    return {str(key): value for key, value in payload.items()}


def _read_bundled_catalog(locale: str) -> Catalog:
    locales = resources.files("stannum.messages").joinpath("locales")
    resource = locales.joinpath(f"{locale}.yaml")
    if not resource.is_file():
        return {}
    return _parse_catalog(resource.read_text(encoding="utf-8"), source=f"<bundled {locale}>")


def _read_catalog_file(path: Path) -> Catalog:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MessageCatalogError(f"unable to read message catalog {path}: {exc}") from exc
    return _parse_catalog(text, source=str(path))


__all__ = ["Catalog", "DefaultStrategy"]
