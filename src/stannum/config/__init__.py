"""
stannum config package public API.

Purpose
- Export config loading/validation entrypoints and public error types.

What should be included in this file
- Public schema constants and validation/report types.
- Loader APIs for the effective library config.
- No logging setup or other runtime side effects.

Functional requirements
- Support loading from ``stannum.toml`` + ``STANNUM_`` env overrides.
- Fail fast with clear structured validation/load errors.
"""

from stannum.config.loader import (
    DEFAULT_CONFIG_FILE,
    ENV_PREFIX,
    ConfigLoadError,
    dump_effective_config,
    load_config,
    normalize_paths,
)
from stannum.config.schema import (
    DEFAULT_CONFIG,
    LOG_FORMATS,
    LOG_LEVELS,
    PATH_LIST_FIELDS,
    ConfigSchemaVersion,
    ConfigValidationError,
    ConfigValidationIssue,
    ConfigValidationResult,
    StannumConfig,
    assert_valid_config,
    config_contract,
    default_config,
    issues_from_errors,
    merge_config,
    migration_guidance,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "ENV_PREFIX",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "PATH_LIST_FIELDS",
    "ConfigLoadError",
    "ConfigSchemaVersion",
    "ConfigValidationError",
    "ConfigValidationIssue",
    "ConfigValidationResult",
    "StannumConfig",
    "assert_valid_config",
    "config_contract",
    "default_config",
    "dump_effective_config",
    "issues_from_errors",
    "load_config",
    "merge_config",
    "migration_guidance",
    "normalize_paths",
    "validate_config",
]
