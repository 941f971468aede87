"""Run configuration (Layer 3 -- depends on discovery, runtime)."""

from langtest.config.loader import (
    ConfigError,
    RunConfig,
    SuiteSpec,
    config_from_mapping,
    load_config,
    resolve_factory,
    validate_config,
)

__all__ = [
    "ConfigError",
    "RunConfig",
    "SuiteSpec",
    "config_from_mapping",
    "load_config",
    "resolve_factory",
    "validate_config",
]
