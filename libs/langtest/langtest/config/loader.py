"""YAML run configuration, validated against the bundled JSON schema.

Example::

    version: "1.0"
    runtime: "mylang.testing:make_runtime"
    environment:
      is_3d: false
      uses_code_generator: true
    suites:
      - finder: txts_in_dir
        path: test/commands
      - finder: tests_dot_txt
        path: extensions
"""

from __future__ import annotations

import importlib
import json
import os
from dataclasses import dataclass
from pathlib import Path

import jsonschema
import yaml

from langtest.core.environment import Environment
from langtest.discovery.finders import TestFinder, make_finder
from langtest.runtime.protocol import RuntimeFactory

SCHEMA_PATH = Path(__file__).with_name("schema.json")


class ConfigError(Exception):
    """The run configuration is missing, malformed or refers to something that does not exist."""


@dataclass(frozen=True)
class SuiteSpec:
    finder: str
    path: Path


@dataclass(frozen=True)
class RunConfig:
    version: str
    runtime: str
    environment: Environment
    suites: tuple[SuiteSpec, ...]

    def finders(self) -> list[TestFinder]:
        return [make_finder(s.finder, s.path) for s in self.suites]

    def factory(self) -> RuntimeFactory:
        return resolve_factory(self.runtime)


def load_schema() -> dict:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(data: object, schema: dict | None = None) -> list[str]:
    """Validate *data* against the schema. Returns a list of error messages."""
    schema = schema if schema is not None else load_schema()
    validator = jsonschema.Draft7Validator(schema)
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        where = " -> ".join(str(p) for p in error.path)
        errors.append(f"{where}: {error.message}" if where else error.message)
    return errors


def config_from_mapping(data: object, base_dir: Path | None = None) -> RunConfig:
    """Build a ``RunConfig`` from already-loaded YAML data.

    Relative suite paths are resolved against *base_dir* and must name
    existing directories.
    """
    errors = validate_config(data)
    if errors:
        raise ConfigError("invalid configuration:\n  " + "\n  ".join(errors))
    if not isinstance(data, dict):
        raise ConfigError("invalid configuration: expected a mapping")

    base = base_dir or Path.cwd()
    suites = tuple(
        SuiteSpec(s["finder"], (base / s["path"]).resolve()) for s in data["suites"]
    )
    missing = [str(s.path) for s in suites if not s.path.is_dir()]
    if missing:
        raise ConfigError("suite directory not found:\n  " + "\n  ".join(missing))
    return RunConfig(
        version=data["version"],
        runtime=data["runtime"],
        environment=Environment.from_mapping(data.get("environment")),
        suites=suites,
    )


def load_config(path: str | os.PathLike[str]) -> RunConfig:
    """Load and validate the YAML configuration at *path*."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    return config_from_mapping(data, path.parent)


def resolve_factory(dotted: str) -> RuntimeFactory:
    """Import ``package.module:callable`` and return the callable."""
    module_name, _, attr = dotted.partition(":")
    if not module_name or not attr:
        raise ConfigError(f"runtime must look like 'package.module:factory', got {dotted!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"cannot import runtime module {module_name!r}: {e}") from e
    try:
        factory = getattr(module, attr)
    except AttributeError:
        raise ConfigError(f"module {module_name!r} has no attribute {attr!r}") from None
    if not callable(factory):
        raise ConfigError(f"runtime factory {dotted!r} is not callable")
    return factory
