"""
Interpreter configuration.

Settings come from, in increasing precedence: built-in defaults, a YAML file,
the environment (``BYTETAPE_*``, with a ``.env`` file loaded first) and
explicit overrides such as command-line flags.

YAML layout, either at top level or under a ``bytetape:`` key:

    max_cells: 65536
    initial_cells: 1024
    log_level: INFO
    encoding: utf-8
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .tape import Tape

ENV_PREFIX = "BYTETAPE_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class InterpreterConfig:
    max_cells: Optional[int] = None  # None means the tape may grow without bound
    initial_cells: int = 1
    log_level: str = "WARNING"
    encoding: str = "utf-8"

    def make_tape(self) -> Tape:
        return Tape(capacity=self.initial_cells, max_cells=self.max_cells)

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def _coerce(name: str, value: Any) -> Any:
    if name == "max_cells":
        if value is None or (isinstance(value, str) and value.strip().lower() in ("", "none")):
            return None
        n = _to_int(name, value)
        if n < 1:
            raise ConfigError("max_cells must be at least 1")
        return n
    if name == "initial_cells":
        n = _to_int(name, value)
        if n < 1:
            raise ConfigError("initial_cells must be at least 1")
        return n
    if name == "log_level":
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level
    if name == "encoding":
        if not isinstance(value, str) or not value:
            raise ConfigError("encoding must be a non-empty string")
        return value
    raise ConfigError(f"unknown setting {name!r}")


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def _apply(config: InterpreterConfig, values: Mapping[str, Any]) -> InterpreterConfig:
    known = {f.name for f in fields(InterpreterConfig)}
    changes: Dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"unknown setting {key!r}")
        changes[key] = _coerce(key, value)
    return replace(config, **changes)


def read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"cannot parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    if "bytetape" in data:
        section = data["bytetape"] or {}
        if not isinstance(section, dict):
            raise ConfigError(f"{path}: 'bytetape' section must be a mapping")
        return section
    return data


def from_environ(environ: Mapping[str, str]) -> Dict[str, str]:
    """Settings named ``BYTETAPE_<SETTING>`` in ``environ``."""
    values = {}
    for f in fields(InterpreterConfig):
        key = ENV_PREFIX + f.name.upper()
        if key in environ:
            values[f.name] = environ[key]
    return values


def load_config(path: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None,
                overrides: Optional[Mapping[str, Any]] = None) -> InterpreterConfig:
    """Merge defaults, YAML file, environment and overrides.

    When ``environ`` is not given the process environment is used, after
    loading the nearest ``.env`` at or above the working directory. ``None``
    values in ``overrides`` are skipped so unset command-line flags fall
    through.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    config = InterpreterConfig()
    if path:
        config = _apply(config, read_yaml(path))
    config = _apply(config, from_environ(environ))
    if overrides:
        config = _apply(config, {k: v for k, v in overrides.items() if v is not None})
    return config
