"""Configuration loading for grid validation."""

import codecs
import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

log = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a config file cannot be read or has invalid values."""


@dataclass
class CheckerConfig:
    """Knobs for the validator. Defaults reproduce the reference strictness."""

    encoding: str = "utf-8"
    allow_header_trailing_whitespace: bool = False
    split_on_any_whitespace: bool = False


def load_config(path: Path) -> CheckerConfig:
    """Load configuration from a YAML file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a dictionary: {path}")

    known = {f.name for f in fields(CheckerConfig)}
    for key in sorted(set(data) - known):
        log.warning("Ignoring unknown config key %r in %s", key, path)

    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ConfigError("'encoding' must be a string")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"Unknown encoding: {encoding}") from e

    flags: dict[str, bool] = {}
    for name in ("allow_header_trailing_whitespace", "split_on_any_whitespace"):
        value = data.get(name, False)
        if not isinstance(value, bool):
            raise ConfigError(f"'{name}' must be true or false")
        flags[name] = value

    return CheckerConfig(encoding=encoding, **flags)
