"""Engine configuration.

Settings are plain defaults unless a YAML document is loaded, either
explicitly with :func:`load_config` or through the ``PROTOMIX_CONFIG``
environment variable on first use::

    version: 0.1
    engine:
      inherit_static: true
      global_name: Protocol
    logging:
      level: INFO
      structured: false
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "PROTOMIX_CONFIG"

_ENGINE_KEYS = {"inherit_static": bool, "global_name": str}
_LOGGING_KEYS = {"level": str, "structured": bool}
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineConfig:
    inherit_static: bool = True
    global_name: str = "Protocol"
    log_level: str = "WARNING"
    structured_logging: bool = False


_config: EngineConfig | None = None


def _section(data: Dict[str, Any], name: str, schema: Dict[str, type]) -> Dict[str, Any]:
    section = data.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f'"{name}" must be a mapping')
    for key, value in section.items():
        if key not in schema:
            raise ConfigError(f"unknown key '{key}' in '{name}'")
        if not isinstance(value, schema[key]):
            raise ConfigError(
                f"'{name}.{key}' must be of type {schema[key].__name__}: {value!r}"
            )
    return section


def parse_config(text: str) -> EngineConfig:
    """Validate a YAML document and build an :class:`EngineConfig`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from None

    if not isinstance(data, dict):
        raise ConfigError("config root must be a mapping")
    if "version" not in data:
        raise ConfigError('config missing "version" key')
    if str(data["version"]) != "0.1":
        raise ConfigError(f"unsupported config version: {data['version']}")

    engine = _section(data, "engine", _ENGINE_KEYS)
    log_cfg = _section(data, "logging", _LOGGING_KEYS)

    config = EngineConfig(**engine)
    if "level" in log_cfg:
        level = log_cfg["level"].upper()
        if level not in _LEVELS:
            raise ConfigError(f"unknown log level: {log_cfg['level']}")
        config = replace(config, log_level=level)
    if "structured" in log_cfg:
        config = replace(config, structured_logging=log_cfg["structured"])
    if not config.global_name.isidentifier():
        raise ConfigError(f"invalid global name: {config.global_name!r}")
    return config


def load_config(path: str | Path) -> EngineConfig:
    """Read and validate the YAML config at *path*."""
    with open(path, "r", encoding="utf-8") as fh:
        config = parse_config(fh.read())
    logger.debug("loaded engine config from %s", path)
    return config


def get_config() -> EngineConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        path = os.environ.get(CONFIG_ENV)
        _config = load_config(path) if path else EngineConfig()
    return _config


def set_config(config: EngineConfig | None) -> None:
    """Replace the process-wide configuration; ``None`` resets to defaults."""
    global _config
    _config = config


__all__ = [
    "CONFIG_ENV",
    "EngineConfig",
    "parse_config",
    "load_config",
    "get_config",
    "set_config",
]
