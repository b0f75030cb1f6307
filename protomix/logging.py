"""Logging helpers for protomix."""

from __future__ import annotations

import logging

from .config import EngineConfig


def setup_structured_logging(level: int = logging.INFO) -> None:
    """Configure the root logger to emit JSON formatted messages."""

    logging.basicConfig(
        level=level,
        format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
               '"component": "%(name)s", "message": "%(message)s"}',
    )


def configure_logging(config: EngineConfig) -> logging.Logger:
    """Apply the logging settings of *config* to the ``protomix`` logger."""
    level = logging.getLevelName(config.log_level)
    if config.structured_logging:
        setup_structured_logging(level)
    pkg_logger = logging.getLogger("protomix")
    pkg_logger.setLevel(level)
    return pkg_logger


__all__ = ["setup_structured_logging", "configure_logging"]
