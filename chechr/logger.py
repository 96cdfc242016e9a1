"""Logging set-up driven by the application configuration."""

from __future__ import annotations

import logging

from chechr.config import TRACE, AppConfig, LogLevel

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_handler: logging.Handler | None = None


def set_up_logger(config: AppConfig) -> logging.Logger:
    """Configure the root logger at the configured level (error by default)."""
    global _handler
    logging.addLevelName(TRACE, "TRACE")
    level = (config.log_level or LogLevel.ERROR).to_logging_level()

    root = logging.getLogger()
    root.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    return root