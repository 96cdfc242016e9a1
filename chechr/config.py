"""Application configuration loaded from a JSON file."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any

from chechr.errors import ParseConfigError, ReadConfigError

TRACE = 5
"""Numeric logging level used for the ``trace`` setting."""

DEFAULT_CONFIG_PATH = "config.json"


class LogLevel(str, Enum):
    """Log levels accepted in the configuration file."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    TRACE = "trace"

    def to_logging_level(self) -> int:
        """Return the matching numeric level for the logging module."""
        return {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.TRACE: TRACE,
        }[self]


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ParseConfigError(f"invalid type for {what}: expected an object")
    return data


def _number(data: Mapping[str, Any], key: str, what: str, *, required: bool) -> float | None:
    value = data.get(key)
    if value is None:
        if required:
            raise ParseConfigError(f"missing field `{key}` in {what}")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseConfigError(f"invalid type for `{key}` in {what}: expected a number")
    return float(value)


def _optional_bool(data: Mapping[str, Any], key: str, what: str) -> bool | None:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ParseConfigError(f"invalid type for `{key}` in {what}: expected a boolean")


@dataclass(frozen=True)
class CpuThresholdsConfig:
    """Load-average thresholds for the 1, 5 and 15 minute windows."""

    one_threshold: float
    five_threshold: float
    fifteen_threshold: float

    @classmethod
    def from_dict(cls, data: Any) -> CpuThresholdsConfig:
        what = "cpu thresholds"
        data = _mapping(data, what)
        return cls(
            one_threshold=_number(data, "one_threshold", what, required=True),
            five_threshold=_number(data, "five_threshold", what, required=True),
            fifteen_threshold=_number(data, "fifteen_threshold", what, required=True),
        )


@dataclass(frozen=True)
class CpuConfig:
    """The ``cpu`` section of the configuration."""

    enabled: bool | None = None
    warning: CpuThresholdsConfig | None = None
    critical: CpuThresholdsConfig | None = None

    @classmethod
    def from_dict(cls, data: Any) -> CpuConfig:
        data = _mapping(data, "cpu")
        warning = data.get("warning")
        critical = data.get("critical")
        return cls(
            enabled=_optional_bool(data, "enabled", "cpu"),
            warning=None if warning is None else CpuThresholdsConfig.from_dict(warning),
            critical=None if critical is None else CpuThresholdsConfig.from_dict(critical),
        )


@dataclass(frozen=True)
class RamConfig:
    """The ``ram`` section of the configuration."""

    enabled: bool | None = None
    warning_threshold: float | None = None
    critical_threshold: float | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RamConfig:
        data = _mapping(data, "ram")
        return cls(
            enabled=_optional_bool(data, "enabled", "ram"),
            warning_threshold=_number(data, "warning_threshold", "ram", required=False),
            critical_threshold=_number(data, "critical_threshold", "ram", required=False),
        )


@dataclass(frozen=True)
class AppConfig:
    """The whole application configuration."""

    port: int
    log_level: LogLevel | None = None
    cpu: CpuConfig | None = None
    ram: RamConfig | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AppConfig:
        data = _mapping(data, "config")

        port = data.get("port")
        if port is None:
            raise ParseConfigError("missing field `port`")
        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
            raise ParseConfigError(f"invalid value for `port`: {port!r}")

        raw_level = data.get("log_level")
        log_level = None
        if raw_level is not None:
            if not isinstance(raw_level, str):
                raise ParseConfigError("invalid type for `log_level`: expected a string")
            try:
                log_level = LogLevel(raw_level)
            except ValueError:
                expected = ", ".join(level.value for level in LogLevel)
                raise ParseConfigError(
                    f"unknown variant `{raw_level}`, expected one of {expected}"
                ) from None

        cpu = data.get("cpu")
        ram = data.get("ram")
        return cls(
            port=port,
            log_level=log_level,
            cpu=None if cpu is None else CpuConfig.from_dict(cpu),
            ram=None if ram is None else RamConfig.from_dict(ram),
        )

    @classmethod
    def from_json(cls, text: str) -> AppConfig:
        """Parse a configuration from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as error:
            raise ParseConfigError(str(error)) from error
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> AppConfig:
        """Read and parse a configuration file."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as error:
            raise ReadConfigError(str(error)) from error
        return cls.from_json(text)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; the result has a ``config`` attribute."""
    parser = argparse.ArgumentParser(prog="chechr")
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="path to the JSON configuration file",
    )
    return parser.parse_args(argv)