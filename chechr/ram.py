"""Memory usage health check."""

from __future__ import annotations

import math
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from chechr.checker import Checker, CheckResult, CheckStatus
from chechr.config import RamConfig
from chechr.errors import RamCheckError, WrongRamSettingsError

MEMINFO_PATH = "/proc/meminfo"


def _kb_value(line: str) -> float:
    parts = line.split()
    if len(parts) < 2:
        return 0.0
    try:
        return float(parts[1])
    except ValueError:
        return 0.0


def _display(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_meminfo_usage(text: str) -> float:
    """Return the used memory percentage described by meminfo ``text``."""
    total = 0.0
    available = 0.0
    for line in text.splitlines():
        if line.startswith("MemTotal:"):
            total = _kb_value(line)
        elif line.startswith("MemAvailable:"):
            available = _kb_value(line)

    used = (total - available) * 100.0
    if total == 0.0:
        if used == 0.0 or math.isnan(used):
            return math.nan
        return math.inf if used > 0 else -math.inf
    return used / total


@dataclass(frozen=True)
class RamSettings:
    """Validated settings of the RAM checker."""

    enabled: bool = True
    warning_threshold: float = 0.0
    critical_threshold: float = 0.0

    @classmethod
    def from_config(cls, config: RamConfig) -> RamSettings:
        """Build settings from the ``ram`` section; raise if thresholds are missing."""
        if config.enabled is False:
            return cls(enabled=False, warning_threshold=0.0, critical_threshold=0.0)

        if config.warning_threshold is None or config.critical_threshold is None:
            raise WrongRamSettingsError("The thresholds are not specified")

        return cls(
            enabled=True,
            warning_threshold=config.warning_threshold,
            critical_threshold=config.critical_threshold,
        )


class RamChecker(Checker):
    """Compares the used memory percentage with configured thresholds."""

    def __init__(
        self, config: RamConfig, meminfo_path: str | PathLike[str] = MEMINFO_PATH
    ) -> None:
        self.settings = RamSettings.from_config(config)
        self.meminfo_path = Path(meminfo_path)

    @property
    def name(self) -> str:
        return "ram"

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    def read_usage_percent(self) -> float:
        """Read the used memory percentage from the meminfo file."""
        try:
            text = self.meminfo_path.read_text()
        except (OSError, UnicodeDecodeError) as error:
            raise RamCheckError(str(error)) from error
        return parse_meminfo_usage(text)

    def is_warning(self, value: float) -> bool:
        return value > self.settings.warning_threshold

    def is_critical(self, value: float) -> bool:
        return value > self.settings.critical_threshold

    def check(self) -> CheckResult:
        if not self.enabled:
            return CheckResult(self.name, CheckStatus.DISABLED)

        value = self.read_usage_percent()
        descr = f"usage: {_display(value)}%"

        if self.is_critical(value):
            return CheckResult(self.name, CheckStatus.CRITICAL, descr)
        if self.is_warning(value):
            return CheckResult(self.name, CheckStatus.WARNING, descr)
        return CheckResult(self.name, CheckStatus.OK)