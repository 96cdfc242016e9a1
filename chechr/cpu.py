"""CPU load-average health check."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from chechr.checker import Checker, CheckResult, CheckStatus
from chechr.config import CpuConfig
from chechr.errors import CpuCheckError, WrongCpuSettingsError

LOADAVG_PATH = "/proc/loadvg"

LoadValues = tuple[float, float, float]


def _parse_float(text: str) -> float:
    try:
        return float(text)
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


@dataclass(frozen=True)
class CpuThresholdSettings:
    """Load-average limits for the 1, 5 and 15 minute windows."""

    one_threshold: float
    five_threshold: float
    fifteen_threshold: float

    def exceeded_by(self, load: LoadValues) -> bool:
        """Whether any window of ``load`` is above its limit."""
        one, five, fifteen = load
        return (
            one > self.one_threshold
            or five > self.five_threshold
            or fifteen > self.fifteen_threshold
        )


@dataclass(frozen=True)
class CpuSettings:
    """Validated settings of the CPU checker."""

    enabled: bool = True
    warning: CpuThresholdSettings = field(
        default_factory=lambda: CpuThresholdSettings(0.5, 0.5, 0.5)
    )
    critical: CpuThresholdSettings = field(
        default_factory=lambda: CpuThresholdSettings(1.0, 1.0, 1.0)
    )

    @classmethod
    def from_config(cls, config: CpuConfig) -> CpuSettings:
        """Build settings from the ``cpu`` section; raise if thresholds are missing."""
        if config.enabled is False:
            zero = CpuThresholdSettings(0.0, 0.0, 0.0)
            return cls(enabled=False, warning=zero, critical=zero)

        if config.warning is None or config.critical is None:
            raise WrongCpuSettingsError("The thresholds are not specified")

        return cls(
            enabled=True,
            warning=CpuThresholdSettings(
                config.warning.one_threshold,
                config.warning.five_threshold,
                config.warning.fifteen_threshold,
            ),
            critical=CpuThresholdSettings(
                config.critical.one_threshold,
                config.critical.five_threshold,
                config.critical.fifteen_threshold,
            ),
        )


class CpuChecker(Checker):
    """Compares the system load averages with configured thresholds."""

    def __init__(
        self, config: CpuConfig, loadavg_path: str | PathLike[str] = LOADAVG_PATH
    ) -> None:
        self.settings = CpuSettings.from_config(config)
        self.loadavg_path = Path(loadavg_path)

    @property
    def name(self) -> str:
        return "cpu"

    @property
    def enabled(self) -> bool:
        return self.settings.enabled

    def read_load(self) -> LoadValues:
        """Read the 1, 5 and 15 minute load averages."""
        try:
            content = self.loadavg_path.read_text()
        except (OSError, UnicodeDecodeError) as error:
            raise CpuCheckError(str(error)) from error
        parts = content.split()
        return (_parse_float(parts[0]), _parse_float(parts[1]), _parse_float(parts[2]))

    def is_warning(self, load: LoadValues) -> bool:
        return self.settings.warning.exceeded_by(load)

    def is_critical(self, load: LoadValues) -> bool:
        return self.settings.critical.exceeded_by(load)

    def check(self) -> CheckResult:
        if not self.enabled:
            return CheckResult(self.name, CheckStatus.DISABLED)

        load = self.read_load()
        one, five, fifteen = (_display(value) for value in load)
        descr = f"one: {one}, five: {five}, fifteen: {fifteen}"

        if self.is_critical(load):
            return CheckResult(self.name, CheckStatus.CRITICAL, descr)
        if self.is_warning(load):
            return CheckResult(self.name, CheckStatus.WARNING, descr)
        return CheckResult(self.name, CheckStatus.OK)