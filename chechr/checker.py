"""Common model for health checks and their results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class CheckStatus(str, Enum):
    """Outcome of a single health check."""

    OK = "ok"
    ERROR = "error"
    WARNING = "warning"
    CRITICAL = "critical"
    DISABLED = "disabled"


@dataclass(frozen=True)
class CheckResult:
    """The result a checker reports."""

    name: str
    result: CheckStatus
    descr: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Return the JSON-ready form of the result."""
        return {"name": self.name, "result": self.result.value, "descr": self.descr}


class Checker(ABC):
    """A named health check that can be run repeatedly."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name reported in results."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether the check is active."""

    @abstractmethod
    def check(self) -> CheckResult:
        """Run the check; raise CheckError if it cannot be performed."""