"""Builds the list of checkers from the application configuration."""

from __future__ import annotations

from chechr.checker import Checker
from chechr.config import AppConfig
from chechr.cpu import CpuChecker
from chechr.ram import RamChecker


def get_checkers(config: AppConfig) -> list[Checker]:
    """Return a checker for every configured section, CPU first."""
    checkers: list[Checker] = []
    if config.cpu is not None:
        checkers.append(CpuChecker(config.cpu))
    if config.ram is not None:
        checkers.append(RamChecker(config.ram))
    return checkers