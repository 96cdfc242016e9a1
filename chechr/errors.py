"""Exception hierarchy used throughout chechr."""


class ChechrError(Exception):
    """Base class for every error chechr raises."""

    prefix = ""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}{detail}")


class CheckError(ChechrError):
    """A checker could not take its measurement."""


class CpuCheckError(CheckError):
    """The CPU load could not be read."""

    prefix = "Cpu check error: "


class RamCheckError(CheckError):
    """The memory usage could not be read."""

    prefix = "Ram check error: "


class ConfigError(ChechrError):
    """The configuration could not be loaded."""


class ReadConfigError(ConfigError):
    """The configuration file could not be read."""

    prefix = "Read config error: "


class ParseConfigError(ConfigError):
    """The configuration file is not valid."""

    prefix = "Parse config error: "


class WrongSettingsError(ChechrError):
    """A checker was configured inconsistently."""


class WrongCpuSettingsError(WrongSettingsError):
    """The CPU checker settings are inconsistent."""

    prefix = "Wrong CPU settings: "


class WrongRamSettingsError(WrongSettingsError):
    """The RAM checker settings are inconsistent."""

    prefix = "Wrong RAM settings: "