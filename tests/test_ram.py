import math

import pytest

from chechr.checker import CheckStatus
from chechr.config import RamConfig
from chechr.errors import RamCheckError, WrongRamSettingsError
from chechr.ram import RamChecker, RamSettings, parse_meminfo_usage


def _meminfo(total, available):
    return (
        f"MemTotal:       {total} kB\n"
        f"MemFree:        1 kB\n"
        f"MemAvailable:   {available} kB\n"
        f"Buffers:        7 kB\n"
    )


def _checker(tmp_path, total, available, warning=60.0, critical=90.0):
    path = tmp_path / "meminfo"
    path.write_text(_meminfo(total, available))
    config = RamConfig(warning_threshold=warning, critical_threshold=critical)
    return RamChecker(config, path)


def test_settings_disabled():
    settings = RamSettings.from_config(RamConfig(enabled=False))
    assert settings == RamSettings(False, 0.0, 0.0)


def test_settings_copy_thresholds():
    settings = RamSettings.from_config(
        RamConfig(enabled=True, warning_threshold=70.0, critical_threshold=95.0)
    )
    assert settings == RamSettings(True, 70.0, 95.0)


@pytest.mark.parametrize(
    "config",
    [RamConfig(), RamConfig(warning_threshold=1.0), RamConfig(enabled=True, critical_threshold=2.0)],
)
def test_settings_missing_thresholds(config):
    with pytest.raises(WrongRamSettingsError, match="The thresholds are not specified"):
        RamSettings.from_config(config)


def test_usage_nothing_used():
    assert parse_meminfo_usage(_meminfo(4096, 4096)) == 0.0


def test_usage_everything_used():
    assert parse_meminfo_usage(_meminfo(4096, 0)) == 100.0


def test_usage_grows_as_available_shrinks():
    values = [parse_meminfo_usage(_meminfo(1000, avail)) for avail in (900, 500, 100)]
    assert values == sorted(values)
    assert all(0.0 < v < 100.0 for v in values)


def test_usage_zero_total_is_nan():
    usage = parse_meminfo_usage("MemFree: 10 kB\n")
    assert math.isnan(usage)
    assert str(usage) == "nan"


def test_usage_missing_available_counts_as_zero():
    assert parse_meminfo_usage("MemTotal: 512 kB\n") == 100.0


def test_check_ok(tmp_path):
    result = _checker(tmp_path, 1000, 900).check()
    assert result.name == "ram"
    assert result.result is CheckStatus.OK
    assert result.descr is None


def test_check_warning(tmp_path):
    result = _checker(tmp_path, 100, 25).check()
    assert result.result is CheckStatus.WARNING
    assert result.descr == "usage: 75%"


def test_check_critical(tmp_path):
    result = _checker(tmp_path, 100, 0).check()
    assert result.result is CheckStatus.CRITICAL
    assert result.descr == "usage: 100%"


def test_threshold_is_exclusive(tmp_path):
    checker = _checker(tmp_path, 100, 0, warning=50.0, critical=80.0)
    assert checker.is_warning(50.0) is False
    assert checker.is_warning(50.5) is True
    assert checker.is_critical(80.0) is False
    assert checker.is_critical(80.5) is True


def test_read_usage_percent_matches_parser(tmp_path):
    checker = _checker(tmp_path, 2048, 1024)
    assert checker.read_usage_percent() == parse_meminfo_usage(_meminfo(2048, 1024))


def test_missing_file_raises(tmp_path):
    checker = RamChecker(
        RamConfig(warning_threshold=1.0, critical_threshold=2.0), tmp_path / "absent"
    )
    with pytest.raises(RamCheckError) as info:
        checker.check()
    assert str(info.value).startswith("Ram check error: ")


def test_disabled_check(tmp_path):
    checker = RamChecker(RamConfig(enabled=False), tmp_path / "absent")
    result = checker.check()
    assert checker.enabled is False
    assert result.result is CheckStatus.DISABLED