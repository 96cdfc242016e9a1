# chechr

chechr is a small health-check service for Linux hosts. It reads the load
averages and the memory information from files under `/proc` and compares
them with thresholds from a JSON configuration file. It serves the results
over HTTP. It uses only the Python standard library.

## Installation

```
pip install .
```

## Configuration

chechr reads a JSON file, `config.json` by default:

```json
{
  "port": 8080,
  "log_level": "info",
  "cpu": {
    "enabled": true,
    "warning":  {"one_threshold": 0.5, "five_threshold": 0.5, "fifteen_threshold": 0.5},
    "critical": {"one_threshold": 1.0, "five_threshold": 1.0, "fifteen_threshold": 1.0}
  },
  "ram": {
    "enabled": true,
    "warning_threshold": 70.0,
    "critical_threshold": 90.0
  }
}
```

- `port` is required. It must be an integer from 0 to 65535.
- `log_level` is one of `trace`, `debug`, `info`, `warn` or `error`. The default is `error`.
- The `cpu` and `ram` sections are optional. If you leave a section out, that check is not run.
- A section with `"enabled": false` still appears in the output, with the status `disabled`.
- A section that is not disabled must give both its warning and its critical thresholds. Otherwise startup fails. A CPU thresholds object must hold all three of `one_threshold`, `five_threshold` and `fifteen_threshold`.

A check reports `critical` when a value is above a critical threshold. It
reports `warning` when a value is above a warning threshold. Otherwise it
reports `ok`. The CPU check compares the 1, 5 and 15 minute load averages,
and one window above its limit is enough. The RAM check compares the
percentage of memory in use, computed from `MemTotal` and `MemAvailable`.

## Running

```
chechr --config config.json
```

`-c` is the short form of `--config`. The server listens on all interfaces
(`0.0.0.0`) at the configured port until it is interrupted. If the
configuration cannot be read or is invalid, or the port cannot be bound,
chechr prints `Error: ...` to standard error and exits with status 1.

## Endpoint

`GET /health` runs every configured check at the same time and returns a
JSON list. The list keeps the order of the checks, with the CPU check first:

```json
[{"name":"cpu","result":"ok","descr":null},{"name":"ram","result":"warning","descr":"usage: 75.3%"}]
```

- `result` is one of `ok`, `warning`, `critical`, `disabled` or `error`.
- `descr` holds the measured values for `warning` and `critical`, and the reason for `error`. Otherwise it is `null`.
- A check that cannot read its data file reports `error`, and the request still returns 200.
- `HEAD /health` returns the same status and headers without a body.
- Other methods on `/health` return 405. Any other path returns 404, and that includes `/health/`.

## Using it as a library

```python
from chechr.config import AppConfig
from chechr.checkers import get_checkers
from chechr.routes import HealthRoutes

config = AppConfig.from_json('{"port": 8080, "ram": {"warning_threshold": 70, "critical_threshold": 90}}')
routes = HealthRoutes(get_checkers(config))
for result in routes.run_checks():
    print(result.to_dict())
```

- `chechr.config.AppConfig` loads a configuration with `from_file`, `from_json` or `from_dict`. These raise `ReadConfigError` or `ParseConfigError`.
- `chechr.cpu.CpuChecker` and `chechr.ram.RamChecker` take their configuration section. They also take an optional path to the data file, `loadavg_path` or `meminfo_path`. An inconsistent section raises `WrongCpuSettingsError` or `WrongRamSettingsError`.
- `chechr.ram.parse_meminfo_usage(text)` returns the used-memory percentage for a meminfo text.
- `chechr.routes.create_server(routes, host, port)` returns a bound `ThreadingHTTPServer`.
- `chechr.app.build_server(config, host)` returns the same kind of server, built straight from an `AppConfig`.
- Every error derives from `chechr.errors.ChechrError`.

## Limitations

- Only the two checks above exist: the load average and the memory usage. Nothing else is measured.
- The CPU check reads `/proc/loadvg` by default. Pass `loadavg_path` to `CpuChecker` to read another file. When that file is missing, the check reports `error`.
- The server speaks plain HTTP only. It has no TLS and no authentication, and it does not store any history of results.