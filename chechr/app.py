"""Command-line entry point that starts the health server."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from http.server import ThreadingHTTPServer

from chechr.checkers import get_checkers
from chechr.config import AppConfig, parse_args
from chechr.errors import ChechrError
from chechr.logger import set_up_logger
from chechr.routes import HealthRoutes, create_server

log = logging.getLogger(__name__)


def build_server(config: AppConfig, host: str = "0.0.0.0") -> ThreadingHTTPServer:
    """Create the checkers and bind the health server on the configured port."""
    checkers = get_checkers(config)
    return create_server(HealthRoutes(checkers), host, config.port)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration and serve until interrupted."""
    args = parse_args(argv)
    try:
        config = AppConfig.from_file(args.config)
        set_up_logger(config)
        log.info("Started chechr on port: %s", config.port)
        server = build_server(config)
    except (ChechrError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())