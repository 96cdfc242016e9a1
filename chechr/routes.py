"""HTTP endpoint that runs every checker and reports the results."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from chechr.checker import Checker, CheckResult, CheckStatus
from chechr.errors import CheckError

HEALTH_PATH = "/health"

log = logging.getLogger(__name__)


def _run_one(checker: Checker) -> CheckResult:
    name = checker.name
    try:
        return checker.check()
    except CheckError as error:
        log.warning("Error: checker: %s | %s", name, error)
        return CheckResult(name, CheckStatus.ERROR, str(error))


def _collect(future: Future[CheckResult]) -> CheckResult:
    try:
        return future.result()
    except Exception as error:  # a checker failed in an unexpected way
        log.error("Join error: %s", error)
        return CheckResult("unknown", CheckStatus.ERROR, "Join error")


class HealthRoutes:
    """Serves ``GET /health`` with the results of all checkers."""

    def __init__(self, checkers: Iterable[Checker]) -> None:
        self.checkers = tuple(checkers)

    def run_checks(self) -> list[CheckResult]:
        """Run every checker concurrently; results keep the checkers' order."""
        if not self.checkers:
            return []
        with ThreadPoolExecutor(max_workers=len(self.checkers)) as pool:
            futures = [pool.submit(_run_one, checker) for checker in self.checkers]
            return [_collect(future) for future in futures]

    def handle(self, method: str, path: str) -> tuple[HTTPStatus, bytes]:
        """Answer one request; return the status and the response body."""
        if urlsplit(path).path != HEALTH_PATH:
            return HTTPStatus.NOT_FOUND, b""
        if method.upper() not in ("GET", "HEAD"):
            return HTTPStatus.METHOD_NOT_ALLOWED, b""
        results = [result.to_dict() for result in self.run_checks()]
        body = json.dumps(results, separators=(",", ":")).encode("utf-8")
        return HTTPStatus.OK, body


def create_server(routes: HealthRoutes, host: str, port: int) -> ThreadingHTTPServer:
    """Bind an HTTP server that dispatches requests to ``routes``."""

    class _Handler(BaseHTTPRequestHandler):
        def _respond(self) -> None:
            status, body = routes.handle(self.command, self.path)
            self.send_response(status)
            if status is HTTPStatus.OK:
                self.send_header("Content-Type", "application/json")
            elif status is HTTPStatus.METHOD_NOT_ALLOWED:
                self.send_header("Allow", "GET,HEAD")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        do_GET = do_HEAD = do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = _respond

        def log_message(self, format: str, *args: object) -> None:
            log.debug("%s - %s", self.address_string(), format % args)

    return ThreadingHTTPServer((host, port), _Handler)