"""
Logging setup shared by the paxsheets API and CLI.

Every line looks like:
    2026-01-06T14:05:52Z [api] DEBUG Resolved 5 spans with mention_match: ...

LOG_LEVEL picks the verbosity:
    TRACE   every alias window the matchers try
    DEBUG   one summary per resolved comment
    INFO    startup and per-request lines (default)
    WARNING / ERROR

Usage:
    from attendance.logging_config import configure_logging

    configure_logging(source="cli")
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
import os
import re
import sys
from datetime import UTC, datetime

# Below DEBUG; used for per-window matcher output
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS_BY_NAME = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Access log lines for the liveness probe, e.g. '"GET /health HTTP/1.1" 200'
_HEALTH_PROBE = re.compile(r'"GET /(?:api/)?health[ ?]')

# Loggers that get our handler instead of their own
_ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Chatty client libraries (pulled in by TestClient)
_QUIET_LOGGERS = ("httpx", "httpcore")


class ISO8601Formatter(logging.Formatter):
    """`<UTC timestamp> [<source>] <LEVEL> <message>`, tracebacks on following lines."""

    def __init__(self, source: str = "app"):
        super().__init__(fmt=f"%(asctime)s [{source}] %(levelname)s %(message)s")
        self.source = source

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class HealthCheckFilter(logging.Filter):
    """Drop health probe access lines unless running at DEBUG or below."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True
        return _HEALTH_PROBE.search(record.getMessage()) is None


def parse_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a LOG_LEVEL string to a logging level, falling back to default."""
    if not name:
        return default
    return _LEVELS_BY_NAME.get(name.strip().upper(), default)


def _effective_level(level: int | None, debug: bool | None) -> int:
    if level is not None:
        return level
    from_env = parse_level(os.getenv("LOG_LEVEL"))
    return min(from_env, logging.DEBUG) if debug else from_env


def configure_logging(
    source: str = "app",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Install the single stdout handler on the root logger.

    Safe to call more than once; earlier handlers are replaced.

    Args:
        source: Tag shown in brackets ("api", "cli")
        level: Explicit level; when omitted LOG_LEVEL is used
        debug: Raise LOG_LEVEL to at least DEBUG

    Returns:
        The root logger
    """
    level = _effective_level(level, debug)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers[:] = [handler]
        routed.setLevel(level)
        routed.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
