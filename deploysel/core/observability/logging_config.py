"""
Logging configuration — one setup call per process.

Called by ``deploysel.main`` before any command runs. Modules log through
``logging.getLogger(__name__)``; the selector engine logs only at DEBUG.
Messages meant for the user (auto-selection notices) are not logged at
all: selectors return them and the CLI prints them.

Level precedence:
    --debug / --verbose / --quiet  >  DEPLOYSEL_LOG_LEVEL  >  WARNING

DEPLOYSEL_LOG_FILE adds a file handler; DEPLOYSEL_LOG_FILE_LEVEL sets
its level independently of the console.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LEVEL = "DEPLOYSEL_LOG_LEVEL"
ENV_FILE = "DEPLOYSEL_LOG_FILE"
ENV_FILE_LEVEL = "DEPLOYSEL_LOG_FILE_LEVEL"

# Console format per verbosity tier: (format, datefmt)
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    logging.WARNING: ("%(message)s", None),
}

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%Y-%m-%d %H:%M:%S")

# Client libraries that a real deploy-store adapter would pull in
_NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Configure the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path for a log file with full detail.
        log_file_level: Level for the file; defaults to ``level``.
        quiet_third_party: Hold client-library loggers at WARNING unless
            the console is at DEBUG.
    """
    console_level = _parse_level(level)
    tier = max(t for t in _CONSOLE_FORMATS if t <= max(console_level, logging.DEBUG))
    fmt, datefmt = _CONSOLE_FORMATS[tier]

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(*_FILE_FORMAT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name → numeric level; unknown names mean WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
