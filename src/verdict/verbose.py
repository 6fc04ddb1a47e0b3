"""Log destinations for suite runs.

A run writes two files into its output directory:

    run.log     suite progress and per-check outcomes from the runner (INFO),
                echoed to stderr in verbose mode
    checks.log  diagnostics from the check modules (``verdict.assertions.*``)
                at a level chosen on the command line
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path

RUN_LOGGER = "verdict.runner"
CHECKS_LOGGER = "verdict.assertions"


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"

    def to_logging(self) -> int:
        return getattr(logging, self.name)


def _attach_file(logger: logging.Logger, path: Path, fmt: str) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(path, mode="a")
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)


def setup_run_logging(
    log_dir: Path,
    check_level: LogLevel = LogLevel.DEBUG,
    verbose: bool = False,
) -> logging.Logger:
    """Point the runner and check loggers at their files; return the runner logger.

    Calling it again for another run replaces the previous handlers.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    checks = logging.getLogger(CHECKS_LOGGER)
    checks.setLevel(check_level.to_logging())
    _attach_file(checks, log_dir / "checks.log", "[%(asctime)s] %(levelname)s %(name)s: %(message)s")

    run = logging.getLogger(RUN_LOGGER)
    run.setLevel(logging.INFO)
    _attach_file(run, log_dir / "run.log", "[%(asctime)s] %(message)s")

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        run.addHandler(stderr_handler)

    return run
