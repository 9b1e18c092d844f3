"""Logging configuration for clicky."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the ``clicky`` logger namespace.

    Silent unless asked: ``-v`` logs INFO to stderr, ``-vv`` DEBUG. A log file
    receives the same records; on its own it logs at INFO.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    if not handlers:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger("clicky")
    logger.setLevel(level)
    # Replace handlers from an earlier call in the same process
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("clicky starting | level=%s", logging.getLevelName(level))
