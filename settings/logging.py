"""Logging configuration for the command line entry points."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <cyan>{extra[job]}</cyan> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {extra[job]} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(job: str, level: str = "INFO", to_file: bool = False, log_dir: Path | None = None):
    """Configure loguru for one entry point (``run``, ``build_cache``).

    ``GB_LOG_LEVEL`` overrides the console level. With ``to_file`` a DEBUG log
    named after the job is written to ``log_dir`` (default ``GB_LOG_DIR``) and
    rotated daily. Returns the logger and the log file path, if any.
    """
    level = (LOG_LEVEL or level).upper()
    logger.remove()
    logger.configure(extra={"job": job})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if not to_file:
        return logger, None

    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / f"{job}.log"
    logger.add(
        path,
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="00:00",
        retention="7 days",
        compression="gz",
    )
    logger.debug("{} logging at {} to {}", job, level, path)
    return logger, path
