"""Logging configuration for html2plain.

Converted text goes to stdout, so every sink here writes to stderr or a file.
Library modules only log at DEBUG (conversion sizes, fetches) and TRACE
(walker item counts and peak stack depth); the CLI picks the level.
"""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message}"

# (flag, level) pairs, first match wins; no flag means INFO.
_FLAG_LEVELS = (("debug", "TRACE"), ("verbose", "DEBUG"), ("quiet", "WARNING"))


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace loguru's default handler with html2plain's sinks.

    Args:
        level: Log level for every sink (TRACE shows per-document walk stats)
        log_file: Optional plain-text copy of the stderr log, e.g. for batch runs
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, level=level, colorize=False)


def get_log_level(verbose: bool = False, debug: bool = False, quiet: bool = False) -> str:
    """Map the CLI's --debug/--verbose/--quiet flags to a loguru level.

    --debug wins over --verbose, and both win over --quiet.
    """
    flags = {"debug": debug, "verbose": verbose, "quiet": quiet}
    for flag, level in _FLAG_LEVELS:
        if flags[flag]:
            return level
    return "INFO"
