"""
Logging Configuration
Sets up loguru sinks for the advent_of_code package.

The package disables its own log records on import; `setup_logging` turns
them back on for command line runs.
"""
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name} - {message}"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Route advent_of_code log records to stderr and optionally a file.

    Args:
        level: Minimum level for the console sink (e.g. "DEBUG", "WARNING")
        log_file: Optional path of a log file, which always records DEBUG.
    """
    logger.remove()  # Remove default and earlier handlers
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="30 days", level="DEBUG", format=LOG_FORMAT)
    logger.enable("advent_of_code")
    logger.debug("Logging initialized.")
