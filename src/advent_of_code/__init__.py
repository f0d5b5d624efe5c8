"""Advent of Code 2024 solutions."""

from loguru import logger

__version__ = "0.1.0"

# Silent when used as a library; the CLI enables it through setup_logging.
logger.disable("advent_of_code")
