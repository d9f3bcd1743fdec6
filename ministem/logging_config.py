"""Logging configuration for the command line"""
import logging
import sys


def setup_logging(level: int = logging.WARNING):
    """
    Configure a single console handler on the root logger.

    Args:
        level: Console logging level (DEBUG with --verbose)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # stdout carries the stems, keep logs on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    logging.debug(f"Logging configured: console={logging.getLevelName(level)}")
