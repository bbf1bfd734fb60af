"""
Simple logging setup for the transaction analytics tools.
"""

import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    Set up logging for the entire app.

    Call this ONCE at the start (the report CLI and the dashboard both do).

    What it does:
    1. Sends everything to the root logger (DEBUG and above)
    2. Shows `level` and above in the terminal (INFO by default, less noise)

    Example:
        from configs import setup_logging
        setup_logging()  # That's it!
    """
    # Example output: "2024-01-15 10:30:45 - INFO - Loaded 10 transactions"
    log_format = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)  # Capture everything

    # Remove any existing handlers (prevents duplicates on Streamlit reruns)
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(log_format)
    logger.addHandler(console)


def get_logger(name):
    """
    Get a logger for the module.

    Args:
        name: Usually just pass __name__ (the module name)

    Returns:
        A logger you can use

    Example:
        from configs import get_logger
        logger = get_logger(__name__)
        logger.info("Loaded transactions")
    """
    return logging.getLogger(name)


# ------------------------------------------------------------------------------
# LOG LEVELS USED IN THIS PROJECT
# ------------------------------------------------------------------------------
#
# logger.debug    → per-query details from the analyzer
# logger.info     → load/clean summaries ("Loaded 10 transactions")
# logger.warning  → recoverable surprises ("Settings file not found, using defaults")
# logger.error    → load or validation failures, right before raising
# ------------------------------------------------------------------------------
