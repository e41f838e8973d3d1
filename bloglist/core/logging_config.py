"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a console
handler. Modules log through ``logging.getLogger(__name__)``; this module
only makes sure those records end up somewhere, exactly once.
"""

# Standard library imports
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    If handlers are already attached (for example when the test client
    builds the application repeatedly) only the level is updated.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
