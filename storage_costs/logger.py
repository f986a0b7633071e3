import logging
import sys
from colorlog import ColoredFormatter

from storage_costs.config import settings

LOGGER_NAME = "storage_costs"


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)
    else:
        for existing in logger.handlers:
            existing.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


# Logger defaults to the configured mode; call configure_logger() to switch later.
DEBUG_MODE = settings.debug_mode
logger = setup_logger(debug_mode=DEBUG_MODE)


def configure_logger(debug_mode: bool):
    """Re-apply the log level, e.g. when the CLI is started with --debug."""
    global DEBUG_MODE
    DEBUG_MODE = debug_mode
    setup_logger(debug_mode=debug_mode)
    if debug_mode:
        logger.debug("Debug mode is active.")
