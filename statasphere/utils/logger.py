"""
Logging configuration

One loguru logger for the whole app: a colourised console sink at the
configured level, a daily application log, and a longer-lived error log
under ``settings.log_dir``.
"""
import os
import sys

from loguru import logger

from statasphere.config import get_settings

settings = get_settings()

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def _log_path(prefix: str) -> str:
    return os.path.join(settings.log_dir, f"{prefix}_{{time:YYYY-MM-DD}}.log")


def setup_logger():
    """Replace loguru's default handler with the app's sinks"""
    logger.remove()

    logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=settings.log_level)

    # Warehouse query failures land in both files
    logger.add(_log_path("statasphere"), rotation="00:00", retention="30 days", compression="zip", level="INFO")
    logger.add(_log_path("errors"), rotation="00:00", retention="90 days", level="ERROR")

    return logger


log = setup_logger()
