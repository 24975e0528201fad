import logging
from typing import Optional
from booking_rules.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(name: Optional[str]) -> int:
    """Numeric level for a level name; unknown names fall back to INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logger = logging.getLogger("booking_rules")
logger.setLevel(resolve_log_level(settings.LOG_LEVEL))
logger.addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.
    The booking UI host calls this once at startup; library code only uses child loggers.
    """
    if level:
        logger.setLevel(resolve_log_level(level))
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
