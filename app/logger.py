"""
Centralized logger for the proxy server
"""
import logging
import os


def get_logger(name: str = "showcase", level: str = None) -> logging.Logger:
    """
    Return the shared application logger.
    Use:
        from app.logger import LOG
        LOG.info("Message")
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger(name)
    try:
        logger.setLevel(level)
    except ValueError:
        logger.setLevel(logging.INFO)

    # Avoid duplicate handlers when the module is re-imported
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False

    # Request lines are noise next to our own audit logging
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logger


LOG = get_logger()
