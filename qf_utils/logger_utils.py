import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "questify"

_LOG_FORMAT = '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'


def get_logger(name: str = LOGGER_NAME, log_level: Optional[str] = "INFO") -> logging.Logger:
    """
    Returns a logger that writes one JSON object per line to stdout.
    Handlers are attached once, so repeated calls are safe.
    """
    logger = logging.getLogger(name)
    if log_level:
        logger.setLevel(log_level.upper())
    logger.propagate = False

    if not logger.handlers:
        # Course material is often non-English; keep it readable in the logs
        formatter = jsonlogger.JsonFormatter(_LOG_FORMAT, json_ensure_ascii=False)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_log_level(log_level: str) -> None:
    logging.getLogger(LOGGER_NAME).setLevel(log_level.upper())


# Default logger instance
logger = get_logger()
