import os
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


def setup_logging(level: Optional[str] = None) -> None:
    """Настроить loguru: один вывод в stderr, уровень из аргумента или LOG_LEVEL."""
    level = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
