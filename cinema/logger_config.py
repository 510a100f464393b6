"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger

from cinema.core_setting import settings


log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)

loguru_logger.remove()  # Drop the default handler so every line uses our format
loguru_logger.add(sys.stdout, format=log_format, level=settings.LOG_LEVEL)

logger = loguru_logger
