# -*- coding: utf-8 -*-
"""
Logging Module

Configures the package logger once per CLI invocation. Modules log through
logging.getLogger(__name__), which propagates into it.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

from .config import (
    LOGGER_NAME,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
)


class AppLogger:
    """
    Package logger with a console handler and an optional rotating log file
    """

    _handlers: List[logging.Handler] = []

    @classmethod
    def initialize(cls, log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
        """
        (Re)configure the package logger, dropping handlers of an earlier call

        Args:
            log_level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file (Optional[str]): Rotating log file, console only when None

        Returns:
            logging.Logger: The package logger

        Raises:
            OSError: When the log file or its folder cannot be created
        """
        cls.shutdown()

        logger = logging.getLogger(LOGGER_NAME)
        level = getattr(logging, log_level.upper(), logging.INFO)
        logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            ))

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        cls._handlers = handlers
        return logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        return logging.getLogger(LOGGER_NAME)

    @classmethod
    def shutdown(cls) -> None:
        """Detach and close the handlers added by initialize()."""
        logger = logging.getLogger(LOGGER_NAME)
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
