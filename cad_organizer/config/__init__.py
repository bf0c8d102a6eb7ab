# -*- coding: utf-8 -*-
"""
Configuration package (config)
"""

from .config import (
    LOGGER_NAME,
    LOG_LEVEL,
    LOG_FILE,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    VALID_LOG_LEVELS,
    DEFAULT_MODE,
    REPORT_PREFIX,
    REPORT_SUFFIX,
    REPORT_FILE_DATE_FORMAT,
    REPORT_HUMAN_DATE_FORMAT,
    REPORT_ENCODING,
    validate_config,
)

__all__ = [
    'LOGGER_NAME',
    'LOG_LEVEL',
    'LOG_FILE',
    'LOG_FORMAT',
    'LOG_DATE_FORMAT',
    'LOG_MAX_BYTES',
    'LOG_BACKUP_COUNT',
    'VALID_LOG_LEVELS',
    'DEFAULT_MODE',
    'REPORT_PREFIX',
    'REPORT_SUFFIX',
    'REPORT_FILE_DATE_FORMAT',
    'REPORT_HUMAN_DATE_FORMAT',
    'REPORT_ENCODING',
    'validate_config',
]
