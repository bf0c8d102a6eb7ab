# -*- coding: utf-8 -*-
"""
Organizer Configuration Module

Global settings for the CAD file organizer. Category rules are fixed in
cad_organizer.classifier; the values here only shape logging and the report.
"""

import logging
import os

from dotenv import load_dotenv

# Load ambient options from a local .env file
load_dotenv()

# ========================
# Logging
# ========================
LOGGER_NAME = "cad_organizer"
LOG_LEVEL = os.getenv("CAD_ORGANIZER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("CAD_ORGANIZER_LOG_FILE", "") or None
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 5
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ========================
# Relocation
# ========================
DEFAULT_MODE = "MOVE"

# ========================
# Report
# ========================
REPORT_PREFIX = "relatorio-organizacao-"
REPORT_SUFFIX = ".txt"
REPORT_FILE_DATE_FORMAT = "%Y-%m-%d-%H-%M-%S"
REPORT_HUMAN_DATE_FORMAT = "%d/%m/%Y %H:%M:%S"
REPORT_ENCODING = "utf-8"


def validate_config(log_level: str = None) -> bool:
    """
    Validate configuration values

    Args:
        log_level (str): Level to check instead of LOG_LEVEL

    Returns:
        bool: True when every value is usable

    Raises:
        ValueError: On an unknown log level or bad rotation settings
    """
    level = (log_level or LOG_LEVEL).upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(VALID_LOG_LEVELS)}."
        )
    if not isinstance(getattr(logging, level, None), int):
        raise ValueError(f"logging has no level named {level!r}.")

    if LOG_MAX_BYTES < 1:
        raise ValueError("LOG_MAX_BYTES must be at least 1.")

    if LOG_BACKUP_COUNT < 0:
        raise ValueError("LOG_BACKUP_COUNT must not be negative.")

    return True


if __name__ == "__main__":
    print("Logger:", LOGGER_NAME)
    print("Log level:", LOG_LEVEL)
    print("Log file:", LOG_FILE or "(console only)")
    try:
        print("Config valid:", validate_config())
    except ValueError as e:
        print(f"Config invalid: {e}")
