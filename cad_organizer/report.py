# -*- coding: utf-8 -*-
"""
Report Module

Renders a finished run as a plain-text report and writes it under the
destination root as relatorio-organizacao-<timestamp>.txt.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config import (
    REPORT_PREFIX,
    REPORT_SUFFIX,
    REPORT_FILE_DATE_FORMAT,
    REPORT_HUMAN_DATE_FORMAT,
    REPORT_ENCODING,
)
from .exceptions import ReportError
from .models import RelocationRequest, RunResult

logger = logging.getLogger(__name__)

REPORT_HEADER = "===== ORGANIZATION REPORT ====="
ITEMS_HEADER = "===== ITEMS ====="
ERRORS_HEADER = "===== ERRORS (DETAILS) ====="


def file_timestamp(moment: datetime) -> str:
    """Sortable timestamp used in the report file name, e.g. 2026-10-19-14-03-59."""
    return moment.strftime(REPORT_FILE_DATE_FORMAT)


def human_timestamp(moment: datetime) -> str:
    return moment.strftime(REPORT_HUMAN_DATE_FORMAT)


def report_filename(moment: datetime) -> str:
    return f"{REPORT_PREFIX}{file_timestamp(moment)}{REPORT_SUFFIX}"


def render_report(
    request: RelocationRequest,
    result: RunResult,
    generated_at: datetime
) -> List[str]:
    """
    Build the report lines

    Args:
        request (RelocationRequest): Parameters of the run
        result (RunResult): Outcome of the run
        generated_at (datetime): Time printed in the report

    Returns:
        List[str]: Report lines without line terminators. The items and
        errors sections only appear when they have entries.
    """
    lines = [
        REPORT_HEADER,
        f"Date/Time  : {human_timestamp(generated_at)}",
        f"Source     : {request.source_dir}",
        f"Destination: {request.dest_root}",
        f"Mode       : {request.mode.value}",
        "",
        f"Processed: {result.processed_count}",
        f"Skipped  : {result.skipped_count}",
        f"Errors   : {result.error_count}",
        "",
    ]

    if result.processed_log:
        lines.append(ITEMS_HEADER)
        lines.extend(result.processed_log)
        lines.append("")

    if result.errors:
        lines.append(ERRORS_HEADER)
        lines.extend(result.error_log)
        lines.append("")

    return lines


def write_report(
    request: RelocationRequest,
    result: RunResult,
    generated_at: Optional[datetime] = None
) -> Path:
    """
    Write the report under the destination root, replacing a same-named file

    Args:
        request (RelocationRequest): Parameters of the run
        result (RunResult): Outcome of the run
        generated_at (Optional[datetime]): Report time, defaults to now

    Returns:
        Path: Path of the written report

    Raises:
        ReportError: When the file cannot be written
    """
    moment = generated_at or datetime.now()
    report_path = Path(request.dest_root) / report_filename(moment)
    lines = render_report(request, result, moment)

    try:
        with open(report_path, "w", encoding=REPORT_ENCODING, newline="\n") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        logger.error(f"Report write failed: {report_path} | {e}")
        raise ReportError(report_path, e) from e

    logger.info(f"Report saved to: {report_path}")
    return report_path
