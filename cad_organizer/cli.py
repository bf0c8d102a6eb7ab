# -*- coding: utf-8 -*-
"""
CLI Module

Command line entry point: parses arguments, runs the organizer, writes the
report and prints a summary.

    cad-organizer <source> <destination> [MOVE|COPY]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_MODE, LOG_FILE, LOG_LEVEL, VALID_LOG_LEVELS, validate_config
from .exceptions import InvalidModeError, ReportError
from .logger import AppLogger
from .models import Mode, RelocationRequest, RunResult
from .organizer import FileOrganizer
from .report import write_report

EXIT_OK = 0
EXIT_RUN_ERRORS = 1
EXIT_REPORT_FAILED = 3


def parse_mode(token: str) -> Mode:
    """argparse type for the mode argument."""
    try:
        return Mode.parse(token)
    except InvalidModeError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cad-organizer",
        description="Sort the files of a folder into EXOCAD, STL, PACKAGES and OTHER subfolders.",
        epilog='Example: cad-organizer "D:\\BACKUP\\Downloads" "D:\\organized" COPY'
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Folder whose files are organized (not recursive)"
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="Root folder for the category subfolders, created if missing"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        type=parse_mode,
        default=Mode.parse(DEFAULT_MODE),
        help="MOVE (default) or COPY, case-insensitive"
    )
    parser.add_argument(
        "--no-report",
        action="store_true",
        help="Do not write the report file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=VALID_LOG_LEVELS,
        help="Log level"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=LOG_FILE,
        help="Also write logs to this rotating file"
    )
    return parser


def print_summary(request: RelocationRequest, result: RunResult) -> None:
    print("\n===== SUMMARY =====")
    print(f"Source     : {request.source_dir}")
    print(f"Destination: {request.dest_root}")
    print(f"Mode       : {request.mode.value}")
    print(f"Processed  : {result.processed_count}")
    print(f"Skipped    : {result.skipped_count}")
    print(f"Errors     : {result.error_count}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function

    Args:
        argv (Optional[List[str]]): Arguments, defaults to sys.argv[1:]

    Returns:
        int: 0 on success, 1 when the run recorded errors, 3 when only the
        report failed. Invalid arguments exit with argparse's code 2.
    """
    args = build_parser().parse_args(argv)

    try:
        validate_config(args.log_level)
    except ValueError as e:
        print(f"Configuration error: {e}")
        return EXIT_RUN_ERRORS

    try:
        logger = AppLogger.initialize(log_level=args.log_level, log_file=args.log_file)
    except OSError as e:
        print(f"Configuration error: cannot open log file {args.log_file}: {e}")
        return EXIT_RUN_ERRORS

    request = RelocationRequest(args.source, args.destination, args.mode)

    try:
        result = FileOrganizer().run(request)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return EXIT_RUN_ERRORS

    report_failed = False
    if not args.no_report:
        try:
            report_path = write_report(request, result)
            print(f"Report saved to: {report_path}")
        except ReportError as e:
            report_failed = True
            print(f"Report generation failed: {e.cause}")
            logger.debug("Report failure details", exc_info=True)

    print_summary(request, result)

    if result.has_errors:
        return EXIT_RUN_ERRORS
    if report_failed:
        return EXIT_REPORT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
