# -*- coding: utf-8 -*-
"""
File Organization Module

Lists the immediate children of a source folder once, classifies every regular
file and copies or moves it into <dest_root>/<CATEGORY>/. Existing files with
the same name are overwritten. Filesystem errors never escape a run; they are
recorded in the returned RunResult.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import List

from .classifier import classify
from .models import (
    ErrorKind,
    Mode,
    RelocationRequest,
    RunAccumulator,
    RunError,
    RunResult,
    format_processed_line,
)

logger = logging.getLogger(__name__)


class FileOrganizer:
    """
    Single-pass organizer

    One instance may serve many runs; every run gets its own accumulator.
    """

    def run(self, request: RelocationRequest) -> RunResult:
        """
        Organize the source folder described by the request

        Args:
            request (RelocationRequest): Source folder, destination root and mode

        Returns:
            RunResult: Counters plus processed and error logs. A structural
            failure (bad source, destination root, listing) is recorded as
            a single error and ends the run early.
        """
        acc = RunAccumulator()
        source_dir = Path(request.source_dir)
        dest_root = Path(request.dest_root)

        logger.info(
            f"Run started - source: {source_dir}, destination: {dest_root}, "
            f"mode: {request.mode.value}"
        )

        if not self._validate_source(source_dir, acc):
            return self._finish(acc)

        if not self._prepare_dest_root(dest_root, acc):
            return self._finish(acc)

        try:
            entries = self._list_entries(source_dir)
        except OSError as e:
            error = RunError(ErrorKind.LISTING_FAILED, f"{source_dir} | {e}")
            logger.error(str(error))
            acc.record_error(error)
            return self._finish(acc)

        logger.debug(f"{len(entries)} entries found in {source_dir}")

        for entry in entries:
            self._process_entry(entry, dest_root, request.mode, acc)

        return self._finish(acc)

    def _validate_source(self, source_dir: Path, acc: RunAccumulator) -> bool:
        if source_dir.is_dir():
            return True

        if source_dir.exists():
            detail = f"{source_dir} is not a folder"
        else:
            detail = f"{source_dir} does not exist"
        error = RunError(ErrorKind.INVALID_SOURCE, detail)
        logger.error(str(error))
        acc.record_error(error)
        return False

    def _prepare_dest_root(self, dest_root: Path, acc: RunAccumulator) -> bool:
        try:
            dest_root.mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            error = RunError(ErrorKind.DEST_ROOT_FAILED, f"{dest_root} | {e}")
            logger.error(str(error))
            acc.record_error(error)
            return False

    def _list_entries(self, source_dir: Path) -> List[Path]:
        # Listing completes before any entry is processed
        return list(source_dir.iterdir())

    def _process_entry(
        self,
        entry: Path,
        dest_root: Path,
        mode: Mode,
        acc: RunAccumulator
    ) -> None:
        """
        Relocate one directory entry, recording the outcome

        Args:
            entry (Path): Child of the source folder
            dest_root (Path): Destination root
            mode (Mode): COPY or MOVE
            acc (RunAccumulator): Run accumulator
        """
        filename = entry.name

        try:
            is_regular = entry.is_file()
        except OSError as e:
            error = RunError(ErrorKind.RELOCATION_FAILED, self._describe_cause(e), filename)
            logger.warning(str(error))
            acc.record_error(error)
            return

        if not is_regular:
            logger.debug(f"Skipped (not a regular file): {filename}")
            acc.record_skipped()
            return

        category = classify(filename)
        category_dir = dest_root / category.value

        try:
            category_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = RunError(ErrorKind.CATEGORY_FOLDER_FAILED, f"{category_dir} | {e}", filename)
            logger.warning(str(error))
            acc.record_error(error)
            return

        destination = category_dir / filename

        try:
            self._relocate(entry, destination, mode)
        except OSError as e:
            error = RunError(ErrorKind.RELOCATION_FAILED, self._describe_cause(e), filename)
            logger.warning(str(error))
            acc.record_error(error)
            return

        line = format_processed_line(mode, filename, category)
        logger.info(line)
        acc.record_processed(line)

    def _relocate(self, source: Path, destination: Path, mode: Mode) -> None:
        """
        Copy or move source to destination, replacing an existing file

        Raises:
            OSError: Any failure of the underlying copy or move
        """
        if destination.exists() and os.path.samefile(source, destination):
            logger.debug(f"Already in place: {destination}")
            return

        # An empty folder with the file's name is replaced, a non-empty one is an error
        if destination.is_dir():
            if any(destination.iterdir()):
                raise IsADirectoryError(f"Destination is a non-empty folder: {destination}")
            destination.rmdir()

        if mode is Mode.COPY:
            shutil.copy2(str(source), str(destination))
            return

        if destination.exists():
            destination.unlink()
        shutil.move(str(source), str(destination))

    def _describe_cause(self, error: OSError) -> str:
        if isinstance(error, PermissionError):
            return f"Permission denied: {error}"
        if isinstance(error, FileNotFoundError):
            return f"File not found: {error}"
        if isinstance(error, shutil.Error):
            return f"Copy/move error: {error}"
        return f"OS error: {error}"

    def _finish(self, acc: RunAccumulator) -> RunResult:
        result = acc.freeze()
        logger.info(
            f"Run finished - processed: {result.processed_count}, "
            f"skipped: {result.skipped_count}, errors: {result.error_count}"
        )
        return result


def organize_files(source_dir, dest_root, mode: Mode = Mode.MOVE) -> RunResult:
    """
    Convenience wrapper around FileOrganizer().run()

    Args:
        source_dir: Folder whose files are organized (str or Path)
        dest_root: Root under which category folders are created (str or Path)
        mode (Mode): COPY or MOVE

    Returns:
        RunResult: Outcome of the run
    """
    request = RelocationRequest(Path(source_dir), Path(dest_root), mode)
    return FileOrganizer().run(request)
