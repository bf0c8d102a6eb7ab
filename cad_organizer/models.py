# -*- coding: utf-8 -*-
"""
Data Model Module

Request, error and result types shared by the organizer, the report and the CLI.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from .classifier import Category
from .exceptions import InvalidModeError


class Mode(Enum):
    """Relocation mode"""
    COPY = "COPY"  # original stays in the source folder
    MOVE = "MOVE"  # original is removed

    @classmethod
    def parse(cls, token: str) -> 'Mode':
        """
        Resolve a case-insensitive mode token

        Args:
            token (str): "copy", "MOVE", " Copy " ...

        Returns:
            Mode: The matching mode

        Raises:
            InvalidModeError: When the token is neither COPY nor MOVE
        """
        normalized = (token or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidModeError(token) from None


@dataclass(frozen=True)
class RelocationRequest:
    source_dir: Path
    dest_root: Path
    mode: Mode = Mode.MOVE


class ErrorKind(Enum):
    """Error tag; structural kinds abort the run, the others affect one entry."""
    INVALID_SOURCE = "invalid_source"
    DEST_ROOT_FAILED = "dest_root_failed"
    LISTING_FAILED = "listing_failed"
    CATEGORY_FOLDER_FAILED = "category_folder_failed"
    RELOCATION_FAILED = "relocation_failed"

    @property
    def is_structural(self) -> bool:
        return self in (
            ErrorKind.INVALID_SOURCE,
            ErrorKind.DEST_ROOT_FAILED,
            ErrorKind.LISTING_FAILED,
        )


_ERROR_TITLES = {
    ErrorKind.INVALID_SOURCE: "Invalid source",
    ErrorKind.DEST_ROOT_FAILED: "Could not create destination root",
    ErrorKind.LISTING_FAILED: "Could not list source",
    ErrorKind.CATEGORY_FOLDER_FAILED: "Could not create category folder for",
    ErrorKind.RELOCATION_FAILED: "Failed with",
}


@dataclass(frozen=True)
class RunError:
    kind: ErrorKind
    detail: str
    filename: Optional[str] = None

    def __str__(self) -> str:
        title = _ERROR_TITLES[self.kind]
        if self.filename is not None:
            return f"{title} {self.filename} | {self.detail}"
        return f"{title}: {self.detail}"


def format_processed_line(mode: Mode, filename: str, category: Category) -> str:
    return f"[{mode.value}] {filename} -> {category.value}"


@dataclass(frozen=True)
class RunResult:
    """
    Outcome of one run

    processed_log holds one line per relocated file and errors one RunError per
    failure, both in the order they happened.
    """
    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    processed_log: Tuple[str, ...] = ()
    errors: Tuple[RunError, ...] = ()

    @property
    def error_log(self) -> Tuple[str, ...]:
        return tuple(str(error) for error in self.errors)

    @property
    def per_entry_error_count(self) -> int:
        return sum(1 for error in self.errors if not error.kind.is_structural)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


@dataclass
class RunAccumulator:
    """Mutable counterpart of RunResult, owned by the organizer during a run."""
    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    processed_log: List[str] = field(default_factory=list)
    errors: List[RunError] = field(default_factory=list)

    def record_processed(self, line: str) -> None:
        self.processed_count += 1
        self.processed_log.append(line)

    def record_skipped(self) -> None:
        self.skipped_count += 1

    def record_error(self, error: RunError) -> None:
        self.error_count += 1
        self.errors.append(error)

    def freeze(self) -> RunResult:
        return RunResult(
            processed_count=self.processed_count,
            skipped_count=self.skipped_count,
            error_count=self.error_count,
            processed_log=tuple(self.processed_log),
            errors=tuple(self.errors),
        )
