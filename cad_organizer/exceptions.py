# -*- coding: utf-8 -*-
"""
Exception Module

Exception hierarchy for the organizer. Per-file filesystem failures are never
raised from a run; they are recorded in the RunResult instead.
"""

from pathlib import Path
from typing import Optional


class OrganizerError(Exception):
    """Base error for the project."""


class InvalidModeError(OrganizerError, ValueError):
    """Mode token is neither COPY nor MOVE."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid mode: {token!r}. Use MOVE or COPY.")


class ReportError(OrganizerError):
    """The run report could not be written."""

    def __init__(self, path: Optional[Path], cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write report {path}: {cause}")
