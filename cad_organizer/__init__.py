# -*- coding: utf-8 -*-
"""
CAD file organizer package (cad_organizer)

Sorts the files of a folder into EXOCAD, STL, PACKAGES and OTHER subfolders
and reports what was copied or moved.
"""

from .classifier import Category, classify, extract_extension
from .exceptions import OrganizerError, InvalidModeError, ReportError
from .logger import AppLogger
from .models import (
    ErrorKind,
    Mode,
    RelocationRequest,
    RunAccumulator,
    RunError,
    RunResult,
)
from .organizer import FileOrganizer, organize_files
from .report import render_report, write_report

__version__ = "1.0.0"

__all__ = [
    'Category',
    'classify',
    'extract_extension',
    'OrganizerError',
    'InvalidModeError',
    'ReportError',
    'AppLogger',
    'ErrorKind',
    'Mode',
    'RelocationRequest',
    'RunAccumulator',
    'RunError',
    'RunResult',
    'FileOrganizer',
    'organize_files',
    'render_report',
    'write_report',
]
