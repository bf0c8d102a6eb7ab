# -*- coding: utf-8 -*-
"""
File Classification Module

Maps a filename to one of the fixed destination categories using keyword and
extension rules. No filesystem access happens here.

Rule order, first match wins:
    1. EXOCAD keyword anywhere in the name (beats any extension)
    2. .stl -> STL
    3. .rar/.zip/.7z -> PACKAGES
    4. anything else -> OTHER
"""

from enum import Enum


class Category(Enum):
    """Destination category; the value is the folder name under the destination root."""
    EXOCAD = "EXOCAD"
    STL = "STL"
    PACKAGES = "PACKAGES"
    OTHER = "OTHER"


# Implants, anatomy, libraries and other dental CAD vocabulary (pt/en)
EXOCAD_KEYWORDS = (
    "exocad",
    "implant", "implante",
    "anatomia", "anatomy",
    "library", "biblioteca",
    "scanbody",
    "abutment",
    "component", "componente",
    "dentalcad",
    "tooth", "dente",
    "coroa", "crown",
)

STL_EXTENSIONS = frozenset({"stl"})
PACKAGE_EXTENSIONS = frozenset({"rar", "zip", "7z"})


def extract_extension(filename: str) -> str:
    """
    Return the text after the last dot, or "" when there is none

    Args:
        filename (str): File name (not lower-cased here)

    Returns:
        str: Extension without the dot; "" for "readme" and "name."
    """
    idx = filename.rfind(".")
    if idx < 0 or idx == len(filename) - 1:
        return ""
    return filename[idx + 1:]


def contains_any(text: str, words) -> bool:
    return any(word in text for word in words)


def classify(filename: str) -> Category:
    """
    Classify a filename

    Args:
        filename (str): Bare file name, e.g. "Implant_Model.stl"

    Returns:
        Category: The destination category
    """
    lower = filename.lower()

    if contains_any(lower, EXOCAD_KEYWORDS):
        return Category.EXOCAD

    ext = extract_extension(lower)

    if ext in STL_EXTENSIONS:
        return Category.STL

    if ext in PACKAGE_EXTENSIONS:
        return Category.PACKAGES

    return Category.OTHER
