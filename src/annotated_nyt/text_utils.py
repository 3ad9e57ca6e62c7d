"""Cleanup and splitting helpers shared by every derived-list accessor."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from typing import Optional, TypeVar

T = TypeVar("T")

LINE_SEPARATOR = "\n"
SECTION_SEPARATOR = ";"


def _is_separator(char: str) -> bool:
    # Zs, Zl and Zp; control characters such as "\n" are left alone.
    return unicodedata.category(char).startswith("Z")


def clean_text(value: Optional[str]) -> Optional[str]:
    """Replace Unicode separator characters with spaces and trim.

    Returns ``None`` for missing input or when nothing is left after trimming.
    """
    if value is None:
        return None
    normalised = "".join(" " if _is_separator(char) else char for char in value)
    normalised = normalised.strip()
    return normalised or None


def _split(value: Optional[str], separator: str) -> list[str]:
    cleaned = clean_text(value)
    if cleaned is None:
        return []
    parts = cleaned.split(separator)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def split_lines(value: Optional[str]) -> list[str]:
    """Split cleaned text into lines."""
    return _split(value, LINE_SEPARATOR)


def split_sections(value: Optional[str]) -> list[str]:
    """Split a semicolon-delimited section string into trimmed names."""
    parts = [part.strip() for part in _split(value, SECTION_SEPARATOR)]
    while parts and not parts[-1]:
        parts.pop()
    return parts


def null_list_as_empty(values: Optional[Iterable[T]]) -> list[T]:
    """Return a new list of ``values``, or an empty list when missing."""
    if values is None:
        return []
    return list(values)


def present(value: Optional[T]) -> Optional[T]:
    """Collapse the empty string to ``None``; other values pass through."""
    if value is None or value == "":
        return None
    return value
