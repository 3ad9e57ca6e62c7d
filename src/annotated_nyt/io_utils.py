"""Utilities for reading and writing JSON Lines corpus files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import orjson


def _coerce_path(path: str | Path) -> Path:
    """Accept a string or Path for a corpus file, expanding a leading ``~``."""
    return Path(path).expanduser()


def iter_jsonl(path: str | Path) -> Iterator[tuple[int, dict[str, Any]]]:
    """Yield ``(line_number, row)`` pairs, skipping blank lines.

    A line that is not valid JSON raises ``ValueError`` naming the file and line.
    """
    resolved_path = _coerce_path(path)
    with resolved_path.open("rb") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                row = orjson.loads(line)
            except orjson.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON on line {line_number} of {resolved_path}") from exc
            yield line_number, row


def read_jsonl(path: str | Path) -> list[dict[str, Any]]:
    """Read a JSON Lines file into a list of dictionaries."""
    return [row for _, row in iter_jsonl(path)]


def write_jsonl(path: str | Path, rows: Iterable[Mapping[str, Any]]) -> int:
    """Write mappings as JSON Lines and return how many rows were written.

    Dates and datetimes are serialised by orjson as ISO-8601 strings.
    """
    resolved_path = _coerce_path(path)
    resolved_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with resolved_path.open("wb") as handle:
        for row in rows:
            handle.write(orjson.dumps(dict(row)))
            handle.write(b"\n")
            count += 1
    return count
