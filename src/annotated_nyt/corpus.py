"""Load parsed NYT records from JSON Lines and wrap them in views."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .document_view import DocumentView
from .io_utils import iter_jsonl, write_jsonl
from .schemas.records import RawRecord


def iter_records(path: Path) -> Iterator[RawRecord]:
    """Validate each row of ``path`` as a :class:`RawRecord`."""
    count = 0
    for line_number, row in iter_jsonl(path):
        try:
            record = RawRecord.model_validate(row)
        except ValidationError as exc:
            raise ValueError(f"Invalid record on line {line_number} of {path}") from exc
        logger.debug("corpus:record | guid={} line={}", record.guid, line_number)
        count += 1
        yield record
    logger.info("corpus:loaded | path={} records={}", path, count)


def iter_views(path: Path) -> Iterator[DocumentView]:
    for record in iter_records(path):
        yield DocumentView(record)


def normalize_corpus(input_path: Path, output_path: Path) -> int:
    """Write the normalised form of every record in ``input_path``.

    Returns the number of rows written to ``output_path``.
    """
    written = write_jsonl(output_path, (view.to_row() for view in iter_views(input_path)))
    logger.info("corpus:normalized | output={} rows={}", output_path, written)
    return written
