"""Tests for JSONL helpers."""

from datetime import date
from pathlib import Path

import pytest

from annotated_nyt.io_utils import iter_jsonl, read_jsonl, write_jsonl


def test_write_jsonl_creates_parents_and_counts_rows(tmp_path: Path) -> None:
    target = tmp_path / "normalized" / "documents.jsonl"

    written = write_jsonl(target, [{"guid": 1, "publication_date": date(2007, 1, 2)}, {"guid": 2}])

    assert written == 2
    assert read_jsonl(target) == [{"guid": 1, "publication_date": "2007-01-02"}, {"guid": 2}]


def test_iter_jsonl_reports_line_numbers_and_skips_blank_lines(tmp_path: Path) -> None:
    target = tmp_path / "records.jsonl"
    target.write_text('{"guid": 1}\n\n{"guid": 2}\n')

    assert list(iter_jsonl(target)) == [(1, {"guid": 1}), (3, {"guid": 2})]


def test_read_jsonl_accepts_string_paths(tmp_path: Path) -> None:
    target = tmp_path / "records.jsonl"
    target.write_text('{"guid": 5}\n')

    assert read_jsonl(str(target)) == [{"guid": 5}]


def test_iter_jsonl_names_file_and_line_of_bad_json(tmp_path: Path) -> None:
    target = tmp_path / "records.jsonl"
    target.write_text('{"guid": 1}\n\n{"guid": \n')

    with pytest.raises(ValueError, match="line 3"):
        list(iter_jsonl(target))
