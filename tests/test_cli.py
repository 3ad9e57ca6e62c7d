"""CLI smoke tests for the Typer entrypoints."""

from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from annotated_nyt.cli import app
from annotated_nyt.io_utils import read_jsonl, write_jsonl

runner = CliRunner()


@pytest.fixture(autouse=True)
def _drop_cli_log_sinks():
    yield
    # Sinks added by the CLI point at the runner's captured streams.
    logger.remove()


def _write_records(path: Path, count: int) -> None:
    write_jsonl(
        path,
        [
            {
                "guid": 1000 + index,
                "headline": f"Headline {index}",
                "people": ["Doe, Jane", "Roe, Richard", "Poe, Edgar", "Moe, Howard"],
            }
            for index in range(count)
        ],
    )


def test_cli_root_help_displays() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Annotated NYT document CLI." in result.stdout


def test_cli_inspect_prints_truncated_representation(tmp_path: Path) -> None:
    input_path = tmp_path / "records.jsonl"
    _write_records(input_path, 3)

    result = runner.invoke(app, ["inspect", "--input", str(input_path), "--limit", "2"])

    assert result.exit_code == 0, result.stdout
    lines = [line for line in result.stdout.splitlines() if line.startswith("DocumentView(")]
    assert len(lines) == 2
    assert "guid=1000" in lines[0]
    assert "people=['Doe, Jane', 'Roe, Richard', 'Poe, Edgar']" in lines[0]
    assert "Moe, Howard" not in lines[0]


def test_cli_normalize_writes_jsonl(tmp_path: Path) -> None:
    input_path = tmp_path / "records.jsonl"
    output_path = tmp_path / "normalized.jsonl"
    _write_records(input_path, 2)

    result = runner.invoke(
        app,
        ["normalize", "--input", str(input_path), "--output", str(output_path), "--log-level", "warning"],
    )

    assert result.exit_code == 0, result.stdout
    assert "Wrote 2 documents" in result.stdout
    rows = read_jsonl(output_path)
    assert [row["guid"] for row in rows] == [1000, 1001]
    assert len(rows[0]["people"]) == 4


def test_cli_rejects_missing_input(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", "--input", str(tmp_path / "absent.jsonl")])
    assert result.exit_code != 0


def test_cli_rejects_unknown_log_level(tmp_path: Path) -> None:
    input_path = tmp_path / "records.jsonl"
    _write_records(input_path, 1)

    result = runner.invoke(app, ["inspect", "--input", str(input_path), "--log-level", "loud"])
    assert result.exit_code == 2


def test_cli_accepts_lower_case_log_level(tmp_path: Path) -> None:
    input_path = tmp_path / "records.jsonl"
    _write_records(input_path, 1)

    result = runner.invoke(app, ["inspect", "--input", str(input_path), "--log-level", "debug"])
    assert result.exit_code == 0, result.stdout
