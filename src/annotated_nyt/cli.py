"""Typer CLI entry points for annotated NYT records."""

from __future__ import annotations

import sys
from enum import Enum
from itertools import islice
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .corpus import iter_views, normalize_corpus

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_RECORDS = DATA_DIR / "raw" / "records.jsonl"
DEFAULT_NORMALIZED = DATA_DIR / "normalized" / "documents.jsonl"


class LogLevel(str, Enum):
    """Loguru levels accepted by ``--log-level``."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_LOG_LEVEL = LogLevel.INFO

app = typer.Typer(help="Annotated NYT document CLI.")


def _configure_logger(level: LogLevel = DEFAULT_LOG_LEVEL) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.value,
        enqueue=False,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level:<8}</level> | {message}",
    )


@app.command("inspect")
def inspect_cli(
    input_path: Path = typer.Option(
        DEFAULT_RECORDS,
        "--input",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Parsed records JSONL.",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Only show the first N documents.",
    ),
    log_level: LogLevel = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", case_sensitive=False, help="Log verbosity."
    ),
) -> None:
    """Print the diagnostic representation of each document."""
    _configure_logger(log_level)
    views = iter_views(input_path)
    if limit is not None:
        views = islice(views, limit)
    shown = 0
    for view in views:
        logger.debug("inspect:document | guid={}", view.guid)
        typer.echo(repr(view))
        shown += 1
    logger.info("inspect:done | documents={}", shown)


@app.command("normalize")
def normalize_cli(
    input_path: Path = typer.Option(
        DEFAULT_RECORDS,
        "--input",
        "-i",
        exists=True,
        readable=True,
        resolve_path=True,
        help="Parsed records JSONL.",
    ),
    output_path: Path = typer.Option(
        DEFAULT_NORMALIZED,
        "--output",
        "-o",
        resolve_path=True,
        help="Destination JSONL for normalised documents.",
    ),
    log_level: LogLevel = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", case_sensitive=False, help="Log verbosity."
    ),
) -> None:
    """Write null-safe, list-split documents as JSONL."""
    _configure_logger(log_level)
    count = normalize_corpus(input_path=input_path, output_path=output_path)
    typer.echo(f"Wrote {count} documents to {output_path}")


def run() -> None:
    """Entrypoint when invoking via `python -m`."""
    app()


if __name__ == "__main__":
    run()
