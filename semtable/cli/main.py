from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..config import Settings, load_settings
from ..data.loader import load_inputs
from ..data.slots import sort_time_slots
from ..errors import SchedulerError
from ..models.entry import TimetableEntry
from ..session import TimetableSession
from ..validate.checks import detect_conflicts
from ..validate.report import format_conflict_report, write_session_report


def _setup_logging(logs_dir: Path, settings: Settings, level: int = logging.INFO) -> None:
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / settings.log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
        force=True,
    )


def run_pipeline(
    inputs_path: Path,
    outputs_dir: Path,
    *,
    config_path: Path | None = None,
    log_level: int | None = None,
) -> tuple[TimetableSession, str, Path]:
    settings = load_settings(config_path)
    _setup_logging(outputs_dir / "logs", settings, log_level or logging.INFO)
    inputs = load_inputs(
        inputs_path,
        default_cohort=settings.default_cohort,
        default_sessions=settings.default_sessions_per_week,
    )
    session = TimetableSession(inputs, settings)
    session.generate()
    path = write_session_report(session.snapshot(), outputs_dir)
    return session, format_conflict_report(session.conflicts), path


app = typer.Typer(add_completion=False, help="Semester timetable generator")


@app.command("generate")
def cli_generate(
    inputs: Path = typer.Argument(..., exists=True, dir_okay=False, help="Input collections (JSON)"),
    out: Path = typer.Option(Path("outputs"), help="Directory for session.json and logs"),
    config: Optional[Path] = typer.Option(None, help="Settings TOML (defaults to configs/settings.toml)"),
    log_level: str = typer.Option("INFO", help="Log level"),
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        session, report, path = run_pipeline(inputs, out, config_path=config, log_level=level)
    except SchedulerError as exc:
        typer.echo(f"Error generating timetable: {exc.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(report)
    typer.echo(f"session {session.session_id} written to {path}")


@app.command("validate")
def cli_validate(
    session_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved session.json"),
) -> None:
    data = json.loads(session_file.read_text(encoding="utf-8"))
    meta = data.get("metadata", {})
    entries: List[TimetableEntry] = [TimetableEntry.from_dict(e) for e in data.get("entries", []) if e]
    conflicts = detect_conflicts(entries, meta.get("days", []), meta.get("timeSlots", []))
    typer.echo(format_conflict_report(conflicts))
    if conflicts:
        raise typer.Exit(code=2)


@app.command("sort-slots")
def cli_sort_slots(labels: List[str] = typer.Argument(..., help="Time-slot labels")) -> None:
    for label in sort_time_slots(labels):
        typer.echo(label)


if __name__ == "__main__":  # pragma: no cover
    app()
