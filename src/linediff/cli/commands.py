"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from sqlmodel import Session, SQLModel

from linediff.config import Settings, load_config
from linediff.core.pipeline import DiffReport, read_text, run_diff
from linediff.core.render import ViewMode, render, render_unified
from linediff.core.stats import compute_stats
from linediff.crud.database import init_db, make_engine
from linediff.crud.history import clear_history, get_entry, list_entries, rediff_entry, save_entry


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _engine(settings: Settings):
    engine = make_engine(settings.db_url)
    init_db(engine)
    return engine


def _compare(left: Path, right: Path, settings: Settings) -> tuple[str, str, DiffReport]:
    """Read both files and diff them, converting library errors into CLI failures."""
    try:
        left_text, right_text = read_text(left), read_text(right)
        report = run_diff(left_text, right_text, settings.max_lines)
    except ValueError as e:
        _fail(str(e))
    return left_text, right_text, report


def callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    """Compare two texts line by line."""
    level = "DEBUG" if verbose else _settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def diff_cmd(
    left: Annotated[Path, typer.Argument(help="Original (left) file")],
    right: Annotated[Path, typer.Argument(help="Modified (right) file")],
    view: Annotated[Optional[ViewMode], typer.Option("--view", help="split or unified")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Left column width in split view")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per side; 0 = unlimited")] = None,
    save: Annotated[bool, typer.Option("--save", help="Record this comparison in history")] = False,
    out: Annotated[Optional[Path], typer.Option("--out", help="Also write the unified diff to this file")] = None,
    stats_only: Annotated[bool, typer.Option("--stats-only", help="Print only the summary line")] = False,
    ):
    """Diff two files and print the edit script with a summary line."""
    settings = _settings(overrides={
        "view_mode": view.value if view else None, "split_width": width, "max_lines": max_lines,
    })
    left_text, right_text, report = _compare(left, right, settings)

    if not stats_only:
        for line in render(report.script, settings.view_mode, settings.split_width):
            typer.echo(line)
    typer.echo(report.stats.summary())

    if out is not None:
        try:
            out.write_text("\n".join(render_unified(report.script)) + "\n", encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot write {out}", e)

    if save:
        try:
            with Session(_engine(settings)) as session:
                entry = save_entry(session, left_text, right_text, report.stats, settings.history_limit)
                session.commit()
                typer.echo(f"Saved to history as #{entry.id}")
        except Exception as e:
            _fail("Saving history failed", e)


def stats_cmd(
    left: Annotated[Path, typer.Argument(help="Original (left) file")],
    right: Annotated[Path, typer.Argument(help="Modified (right) file")],
    ):
    """Print add/delete/change counts for two files."""
    settings = _settings()
    _, _, report = _compare(left, right, settings)
    typer.echo(report.stats.summary())


def history_cmd(
    limit: Annotated[Optional[int], typer.Option("--limit", help="Show at most this many entries")] = None,
    ):
    """List saved comparisons, newest first."""
    settings = _settings()
    with Session(_engine(settings)) as session:
        entries = list_entries(session, limit)
        if not entries:
            typer.echo("No history.")
            raise typer.Exit(0)
        for entry in entries:
            typer.echo(f"#{entry.id}  {entry.created_at:%Y-%m-%d %H:%M:%S}  {entry.stats.summary()}")


def show_cmd(
    entry_id: Annotated[int, typer.Argument(help="History entry id")],
    view: Annotated[Optional[ViewMode], typer.Option("--view", help="split or unified")] = None,
    ):
    """Re-diff a saved comparison and print it."""
    settings = _settings(overrides={"view_mode": view.value if view else None})
    with Session(_engine(settings)) as session:
        try:
            entry = get_entry(session, entry_id)
            script = rediff_entry(session, entry_id)
        except ValueError as e:
            _fail(str(e))
        typer.echo(f"#{entry.id}  {entry.created_at:%Y-%m-%d %H:%M:%S}")
        for line in render(script, settings.view_mode, settings.split_width):
            typer.echo(line)
        typer.echo(compute_stats(script).summary())


def clear_cmd():
    """Delete all saved comparisons."""
    settings = _settings()
    with Session(_engine(settings)) as session:
        count = clear_history(session)
        session.commit()
    typer.echo(f"Cleared {count} history entries.")


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        SQLModel.metadata.drop_all(engine)
        typer.echo("Existing data cleared.")
    init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")
