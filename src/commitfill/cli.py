from __future__ import annotations

import functools
import json
import random
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from commitfill.commits import make_scheduled_commits
from commitfill.config import load_settings
from commitfill.dates import format_timestamp, generate_daily_timestamps, generate_date_range, validate_commit_count
from commitfill.doctor import run_doctor
from commitfill.errors import CommitfillError, GitCommandError
from commitfill.git import GitClient
from commitfill.logging_utils import configure_logging

app = typer.Typer(add_completion=False, help="commitfill CLI (backdated commit history generator)")


def _fail(message: str, code: int) -> typer.Exit:
    print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=code)


@app.command("schedule")
def schedule_cmd(
    start: str = typer.Argument(..., help="First day, YYYY-MM-DD"),
    end: str = typer.Argument(..., help="Last day, YYYY-MM-DD"),
    commits_per_day: int = typer.Option(1, "--commits-per-day", "-n"),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Work tree to commit into"),
    marker: Optional[str] = typer.Option(None, "--marker", help="Marker file, relative to the repo"),
    no_push: bool = typer.Option(False, "--no-push", help="Leave the commits local"),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
):
    """Commit the marker file at random times on every day from START to END, then push."""
    configure_logging(log_level)
    settings = load_settings()
    repo_dir = repo.resolve() if repo else settings.repo_dir

    try:
        result = make_scheduled_commits(
            start,
            end,
            commits_per_day,
            repo_dir=repo_dir,
            marker_path=marker or settings.marker_path,
            git_factory=functools.partial(GitClient, git_binary=settings.git_binary),
            push=not no_push,
            remote=settings.remote,
            branch=settings.branch,
        )
    except GitCommandError as e:
        raise _fail(str(e), 1)
    except CommitfillError as e:
        raise _fail(str(e), 2)

    print(f"[green]{result.commits} commits over {len(result.days)} days.[/green]")
    if result.pushed:
        print("[green]Pushed.[/green]")


@app.command("preview")
def preview_cmd(
    start: str = typer.Argument(..., help="First day, YYYY-MM-DD"),
    end: str = typer.Argument(..., help="Last day, YYYY-MM-DD"),
    commits_per_day: int = typer.Option(1, "--commits-per-day", "-n"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the random draws"),
):
    """Show the commit dates a schedule would use without touching git."""
    rng = random.Random(seed)
    try:
        validate_commit_count(commits_per_day)
        days = generate_date_range(start, end)
        rows = [format_timestamp(ts) for day in days for ts in generate_daily_timestamps(day, commits_per_day, rng=rng)]
    except CommitfillError as e:
        raise _fail(str(e), 2)

    table = Table("#", "commit date")
    for i, row in enumerate(rows, start=1):
        table.add_row(str(i), row)
    print(table)
    print(f"{len(rows)} commits over {len(days)} days")


@app.command("doctor")
def doctor_cmd():
    """Check that git is installed and the repo dir is a work tree."""
    report = run_doctor(load_settings())
    print(json.dumps(report, indent=2))
    if not report["ok"]:
        raise typer.Exit(code=1)


def main():
    app()
