from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Protocol

from .dates import format_timestamp, generate_daily_timestamps, generate_date_range, validate_commit_count
from .errors import InvalidCallback, MissingArgument
from .git import GitClient
from .marker import DEFAULT_MARKER_PATH, write_marker

LOG = logging.getLogger(__name__)


class VersionControl(Protocol):
    def add(self, paths: list[str]) -> Any: ...

    def commit(self, message: str, options: dict[str, str]) -> Any: ...

    def push(self, remote: str | None = None, branch: str | None = None) -> Any: ...


Writer = Callable[[Path, dict[str, Any]], Any]
GitFactory = Callable[[Path], VersionControl]


@dataclass(frozen=True)
class ScheduleResult:
    days: list[date]
    commits: int
    pushed: bool


def create_daily_commits(
    base_date: datetime | date | str,
    commits_per_day: int,
    on_complete: Callable[[], Any],
    *,
    repo_dir: Path | str = ".",
    marker_path: str = DEFAULT_MARKER_PATH,
    writer: Writer = write_marker,
    git_factory: GitFactory = GitClient,
    rng: random.Random | None = None,
) -> None:
    """
    Write the marker file and commit it once per random timestamp on one day.

    Commits run one at a time in ascending timestamp order. Each commit uses
    the formatted timestamp as both its message and its ``--date``.
    ``on_complete`` is called once, with no arguments, after the last commit.
    A failing write or commit propagates and ``on_complete`` is not called.
    """
    validate_commit_count(commits_per_day)
    if not callable(on_complete):
        raise InvalidCallback("on_complete must be callable")

    timestamps = generate_daily_timestamps(base_date, commits_per_day, rng=rng)
    repo = Path(repo_dir)
    target = repo / marker_path

    for ts in timestamps:
        date_string = format_timestamp(ts)
        LOG.info(date_string)
        writer(target, {"date": date_string})
        git = git_factory(repo)
        git.add([marker_path])
        git.commit(date_string, {"--date": date_string})

    on_complete()


def make_scheduled_commits(
    start_date: str | None,
    end_date: str | None,
    commits_per_day: int,
    *,
    repo_dir: Path | str = ".",
    marker_path: str = DEFAULT_MARKER_PATH,
    writer: Writer = write_marker,
    git_factory: GitFactory = GitClient,
    push: bool = True,
    remote: str | None = None,
    branch: str | None = None,
    rng: random.Random | None = None,
) -> ScheduleResult:
    """Run :func:`create_daily_commits` for every day in the range, then push once."""
    if not start_date or not end_date:
        raise MissingArgument("Both start date and end date are required")
    validate_commit_count(commits_per_day)

    days = generate_date_range(start_date, end_date)
    LOG.info(
        "Creating %d commits per day for %d days (%d total commits)",
        commits_per_day,
        len(days),
        len(days) * commits_per_day,
    )

    finished: list[date] = []
    for index, day in enumerate(days, start=1):
        LOG.info("Processing date: %s (%d/%d)", day.isoformat(), index, len(days))
        create_daily_commits(
            day,
            commits_per_day,
            lambda day=day: finished.append(day),
            repo_dir=repo_dir,
            marker_path=marker_path,
            writer=writer,
            git_factory=git_factory,
            rng=rng,
        )

    if push:
        LOG.info("All commits created. Pushing to remote repository...")
        git_factory(Path(repo_dir)).push(remote, branch)
    else:
        LOG.info("All commits created. Push skipped.")

    return ScheduleResult(days=finished, commits=len(finished) * commits_per_day, pushed=push)
