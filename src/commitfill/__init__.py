from __future__ import annotations

from .commits import ScheduleResult, create_daily_commits, make_scheduled_commits
from .dates import format_timestamp, generate_daily_timestamps, generate_date_range
from .errors import (
    CommitfillError,
    GitCommandError,
    InvalidArgumentType,
    InvalidCallback,
    InvalidCommitCount,
    InvalidDateFormat,
    MissingArgument,
    RangeOrderError,
)

__all__ = [
    "CommitfillError",
    "GitCommandError",
    "InvalidArgumentType",
    "InvalidCallback",
    "InvalidCommitCount",
    "InvalidDateFormat",
    "MissingArgument",
    "RangeOrderError",
    "ScheduleResult",
    "create_daily_commits",
    "format_timestamp",
    "generate_daily_timestamps",
    "generate_date_range",
    "make_scheduled_commits",
]
