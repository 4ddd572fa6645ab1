from __future__ import annotations

import logging
import random
import re
from datetime import date, datetime, timedelta

from .errors import InvalidArgumentType, InvalidCommitCount, InvalidDateFormat, MissingArgument, RangeOrderError

LOG = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_strict_date(value: str, *, what: str = "date") -> date:
    """Parse a ``YYYY-MM-DD`` string, rejecting any other layout."""
    if not isinstance(value, str) or not DATE_RE.match(value):
        raise InvalidDateFormat(value, what=what)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        # Layout matched but the calendar did not, e.g. 2025-02-30.
        raise InvalidDateFormat(value, what=what) from None


def validate_commit_count(commits_per_day: object) -> int:
    # bool is an int subclass; True is not a count.
    if isinstance(commits_per_day, bool) or not isinstance(commits_per_day, int) or commits_per_day <= 0:
        raise InvalidCommitCount("commits_per_day must be a positive integer")
    if commits_per_day > SECONDS_PER_DAY:
        raise InvalidCommitCount(f"commits_per_day cannot exceed {SECONDS_PER_DAY} (one per second of the day)")
    return commits_per_day


def generate_date_range(start_date: str | None, end_date: str | None) -> list[date]:
    """
    Every calendar day from ``start_date`` to ``end_date``, both inclusive.

    Both arguments must be strict ``YYYY-MM-DD`` strings.
    """
    if not start_date or not end_date:
        raise MissingArgument("Both start date and end date are required")

    start = parse_strict_date(start_date, what="start date")
    end = parse_strict_date(end_date, what="end date")

    if start > end:
        raise RangeOrderError("Start date must be before or equal to end date")

    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def _base_datetime(base_date: datetime | date | str) -> datetime:
    if isinstance(base_date, datetime):
        return base_date.replace(hour=0, minute=0, second=0, microsecond=0)
    if isinstance(base_date, date):
        return datetime(base_date.year, base_date.month, base_date.day)
    if isinstance(base_date, str):
        d = parse_strict_date(base_date, what="base date")
        return datetime(d.year, d.month, d.day)
    raise InvalidArgumentType("base_date must be a date, a datetime or a YYYY-MM-DD string")


def generate_daily_timestamps(
    base_date: datetime | date | str,
    commits_per_day: int,
    *,
    rng: random.Random | None = None,
) -> list[datetime]:
    """
    Draw ``commits_per_day`` distinct random times on ``base_date``.

    Draws are rejection-sampled at second granularity, so the result never
    holds two timestamps with the same (hour, minute, second). The list is
    sorted ascending. A ``tzinfo`` on a ``datetime`` base is carried onto
    every timestamp.

    Naive draws that fall in a local DST gap are moved forward to the wall
    time they would be committed at, so keys and order follow that time.
    """
    count = validate_commit_count(commits_per_day)
    base = _base_datetime(base_date)
    randrange = (rng or random).randrange

    naive = base.tzinfo is None
    seen: set[tuple[int, int, int]] = set()
    results: list[datetime] = []
    collisions = 0
    while len(results) < count:
        hour, minute, second = randrange(24), randrange(60), randrange(60)
        ts = base.replace(hour=hour, minute=minute, second=second, microsecond=0)
        if naive:
            ts = resolve_local_time(ts)
        key = (ts.hour, ts.minute, ts.second)
        if key in seen:
            collisions += 1
            continue
        seen.add(key)
        results.append(ts)

    if collisions:
        LOG.debug("discarded %d colliding draws for %s", collisions, base.date().isoformat())
    results.sort()
    return results


def _local_aware(ts: datetime) -> datetime:
    local = ts.astimezone()
    if local.replace(tzinfo=None) != ts:
        # Nonexistent wall time (spring-forward gap); fold=1 moves it past the gap.
        local = ts.replace(fold=1).astimezone()
    return local


def resolve_local_time(ts: datetime) -> datetime:
    """Naive local wall time as it will actually read once an offset is attached."""
    return _local_aware(ts).replace(tzinfo=None, fold=0)


def format_timestamp(ts: datetime) -> str:
    """
    ISO-8601 with seconds and offset, e.g. ``2025-07-10T14:03:22+02:00``.

    Naive timestamps are read as local wall-clock time.
    """
    if ts.tzinfo is None or ts.utcoffset() is None:
        ts = _local_aware(ts.replace(tzinfo=None))
    return ts.isoformat(timespec="seconds")
