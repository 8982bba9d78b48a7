"""Spaced repetition scheduling for logged problems.

Intervals (days) grow with each revision and depend on difficulty; the
last interval repeats once the schedule is exhausted.

Timestamps without a timezone are read as UTC.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dsa_tracker.core.problem_stats import LoggedProblem

RevisionStatus = Literal["overdue", "due-today", "upcoming"]

REVISION_INTERVALS = {
    "Easy": [1, 3, 7, 14, 30, 60],
    "Medium": [1, 2, 5, 10, 20, 40],
    "Hard": [1, 1, 3, 7, 14, 28],
}
DEFAULT_DIFFICULTY = "Medium"

_SECONDS_PER_DAY = 24 * 60 * 60


class RevisionQueueEntry(BaseModel):
    """A logged problem with its place in the revision schedule."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    topic: str | None = None
    pattern: str | None = None
    difficulty: str | None = None
    revision_count: int = Field(0, ge=0)
    next_revision_date: datetime
    status: RevisionStatus
    urgency: int = Field(..., description="Days overdue, negative when upcoming")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: datetime | None) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def calculate_next_revision_date(
    difficulty: str | None,
    revision_count: int,
    now: datetime | None = None,
) -> datetime:
    """
    Date of the next revision.

    Args:
        difficulty: Easy, Medium or Hard (anything else is treated as Medium)
        revision_count: Revisions completed so far
        now: Reference time (defaults to current UTC time)

    Returns:
        Reference time plus the interval for this revision
    """
    intervals = REVISION_INTERVALS.get(difficulty, REVISION_INTERVALS[DEFAULT_DIFFICULTY])
    index = min(max(revision_count, 0), len(intervals) - 1)
    return _now(now) + timedelta(days=intervals[index])


def calculate_urgency(next_revision_date: datetime, now: datetime | None = None) -> int:
    """Days overdue, rounded up; negative when the revision is upcoming."""
    elapsed = (_now(now) - _as_utc(next_revision_date)).total_seconds()
    return math.ceil(elapsed / _SECONDS_PER_DAY)


def is_due_for_revision(next_revision_date: datetime, now: datetime | None = None) -> bool:
    return _now(now) >= _as_utc(next_revision_date)


def get_revision_status(next_revision_date: datetime, now: datetime | None = None) -> RevisionStatus:
    current = _now(now)
    due = _as_utc(next_revision_date)
    if current > due:
        return "overdue"
    if current.date() == due.date():
        return "due-today"
    return "upcoming"


def build_revision_queue(
    problems: Iterable[LoggedProblem],
    now: datetime | None = None,
) -> list[RevisionQueueEntry]:
    """
    Order scheduled problems for revision.

    Problems without a next revision date are left out. The rest are
    sorted by due date, so the most overdue come first.
    """
    current = _now(now)
    entries = [
        RevisionQueueEntry(
            title=problem.title,
            topic=problem.topic,
            pattern=problem.pattern,
            difficulty=problem.difficulty,
            revision_count=problem.revision_count,
            next_revision_date=_as_utc(problem.next_revision_date),
            status=get_revision_status(problem.next_revision_date, now=current),
            urgency=calculate_urgency(problem.next_revision_date, now=current),
        )
        for problem in problems
        if problem.next_revision_date is not None
    ]
    entries.sort(key=lambda entry: entry.next_revision_date)
    return entries
