"""Aggregate logged problems into per-topic and per-pattern solved counts."""

from collections import Counter
from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dsa_tracker.core.readiness.types import UserCoverageRecord


class LoggedProblem(BaseModel):
    """A practice problem the user logged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str
    topic: str | None = None
    pattern: str | None = None
    difficulty: str | None = Field("Medium", description="Easy, Medium or Hard; other values schedule as Medium")
    revision_count: int = Field(0, ge=0)
    next_revision_date: datetime | None = None


def _count(labels: Iterable[str | None]) -> list[UserCoverageRecord]:
    # Counter keeps first-seen order, and sorted() is stable
    counts = Counter(label for label in labels if label and label.strip())
    ordered = sorted(counts.items(), key=lambda pair: pair[1], reverse=True)
    return [UserCoverageRecord(name=name, solved_count=count) for name, count in ordered]


def aggregate_coverage(
    problems: Iterable[LoggedProblem],
) -> tuple[list[UserCoverageRecord], list[UserCoverageRecord]]:
    """
    Count solved problems per topic and per pattern.

    Args:
        problems: Logged problems

    Returns:
        Tuple of (topic records, pattern records), each sorted by count
        descending with ties in first-seen order
    """
    problems = list(problems)
    topics = _count(p.topic for p in problems)
    patterns = _count(p.pattern for p in problems)
    return topics, patterns
