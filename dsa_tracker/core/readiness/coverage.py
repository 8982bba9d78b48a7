"""Per-item coverage: weights, name matching and practice targets.

Requirement names from generated profiles rarely match the labels a user
logs problems under ("DP" vs "Dynamic Programming (DP)"), so matching is
permissive:

1. A user record whose normalized name equals the required name.
2. Otherwise the first user record (input order) whose normalized name
   contains, or is contained in, the required name.

Short names can produce false positives under rule 2.
"""

import math
from typing import Literal, Sequence

from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.readiness.types import (
    COVERAGE_THRESHOLD,
    DEFAULT_PATTERN_FREQUENCY,
    DEFAULT_TOPIC_TOTAL,
    DEFAULT_WEIGHT,
    FREQUENCY_PER_PROBLEM,
    IMPORTANCE_WEIGHTS,
    RequirementItem,
    ScoredRequirement,
    UserCoverageRecord,
)

logger = get_logger(__name__)

ItemKind = Literal["topic", "pattern"]


def importance_weight(importance: str | None) -> int:
    """Weight for an importance class; unknown values count as medium."""
    return IMPORTANCE_WEIGHTS.get(importance, DEFAULT_WEIGHT)


def normalize_name(name: str) -> str:
    return name.strip().lower()


def find_matching_record(
    required_name: str,
    records: Sequence[UserCoverageRecord],
) -> UserCoverageRecord | None:
    """Find the user record that counts toward a required item."""
    target = normalize_name(required_name)

    for record in records:
        if normalize_name(record.name) == target:
            return record

    for record in records:
        candidate = normalize_name(record.name)
        if candidate and (candidate in target or target in candidate):
            return record

    return None


def total_required(item: RequirementItem, kind: ItemKind) -> int | float:
    """
    Practice target for an item.

    Order: practice list length, typical question count, then a default
    (15 for topics, frequency / 5 rounded up for patterns).
    """
    if item.practice_list:
        return len(item.practice_list)
    if item.typical_questions:
        return item.typical_questions
    if kind == "topic":
        return DEFAULT_TOPIC_TOTAL

    frequency = item.frequency or DEFAULT_PATTERN_FREQUENCY
    return math.ceil(frequency / FREQUENCY_PER_PROBLEM)


def coverage_fraction(solved_count: int, required: int | float) -> float:
    """Solved share of the target, clamped to [0, 1]."""
    if required <= 0:
        return 0.0
    return max(0.0, min(solved_count / required, 1.0))


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def score_items(
    items: Sequence[RequirementItem],
    records: Sequence[UserCoverageRecord],
    kind: ItemKind,
) -> tuple[list[ScoredRequirement], float, float]:
    """
    Annotate required items with the user's coverage.

    Args:
        items: Required topics or patterns from a company profile
        records: User's solved counts for the same kind
        kind: "topic" or "pattern", selects the default practice target

    Returns:
        Tuple of (scored items, weighted coverage earned, total weight)
    """
    scored: list[ScoredRequirement] = []
    earned = 0.0
    total = 0.0

    for item in items:
        weight = importance_weight(item.importance)
        total += weight

        match = find_matching_record(item.name, records)
        solved_count = match.solved_count if match else 0
        if match:
            logger.debug(f"{kind} match: '{match.name}' ({solved_count} solved) -> '{item.name}'")

        required = total_required(item, kind)
        fraction = coverage_fraction(solved_count, required)
        earned += weight * fraction

        percent = fraction * 100
        scored.append(
            ScoredRequirement.model_validate(
                {
                    **item.model_dump(by_alias=True),
                    "solvedCount": solved_count,
                    "totalRequired": required,
                    "coveragePercent": int(round_half_up(percent)),
                    "covered": percent >= COVERAGE_THRESHOLD,
                }
            )
        )

    return scored, earned, total
