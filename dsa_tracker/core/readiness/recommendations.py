"""Recommendation and next-step generation.

Both lists are driven by items below the coverage threshold, using the
rounded coverage shown to the user.
"""

from dsa_tracker.core.readiness.coverage import importance_weight
from dsa_tracker.core.readiness.types import (
    COVERAGE_THRESHOLD,
    EXCELLENT_COVERAGE_NEXT_STEP,
    EXCELLENT_COVERAGE_RECOMMENDATION,
    Importance,
    ScoredRequirement,
)

# (importance, topic limit, topic prefix, pattern limit, pattern prefix)
RECOMMENDATION_TIERS = [
    (
        Importance.CRITICAL.value,
        3,
        "Focus on critical topics: ",
        3,
        "Master critical patterns: ",
    ),
    (
        Importance.HIGH.value,
        2,
        "Improve high-priority topics: ",
        2,
        "Work on high-priority patterns: ",
    ),
]

MAX_NEXT_STEPS = 5


def _gaps(items: list[ScoredRequirement], importance: str) -> list[ScoredRequirement]:
    """Under-threshold items of one importance class, lowest coverage first."""
    gaps = [
        item
        for item in items
        if item.coverage_percent < COVERAGE_THRESHOLD and item.importance == importance
    ]
    return sorted(gaps, key=lambda item: item.coverage_percent)


def _format_gaps(items: list[ScoredRequirement]) -> str:
    return ", ".join(f"{item.name} ({item.coverage_percent}%)" for item in items)


def build_recommendations(
    topics: list[ScoredRequirement],
    patterns: list[ScoredRequirement],
) -> list[str]:
    """
    Build tiered recommendations from scored topics and patterns.

    Critical gaps come first (up to 3 topics, 3 patterns), then high-priority
    gaps (up to 2 each). Falls back to a single encouragement line.
    """
    recommendations: list[str] = []

    for importance, topic_limit, topic_prefix, pattern_limit, pattern_prefix in RECOMMENDATION_TIERS:
        topic_gaps = _gaps(topics, importance)[:topic_limit]
        pattern_gaps = _gaps(patterns, importance)[:pattern_limit]

        if topic_gaps:
            recommendations.append(topic_prefix + _format_gaps(topic_gaps))
        if pattern_gaps:
            recommendations.append(pattern_prefix + _format_gaps(pattern_gaps))

    return recommendations or [EXCELLENT_COVERAGE_RECOMMENDATION]


def build_next_steps(
    topics: list[ScoredRequirement],
    patterns: list[ScoredRequirement],
    limit: int = MAX_NEXT_STEPS,
) -> list[str]:
    """
    Build numbered practice steps for the most important gaps.

    Items are ordered by importance weight (desc), then coverage (asc).
    The "needed" count is taken from typical_questions, which can differ
    from the practice target used for coverage when a practice list is set.
    """
    gaps = [item for item in [*topics, *patterns] if item.coverage_percent < COVERAGE_THRESHOLD]
    gaps.sort(key=lambda item: (-importance_weight(item.importance), item.coverage_percent))

    steps: list[str] = []
    for idx, item in enumerate(gaps[:limit], start=1):
        target = item.typical_questions if item.typical_questions is not None else item.total_required
        needed = int(target - item.solved_count)
        steps.append(
            f"{idx}. Solve {needed} more {item.name} problems "
            f"(currently {item.coverage_percent}% coverage)"
        )

    return steps or [EXCELLENT_COVERAGE_NEXT_STEP]
