"""Company readiness score computation.

Scores a user's solved counts against a company requirement profile:
1. Annotate each required topic and pattern with coverage
2. Aggregate weighted coverage into an overall score
3. Generate recommendations and next steps

Pure function of its inputs; fetching or generating the profile happens
before this is called.
"""

from typing import Sequence

from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.readiness.coverage import round_half_up, score_items
from dsa_tracker.core.readiness.recommendations import build_next_steps, build_recommendations
from dsa_tracker.core.readiness.types import (
    CompanyRequirementProfile,
    ReadinessReport,
    UserCoverageRecord,
)

logger = get_logger(__name__)


def compute_readiness(
    user_topics: Sequence[UserCoverageRecord],
    user_patterns: Sequence[UserCoverageRecord],
    profile: CompanyRequirementProfile,
) -> ReadinessReport:
    """
    Compute interview readiness for one company.

    Args:
        user_topics: Solved counts per topic (may be empty)
        user_patterns: Solved counts per pattern (may be empty)
        profile: Company requirement profile

    Returns:
        ReadinessReport with annotated items, overall score and advice
    """
    topics, topics_earned, topics_total = score_items(profile.required_topics, user_topics, "topic")
    patterns, patterns_earned, patterns_total = score_items(
        profile.required_patterns, user_patterns, "pattern"
    )

    total_possible = topics_total + patterns_total
    overall = (topics_earned + patterns_earned) / total_possible * 100 if total_possible > 0 else 0.0
    overall = round_half_up(overall, 1)

    logger.debug(
        f"Readiness for {profile.company_name}: {overall}% "
        f"({len(topics)} topics, {len(patterns)} patterns)"
    )

    return ReadinessReport(
        company_name=profile.company_name,
        overall_readiness=overall,
        required_topics=topics,
        required_patterns=patterns,
        recommendations=build_recommendations(topics, patterns),
        next_steps=build_next_steps(topics, patterns),
    )
