"""Company interview readiness scoring.

Weighted coverage of a company's required topics and patterns:
- critical items weigh 3, high 2, medium (or unknown) 1
- an item is covered at 75% of its practice target

Usage:
    from dsa_tracker.core.readiness import compute_readiness

    report = compute_readiness(user_topics, user_patterns, profile)
    print(f"{report.company_name}: {report.overall_readiness}%")
"""

from dsa_tracker.core.readiness.score import compute_readiness
from dsa_tracker.core.readiness.types import (
    COVERAGE_THRESHOLD,
    IMPORTANCE_WEIGHTS,
    CompanyRequirementProfile,
    Importance,
    ReadinessReport,
    RequirementItem,
    ScoredRequirement,
    UserCoverageRecord,
)

__all__ = [
    "compute_readiness",
    "CompanyRequirementProfile",
    "Importance",
    "ReadinessReport",
    "RequirementItem",
    "ScoredRequirement",
    "UserCoverageRecord",
    "COVERAGE_THRESHOLD",
    "IMPORTANCE_WEIGHTS",
]
