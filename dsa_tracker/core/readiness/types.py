"""Pydantic models for company readiness scoring."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Importance(str, Enum):
    """Importance class of a required topic or pattern."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"


# =============================================================================
# Requirement profile
# =============================================================================


class RequirementItem(BaseModel):
    """A required topic or pattern within a company profile.

    Unknown keys are kept so they survive into the scored output.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    name: str = Field(..., description="Canonical label (e.g., 'Dynamic Programming')")
    importance: str | None = Field(None, description="critical, high or medium")
    practice_list: list[str] | None = Field(
        None, description="Canonical problem titles; its length is the practice target"
    )
    typical_questions: int | float | None = Field(None, description="Fallback practice target")
    frequency: float | None = Field(None, description="How often a pattern shows up (0-100)")


class ScoredRequirement(RequirementItem):
    """A requirement annotated with the user's coverage."""

    solved_count: int = Field(0, ge=0, description="Problems the user solved for this item")
    total_required: int | float = Field(0, description="Practice target used for coverage")
    coverage_percent: int = Field(0, ge=0, le=100, description="Rounded coverage out of 100")
    covered: bool = Field(False, description="Whether coverage meets the threshold")


class CompanyRequirementProfile(BaseModel):
    """A company's weighted topic and pattern requirements."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: str = Field("", description="Company display name")
    required_topics: list[RequirementItem] = Field(default_factory=list)
    required_patterns: list[RequirementItem] = Field(default_factory=list)
    last_updated: datetime | None = Field(None, description="When the profile was cached")

    @field_validator("required_topics", "required_patterns", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# =============================================================================
# User coverage and report
# =============================================================================


class UserCoverageRecord(BaseModel):
    """How many problems a user solved for one topic or pattern."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    solved_count: int = Field(0, ge=0)


class ReadinessReport(BaseModel):
    """Readiness of a user for one company's interviews."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: str
    overall_readiness: float = Field(..., ge=0, le=100, description="Weighted coverage, 1 decimal")
    required_topics: list[ScoredRequirement] = Field(default_factory=list)
    required_patterns: list[ScoredRequirement] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    cached: bool = Field(False, description="Whether the profile came from the store")


# =============================================================================
# Constants
# =============================================================================

IMPORTANCE_WEIGHTS = {
    Importance.CRITICAL.value: 3,
    Importance.HIGH.value: 2,
    Importance.MEDIUM.value: 1,
}
DEFAULT_WEIGHT = 1

COVERAGE_THRESHOLD = 75

DEFAULT_TOPIC_TOTAL = 15
DEFAULT_PATTERN_FREQUENCY = 75
FREQUENCY_PER_PROBLEM = 5

EXCELLENT_COVERAGE_RECOMMENDATION = "Excellent coverage! Keep practicing to maintain your skills."
EXCELLENT_COVERAGE_NEXT_STEP = (
    "You have excellent coverage! Focus on consistency and advanced problems."
)
