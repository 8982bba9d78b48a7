"""API endpoints for practice coverage and revisions."""

from datetime import datetime

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.problem_stats import aggregate_coverage
from dsa_tracker.core.readiness import UserCoverageRecord
from dsa_tracker.core.revision import (
    RevisionQueueEntry,
    build_revision_queue,
    calculate_next_revision_date,
)
from dsa_tracker.db.problems import list_user_problems

logger = get_logger(__name__)

router = APIRouter()


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoverageResponse(_CamelModel):
    topics: list[UserCoverageRecord]
    patterns: list[UserCoverageRecord]


class ScheduleRequest(_CamelModel):
    difficulty: str = "Medium"
    revision_count: int = Field(0, ge=0)


class ScheduleResponse(_CamelModel):
    next_revision_date: datetime


@router.get("/users/{user_id}/coverage", response_model=CoverageResponse)
async def get_user_coverage(user_id: str) -> CoverageResponse:
    """
    Solved counts per topic and pattern for a user.

    Raises:
        HTTPException 500: If problems cannot be loaded
    """
    try:
        problems = list_user_problems(user_id)
    except Exception as e:
        logger.exception(f"Failed to load problems for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to load problems") from e

    topics, patterns = aggregate_coverage(problems)
    return CoverageResponse(topics=topics, patterns=patterns)


@router.post("/revisions/schedule", response_model=ScheduleResponse)
async def schedule_revision(request: ScheduleRequest) -> ScheduleResponse:
    """Next revision date for a problem of the given difficulty."""
    next_date = calculate_next_revision_date(request.difficulty, request.revision_count)
    return ScheduleResponse(next_revision_date=next_date)


class RevisionQueueResponse(_CamelModel):
    problems: list[RevisionQueueEntry]
    due_count: int = Field(..., description="Problems overdue or due today")


@router.get("/users/{user_id}/revisions", response_model=RevisionQueueResponse)
async def get_revision_queue(user_id: str) -> RevisionQueueResponse:
    """
    Scheduled problems for a user, most urgent first.

    Raises:
        HTTPException 500: If problems cannot be loaded
    """
    try:
        problems = list_user_problems(user_id)
    except Exception as e:
        logger.exception(f"Failed to load revision queue for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to load problems") from e

    queue = build_revision_queue(problems)
    due_count = sum(1 for entry in queue if entry.status != "upcoming")
    return RevisionQueueResponse(problems=queue, due_count=due_count)
