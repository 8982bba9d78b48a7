"""Logged problem database operations."""

from dsa_tracker.core.config import get_settings
from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.problem_stats import LoggedProblem
from dsa_tracker.db.supabase_client import get_supabase

logger = get_logger(__name__)


def list_user_problems(user_id: str) -> list[LoggedProblem]:
    """
    List every problem a user has logged.

    Args:
        user_id: Owner of the problems

    Returns:
        Logged problems, oldest first

    Raises:
        Exception: If database operation fails
    """
    supabase = get_supabase()
    table = get_settings().PROBLEMS_TABLE

    try:
        response = (
            supabase.table(table)
            .select("title, topic, pattern, difficulty, revision_count, next_revision_date")
            .eq("user_id", user_id)
            .order("created_at")
            .execute()
        )
    except Exception as e:
        logger.error(f"Failed to list problems for user {user_id}: {e}")
        raise

    return [LoggedProblem.model_validate(row) for row in response.data or []]
