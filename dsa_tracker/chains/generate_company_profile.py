"""Generate a company requirement profile with Claude.

Single call with a forced `submit_company_profile` tool so the model returns
structured JSON; the tool input is validated against
CompanyRequirementProfile before anything is cached.
"""

from __future__ import annotations

import json
import time

from anthropic import AsyncAnthropic
from pydantic import ValidationError

from dsa_tracker.core.company_profiles import ProfileGenerationError
from dsa_tracker.core.config import get_settings
from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.readiness.types import CompanyRequirementProfile

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are an expert technical interviewer with deep knowledge of Data Structures
and Algorithms interview patterns across major tech companies.
Given a company name, describe which DSA topics and patterns its entry-level
coding interviews require, how important each one is, and a must-do practice list.
Use standardized names (e.g., Arrays, Strings, Trees, Graphs, Dynamic Programming;
Sliding Window, Two Pointers, Binary Search, Tree DFS, Graph BFS, Backtracking)."""

COMPANY_GUIDELINES = {
    "microsoft": """MICROSOFT (SDE-1/Fresher):
- Critical topics: Arrays, Strings, Trees, Linked Lists, Hash Tables
- High priority topics: Graphs, Dynamic Programming, Stacks/Queues
- Medium priority topics: Heaps, Tries, Backtracking
- Critical patterns: Two Pointers, Sliding Window, DFS/BFS, Tree Traversals
- High priority patterns: Backtracking, Dynamic Programming, Binary Search
- Medium priority patterns: Greedy, Graph Algorithms""",
    "google": """GOOGLE (L3/Entry Level):
- Critical topics: Arrays, Graphs, Trees, Dynamic Programming
- High priority topics: Strings, Hash Tables, Heaps
- Medium priority topics: Tries, Backtracking, Math
- Critical patterns: DFS/BFS, Dynamic Programming, Graph Algorithms
- High priority patterns: Greedy, Tree Traversals, Binary Search
- Medium priority patterns: Sliding Window, Two Pointers, Combinatorics""",
    "amazon": """AMAZON (SDE-1):
- Critical topics: Arrays, Strings, Trees, Hash Tables
- High priority topics: Linked Lists, Stacks/Queues, Graphs
- Medium priority topics: Dynamic Programming, Heaps, Tries
- Critical patterns: Two Pointers, Hash Map Operations, Tree Traversals
- High priority patterns: DFS/BFS, Sliding Window, Binary Search
- Medium priority patterns: Dynamic Programming, Greedy""",
    "meta": """META (E3/Entry):
- Critical topics: Arrays, Graphs, Trees, Dynamic Programming
- High priority topics: Strings, Hash Tables, Stacks/Queues
- Medium priority topics: Linked Lists, Heaps, Backtracking
- Critical patterns: BFS/DFS, Dynamic Programming, Graph Traversals
- High priority patterns: Tree Traversals, Hash Map Operations, Two Pointers
- Medium priority patterns: Sliding Window, Greedy, Binary Search""",
}

GENERAL_GUIDELINES = (
    "Base the profile on general FAANG-level standards with balanced coverage "
    "across core DSA topics and patterns."
)

_REQUIREMENT_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "importance": {"type": "string", "enum": ["critical", "high", "medium"]},
        "typicalQuestions": {"type": "integer", "minimum": 1},
        "frequency": {"type": "number", "minimum": 0, "maximum": 100},
        "practiceList": {
            "type": "array",
            "items": {"type": "string"},
            "description": "10-15 well-known problem titles for this item at this company.",
        },
    },
    "required": ["name", "importance", "practiceList"],
}

COMPANY_PROFILE_TOOL = {
    "name": "submit_company_profile",
    "description": "Submit the topic and pattern requirements for a company's coding interviews.",
    "input_schema": {
        "type": "object",
        "properties": {
            "companyName": {"type": "string"},
            "requiredTopics": {"type": "array", "items": _REQUIREMENT_ITEM_SCHEMA},
            "requiredPatterns": {"type": "array", "items": _REQUIREMENT_ITEM_SCHEMA},
        },
        "required": ["companyName", "requiredTopics", "requiredPatterns"],
    },
}


def build_profile_prompt(company_name: str) -> str:
    guidelines = COMPANY_GUIDELINES.get(company_name.strip().lower(), GENERAL_GUIDELINES)

    return f"""Company: {company_name}

Guidelines:
{guidelines}

For each required topic give its importance and typicalQuestions (how many
problems a candidate should practice). For each required pattern give its
importance and frequency (0-100, how often it appears in {company_name} interviews).

For every topic and pattern provide a practiceList of 10-15 specific, well-known
problem titles (e.g., "Two Sum", "Merge Intervals", "Climbing Stairs") from LeetCode,
GeeksforGeeks or similar platforms that are commonly asked at {company_name}.
Together they should form a must-do list covering the essential logic for that item.

Submit the profile with the submit_company_profile tool."""


class AnthropicProfileGenerator:
    """Generates requirement profiles through the Anthropic Messages API."""

    def __init__(
        self,
        client: AsyncAnthropic | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        settings = get_settings()
        self._client = client or AsyncAnthropic(
            api_key=settings.ANTHROPIC_API_KEY,
            timeout=settings.ANTHROPIC_TIMEOUT_SECONDS,
        )
        self._model = model or settings.PROFILE_MODEL
        self._max_tokens = max_tokens or settings.PROFILE_MAX_TOKENS
        self._temperature = settings.PROFILE_TEMPERATURE if temperature is None else temperature

    async def generate(self, company_name: str) -> CompanyRequirementProfile:
        """
        Ask the model for a company's requirement profile.

        Args:
            company_name: Company display name

        Returns:
            Validated CompanyRequirementProfile

        Raises:
            ProfileGenerationError: If the call fails or the output is unusable
        """
        logger.info(f"Generating requirement profile for {company_name}")

        t0 = time.time()
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_profile_prompt(company_name)}],
                temperature=self._temperature,
                tools=[COMPANY_PROFILE_TOOL],
                tool_choice={"type": "tool", "name": COMPANY_PROFILE_TOOL["name"]},
            )
        except Exception as e:
            raise ProfileGenerationError(f"Profile generation failed for {company_name}: {e}") from e
        elapsed_ms = int((time.time() - t0) * 1000)

        data = None
        for block in response.content:
            if getattr(block, "type", None) == "tool_use" and block.name == COMPANY_PROFILE_TOOL["name"]:
                data = block.input
                break

        if not data:
            raise ProfileGenerationError(f"Model returned no profile for {company_name}")

        try:
            if isinstance(data, str):
                data = json.loads(data)
            profile = CompanyRequirementProfile.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ProfileGenerationError(f"Invalid profile for {company_name}: {e}") from e

        if not profile.company_name:
            profile.company_name = company_name

        logger.info(
            f"Generated requirement profile for {company_name} in {elapsed_ms}ms",
            extra={
                "extra_data": {
                    "topics": len(profile.required_topics),
                    "patterns": len(profile.required_patterns),
                }
            },
        )
        return profile
