"""Tests for aggregating logged problems into coverage records."""

from unittest.mock import MagicMock, patch

from dsa_tracker.core.problem_stats import LoggedProblem, aggregate_coverage
from dsa_tracker.core.readiness import CompanyRequirementProfile, RequirementItem, compute_readiness
from dsa_tracker.db.problems import list_user_problems


def _problem(title, topic=None, pattern=None) -> LoggedProblem:
    return LoggedProblem(title=title, topic=topic, pattern=pattern)


def test_counts_per_topic_and_pattern():
    problems = [
        _problem("Two Sum", "Arrays", "Two Pointers"),
        _problem("Invert Binary Tree", "Trees"),
        _problem("Max Consecutive Ones III", "Arrays", "Sliding Window"),
        _problem("3Sum", "Arrays", "Two Pointers"),
        _problem("Clone Graph", "Graphs", "  "),
    ]

    topics, patterns = aggregate_coverage(problems)

    assert [(t.name, t.solved_count) for t in topics] == [("Arrays", 3), ("Trees", 1), ("Graphs", 1)]
    assert [(p.name, p.solved_count) for p in patterns] == [("Two Pointers", 2), ("Sliding Window", 1)]


def test_no_problems():
    assert aggregate_coverage([]) == ([], [])


def test_logged_problem_parses_camel_case_rows():
    problem = LoggedProblem.model_validate(
        {
            "title": "Coin Change",
            "topic": "Dynamic Programming",
            "difficulty": "Hard",
            "revisionCount": 2,
            "nextRevisionDate": "2026-01-01T00:00:00Z",
            "userId": "u1",
        }
    )

    assert problem.revision_count == 2
    assert problem.next_revision_date.day == 1
    assert problem.pattern is None


def test_aggregated_coverage_feeds_readiness():
    problems = [_problem(f"P{i}", "Dynamic Programming (DP)", "DP") for i in range(6)]
    profile = CompanyRequirementProfile(
        company_name="Acme",
        required_topics=[RequirementItem(name="Dynamic Programming", importance="critical", typical_questions=12)],
        required_patterns=[RequirementItem(name="DP", importance="critical", typical_questions=6)],
    )

    topics, patterns = aggregate_coverage(problems)
    report = compute_readiness(topics, patterns, profile)

    assert report.required_topics[0].coverage_percent == 50
    assert report.required_patterns[0].covered is True
    assert report.overall_readiness == 75.0


def test_list_user_problems():
    rows = [
        {"title": "Two Sum", "topic": "Arrays", "pattern": "Hashing", "difficulty": "Easy", "revision_count": 1},
        {"title": "LRU Cache", "topic": "Design", "pattern": None, "difficulty": None, "revision_count": 0},
    ]

    with patch("dsa_tracker.db.problems.get_supabase") as mock_supabase:
        query = mock_supabase.return_value.table.return_value.select.return_value.eq.return_value
        query.order.return_value.execute.return_value = MagicMock(data=rows)

        problems = list_user_problems("user-1")

        mock_supabase.return_value.table.assert_called_with("problems")
        mock_supabase.return_value.table.return_value.select.return_value.eq.assert_called_with(
            "user_id", "user-1"
        )

    assert [p.title for p in problems] == ["Two Sum", "LRU Cache"]
    assert problems[0].revision_count == 1
    assert problems[1].difficulty is None
