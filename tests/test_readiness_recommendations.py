"""Tests for readiness recommendations and next steps."""

from dsa_tracker.core.readiness import (
    CompanyRequirementProfile,
    RequirementItem,
    UserCoverageRecord,
    compute_readiness,
)
from dsa_tracker.core.readiness.types import (
    EXCELLENT_COVERAGE_NEXT_STEP,
    EXCELLENT_COVERAGE_RECOMMENDATION,
)


def _item(name: str, importance: str, typical: int = 10, **kwargs) -> RequirementItem:
    return RequirementItem(name=name, importance=importance, typical_questions=typical, **kwargs)


def _solved(pairs: dict[str, int]) -> list[UserCoverageRecord]:
    return [UserCoverageRecord(name=name, solved_count=count) for name, count in pairs.items()]


def _report(topics=(), patterns=(), solved_topics=None, solved_patterns=None):
    profile = CompanyRequirementProfile(
        company_name="Acme",
        required_topics=list(topics),
        required_patterns=list(patterns),
    )
    return compute_readiness(_solved(solved_topics or {}), _solved(solved_patterns or {}), profile)


# =============================================================================
# Recommendations
# =============================================================================


def test_critical_topics_lowest_coverage_first_top_three():
    topics = [
        _item("Strings", "critical"),
        _item("Arrays", "critical"),
        _item("Trees", "critical"),
        _item("Graphs", "critical"),
    ]

    report = _report(topics, solved_topics={"Strings": 3, "Arrays": 0, "Trees": 2, "Graphs": 1})

    assert report.recommendations == [
        "Focus on critical topics: Arrays (0%), Graphs (10%), Trees (20%)",
    ]


def test_recommendation_tiers_in_order():
    topics = [_item("Arrays", "critical"), _item("Heaps", "high"), _item("Tries", "high")]
    patterns = [_item("Two Pointers", "critical"), _item("Greedy", "high")]

    report = _report(
        topics,
        patterns,
        solved_topics={"Arrays": 4, "Heaps": 5, "Tries": 1},
        solved_patterns={"Two Pointers": 2, "Greedy": 0},
    )

    assert report.recommendations == [
        "Focus on critical topics: Arrays (40%)",
        "Master critical patterns: Two Pointers (20%)",
        "Improve high-priority topics: Tries (10%), Heaps (50%)",
        "Work on high-priority patterns: Greedy (0%)",
    ]


def test_high_priority_limited_to_two():
    patterns = [_item(name, "high") for name in ("Greedy", "Binary Search", "Backtracking")]

    report = _report(patterns=patterns, solved_patterns={"Greedy": 3, "Binary Search": 1, "Backtracking": 2})

    assert report.recommendations == [
        "Work on high-priority patterns: Binary Search (10%), Backtracking (20%)",
    ]


def test_medium_gaps_only_give_fallback_recommendation():
    report = _report([_item("Heaps", "medium")], solved_topics={"Heaps": 1})

    assert report.recommendations == [EXCELLENT_COVERAGE_RECOMMENDATION]
    assert report.next_steps == ["1. Solve 9 more Heaps problems (currently 10% coverage)"]


def test_covered_items_not_recommended():
    report = _report(
        [_item("Arrays", "critical"), _item("Strings", "critical")],
        solved_topics={"Arrays": 8, "Strings": 7},
    )

    assert report.recommendations == ["Focus on critical topics: Strings (70%)"]


def test_threshold_uses_displayed_coverage():
    # 47/63 is 74.6%: shown as 75%, so no advice, yet not marked covered
    report = _report([_item("Arrays", "critical", typical=63)], solved_topics={"Arrays": 47})

    arrays = report.required_topics[0]
    assert arrays.coverage_percent == 75
    assert arrays.covered is False
    assert report.recommendations == [EXCELLENT_COVERAGE_RECOMMENDATION]
    assert report.next_steps == [EXCELLENT_COVERAGE_NEXT_STEP]


# =============================================================================
# Next steps
# =============================================================================


def test_next_steps_importance_before_coverage():
    report = _report(
        [_item("Heaps", "medium"), _item("Trees", "critical")],
        solved_topics={"Heaps": 1, "Trees": 4},
    )

    assert report.next_steps == [
        "1. Solve 6 more Trees problems (currently 40% coverage)",
        "2. Solve 9 more Heaps problems (currently 10% coverage)",
    ]


def test_next_steps_merge_topics_and_patterns():
    report = _report(
        [_item("Arrays", "high")],
        [_item("Two Pointers", "critical"), _item("Greedy", "high")],
        solved_topics={"Arrays": 3},
        solved_patterns={"Two Pointers": 6, "Greedy": 2},
    )

    assert report.next_steps == [
        "1. Solve 4 more Two Pointers problems (currently 60% coverage)",
        "2. Solve 8 more Greedy problems (currently 20% coverage)",
        "3. Solve 7 more Arrays problems (currently 30% coverage)",
    ]


def test_next_steps_limited_to_five():
    topics = [_item(f"Topic {i}", "critical") for i in range(7)]

    report = _report(topics)

    assert len(report.next_steps) == 5
    assert report.next_steps[0].startswith("1. ")
    assert report.next_steps[4].startswith("5. ")


def test_needed_count_uses_typical_questions_not_practice_list():
    # Coverage is measured against the 10-item practice list,
    # while the next step still counts toward typicalQuestions.
    topic = RequirementItem(
        name="Arrays",
        importance="critical",
        typical_questions=20,
        practice_list=[f"Problem {i}" for i in range(10)],
    )

    report = _report([topic], solved_topics={"Arrays": 5})

    assert report.required_topics[0].total_required == 10
    assert report.required_topics[0].coverage_percent == 50
    assert report.next_steps == ["1. Solve 15 more Arrays problems (currently 50% coverage)"]


def test_needed_count_falls_back_to_target_without_typical_questions():
    topic = RequirementItem(name="Graphs", importance="critical")

    report = _report([topic], solved_topics={"Graphs": 3})

    assert report.next_steps == ["1. Solve 12 more Graphs problems (currently 20% coverage)"]


def test_fractional_typical_questions_are_scored():
    profile = CompanyRequirementProfile.model_validate(
        {
            "companyName": "Acme",
            "requiredTopics": [{"name": "Heaps", "importance": "critical", "typicalQuestions": 12.5}],
            "requiredPatterns": [],
        }
    )

    report = compute_readiness([UserCoverageRecord(name="Heaps", solved_count=5)], [], profile)

    assert report.required_topics[0].total_required == 12.5
    assert report.required_topics[0].coverage_percent == 40
    assert report.next_steps == ["1. Solve 7 more Heaps problems (currently 40% coverage)"]
