"""Unit tests for the alpha hunting filter predicates."""

from __future__ import annotations

import pytest

from alpha_hunter.models.hunt_config import FilterConfig, HuntConfig
from alpha_hunter.stages.stage3_filters import AlphaFilterStage


@pytest.fixture
def stage() -> AlphaFilterStage:
    return AlphaFilterStage()


def test_filter_conjunction(stage, make_project) -> None:
    """Score, launch status and category must all pass."""
    candidate = make_project(
        potential_score=7, launch_status="Upcoming Q3", category_tags="DeFi, Other"
    )
    low_score = candidate.model_copy(update={"potential_score": 5})
    off_target = candidate.model_copy(update={"category_tags": "Other"})

    assert stage.passes(candidate)
    assert not stage.passes(low_score)
    assert not stage.passes(off_target)


def test_evaluate_reports_first_failing_predicate(stage, make_project) -> None:
    result = stage.evaluate(make_project(potential_score=5, category_tags="Other"))

    assert not result.passed
    assert result.rejected_by == "potential_score"
    assert result.checked_filters == 1
    assert "5" in result.rejection_reason


def test_evaluate_counts_every_check_on_pass(stage, make_project) -> None:
    result = stage.evaluate(make_project())

    assert result.passed
    assert result.checked_filters == 3
    assert result.rejected_by is None


def test_minimum_score_is_inclusive(stage, make_project) -> None:
    assert stage.passes(make_project(potential_score=6))
    assert not stage.passes(make_project(potential_score=5.99))


@pytest.mark.parametrize(
    "status",
    ["Live", "In Development", "upcoming", "Open Beta", "Still making it", "2025-08-31", "2025Q3"],
)
def test_tracked_launch_statuses_pass(stage, make_project, status: str) -> None:
    assert stage.passes(make_project(launch_status=status))


@pytest.mark.parametrize("status", ["Abandoned", "N/A", "", "Q3 2025"])
def test_untracked_launch_statuses_fail(stage, make_project, status: str) -> None:
    result = stage.evaluate(make_project(launch_status=status))

    assert result.rejected_by == "launch_status"


def test_category_match_is_case_sensitive(stage, make_project) -> None:
    assert not stage.passes(make_project(category_tags="gamefi"))
    assert not stage.passes(make_project(category_tags="N/A"))


def test_category_match_is_plain_substring(stage, make_project) -> None:
    """The "AI" target is found inside unrelated tags too."""
    assert stage.passes(make_project(category_tags="SAINT"))


def test_process_preserves_input_order(stage, make_project) -> None:
    projects = [
        make_project(project_name="A"),
        make_project(project_name="B", potential_score=2),
        make_project(project_name="C"),
    ]

    kept = stage.process(projects)

    assert [p.project_name for p in kept] == ["A", "C"]


def test_custom_filter_config(make_project) -> None:
    config = HuntConfig(filters=FilterConfig(min_potential_score=8, target_categories=["NFT"]))
    stage = AlphaFilterStage(config)

    assert stage.passes(make_project(potential_score=8, category_tags="NFT"))
    assert not stage.passes(make_project(potential_score=8, category_tags="GameFi"))
    assert not stage.passes(make_project(potential_score=7, category_tags="NFT"))
