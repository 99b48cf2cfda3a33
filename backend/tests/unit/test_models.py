"""
Unit tests for the domain models and their sanitising validators.
"""

import math

import pytest

from recruiting.domain.models import (
    AthleteProfile,
    CampusSize,
    FitScoreInputs,
    Level,
    MilestoneProgress,
    Phase,
    PortfolioSchool,
    ScoreBreakdown,
    SchoolProfile,
)
from recruiting.domain.normalization import coerce_optional_number, coerce_string_list, round_half_up


class TestNormalization:
    """Tests for the shared coercion helpers."""

    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        ("3.5", 3.5),
        (" 12 ", 12.0),
        ("", None),
        ("abc", None),
        (True, None),
        (None, None),
        (float("nan"), None),
        (math.inf, None),
    ])
    def test_coerce_optional_number(self, value, expected):
        assert coerce_optional_number(value) == expected

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (72.49, 72), (-0.5, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_string_list_sorts_sets(self):
        assert coerce_string_list({"b", " a ", "c", 3}) == ["a", "b", "c"]
        assert coerce_string_list(frozenset({"y", "x"})) == ["x", "y"]

    def test_string_list_keeps_list_order(self):
        assert coerce_string_list(["b", "", "a"]) == ["b", "a"]
        assert coerce_string_list("a,b") == []


class TestScoreBreakdown:

    def test_accepts_camel_and_snake_case(self):
        breakdown = ScoreBreakdown.model_validate({"taskCompletionRate": 40, "coach_interest_score": 55})

        assert breakdown.task_completion_rate == 40
        assert breakdown.coach_interest_score == 55
        assert breakdown.academic_standing_score == 0

    def test_junk_becomes_zero(self):
        breakdown = ScoreBreakdown.model_validate({
            "taskCompletionRate": None,
            "interactionFrequencyScore": "soon",
            "coachInterestScore": False,
        })

        assert breakdown == ScoreBreakdown()

    def test_is_frozen(self):
        breakdown = ScoreBreakdown()

        with pytest.raises(Exception):
            breakdown.task_completion_rate = 50


class TestMilestoneProgress:
    """remaining and percent_complete are always derived."""

    def test_remaining_derived(self):
        progress = MilestoneProgress(required=["a", "b", "c"], completed=["c", "a"])

        assert progress.completed == ["a", "c"]
        assert progress.remaining == ["b"]
        assert progress.percent_complete == pytest.approx(66.666, rel=1e-3)

    def test_completed_reduced_to_required(self):
        progress = MilestoneProgress(required=["a"], completed=["a", "z"])

        assert progress.completed == ["a"]
        assert progress.percent_complete == 100.0

    def test_supplied_values_ignored(self):
        progress = MilestoneProgress.model_validate({
            "required": ["a", "b"],
            "completed": [],
            "remaining": [],
            "percentComplete": 100,
        })

        assert progress.remaining == ["a", "b"]
        assert progress.percent_complete == 0.0

    def test_remaining_without_required_is_kept(self):
        progress = MilestoneProgress.model_validate({"completed": ["a"], "remaining": ["b", "c"]})

        assert progress.required == ["a", "b", "c"]
        assert progress.completed == ["a"]
        assert progress.remaining == ["b", "c"]
        assert progress.percent_complete == pytest.approx(33.333, rel=1e-3)

    def test_completed_without_required_or_remaining(self):
        progress = MilestoneProgress(phase="senior", completed=["x"])

        assert progress.required == []
        assert progress.percent_complete == 0.0

    def test_empty_required_is_zero_percent(self):
        progress = MilestoneProgress(phase="SENIOR")

        assert progress.phase == Phase.SENIOR
        assert progress.percent_complete == 0.0

    def test_bad_lists(self):
        progress = MilestoneProgress(required="a,b", completed=[1, None, " "])

        assert progress.required == []
        assert progress.completed == []


class TestFitScoreInputs:

    def test_clamped_copy(self):
        inputs = FitScoreInputs(athletic_fit=50, academic_fit=-2, opportunity_fit=12, personal_fit=20)

        clamped = inputs.clamped()

        assert clamped == FitScoreInputs(athletic_fit=40, academic_fit=0, opportunity_fit=12, personal_fit=15)
        assert inputs.athletic_fit == 50


class TestProfiles:
    """Raw attribute records used by the dimension calculators."""

    def test_enum_fields_case_insensitive(self):
        athlete = AthleteProfile(campus_size_preference="LARGE", cost_sensitivity=" High ")

        assert athlete.campus_size_preference == CampusSize.LARGE
        assert athlete.cost_sensitivity == Level.HIGH

    def test_unknown_enum_values_dropped(self):
        school = SchoolProfile(coach_interest="very high", scholarship_availability=3)

        assert school.coach_interest is None
        assert school.scholarship_availability is None

    def test_measurements_sanitised(self):
        athlete = AthleteProfile(heightInches="74", weightLbs="heavy", gpa=float("nan"))

        assert athlete.height_inches == 74.0
        assert athlete.weight_lbs is None
        assert athlete.gpa is None

    def test_school_lists_and_flags(self):
        school = SchoolProfile(
            position_needs="SS",
            offered_majors=["Biology", 42, ""],
            walk_on_history=1,
            is_priority="true",
        )

        assert school.position_needs == []
        assert school.offered_majors == ["Biology"]
        assert school.walk_on_history is None
        assert school.is_priority is False

    def test_portfolio_school_tier(self):
        assert PortfolioSchool(fit_tier="MATCH").fit_tier.value == "match"
        assert PortfolioSchool(fit_tier="dream").fit_tier is None
        assert PortfolioSchool(fit_score=None).fit_score == 0.0
