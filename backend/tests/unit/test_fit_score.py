"""
Unit tests for the fit score engine.

Tier boundaries, clamping, missing dimensions and the strict input check.
"""

import pytest

from recruiting.domain.constants import FIT_DIMENSION_MAX_POINTS
from recruiting.domain.models import FitScoreInputs, FitTier
from recruiting.domain.scoring import (
    calculate_fit_score,
    get_fit_score_recommendation,
    get_fit_tier,
    get_fit_tier_color,
    validate_fit_inputs,
)
from recruiting.infrastructure.exceptions import ValidationError


# ============== Tier Tests ==============

class TestFitTier:
    """Tests for score -> tier classification."""

    @pytest.mark.parametrize("score,expected", [
        (100, FitTier.MATCH),
        (70, FitTier.MATCH),
        (69, FitTier.REACH),
        (69.99, FitTier.REACH),
        (50, FitTier.REACH),
        (49, FitTier.UNLIKELY),
        (0, FitTier.UNLIKELY),
    ])
    def test_boundaries(self, score, expected):
        assert get_fit_tier(score) == expected

    def test_safety_is_never_computed(self):
        """Safety only ever arrives as a caller-supplied label."""
        tiers = {get_fit_tier(score / 2) for score in range(0, 201)}

        assert tiers == {FitTier.MATCH, FitTier.REACH, FitTier.UNLIKELY}

    @pytest.mark.parametrize("tier,color", [
        ("match", "emerald"),
        ("safety", "blue"),
        ("reach", "orange"),
        (FitTier.UNLIKELY, "red"),
    ])
    def test_tier_colors(self, tier, color):
        assert get_fit_tier_color(tier) == color


# ============== Fit Score Tests ==============

class TestCalculateFitScore:
    """Tests for combining dimension points."""

    def test_sums_dimensions(self):
        result = calculate_fit_score({
            "athleticFit": 35,
            "academicFit": 20,
            "opportunityFit": 10,
            "personalFit": 5,
        })

        assert result.score == 70
        assert result.tier == FitTier.MATCH
        assert result.missing_dimensions == []

    def test_dimension_maximums_sum_to_100(self):
        assert sum(FIT_DIMENSION_MAX_POINTS.values()) == 100

    def test_each_dimension_clamped(self):
        result = calculate_fit_score({
            "athletic_fit": 55,
            "academic_fit": 30,
            "opportunity_fit": 25,
            "personal_fit": -5,
        })

        assert result.breakdown.athletic_fit == 40
        assert result.breakdown.academic_fit == 25
        assert result.breakdown.opportunity_fit == 20
        assert result.breakdown.personal_fit == 0
        assert result.score == 85

    def test_clamped_values_stay_in_range(self):
        for value in (-100, -1, 0, 7.5, 14.9, 41, 1000):
            result = calculate_fit_score({
                "athleticFit": value,
                "academicFit": value,
                "opportunityFit": value,
                "personalFit": value,
            })
            breakdown = result.breakdown.model_dump()

            for name, max_points in FIT_DIMENSION_MAX_POINTS.items():
                assert 0 <= breakdown[f"{name}_fit"] <= max_points
            assert 0 <= result.score <= 100

    def test_tier_uses_unrounded_total(self):
        """69.6 displays as 70 but is still a reach."""
        result = calculate_fit_score({"athleticFit": 40, "academicFit": 25, "opportunityFit": 4.6})

        assert result.score == 70
        assert result.tier == FitTier.REACH

    def test_all_zero_is_all_missing(self):
        result = calculate_fit_score({})

        assert result.score == 0
        assert result.tier == FitTier.UNLIKELY
        assert result.missing_dimensions == ["athletic", "academic", "opportunity", "personal"]

    def test_partial_inputs_report_missing_in_order(self):
        result = calculate_fit_score(FitScoreInputs(academic_fit=20, personal_fit=10))

        assert result.missing_dimensions == ["athletic", "opportunity"]

    def test_clamped_to_zero_counts_as_missing(self):
        result = calculate_fit_score({"athleticFit": -3, "academicFit": 10, "opportunityFit": 10, "personalFit": 10})

        assert result.missing_dimensions == ["athletic"]

    @pytest.mark.parametrize("payload", [None, "junk", {"athleticFit": "lots"}, {"athleticFit": float("inf")}])
    def test_unusable_inputs_never_raise(self, payload):
        result = calculate_fit_score(payload)

        assert result.score == 0
        assert len(result.missing_dimensions) == 4

    def test_serialises_with_camel_case_keys(self):
        payload = calculate_fit_score({"athleticFit": 30}).model_dump(by_alias=True, mode="json")

        assert payload["missingDimensions"] == ["academic", "opportunity", "personal"]
        assert payload["breakdown"]["athleticFit"] == 30
        assert payload["tier"] == "unlikely"

    def test_idempotent(self):
        inputs = {"athleticFit": 31.5, "academicFit": 12, "personalFit": 9}

        assert calculate_fit_score(inputs) == calculate_fit_score(inputs)


# ============== Recommendation Tests ==============

class TestRecommendation:
    """Tests for recommendation sentences."""

    def test_match(self):
        assert get_fit_score_recommendation(82, "match").startswith("Excellent fit!")

    def test_safety(self):
        assert get_fit_score_recommendation(40, FitTier.SAFETY).startswith("Good fit!")

    def test_reach_includes_score(self):
        text = get_fit_score_recommendation(62.4, "reach")

        assert text == "Possible fit with some growth. Score: 62.4/100. Focus on the missing dimensions."

    def test_whole_score_shown_without_decimal(self):
        """Scores are passed through unrounded; 62.0 prints as 62."""
        assert "Score: 62/100." in get_fit_score_recommendation(62.0, "reach")
        assert "Score: 69.6/100." in get_fit_score_recommendation(69.6, None)

    def test_unknown_tier_falls_back_to_score(self):
        assert get_fit_score_recommendation(20, "mystery") == get_fit_score_recommendation(20, "unlikely")
        assert get_fit_score_recommendation(75, None) == get_fit_score_recommendation(75, "match")


# ============== Strict Validation Tests ==============

class TestValidateFitInputs:
    """Tests for the opt-in strict boundary check."""

    def test_valid_payload_returns_inputs(self):
        inputs = validate_fit_inputs({"athleticFit": 40, "academicFit": 0, "personal_fit": 15})

        assert isinstance(inputs, FitScoreInputs)
        assert inputs.athletic_fit == 40
        assert inputs.personal_fit == 15
        assert inputs.opportunity_fit == 0

    def test_out_of_range_names_dimension(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fit_inputs({"athleticFit": 45})

        assert exc_info.value.message == "athleticFit must be a number between 0 and 40"
        assert exc_info.value.details == {"field": "athleticFit", "value": 45}

    def test_first_offending_dimension_reported(self):
        with pytest.raises(ValidationError, match="academicFit must be a number between 0 and 25"):
            validate_fit_inputs({"personalFit": 99, "academic_fit": -1})

    @pytest.mark.parametrize("value", ["10", True, float("nan"), [5]])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError, match="opportunityFit"):
            validate_fit_inputs({"opportunityFit": value})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            validate_fit_inputs(["athleticFit", 10])

    def test_error_serialises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_fit_inputs({"personalFit": 16})

        assert exc_info.value.to_dict()["error"] == "ValidationError"
