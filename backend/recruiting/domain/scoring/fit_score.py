"""
Fit Score Engine

Combines the four dimension point totals into a 0-100 fit score and
classifies it into a tier.

Score = athletic (0-40) + academic (0-25) + opportunity (0-20) + personal (0-15)

Tiers (lower bounds inclusive, applied to the unrounded sum):
- 70+ = match
- 50-69 = reach
- below 50 = unlikely

"safety" is never derived from a score. It only exists as a tier
supplied by the caller.
"""

import logging
import math
from typing import Any, Mapping, Union

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from recruiting.domain.constants import (
    FIT_DIMENSIONS,
    FIT_RECOMMENDATIONS,
    FIT_THRESHOLDS,
    FIT_TIER_COLORS,
)
from recruiting.domain.models import FitScoreInputs, FitScoreResult, FitTier
from recruiting.domain.normalization import coerce_enum, coerce_number, round_half_up
from recruiting.infrastructure.exceptions import ValidationError

logger = logging.getLogger(__name__)

FitInputs = Union[FitScoreInputs, Mapping[str, Any], None]


def as_fit_inputs(inputs: FitInputs) -> FitScoreInputs:
    """Sanitise any fit payload into FitScoreInputs; unreadable payloads are all-zero."""
    if isinstance(inputs, FitScoreInputs):
        return inputs

    if inputs is None:
        return FitScoreInputs()

    try:
        return FitScoreInputs.model_validate(inputs)
    except PydanticValidationError:
        logger.debug(f"[FIT-SCORE] Unreadable inputs of type {type(inputs).__name__}")
        return FitScoreInputs()


def calculate_fit_score(inputs: FitInputs) -> FitScoreResult:
    """
    Calculate the total fit score from partial dimension inputs.

    Returns score (0-100), tier, clamped breakdown and the dimensions
    that contributed nothing.
    """
    breakdown = as_fit_inputs(inputs).clamped()

    total = sum(getattr(breakdown, field) for field, _ in FIT_DIMENSIONS.values())
    tier = get_fit_tier(total)

    # A genuine zero cannot be told apart from a dimension that was never provided
    missing_dimensions = [
        name for name, (field, _) in FIT_DIMENSIONS.items()
        if getattr(breakdown, field) == 0
    ]

    result = FitScoreResult(
        score=round_half_up(total),
        tier=tier,
        breakdown=breakdown,
        missing_dimensions=missing_dimensions,
    )

    logger.debug(
        f"[FIT-SCORE] total={total:.2f} score={result.score} tier={tier.value} "
        f"missing={missing_dimensions}"
    )
    return result


def get_fit_tier(score: Any) -> FitTier:
    value = coerce_number(score)

    if value >= FIT_THRESHOLDS[FitTier.MATCH]:
        return FitTier.MATCH
    elif value >= FIT_THRESHOLDS[FitTier.REACH]:
        return FitTier.REACH
    else:
        return FitTier.UNLIKELY


def get_fit_tier_color(tier: Union[FitTier, str]) -> str:
    """Display color for a tier; unknown tiers get the "unlikely" color."""
    resolved = coerce_enum(tier, FitTier) or FitTier.UNLIKELY
    return FIT_TIER_COLORS[resolved]


def get_fit_score_recommendation(score: Any, tier: Union[FitTier, str, None]) -> str:
    """
    Fixed advice sentence for a tier.

    An unrecognised tier falls back to the tier derived from the score.
    The score is shown as passed, not rounded; whole numbers print
    without a decimal part.
    """
    value = coerce_number(score)
    resolved = coerce_enum(tier, FitTier) or get_fit_tier(value)
    shown = int(value) if value.is_integer() else value

    return FIT_RECOMMENDATIONS[resolved].format(score=shown)


def validate_fit_inputs(raw: Mapping[str, Any]) -> FitScoreInputs:
    """
    Strict check of a fit payload, for callers that reject bad input.

    Every dimension that is present must be a finite number within
    [0, max]. Absent dimensions are allowed and count as 0.

    Raises:
        ValidationError: naming the first offending dimension, e.g.
            "athleticFit must be a number between 0 and 40"
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Fit score inputs must be an object")

    for field, max_points in FIT_DIMENSIONS.values():
        key = to_camel(field)
        if key in raw:
            value = raw[key]
        elif field in raw:
            value = raw[field]
        else:
            continue

        if value is None:
            continue

        if not _is_finite_number(value) or not 0 <= value <= max_points:
            raise ValidationError(
                f"{key} must be a number between 0 and {max_points}",
                field=key,
                value=value,
            )

    return FitScoreInputs.model_validate(raw)


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
