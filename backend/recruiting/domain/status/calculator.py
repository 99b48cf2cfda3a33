"""
Status Score Calculator

Builds the four status components from activity metrics and combines them
into the composite recruiting status score (0-100).

Weights: task completion 35%, interaction frequency 25%,
coach interest 25%, academic standing 15%.
"""

from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Union

from recruiting.domain.constants import (
    ACADEMIC_STANDING_ACT_TIERS,
    ACADEMIC_STANDING_GPA_TIERS,
    ACADEMIC_STANDING_SAT_TIERS,
    COACH_INTEREST_SIGNAL_POINTS,
    ELIGIBILITY_STATUS_POINTS,
    INTERACTION_RECENCY_TIERS,
    NEXT_ACTIONS,
    PRIORITY_INTEREST_BONUS_CAP,
    PRIORITY_INTEREST_BONUS_PER_SCHOOL,
    STATUS_ADVICE,
    STATUS_COLORS,
    STATUS_LABEL_THRESHOLDS,
    STATUS_WEIGHTS,
)
from recruiting.domain.models import (
    EligibilityStatus,
    Level,
    Phase,
    StatusLabel,
    StatusScoreResult,
)
from recruiting.domain.normalization import (
    clamp,
    coerce_enum,
    coerce_number,
    coerce_optional_number,
    coerce_string_list,
    round_half_up,
)
from recruiting.domain.status.classifier import BreakdownInput, as_breakdown


def calculate_composite_score(breakdown: BreakdownInput) -> int:
    """Weighted sum of the four components, each clamped to 0-100."""
    components = as_breakdown(breakdown)

    score = sum(
        clamp(getattr(components, field), 0, 100) * weight
        for field, weight in STATUS_WEIGHTS.items()
    )

    return round_half_up(clamp(score, 0, 100))


def get_status_label(score: Any) -> StatusLabel:
    value = coerce_number(score)

    if value >= STATUS_LABEL_THRESHOLDS[StatusLabel.ON_TRACK]:
        return StatusLabel.ON_TRACK
    elif value >= STATUS_LABEL_THRESHOLDS[StatusLabel.SLIGHTLY_BEHIND]:
        return StatusLabel.SLIGHTLY_BEHIND
    else:
        return StatusLabel.AT_RISK


def get_status_color(label: Union[StatusLabel, str]) -> str:
    status = coerce_enum(label, StatusLabel) or StatusLabel.AT_RISK
    return STATUS_COLORS[status]


def get_status_advice(label: Union[StatusLabel, str]) -> str:
    status = coerce_enum(label, StatusLabel) or StatusLabel.AT_RISK
    return STATUS_ADVICE[status]


def get_next_actions(
    label: Union[StatusLabel, str],
    phase: Union[Phase, str],
) -> List[str]:
    """Suggested actions for a status in a given phase; [] if either is unknown."""
    status = coerce_enum(label, StatusLabel)
    current_phase = coerce_enum(phase, Phase)

    if status is None or current_phase is None:
        return []

    return list(NEXT_ACTIONS[status].get(current_phase, []))


def calculate_task_completion_rate(
    completed_task_ids: Iterable[str],
    required_task_ids: Iterable[str],
) -> float:
    """Percentage (0-100) of required tasks that are completed."""
    required = coerce_string_list(required_task_ids)
    if not required:
        return 0.0

    completed = set(coerce_string_list(completed_task_ids))
    done = sum(1 for task_id in required if task_id in completed)

    return done / len(required) * 100


def calculate_interaction_frequency_score(
    last_interaction_date: Optional[Union[date, datetime, str]],
    days_since_last_interaction: Any,
    target_schools: Any,
) -> int:
    """
    Score recency of coach communication (0-100).

    - within 7 days = 100
    - within 14 days = 80
    - within 21 days = 60
    - within 30 days = 40
    - older = 0

    No interaction on record, or no target schools, scores 0.
    """
    if not last_interaction_date or coerce_number(target_schools) <= 0:
        return 0

    days = coerce_optional_number(days_since_last_interaction)
    if days is None:
        return 0

    for max_days, points in INTERACTION_RECENCY_TIERS:
        if days <= max_days:
            return points

    return 0


def calculate_coach_interest_score(
    interest_levels: Any,
    priority_school_interest_count: Any = 0,
) -> float:
    """
    Average coach interest across target schools (0-100).

    high = 100, medium = 60, low = 20, plus 5 per priority school showing
    interest (bonus capped at 10). Unrecognised levels are ignored.
    """
    if not isinstance(interest_levels, (list, tuple)):
        return 0.0

    levels = [coerce_enum(level, Level) for level in interest_levels]
    levels = [level for level in levels if level is not None]

    if not levels:
        return 0.0

    base_score = sum(COACH_INTEREST_SIGNAL_POINTS[level] for level in levels) / len(levels)

    priority_count = max(0.0, coerce_number(priority_school_interest_count))
    priority_bonus = min(
        PRIORITY_INTEREST_BONUS_CAP,
        priority_count * PRIORITY_INTEREST_BONUS_PER_SCHOOL,
    )

    return min(100.0, base_score + priority_bonus)


def calculate_academic_standing_score(
    gpa: Any = None,
    sat_score: Any = None,
    act_score: Any = None,
    eligibility_status: Union[EligibilityStatus, str, None] = None,
) -> int:
    """
    Academic standing (0-100): GPA up to 40, test score up to 30,
    eligibility registration up to 30. SAT is used over ACT when both exist.
    """
    score = 0

    gpa_value = coerce_optional_number(gpa)
    if gpa_value is not None:
        score += _tier_points(gpa_value, ACADEMIC_STANDING_GPA_TIERS)

    sat_value = coerce_optional_number(sat_score)
    act_value = coerce_optional_number(act_score)
    if sat_value:
        score += _tier_points(sat_value, ACADEMIC_STANDING_SAT_TIERS)
    elif act_value:
        score += _tier_points(act_value, ACADEMIC_STANDING_ACT_TIERS)

    status = coerce_enum(eligibility_status, EligibilityStatus)
    if status is not None:
        score += ELIGIBILITY_STATUS_POINTS[status]

    return min(100, score)


def calculate_status_score_result(breakdown: BreakdownInput) -> StatusScoreResult:
    components = as_breakdown(breakdown)
    score = calculate_composite_score(components)
    label = get_status_label(score)

    return StatusScoreResult(
        score=score,
        label=label,
        color=get_status_color(label),
        breakdown=components,
    )


def _tier_points(value: float, tiers) -> int:
    for lower_bound, points in tiers:
        if value >= lower_bound:
            return points
    return 0
