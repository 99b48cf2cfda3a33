# Recruiting status scoring
from recruiting.domain.status.classifier import StatusScoreClassifier
from recruiting.domain.status.calculator import (
    calculate_academic_standing_score,
    calculate_coach_interest_score,
    calculate_composite_score,
    calculate_interaction_frequency_score,
    calculate_status_score_result,
    calculate_task_completion_rate,
    get_next_actions,
    get_status_advice,
    get_status_color,
    get_status_label,
)

__all__ = [
    "StatusScoreClassifier",
    "calculate_academic_standing_score",
    "calculate_coach_interest_score",
    "calculate_composite_score",
    "calculate_interaction_frequency_score",
    "calculate_status_score_result",
    "calculate_task_completion_rate",
    "get_next_actions",
    "get_status_advice",
    "get_status_color",
    "get_status_label",
]
