"""
Status Score Classifier

Turns a recruiting status score and its four-part breakdown into
the labels shown on the athlete dashboard.
"""

from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from recruiting.domain.constants import SCORE_DESCRIPTION_BANDS, STATUS_COMPONENTS
from recruiting.domain.models import (
    AreaStatus,
    BreakdownItem,
    ScoreBreakdown,
    ScoreDescription,
)
from recruiting.domain.normalization import coerce_number, round_half_up

BreakdownInput = Union[ScoreBreakdown, Mapping[str, Any], None]


class StatusScoreClassifier:
    """
    Classifies an overall status score and its component breakdown.

    The classifier never computes the overall score itself; callers pass it in.
    Missing or malformed input is treated as 0, so nothing here raises.
    """

    # How many areas to report as weakest/strongest
    AREA_LIMIT = 2

    def score_description(self, score: Any) -> ScoreDescription:
        """
        Describe an overall score (0-100).

        Bands are inclusive at their lower bound:
        - 75+ = Excellent
        - 60-74 = Good
        - 50-59 = Fair
        - 40-49 = Poor
        - below 40 = Critical
        """
        value = coerce_number(score)

        for lower_bound, description in SCORE_DESCRIPTION_BANDS:
            if value >= lower_bound:
                return description

        return ScoreDescription.CRITICAL

    def detailed_breakdown(self, breakdown: BreakdownInput) -> List[BreakdownItem]:
        """
        One row per component in fixed order, with its weight and status.

        The status compares the raw value to the component's threshold;
        the reported value is rounded to the nearest integer.
        """
        components = as_breakdown(breakdown)
        items = []

        for field, label, weight, threshold in STATUS_COMPONENTS:
            raw_value = getattr(components, field)
            status = AreaStatus.GOOD if raw_value >= threshold else AreaStatus.NEEDS_WORK
            items.append(BreakdownItem(
                label=label,
                value=round_half_up(raw_value),
                weight=weight,
                status=status,
            ))

        return items

    def weakest_areas(self, breakdown: BreakdownInput) -> List[str]:
        """Labels of the lowest "needs-work" components, lowest first."""
        needs_work = [
            item for item in self.detailed_breakdown(breakdown)
            if item.status == AreaStatus.NEEDS_WORK
        ]
        # sorted() is stable, so ties keep component order
        needs_work = sorted(needs_work, key=lambda item: item.value)
        return [item.label for item in needs_work[:self.AREA_LIMIT]]

    def strongest_areas(self, breakdown: BreakdownInput) -> List[str]:
        """Labels of the highest "good" components, highest first."""
        good = [
            item for item in self.detailed_breakdown(breakdown)
            if item.status == AreaStatus.GOOD
        ]
        good = sorted(good, key=lambda item: -item.value)
        return [item.label for item in good[:self.AREA_LIMIT]]


def as_breakdown(breakdown: BreakdownInput) -> ScoreBreakdown:
    if isinstance(breakdown, ScoreBreakdown):
        return breakdown

    if breakdown is None:
        return ScoreBreakdown()

    try:
        return ScoreBreakdown.model_validate(breakdown)
    except ValidationError:
        return ScoreBreakdown()

