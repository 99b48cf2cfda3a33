"""
Personal Fit Dimension

Location, campus size, cost and the athlete's own priorities.
"""

from typing import Optional

from recruiting.domain.constants import (
    CAMPUS_SIZE_CENTROIDS,
    CAMPUS_SIZE_FIT_POINTS,
    CAMPUS_SIZE_MISFIT_POINTS,
    COST_FIT_TIERS,
    MAJOR_STRENGTH_TIERS,
    OTHER_STATE_POINTS,
    PRIORITY_SCHOOL_POINTS,
    SAME_STATE_POINTS,
)
from recruiting.domain.models import AthleteProfile, CampusSize, Level, SchoolProfile
from recruiting.domain.scoring.interfaces import (
    BaseFitDimension,
    normalize_token,
    points_at_least,
    points_at_most,
)


class PersonalFitFactor(BaseFitDimension):
    """
    Personal fit dimension.

    Max: 15 points

    - Same state (4) or different state (1)
    - Campus size within the preferred band (3) or outside it (1)
    - Cost of attendance against cost sensitivity (0-4)
    - Priority school (2)
    - Strength of the intended major, rated 1-10 (0-2)
    """

    @property
    def name(self) -> str:
        return "personal"

    @property
    def max_points(self) -> int:
        return 15

    def score(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        points = 0

        if athlete.home_state and school.state:
            if normalize_token(athlete.home_state) == normalize_token(school.state):
                points += SAME_STATE_POINTS
            else:
                points += OTHER_STATE_POINTS

        points += self._campus_size_points(athlete.campus_size_preference, school.enrollment)
        points += self._cost_points(athlete.cost_sensitivity, school.cost_of_attendance)

        if school.is_priority:
            points += PRIORITY_SCHOOL_POINTS

        if school.major_strength_rating is not None:
            points += points_at_least(school.major_strength_rating, MAJOR_STRENGTH_TIERS, 0)

        return points

    def _campus_size_points(
        self,
        preference: Optional[CampusSize],
        enrollment: Optional[float],
    ) -> int:
        if preference is None or enrollment is None:
            return 0

        centroid, radius = CAMPUS_SIZE_CENTROIDS[preference]
        if abs(enrollment - centroid) <= radius:
            return CAMPUS_SIZE_FIT_POINTS
        return CAMPUS_SIZE_MISFIT_POINTS

    def _cost_points(self, sensitivity: Optional[Level], cost: Optional[float]) -> int:
        """Low sensitivity earns full points whether or not the cost is known."""
        if sensitivity is None:
            return 0

        tiers, floor = COST_FIT_TIERS[sensitivity]
        if not tiers:
            return floor

        if cost is None:
            return 0

        return points_at_most(cost, tiers, floor)
