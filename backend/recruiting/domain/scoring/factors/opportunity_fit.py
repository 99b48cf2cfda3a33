"""
Opportunity Fit Dimension

Estimates the athlete's chance of playing time and roster access.
"""

from recruiting.domain.constants import (
    NO_WALK_ON_HISTORY_POINTS,
    ROSTER_DEPTH_FLOOR_POINTS,
    ROSTER_DEPTH_TIERS,
    SCHOLARSHIP_POINTS,
    STARTER_GRADUATION_FLOOR_POINTS,
    STARTER_GRADUATION_TIERS,
    WALK_ON_HISTORY_POINTS,
)
from recruiting.domain.models import AthleteProfile, SchoolProfile
from recruiting.domain.scoring.interfaces import BaseFitDimension, points_at_most


class OpportunityFitFactor(BaseFitDimension):
    """
    Opportunity fit dimension.

    Max: 20 points

    - Roster depth at position (0-7): thinner depth chart = more points
    - Years until current starters graduate (0-5): sooner = more points
    - Scholarship availability (0-4)
    - Walk-on history (0-3)

    Uses school data only; the athlete argument is accepted for a
    uniform dimension interface.
    """

    @property
    def name(self) -> str:
        return "opportunity"

    @property
    def max_points(self) -> int:
        return 20

    def score(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        points = 0

        if school.position_roster_depth is not None:
            points += points_at_most(
                school.position_roster_depth,
                ROSTER_DEPTH_TIERS,
                ROSTER_DEPTH_FLOOR_POINTS,
            )

        if school.years_until_starters_graduate is not None:
            points += points_at_most(
                school.years_until_starters_graduate,
                STARTER_GRADUATION_TIERS,
                STARTER_GRADUATION_FLOOR_POINTS,
            )

        if school.scholarship_availability is not None:
            points += SCHOLARSHIP_POINTS[school.scholarship_availability]

        if school.walk_on_history is True:
            points += WALK_ON_HISTORY_POINTS
        elif school.walk_on_history is False:
            points += NO_WALK_ON_HISTORY_POINTS

        return points
