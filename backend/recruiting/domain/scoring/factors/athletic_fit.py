"""
Athletic Fit Dimension

How well the athlete's position, measurables and performance line up
with what the school's coaching staff is looking for.
"""

from typing import Optional

from recruiting.domain.constants import (
    BORDERLINE_HEIGHT_RANGE,
    BORDERLINE_WEIGHT_RANGE,
    COACH_INTEREST_POINTS,
    PHYSICAL_POINTS,
    POSITION_GROUPS,
    POSITION_MATCH_POINTS,
    TYPICAL_HEIGHT_RANGE,
    TYPICAL_WEIGHT_RANGE,
    VELOCITY_FLOOR_POINTS,
    VELOCITY_TIERS,
)
from recruiting.domain.models import AthleteProfile, SchoolProfile
from recruiting.domain.scoring.interfaces import (
    BaseFitDimension,
    in_range,
    normalize_token,
    points_at_least,
)


class AthleticFitFactor(BaseFitDimension):
    """
    Athletic fit dimension.

    Max: 40 points

    Calculates based on:
    - Position need (0-10): exact match, same position group, or neither
    - Coach interest (0-10)
    - Physical measurements vs. typical roster (0-8)
    - Velocity (0-10): throwing velo for pitchers, exit velo for hitters
    """

    @property
    def name(self) -> str:
        return "athletic"

    @property
    def max_points(self) -> int:
        return 40

    def score(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        points = 0

        points += self._position_points(athlete.position, school.position_needs)

        if school.coach_interest is not None:
            points += COACH_INTEREST_POINTS[school.coach_interest]

        points += self._physical_points(athlete.height_inches, athlete.weight_lbs)

        if athlete.velocity_mph:
            points += points_at_least(
                athlete.velocity_mph, VELOCITY_TIERS, VELOCITY_FLOOR_POINTS
            )

        return points

    def _position_points(self, position: Optional[str], needs: list) -> int:
        """
        Position need points.

        Exact matches ignore case. Otherwise outfield and infield needs
        count for any position in the same group (e.g. a CF for an "OF" need).
        """
        if not position or not needs:
            return 0

        athlete_position = normalize_token(position)
        school_needs = [normalize_token(need) for need in needs]

        if athlete_position in school_needs:
            return POSITION_MATCH_POINTS["exact"]

        athlete_group = self._position_group(athlete_position)
        if athlete_group and any(
            self._position_group(need) == athlete_group for need in school_needs
        ):
            return POSITION_MATCH_POINTS["group"]

        return POSITION_MATCH_POINTS["none"]

    def _position_group(self, position: str) -> Optional[str]:
        for group, members in POSITION_GROUPS.items():
            if position in members or group in position:
                return group
        return None

    def _physical_points(
        self,
        height: Optional[float],
        weight: Optional[float],
    ) -> int:
        if not height or not weight:
            return 0

        if in_range(height, TYPICAL_HEIGHT_RANGE) and in_range(weight, TYPICAL_WEIGHT_RANGE):
            return PHYSICAL_POINTS["in_range"]

        if in_range(height, BORDERLINE_HEIGHT_RANGE) and in_range(weight, BORDERLINE_WEIGHT_RANGE):
            return PHYSICAL_POINTS["borderline"]

        return PHYSICAL_POINTS["out_of_range"]
