"""
Academic Fit Dimension

Compares the athlete's GPA and test scores against the school's averages
and checks whether the intended major is offered.

Gaps are measured as school average minus athlete value, so an athlete
above the school average always lands in the top tier.
"""

from recruiting.domain.constants import (
    ABSOLUTE_GPA_FLOOR_POINTS,
    ABSOLUTE_GPA_TIERS,
    ACADEMIC_SUPPORT_POINTS,
    ACT_GAP_TIERS,
    GPA_GAP_FLOOR_POINTS,
    GPA_GAP_TIERS,
    MAJOR_NOT_OFFERED_POINTS,
    MAJOR_OFFERED_POINTS,
    SAT_GAP_TIERS,
    TEST_GAP_FLOOR_POINTS,
)
from recruiting.domain.models import AthleteProfile, SchoolProfile
from recruiting.domain.scoring.interfaces import (
    BaseFitDimension,
    matches_any,
    points_at_least,
    points_at_most,
)


class AcademicFitFactor(BaseFitDimension):
    """
    Academic fit dimension.

    Max: 25 points

    - GPA gap vs. school average (0-10), or absolute GPA without school data (0-9)
    - SAT gap, else ACT gap (0-8)
    - Major offered (0-5)
    - Academic support baseline (2), assumed for every school
    """

    @property
    def name(self) -> str:
        return "academic"

    @property
    def max_points(self) -> int:
        return 25

    def score(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        points = 0

        # A GPA of 0 is treated as not entered
        if athlete.gpa and school.avg_gpa:
            gap = school.avg_gpa - athlete.gpa
            points += points_at_most(gap, GPA_GAP_TIERS, GPA_GAP_FLOOR_POINTS)
        elif athlete.gpa:
            points += points_at_least(
                athlete.gpa, ABSOLUTE_GPA_TIERS, ABSOLUTE_GPA_FLOOR_POINTS
            )

        points += self._test_points(athlete, school)

        if athlete.target_major and school.offered_majors:
            if matches_any(athlete.target_major, school.offered_majors):
                points += MAJOR_OFFERED_POINTS
            else:
                points += MAJOR_NOT_OFFERED_POINTS

        points += ACADEMIC_SUPPORT_POINTS

        return points

    def _test_points(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        """SAT comparison wins when both SAT and ACT pairs are available."""
        if athlete.sat_score and school.avg_sat:
            gap = school.avg_sat - athlete.sat_score
            return points_at_most(gap, SAT_GAP_TIERS, TEST_GAP_FLOOR_POINTS)

        if athlete.act_score and school.avg_act:
            gap = school.avg_act - athlete.act_score
            return points_at_most(gap, ACT_GAP_TIERS, TEST_GAP_FLOOR_POINTS)

        return 0
