"""
Fit Scorer

Runs the four fit dimensions for an athlete/school pair and feeds the
point totals through the fit score engine.
"""

import logging
from typing import Any, List

from pydantic import ValidationError

from recruiting.domain.models import (
    AthleteProfile,
    FitScoreInputs,
    FitScoreResult,
    PortfolioHealth,
    PortfolioSchool,
    SchoolProfile,
    ScoredSchool,
)
from recruiting.domain.scoring.factors import (
    AcademicFitFactor,
    AthleticFitFactor,
    OpportunityFitFactor,
    PersonalFitFactor,
)
from recruiting.domain.scoring.fit_score import calculate_fit_score
from recruiting.domain.scoring.interfaces import FitDimension
from recruiting.domain.scoring.portfolio import PortfolioHealthAnalyzer

logger = logging.getLogger(__name__)


class FitScorer:
    """
    Athlete/school fit scoring engine.

    Uses Strategy pattern for pluggable dimensions. A dimension whose name
    does not match a FitScoreInputs field is ignored by the total.
    """

    def __init__(self, dimensions: List[FitDimension] | None = None):
        """
        Initialize scorer with dimensions.

        Args:
            dimensions: List of fit dimensions. If None, uses defaults.
        """
        self._dimensions = dimensions if dimensions is not None else self._default_dimensions()
        self._portfolio_analyzer = PortfolioHealthAnalyzer()

    def _default_dimensions(self) -> List[FitDimension]:
        return [
            AthleticFitFactor(),
            AcademicFitFactor(),
            OpportunityFitFactor(),
            PersonalFitFactor(),
        ]

    def score_dimensions(self, athlete: Any, school: Any) -> FitScoreInputs:
        """Points per dimension for one athlete/school pair."""
        athlete_profile = _as_profile(athlete, AthleteProfile)
        school_profile = _as_profile(school, SchoolProfile)

        points = {
            f"{dimension.name}_fit": dimension.calculate(athlete_profile, school_profile)
            for dimension in self._dimensions
        }
        return FitScoreInputs.model_validate(points)

    def score_school(self, athlete: Any, school: Any) -> ScoredSchool:
        """
        Score a single school for the athlete.

        Returns:
            ScoredSchool with the sanitised school and its FitScoreResult
        """
        school_profile = _as_profile(school, SchoolProfile)
        inputs = self.score_dimensions(athlete, school_profile)
        result: FitScoreResult = calculate_fit_score(inputs)

        logger.debug(
            f"[FIT-SCORE] {school_profile.name or 'unnamed school'}: "
            f"{result.score} ({result.tier.value})"
        )
        return ScoredSchool(school=school_profile, result=result)

    def score_schools(self, athlete: Any, schools: List[Any]) -> List[ScoredSchool]:
        """
        Score multiple schools.

        Returns:
            List of ScoredSchool sorted by fit score (descending).
            Schools with equal scores keep their input order.
        """
        scored = [self.score_school(athlete, school) for school in (schools or [])]
        return sorted(scored, key=lambda s: s.result.score, reverse=True)

    def portfolio_health(self, athlete: Any, schools: List[Any]) -> PortfolioHealth:
        """Portfolio health of the athlete's list, using computed tiers."""
        scored = self.score_schools(athlete, schools)
        return self._portfolio_analyzer.analyze([
            PortfolioSchool(fit_score=s.result.score, fit_tier=s.result.tier)
            for s in scored
        ])


def _as_profile(value: Any, model):
    if isinstance(value, model):
        return value

    if value is None:
        return model()

    try:
        return model.model_validate(value)
    except ValidationError:
        logger.debug(f"[FIT-SCORE] Unreadable {model.__name__}; using an empty profile")
        return model()
