"""
Portfolio Health Analyzer

Looks across every school on an athlete's list and flags an unbalanced
portfolio (no safeties, no matches, too many reaches, too few schools).
"""

import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from recruiting.domain.constants import MIN_PORTFOLIO_SIZE, PORTFOLIO_WARNINGS
from recruiting.domain.models import FitTier, PortfolioHealth, PortfolioSchool, PortfolioStatus
from recruiting.domain.scoring.fit_score import get_fit_tier

logger = logging.getLogger(__name__)


class PortfolioHealthAnalyzer:
    """
    Aggregates school tiers into counts, warnings and an overall status.

    A school's supplied tier wins; otherwise the tier is derived from its
    fit score. Status is not_started for an empty list, needs_attention
    when any warning fires and healthy otherwise.
    """

    def analyze(self, schools: Optional[Iterable[Any]]) -> PortfolioHealth:
        """
        Analyze a list of schools.

        Args:
            schools: PortfolioSchool records, mappings with fit_score/fitScore
                and fit_tier/fitTier, or objects with those attributes.
                Entries that cannot be read count as zero-score schools.

        Returns:
            PortfolioHealth with tier counts, warnings and status
        """
        entries = [self._as_school(school) for school in (schools or [])]

        if not entries:
            return PortfolioHealth(
                warnings=[PORTFOLIO_WARNINGS["empty"]],
                status=PortfolioStatus.NOT_STARTED,
            )

        counts = {tier: 0 for tier in FitTier}
        for school in entries:
            tier = school.fit_tier or get_fit_tier(school.fit_score)
            counts[tier] += 1

        reaches = counts[FitTier.REACH]
        matches = counts[FitTier.MATCH]
        safeties = counts[FitTier.SAFETY]
        total = len(entries)

        warnings = self._warnings(reaches, matches, safeties, total)
        status = PortfolioStatus.NEEDS_ATTENTION if warnings else PortfolioStatus.HEALTHY

        logger.debug(
            f"[PORTFOLIO] {total} schools: {matches} match, {reaches} reach, "
            f"{safeties} safety -> {status.value}"
        )

        return PortfolioHealth(
            reaches=reaches,
            matches=matches,
            safeties=safeties,
            unlikelies=counts[FitTier.UNLIKELY],
            total=total,
            warnings=warnings,
            status=status,
        )

    def _warnings(self, reaches: int, matches: int, safeties: int, total: int) -> List[str]:
        warnings = []

        if safeties == 0:
            warnings.append(PORTFOLIO_WARNINGS["no_safeties"])

        if matches == 0:
            warnings.append(PORTFOLIO_WARNINGS["no_matches"])

        if reaches > matches + safeties:
            warnings.append(PORTFOLIO_WARNINGS["too_many_reaches"])

        if total < MIN_PORTFOLIO_SIZE:
            warnings.append(PORTFOLIO_WARNINGS["too_few_schools"])

        return warnings

    def _as_school(self, school: Any) -> PortfolioSchool:
        if isinstance(school, PortfolioSchool):
            return school

        if school is None:
            return PortfolioSchool()

        try:
            return PortfolioSchool.model_validate(school)
        except ValidationError:
            logger.debug("[PORTFOLIO] Unreadable school entry counted as score 0")
            return PortfolioSchool()


def calculate_portfolio_health(schools: Optional[Iterable[Any]] = None) -> PortfolioHealth:
    """Convenience wrapper around PortfolioHealthAnalyzer.analyze."""
    return PortfolioHealthAnalyzer().analyze(schools)
