# Fit scoring engine module
from recruiting.domain.scoring.interfaces import BaseFitDimension, FitDimension
from recruiting.domain.scoring.fit_score import (
    calculate_fit_score,
    get_fit_score_recommendation,
    get_fit_tier,
    get_fit_tier_color,
    validate_fit_inputs,
)
from recruiting.domain.scoring.portfolio import (
    PortfolioHealthAnalyzer,
    calculate_portfolio_health,
)
from recruiting.domain.scoring.fit_scorer import FitScorer

__all__ = [
    "BaseFitDimension",
    "FitDimension",
    "FitScorer",
    "PortfolioHealthAnalyzer",
    "calculate_fit_score",
    "calculate_portfolio_health",
    "get_fit_score_recommendation",
    "get_fit_tier",
    "get_fit_tier_color",
    "validate_fit_inputs",
]
