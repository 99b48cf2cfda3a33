"""
Test configuration and fixtures for the Recruiting Engine.

Provides shared fixtures for unit tests.
"""

import pytest

from recruiting.config.settings import get_settings
from recruiting.domain.models import AthleteProfile, SchoolProfile
from recruiting.domain.phases import PhaseProgressionEngine
from recruiting.domain.scoring import FitScorer, PortfolioHealthAnalyzer
from recruiting.domain.status import StatusScoreClassifier


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def classifier():
    """Status score classifier instance."""
    return StatusScoreClassifier()


@pytest.fixture
def phase_engine():
    """Phase progression engine with the default milestone table."""
    return PhaseProgressionEngine()


@pytest.fixture
def fit_scorer():
    """Fit scorer with the four default dimensions."""
    return FitScorer()


@pytest.fixture
def portfolio_analyzer():
    return PortfolioHealthAnalyzer()


@pytest.fixture
def clean_settings_cache():
    """Clear the cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_athlete():
    """Right-handed outfielder: 6'1", 195 lb, 89 mph, 3.6 GPA, 1250 SAT."""
    return AthleteProfile(
        position="CF",
        height_inches=73,
        weight_lbs=195,
        velocity_mph=89,
        gpa=3.6,
        sat_score=1250,
        act_score=27,
        target_major="Business",
        home_state="TX",
        campus_size_preference="medium",
        cost_sensitivity="medium",
    )


@pytest.fixture
def ideal_school():
    """School that suits the sample athlete on every dimension (96 points)."""
    return SchoolProfile(
        name="Lone Star University",
        position_needs=["CF", "SS"],
        coach_interest="high",
        avg_gpa=3.5,
        avg_sat=1200,
        offered_majors=["Business Administration", "Economics"],
        position_roster_depth=50,
        years_until_starters_graduate=1,
        scholarship_availability="high",
        walk_on_history=True,
        state="TX",
        enrollment=15000,
        cost_of_attendance=25000,
        is_priority=True,
        major_strength_rating=8,
    )


@pytest.fixture
def sparse_school():
    """School with almost no data on file."""
    return SchoolProfile(name="Unknown College")


@pytest.fixture
def empty_athlete():
    return AthleteProfile()
