"""
Domain Models for the Recruiting Engine

Pydantic records for everything the engine reads or returns.

Every field sanitises its own input instead of rejecting it, so the engine
can be called mid-form-entry with partial or malformed data:
- numbers: None, booleans, junk strings, NaN and infinity become 0 (or None
  for optional numbers)
- enums: case-insensitive value match, anything else becomes None
- string lists: non-list values become [], non-string items are dropped

Models accept snake_case names and the camelCase aliases of the JSON payloads
(e.g. taskCompletionRate, percentComplete, missingDimensions).
"""

from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from recruiting.domain.normalization import (
    clamp,
    coerce_enum,
    coerce_number,
    coerce_optional_number,
    coerce_optional_string,
    coerce_string_list,
)


# =============================================================================
# Enumerations
# =============================================================================

class StatusLabel(str, Enum):
    """Overall recruiting status derived from the composite score."""
    ON_TRACK = "on_track"
    SLIGHTLY_BEHIND = "slightly_behind"
    AT_RISK = "at_risk"


class ScoreDescription(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"


class AreaStatus(str, Enum):
    GOOD = "good"
    NEEDS_WORK = "needs-work"


class Phase(str, Enum):
    """Recruiting phases in order. SENIOR is terminal."""
    FRESHMAN = "freshman"
    SOPHOMORE = "sophomore"
    JUNIOR = "junior"
    SENIOR = "senior"


class FitTier(str, Enum):
    """
    Fit classification for a school.

    SAFETY is never produced by score classification; it only arrives
    as a label supplied by the caller.
    """
    MATCH = "match"
    REACH = "reach"
    SAFETY = "safety"
    UNLIKELY = "unlikely"


class PortfolioStatus(str, Enum):
    """AT_RISK exists in the vocabulary but no rule produces it."""
    NOT_STARTED = "not_started"
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs_attention"
    AT_RISK = "at_risk"


class Level(str, Enum):
    """Low/medium/high scale for coach interest, scholarships and cost sensitivity."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CampusSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class EligibilityStatus(str, Enum):
    """Eligibility-center registration state."""
    REGISTERED = "registered"
    PENDING = "pending"
    NOT_STARTED = "not_started"


# =============================================================================
# Base model
# =============================================================================

class EngineModel(BaseModel):
    """Immutable record accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        from_attributes=True,
        extra="ignore",
    )


# =============================================================================
# Status score
# =============================================================================

class ScoreBreakdown(EngineModel):
    """
    The four components of the recruiting status score (each typically 0-100).

    Absent or unusable values are 0.
    """
    task_completion_rate: float = 0.0
    interaction_frequency_score: float = 0.0
    coach_interest_score: float = 0.0
    academic_standing_score: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def coerce_missing_to_zero(cls, v: Any) -> float:
        return coerce_number(v)


class BreakdownItem(EngineModel):
    """One row of the detailed status breakdown."""
    label: str
    value: int
    weight: int
    status: AreaStatus


class StatusScoreResult(EngineModel):
    score: int = Field(..., ge=0, le=100)
    label: StatusLabel
    color: str
    breakdown: ScoreBreakdown


# =============================================================================
# Phases
# =============================================================================

class PhaseInfo(EngineModel):
    """Display metadata for a phase."""
    label: str
    grade: int
    theme: str
    description: str


class MilestoneProgress(EngineModel):
    """
    Milestone completion for one phase.

    `remaining` and `percent_complete` are always derived from `required`
    and `completed`, so a stale `remaining` or percentage is ignored.
    `completed` is reduced to the ids that are actually required. A record
    with no `required` list but a supplied `remaining` takes `required` to
    be the completed ids followed by the remaining ones, so outstanding
    work is never dropped.
    """
    phase: Optional[Phase] = None
    required: List[str] = Field(default_factory=list)
    completed: List[str] = Field(default_factory=list)
    remaining: List[str] = Field(default_factory=list)
    percent_complete: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def derive_progress(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            # Attribute-style objects (ORM rows, simple namespaces)
            data = {
                key: getattr(data, key)
                for key in ("phase", "required", "completed", "remaining")
                if hasattr(data, key)
            }

        data = dict(data)
        required = coerce_string_list(data.get("required"))
        supplied_completed = coerce_string_list(data.get("completed"))
        completed_ids = set(supplied_completed)

        supplied_remaining = coerce_string_list(data.get("remaining"))
        if not required and supplied_remaining:
            for milestone in supplied_completed + supplied_remaining:
                if milestone not in required:
                    required.append(milestone)

        completed = [m for m in required if m in completed_ids]
        remaining = [m for m in required if m not in completed_ids]

        data.pop("percentComplete", None)
        data["required"] = required
        data["completed"] = completed
        data["remaining"] = remaining
        data["percent_complete"] = (
            len(completed) / len(required) * 100 if required else 0.0
        )
        return data

    @field_validator("phase", mode="before")
    @classmethod
    def coerce_phase(cls, v: Any) -> Optional[Phase]:
        return coerce_enum(v, Phase)


# =============================================================================
# Fit score
# =============================================================================

class FitScoreInputs(EngineModel):
    """
    Point contributions per fit dimension.

    Maximums: athletic 40, academic 25, opportunity 20, personal 15.
    Absent values are 0. Values are kept as given; see clamped().
    """
    athletic_fit: float = 0.0
    academic_fit: float = 0.0
    opportunity_fit: float = 0.0
    personal_fit: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def coerce_missing_to_zero(cls, v: Any) -> float:
        return coerce_number(v)

    def clamped(self) -> "FitScoreInputs":
        """Copy with each dimension clamped to [0, its maximum]."""
        # constants imports this module
        from recruiting.domain.constants import FIT_DIMENSIONS

        return FitScoreInputs(**{
            field: clamp(getattr(self, field), 0, max_points)
            for field, max_points in FIT_DIMENSIONS.values()
        })


class FitScoreResult(EngineModel):
    score: int = Field(..., ge=0, le=100)
    tier: FitTier
    breakdown: FitScoreInputs
    missing_dimensions: List[str] = Field(default_factory=list)


class PortfolioSchool(EngineModel):
    """A school as seen by the portfolio analysis: its score and optional tier."""
    fit_score: float = 0.0
    fit_tier: Optional[FitTier] = None

    @field_validator("fit_score", mode="before")
    @classmethod
    def coerce_score(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("fit_tier", mode="before")
    @classmethod
    def coerce_tier(cls, v: Any) -> Optional[FitTier]:
        return coerce_enum(v, FitTier)


class PortfolioHealth(EngineModel):
    reaches: int = 0
    matches: int = 0
    safeties: int = 0
    unlikelies: int = 0
    total: int = 0
    warnings: List[str] = Field(default_factory=list)
    status: PortfolioStatus = PortfolioStatus.NOT_STARTED


# =============================================================================
# Raw attributes for the dimension calculators
# =============================================================================

class AthleteProfile(EngineModel):
    """
    Athlete attributes read by the fit dimension calculators.

    Measurements: height in inches, weight in pounds, velocity in mph
    (throwing velocity for pitchers, exit velocity for hitters).
    """
    position: Optional[str] = None
    height_inches: Optional[float] = None
    weight_lbs: Optional[float] = None
    velocity_mph: Optional[float] = None

    gpa: Optional[float] = None
    sat_score: Optional[float] = None
    act_score: Optional[float] = None
    target_major: Optional[str] = None

    home_state: Optional[str] = None
    campus_size_preference: Optional[CampusSize] = None
    cost_sensitivity: Optional[Level] = None

    @field_validator(
        "height_inches", "weight_lbs", "velocity_mph",
        "gpa", "sat_score", "act_score",
        mode="before",
    )
    @classmethod
    def coerce_measurement(cls, v: Any) -> Optional[float]:
        return coerce_optional_number(v)

    @field_validator("position", "target_major", "home_state", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return coerce_optional_string(v)

    @field_validator("campus_size_preference", mode="before")
    @classmethod
    def coerce_campus_size(cls, v: Any) -> Optional[CampusSize]:
        return coerce_enum(v, CampusSize)

    @field_validator("cost_sensitivity", mode="before")
    @classmethod
    def coerce_cost_sensitivity(cls, v: Any) -> Optional[Level]:
        return coerce_enum(v, Level)


class SchoolProfile(EngineModel):
    """
    School attributes read by the fit dimension calculators.

    Coach interest is per school, so it lives here rather than on the athlete.
    """
    name: Optional[str] = None

    # Athletic
    position_needs: List[str] = Field(default_factory=list)
    coach_interest: Optional[Level] = None

    # Academic
    avg_gpa: Optional[float] = None
    avg_sat: Optional[float] = None
    avg_act: Optional[float] = None
    offered_majors: List[str] = Field(default_factory=list)

    # Opportunity
    position_roster_depth: Optional[float] = None  # percent of roster filled at position
    years_until_starters_graduate: Optional[float] = None
    scholarship_availability: Optional[Level] = None
    walk_on_history: Optional[bool] = None

    # Personal
    state: Optional[str] = None
    enrollment: Optional[float] = None
    cost_of_attendance: Optional[float] = None
    is_priority: bool = False
    major_strength_rating: Optional[float] = None  # 1-10

    @field_validator(
        "avg_gpa", "avg_sat", "avg_act",
        "position_roster_depth", "years_until_starters_graduate",
        "enrollment", "cost_of_attendance", "major_strength_rating",
        mode="before",
    )
    @classmethod
    def coerce_stat(cls, v: Any) -> Optional[float]:
        return coerce_optional_number(v)

    @field_validator("name", "state", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        return coerce_optional_string(v)

    @field_validator("position_needs", "offered_majors", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> List[str]:
        return coerce_string_list(v)

    @field_validator("coach_interest", "scholarship_availability", mode="before")
    @classmethod
    def coerce_level(cls, v: Any) -> Optional[Level]:
        return coerce_enum(v, Level)

    @field_validator("walk_on_history", mode="before")
    @classmethod
    def coerce_walk_on(cls, v: Any) -> Optional[bool]:
        return v if isinstance(v, bool) else None

    @field_validator("is_priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> bool:
        return v is True


class ScoredSchool(EngineModel):
    school: SchoolProfile
    result: FitScoreResult
