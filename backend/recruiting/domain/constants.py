"""
Recruiting Engine Constants

Every weight, threshold and point allotment used by the engine.
Tests assert against these same tables, so change values here only.
"""

from typing import Dict, List, Tuple

from recruiting.domain.models import (
    CampusSize,
    EligibilityStatus,
    FitTier,
    Level,
    Phase,
    PhaseInfo,
    ScoreDescription,
    StatusLabel,
)

# =============================================================================
# STATUS SCORE
# =============================================================================

# (field, label, weight percent, "good" threshold) in display order
STATUS_COMPONENTS: List[Tuple[str, str, int, float]] = [
    ("task_completion_rate", "Task Completion", 35, 70),
    ("interaction_frequency_score", "Interaction Frequency", 25, 70),
    ("coach_interest_score", "Coach Interest", 25, 60),
    ("academic_standing_score", "Academic Standing", 15, 60),
]

STATUS_WEIGHTS: Dict[str, float] = {
    field: weight / 100 for field, _, weight, _ in STATUS_COMPONENTS
}

# Lower bounds, highest first. Anything below the last band is Critical.
SCORE_DESCRIPTION_BANDS: List[Tuple[float, ScoreDescription]] = [
    (75, ScoreDescription.EXCELLENT),
    (60, ScoreDescription.GOOD),
    (50, ScoreDescription.FAIR),
    (40, ScoreDescription.POOR),
]

STATUS_LABEL_THRESHOLDS: Dict[StatusLabel, float] = {
    StatusLabel.ON_TRACK: 75,
    StatusLabel.SLIGHTLY_BEHIND: 50,
    StatusLabel.AT_RISK: 0,
}

STATUS_COLORS: Dict[StatusLabel, str] = {
    StatusLabel.ON_TRACK: "green",
    StatusLabel.SLIGHTLY_BEHIND: "yellow",
    StatusLabel.AT_RISK: "red",
}

STATUS_ADVICE: Dict[StatusLabel, str] = {
    StatusLabel.ON_TRACK: "Keep up the momentum! You're doing great with your recruiting efforts.",
    StatusLabel.SLIGHTLY_BEHIND: "You're slightly behind. Focus on consistent coach outreach this week.",
    StatusLabel.AT_RISK: "You're at risk. We recommend activating your recovery plan immediately.",
}

NEXT_ACTIONS: Dict[StatusLabel, Dict[Phase, List[str]]] = {
    StatusLabel.ON_TRACK: {
        Phase.FRESHMAN: ["Continue your training routine", "Document stats and achievements"],
        Phase.SOPHOMORE: ["Send follow-up emails to coaches", "Attend summer camps"],
        Phase.JUNIOR: ["Schedule unofficial visits", "Update highlight video"],
        Phase.SENIOR: ["Schedule official visits", "Finalize college applications"],
    },
    StatusLabel.SLIGHTLY_BEHIND: {
        Phase.FRESHMAN: ["Increase travel ball participation", "Take PSAT practice tests"],
        Phase.SOPHOMORE: ["Prioritize highlight video completion", "Send intro emails weekly"],
        Phase.JUNIOR: ["Increase coach contact frequency", "Attend more showcases"],
        Phase.SENIOR: ["Follow up with coaches", "Schedule more official visits"],
    },
    StatusLabel.AT_RISK: {
        Phase.FRESHMAN: ["Meet with school counselor", "Join travel ball team immediately"],
        Phase.SOPHOMORE: ["Complete highlight video NOW", "Send intros to all target schools"],
        Phase.JUNIOR: ["Activate recovery plan", "Intensive coach outreach"],
        Phase.SENIOR: ["Contact all interested coaches", "Attend every possible camp"],
    },
}

# Days since last coach interaction -> score. Older than the last row scores 0.
INTERACTION_RECENCY_TIERS: List[Tuple[float, int]] = [
    (7, 100),
    (14, 80),
    (21, 60),
    (30, 40),
]

COACH_INTEREST_SIGNAL_POINTS: Dict[Level, int] = {
    Level.HIGH: 100,
    Level.MEDIUM: 60,
    Level.LOW: 20,
}
PRIORITY_INTEREST_BONUS_PER_SCHOOL = 5
PRIORITY_INTEREST_BONUS_CAP = 10

ACADEMIC_STANDING_GPA_TIERS: List[Tuple[float, int]] = [(3.5, 40), (3.0, 30), (2.5, 20), (2.0, 10)]
ACADEMIC_STANDING_SAT_TIERS: List[Tuple[float, int]] = [(1200, 30), (1000, 20), (900, 10)]
ACADEMIC_STANDING_ACT_TIERS: List[Tuple[float, int]] = [(28, 30), (24, 20), (20, 10)]
ELIGIBILITY_STATUS_POINTS: Dict[EligibilityStatus, int] = {
    EligibilityStatus.REGISTERED: 30,
    EligibilityStatus.PENDING: 15,
    EligibilityStatus.NOT_STARTED: 0,
}

# =============================================================================
# PHASES
# =============================================================================

PHASE_SEQUENCE: List[Phase] = [
    Phase.FRESHMAN,
    Phase.SOPHOMORE,
    Phase.JUNIOR,
    Phase.SENIOR,
]

# Milestone task ids that must be complete to leave each phase.
# The terminal phase has nothing to complete.
PHASE_MILESTONES: Dict[Phase, List[str]] = {
    Phase.FRESHMAN: [
        "understand-academic-requirements",
        "establish-development-routine",
        "play-travel-ball",
        "research-division-levels",
    ],
    Phase.SOPHOMORE: [
        "create-highlight-video",
        "maintain-strong-gpa-10",
        "build-target-school-list-20",
        "send-first-introductory-emails",
    ],
    Phase.JUNIOR: [
        "register-with-ncaa-eligibility",
        "peak-athletic-performance-11",
        "increase-coach-communication",
        "film-multiple-game-performances",
    ],
    Phase.SENIOR: [],
}

PHASE_INFO: Dict[Phase, PhaseInfo] = {
    Phase.FRESHMAN: PhaseInfo(
        label="Freshman Year",
        grade=9,
        theme="Foundation & Awareness",
        description="Understand the recruiting process and build athletic foundation",
    ),
    Phase.SOPHOMORE: PhaseInfo(
        label="Sophomore Year",
        grade=10,
        theme="Exposure & Communication",
        description="Get on coaches radar and start building relationships",
    ),
    Phase.JUNIOR: PhaseInfo(
        label="Junior Year",
        grade=11,
        theme="Evaluation & Relationship Building",
        description="Peak performance year - coaches are watching closely",
    ),
    Phase.SENIOR: PhaseInfo(
        label="Senior Year",
        grade=12,
        theme="Commitment & Transition",
        description="Finalize recruiting and prepare for college",
    ),
}

# =============================================================================
# FIT SCORE
# =============================================================================

# Dimension name -> (FitScoreInputs field, max points). Order is reporting order.
FIT_DIMENSIONS: Dict[str, Tuple[str, int]] = {
    "athletic": ("athletic_fit", 40),
    "academic": ("academic_fit", 25),
    "opportunity": ("opportunity_fit", 20),
    "personal": ("personal_fit", 15),
}

FIT_DIMENSION_MAX_POINTS: Dict[str, int] = {
    name: max_points for name, (_, max_points) in FIT_DIMENSIONS.items()
}

FIT_THRESHOLDS: Dict[FitTier, float] = {
    FitTier.MATCH: 70,
    FitTier.REACH: 50,
    FitTier.UNLIKELY: 0,
}

FIT_TIER_COLORS: Dict[FitTier, str] = {
    FitTier.MATCH: "emerald",
    FitTier.SAFETY: "blue",
    FitTier.REACH: "orange",
    FitTier.UNLIKELY: "red",
}

FIT_RECOMMENDATIONS: Dict[FitTier, str] = {
    FitTier.MATCH: "Excellent fit! This school aligns well with your profile.",
    FitTier.SAFETY: "Good fit! You have a strong chance at this school.",
    FitTier.REACH: "Possible fit with some growth. Score: {score}/100. Focus on the missing dimensions.",
    FitTier.UNLIKELY: "Not a strong fit based on current data. Work on improving key dimensions.",
}

# --- Athletic (max 40) -------------------------------------------------------

POSITION_MATCH_POINTS: Dict[str, int] = {
    "exact": 10,
    "group": 7,
    "none": 3,
}

# Position group token -> positions that belong to it
POSITION_GROUPS: Dict[str, List[str]] = {
    "OF": ["OF", "LF", "CF", "RF"],
    "IF": ["IF", "1B", "2B", "3B", "SS", "MIF", "CIF"],
}

COACH_INTEREST_POINTS: Dict[Level, int] = {
    Level.HIGH: 10,
    Level.MEDIUM: 6,
    Level.LOW: 2,
}

# Typical college baseball roster measurements (inches, pounds)
TYPICAL_HEIGHT_RANGE: Tuple[float, float] = (69, 76)
TYPICAL_WEIGHT_RANGE: Tuple[float, float] = (180, 220)
BORDERLINE_HEIGHT_RANGE: Tuple[float, float] = (67, 78)
BORDERLINE_WEIGHT_RANGE: Tuple[float, float] = (160, 240)
PHYSICAL_POINTS: Dict[str, int] = {
    "in_range": 8,
    "borderline": 5,
    "out_of_range": 2,
}

# Throwing or exit velocity in mph
VELOCITY_TIERS: List[Tuple[float, int]] = [(88, 10), (85, 8), (82, 5)]
VELOCITY_FLOOR_POINTS = 2

# --- Academic (max 25) -------------------------------------------------------

# School average minus athlete value -> points
GPA_GAP_TIERS: List[Tuple[float, int]] = [(0.2, 10), (0.5, 8), (1.0, 5)]
GPA_GAP_FLOOR_POINTS = 2
ABSOLUTE_GPA_TIERS: List[Tuple[float, int]] = [(3.5, 9), (3.0, 7), (2.5, 5)]
ABSOLUTE_GPA_FLOOR_POINTS = 2

SAT_GAP_TIERS: List[Tuple[float, int]] = [(50, 8), (150, 5)]
ACT_GAP_TIERS: List[Tuple[float, int]] = [(2, 8), (4, 5)]
TEST_GAP_FLOOR_POINTS = 2

MAJOR_OFFERED_POINTS = 5
MAJOR_NOT_OFFERED_POINTS = 2
ACADEMIC_SUPPORT_POINTS = 2

# --- Opportunity (max 20) ----------------------------------------------------

# Percent of roster filled at the athlete's position
ROSTER_DEPTH_TIERS: List[Tuple[float, int]] = [(60, 7), (75, 5), (90, 3)]
ROSTER_DEPTH_FLOOR_POINTS = 1

# Years until the incumbent starters graduate
STARTER_GRADUATION_TIERS: List[Tuple[float, int]] = [(2, 5), (3, 4), (4, 2)]
STARTER_GRADUATION_FLOOR_POINTS = 1

SCHOLARSHIP_POINTS: Dict[Level, int] = {
    Level.HIGH: 4,
    Level.MEDIUM: 2,
    Level.LOW: 1,
}

WALK_ON_HISTORY_POINTS = 3
NO_WALK_ON_HISTORY_POINTS = 1

# --- Personal (max 15) -------------------------------------------------------

SAME_STATE_POINTS = 4
OTHER_STATE_POINTS = 1

# Preference band -> (population centroid, allowed distance)
CAMPUS_SIZE_CENTROIDS: Dict[CampusSize, Tuple[int, int]] = {
    CampusSize.SMALL: (5000, 3000),
    CampusSize.MEDIUM: (15000, 5000),
    CampusSize.LARGE: (25000, 10000),
}
CAMPUS_SIZE_FIT_POINTS = 3
CAMPUS_SIZE_MISFIT_POINTS = 1

# Cost sensitivity -> (annual cost ceilings with points, points above all ceilings)
COST_FIT_TIERS: Dict[Level, Tuple[List[Tuple[float, int]], int]] = {
    Level.HIGH: ([(20000, 4), (35000, 2)], 0),
    Level.MEDIUM: ([(30000, 3), (45000, 2)], 1),
    Level.LOW: ([], 4),
}

PRIORITY_SCHOOL_POINTS = 2

MAJOR_STRENGTH_TIERS: List[Tuple[float, int]] = [(7, 2), (4, 1)]

# =============================================================================
# PORTFOLIO HEALTH
# =============================================================================

MIN_PORTFOLIO_SIZE = 5

PORTFOLIO_WARNINGS: Dict[str, str] = {
    "empty": "You haven't added any schools yet. Start building your college list!",
    "no_safeties": "Add at least 2-3 safety schools to ensure you have options.",
    "no_matches": "Consider adding match schools where you have a realistic chance.",
    "too_many_reaches": "You have more reach schools than match and safety combined. Balance your list.",
    "too_few_schools": "Consider adding more schools to diversify your options.",
}
