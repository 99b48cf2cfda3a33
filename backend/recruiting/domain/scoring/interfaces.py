"""
Scoring Interfaces for the Fit Engine

Defines the protocol every fit dimension follows and the shared tier helpers.
New dimensions are added by subclassing BaseFitDimension; the scorer
composes whatever dimensions it is given.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from recruiting.domain.models import AthleteProfile, SchoolProfile
from recruiting.domain.normalization import clamp


@runtime_checkable
class FitDimension(Protocol):
    """
    Protocol for fit dimensions.

    Each dimension awards 0..max_points for one aspect of the
    athlete/school pairing.
    """

    @property
    def name(self) -> str:
        """Dimension name, matching the FitScoreInputs field prefix."""
        ...

    @property
    def max_points(self) -> int:
        ...

    def calculate(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        """
        Calculate points for this dimension.

        Returns: integer from 0 to max_points
        """
        ...


class BaseFitDimension(ABC):
    """
    Base class for fit dimensions.

    Subclasses implement `score()` as a sum of independent sub-factor
    allotments; `calculate()` clamps that sum to the dimension maximum.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def max_points(self) -> int:
        pass

    @abstractmethod
    def score(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        pass

    def calculate(self, athlete: AthleteProfile, school: SchoolProfile) -> int:
        return int(clamp(self.score(athlete, school), 0, self.max_points))


def points_at_most(
    value: float,
    tiers: Sequence[Tuple[float, int]],
    floor: int,
) -> int:
    """First tier whose ceiling is >= value, else the floor."""
    for ceiling, points in tiers:
        if value <= ceiling:
            return points
    return floor


def points_at_least(
    value: float,
    tiers: Sequence[Tuple[float, int]],
    floor: int,
) -> int:
    """First tier whose lower bound is <= value, else the floor."""
    for lower_bound, points in tiers:
        if value >= lower_bound:
            return points
    return floor


def in_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def normalize_token(value: Optional[str]) -> str:
    return (value or "").strip().upper()


def matches_any(needle: str, haystack: List[str]) -> bool:
    """Case-insensitive substring match of needle in any haystack item."""
    target = needle.strip().lower()
    return any(target in item.lower() for item in haystack)
