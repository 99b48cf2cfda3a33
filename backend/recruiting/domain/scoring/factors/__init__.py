# Fit dimension submodule
from recruiting.domain.scoring.factors.athletic_fit import AthleticFitFactor
from recruiting.domain.scoring.factors.academic_fit import AcademicFitFactor
from recruiting.domain.scoring.factors.opportunity_fit import OpportunityFitFactor
from recruiting.domain.scoring.factors.personal_fit import PersonalFitFactor

__all__ = [
    "AthleticFitFactor",
    "AcademicFitFactor",
    "OpportunityFitFactor",
    "PersonalFitFactor",
]
