# Recruiting phase progression
from recruiting.domain.phases.engine import PhaseProgressionEngine

__all__ = ["PhaseProgressionEngine"]
