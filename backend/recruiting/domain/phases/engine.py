"""
Phase Progression Engine

Ordered recruiting phases (freshman -> sophomore -> junior -> senior)
gated by milestone completion. Senior is terminal.

The engine only answers questions about progress. Moving an athlete to
the next phase is the caller's job.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from recruiting.domain.constants import PHASE_INFO, PHASE_MILESTONES, PHASE_SEQUENCE
from recruiting.domain.models import MilestoneProgress, Phase, PhaseInfo
from recruiting.domain.normalization import coerce_enum, coerce_string_list

logger = logging.getLogger(__name__)

PhaseInput = Union[Phase, str, None]
ProgressInput = Union[MilestoneProgress, Dict[str, Any], None]


class PhaseProgressionEngine:
    """
    Milestone-gated phase state machine.

    Uses Strategy pattern for the milestone table: inject a different
    phase -> milestone ids mapping to change the gates.
    """

    def __init__(self, milestones: Optional[Dict[Phase, List[str]]] = None):
        """
        Initialize engine with a milestone table.

        Args:
            milestones: Required milestone ids per phase. If None, uses defaults.
        """
        self._milestones = milestones if milestones is not None else self._default_milestones()
        self._sequence = list(PHASE_SEQUENCE)

    def _default_milestones(self) -> Dict[Phase, List[str]]:
        return {phase: list(ids) for phase, ids in PHASE_MILESTONES.items()}

    # =========================================================================
    # Phase ordering
    # =========================================================================

    def get_next_phase(self, current: PhaseInput) -> Optional[Phase]:
        """Next phase in the sequence, or None for the terminal or unknown phase."""
        phase = coerce_enum(current, Phase)
        if phase is None:
            return None

        index = self._sequence.index(phase)
        if index + 1 >= len(self._sequence):
            return None

        return self._sequence[index + 1]

    def get_previous_phase(self, current: PhaseInput) -> Optional[Phase]:
        phase = coerce_enum(current, Phase)
        if phase is None:
            return None

        index = self._sequence.index(phase)
        if index == 0:
            return None

        return self._sequence[index - 1]

    def is_terminal(self, current: PhaseInput) -> bool:
        return coerce_enum(current, Phase) == self._sequence[-1]

    def phase_info(self, phase: PhaseInput) -> Optional[PhaseInfo]:
        resolved = coerce_enum(phase, Phase)
        if resolved is None:
            return None
        return PHASE_INFO[resolved]

    # =========================================================================
    # Progress queries
    # =========================================================================

    def can_advance(self, progress: ProgressInput) -> bool:
        """True iff a readable progress record has no remaining milestones."""
        resolved = self._as_progress(progress)
        if resolved is None:
            return False
        return len(resolved.remaining) == 0

    def remaining_milestones(self, progress: ProgressInput) -> List[str]:
        resolved = self._as_progress(progress)
        if resolved is None:
            return []
        return list(resolved.remaining)

    def completion_percentage(self, progress: ProgressInput) -> float:
        resolved = self._as_progress(progress)
        if resolved is None:
            return 0
        return resolved.percent_complete

    def progress_label(self, progress: ProgressInput) -> str:
        """e.g. "2/4 milestones complete"; empty string without progress."""
        resolved = self._as_progress(progress)
        if resolved is None:
            return ""
        return f"{len(resolved.completed)}/{len(resolved.required)} milestones complete"

    # =========================================================================
    # Milestone gating
    # =========================================================================

    def required_milestones(self, phase: PhaseInput) -> List[str]:
        resolved = coerce_enum(phase, Phase)
        if resolved is None:
            return []
        return list(self._milestones.get(resolved, []))

    def get_milestone_progress(
        self,
        phase: PhaseInput,
        completed_ids: Iterable[str],
    ) -> MilestoneProgress:
        """Progress through one phase's required milestones."""
        return MilestoneProgress(
            phase=coerce_enum(phase, Phase),
            required=self.required_milestones(phase),
            completed=coerce_string_list(completed_ids),
        )

    def can_advance_phase(self, phase: PhaseInput, completed_ids: Iterable[str]) -> bool:
        """
        Whether every milestone of `phase` is complete.

        Always False for the terminal phase and for unknown phases.
        """
        if coerce_enum(phase, Phase) is None or self.is_terminal(phase):
            return False

        progress = self.get_milestone_progress(phase, completed_ids)
        can_move = not progress.remaining

        logger.debug(
            f"[PHASE] {progress.phase.value}: "
            f"{len(progress.completed)}/{len(progress.required)} milestones, "
            f"can_advance={can_move}"
        )
        return can_move

    def calculate_phase(self, completed_ids: Iterable[str]) -> Phase:
        """
        Highest phase the athlete has unlocked.

        Each phase above the first is entered by completing every milestone
        of the phase before it. Checked from the top down.
        """
        completed = coerce_string_list(completed_ids)

        for phase in reversed(self._sequence[1:]):
            previous = self.get_previous_phase(phase)
            if self.can_advance_phase(previous, completed):
                return phase

        return self._sequence[0]

    def build_phase_milestone_data(
        self,
        phase: PhaseInput,
        completed_ids: Iterable[str],
    ) -> Dict[str, Any]:
        """
        Snapshot of milestone progress for every phase, keyed by phase value.

        Shape:
            {"current_phase": "junior",
             "milestones_by_phase": {"freshman": {"completed": [...],
                                                  "required": [...],
                                                  "percent_complete": 100.0}, ...}}
        """
        completed = coerce_string_list(completed_ids)
        current = coerce_enum(phase, Phase) or self.calculate_phase(completed)

        milestones_by_phase = {}
        for each_phase in self._sequence:
            progress = self.get_milestone_progress(each_phase, completed)
            milestones_by_phase[each_phase.value] = {
                "completed": list(progress.completed),
                "required": list(progress.required),
                "percent_complete": progress.percent_complete,
            }

        return {
            "current_phase": current.value,
            "milestones_by_phase": milestones_by_phase,
        }

    def _as_progress(self, progress: ProgressInput) -> Optional[MilestoneProgress]:
        if progress is None:
            return None

        if isinstance(progress, MilestoneProgress):
            return progress

        if not isinstance(progress, Mapping) and not (
            hasattr(progress, "required") or hasattr(progress, "remaining")
        ):
            logger.debug(f"[PHASE] Ignoring progress of type {type(progress).__name__}")
            return None

        try:
            return MilestoneProgress.model_validate(progress)
        except ValidationError:
            logger.debug("[PHASE] Unreadable milestone progress ignored")
            return None
