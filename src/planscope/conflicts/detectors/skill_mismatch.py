"""
Skill Mismatch Detector

Teams and people carry no skill data in the planning model yet, so this pass
never reports anything. It stays in the pipeline so a skills-aware version can
replace it without changing the engine.
"""

from typing import List, Sequence

from planscope.entities import Allocation

from ..base import ConflictDetectorBase, DetectionContext
from ..models import AllocationConflict, ConflictType


class SkillMismatchDetector(ConflictDetectorBase):
    """Placeholder detector for skill requirements."""

    conflict_type = ConflictType.SKILL_MISMATCH

    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        return []
