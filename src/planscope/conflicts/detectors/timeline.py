"""
Timeline Overlap Detector

Flags projects whose epics are squeezed into very few iterations, regardless of
effort estimates.
"""

from typing import List, Sequence

from planscope.entities import Allocation

from ..base import ConflictDetectorBase, DetectionContext
from ..constants import TIMELINE_MAX_SPAN, TIMELINE_MIN_EPICS
from ..models import AllocationConflict, ConflictType


class TimelineOverlapDetector(ConflictDetectorBase):
    """Detects projects with many epics compressed into a short span."""

    conflict_type = ConflictType.TIMELINE_OVERLAP

    SUGGESTED_ACTIONS = [
        "Extend project timeline",
        "Reduce scope for initial delivery",
        "Parallelize epic development",
        "Review epic complexity estimates",
    ]

    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        conflicts = []

        for project in context.projects_by_id.values():
            project_epics = context.get_project_epics(project.id)
            project_allocations = self.project_allocations(allocations, project_epics)

            if not project_allocations:
                continue

            iteration_numbers = [a.iteration_number for a in project_allocations]
            span = max(iteration_numbers) - min(iteration_numbers) + 1

            if span > TIMELINE_MAX_SPAN or len(project_epics) < TIMELINE_MIN_EPICS:
                continue

            plural = "" if span == 1 else "s"
            conflicts.append(AllocationConflict(
                id=f"timeline-{project.id}",
                type=self.conflict_type,
                severity=self.fixed_severity(),
                title=f"Aggressive timeline for {project.name}",
                description=(
                    f"Project has {len(project_epics)} epics compressed into "
                    f"{span} iteration{plural}"
                ),
                affected_allocations=[a.id for a in project_allocations],
                affected_teams=self.distinct(a.team_id for a in project_allocations),
                affected_epics=[e.id for e in project_epics],
                suggested_actions=list(self.SUGGESTED_ACTIONS),
                impact=self.fixed_impact(),
            ))

        return conflicts
