"""
Dependency Violation Detector

Epic dependencies are not modelled, so epics of one project worked in adjacent
iterations are treated as a sign of unplanned sequencing dependencies. At most
one conflict is reported per project.
"""

from collections import defaultdict
from typing import Dict, List, Sequence

from planscope.entities import Allocation

from ..base import ConflictDetectorBase, DetectionContext
from ..models import AllocationConflict, ConflictType


class DependencyViolationDetector(ConflictDetectorBase):
    """Detects project epics scheduled in consecutive iterations."""

    conflict_type = ConflictType.DEPENDENCY_VIOLATION

    SUGGESTED_ACTIONS = [
        "Review epic dependencies",
        "Sequence epics based on dependencies",
        "Consider team coordination overhead",
        "Plan integration points",
    ]

    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        conflicts = []

        for project in context.projects_by_id.values():
            epic_allocations = self.project_allocations(
                allocations, context.get_project_epics(project.id)
            )

            by_iteration: Dict[int, List[Allocation]] = defaultdict(list)
            for allocation in epic_allocations:
                by_iteration[allocation.iteration_number].append(allocation)

            if len(by_iteration) <= 1:
                continue

            if not self._has_adjacent_iterations(by_iteration.keys()):
                continue

            conflicts.append(AllocationConflict(
                id=f"dependency-{project.id}",
                type=self.conflict_type,
                severity=self.fixed_severity(),
                title=f"Potential dependency conflicts in {project.name}",
                description=(
                    f"Multiple epics from {project.name} are scheduled in overlapping "
                    f"iterations, which may create dependency issues"
                ),
                affected_allocations=[a.id for a in epic_allocations],
                affected_teams=self.distinct(a.team_id for a in epic_allocations),
                affected_epics=self.distinct(a.epic_id for a in epic_allocations),
                suggested_actions=list(self.SUGGESTED_ACTIONS),
                impact=self.fixed_impact(),
            ))

        return conflicts

    @staticmethod
    def _has_adjacent_iterations(iteration_numbers) -> bool:
        ordered = sorted(iteration_numbers)
        return any(b == a + 1 for a, b in zip(ordered, ordered[1:]))
