"""
Resource Contention Detector

Flags an epic worked on by more than one team in the same iteration. Run-work
allocations have no epic and never contend.
"""

from collections import defaultdict
from typing import Dict, List, Sequence

from planscope.entities import Allocation

from ..base import ConflictDetectorBase, DetectionContext
from ..models import AllocationConflict, ConflictType


class ResourceContentionDetector(ConflictDetectorBase):
    """Detects multiple teams on the same epic in the same iteration."""

    conflict_type = ConflictType.RESOURCE_CONTENTION

    SUGGESTED_ACTIONS = [
        "Designate a lead team",
        "Split epic into smaller, team-specific tasks",
        "Plan coordination meetings",
        "Define clear interfaces between teams",
    ]

    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        # epic -> iteration -> allocations, both in first-seen order
        groups: Dict[str, Dict[int, List[Allocation]]] = defaultdict(lambda: defaultdict(list))
        for allocation in allocations:
            if not allocation.epic_id:
                continue
            groups[allocation.epic_id][allocation.iteration_number].append(allocation)

        conflicts = []

        for epic_id, by_iteration in groups.items():
            epic = context.get_epic(epic_id)
            if epic is None:
                continue

            for iteration_number, group in by_iteration.items():
                teams = self.distinct(a.team_id for a in group)
                if len(teams) <= 1:
                    continue

                conflicts.append(AllocationConflict(
                    id=f"contention-{epic_id}-{iteration_number}",
                    type=self.conflict_type,
                    severity=self.fixed_severity(),
                    title=f"Multiple teams on {epic.name} in iteration {iteration_number}",
                    description=(
                        f"{len(teams)} teams are working on the same epic simultaneously, "
                        f"which may cause coordination overhead"
                    ),
                    affected_allocations=[a.id for a in group],
                    affected_teams=teams,
                    affected_epics=[epic_id],
                    suggested_actions=list(self.SUGGESTED_ACTIONS),
                    impact=self.fixed_impact(),
                ))

        return conflicts
