"""
Overallocation Detector

Flags a team whose allocations in one iteration add up to more than 100% of
its capacity.
"""

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from planscope.entities import Allocation

from ..base import ConflictDetectorBase, DetectionContext
from ..constants import (
    OVERALLOCATION_THRESHOLD,
    classify_overallocation,
    overallocation_impact,
    round_half_up,
)
from ..models import AllocationConflict, ConflictType


class OverallocationDetector(ConflictDetectorBase):
    """Detects teams allocated above capacity within an iteration."""

    conflict_type = ConflictType.OVERALLOCATION

    SUGGESTED_ACTIONS = [
        "Reduce allocation percentages",
        "Move some work to another iteration",
        "Split work across multiple teams",
        "Increase team capacity if possible",
    ]

    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        by_team_iteration: Dict[Tuple[str, int], List[Allocation]] = defaultdict(list)
        for allocation in allocations:
            by_team_iteration[(allocation.team_id, allocation.iteration_number)].append(allocation)

        conflicts = []

        for team in context.teams_by_id.values():
            # iteration numbers are positions in the ordered iteration sequence
            for iteration_number in range(1, len(context.iterations) + 1):
                team_allocations = by_team_iteration.get((team.id, iteration_number), [])
                total = sum(a.percentage for a in team_allocations)

                if total <= OVERALLOCATION_THRESHOLD:
                    continue

                excess = total - OVERALLOCATION_THRESHOLD
                conflicts.append(AllocationConflict(
                    id=f"overallocation-{team.id}-{iteration_number}",
                    type=self.conflict_type,
                    severity=classify_overallocation(total),
                    title=f"Team {team.name} overallocated in iteration {iteration_number}",
                    description=(
                        f"Team is allocated {round_half_up(total)}% capacity "
                        f"({round_half_up(excess)}% over limit)"
                    ),
                    affected_allocations=[a.id for a in team_allocations],
                    affected_teams=[team.id],
                    affected_epics=[a.epic_id for a in team_allocations if a.epic_id],
                    suggested_actions=list(self.SUGGESTED_ACTIONS),
                    impact=overallocation_impact(total),
                ))

        return conflicts
