"""
Allocation Conflict Engine

Runs every detector over the allocations of one planning cycle and aggregates
the findings into a single report.

Detectors (in order):
- Overallocation (> 100% of a team's capacity in an iteration)
- Skill mismatch (placeholder, no skill data yet)
- Dependency violation (project epics in adjacent iterations)
- Resource contention (several teams on one epic in one iteration)
- Timeline overlap (>= 3 project epics within <= 2 iterations)

Usage:
    result = detect_allocation_conflicts(
        allocations, teams, epics, projects, people, iterations, "q1-2024"
    )

    for conflict in result.filter(severity=ConflictSeverity.CRITICAL):
        ...
"""

from typing import List, Optional, Sequence

from planscope.entities import Allocation, Cycle, Epic, Person, Project, Team
from planscope.platform.logging import get_logger

from .aggregator import aggregate
from .base import ConflictDetectorBase, DetectionContext
from .detectors import (
    DependencyViolationDetector,
    OverallocationDetector,
    ResourceContentionDetector,
    SkillMismatchDetector,
    TimelineOverlapDetector,
)
from .models import AllocationConflict, ConflictDetectionResult

logger = get_logger(__name__)


def default_detectors() -> List[ConflictDetectorBase]:
    return [
        OverallocationDetector(),
        SkillMismatchDetector(),
        DependencyViolationDetector(),
        ResourceContentionDetector(),
        TimelineOverlapDetector(),
    ]


class ConflictEngine:
    """
    Detects allocation conflicts for a planning cycle.

    The engine holds no state between runs; the same instance can serve
    concurrent callers.
    """

    def __init__(self, detectors: Optional[Sequence[ConflictDetectorBase]] = None):
        """
        Initialize the engine.

        Args:
            detectors: Detectors to run, in order. Defaults to the five
                standard passes.
        """
        self.detectors = list(detectors) if detectors is not None else default_detectors()

    def detect(
        self,
        allocations: Sequence[Allocation],
        teams: Sequence[Team],
        epics: Sequence[Epic],
        projects: Sequence[Project],
        people: Sequence[Person],
        iterations: Sequence[Cycle],
        selected_cycle_id: str,
    ) -> ConflictDetectionResult:
        """
        Detect all conflicts in the selected cycle.

        Args:
            allocations: All allocations; only those of the selected cycle are analyzed
            teams: All teams
            epics: All epics
            projects: All projects
            people: All people
            iterations: Ordered iterations of the selected quarter
            selected_cycle_id: Quarter cycle id to analyze

        Returns:
            ConflictDetectionResult with conflicts, summary and risk score
        """
        relevant = [a for a in allocations if a.cycle_id == selected_cycle_id]

        context = DetectionContext(
            teams=tuple(teams),
            epics=tuple(epics),
            projects=tuple(projects),
            people=tuple(people),
            iterations=tuple(iterations),
        )

        conflicts: List[AllocationConflict] = []
        for detector in self.detectors:
            conflicts.extend(detector(relevant, context))

        result = aggregate(conflicts)

        logger.info(
            "Conflict detection complete",
            cycle_id=selected_cycle_id,
            allocations=len(relevant),
            conflicts=result.summary.total,
            critical=result.summary.critical,
            risk_score=result.overall_risk_score,
        )

        return result


def detect_allocation_conflicts(
    allocations: Sequence[Allocation],
    teams: Sequence[Team],
    epics: Sequence[Epic],
    projects: Sequence[Project],
    people: Sequence[Person],
    iterations: Sequence[Cycle],
    selected_cycle_id: str,
) -> ConflictDetectionResult:
    """Detect allocation conflicts with the standard detectors."""
    return ConflictEngine().detect(
        allocations, teams, epics, projects, people, iterations, selected_cycle_id
    )
