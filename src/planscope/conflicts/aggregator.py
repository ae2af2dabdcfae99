"""
Conflict aggregation: severity summary, affected entity counts and the
overall risk score.
"""

from collections import Counter
from typing import Iterable, List, Sequence, Set

from .constants import MAX_SEVERITY_WEIGHT, SEVERITY_WEIGHTS, round_half_up
from .models import AllocationConflict, ConflictDetectionResult, ConflictSummary


def summarize(conflicts: Sequence[AllocationConflict]) -> ConflictSummary:
    """Count conflicts by severity and by type."""
    by_severity = Counter(c.severity.value for c in conflicts)
    by_type = Counter(c.type.value for c in conflicts)

    return ConflictSummary(
        total=len(conflicts),
        critical=by_severity["critical"],
        high=by_severity["high"],
        medium=by_severity["medium"],
        low=by_severity["low"],
        by_type=dict(by_type),
    )


def _union(groups: Iterable[List[str]]) -> Set[str]:
    merged: Set[str] = set()
    for group in groups:
        merged.update(group)
    return merged


def count_affected_teams(conflicts: Sequence[AllocationConflict]) -> int:
    """Distinct teams across all conflicts; a team in several conflicts counts once."""
    return len(_union(c.affected_teams for c in conflicts))


def count_affected_epics(conflicts: Sequence[AllocationConflict]) -> int:
    """Distinct epics across all conflicts."""
    return len(_union(c.affected_epics for c in conflicts))


def calculate_overall_risk_score(conflicts: Sequence[AllocationConflict]) -> int:
    """
    Severity-weighted risk score in [0, 100].

    The score is the mean severity weight as a percentage of the maximum weight,
    so ten low conflicts score lower than one critical conflict.

    Args:
        conflicts: Detected conflicts

    Returns:
        Rounded score; 0 when there are no conflicts
    """
    if not conflicts:
        return 0

    total_weight = sum(SEVERITY_WEIGHTS[c.severity] for c in conflicts)
    max_possible = len(conflicts) * MAX_SEVERITY_WEIGHT

    return round_half_up(total_weight / max_possible * 100)


def aggregate(conflicts: Sequence[AllocationConflict]) -> ConflictDetectionResult:
    """Build the detection result for a list of conflicts."""
    return ConflictDetectionResult(
        conflicts=list(conflicts),
        summary=summarize(conflicts),
        affected_teams_count=count_affected_teams(conflicts),
        affected_epics_count=count_affected_epics(conflicts),
        overall_risk_score=calculate_overall_risk_score(conflicts),
    )
