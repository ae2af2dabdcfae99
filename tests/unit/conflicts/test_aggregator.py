"""
Tests for conflict aggregation.
"""

import pytest

from planscope.conflicts import (
    AllocationConflict,
    ConflictImpact,
    ConflictSeverity,
    ConflictType,
)
from planscope.conflicts.aggregator import (
    aggregate,
    calculate_overall_risk_score,
    count_affected_epics,
    count_affected_teams,
    summarize,
)


def make_conflict(
    conflict_id: str,
    severity: ConflictSeverity,
    conflict_type: ConflictType = ConflictType.OVERALLOCATION,
    teams=(),
    epics=(),
) -> AllocationConflict:
    return AllocationConflict(
        id=conflict_id,
        type=conflict_type,
        severity=severity,
        title=conflict_id,
        description="",
        affected_teams=list(teams),
        affected_epics=list(epics),
    )


class TestRiskScore:
    """Tests for calculate_overall_risk_score."""

    def test_no_conflicts_scores_zero(self):
        assert calculate_overall_risk_score([]) == 0

    @pytest.mark.parametrize("severity,expected", [
        (ConflictSeverity.CRITICAL, 100),
        (ConflictSeverity.HIGH, 75),
        (ConflictSeverity.MEDIUM, 50),
        (ConflictSeverity.LOW, 25),
    ])
    def test_single_conflict_scores_its_weight(self, severity, expected):
        assert calculate_overall_risk_score([make_conflict("c1", severity)]) == expected

    def test_score_is_mean_weight(self):
        conflicts = [
            make_conflict("c1", ConflictSeverity.CRITICAL),
            make_conflict("c2", ConflictSeverity.LOW),
            make_conflict("c3", ConflictSeverity.LOW),
        ]

        assert calculate_overall_risk_score(conflicts) == 50

    def test_halves_round_up(self):
        conflicts = [
            make_conflict("c1", ConflictSeverity.HIGH),
            make_conflict("c2", ConflictSeverity.MEDIUM),
        ]

        assert calculate_overall_risk_score(conflicts) == 63

    def test_score_stays_in_range(self):
        conflicts = [make_conflict(f"c{i}", ConflictSeverity.CRITICAL) for i in range(50)]

        assert 0 <= calculate_overall_risk_score(conflicts) <= 100


class TestSummary:
    """Tests for summary and union counts."""

    def test_counts_by_severity_and_type(self):
        conflicts = [
            make_conflict("c1", ConflictSeverity.CRITICAL),
            make_conflict("c2", ConflictSeverity.MEDIUM, ConflictType.RESOURCE_CONTENTION),
            make_conflict("c3", ConflictSeverity.MEDIUM, ConflictType.DEPENDENCY_VIOLATION),
            make_conflict("c4", ConflictSeverity.HIGH, ConflictType.TIMELINE_OVERLAP),
        ]

        summary = summarize(conflicts)

        assert summary.total == 4
        assert summary.critical == 1
        assert summary.high == 1
        assert summary.medium == 2
        assert summary.low == 0
        assert summary.critical + summary.high + summary.medium + summary.low == summary.total
        assert summary.by_type == {
            "overallocation": 1,
            "resource-contention": 1,
            "dependency-violation": 1,
            "timeline-overlap": 1,
        }

    def test_team_in_several_conflicts_counts_once(self):
        conflicts = [
            make_conflict("c1", ConflictSeverity.LOW, teams=["T1"], epics=["E1"]),
            make_conflict("c2", ConflictSeverity.LOW, teams=["T1", "T2"], epics=["E1"]),
        ]

        assert count_affected_teams(conflicts) == 2
        assert count_affected_epics(conflicts) == 1

    def test_aggregate_builds_full_result(self):
        conflicts = [
            make_conflict("c1", ConflictSeverity.HIGH, teams=["T1"], epics=["E1", "E2"]),
        ]

        result = aggregate(conflicts)

        assert result.conflicts == conflicts
        assert result.summary.total == 1
        assert result.affected_teams_count == 1
        assert result.affected_epics_count == 2
        assert result.overall_risk_score == 75

    def test_aggregate_empty(self):
        result = aggregate([])

        assert result.conflicts == []
        assert result.summary.total == 0
        assert result.summary.by_type == {}
        assert result.affected_teams_count == 0
        assert result.affected_epics_count == 0
        assert result.overall_risk_score == 0


class TestConflictModel:
    """Tests for AllocationConflict invariants."""

    def test_impact_is_clamped(self):
        impact = ConflictImpact(delay_risk=140, quality_risk=-5, resource_waste=55)

        assert impact.delay_risk == 100
        assert impact.quality_risk == 0
        assert impact.resource_waste == 55

    def test_affected_ids_are_deduplicated_in_order(self):
        conflict = make_conflict(
            "c1", ConflictSeverity.LOW, teams=["T2", "T1", "T2"], epics=["E1", "E1"]
        )

        assert conflict.affected_teams == ["T2", "T1"]
        assert conflict.affected_epics == ["E1"]

    def test_serializes_with_camel_case_keys(self):
        data = make_conflict("c1", ConflictSeverity.LOW, teams=["T1"]).model_dump(
            by_alias=True, mode="json"
        )

        assert data["affectedTeams"] == ["T1"]
        assert data["type"] == "overallocation"
        assert set(data["impact"]) == {"delayRisk", "qualityRisk", "resourceWaste"}
