"""
Conflict report models.

A ``ConflictDetectionResult`` is a transient report: it is recomputed from the
current allocations whenever they change and is never persisted.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class ConflictType(str, Enum):
    """Types of allocation conflicts."""
    OVERALLOCATION = "overallocation"
    SKILL_MISMATCH = "skill-mismatch"
    DEPENDENCY_VIOLATION = "dependency-violation"
    RESOURCE_CONTENTION = "resource-contention"
    TIMELINE_OVERLAP = "timeline-overlap"
    CAPACITY_EXCEEDED = "capacity-exceeded"


class ConflictSeverity(str, Enum):
    """Severity levels for conflicts."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ReportModel(BaseModel):
    """Base for report models; serialised with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ConflictImpact(ReportModel):
    """Estimated impact of a conflict, each score in [0, 100]."""

    delay_risk: float = 0.0
    quality_risk: float = 0.0
    resource_waste: float = 0.0

    @field_validator("delay_risk", "quality_risk", "resource_waste")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return max(0.0, min(100.0, value))


class AllocationConflict(ReportModel):
    """Represents a detected allocation conflict."""

    id: str
    type: ConflictType
    severity: ConflictSeverity
    title: str
    description: str

    # Affected entities
    affected_allocations: List[str] = Field(default_factory=list)
    affected_teams: List[str] = Field(default_factory=list)
    affected_epics: List[str] = Field(default_factory=list)

    # Suggested resolution
    suggested_actions: List[str] = Field(default_factory=list)

    impact: ConflictImpact = Field(default_factory=ConflictImpact)

    @field_validator("affected_allocations", "affected_teams", "affected_epics")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))


class ConflictSummary(ReportModel):
    """Conflict counts by severity."""

    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    by_type: Dict[str, int] = Field(default_factory=dict)


class ConflictDetectionResult(ReportModel):
    """Result of a conflict detection run."""

    conflicts: List[AllocationConflict] = Field(default_factory=list)
    summary: ConflictSummary = Field(default_factory=ConflictSummary)
    affected_teams_count: int = 0
    affected_epics_count: int = 0
    overall_risk_score: int = Field(0, ge=0, le=100)

    @property
    def critical_issues(self) -> List[AllocationConflict]:
        return self.filter(severity=ConflictSeverity.CRITICAL)

    def filter(
        self,
        severity: Optional[ConflictSeverity] = None,
        conflict_type: Optional[ConflictType] = None,
    ) -> List[AllocationConflict]:
        """
        Get conflicts matching a severity and/or type.

        Args:
            severity: Only keep conflicts of this severity
            conflict_type: Only keep conflicts of this type

        Returns:
            Matching conflicts in detection order
        """
        return [
            c for c in self.conflicts
            if (severity is None or c.severity == severity)
            and (conflict_type is None or c.type == conflict_type)
        ]
