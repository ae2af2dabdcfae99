"""
Planscope - Allocation Conflict Detection

Analyzes team allocations for a planning cycle and reports overallocation,
dependency, contention and timeline conflicts with an overall risk score.
"""

from .models import (
    AllocationConflict,
    ConflictDetectionResult,
    ConflictImpact,
    ConflictSeverity,
    ConflictSummary,
    ConflictType,
)
from .base import ConflictDetectorBase, DetectionContext
from .engine import ConflictEngine, detect_allocation_conflicts
from .display import (
    RiskLevel,
    get_conflict_severity_color,
    get_conflict_type_icon,
    get_risk_level,
)

__all__ = [
    "AllocationConflict",
    "ConflictDetectionResult",
    "ConflictImpact",
    "ConflictSeverity",
    "ConflictSummary",
    "ConflictType",
    "ConflictDetectorBase",
    "DetectionContext",
    "ConflictEngine",
    "detect_allocation_conflicts",
    "RiskLevel",
    "get_conflict_severity_color",
    "get_conflict_type_icon",
    "get_risk_level",
]
