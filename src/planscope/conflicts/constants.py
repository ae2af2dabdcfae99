"""
Static thresholds, weights and impact tables for conflict detection.
"""

import math
from typing import Dict, Tuple

from .models import ConflictImpact, ConflictSeverity, ConflictType


# Allocation above this percentage of capacity is overallocation
OVERALLOCATION_THRESHOLD = 100.0

# (exclusive lower bound, severity), checked in order; anything else is LOW
OVERALLOCATION_SEVERITY_THRESHOLDS: Tuple[Tuple[float, ConflictSeverity], ...] = (
    (150.0, ConflictSeverity.CRITICAL),
    (125.0, ConflictSeverity.HIGH),
    (110.0, ConflictSeverity.MEDIUM),
)

# Impact score per percentage point over capacity
OVERALLOCATION_IMPACT_MULTIPLIERS: Dict[str, float] = {
    "delay_risk": 2.0,
    "quality_risk": 1.5,
    "resource_waste": 1.2,
}

FIXED_IMPACTS: Dict[ConflictType, ConflictImpact] = {
    ConflictType.DEPENDENCY_VIOLATION: ConflictImpact(
        delay_risk=60, quality_risk=40, resource_waste=30
    ),
    ConflictType.RESOURCE_CONTENTION: ConflictImpact(
        delay_risk=40, quality_risk=50, resource_waste=35
    ),
    ConflictType.TIMELINE_OVERLAP: ConflictImpact(
        delay_risk=80, quality_risk=70, resource_waste=20
    ),
}

FIXED_SEVERITIES: Dict[ConflictType, ConflictSeverity] = {
    ConflictType.DEPENDENCY_VIOLATION: ConflictSeverity.MEDIUM,
    ConflictType.RESOURCE_CONTENTION: ConflictSeverity.MEDIUM,
    ConflictType.TIMELINE_OVERLAP: ConflictSeverity.HIGH,
}

SEVERITY_WEIGHTS: Dict[ConflictSeverity, int] = {
    ConflictSeverity.CRITICAL: 100,
    ConflictSeverity.HIGH: 75,
    ConflictSeverity.MEDIUM: 50,
    ConflictSeverity.LOW: 25,
}

MAX_SEVERITY_WEIGHT = 100

# Timeline compression: at least this many epics in at most this many iterations
TIMELINE_MIN_EPICS = 3
TIMELINE_MAX_SPAN = 2


def classify_overallocation(total_percentage: float) -> ConflictSeverity:
    """Map a total allocation percentage (> 100) to a severity."""
    for bound, severity in OVERALLOCATION_SEVERITY_THRESHOLDS:
        if total_percentage > bound:
            return severity
    return ConflictSeverity.LOW


def overallocation_impact(total_percentage: float) -> ConflictImpact:
    """Impact scores grow linearly with the excess over capacity."""
    excess = total_percentage - OVERALLOCATION_THRESHOLD
    return ConflictImpact(**{
        field: min(100.0, excess * multiplier)
        for field, multiplier in OVERALLOCATION_IMPACT_MULTIPLIERS.items()
    })


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
