"""
Display lookups for conflict reports: type glyphs, severity CSS classes and
risk level labels.
"""

from typing import NamedTuple, Union

from .models import ConflictSeverity, ConflictType


TYPE_ICONS = {
    ConflictType.OVERALLOCATION: "⚠️",
    ConflictType.SKILL_MISMATCH: "🎯",
    ConflictType.DEPENDENCY_VIOLATION: "🔗",
    ConflictType.RESOURCE_CONTENTION: "⚔️",
    ConflictType.TIMELINE_OVERLAP: "⏰",
    ConflictType.CAPACITY_EXCEEDED: "📊",
}
UNKNOWN_ICON = "❓"

SEVERITY_COLORS = {
    ConflictSeverity.CRITICAL: "text-red-600 bg-red-50 border-red-200",
    ConflictSeverity.HIGH: "text-orange-600 bg-orange-50 border-orange-200",
    ConflictSeverity.MEDIUM: "text-yellow-600 bg-yellow-50 border-yellow-200",
    ConflictSeverity.LOW: "text-blue-600 bg-blue-50 border-blue-200",
}
DEFAULT_COLOR = "text-gray-600 bg-gray-50 border-gray-200"


class RiskLevel(NamedTuple):
    label: str
    color: str


# (minimum score, level), checked in order
RISK_LEVELS = (
    (80, RiskLevel("High Risk", "text-red-600")),
    (60, RiskLevel("Medium Risk", "text-orange-600")),
    (40, RiskLevel("Low Risk", "text-yellow-600")),
)
MINIMAL_RISK = RiskLevel("Minimal Risk", "text-green-600")


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def get_conflict_type_icon(conflict_type: Union[ConflictType, str]) -> str:
    """Glyph for a conflict type."""
    return TYPE_ICONS.get(_coerce(ConflictType, conflict_type), UNKNOWN_ICON)


def get_conflict_severity_color(severity: Union[ConflictSeverity, str]) -> str:
    """CSS classes for a severity badge."""
    return SEVERITY_COLORS.get(_coerce(ConflictSeverity, severity), DEFAULT_COLOR)


def get_risk_level(score: float) -> RiskLevel:
    """Label and color for an overall risk score."""
    for minimum, level in RISK_LEVELS:
        if score >= minimum:
            return level
    return MINIMAL_RISK
