"""
Tests for conflict display lookups.
"""

import pytest

from planscope.conflicts import (
    ConflictSeverity,
    ConflictType,
    get_conflict_severity_color,
    get_conflict_type_icon,
    get_risk_level,
)


class TestConflictTypeIcon:

    @pytest.mark.parametrize("conflict_type,icon", [
        (ConflictType.OVERALLOCATION, "⚠️"),
        (ConflictType.SKILL_MISMATCH, "🎯"),
        (ConflictType.DEPENDENCY_VIOLATION, "🔗"),
        (ConflictType.RESOURCE_CONTENTION, "⚔️"),
        (ConflictType.TIMELINE_OVERLAP, "⏰"),
        (ConflictType.CAPACITY_EXCEEDED, "📊"),
    ])
    def test_icons(self, conflict_type, icon):
        assert get_conflict_type_icon(conflict_type) == icon

    def test_accepts_plain_strings(self):
        assert get_conflict_type_icon("timeline-overlap") == "⏰"

    def test_unknown_type(self):
        assert get_conflict_type_icon("budget-overrun") == "❓"


class TestSeverityColor:

    @pytest.mark.parametrize("severity,css", [
        (ConflictSeverity.CRITICAL, "text-red-600"),
        (ConflictSeverity.HIGH, "text-orange-600"),
        (ConflictSeverity.MEDIUM, "text-yellow-600"),
        (ConflictSeverity.LOW, "text-blue-600"),
    ])
    def test_colors(self, severity, css):
        assert css in get_conflict_severity_color(severity)

    def test_unknown_severity(self):
        assert get_conflict_severity_color("severe") == "text-gray-600 bg-gray-50 border-gray-200"


class TestRiskLevel:

    @pytest.mark.parametrize("score,label", [
        (100, "High Risk"),
        (80, "High Risk"),
        (79, "Medium Risk"),
        (60, "Medium Risk"),
        (40, "Low Risk"),
        (39, "Minimal Risk"),
        (0, "Minimal Risk"),
    ])
    def test_levels(self, score, label):
        assert get_risk_level(score).label == label

    def test_color(self):
        assert get_risk_level(85).color == "text-red-600"
        assert get_risk_level(10).color == "text-green-600"
