"""
Conflict detection API endpoints.

Endpoints:
- POST /api/v1/conflicts/detect - Detect conflicts for a planning snapshot
- GET /api/v1/conflicts/types - Conflict types with display icons
- GET /api/v1/conflicts/severities - Severities with colors and risk weights
"""

import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from planscope.api.schemas import (
    ConflictTypeInfo,
    DetectConflictsRequest,
    DetectConflictsResponse,
    RiskLevelResponse,
    SeverityInfo,
)
from planscope.conflicts import (
    ConflictEngine,
    ConflictSeverity,
    ConflictType,
    get_conflict_severity_color,
    get_conflict_type_icon,
    get_risk_level,
)
from planscope.conflicts.constants import SEVERITY_WEIGHTS
from planscope.entities import iterations_for_cycle
from planscope.platform.config import settings
from planscope.platform.logging import get_logger
from planscope.platform.metrics import record_detection

logger = get_logger(__name__)
router = APIRouter()

engine = ConflictEngine()


@router.post("/detect", response_model=DetectConflictsResponse)
def detect_conflicts(
    request: DetectConflictsRequest,
    severity: Optional[ConflictSeverity] = Query(None, description="Filter by severity: critical, high, medium, low"),
    conflict_type: Optional[ConflictType] = Query(None, description="Filter by type, e.g. overallocation"),
) -> DetectConflictsResponse:
    """
    Detect allocation conflicts for the selected cycle.

    Filters only narrow the returned conflict list; the summary, affected
    counts and risk score always describe every detected conflict.
    """
    iterations = request.iterations
    if not iterations and request.cycles:
        iterations = iterations_for_cycle(request.cycles, request.selected_cycle_id)

    try:
        started = time.perf_counter()
        result = engine.detect(
            request.allocations,
            request.teams,
            request.epics,
            request.projects,
            request.people,
            iterations,
            request.selected_cycle_id,
        )
        if settings.METRICS_ENABLED:
            record_detection(result, time.perf_counter() - started)
    except Exception as e:
        logger.error(
            "Failed to detect conflicts",
            cycle_id=request.selected_cycle_id,
            error=str(e),
        )
        raise HTTPException(status_code=500, detail=f"Failed to detect conflicts: {str(e)}")

    level = get_risk_level(result.overall_risk_score)
    conflicts = result.filter(severity=severity, conflict_type=conflict_type)

    return DetectConflictsResponse(
        conflicts=conflicts,
        filtered_count=len(conflicts),
        summary=result.summary,
        affected_teams_count=result.affected_teams_count,
        affected_epics_count=result.affected_epics_count,
        overall_risk_score=result.overall_risk_score,
        risk_level=RiskLevelResponse(label=level.label, color=level.color),
    )


@router.get("/types", response_model=List[ConflictTypeInfo])
def list_conflict_types() -> List[ConflictTypeInfo]:
    """List conflict types with their display icons."""
    return [
        ConflictTypeInfo(type=t, icon=get_conflict_type_icon(t))
        for t in ConflictType
    ]


@router.get("/severities", response_model=List[SeverityInfo])
def list_severities() -> List[SeverityInfo]:
    """List severities, most severe first, with colors and risk weights."""
    return [
        SeverityInfo(
            severity=s,
            color=get_conflict_severity_color(s),
            weight=SEVERITY_WEIGHTS[s],
        )
        for s in sorted(ConflictSeverity, key=lambda s: SEVERITY_WEIGHTS[s], reverse=True)
    ]
