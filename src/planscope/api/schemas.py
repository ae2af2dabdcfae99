from typing import List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from planscope.conflicts.models import ConflictDetectionResult, ConflictSeverity, ConflictType
from planscope.entities import Allocation, Cycle, Epic, Person, Project, Team


class ApiModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# --- Conflict detection ---

class DetectConflictsRequest(ApiModel):
    selected_cycle_id: str = Field(..., description="Quarter cycle to analyze")
    allocations: List[Allocation] = Field(default_factory=list)
    teams: List[Team] = Field(default_factory=list)
    epics: List[Epic] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    people: List[Person] = Field(default_factory=list)
    iterations: List[Cycle] = Field(
        default_factory=list,
        description="Ordered iterations of the selected quarter",
    )
    cycles: List[Cycle] = Field(
        default_factory=list,
        description="All cycles; used to derive iterations when none are given",
    )


class RiskLevelResponse(ApiModel):
    label: str
    color: str


class DetectConflictsResponse(ConflictDetectionResult):
    risk_level: RiskLevelResponse
    # len(conflicts) after query filters; summary.total counts all of them
    filtered_count: int


# --- Display metadata ---

class ConflictTypeInfo(ApiModel):
    type: ConflictType
    icon: str


class SeverityInfo(ApiModel):
    severity: ConflictSeverity
    color: str
    weight: int
