"""
Planning entities consumed by the conflict engine.

These are read-only snapshots of the records owned by the planning dashboard.
Field names are snake_case in Python; payloads may use either snake_case or the
dashboard's camelCase keys (``teamId``, ``iterationNumber``, ...).
"""

from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class PlanningEntity(BaseModel):
    """Base for all immutable planning records."""

    id: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        extra = "ignore"


class CycleType(str, Enum):
    """Kinds of planning cycle."""
    ANNUAL = "annual"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    ITERATION = "iteration"


class Team(PlanningEntity):
    name: str
    capacity: float = Field(40.0, description="Capacity in hours per week")
    division_id: Optional[str] = None


class Role(PlanningEntity):
    name: str


class Person(PlanningEntity):
    name: Optional[str] = None
    team_id: Optional[str] = None
    is_active: bool = True
    employment_type: str = "permanent"
    role_id: Optional[str] = None


class Project(PlanningEntity):
    name: str
    status: str = "active"


class Epic(PlanningEntity):
    name: str
    project_id: Optional[str] = Field(None, description="Absent for run work")
    assigned_team_id: Optional[str] = None
    estimated_effort: Optional[float] = None
    status: Optional[str] = None


class Cycle(PlanningEntity):
    name: Optional[str] = None
    type: CycleType
    start_date: date
    end_date: date
    parent_cycle_id: Optional[str] = None
    status: str = "planning"


class Allocation(PlanningEntity):
    """
    A percentage of a team's capacity assigned to an epic or run-work category.

    ``iteration_number`` is the 1-based position of the iteration inside the
    quarter identified by ``cycle_id``, not an iteration cycle id.
    """

    team_id: str
    cycle_id: str
    iteration_number: int
    percentage: float
    epic_id: Optional[str] = None
    run_work_category_id: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("epic_id", "run_work_category_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # The dashboard stores "" for the unused side of epic/run-work
        if value == "":
            return None
        return value

    @property
    def is_run_work(self) -> bool:
        return self.epic_id is None


def iterations_for_cycle(cycles: Iterable[Cycle], quarter_id: str) -> List[Cycle]:
    """
    Get the ordered iterations of a quarter.

    The position of each iteration in the returned list (1-based) is the
    iteration number used by allocations in that quarter.
    """
    iterations = [
        c for c in cycles
        if c.type == CycleType.ITERATION and c.parent_cycle_id == quarter_id
    ]
    return sorted(iterations, key=lambda c: c.start_date)
