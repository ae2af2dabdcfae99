"""
Base class for allocation conflict detectors.

Provides the shared detection context (entity collections plus id indices
built once per run), common grouping helpers and per-detector logging.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from planscope.entities import Allocation, Cycle, Epic, Person, Project, Team
from planscope.platform.logging import get_logger

from .constants import FIXED_IMPACTS, FIXED_SEVERITIES
from .models import AllocationConflict, ConflictImpact, ConflictSeverity, ConflictType


def _index_by_id(items: Iterable) -> Dict[str, object]:
    index: Dict[str, object] = {}
    for item in items:
        # first match wins, as with a linear scan
        index.setdefault(item.id, item)
    return index


@dataclass(frozen=True)
class DetectionContext:
    """
    Supporting entity collections for a detection run.

    Collections are the caller's unfiltered snapshots; only allocations are
    filtered to the selected cycle before detectors run.
    """

    teams: Sequence[Team] = ()
    epics: Sequence[Epic] = ()
    projects: Sequence[Project] = ()
    people: Sequence[Person] = ()
    iterations: Sequence[Cycle] = ()

    teams_by_id: Dict[str, Team] = field(init=False, repr=False)
    projects_by_id: Dict[str, Project] = field(init=False, repr=False)
    epics_by_id: Dict[str, Epic] = field(init=False, repr=False)
    epics_by_project: Dict[str, List[Epic]] = field(init=False, repr=False)

    def __post_init__(self):
        by_project: Dict[str, List[Epic]] = defaultdict(list)
        for epic in self.epics:
            if epic.project_id:
                by_project[epic.project_id].append(epic)
        # frozen dataclass: bypass __setattr__ for derived indices
        object.__setattr__(self, "teams_by_id", _index_by_id(self.teams))
        object.__setattr__(self, "projects_by_id", _index_by_id(self.projects))
        object.__setattr__(self, "epics_by_id", _index_by_id(self.epics))
        object.__setattr__(self, "epics_by_project", dict(by_project))

    def get_epic(self, epic_id: Optional[str]) -> Optional[Epic]:
        if not epic_id:
            return None
        return self.epics_by_id.get(epic_id)

    def get_project_epics(self, project_id: str) -> List[Epic]:
        return self.epics_by_project.get(project_id, [])


class ConflictDetectorBase(ABC):
    """
    Base class for all conflict detectors.

    Detectors are stateless: ``detect`` reads the allocations of one cycle and
    the supporting context and returns new conflicts without touching its inputs.
    """

    conflict_type: ConflictType

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return self.conflict_type.value

    @abstractmethod
    def detect(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        """
        Detect conflicts of this detector's type.

        Must be implemented by subclasses.
        """

    def __call__(
        self,
        allocations: Sequence[Allocation],
        context: DetectionContext,
    ) -> List[AllocationConflict]:
        conflicts = self.detect(allocations, context)
        self.logger.debug("detector finished", detector=self.name, conflicts=len(conflicts))
        return conflicts

    def fixed_severity(self) -> ConflictSeverity:
        return FIXED_SEVERITIES[self.conflict_type]

    def fixed_impact(self) -> ConflictImpact:
        return FIXED_IMPACTS[self.conflict_type].model_copy()

    @staticmethod
    def project_allocations(
        allocations: Sequence[Allocation],
        project_epics: Sequence[Epic],
    ) -> List[Allocation]:
        """Get the epic-anchored allocations that reference one of the given epics."""
        epic_ids = {e.id for e in project_epics}
        return [a for a in allocations if a.epic_id and a.epic_id in epic_ids]

    @staticmethod
    def distinct(values: Iterable[Optional[str]]) -> List[str]:
        """Distinct non-empty values in first-seen order."""
        return list(dict.fromkeys(v for v in values if v))
