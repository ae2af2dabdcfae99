"""
Conflict detectors, one per conflict category.

- OverallocationDetector: team over 100% in an iteration
- SkillMismatchDetector: placeholder, reports nothing
- DependencyViolationDetector: project epics in adjacent iterations
- ResourceContentionDetector: several teams on one epic in one iteration
- TimelineOverlapDetector: many project epics in a short span
"""

from .overallocation import OverallocationDetector
from .skill_mismatch import SkillMismatchDetector
from .dependency import DependencyViolationDetector
from .contention import ResourceContentionDetector
from .timeline import TimelineOverlapDetector

__all__ = [
    "OverallocationDetector",
    "SkillMismatchDetector",
    "DependencyViolationDetector",
    "ResourceContentionDetector",
    "TimelineOverlapDetector",
]
