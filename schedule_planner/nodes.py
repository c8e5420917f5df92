# nodes.py
# A schedule node is one schedulable block (a section or a lab) of a course.

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Sequence, Tuple

from schedule_planner.errors import InvalidNodeError

__all__ = ["ScheduleNode", "Schedule", "serialize_schedule"]


@dataclass(frozen=True)
class ScheduleNode:
    """One unit of instruction, section or lab alike.

    ``start_time`` and ``end_time`` are zero-padded 24-hour ``"HH:MM"`` strings,
    so plain string comparison orders them correctly. ``node_index`` only
    records where the node came from and takes no part in comparisons.
    """

    days: Tuple[str, ...]
    start_time: str
    end_time: str
    course_prefix: str
    course_code: str
    node_index: int = field(default=0, compare=False)
    is_lab: bool = False
    day_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        days = tuple(dict.fromkeys(self.days))
        object.__setattr__(self, "days", days)
        object.__setattr__(self, "day_set", frozenset(days))
        if self.start_time > self.end_time:
            raise InvalidNodeError(
                f"{self.course} ends before it starts ({self.start_time} - {self.end_time})"
            )

    @property
    def course(self) -> str:
        return f"{self.course_prefix} {self.course_code}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "course": self.course,
            "is_lab": self.is_lab,
            "days": list(self.days),
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    def __str__(self) -> str:
        kind = "Lab" if self.is_lab else "Section"
        return f"{kind}: {self.course} [{','.join(self.days)}] ({self.start_time} - {self.end_time})"


Schedule = List[ScheduleNode]


def serialize_schedule(schedule: Sequence[ScheduleNode]) -> List[Dict[str, Any]]:
    return [node.to_dict() for node in schedule]
