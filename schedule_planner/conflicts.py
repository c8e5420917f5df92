# conflicts.py
# Pairwise and schedule-wide clash detection between schedule nodes.

from functools import cmp_to_key
from typing import List, Sequence

from schedule_planner.nodes import ScheduleNode

__all__ = ["compare", "sort_schedule", "overlaps", "has_conflict"]


def compare(a: ScheduleNode, b: ScheduleNode) -> int:
    # Order by start time, then by end time.
    if a.start_time != b.start_time:
        return -1 if a.start_time < b.start_time else 1
    if a.end_time != b.end_time:
        return -1 if a.end_time < b.end_time else 1
    return 0


def sort_schedule(schedule: Sequence[ScheduleNode]) -> List[ScheduleNode]:
    # Canonical ordering for display and tests; generation keeps insertion order.
    return sorted(schedule, key=cmp_to_key(compare))


def overlaps(a: ScheduleNode, b: ScheduleNode) -> bool:
    # Shared day and intersecting closed intervals; back-to-back blocks count as a clash.
    if a.day_set.isdisjoint(b.day_set):
        return False
    return a.start_time <= b.end_time and b.start_time <= a.end_time


def has_conflict(nodes: Sequence[ScheduleNode]) -> bool:
    # True if any two positions in the sequence clash. A node is never checked against its own position.
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            if overlaps(nodes[i], nodes[j]):
                return True
    return False
