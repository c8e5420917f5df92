"""Conflict-free class schedule generation.

Given each course's sections (and the labs that go with them), produce every
timetable that takes one option per course with no two blocks clashing.
"""

from schedule_planner.combinatorics import cartesian_product
from schedule_planner.conflicts import compare, has_conflict, overlaps, sort_schedule
from schedule_planner.courses import Course, Lab, Section, assemble_courses
from schedule_planner.errors import InvalidNodeError, ParseError, PlannerError
from schedule_planner.nodes import Schedule, ScheduleNode, serialize_schedule
from schedule_planner.planner import PlanResult, configure, plan
from schedule_planner.schedule_finder import (
    find_unresolvable_pairs,
    find_unviable_courses,
    generate_schedules,
    generate_sub_schedules,
    merge,
)
from schedule_planner.times import normalize_time, parse_days

__all__ = [
    "Course",
    "Section",
    "Lab",
    "assemble_courses",
    "ScheduleNode",
    "Schedule",
    "serialize_schedule",
    "normalize_time",
    "parse_days",
    "compare",
    "sort_schedule",
    "overlaps",
    "has_conflict",
    "cartesian_product",
    "merge",
    "generate_sub_schedules",
    "generate_schedules",
    "find_unviable_courses",
    "find_unresolvable_pairs",
    "plan",
    "configure",
    "PlanResult",
    "PlannerError",
    "ParseError",
    "InvalidNodeError",
]
