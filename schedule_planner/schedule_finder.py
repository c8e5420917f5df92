# schedule_finder.py
# Enumerates all conflict-free course schedules by folding per-course options together, pruning clashes as it goes.

from typing import List, Optional, Sequence, Tuple, Union

from schedule_planner.combinatorics import cartesian_product
from schedule_planner.conflicts import has_conflict
from schedule_planner.courses import Course, Lab, Section
from schedule_planner.logging import get_logger
from schedule_planner.nodes import Schedule, ScheduleNode
from schedule_planner.times import normalize_time

__all__ = [
    "merge",
    "generate_sub_schedules",
    "generate_schedules",
    "find_unviable_courses",
    "find_unresolvable_pairs",
]

log = get_logger(__name__)


def merge(schedules_a: Sequence[Schedule], schedules_b: Sequence[Schedule]) -> List[Schedule]:
    # Pair every schedule of A with every schedule of B, keeping only the clash-free concatenations.
    if not schedules_a or not schedules_b:
        return []

    # Check each whole row, so a clash already hiding inside a or b is caught too.
    return [row for row in cartesian_product(schedules_a, schedules_b) if not has_conflict(row)]


def _node(course: Course, index: int, block: Union[Section, Lab], is_lab: bool) -> ScheduleNode:
    return ScheduleNode(
        days=block.days,
        start_time=normalize_time(block.start_time),
        end_time=normalize_time(block.end_time),
        course_prefix=course.prefix,
        course_code=course.code,
        node_index=index,
        is_lab=is_lab,
    )


def generate_sub_schedules(course: Course) -> List[Schedule]:
    # Every section of the course, paired with each of its labs (or alone if it has none), minus self-clashes.
    sub_schedules: List[Schedule] = []

    for i, section in enumerate(course.sections):
        section_node = _node(course, i, section, is_lab=False)
        if not section.labs:
            sub_schedules.append([section_node])
            continue

        lab_nodes = [_node(course, j, lab, is_lab=True) for j, lab in enumerate(section.labs)]
        for row in cartesian_product([section_node], lab_nodes):
            if not has_conflict(row):
                sub_schedules.append(row)

    log.debug("sub_schedules_built", course=course.identity, count=len(sub_schedules))
    return sub_schedules


def generate_schedules(
    courses: Sequence[Course],
    max_candidates: Optional[int] = None,
) -> List[Schedule]:
    # Fold merge across the courses left to right; partial schedules that clash are dropped after every step.
    if max_candidates is not None and max_candidates < 1:
        raise ValueError(f"max_candidates must be at least 1, got {max_candidates}")
    if not courses:
        return []

    schedules = _capped(generate_sub_schedules(courses[0]), max_candidates, courses[0])
    for course in courses[1:]:
        if not schedules:
            break
        options = generate_sub_schedules(course)
        merged = merge(schedules, options)
        log.debug(
            "merge_pruned",
            course=course.identity,
            candidates=len(schedules) * len(options),
            kept=len(merged),
        )
        schedules = _capped(merged, max_candidates, course)

    log.info("schedules_generated", courses=len(courses), schedules=len(schedules))
    return schedules


def _capped(schedules: List[Schedule], max_candidates: Optional[int], course: Course) -> List[Schedule]:
    if max_candidates is None or len(schedules) <= max_candidates:
        return schedules
    log.warning(
        "candidates_capped",
        course=course.identity,
        dropped=len(schedules) - max_candidates,
        kept=max_candidates,
    )
    return schedules[:max_candidates]


def find_unviable_courses(courses: Sequence[Course]) -> List[str]:
    # Courses that cannot be scheduled even on their own (no sections, or every section clashes with its labs).
    return [c.identity for c in courses if not generate_sub_schedules(c)]


def find_unresolvable_pairs(courses: Sequence[Course]) -> List[Tuple[str, str]]:
    # Pairs of courses for which every combination of their options clashes.
    options = [generate_sub_schedules(c) for c in courses]
    bad_pairs: List[Tuple[str, str]] = []

    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            # A course with no options of its own is reported by find_unviable_courses instead.
            if not options[i] or not options[j]:
                continue
            if not merge(options[i], options[j]):
                bad_pairs.append((courses[i].identity, courses[j].identity))
    return bad_pairs
