"""Entry point for callers that hold raw course payloads.

Validates the payload, runs the generator under the configured candidate
budget and returns plain data ready for any transport. When nothing can be
scheduled, the result explains which courses or course pairs are to blame.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from schedule_planner.config import PlannerConfig, get_config
from schedule_planner.courses import Course
from schedule_planner.logging import get_logger, setup_logging
from schedule_planner.nodes import serialize_schedule
from schedule_planner.schedule_finder import (
    find_unresolvable_pairs,
    find_unviable_courses,
    generate_schedules,
)

log = get_logger(__name__)


class PlanResult(BaseModel):
    """Generated schedules, or the reasons none exist."""

    schedules: List[List[Dict[str, Any]]] = Field(default_factory=list)
    unviable_courses: List[str] = Field(default_factory=list)
    unresolvable_pairs: List[Tuple[str, str]] = Field(default_factory=list)


def configure(config: Optional[PlannerConfig] = None) -> PlannerConfig:
    """Set up logging from configuration; call once at process start.

    Args:
        config: Overrides the environment configuration.

    Returns:
        The configuration in effect.
    """
    config = config or get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)
    return config


def plan(
    payload: Iterable[Union[Course, Dict[str, Any]]],
    *,
    config: Optional[PlannerConfig] = None,
) -> PlanResult:
    """Generate every conflict-free schedule for the requested courses.

    Args:
        payload: Course records, as Course models or dicts in the catalog shape.
        config: Overrides the environment configuration (mainly for tests).

    Returns:
        PlanResult with serialized schedules. If no schedule exists, the
        diagnosis fields are filled in instead.

    Raises:
        pydantic.ValidationError: A record is missing fields or has the wrong shape.
        ParseError: A section or lab time is not a valid 12-hour time.
    """
    config = config or get_config()
    courses = [c if isinstance(c, Course) else Course.model_validate(c) for c in payload]

    schedules = generate_schedules(courses, max_candidates=config.max_candidates)
    if schedules:
        return PlanResult(schedules=[serialize_schedule(s) for s in schedules])

    result = PlanResult(
        unviable_courses=find_unviable_courses(courses),
        unresolvable_pairs=find_unresolvable_pairs(courses),
    )
    log.info(
        "no_schedule_found",
        courses=[c.identity for c in courses],
        unviable=result.unviable_courses,
        unresolvable=result.unresolvable_pairs,
    )
    return result
