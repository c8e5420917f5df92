"""Pydantic models for the course records the generator consumes.

Records mirror the nested course -> sections -> labs shape that the course
catalog produces. Field names accept both the short spellings used here and
the column names of the persisted rows (``course_prefix``, ``section_days``,
``lab_start_time`` ...), so joined database rows validate directly.

Times stay raw 12-hour strings on the records; they are normalized when the
generator builds schedule nodes, so a malformed time surfaces there as a
``ParseError`` rather than being coerced here.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from schedule_planner.logging import get_logger
from schedule_planner.times import parse_days

log = get_logger(__name__)

DEFAULT_LAB_TYPE = "Discussion"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Lab(_Record):
    """A lab or discussion block attached to one section."""

    lab_id: Optional[Any] = None
    days: Tuple[str, ...] = Field(default=(), validation_alias=AliasChoices("days", "lab_days"))
    start_time: str = Field(validation_alias=AliasChoices("start_time", "lab_start_time"))
    end_time: str = Field(validation_alias=AliasChoices("end_time", "lab_end_time"))
    lab_type: str = DEFAULT_LAB_TYPE  # No source distinguishes lab kinds yet

    @field_validator("days", mode="before")
    @classmethod
    def _split_days(cls, value: Any) -> Tuple[str, ...]:
        return parse_days(value)


class Section(_Record):
    """One lecture section of a course, with the labs students may pair it with."""

    section_id: Optional[Any] = None
    instructor: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("instructor", "section_instructor"),
    )
    days: Tuple[str, ...] = Field(default=(), validation_alias=AliasChoices("days", "section_days"))
    start_time: str = Field(validation_alias=AliasChoices("start_time", "section_start_time"))
    end_time: str = Field(validation_alias=AliasChoices("end_time", "section_end_time"))
    labs: Tuple[Lab, ...] = ()

    @field_validator("days", mode="before")
    @classmethod
    def _split_days(cls, value: Any) -> Tuple[str, ...]:
        return parse_days(value)

    @field_validator("instructor", mode="before")
    @classmethod
    def _tuple_instructor(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return value


class Course(_Record):
    """A course and every section a student could enrol in."""

    prefix: str = Field(validation_alias=AliasChoices("prefix", "course_prefix"))
    code: str = Field(validation_alias=AliasChoices("code", "course_code"))
    sections: Tuple[Section, ...] = ()

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_text(cls, value: Any) -> Any:
        # Course numbers often come back from storage as integers.
        return str(value) if isinstance(value, int) else value

    @property
    def identity(self) -> str:
        return f"{self.prefix} {self.code}"


def assemble_courses(
    course_keys: Iterable[Mapping[str, Any]],
    section_rows: Iterable[Mapping[str, Any]],
    lab_rows: Iterable[Mapping[str, Any]],
) -> List[Course]:
    """Rebuild nested course records from flat joined rows.

    Args:
        course_keys: Requested courses, each with ``course_prefix`` and ``course_code``.
            Output order follows this sequence.
        section_rows: Rows of the courses/sections join. Rows with no
            ``section_id`` (a course without sections) contribute nothing.
        lab_rows: Rows of the labs table, attached to the section of the same
            course with a matching ``section_id``. Labs whose section is not
            found are dropped.

    Returns:
        One validated Course per requested key.
    """
    keys = [(str(k["course_prefix"]), str(k["course_code"])) for k in course_keys]
    sections: Dict[Tuple[str, str], List[Dict[str, Any]]] = {key: [] for key in keys}

    for row in section_rows:
        key = (str(row["course_prefix"]), str(row["course_code"]))
        if key not in sections or row.get("section_id") is None:
            continue
        section = dict(row)
        section["labs"] = []
        sections[key].append(section)

    for row in lab_rows:
        key = (str(row["course_prefix"]), str(row["course_code"]))
        target = next(
            (s for s in sections.get(key, []) if s["section_id"] == row.get("section_id")),
            None,
        )
        if target is None:
            log.debug(
                "orphan_lab_dropped",
                course=" ".join(key),
                section_id=row.get("section_id"),
                lab_id=row.get("lab_id"),
            )
            continue
        target["labs"].append(dict(row))

    return [
        Course(course_prefix=prefix, course_code=code, sections=sections[(prefix, code)])
        for prefix, code in keys
    ]
