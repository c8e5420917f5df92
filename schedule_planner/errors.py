"""Error hierarchy for the schedule planner.

Malformed input raises one of these; running out of viable schedules never
does (an empty result is a valid outcome).
"""


class PlannerError(Exception):
    """Base exception for all schedule planner errors."""

    pass


class ParseError(PlannerError, ValueError):
    """A time string could not be read as a 12-hour clock value.

    Examples: "13:00pm", "9:60am", "noon", "9:00".
    """

    pass


class InvalidNodeError(PlannerError, ValueError):
    """A schedule node ends before it starts.

    Nodes never wrap around midnight, so this is always a data error.
    """

    pass
