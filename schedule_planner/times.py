# times.py
# Normalizes 12-hour clock strings and raw day lists into the forms the engine compares.

import re
from typing import Iterable, Optional, Tuple, Union

from schedule_planner.errors import ParseError

__all__ = ["normalize_time", "parse_days"]

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([ap]m)\s*$", re.IGNORECASE | re.ASCII)
_DAY_SPLIT_RE = re.compile(r"[,\s]+")


def normalize_time(raw: str) -> str:
    # Convert "1:32pm" / "1:32 PM" into a zero-padded 24-hour "HH:MM" string.
    if not isinstance(raw, str):
        raise ParseError(f"time must be a string, got {type(raw).__name__}: {raw!r}")

    match = _TIME_RE.match(raw)
    if not match:
        raise ParseError(f"not a 12-hour time: {raw!r}")

    hour, minute, marker = int(match.group(1)), int(match.group(2)), match.group(3).lower()
    if not 1 <= hour <= 12:
        raise ParseError(f"hour out of range in {raw!r}")
    if minute > 59:
        raise ParseError(f"minute out of range in {raw!r}")

    # 12am is midnight, 12pm stays noon.
    if hour == 12:
        hour = 0
    if marker == "pm":
        hour += 12

    return f"{hour:02d}:{minute:02d}"


def parse_days(raw: Optional[Union[str, Iterable[str]]]) -> Tuple[str, ...]:
    # Split "Monday, Wednesday" (or take a list of tokens) into unique day tokens, first-seen order kept.
    if raw is None:
        return ()
    tokens = _DAY_SPLIT_RE.split(raw) if isinstance(raw, str) else [str(t).strip() for t in raw]
    return tuple(dict.fromkeys(t for t in tokens if t))
