import pytest
import structlog

from schedule_planner import ScheduleNode


@pytest.fixture(autouse=True)
def _default_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def node():
    # Build a node from already-normalized 24-hour times.
    def make(days, start, end, prefix="CMSC", code="100", index=0, is_lab=False):
        return ScheduleNode(
            days=tuple(days),
            start_time=start,
            end_time=end,
            course_prefix=prefix,
            course_code=code,
            node_index=index,
            is_lab=is_lab,
        )

    return make

