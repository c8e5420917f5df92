"""structlog setup for the schedule planner.

The engine only emits events through get_logger(); nothing is rendered until
the host process calls setup_logging() (planner.configure() does it from
PlannerConfig). Unconfigured, structlog's own defaults apply.
"""

import logging

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Install the planner's processor chain.

    Args:
        json_output: Render one JSON object per event instead of console lines.
        log_level: Minimum level name; unknown names fall back to INFO.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger for a planner module, usually called with __name__."""
    return structlog.get_logger(name)
