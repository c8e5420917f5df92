"""Planner configuration loaded from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class PlannerConfig(BaseSettings):
    """Planner configuration loaded from environment variables.

    Every setting reads from a ``PLANNER_`` prefixed variable. For local
    development, create a .env file in the project root.
    """

    # Generation budget
    max_candidates: Optional[int] = Field(
        default=None,
        gt=0,
        description="Cap on partial schedules kept between merge steps (unset = unbounded)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "PLANNER_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: Optional[PlannerConfig] = None


def get_config() -> PlannerConfig:
    """Get the planner configuration singleton.

    Returns:
        PlannerConfig: Planner configuration instance
    """
    global _config
    if _config is None:
        _config = PlannerConfig()
    return _config
