"""Application configuration using pydantic-settings."""

from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings, overridable with CONTRIBUTION_PLANNER_* environment variables."""

    model_config = {"env_prefix": "CONTRIBUTION_PLANNER_"}

    data_file: str = "data/plan_state.json"
    log_level: str = "INFO"
    log_json: bool = False
    port: int = 5000
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    # defaults for the retirement projection endpoint
    current_age: int = 30
    retirement_age: int = 65
    annual_return_rate: float = 0.07
