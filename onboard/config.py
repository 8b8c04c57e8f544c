from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from onboard import CONFIG_PATH, DEFAULT_PROGRESS_PATH
from onboard.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# OnboardConfig (args/onboard.yaml)
# =============================================================================

class ProgressConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    path: Optional[str] = None

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("progress.path must be a non-empty string")
        return value


class DisplayConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    bar_length: int = Field(default=30, ge=10)
    team_name: str = Field(default="Core Discovery Frontend")
    command: str = Field(default="onboard")


class OnboardConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    def progress_path(self) -> Path:
        """Resolve the progress file: env override, then config, then default."""
        override = os.environ.get("ONBOARD_PROGRESS_FILE")
        if override:
            return Path(override).expanduser()
        if self.progress.path:
            return Path(self.progress.path).expanduser()
        return DEFAULT_PROGRESS_PATH


def load_config(path: Path | None = None) -> OnboardConfig:
    """
    Load and validate the onboarding configuration.

    Falls back to defaults (with a warning) when the file is missing,
    unreadable, or fails validation.
    """
    if path is None:
        env_path = os.environ.get("ONBOARD_CONFIG")
        path = Path(env_path).expanduser() if env_path else CONFIG_PATH

    try:
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return OnboardConfig.model_validate(raw)
    except Exception as e:
        logger.warning("config_invalid", path=str(path), error=str(e))
        return OnboardConfig()
