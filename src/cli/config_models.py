"""Pydantic configuration models for moodlog."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import Granularity


class PathsConfig(BaseModel):
    """File paths configuration."""

    db: Path = Path("~/moodlog/mood.sqlite3")
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.db = self.db.expanduser()
        if self.log_file is not None:
            self.log_file = self.log_file.expanduser()
        return self


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 4000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"port must be 1-65535, got {v}")
        return v


class StatsConfig(BaseModel):
    """Stats defaults."""

    window_days: dict[str, int] = Field(default_factory=dict)
    max_list_limit: int = 5000

    @field_validator("window_days")
    @classmethod
    def validate_windows(cls, v: dict[str, int]) -> dict[str, int]:
        valid = {str(g) for g in Granularity}
        for key, days in v.items():
            if key not in valid:
                raise ValueError(f"Unknown granularity in window_days: {key}. Must be one of {valid}")
            if days <= 0:
                raise ValueError(f"window_days.{key} must be positive, got {days}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodlogConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def apply_env_overrides(self):
        """MOODLOG_DB and PORT win over the file."""
        db = os.getenv("MOODLOG_DB")
        if db:
            self.paths.db = Path(db).expanduser()
        port = os.getenv("PORT")
        if port:
            self.server.port = int(port)
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodlogConfig":
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
