"""Configuration models using Pydantic for validation."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MoverSettings(BaseModel):
    """Behaviour of the key mover."""

    conflict_value_source: Literal["existing_key", "new_key"] = Field(
        default="existing_key",
        description=(
            "Key that try_move_key reads the reported conflicting value from. "
            "'existing_key' keeps the documented behaviour, 'new_key' reports "
            "the destination value that gets overwritten"
        ),
    )
    log_moves: bool = Field(default=True, description="Emit DEBUG records for each move")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class KeyMoverConfig(BaseModel):
    """Main configuration for KeyMover."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    mover: MoverSettings = Field(default_factory=MoverSettings, description="Key mover settings")

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
