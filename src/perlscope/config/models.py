"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PERLSCOPE__SECTION__KEY)
3. Workspace YAML (.perlscope.yaml)
4. Global YAML (~/.config/perlscope/config.yaml)
5. Built-in defaults (this file)

Examples:
    PERLSCOPE__LOGGING__LEVEL=DEBUG
    PERLSCOPE__INDEX__POLL_INTERVAL_SEC=0.05
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from perlscope.config.constants import DOCUMENT_POLL_INTERVAL_SEC, DOCUMENT_POLL_MAX_RETRIES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PERLSCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every resolution step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class IndexConfig(BaseModel):
    """Document index wait configuration.

    Env vars:
        PERLSCOPE__INDEX__POLL_INTERVAL_SEC: Delay between document lookups
        PERLSCOPE__INDEX__MAX_RETRIES: Lookups before a document wait fails
    """

    poll_interval_sec: float = Field(
        default=DOCUMENT_POLL_INTERVAL_SEC,
        description="Delay between lookups of a document the indexer has not published yet.",
    )
    max_retries: int = Field(
        default=DOCUMENT_POLL_MAX_RETRIES,
        description="Lookups before document symbols give up and return an empty list. "
        "Total wait is poll_interval_sec * max_retries.",
    )

    @field_validator("poll_interval_sec")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Poll interval must be positive, got {v}")
        return v

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Max retries must be at least 1, got {v}")
        return v

    @property
    def wait_timeout_sec(self) -> float:
        return self.poll_interval_sec * self.max_retries


class PerlScopeConfig(BaseModel):
    """Root configuration for perlscope."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)
