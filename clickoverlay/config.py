"""Configuration loading and validation using Pydantic models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .errors import ConfigError
from .logging_utils import _default_log_dir, validate_level

CONFIG_ENV = "CLICKOVERLAY_CONFIG"
DEFAULT_CONFIG_NAME = "clickoverlay.yml"


class HookConfig(BaseModel):
    track_motion: bool = Field(
        True,
        description="Forward pointer motion so indicators follow the cursor.",
    )
    start_timeout_s: float = Field(
        5.0,
        gt=0,
        description="How long to wait for the global mouse hook to report ready.",
    )


class QueueConfig(BaseModel):
    max_events: Optional[int] = Field(
        None,
        ge=1,
        description=(
            "Optional capacity. When set, the oldest queued event is dropped on "
            "overflow. Unbounded by default so no input is ever lost."
        ),
    )
    drain_timeout_ms: int = Field(
        50,
        ge=1,
        description="Upper bound on waiting for the queue lock during a tick.",
    )


class UiConfig(BaseModel):
    enabled: bool = True
    tick_interval_ms: int = Field(
        16,
        ge=1,
        description="Tick cadence while any indicator is visible.",
    )
    idle_tick_interval_ms: int = Field(
        100,
        ge=1,
        description="Tick cadence while every indicator is hidden.",
    )
    indicator_radius_px: int = Field(18, ge=2, le=256)
    opacity: float = Field(0.85, gt=0.0, le=1.0)


class LoggingConfig(BaseModel):
    level: str = Field("INFO")
    file_enabled: bool = Field(False, description="Also write a rotating log file.")
    log_dir: Optional[Path] = None

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        return validate_level(value)

    def resolved_log_dir(self) -> Path | None:
        if not self.file_enabled:
            return None
        if self.log_dir is not None:
            return self.log_dir
        return _default_log_dir()


class AppConfig(BaseModel):
    hook: HookConfig = Field(default_factory=HookConfig)
    queue: QueueConfig = Field(default_factory=QueueConfig)
    ui: UiConfig = Field(default_factory=UiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def default_config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_NAME))


def load_config(path: Path | str | None = None) -> AppConfig:
    """Load YAML configuration from disk.

    A missing or empty file yields the defaults.
    """

    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return AppConfig()
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")
    return AppConfig.model_validate(data)


def dump_config(config: AppConfig) -> str:
    return yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False)
