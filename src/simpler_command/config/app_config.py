from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from simpler_command.common.exceptions import ConfigurationError
from simpler_command.common.logging_utils import LogFormat

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIMPLER_COMMAND_"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.PLAIN
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


class GeneratorConfig(BaseModel):
    """Where the scaffolding generator writes its files."""

    model_config = ConfigDict(extra="forbid")

    commands_dir: str = "commands"
    tests_dir: str = "tests/commands"
    force: bool = False

    @field_validator("commands_dir", "tests_dir")
    @classmethod
    def validate_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("directory must not be empty")
        return v


class AppConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create configuration from environment variables only."""
        return cls.model_validate(_env_overrides(os.environ if environ is None else environ))


_ENV_PATHS: dict[str, tuple[str, str]] = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FORMAT": ("logging", "format"),
    "LOG_FILE": ("logging", "log_file"),
    "COMMANDS_DIR": ("generator", "commands_dir"),
    "TESTS_DIR": ("generator", "tests_dir"),
}


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for suffix, (section, key) in _ENV_PATHS.items():
        value = env.get(f"{ENV_PREFIX}{suffix}")
        if value is not None and value.strip():
            overrides.setdefault(section, {})[key] = value.strip()
    return overrides


def _merge_dicts(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Environment variables take precedence over the file.

    Args:
        config_path: Optional path to a ``.yaml``/``.yml`` configuration file
        environ: Environment mapping, defaults to ``os.environ``

    Raises:
        ConfigurationError: If the file is unreadable or the values are invalid
    """
    env = os.environ if environ is None else environ
    config_data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            if path.suffix.lower() not in (".yaml", ".yml"):
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )
            try:
                with open(path, encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Error loading configuration file: {exc!s}",
                    details={"path": str(path)},
                ) from exc
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a mapping",
                    details={"path": str(path)},
                )
            _merge_dicts(config_data, file_config)

    _merge_dicts(config_data, _env_overrides(env))

    try:
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
