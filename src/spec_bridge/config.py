"""Configuration management for spec-bridge using Pydantic.

This module provides type-safe configuration models for the matching
thresholds, logging and export settings. Every threshold defaults to the
value the engine has always used, so an empty configuration reproduces the
standard behavior.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spec_bridge.exceptions import ConfigurationError


class MatchingConfig(BaseModel):
    """Thresholds and switches for path and field matching."""

    path_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Minimum path similarity (exclusive) for two endpoints to correspond",
    )
    parameter_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Minimum confidence (exclusive) to accept a parameter match",
    )
    field_threshold: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Minimum confidence (exclusive) to accept a schema field match",
    )
    emit_unmapped: bool = Field(
        default=False,
        description="Record parameters and fields whose best match fell below the threshold",
    )
    include_empty_groups: bool = Field(
        default=False,
        description="Keep mapping groups that produced no field mappings",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING",
        description="Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    file_level: str = Field(
        default="DEBUG",
        description="File log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str = Field(default="json", description="Log format (json or console)")
    file: str | None = Field(default=None, description="Log file path")

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v_lower


class ExportConfig(BaseModel):
    """Comparison export options."""

    default_format: str = Field(default="json", description="Export format (json or markdown)")
    include_values: bool = Field(
        default=True,
        description="Include old/new values of each difference in JSON exports",
    )

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate export format."""
        valid_formats = ["json", "markdown"]
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(f"Export format must be one of: {', '.join(valid_formats)}")
        return v_lower


class BridgeConfig(BaseSettings):
    """Main spec-bridge configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SPEC_BRIDGE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    matching: MatchingConfig = Field(
        default_factory=MatchingConfig, description="Matching configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    export: ExportConfig = Field(default_factory=ExportConfig, description="Export configuration")


def load_config_from_yaml(config_path: str | Path) -> BridgeConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        BridgeConfig: Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        try:
            config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not config_data:
        raise ConfigurationError(f"Empty configuration file: {config_path}")

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")

    config_data = _expand_env_vars(config_data)

    try:
        return BridgeConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config data.

    Supports ${VAR_NAME} syntax for environment variable substitution.

    Args:
        data: Configuration value (dict, list or scalar)

    Returns:
        The value with environment variables expanded
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        if data.startswith("${") and data.endswith("}"):
            var_name = data[2:-1]
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ConfigurationError(
                    f"Environment variable '{var_name}' not found. "
                    f"Please set it in your environment or .env file."
                )
            return env_value
        return data
    else:
        return data


def save_config_to_yaml(config: BridgeConfig, output_path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save
        output_path: Path to output YAML file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
