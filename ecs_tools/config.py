"""Configuration loading for ECS Tools."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ecs_tools.errors import ECSToolsError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class ConfigError(ECSToolsError):
    """Raised when configuration is invalid or cannot be loaded."""


@dataclass
class AWSConfig:
    """AWS connection settings."""

    region: str | None = None
    profile: str | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


@dataclass
class Config:
    """Application configuration."""

    aws: AWSConfig = field(default_factory=AWSConfig)

    def with_overrides(
        self, region: str | None = None, profile: str | None = None
    ) -> "Config":
        """Return a copy with command-line overrides applied.

        Args:
            region: Region given on the command line, if any
            profile: Profile given on the command line, if any

        Returns:
            New Config; unset overrides keep the file values
        """
        return Config(
            aws=AWSConfig(
                region=region or self.aws.region,
                profile=profile or self.aws.profile,
                max_attempts=self.aws.max_attempts,
            )
        )


def get_default_config_path() -> Path:
    """Get the default configuration file path.

    Looks for config.toml in the current directory first,
    then falls back to ~/.config/ecs-tools/config.toml.

    Returns:
        Path to the configuration file
    """
    local_config = Path("./config.toml")
    if local_config.exists():
        return local_config

    return Path.home() / ".config" / "ecs-tools" / "config.toml"


def _optional_str(section: dict[str, Any], key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' in [aws] section must be a non-empty string")
    return value


def _parse_aws_section(data: dict[str, Any]) -> AWSConfig:
    section = data.get("aws", {})
    if not isinstance(section, dict):
        raise ConfigError("[aws] must be a table")

    max_attempts = section.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise ConfigError("'max_attempts' in [aws] section must be an integer")
    if max_attempts < 1:
        raise ConfigError("'max_attempts' in [aws] section must be at least 1")

    return AWSConfig(
        region=_optional_str(section, "region"),
        profile=_optional_str(section, "profile"),
        max_attempts=max_attempts,
    )


def load_config(config_path: Path | None = None, required: bool = False) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to config file. If None, uses the default path.
        required: If True, a missing file is an error. Otherwise defaults
            are returned when the file does not exist.

    Returns:
        Parsed configuration

    Raises:
        ConfigError: If configuration is invalid or a required file is missing
    """
    if config_path is None:
        config_path = get_default_config_path()

    if not config_path.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_path}")
        logger.debug(f"No configuration file at {config_path}, using defaults")
        return Config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in configuration file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    logger.debug(f"Loaded configuration from {config_path}")
    return Config(aws=_parse_aws_section(data))
