"""Configuration."""

from slackbots.config.loader import (
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    expand_env_vars,
    load_config,
)
from slackbots.config.models import CacheConfig, Config, LoggingConfig, SlackConfig

__all__ = [
    "CacheConfig",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LoggingConfig",
    "SlackConfig",
    "expand_env_vars",
    "load_config",
]
