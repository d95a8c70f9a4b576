"""YAML config loading with environment variable expansion."""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from slackbots.config.models import CacheConfig, Config, LoggingConfig, SlackConfig


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """A configuration value is missing or invalid."""


class EnvironmentVariableError(ConfigError):
    """A referenced environment variable is not set."""


# ${VAR_NAME}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def expand_env_vars(value: str) -> str:
    """Replace every ${VAR_NAME} in a string with the variable's value.

    Args:
        value: String to expand.

    Returns:
        The expanded string.

    Raises:
        EnvironmentVariableError: If a referenced variable is not set.
    """
    if not value:
        return value

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise EnvironmentVariableError(
                f"Environment variable '{var_name}' is not set"
            )
        return env_value

    return ENV_VAR_PATTERN.sub(replace_var, value)


def _expand_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {key: _expand_recursive(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_recursive(item) for item in data]
    elif isinstance(data, str):
        return expand_env_vars(data)
    else:
        return data


def _validate_required_field(data: dict[str, Any], field: str, parent: str = "") -> Any:
    """Return a required field, raising if it is absent.

    Args:
        data: Mapping to look in.
        field: Field name.
        parent: Parent path, used in the error message.

    Returns:
        The field value.

    Raises:
        ConfigValidationError: If the field is missing or null.
    """
    if field not in data or data[field] is None:
        full_path = f"{parent}.{field}" if parent else field
        raise ConfigValidationError(f"Required field '{full_path}' is missing")
    return data[field]


def _parse_positive_float(value: Any, path: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"'{path}' must be a number") from e
    if number <= 0:
        raise ConfigValidationError(f"'{path}' must be positive")
    return number


def load_config(path: str | Path) -> Config:
    """Load the configuration file.

    Args:
        path: Path to config.yaml.

    Returns:
        Config object.

    Raises:
        FileNotFoundError: The file does not exist.
        ConfigValidationError: A required field is missing or invalid.
        EnvironmentVariableError: A referenced variable is not set.
        yaml.YAMLError: The file is not valid YAML.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f) or {}

    data = _expand_recursive(raw_data)

    slack_data = _validate_required_field(data, "slack")
    slack = SlackConfig(
        token=_validate_required_field(slack_data, "token", "slack"),
        name=_validate_required_field(slack_data, "name", "slack"),
        app_token=slack_data.get("app_token") or None,
        request_timeout=_parse_positive_float(
            slack_data.get("request_timeout", 30.0), "slack.request_timeout"
        ),
    )

    cache = CacheConfig()
    cache_data = data.get("cache")
    if cache_data:
        ttl = cache_data.get("ttl_seconds", cache.ttl_seconds)
        cache = CacheConfig(
            enabled=bool(cache_data.get("enabled", True)),
            ttl_seconds=(
                None if ttl is None else _parse_positive_float(ttl, "cache.ttl_seconds")
            ),
        )

    logging_config: LoggingConfig | None = None
    logging_data = data.get("logging")
    if logging_data:
        logging_config = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            format=logging_data.get(
                "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            ),
            loggers=logging_data.get("loggers"),
        )

    return Config(slack=slack, cache=cache, logging=logging_config)
