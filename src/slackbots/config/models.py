"""Configuration dataclasses."""

from dataclasses import dataclass, field


@dataclass
class SlackConfig:
    """Slack connection settings.

    Attributes:
        token: Bot token (xoxb-...).
        name: Bot display name, sent as the default username on posts.
        app_token: App-level token (xapp-...) required for Socket Mode.
        request_timeout: Per-request timeout in seconds for Web API calls.
    """

    token: str
    name: str
    app_token: str | None = None
    request_timeout: float = 30.0


@dataclass
class CacheConfig:
    """Lookup cache settings."""

    enabled: bool = True
    ttl_seconds: float | None = 300.0


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """Application settings."""

    slack: SlackConfig
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig | None = None
