"""Slack Web API client factory."""

from slack_sdk.web.async_client import AsyncWebClient

from slackbots.config import SlackConfig


def create_web_client(config: SlackConfig) -> AsyncWebClient:
    """Create a Slack AsyncWebClient.

    Args:
        config: Slack connection settings.

    Returns:
        AsyncWebClient authenticated with the bot token.
    """
    return AsyncWebClient(token=config.token, timeout=config.request_timeout)
