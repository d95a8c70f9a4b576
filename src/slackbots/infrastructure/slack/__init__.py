"""Slack integration."""

from slackbots.infrastructure.slack.client import create_web_client
from slackbots.infrastructure.slack.realtime import SlackSocketModeTransport
from slackbots.infrastructure.slack.web_api import SlackDirectoryApi

__all__ = [
    "SlackDirectoryApi",
    "SlackSocketModeTransport",
    "create_web_client",
]
