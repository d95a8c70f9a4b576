"""Shared fixtures and Slack payload builders."""

from collections.abc import Callable
from typing import Any

import pytest

from slackbots.config import SlackConfig


def channel_payload(
    id: str = "C123",
    name: str = "general",
    is_archived: bool = False,
    **extra: Any,
) -> dict[str, Any]:
    """Create a conversations.list channel object."""
    data: dict[str, Any] = {
        "id": id,
        "name": name,
        "is_channel": True,
        "created": 1700000000,
        "creator": "U001",
        "is_archived": is_archived,
        "is_general": name == "general",
        "is_member": True,
        "topic": {"value": "", "creator": "", "last_set": 0},
        "purpose": {"value": "", "creator": "", "last_set": 0},
    }
    data.update(extra)
    return data


def group_payload(
    id: str = "G123",
    name: str = "secret",
    is_archived: bool = False,
    **extra: Any,
) -> dict[str, Any]:
    """Create a conversations.list private channel object."""
    data: dict[str, Any] = {
        "id": id,
        "name": name,
        "is_group": True,
        "is_private": True,
        "created": 1700000000,
        "creator": "U001",
        "is_archived": is_archived,
    }
    data.update(extra)
    return data


def user_payload(
    id: str = "U123",
    name: str = "alice",
    deleted: bool = False,
    **extra: Any,
) -> dict[str, Any]:
    """Create a users.list member object."""
    data: dict[str, Any] = {
        "id": id,
        "name": name,
        "deleted": deleted,
        "color": "9f69e7",
        "profile": {"real_name": name.title(), "image_24": "https://a/24.png"},
        "is_admin": False,
        "is_bot": False,
    }
    data.update(extra)
    return data


@pytest.fixture
def slack_config() -> SlackConfig:
    """Create test Slack settings."""
    return SlackConfig(token="xoxb-test", name="testbot", app_token="xapp-test")


@pytest.fixture
def make_channel() -> Callable[..., dict[str, Any]]:
    return channel_payload


@pytest.fixture
def make_group() -> Callable[..., dict[str, Any]]:
    return group_payload


@pytest.fixture
def make_user() -> Callable[..., dict[str, Any]]:
    return user_payload
