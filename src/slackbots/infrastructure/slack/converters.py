"""Convert Slack Web API payloads to domain entities."""

from datetime import datetime, timezone
from typing import Any

from slackbots.domain.entities import (
    Channel,
    Event,
    Group,
    Message,
    Property,
    Session,
    User,
    UserProfile,
)


def to_datetime(value: Any) -> datetime | None:
    """Convert a unix timestamp (int, float or numeric string) to UTC.

    Zero and missing values become None.
    """
    if value in (None, "", 0, "0"):
        return None
    return datetime.fromtimestamp(float(value), tz=timezone.utc)


def to_property(data: dict[str, Any] | None) -> Property | None:
    if not data:
        return None
    return Property(
        value=data.get("value", ""),
        creator=data.get("creator", ""),
        last_set=to_datetime(data.get("last_set")),
    )


def to_event(data: dict[str, Any]) -> Event:
    """Convert an event payload, returning a Message for message events."""
    if data.get("type") == "message":
        return to_message(data)
    return Event(
        type=data.get("type", ""),
        channel=_channel_id(data.get("channel")),
        user=_user_id(data.get("user")),
        ts=data.get("ts") or data.get("event_ts"),
    )


def to_message(data: dict[str, Any], channel: str | None = None) -> Message:
    """Convert a message payload.

    Args:
        data: Slack message object.
        channel: Channel ID to use when the payload does not carry one
            (chat.postMessage echoes omit it).
    """
    return Message(
        type=data.get("type", "message"),
        channel=_channel_id(data.get("channel")) or channel,
        user=_user_id(data.get("user")) or data.get("bot_id"),
        ts=data.get("ts"),
        subtype=data.get("subtype"),
        text=data.get("text", ""),
    )


def _channel_id(value: Any) -> str | None:
    # channel_created and friends carry the whole channel object
    if isinstance(value, dict):
        return value.get("id")
    return value


def _user_id(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("id")
    return value


def _latest(data: dict[str, Any]) -> Message | None:
    latest = data.get("latest")
    if not isinstance(latest, dict):
        return None
    return to_message(latest, channel=data.get("id"))


def to_channel(data: dict[str, Any]) -> Channel:
    return Channel(
        id=data["id"],
        name=data.get("name", ""),
        created=to_datetime(data.get("created")),
        creator=data.get("creator", ""),
        is_archived=data.get("is_archived", False),
        is_general=data.get("is_general", False),
        is_member=data.get("is_member", False),
        members=tuple(data.get("members", ())),
        topic=to_property(data.get("topic")),
        purpose=to_property(data.get("purpose")),
        last_read=data.get("last_read"),
        latest=_latest(data),
        unread_count=data.get("unread_count", 0),
        unread_count_display=data.get("unread_count_display", 0),
    )


def to_group(data: dict[str, Any]) -> Group:
    return Group(
        id=data["id"],
        name=data.get("name", ""),
        created=to_datetime(data.get("created")),
        creator=data.get("creator", ""),
        is_archived=data.get("is_archived", False),
        members=tuple(data.get("members", ())),
        topic=to_property(data.get("topic")),
        purpose=to_property(data.get("purpose")),
        last_read=data.get("last_read"),
        latest=_latest(data),
        unread_count=data.get("unread_count", 0),
        unread_count_display=data.get("unread_count_display", 0),
    )


def to_user_profile(data: dict[str, Any] | None) -> UserProfile:
    data = data or {}
    return UserProfile(
        first_name=data.get("first_name"),
        last_name=data.get("last_name"),
        real_name=data.get("real_name"),
        email=data.get("email"),
        skype=data.get("skype"),
        phone=data.get("phone"),
        image_24=data.get("image_24"),
        image_32=data.get("image_32"),
        image_48=data.get("image_48"),
        image_72=data.get("image_72"),
        image_192=data.get("image_192"),
    )


def to_user(data: dict[str, Any]) -> User:
    return User(
        id=data["id"],
        name=data.get("name", ""),
        deleted=data.get("deleted", False),
        color=data.get("color", ""),
        profile=to_user_profile(data.get("profile")),
        is_admin=data.get("is_admin", False),
        is_owner=data.get("is_owner", False),
        is_primary_owner=data.get("is_primary_owner", False),
        is_restricted=data.get("is_restricted", False),
        is_ultra_restricted=data.get("is_ultra_restricted", False),
        is_bot=data.get("is_bot", False),
        has_2fa=data.get("has_2fa", False),
        two_factor_type=data.get("two_factor_type"),
        has_files=data.get("has_files", False),
    )


def to_session(data: dict[str, Any]) -> Session:
    return Session(
        user_id=data.get("user_id", ""),
        user=data.get("user", ""),
        team_id=data.get("team_id", ""),
        team=data.get("team", ""),
        url=data.get("url", ""),
    )
