"""Resolved message destinations."""

from dataclasses import dataclass
from enum import Enum


class Namespace(Enum):
    """Independent id/name spaces on the platform."""

    CHANNEL = "channel"
    GROUP = "group"
    USER = "user"


@dataclass(frozen=True)
class Destination:
    """A name resolved within one namespace.

    Attributes:
        namespace: Namespace the name was resolved in.
        name: The name as given.
        id: Entity ID (channel, group or user ID).
        channel_id: Conversation to post into. Equal to ``id`` for channels
            and groups; the direct-message channel ID for users.
    """

    namespace: Namespace
    name: str
    id: str
    channel_id: str

    @classmethod
    def channel(cls, name: str, channel_id: str) -> "Destination":
        return cls(Namespace.CHANNEL, name, channel_id, channel_id)

    @classmethod
    def group(cls, name: str, group_id: str) -> "Destination":
        return cls(Namespace.GROUP, name, group_id, group_id)

    @classmethod
    def user(cls, name: str, user_id: str, dm_channel_id: str) -> "Destination":
        return cls(Namespace.USER, name, user_id, dm_channel_id)
